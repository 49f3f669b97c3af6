#!/usr/bin/env python3
"""
GrammarFix Configuration & Logging Module
=========================================
Centralized application configuration, structured logging, and the
error taxonomy shared by the engine, the service layer and the web API.
"""

import os
import sys
import json
import logging
import uuid
import time
from datetime import datetime, timezone
from typing import Optional, Dict, Any
from pathlib import Path
from dataclasses import dataclass, field
from contextlib import contextmanager
import threading

# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5050
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024  # 5MB max per log file
LOG_BACKUP_COUNT = 5                # Number of log backup files to keep

__version__ = "1.0.0"
VERSION = __version__
APP_NAME = "GrammarFix"


def _parse_bool(value: str) -> bool:
    """Parse boolean from an environment string."""
    return value.lower() in ('true', '1', 'yes', 'on')


# =============================================================================
# ENVIRONMENT CONFIGURATION
# =============================================================================

@dataclass
class AppConfig:
    """Application configuration with secure defaults."""

    # Server settings
    host: str = DEFAULT_HOST  # Localhost only by default
    port: int = DEFAULT_PORT
    debug: bool = False

    # Paths
    base_dir: Path = field(default_factory=lambda: Path(__file__).parent)
    log_dir: Path = field(default_factory=lambda: Path(__file__).parent / 'logs')

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # Options: json, text
    log_to_file: bool = False
    log_to_console: bool = True

    def __post_init__(self):
        """Validate configuration."""
        if self.log_to_file:
            self.log_dir.mkdir(exist_ok=True)

        if os.environ.get('GRAMMARFIX_ENV', 'development').lower() == 'production':
            self.debug = False
            self.log_level = "WARNING"

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Load configuration from environment variables."""
        return cls(
            host=os.environ.get('GRAMMARFIX_HOST', DEFAULT_HOST),
            port=int(os.environ.get('GRAMMARFIX_PORT', str(DEFAULT_PORT))),
            debug=_parse_bool(os.environ.get('GRAMMARFIX_DEBUG', 'false')),
            log_level=os.environ.get('GRAMMARFIX_LOG_LEVEL', 'INFO'),
            log_format=os.environ.get('GRAMMARFIX_LOG_FORMAT', 'json'),
            log_to_file=_parse_bool(os.environ.get('GRAMMARFIX_LOG_TO_FILE', 'false')),
        )

    def validate(self) -> tuple:
        """Validate configuration and return (is_valid, errors)."""
        errors = []

        if self.debug and os.environ.get('GRAMMARFIX_ENV') == 'production':
            errors.append("Debug mode cannot be enabled in production")

        if self.log_format not in ('json', 'text'):
            errors.append(f"Invalid log_format: {self.log_format}. Must be 'json' or 'text'")

        if not isinstance(getattr(logging, self.log_level.upper(), None), int):
            errors.append(f"Invalid log_level: {self.log_level}")

        return (len(errors) == 0, errors)


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get or create the global configuration."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config():
    """Reset the global configuration (for testing)."""
    global _config
    _config = None


# =============================================================================
# STRUCTURED LOGGING
# =============================================================================

class StructuredLogger:
    """Thread-safe structured JSON logger with correlation IDs."""

    _local = threading.local()

    def __init__(self, name: str, config: Optional[AppConfig] = None):
        self.name = name
        self.config = config or get_config()
        self._setup_logger()

    def _setup_logger(self):
        """Configure the underlying Python logger."""
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(getattr(logging, self.config.log_level.upper(), logging.INFO))
        self.logger.handlers.clear()

        if self.config.log_format == 'json':
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
            )

        if self.config.log_to_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if self.config.log_to_file:
            from logging.handlers import RotatingFileHandler
            log_file = self.config.log_dir / f"{self.name.lower()}.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    @classmethod
    def set_correlation_id(cls, correlation_id: str):
        """Set correlation ID for current thread."""
        cls._local.correlation_id = correlation_id

    @classmethod
    def get_correlation_id(cls) -> str:
        """Get correlation ID for current thread."""
        return getattr(cls._local, 'correlation_id', None) or str(uuid.uuid4())[:8]

    @classmethod
    def new_correlation_id(cls) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())[:12]
        cls.set_correlation_id(correlation_id)
        return correlation_id

    def _build_log_record(self, level: str, message: str, **kwargs) -> Dict[str, Any]:
        """Build a structured log record."""
        return {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': level,
            'logger': self.name,
            'correlation_id': self.get_correlation_id(),
            'message': message,
            **kwargs
        }

    def _format(self, level: str, message: str, **kwargs) -> str:
        if self.config.log_format != 'json':
            return message
        return json.dumps(self._build_log_record(level, message, **kwargs), default=str)

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format('DEBUG', message, **kwargs), extra=kwargs)

    def info(self, message: str, **kwargs):
        """Log info message."""
        self.logger.info(self._format('INFO', message, **kwargs), extra=kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self.logger.warning(self._format('WARNING', message, **kwargs), extra=kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs):
        """Log error message with optional exception info."""
        if exc_info:
            import traceback
            kwargs['traceback'] = traceback.format_exc()
        self.logger.error(self._format('ERROR', message, **kwargs), exc_info=exc_info, extra=kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception with full traceback."""
        self.error(message, exc_info=True, **kwargs)

    @contextmanager
    def log_operation(self, operation: str, **context):
        """Context manager for logging operation start/end with timing."""
        start_time = time.time()
        self.debug(f"{operation} started", operation=operation, status='started', **context)
        try:
            yield
            duration_ms = (time.time() - start_time) * 1000
            self.debug(f"{operation} completed", operation=operation, status='completed',
                       duration_ms=round(duration_ms, 2), **context)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self.error(f"{operation} failed: {e}", operation=operation, status='failed',
                       duration_ms=round(duration_ms, 2), exc_info=True, **context)
            raise


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    RESERVED = frozenset((
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'stack_info', 'thread', 'threadName', 'exc_info', 'exc_text',
        'message', 'taskName',
    ))

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if message.startswith('{'):
            # Already rendered by StructuredLogger
            return message

        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': message,
        }

        if record.exc_info:
            log_data['traceback'] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self.RESERVED:
                log_data[key] = value

        return json.dumps(log_data, default=str)


# Factory function for getting loggers
def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name, get_config())


# =============================================================================
# ERROR HANDLING
# =============================================================================

class GrammarFixError(Exception):
    """Base exception for GrammarFix."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR",
                 status_code: int = 500, details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API response dict."""
        return {
            'success': False,
            'error': {
                'code': self.code,
                'message': self.message,
                'details': self.details
            }
        }


class ValidationError(GrammarFixError):
    """Input validation error (e.g. empty text)."""
    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400,
                         details={'field': field, **kwargs})


class ProcessingError(GrammarFixError):
    """Unexpected failure while correcting text."""
    def __init__(self, message: str, stage: Optional[str] = None, **kwargs):
        super().__init__(message, code="PROCESSING_ERROR", status_code=500,
                         details={'stage': stage, **kwargs})


class AICorrectionError(GrammarFixError):
    """The AI correction service could not be reached or answered with an error."""
    def __init__(self, message: str, http_status: Optional[int] = None, **kwargs):
        super().__init__(message, code="AI_UNAVAILABLE", status_code=502,
                         details={'http_status': http_status, **kwargs})
