"""
GrammarFix Engine Configuration
===============================
Centralized configuration for the correction engine and its collaborators.

Configuration can be set via:
1. Environment variables (GRAMMARFIX_SPELLING_FUZZY=true)
2. Config file (grammarfix_config.json)
3. Direct API calls (config.set('spelling.fuzzy_fallback', True))

All settings have defaults that work offline; the AI collaborator stays
inactive until an API key is provided.
"""

import os
import json
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, asdict

from config_logging import get_logger

__version__ = "1.0.0"

logger = get_logger('grammarfix_config')

# Default configuration path
CONFIG_FILE = Path(__file__).parent.parent / "grammarfix_config.json"

PLACEHOLDER_API_KEY = "YOUR_GROQ_API_KEY_HERE"


@dataclass
class SpellingConfig:
    """Spelling rule configuration."""
    fuzzy_fallback: bool = False   # edit-distance suggestions for unknown words
    max_edit_distance: int = 2
    max_length_difference: int = 2
    min_word_length: int = 4


@dataclass
class RulesConfig:
    """Rule pipeline configuration."""
    disabled_rules: list = field(default_factory=list)  # Rule ids, e.g. "GF013"


@dataclass
class AIConfig:
    """External AI correction service configuration."""
    enabled: bool = True
    url: str = "https://api.groq.com/openai/v1/chat/completions"
    model: str = "llama-3.1-8b-instant"
    api_key: str = field(default_factory=lambda: (
        os.environ.get('GRAMMARFIX_AI_API_KEY') or os.environ.get('GROQ_API_KEY', '')
    ))
    temperature: float = 0.3
    max_tokens: int = 1500
    timeout_seconds: float = 30.0


@dataclass
class ReadabilityConfig:
    """Readability scoring configuration."""
    enabled: bool = True


@dataclass
class GrammarConfig:
    """Master engine configuration."""
    spelling: SpellingConfig = field(default_factory=SpellingConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    ai: AIConfig = field(default_factory=AIConfig)
    readability: ReadabilityConfig = field(default_factory=ReadabilityConfig)


# Global configuration instance
_config: Optional[GrammarConfig] = None


def get_config() -> GrammarConfig:
    """Get the global engine configuration."""
    global _config
    if _config is None:
        _config = _load_config()
    return _config


def _load_config(path: Optional[Path] = None) -> GrammarConfig:
    """Load configuration from file and environment."""
    config = GrammarConfig()
    path = path or CONFIG_FILE

    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
            _apply_dict_to_config(config, file_config)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Could not load config file: {e}", config_path=str(path))

    _apply_env_to_config(config)

    return config


def _apply_dict_to_config(config: GrammarConfig, data: Dict[str, Any]):
    """Apply dictionary values to config object."""
    for section_name, section_data in data.items():
        if hasattr(config, section_name) and isinstance(section_data, dict):
            section = getattr(config, section_name)
            for key, value in section_data.items():
                if hasattr(section, key):
                    setattr(section, key, value)


def _apply_env_to_config(config: GrammarConfig):
    """Apply environment variables to config."""
    env_mappings = {
        'GRAMMARFIX_SPELLING_FUZZY': ('spelling', 'fuzzy_fallback', _parse_bool),
        'GRAMMARFIX_SPELLING_MAX_EDIT_DISTANCE': ('spelling', 'max_edit_distance', int),
        'GRAMMARFIX_SPELLING_MIN_WORD_LENGTH': ('spelling', 'min_word_length', int),
        'GRAMMARFIX_DISABLED_RULES': ('rules', 'disabled_rules', _parse_list),
        'GRAMMARFIX_AI_ENABLED': ('ai', 'enabled', _parse_bool),
        'GRAMMARFIX_AI_URL': ('ai', 'url', str),
        'GRAMMARFIX_AI_MODEL': ('ai', 'model', str),
        'GRAMMARFIX_AI_TIMEOUT': ('ai', 'timeout_seconds', float),
        'GRAMMARFIX_READABILITY_ENABLED': ('readability', 'enabled', _parse_bool),
    }

    for env_var, (section, key, converter) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            try:
                section_obj = getattr(config, section)
                setattr(section_obj, key, converter(value))
            except (ValueError, AttributeError) as e:
                logger.warning(f"Invalid env var {env_var}={value}: {e}")


def _parse_bool(value: str) -> bool:
    """Parse boolean from string."""
    return value.lower() in ('true', '1', 'yes', 'on')


def _parse_list(value: str) -> list:
    return [item.strip() for item in value.split(',') if item.strip()]


def get(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by dot-notation key.

    Example: get('spelling.max_edit_distance') -> 2
    """
    config = get_config()
    parts = key.split('.')

    obj = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            return default

    return obj


def set(key: str, value: Any):
    """
    Set a configuration value by dot-notation key.

    Example: set('spelling.fuzzy_fallback', True)
    """
    config = get_config()
    parts = key.split('.')

    if len(parts) < 2:
        raise ValueError(f"Key must be in format 'section.key': {key}")

    section_name = parts[0]
    attr_name = parts[1]

    if hasattr(config, section_name):
        section = getattr(config, section_name)
        if hasattr(section, attr_name):
            setattr(section, attr_name, value)
        else:
            raise ValueError(f"Unknown config key: {attr_name}")
    else:
        raise ValueError(f"Unknown config section: {section_name}")


def save_config(path: Optional[Path] = None):
    """Save current configuration to file. The API key is never written."""
    config = get_config()
    path = path or CONFIG_FILE

    data = asdict(config)
    data['ai'].pop('api_key', None)

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)


def reset_config():
    """Reset configuration to defaults."""
    global _config
    _config = GrammarConfig()
