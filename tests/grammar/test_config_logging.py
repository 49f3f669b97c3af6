"""
Tests for Application Configuration, Logging and Errors
=======================================================
"""

import json
import logging

import pytest

import config_logging
from config_logging import (
    AppConfig, StructuredLogger, JsonFormatter,
    GrammarFixError, ValidationError, ProcessingError, AICorrectionError,
)


@pytest.fixture(autouse=True)
def fresh_config():
    config_logging.reset_config()
    yield
    config_logging.reset_config()


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv('GRAMMARFIX_ENV', raising=False)
        config = AppConfig()
        assert config.host == '127.0.0.1'
        assert config.port == 5050
        assert config.debug is False
        assert config.validate() == (True, [])

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('GRAMMARFIX_PORT', '8080')
        monkeypatch.setenv('GRAMMARFIX_DEBUG', 'true')
        monkeypatch.delenv('GRAMMARFIX_ENV', raising=False)

        config = config_logging.get_config()
        assert config.port == 8080
        assert config.debug is True

    def test_production_forces_safe_settings(self, monkeypatch):
        monkeypatch.setenv('GRAMMARFIX_ENV', 'production')
        config = AppConfig(debug=True)
        assert config.debug is False
        assert config.log_level == 'WARNING'

    def test_validate_errors(self):
        is_valid, errors = AppConfig(log_format='xml', log_level='LOUD').validate()
        assert not is_valid
        assert len(errors) == 2


class TestStructuredLogger:
    """Tests for StructuredLogger and JsonFormatter."""

    def test_correlation_id(self):
        StructuredLogger.set_correlation_id('abc123')
        assert StructuredLogger.get_correlation_id() == 'abc123'

        new_id = StructuredLogger.new_correlation_id()
        assert len(new_id) == 12
        assert StructuredLogger.get_correlation_id() == new_id

    def test_log_operation_reraises(self):
        logger = StructuredLogger('grammarfix_test', AppConfig(log_to_console=False))
        with pytest.raises(ValueError):
            with logger.log_operation('failing_step'):
                raise ValueError("bad input")

    def test_json_formatter(self):
        record = logging.LogRecord('grammarfix_test', logging.INFO, __file__, 1,
                                   'plain message', None, None)
        record.rule = 'GF001'

        data = json.loads(JsonFormatter().format(record))
        assert data['message'] == 'plain message'
        assert data['level'] == 'INFO'
        assert data['rule'] == 'GF001'

    def test_json_formatter_passes_rendered_records(self):
        rendered = json.dumps({'message': 'already json'})
        record = logging.LogRecord('grammarfix_test', logging.INFO, __file__, 1,
                                   rendered, None, None)
        assert JsonFormatter().format(record) == rendered


class TestErrors:
    """Tests for the error taxonomy."""

    def test_base_error_dict(self):
        error = GrammarFixError("failed", code='X', details={'a': 1})
        assert error.to_dict() == {
            'success': False,
            'error': {'code': 'X', 'message': 'failed', 'details': {'a': 1}},
        }

    @pytest.mark.parametrize("error,code,status", [
        (ValidationError("empty", field='text'), 'VALIDATION_ERROR', 400),
        (ProcessingError("broken", stage='GF005'), 'PROCESSING_ERROR', 500),
        (AICorrectionError("down", http_status=503), 'AI_UNAVAILABLE', 502),
    ])
    def test_subclasses(self, error, code, status):
        assert error.code == code
        assert error.status_code == status
        assert isinstance(error, GrammarFixError)

    def test_details(self):
        assert ValidationError("empty", field='text').details == {'field': 'text'}
        assert AICorrectionError("down", http_status=401).details['http_status'] == 401
