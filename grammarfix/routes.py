"""
GrammarFix Flask Routes
=======================
API endpoints for grammar checking.

- POST /api/grammar/check    rules + AI (when configured) with summary
- POST /api/grammar/correct  rule-based correction only
- GET  /api/grammar/status   rules, lexicon and AI configuration
"""

import time
from functools import wraps
from flask import Blueprint, request, jsonify, g

from config_logging import get_logger, ValidationError, ProcessingError, StructuredLogger

from .service import get_service

logger = get_logger('grammarfix_routes')

# Create blueprint
grammar_blueprint = Blueprint('grammarfix', __name__, url_prefix='/api/grammar')

SLOW_CALL_SECONDS = 5.0


def _error_response(code: str, message: str, status: int, details=None):
    error = {
        'code': code,
        'message': message,
        'correlation_id': getattr(g, 'correlation_id', 'unknown'),
    }
    if details:
        error['details'] = details
    return jsonify({'success': False, 'error': error}), status


# =============================================================================
# STANDARDIZED ERROR HANDLING DECORATOR
# =============================================================================

def handle_grammar_errors(f):
    """
    Decorator for standardized API error handling in grammar routes.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        start_time = time.time()
        try:
            result = f(*args, **kwargs)

            elapsed = time.time() - start_time
            if elapsed > SLOW_CALL_SECONDS:
                logger.warning(f"Slow grammar API call: {f.__name__} took {elapsed:.1f}s")

            return result

        except ValidationError as e:
            logger.warning(f"Validation error in {f.__name__}: {e}")
            return _error_response(e.code, e.message, e.status_code, e.details)
        except ProcessingError as e:
            logger.error(f"Processing error in {f.__name__}: {e}")
            return _error_response(e.code, e.message, e.status_code)
        except Exception as e:
            logger.exception(f"Unexpected error in {f.__name__}: {e}")
            return _error_response('INTERNAL_ERROR', 'An unexpected error occurred', 500)

    return decorated


@grammar_blueprint.before_request
def assign_correlation_id():
    """Tag every request (and its log lines) with a correlation id."""
    incoming = request.headers.get('X-Correlation-ID')
    if incoming:
        StructuredLogger.set_correlation_id(incoming)
        g.correlation_id = incoming
    else:
        g.correlation_id = StructuredLogger.new_correlation_id()


@grammar_blueprint.after_request
def echo_correlation_id(response):
    response.headers['X-Correlation-ID'] = getattr(g, 'correlation_id', '')
    return response


def _request_text() -> str:
    data = request.get_json(silent=True)
    if data is None:
        raise ValidationError("Request body must be JSON", field='body')
    return data.get('text') if isinstance(data, dict) else None


# =============================================================================
# ROUTES
# =============================================================================

@grammar_blueprint.route('/check', methods=['POST'])
@handle_grammar_errors
def check_text():
    """Rule-based and AI correction with the analysis summary."""
    data = request.get_json(silent=True) or {}
    use_ai = data.get('use_ai', True) if isinstance(data, dict) else True
    report = get_service().check(_request_text(), use_ai=bool(use_ai))
    return jsonify({'success': True, 'data': report.to_dict()})


@grammar_blueprint.route('/correct', methods=['POST'])
@handle_grammar_errors
def correct_text():
    """Rule-based correction only."""
    result = get_service().correct_text(_request_text())
    return jsonify({'success': True, 'data': result.to_dict()})


@grammar_blueprint.route('/status', methods=['GET'])
@handle_grammar_errors
def status():
    """Engine status for the UI."""
    return jsonify({'success': True, 'data': get_service().get_status()})
