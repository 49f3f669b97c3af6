"""
AI Correction for GrammarFix
============================
Optional second opinion from a hosted language model.

Requires: pip install requests
"""

from .client import (
    AICorrectionClient, AICorrectionResult, AIError, AISuggestion,
    parse_model_content, safe_default,
)

__version__ = "1.0.0"

__all__ = [
    'AICorrectionClient', 'AICorrectionResult', 'AIError', 'AISuggestion',
    'parse_model_content', 'safe_default', 'get_client', 'get_status',
]

_client = None


def get_client() -> AICorrectionClient:
    """Get the shared AICorrectionClient (lazy loaded)."""
    global _client
    if _client is None:
        _client = AICorrectionClient()
    return _client


def get_status() -> dict:
    """Get AI integration status."""
    return get_client().get_status()
