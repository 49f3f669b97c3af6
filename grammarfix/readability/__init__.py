"""
Readability for GrammarFix
==========================
Reading-level labels for corrected text.

Requires: pip install textstat
"""

__version__ = "1.0.0"

# Lazy imports
_scorer = None


def get_scorer():
    """Get the shared ReadabilityScorer instance (lazy loaded)."""
    global _scorer
    if _scorer is None:
        from .scoring import ReadabilityScorer
        _scorer = ReadabilityScorer()
    return _scorer


def get_status() -> dict:
    """Get readability integration status."""
    try:
        return get_scorer().get_status()
    except ImportError as e:
        return {
            'available': False,
            'error': f"textstat not installed: {e}",
        }
