"""
Verb Analysis for GrammarFix
============================
Tense detection used by the tense-consistency rule.
"""

from .tense import TenseAnalyzer, TenseAnalysis, TENSES

__version__ = "1.0.0"

__all__ = ['TenseAnalyzer', 'TenseAnalysis', 'TENSES', 'get_analyzer']

_analyzer = None


def get_analyzer() -> TenseAnalyzer:
    """Get the shared TenseAnalyzer for the default patterns (lazy loaded)."""
    global _analyzer
    if _analyzer is None:
        _analyzer = TenseAnalyzer()
    return _analyzer
