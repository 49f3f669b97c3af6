"""
GrammarFix Grammar Correction Package
=====================================
Version: 1.0.0

Rule-based English grammar correction with an optional AI second opinion:
- Lexicon / ErrorTables: read-only word knowledge and correction tables
- Tokenizer: sentences and word/punctuation tokens
- Rules: fourteen ordered correction rules
- Pipeline: runs the rules and scores confidence
- AI: OpenAI-compatible correction client (Groq by default)
- Readability: Flesch-based reading level via textstat
- Service / routes: orchestration and the Flask API

Uses lazy loading - submodules only import when accessed.
"""

__version__ = "1.0.0"
__author__ = "GrammarFix"

_MODULES = {
    'lexicon': 'grammarfix.lexicon',
    'rules': 'grammarfix.rules',
    'spelling': 'grammarfix.spelling',
    'verbs': 'grammarfix.verbs',
    'readability': 'grammarfix.readability',
    'ai': 'grammarfix.ai',
    'pipeline': 'grammarfix.pipeline',
    'service': 'grammarfix.service',
}

_loaded_modules = {}


def __getattr__(name):
    """Lazy load submodules on first access."""
    if name in _MODULES:
        if name not in _loaded_modules:
            import importlib
            _loaded_modules[name] = importlib.import_module(_MODULES[name])
        return _loaded_modules[name]
    raise AttributeError(f"module 'grammarfix' has no attribute '{name}'")


def __dir__():
    """List available submodules."""
    return list(_MODULES.keys()) + ['config', 'base', 'tokenizer', 'correct', 'get_status']


def correct(text: str):
    """Correct text with the shared rule-based pipeline."""
    from .pipeline import get_pipeline
    return get_pipeline().correct(text)


def get_status() -> dict:
    """Version plus the status of the shared service."""
    from .service import get_service
    return {
        'version': __version__,
        **get_service().get_status(),
    }
