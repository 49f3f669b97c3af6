"""
Lexicon and Error Tables
========================
Read-only knowledge the correction rules consult.

- Lexicon: verbs (with an inflected-form index), nouns, common words,
  adjectives and vowels
- ErrorTables: spelling, grammar-phrase, verb-form and contraction tables
- GrammarPatterns: word lists for the context-sensitive rules

The default instances are built once per process and shared.
"""

import threading

from .words import Lexicon, VerbEntry, IRREGULAR_PLURALS
from .tables import ErrorTables, GrammarPatterns

__version__ = "1.0.0"

__all__ = [
    'Lexicon', 'VerbEntry', 'ErrorTables', 'GrammarPatterns',
    'get_default_lexicon', 'get_default_tables', 'build_default_lexicon',
]

_default_lexicon = None
_default_tables = None
_lock = threading.Lock()


def build_default_lexicon() -> Lexicon:
    """Build a fresh Lexicon from the built-in word lists."""
    from .data import VERBS, NOUNS, COMMON_WORDS, ADJECTIVES, VOWELS
    return Lexicon(
        verbs=[VerbEntry(*row) for row in VERBS],
        nouns=NOUNS,
        common_words=COMMON_WORDS,
        adjectives=ADJECTIVES,
        vowels=VOWELS,
        irregular_plurals=IRREGULAR_PLURALS,
    )


def get_default_lexicon() -> Lexicon:
    """Get the shared default Lexicon (built on first use)."""
    global _default_lexicon
    if _default_lexicon is None:
        with _lock:
            if _default_lexicon is None:
                _default_lexicon = build_default_lexicon()
    return _default_lexicon


def get_default_tables() -> ErrorTables:
    """Get the shared default ErrorTables."""
    global _default_tables
    if _default_tables is None:
        with _lock:
            if _default_tables is None:
                _default_tables = ErrorTables()
    return _default_tables
