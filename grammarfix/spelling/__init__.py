"""
Spelling Support for GrammarFix
===============================
Edit-distance matching against the lexicon's candidate pool.
"""

import threading
import weakref

from .similarity import SimilarityMatcher, edit_distance

__version__ = "1.0.0"

__all__ = ['SimilarityMatcher', 'edit_distance', 'get_matcher']

# Lexicon -> {(max_edit_distance, max_length_difference): matcher}; entries
# go away with their lexicon
_matchers = weakref.WeakKeyDictionary()
_lock = threading.Lock()


def get_matcher(lexicon, max_edit_distance: int = 2,
                max_length_difference: int = 2) -> SimilarityMatcher:
    """Get a SimilarityMatcher for a lexicon (cached per lexicon and limits)."""
    key = (max_edit_distance, max_length_difference)
    with _lock:
        matchers = _matchers.setdefault(lexicon, {})
        matcher = matchers.get(key)
        if matcher is None:
            matcher = SimilarityMatcher(lexicon.candidate_pool, max_edit_distance,
                                        max_length_difference)
            matchers[key] = matcher
    return matcher
