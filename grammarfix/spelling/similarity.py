"""
Similarity Matcher
==================
Edit-distance nearest-neighbour lookup against the lexicon, used as the
spelling rule's fallback when no error-table entry matches.
"""

from typing import Iterable, Optional, Tuple

from config_logging import get_logger

__version__ = "1.0.0"

logger = get_logger('grammarfix_similarity')


def edit_distance(s1: str, s2: str) -> int:
    """Levenshtein distance (insert, delete and substitute each cost 1)."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


class SimilarityMatcher:
    """
    Finds the closest lexicon word to a misspelling.

    Only candidates whose length differs by at most ``max_length_difference``
    are scored. A candidate is kept when its distance is above zero, at most
    ``max_edit_distance`` and strictly smaller than every earlier candidate,
    so ties go to the first candidate in pool order.
    """

    def __init__(self, candidates: Iterable[str], max_edit_distance: int = 2,
                 max_length_difference: int = 2):
        self.candidates: Tuple[str, ...] = tuple(candidates)
        self.max_edit_distance = max_edit_distance
        self.max_length_difference = max_length_difference

    def best_match(self, word: str) -> Optional[str]:
        word = word.lower()
        best = None
        best_distance = self.max_edit_distance + 1

        for candidate in self.candidates:
            if abs(len(candidate) - len(word)) > self.max_length_difference:
                continue
            distance = edit_distance(word, candidate)
            if 0 < distance < best_distance:
                best = candidate
                best_distance = distance
                if distance == 1:
                    break

        if best:
            logger.debug("Similarity match", word=word, match=best, distance=best_distance)
        return best

    def suggestions(self, word: str, limit: int = 5) -> list:
        """All candidates within range, closest first (stable on ties)."""
        word = word.lower()
        scored = []
        for candidate in self.candidates:
            if abs(len(candidate) - len(word)) > self.max_length_difference:
                continue
            distance = edit_distance(word, candidate)
            if 0 < distance <= self.max_edit_distance:
                scored.append((distance, candidate))
        scored.sort(key=lambda item: item[0])
        return [candidate for _, candidate in scored[:limit]]
