"""
Tense Analyzer
==============
Picks the dominant tense of a sentence from indicator words and auxiliaries.

Scoring per tense:
- +2 for every token containing any single-word indicator ("yesterday",
  "now"), and for every occurrence of a multi-word indicator ("last week")
  across consecutive tokens none of which has scored already
- +1 for every token equal to an auxiliary ("was", "will"); multi-word
  auxiliaries ("going to") are matched across consecutive tokens

The winner must have the strictly highest score and a score above 1.
"""

from typing import Dict, List, Optional, Sequence, Set
from dataclasses import dataclass, field

from ..lexicon.tables import GrammarPatterns

__version__ = "1.0.0"

TENSES = ('past', 'present', 'future')


@dataclass
class TenseAnalysis:
    """Scores behind a tense decision."""
    tense: Optional[str]
    scores: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {'tense': self.tense, 'scores': dict(self.scores)}


def _count_phrase(words: Sequence[str], phrase: List[str]) -> int:
    size = len(phrase)
    return sum(1 for i in range(len(words) - size + 1)
               if list(words[i:i + size]) == phrase)


def _claim_phrase(words: Sequence[str], phrase: List[str], scored: Set[int]) -> int:
    """Count occurrences of ``phrase`` over tokens that have not scored yet,
    marking the tokens of each counted occurrence as scored."""
    size = len(phrase)
    count = 0
    for i in range(len(words) - size + 1):
        span = range(i, i + size)
        if list(words[i:i + size]) == phrase and not scored.intersection(span):
            scored.update(span)
            count += 1
    return count


class TenseAnalyzer:
    """Scores tense cues in a sequence of cleaned words."""

    MINIMUM_SCORE = 2

    def __init__(self, patterns: Optional[GrammarPatterns] = None):
        self.patterns = patterns or GrammarPatterns()

    def analyze(self, words: Sequence[str]) -> TenseAnalysis:
        words = [w.lower() for w in words if w]
        scores = {}
        for tense in TENSES:
            indicators = self.patterns.tense_indicators.get(tense, ())
            singles = [i for i in indicators if ' ' not in i]
            scored = {index for index, w in enumerate(words)
                      if any(indicator in w for indicator in singles)}
            score = 2 * len(scored)
            for indicator in indicators:
                if ' ' in indicator:
                    score += 2 * _claim_phrase(words, indicator.split(), scored)
            for auxiliary in self.patterns.tense_auxiliaries.get(tense, ()):
                parts = auxiliary.split()
                if len(parts) == 1:
                    score += sum(1 for w in words if w == auxiliary)
                else:
                    score += _count_phrase(words, parts)
            scores[tense] = score

        best = max(scores.values()) if scores else 0
        leaders = [t for t, s in scores.items() if s == best]
        tense = leaders[0] if best >= self.MINIMUM_SCORE and len(leaders) == 1 else None
        return TenseAnalysis(tense=tense, scores=scores)

    def detect_tense(self, words: Sequence[str]) -> Optional[str]:
        """'past', 'present', 'future' or None when no tense dominates."""
        return self.analyze(words).tense
