"""
Readability Scoring
===================
Flesch Reading Ease via textstat, mapped to a seven-step difficulty label
for display next to the corrected text.

Requires: pip install textstat
"""

from typing import Dict, Any, List, Tuple
from dataclasses import dataclass

import textstat

from config_logging import get_logger

__version__ = "1.0.0"

logger = get_logger('grammarfix_readability')

# (minimum Flesch score, label), checked top to bottom
DIFFICULTY_THRESHOLDS: List[Tuple[float, str]] = [
    (90, "Very Easy"),
    (80, "Easy"),
    (70, "Fairly Easy"),
    (60, "Standard"),
    (50, "Fairly Difficult"),
    (30, "Difficult"),
]
HARDEST_LABEL = "Very Difficult"
UNKNOWN_LABEL = "Unknown"


def difficulty_label(score: float) -> str:
    """Map a Flesch Reading Ease score to its difficulty label."""
    for minimum, label in DIFFICULTY_THRESHOLDS:
        if score >= minimum:
            return label
    return HARDEST_LABEL


@dataclass
class ReadabilityReport:
    """Readability of one text."""
    score: float = 0.0
    label: str = UNKNOWN_LABEL
    word_count: int = 0
    sentence_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'label': self.label,
            'word_count': self.word_count,
            'sentence_count': self.sentence_count,
        }


class ReadabilityScorer:
    """Scores text with textstat's Flesch Reading Ease."""

    def analyze(self, text: str) -> ReadabilityReport:
        if not text or not text.strip():
            return ReadabilityReport()

        score = textstat.flesch_reading_ease(text)
        report = ReadabilityReport(
            score=round(score, 1),
            label=difficulty_label(score),
            word_count=textstat.lexicon_count(text, removepunct=True),
            sentence_count=textstat.sentence_count(text),
        )
        logger.debug("Readability scored", score=report.score, label=report.label)
        return report

    def reading_level(self, text: str) -> str:
        """Difficulty label only ('Unknown' for blank text)."""
        return self.analyze(text).label

    def get_status(self) -> Dict[str, Any]:
        return {
            'available': True,
            'metric': 'flesch_reading_ease',
            'textstat_version': getattr(textstat, '__version__', 'unknown'),
        }
