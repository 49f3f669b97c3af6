"""
Correction Rules
================
The fourteen rules in the order the pipeline applies them. Order matters:
capitalization and punctuation come after the word-level rules so they see
the final words.
"""

from typing import Dict, List

from ..base import CorrectionRule
from .lexical import SpellingRule, ContractionRule, VerbFormRule
from .agreement import ArticleRule, SubjectVerbRule, TenseConsistencyRule, ModalRule
from .word_choice import (
    PrepositionRule, UncountableRule, RedundancyRule, ComparativeRule, PronounCaseRule
)
from .mechanics import CapitalizationRule, PunctuationRule

__version__ = "1.0.0"

DEFAULT_RULES = (
    SpellingRule,
    ContractionRule,
    VerbFormRule,
    ArticleRule,
    SubjectVerbRule,
    TenseConsistencyRule,
    ModalRule,
    PrepositionRule,
    CapitalizationRule,
    PunctuationRule,
    UncountableRule,
    RedundancyRule,
    ComparativeRule,
    PronounCaseRule,
)

__all__ = [cls.__name__ for cls in DEFAULT_RULES] + [
    'DEFAULT_RULES', 'default_rules', 'get_rule_info',
]


def default_rules() -> List[CorrectionRule]:
    """Fresh instances of the default rules, in application order."""
    return [rule_class() for rule_class in DEFAULT_RULES]


def get_rule_info() -> List[Dict[str, str]]:
    """Id, name and category of every default rule."""
    return [
        {'id': cls.RULE_ID, 'name': cls.RULE_NAME, 'category': cls.CATEGORY}
        for cls in DEFAULT_RULES
    ]
