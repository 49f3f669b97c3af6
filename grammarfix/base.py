"""
GrammarFix Base Classes
=======================
Core data types shared by the tokenizer, the rules and the pipeline.

- Token: a mutable slot in a sentence (word or punctuation mark)
- AppliedCorrection / CorrectionLog: call-scoped record of what changed
- RuleContext: everything a rule may consult during one correction run
- CorrectionRule: abstract base class every rule inherits from
- CorrectionResult: the engine's output
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import List, Dict, Any, Optional, TYPE_CHECKING
from dataclasses import dataclass, field

if TYPE_CHECKING:
    from .config import GrammarConfig
    from .lexicon.tables import ErrorTables
    from .lexicon.words import Lexicon

__version__ = "1.0.0"

PUNCTUATION_MARKS = '.!?;:,'
TERMINAL_MARKS = '.!?'


@dataclass(eq=False)
class Token:
    """
    One word or punctuation mark of a sentence.

    ``text`` is the working (lowercased) value the rules inspect and rewrite.
    ``source`` keeps the spelling the user typed so untouched words render
    with their original case.
    """
    text: str
    source: str = ""
    deleted: bool = False

    @property
    def clean(self) -> str:
        """Lowercased text with punctuation marks stripped."""
        return ''.join(ch for ch in self.text if ch not in PUNCTUATION_MARKS).lower()

    @property
    def suffix(self) -> str:
        """Trailing punctuation attached to the word (e.g. the final '.')."""
        stripped = self.text.rstrip(PUNCTUATION_MARKS)
        return self.text[len(stripped):]

    @property
    def is_punctuation(self) -> bool:
        return bool(self.text) and all(ch in PUNCTUATION_MARKS for ch in self.text)

    def render(self) -> str:
        """Text for output, restoring the source spelling when the word is
        unchanged (punctuation appended since is kept)."""
        core = self.text.rstrip(PUNCTUATION_MARKS)
        source_core = self.source.rstrip(PUNCTUATION_MARKS)
        if source_core and core == source_core.lower():
            return source_core + self.text[len(core):]
        return self.text

    def substitute(self, old: str, new: str):
        """Replace the first occurrence of ``old`` (case-insensitive), keeping
        a leading capital and any attached punctuation."""
        capitalized = self.render()[:1].isupper() and new[:1].islower()
        start = self.text.lower().find(old.lower()) if old else -1
        if start < 0:
            self.text = new + self.suffix
        else:
            self.text = self.text[:start] + new + self.text[start + len(old):]
        if capitalized:
            self.text = self.text[:1].upper() + self.text[1:]

    def delete(self):
        self.deleted = True


def live_tokens(tokens: List[Token]) -> List[Token]:
    """Tokens that have not been deleted, in order."""
    return [t for t in tokens if not t.deleted]


def live_words(tokens: List[Token]) -> List[Token]:
    """Surviving word tokens (punctuation marks skipped), in order."""
    return [t for t in tokens if not t.deleted and not t.is_punctuation]


@dataclass
class AppliedCorrection:
    """A single correction made by a rule."""
    rule_id: str
    category: str
    before: str
    after: str
    note: str = ""
    sentence_index: int = 0

    @property
    def description(self) -> str:
        text = f'{self.category}: "{self.before}" → "{self.after}"'
        if self.note:
            text = f'{text} {self.note}'
        return text

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for API responses."""
        return {
            'rule_id': self.rule_id,
            'category': self.category,
            'before': self.before,
            'after': self.after,
            'note': self.note,
            'sentence_index': self.sentence_index,
            'description': self.description,
        }


class CorrectionLog:
    """Ordered corrections made during one pipeline run."""

    def __init__(self):
        self._entries: List[AppliedCorrection] = []
        self.sentence_index = 0

    def record(self, rule_id: str, category: str, before: str, after: str, note: str = ""):
        self._entries.append(AppliedCorrection(
            rule_id=rule_id,
            category=category,
            before=before,
            after=after,
            note=note,
            sentence_index=self.sentence_index,
        ))

    @property
    def entries(self) -> List[AppliedCorrection]:
        return list(self._entries)

    def descriptions(self) -> List[str]:
        return [e.description for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class RuleContext:
    """Read-only knowledge plus the call-scoped log, passed to every rule."""
    lexicon: 'Lexicon'
    tables: 'ErrorTables'
    config: 'GrammarConfig'
    log: CorrectionLog = field(default_factory=CorrectionLog)


class CorrectionRule(ABC):
    """
    Abstract base class for correction rules.

    Subclasses implement ``_apply`` and call ``self.record`` once per
    correction. ``apply`` returns the number of corrections recorded, so a
    rule's count always matches its log entries.
    """

    RULE_ID: str = "RULE000"
    RULE_NAME: str = "Rule"
    CATEGORY: str = "Grammar"

    def apply(self, tokens: List[Token], context: RuleContext) -> int:
        """Run the rule over one sentence, mutating ``tokens`` in place."""
        before = len(context.log)
        self._apply(tokens, context)
        return len(context.log) - before

    @abstractmethod
    def _apply(self, tokens: List[Token], context: RuleContext):
        """
        Implementation of the rule.

        Args:
            tokens: the sentence tokens, shared with every other rule
            context: lexicon, tables, config and log for this run
        """
        pass

    def record(self, context: RuleContext, before: str, after: str,
               note: str = "", category: str = ""):
        context.log.record(self.RULE_ID, category or self.CATEGORY, before, after, note)

    @staticmethod
    def remove(tokens: List[Token], token: Token):
        """
        Delete a token. A sentence-initial capital moves to the next word and
        trailing punctuation moves to the previous word.
        """
        words = live_words(tokens)
        if words and words[0] is token and token.render()[:1].isupper() and len(words) > 1:
            following = words[1]
            rendered = following.render()
            following.text = rendered[:1].upper() + rendered[1:]
        suffix = token.suffix
        if suffix and not token.is_punctuation:
            index = words.index(token) if token in words else 0
            if index > 0:
                words[index - 1].text += suffix
        token.delete()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.RULE_ID}>"


@dataclass
class CorrectionResult:
    """Output of one rule-based correction run."""
    original: str
    corrected: str
    correction_count: int = 0
    applied_rules: List[str] = field(default_factory=list)
    confidence: float = 1.0
    corrections: List[AppliedCorrection] = field(default_factory=list)
    processing_time_ms: float = 0.0

    def category_counts(self) -> Dict[str, int]:
        """Corrections per category, in first-seen order."""
        return dict(Counter(c.category for c in self.corrections))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            'original': self.original,
            'corrected': self.corrected,
            'correction_count': self.correction_count,
            'applied_rules': list(self.applied_rules),
            'confidence': self.confidence,
            'corrections': [c.to_dict() for c in self.corrections],
            'category_counts': self.category_counts(),
            'processing_time_ms': self.processing_time_ms,
        }
