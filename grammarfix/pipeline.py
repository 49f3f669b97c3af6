"""
GrammarFix Correction Pipeline
==============================
Tokenizer -> ordered rules per sentence -> re-join -> confidence.

Each call builds its own RuleContext and CorrectionLog, so one pipeline
(and one Lexicon) can serve concurrent callers.
"""

import time
from typing import Iterable, List, Optional

from config_logging import get_logger, ProcessingError

from .base import Token, CorrectionRule, CorrectionResult, RuleContext, live_tokens
from .config import GrammarConfig, get_config
from .lexicon import Lexicon, ErrorTables, get_default_lexicon, get_default_tables
from .rules import default_rules
from .tokenizer import split_sentences_with_terminators, tokenize, join_tokens

__version__ = "1.0.0"

logger = get_logger('grammarfix_pipeline')

MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 1.0


def compute_confidence(correction_count: int, word_count: int) -> float:
    """1 - 0.5 * corrections/words, clamped to [0.1, 1.0]; 1.0 for no words."""
    if word_count <= 0:
        return MAX_CONFIDENCE
    score = 1 - 0.5 * correction_count / word_count
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, score))


def build_tokens(sentence: str, terminator: str = '') -> List[Token]:
    """Pair lowercased and original-case tokens; the terminator becomes the last token."""
    lowered = tokenize(sentence)
    original = tokenize(sentence, preserve_case=True)
    tokens = [Token(text=low, source=src) for low, src in zip(lowered, original)]
    if terminator:
        tokens.append(Token(text=terminator, source=terminator))
    return tokens


class CorrectionPipeline:
    """
    Runs the correction rules over text.

    Usage:
        pipeline = CorrectionPipeline()
        result = pipeline.correct("He dont know.")
        print(result.corrected)   # He doesn't know.
    """

    def __init__(self,
                 lexicon: Optional[Lexicon] = None,
                 tables: Optional[ErrorTables] = None,
                 config: Optional[GrammarConfig] = None,
                 rules: Optional[Iterable[CorrectionRule]] = None):
        self.lexicon = lexicon or get_default_lexicon()
        self.tables = tables or get_default_tables()
        self.config = config or get_config()
        self.rules = list(rules) if rules is not None else default_rules()

    @property
    def active_rules(self) -> List[CorrectionRule]:
        disabled = {rule_id.upper() for rule_id in self.config.rules.disabled_rules}
        return [rule for rule in self.rules if rule.RULE_ID not in disabled]

    def correct(self, text: str) -> CorrectionResult:
        """Correct ``text``. Blank input must be rejected by the caller."""
        start_time = time.time()
        context = RuleContext(lexicon=self.lexicon, tables=self.tables, config=self.config)
        rules = self.active_rules

        corrected_sentences = []
        sentences = split_sentences_with_terminators(text)
        for index, (sentence, terminator) in enumerate(sentences):
            context.log.sentence_index = index
            tokens = build_tokens(sentence, terminator)
            for rule in rules:
                try:
                    rule.apply(tokens, context)
                except Exception as e:
                    logger.exception(f"Rule {rule.RULE_ID} failed", rule=rule.RULE_ID,
                                     sentence_index=index)
                    raise ProcessingError(f"Rule {rule.RULE_NAME} failed: {e}",
                                          stage=rule.RULE_ID) from e
            rendered = join_tokens([t.render() for t in live_tokens(tokens)])
            if rendered:
                corrected_sentences.append(rendered)

        correction_count = len(context.log)
        word_count = len(text.split())
        processing_time_ms = round((time.time() - start_time) * 1000, 2)

        logger.info("Rule-based correction complete",
                    sentences=len(sentences),
                    words=word_count,
                    corrections=correction_count,
                    duration_ms=processing_time_ms)

        return CorrectionResult(
            original=text,
            corrected=' '.join(corrected_sentences),
            correction_count=correction_count,
            applied_rules=context.log.descriptions(),
            confidence=compute_confidence(correction_count, word_count),
            corrections=context.log.entries,
            processing_time_ms=processing_time_ms,
        )


_pipeline = None


def get_pipeline() -> CorrectionPipeline:
    """Get the shared pipeline built on the default lexicon and config."""
    global _pipeline
    if _pipeline is None:
        _pipeline = CorrectionPipeline()
    return _pipeline


def reset_pipeline():
    """Drop the shared pipeline (after configuration changes)."""
    global _pipeline
    _pipeline = None
