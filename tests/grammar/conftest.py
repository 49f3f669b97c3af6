"""Shared fixtures for the GrammarFix tests."""

from typing import List

import pytest

from grammarfix.base import RuleContext, Token, live_tokens
from grammarfix.config import GrammarConfig
from grammarfix.lexicon import get_default_lexicon, get_default_tables
from grammarfix.pipeline import CorrectionPipeline, build_tokens
from grammarfix.tokenizer import join_tokens


@pytest.fixture
def config() -> GrammarConfig:
    """Default engine configuration, independent of the environment."""
    config = GrammarConfig()
    config.ai.api_key = ''
    return config


@pytest.fixture
def lexicon():
    return get_default_lexicon()


@pytest.fixture
def tables():
    return get_default_tables()


@pytest.fixture
def context(lexicon, tables, config) -> RuleContext:
    """A fresh rule context with an empty correction log."""
    return RuleContext(lexicon=lexicon, tables=tables, config=config)


@pytest.fixture
def pipeline(lexicon, tables, config) -> CorrectionPipeline:
    return CorrectionPipeline(lexicon=lexicon, tables=tables, config=config)


def render(tokens: List[Token]) -> str:
    """Sentence text the pipeline would produce from these tokens."""
    return join_tokens([t.render() for t in live_tokens(tokens)])


@pytest.fixture
def run_rule(context):
    """Apply one rule to a sentence; returns (text, count)."""
    def _run(rule, sentence: str, terminator: str = ''):
        tokens = build_tokens(sentence, terminator)
        count = rule.apply(tokens, context)
        return render(tokens), count
    return _run
