"""
Lexical Rules
=============
Exact table lookups on single words and short phrases:

- SpellingRule: misspelling table, then edit-distance suggestion
- ContractionRule: contractions written without an apostrophe
- VerbFormRule: regularised irregular verbs, then phrase-level grammar errors
"""

from typing import List

from ..base import CorrectionRule, RuleContext, Token, live_words
from ..spelling import get_matcher

__version__ = "1.0.0"


class SpellingRule(CorrectionRule):
    """Fixes common misspellings; unknown words get the closest lexicon word."""

    RULE_ID = "GF001"
    RULE_NAME = "Spelling"
    CATEGORY = "Spelling"

    def _apply(self, tokens: List[Token], context: RuleContext):
        table = context.tables.spelling
        settings = context.config.spelling

        for position, token in enumerate(live_words(tokens)):
            word = token.clean
            fix = table.get(word)
            if fix:
                token.substitute(word, fix)
                self.record(context, word, fix)
                continue

            if settings.fuzzy_fallback and self._is_fuzzy_candidate(token, position, context):
                matcher = get_matcher(context.lexicon, settings.max_edit_distance,
                                      settings.max_length_difference)
                suggestion = matcher.best_match(word)
                if suggestion:
                    token.substitute(word, suggestion)
                    self.record(context, word, suggestion, note="(suggested)")

    @staticmethod
    def _is_fuzzy_candidate(token: Token, position: int, context: RuleContext) -> bool:
        word = token.clean
        if not word.isalpha() or len(word) < context.config.spelling.min_word_length:
            return False
        if context.lexicon.is_known(word):
            return False
        tables = context.tables
        if word in tables.contractions or word in tables.verb_forms or word in tables.grammar:
            return False    # a later rule owns this word
        source = token.source.strip('.!?;:,')
        if source.isupper():
            return False    # acronym
        if position > 0 and source[:1].isupper():
            return False    # proper noun
        return True


class ContractionRule(CorrectionRule):
    """Adds the missing apostrophe to contractions (dont -> don't)."""

    RULE_ID = "GF002"
    RULE_NAME = "Contractions"
    CATEGORY = "Contraction"

    def _apply(self, tokens: List[Token], context: RuleContext):
        table = context.tables.contractions
        for token in live_words(tokens):
            word = token.clean
            fix = table.get(word)
            if fix:
                token.substitute(word, fix)
                self.record(context, word, fix)


class VerbFormRule(CorrectionRule):
    """
    Replaces regularised irregular verbs (goed -> went) and common
    phrase-level mistakes (should of -> should have, alot -> a lot).
    """

    RULE_ID = "GF003"
    RULE_NAME = "Verb Forms"
    CATEGORY = "Verb Form"

    GRAMMAR_CATEGORY = "Grammar"

    def _apply(self, tokens: List[Token], context: RuleContext):
        verb_forms = context.tables.verb_forms
        grammar = context.tables.grammar
        phrases = [(key.split(), value) for key, value in grammar.items() if ' ' in key]

        words = live_words(tokens)
        for index, token in enumerate(words):
            if token.deleted:
                continue
            word = token.clean
            fix = verb_forms.get(word)
            if fix:
                token.substitute(word, fix)
                self.record(context, word, fix)
                word = token.clean

            fix = grammar.get(word)
            if fix:
                token.substitute(word, fix)
                self.record(context, word, fix, category=self.GRAMMAR_CATEGORY)
                continue

            for parts, value in phrases:
                window = words[index:index + len(parts)]
                if len(window) == len(parts) and [t.clean for t in window] == parts:
                    self._replace_phrase(tokens, window, parts, value.split())
                    self.record(context, ' '.join(parts), value,
                                category=self.GRAMMAR_CATEGORY)
                    break

    def _replace_phrase(self, tokens: List[Token], window: List[Token],
                        old_parts: List[str], new_parts: List[str]):
        if len(old_parts) == len(new_parts):
            for token, old, new in zip(window, old_parts, new_parts):
                if old != new:
                    token.substitute(old, new)
            return
        window[0].substitute(old_parts[0], ' '.join(new_parts))
        for token in window[1:]:
            self.remove(tokens, token)
