"""
Mechanics Rules
===============
Capitalization and end punctuation. Both run after the word-level rules so
they see the sentence's final words.
"""

from typing import List

from ..base import CorrectionRule, RuleContext, Token, live_tokens, live_words, TERMINAL_MARKS

__version__ = "1.0.0"

FIRST_PERSON_FORMS = frozenset({'i', "i'm", "i've", "i'll", "i'd"})
SOFT_MARKS = ',;:'


def _capitalize(token: Token) -> str:
    rendered = token.render()
    token.text = rendered[:1].upper() + rendered[1:]
    return token.text


class CapitalizationRule(CorrectionRule):
    """Capitalizes the first word of the sentence and the pronoun I."""

    RULE_ID = "GF009"
    RULE_NAME = "Capitalization"
    CATEGORY = "Capitalization"

    def _apply(self, tokens: List[Token], context: RuleContext):
        words = live_words(tokens)
        if not words:
            return

        first = words[0]
        rendered = first.render()
        if rendered[:1].islower():
            self.record(context, rendered, _capitalize(first))

        for token in words[1:]:
            rendered = token.render()
            if token.clean in FIRST_PERSON_FORMS and rendered[:1] == 'i':
                self.record(context, rendered, _capitalize(token))


class PunctuationRule(CorrectionRule):
    """Ends every sentence with a terminal mark."""

    RULE_ID = "GF010"
    RULE_NAME = "Punctuation"
    CATEGORY = "Punctuation"

    def _apply(self, tokens: List[Token], context: RuleContext):
        remaining = live_tokens(tokens)
        if not remaining:
            return

        last = remaining[-1]
        if last.text[-1:] in TERMINAL_MARKS:
            return

        if last.is_punctuation and all(ch in SOFT_MARKS for ch in last.text):
            before = last.text
            last.text = '.'
            self.record(context, before, '.')
            return

        before = last.render()
        last.text += '.'
        self.record(context, before, last.render())
