"""
Word Choice Rules
=================
- PrepositionRule: at/in/on with time and place words
- UncountableRule: no plural on uncountable nouns
- RedundancyRule: repeated words
- ComparativeRule: double comparatives and superlatives
- PronounCaseRule: "me and him" style subject pairs
"""

from typing import List

from ..base import CorrectionRule, RuleContext, Token, live_tokens, live_words

__version__ = "1.0.0"

PREPOSITIONS = ('at', 'in', 'on')


class PrepositionRule(CorrectionRule):
    """
    Fixes at/in/on before a known time word (in the morning, on Monday) or
    place word (at home, on the street). Time is checked first, then place;
    when both tables list a word the place preposition wins.
    """

    RULE_ID = "GF008"
    RULE_NAME = "Prepositions"
    CATEGORY = "Preposition"

    def _apply(self, tokens: List[Token], context: RuleContext):
        patterns = context.tables.patterns
        words = live_words(tokens)

        for index, token in enumerate(words[:-1]):
            current = token.clean
            if current not in PREPOSITIONS:
                continue
            following = words[index + 1].clean

            for kind, table in (('time', patterns.time_prepositions),
                                ('place', patterns.place_prepositions)):
                expected = patterns.preposition_for(following, table)
                if expected and expected != current:
                    token.substitute(current, expected)
                    self.record(context, f"{current} {following}", f"{expected} {following}",
                                note=f"({kind})")
                    current = expected


class UncountableRule(CorrectionRule):
    """Removes the plural ending from uncountable nouns (informations)."""

    RULE_ID = "GF011"
    RULE_NAME = "Uncountable Nouns"
    CATEGORY = "Uncountable Noun"

    def _apply(self, tokens: List[Token], context: RuleContext):
        uncountable = context.tables.patterns.uncountable_nouns
        lexicon = context.lexicon

        for token in live_words(tokens):
            word = token.clean
            if not word.endswith('s') or word in uncountable:
                continue
            if lexicon.is_verb_form(word) or lexicon.is_noun(word):
                continue  # works, times

            if word[:-1] in uncountable:
                singular = word[:-1]
            elif word.endswith('es') and word[:-2] in uncountable:
                singular = word[:-2]
            else:
                continue
            token.substitute(word, singular)
            self.record(context, word, singular)


class RedundancyRule(CorrectionRule):
    """Deletes a word repeated immediately after itself (want want)."""

    RULE_ID = "GF012"
    RULE_NAME = "Redundancy"
    CATEGORY = "Redundancy"

    def _apply(self, tokens: List[Token], context: RuleContext):
        previous = None
        for token in live_tokens(tokens):
            if token.is_punctuation:
                previous = None
                continue
            word = token.clean
            if previous is not None and word and word == previous.clean:
                self.remove(tokens, token)
                self.record(context, f"{word} {word}", word)
                continue
            previous = token


class ComparativeRule(CorrectionRule):
    """Removes more/most before a comparative/superlative (more bigger)."""

    RULE_ID = "GF013"
    RULE_NAME = "Comparatives"
    CATEGORY = "Comparative"

    def _apply(self, tokens: List[Token], context: RuleContext):
        lexicon = context.lexicon
        words = live_words(tokens)

        for index, token in enumerate(words[:-1]):
            word = token.clean
            following = words[index + 1].clean
            redundant = ((word == 'more' and lexicon.is_comparative(following))
                         or (word == 'most' and lexicon.is_superlative(following)))
            if redundant:
                self.remove(tokens, token)
                self.record(context, f"{word} {following}", following)


class PronounCaseRule(CorrectionRule):
    """Rewrites object pronoun pairs used as subjects (me and him -> he and I)."""

    RULE_ID = "GF014"
    RULE_NAME = "Pronoun Case"
    CATEGORY = "Pronoun Case"

    def _apply(self, tokens: List[Token], context: RuleContext):
        table = context.tables.patterns.pronoun_case
        words = live_words(tokens)

        for index in range(len(words) - 2):
            window = words[index:index + 3]
            phrase = ' '.join(t.clean for t in window)
            fix = table.get(phrase)
            if not fix:
                continue
            for token, old, new in zip(window, phrase.split(), fix.split()):
                if old != new:
                    token.substitute(old, new)
            self.record(context, phrase, fix)
