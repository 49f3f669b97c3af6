"""
Agreement Rules
===============
Rules that look at a word together with its neighbours:

- ArticleRule: a/an by vowel sound, no indefinite article before plurals
- SubjectVerbRule: verb number after subject pronouns
- TenseConsistencyRule: verb forms follow the sentence's dominant tense
- ModalRule: base form after modals, no double modals
"""

from typing import List, Optional

from ..base import CorrectionRule, RuleContext, Token, live_words
from ..verbs import TenseAnalyzer

__version__ = "1.0.0"

ARTICLES = ('a', 'an')

# Words after which a verb keeps its form (auxiliaries, infinitive, negation)
GOVERNORS = frozenset({
    'do', 'does', 'did', 'have', 'has', 'had', 'having',
    'am', 'is', 'are', 'was', 'were', 'be', 'been', 'being',
    'to', 'not',
})

# Subject pronouns that can also stand as objects (make it work, tell you)
OBJECT_CASE_PRONOUNS = frozenset({'it', 'you', 'this', 'that', 'these', 'those'})

BE_FORMS = frozenset({'am', 'is', 'are', 'was', 'were'})


def starts_with_vowel_sound(word: str, context: RuleContext) -> bool:
    """Vowel letter test with exceptions (hour, honest / user, university)."""
    exceptions = context.tables.patterns.vowel_sound_exceptions
    if word in exceptions:
        return exceptions[word]
    for key, value in exceptions.items():
        if len(key) >= 4 and word.startswith(key):
            return value
    return word[:1] in context.lexicon.vowels


class ArticleRule(CorrectionRule):
    """Chooses a/an by the next word's sound and drops a/an before plurals."""

    RULE_ID = "GF004"
    RULE_NAME = "Articles"
    CATEGORY = "Article"

    def _apply(self, tokens: List[Token], context: RuleContext):
        words = live_words(tokens)
        for index, token in enumerate(words[:-1]):
            article = token.clean
            if article not in ARTICLES:
                continue
            following = words[index + 1].clean
            if not following:
                continue

            if context.lexicon.is_plural_noun(following):
                self.remove(tokens, token)
                self.record(context, f"{article} {following}", following,
                            note="(no article before plural)")
                continue

            expected = 'an' if starts_with_vowel_sound(following, context) else 'a'
            if expected != article:
                token.substitute(article, expected)
                self.record(context, f"{article} {following}", f"{expected} {following}")


class SubjectVerbRule(CorrectionRule):
    """
    Makes the verb after a subject pronoun agree in number.

    Singular subjects (he, she, it, this, that) take the 3rd-person form,
    plural subjects (they, we, you, these, those) the base form. Past,
    participle and -ing forms already agree and are left alone.
    """

    RULE_ID = "GF005"
    RULE_NAME = "Subject-Verb Agreement"
    CATEGORY = "Subject-Verb Agreement"

    def _apply(self, tokens: List[Token], context: RuleContext):
        patterns = context.tables.patterns
        words = live_words(tokens)

        for index in range(len(words) - 1):
            subject = words[index].clean
            verb_token = words[index + 1]
            verb = verb_token.clean

            if subject in patterns.singular_pronouns:
                singular = True
            elif subject in patterns.plural_pronouns:
                singular = False
            else:
                continue

            if index > 0 and self._is_object(words[index - 1].clean, subject, verb, context):
                continue
            if subject in patterns.determiners and (
                    context.lexicon.is_noun(verb) or verb in patterns.uncountable_nouns):
                continue

            if singular:
                fixed = self.singular_form(verb, context)
            else:
                fixed = self.plural_form(verb, context)

            if fixed and fixed != verb:
                verb_token.substitute(verb, fixed)
                self.record(context, f"{subject} {verb}", f"{subject} {fixed}")

    @staticmethod
    def _is_object(previous: str, subject: str, verb: str, context: RuleContext) -> bool:
        """
        True when the pronoun belongs to the word before it rather than
        starting a clause: inversion after a modal or auxiliary (can he go)
        and object pronouns after a verb (make it work). Nominative pronouns
        (he, she, they, we) and a following contraction or be form (I think
        it is) keep agreement on.
        """
        if previous in context.tables.patterns.modals or previous in GOVERNORS:
            return True
        if subject not in OBJECT_CASE_PRONOUNS or not context.lexicon.is_verb_form(previous):
            return False
        return "'" not in verb and verb not in BE_FORMS

    @staticmethod
    def singular_form(verb: str, context: RuleContext) -> Optional[str]:
        patterns = context.tables.patterns
        if verb in patterns.contraction_agreement:
            return patterns.contraction_agreement[verb]
        if "'" in verb:
            return None
        if verb in patterns.singular_agreement:
            return patterns.singular_agreement[verb]

        entry = context.lexicon.verb_entry(verb)
        if entry:
            if verb == entry.past:
                return None  # read, put, cut: past and base look the same
            if verb in (entry.base, entry.present):
                return entry.singular_present
            return None

        if context.lexicon.is_known(verb) or not _looks_like_verb(verb):
            return None
        return verb if verb.endswith('s') else verb + 's'

    @staticmethod
    def plural_form(verb: str, context: RuleContext) -> Optional[str]:
        patterns = context.tables.patterns
        for plural, singular in patterns.contraction_agreement.items():
            if verb == singular:
                return plural
        if "'" in verb:
            return None
        if verb in patterns.plural_agreement:
            return patterns.plural_agreement[verb]

        entry = context.lexicon.verb_entry(verb)
        if entry:
            if verb == entry.singular_present and verb != entry.base:
                return entry.base
            return None

        if context.lexicon.is_known(verb) or not _looks_like_verb(verb):
            return None
        if verb.endswith('s') and not verb.endswith('ss') and len(verb) > 3:
            return verb[:-1]
        return None


def _looks_like_verb(word: str) -> bool:
    """Unknown words that could be a present-tense verb."""
    return word.isalpha() and len(word) > 2 and not word.endswith(('ly', 'ed', 'ing'))


class TenseConsistencyRule(CorrectionRule):
    """Rewrites verbs to the dominant tense detected for the sentence."""

    RULE_ID = "GF006"
    RULE_NAME = "Tense Consistency"
    CATEGORY = "Tense"

    def _apply(self, tokens: List[Token], context: RuleContext):
        patterns = context.tables.patterns
        words = live_words(tokens)
        tense = TenseAnalyzer(patterns).detect_tense([t.clean for t in words])
        if tense is None:
            return

        for index, token in enumerate(words):
            verb = token.clean
            entry = context.lexicon.verb_entry(verb)
            if entry is None or "'" in verb:
                continue
            previous = words[index - 1].clean if index > 0 else ''

            if tense == 'future':
                if previous in patterns.modals and verb != entry.base:
                    self._rewrite(context, token, verb, entry.base, tense)
                continue

            if self._is_governed(previous, context) or previous in patterns.determiners:
                continue
            if verb == entry.ing and verb != entry.base:
                continue  # participle, not a finite verb
            if previous and context.lexicon.is_verb_form(previous):
                continue  # complement of another verb (looked like, want go)

            plural = self._plural_subject(previous, context)
            if tense == 'past':
                target = self._past_form(entry, plural and previous != 'i')
            else:
                target = self._present_form(entry, verb, previous, plural)
            if target and target != verb:
                self._rewrite(context, token, verb, target, tense)

    def _rewrite(self, context: RuleContext, token: Token, verb: str, target: str, tense: str):
        token.substitute(verb, target)
        self.record(context, verb, target, note=f"({tense} tense)")

    @staticmethod
    def _is_governed(previous: str, context: RuleContext) -> bool:
        return (previous in GOVERNORS
                or previous in context.tables.patterns.modals
                or previous.endswith("n't"))

    @staticmethod
    def _plural_subject(previous: str, context: RuleContext) -> bool:
        patterns = context.tables.patterns
        return (previous in patterns.plural_pronouns
                or previous in patterns.first_person
                or context.lexicon.is_plural_noun(previous))

    @staticmethod
    def _past_form(entry, plural: bool) -> str:
        if entry.base == 'be':
            return 'were' if plural else 'was'
        return entry.past

    @staticmethod
    def _present_form(entry, verb: str, previous: str, plural: bool) -> str:
        if verb in (entry.base, entry.singular_present):
            return verb
        if entry.base == 'be':
            if previous == 'i':
                return 'am'
            return 'are' if plural else 'is'
        return entry.base if plural else entry.singular_present


class ModalRule(CorrectionRule):
    """Puts the verb after a modal in its base form and removes double modals."""

    RULE_ID = "GF007"
    RULE_NAME = "Modal Verbs"
    CATEGORY = "Modal Verb"

    def _apply(self, tokens: List[Token], context: RuleContext):
        modals = context.tables.patterns.modals
        words = live_words(tokens)

        for index, token in enumerate(words[:-1]):
            modal = token.clean
            if modal not in modals or token.deleted:
                continue
            following = words[index + 1]

            if following.clean in modals:
                self.remove(tokens, token)
                self.record(context, f"{modal} {following.clean}", following.clean,
                            note="(double modal)")
                continue

            if following.clean == 'not' and index + 2 < len(words):
                following = words[index + 2]

            verb = following.clean
            entry = context.lexicon.verb_entry(verb)
            if entry and verb != entry.base:
                following.substitute(verb, entry.base)
                self.record(context, f"{modal} {verb}", f"{modal} {entry.base}")
