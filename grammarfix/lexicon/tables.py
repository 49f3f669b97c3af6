"""
Error Tables and Grammar Patterns
=================================
Static lookup data for the rules.

ErrorTables holds the four disjoint exact-match tables (spelling,
grammar-phrase, verb-form, contraction). GrammarPatterns holds the word
lists the context-sensitive rules consult (pronouns, modals, tense
indicators, preposition tables, uncountable nouns, pronoun case).
Both are frozen; build variants with ``dataclasses.replace``.
"""

from types import MappingProxyType
from typing import Mapping, Dict, Any
from dataclasses import dataclass, field

__version__ = "1.0.0"


def _frozen(mapping: Dict) -> Mapping:
    return MappingProxyType(dict(mapping))


SPELLING_ERRORS = {
    'recieve': 'receive',
    'seperate': 'separate',
    'definately': 'definitely',
    'occured': 'occurred',
    'neccessary': 'necessary',
    'accomodate': 'accommodate',
    'beleive': 'believe',
    'managment': 'management',
    'excersise': 'exercise',
    'buisness': 'business',
    'successfull': 'successful',
    'begining': 'beginning',
    'tommorow': 'tomorrow',
    'untill': 'until',
    'wich': 'which',
    'teh': 'the',
    'adn': 'and',
    'hte': 'the',
    'thier': 'their',
    'freind': 'friend',
    'wierd': 'weird',
    'peice': 'piece',
    'calender': 'calendar',
    'enviroment': 'environment',
    'goverment': 'government',
}

GRAMMAR_ERRORS = {
    'should of': 'should have',
    'could of': 'could have',
    'would of': 'would have',
    'might of': 'might have',
    'must of': 'must have',
    'alot': 'a lot',
    'everyday': 'every day',
    'irregardless': 'regardless',
    'orientate': 'orient',
}

VERB_FORM_ERRORS = {
    'buyed': 'bought',
    'catched': 'caught',
    'cutted': 'cut',
    'drawed': 'drew',
    'eated': 'ate',
    'finded': 'found',
    'goed': 'went',
    'growed': 'grew',
    'hitted': 'hit',
    'hurted': 'hurt',
    'keeped': 'kept',
    'leaved': 'left',
    'loosed': 'lost',
    'maked': 'made',
    'payed': 'paid',
    'putted': 'put',
    'runned': 'ran',
    'sayed': 'said',
    'seeked': 'sought',
    'sended': 'sent',
    'speaked': 'spoke',
    'standed': 'stood',
    'teached': 'taught',
    'thinked': 'thought',
    'throwed': 'threw',
    'waked': 'woke',
    'winned': 'won',
    'writed': 'wrote',
}

CONTRACTION_ERRORS = {
    'dont': "don't",
    'cant': "can't",
    'wont': "won't",
    'shouldnt': "shouldn't",
    'couldnt': "couldn't",
    'wouldnt': "wouldn't",
    'isnt': "isn't",
    'arent': "aren't",
    'wasnt': "wasn't",
    'werent': "weren't",
    'hasnt': "hasn't",
    'havent': "haven't",
    'hadnt': "hadn't",
    'didnt': "didn't",
    'doesnt': "doesn't",
    'mustnt': "mustn't",
}


@dataclass(frozen=True)
class ErrorTables:
    """Exact-match correction tables; keys are lowercase."""
    spelling: Mapping[str, str] = field(default_factory=lambda: _frozen(SPELLING_ERRORS))
    grammar: Mapping[str, str] = field(default_factory=lambda: _frozen(GRAMMAR_ERRORS))
    verb_forms: Mapping[str, str] = field(default_factory=lambda: _frozen(VERB_FORM_ERRORS))
    contractions: Mapping[str, str] = field(default_factory=lambda: _frozen(CONTRACTION_ERRORS))
    patterns: 'GrammarPatterns' = field(default_factory=lambda: GrammarPatterns())

    def __post_init__(self):
        tables = {
            'spelling': self.spelling,
            'grammar': self.grammar,
            'verb_forms': self.verb_forms,
            'contractions': self.contractions,
        }
        seen: Dict[str, str] = {}
        for name, table in tables.items():
            for key in table:
                if key != key.lower():
                    raise ValueError(f"{name} key must be lowercase: {key!r}")
                if key in seen:
                    raise ValueError(f"{key!r} appears in both {seen[key]} and {name}")
                seen[key] = name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ErrorTables':
        """Build tables from plain dicts; missing tables use the defaults."""
        kwargs = {}
        for name in ('spelling', 'grammar', 'verb_forms', 'contractions'):
            if name in data:
                kwargs[name] = _frozen({k.lower(): v for k, v in data[name].items()})
        return cls(**kwargs)

    def get_status(self) -> Dict[str, int]:
        return {
            'spelling': len(self.spelling),
            'grammar': len(self.grammar),
            'verb_forms': len(self.verb_forms),
            'contractions': len(self.contractions),
        }


# =============================================================================
# GRAMMAR PATTERNS
# =============================================================================

MONTHS = ('january', 'february', 'march', 'april', 'may', 'june', 'july',
          'august', 'september', 'october', 'november', 'december')
WEEKDAYS = ('monday', 'tuesday', 'wednesday', 'thursday', 'friday',
            'saturday', 'sunday')

TIME_PREPOSITIONS = {
    'at': ('night', 'noon', 'midnight', 'dawn', 'dusk'),
    'in': ('morning', 'afternoon', 'evening') + MONTHS + (
        'spring', 'summer', 'autumn', 'winter', 'year', 'month'),
    'on': WEEKDAYS + ('weekend',),
}

PLACE_PREPOSITIONS = {
    'at': ('home', 'school', 'work', 'university', 'college'),
    'in': ('city', 'country', 'room', 'house', 'building', 'car'),
    'on': ('street', 'road', 'floor', 'table', 'wall'),
}

TENSE_INDICATORS = {
    'past': ('yesterday', 'last week', 'last month', 'last year', 'ago',
             'before', 'previously', 'earlier', 'then', 'once upon a time',
             'in the past', 'formerly'),
    'present': ('today', 'now', 'currently', 'at present', 'right now',
                'these days', 'nowadays', 'presently'),
    'future': ('tomorrow', 'next week', 'next month', 'next year', 'soon',
               'later', 'eventually', 'in the future'),
}

TENSE_AUXILIARIES = {
    'past': ('was', 'were', 'had', 'did'),
    'present': ('am', 'is', 'are', 'have', 'has', 'do', 'does'),
    'future': ('will', 'shall', 'going to', 'about to'),
}

UNCOUNTABLE_NOUNS = (
    'water', 'milk', 'coffee', 'tea', 'juice', 'beer', 'wine', 'rice',
    'bread', 'meat', 'cheese', 'butter', 'sugar', 'salt', 'money', 'time',
    'information', 'knowledge', 'advice', 'news', 'music', 'art', 'love',
    'happiness', 'anger', 'fear', 'furniture', 'equipment', 'luggage',
    'homework', 'work', 'weather', 'traffic', 'pollution', 'research',
    'progress',
)

PRONOUN_CASE = {
    'me and him': 'he and I',
    'him and me': 'he and I',
    'me and her': 'she and I',
    'her and me': 'she and I',
}

# Negative contractions that change with the subject's number
CONTRACTION_AGREEMENT = {
    "don't": "doesn't",
    "haven't": "hasn't",
    "aren't": "isn't",
    "weren't": "wasn't",
}

# Forms with no regular inflection
PLURAL_AGREEMENT = {'is': 'are', 'was': 'were', 'has': 'have', 'does': 'do', 'am': 'are'}
SINGULAR_AGREEMENT = {'are': 'is', 'were': 'was', 'be': 'is', 'have': 'has',
                      'do': 'does', 'am': 'is'}

VOWEL_SOUND_EXCEPTIONS = {
    'honest': True, 'hour': True, 'honor': True, 'herb': True,
    'heir': True, 'honour': True, 'hourly': True,
    'university': False, 'user': False, 'united': False, 'european': False,
    'one': False, 'once': False, 'unique': False, 'uniform': False,
    'useful': False, 'usual': False, 'utility': False, 'euro': False,
}


@dataclass(frozen=True)
class GrammarPatterns:
    """Word lists consulted by the context-sensitive rules."""
    singular_pronouns: frozenset = frozenset({'he', 'she', 'it', 'this', 'that'})
    plural_pronouns: frozenset = frozenset({'they', 'we', 'you', 'these', 'those'})
    first_person: frozenset = frozenset({'i'})
    modals: frozenset = frozenset({'can', 'could', 'may', 'might', 'will',
                                   'would', 'shall', 'should', 'must'})
    determiners: frozenset = frozenset({'a', 'an', 'the', 'my', 'your', 'his',
                                        'her', 'its', 'our', 'their', 'this',
                                        'that', 'these', 'those', 'every', 'each'})
    tense_indicators: Mapping = field(default_factory=lambda: _frozen(TENSE_INDICATORS))
    tense_auxiliaries: Mapping = field(default_factory=lambda: _frozen(TENSE_AUXILIARIES))
    time_prepositions: Mapping = field(default_factory=lambda: _frozen(TIME_PREPOSITIONS))
    place_prepositions: Mapping = field(default_factory=lambda: _frozen(PLACE_PREPOSITIONS))
    uncountable_nouns: frozenset = frozenset(UNCOUNTABLE_NOUNS)
    pronoun_case: Mapping = field(default_factory=lambda: _frozen(PRONOUN_CASE))
    contraction_agreement: Mapping = field(default_factory=lambda: _frozen(CONTRACTION_AGREEMENT))
    plural_agreement: Mapping = field(default_factory=lambda: _frozen(PLURAL_AGREEMENT))
    singular_agreement: Mapping = field(default_factory=lambda: _frozen(SINGULAR_AGREEMENT))
    vowel_sound_exceptions: Mapping = field(default_factory=lambda: _frozen(VOWEL_SOUND_EXCEPTIONS))

    def preposition_for(self, word: str, table: Mapping) -> str:
        """The preposition a time/place word takes, or ''."""
        for preposition, words in table.items():
            if word in words:
                return preposition
        return ''
