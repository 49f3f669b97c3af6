"""
Lexicon
=======
Immutable word knowledge base consulted by the rules and the similarity
matcher: verbs with their inflections, singular/plural noun pairs, common
words, adjectives and the vowel letters used by article choice.

An inverse index (inflected form -> verb entry) is built once at
construction so verb lookup is a single dict access.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Tuple, Union, Any
from dataclasses import dataclass

__version__ = "1.0.0"

# Plurals recognised even when the noun pair is not in the lexicon
IRREGULAR_PLURALS = frozenset({
    'children', 'people', 'men', 'women', 'mice', 'teeth', 'feet', 'geese',
    'oxen', 'knives', 'leaves', 'lives', 'wives', 'wolves', 'halves',
})

IRREGULAR_COMPARATIVES = frozenset({'better', 'worse', 'farther', 'further'})
IRREGULAR_SUPERLATIVES = frozenset({'best', 'worst', 'farthest', 'furthest'})


@dataclass(frozen=True)
class VerbEntry:
    """A verb and its inflections. Only ``base`` is required."""
    base: str
    present: str = ""
    past: str = ""
    past_participle: str = ""
    ing: str = ""

    def __post_init__(self):
        if not self.base:
            raise ValueError("Verb entry requires a non-empty base form")

    @property
    def singular_present(self) -> str:
        """3rd-person present, inflected by pattern when not listed."""
        return self.present or self.base + 's'

    def forms(self) -> Tuple[str, ...]:
        """Listed forms in (base, present, past, participle, -ing) order."""
        return tuple(f for f in (self.base, self.present, self.past,
                                 self.past_participle, self.ing) if f)

    def to_dict(self) -> Dict[str, str]:
        return {
            'base': self.base,
            'present': self.present,
            'past': self.past,
            'past_participle': self.past_participle,
            'ing': self.ing,
        }


class Lexicon:
    """
    Read-only English vocabulary.

    Build one with the default word lists (``lexicon.get_default_lexicon()``),
    from a dict (``Lexicon.from_dict``) or from a JSON file
    (``Lexicon.from_json``). Instances never change after construction and
    can be shared between threads.
    """

    def __init__(self,
                 verbs: Iterable[VerbEntry],
                 nouns: Iterable[Tuple[str, str]],
                 common_words: Iterable[str] = (),
                 adjectives: Iterable[str] = (),
                 vowels: str = 'aeiou',
                 irregular_plurals: Iterable[str] = IRREGULAR_PLURALS):
        verb_list = tuple(verbs)
        self._verbs = MappingProxyType({v.base: v for v in verb_list})

        index: Dict[str, VerbEntry] = {}
        for verb in verb_list:
            for form in verb.forms():
                index.setdefault(form, verb)
        self._verb_index = MappingProxyType(index)

        self._nouns = tuple((s.lower(), p.lower()) for s, p in nouns)
        self._singulars = frozenset(s for s, _ in self._nouns)
        self._plurals = frozenset(p for _, p in self._nouns)
        self._common_words = frozenset(w.lower() for w in common_words)
        self._adjectives = frozenset(a.lower() for a in adjectives)
        self.vowels = frozenset(vowels.lower())
        self._irregular_plurals = frozenset(irregular_plurals)

        # Candidate pool in suggestion order: verbs, nouns, common words, adjectives
        pool: List[str] = []
        seen = set()
        groups = (
            [form for verb in verb_list for form in verb.forms()],
            [form for pair in self._nouns for form in pair],
            sorted(self._common_words),
            sorted(self._adjectives),
        )
        for group in groups:
            for word in group:
                if word not in seen:
                    seen.add(word)
                    pool.append(word)
        self._candidate_pool = tuple(pool)
        self._known = frozenset(seen)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Lexicon':
        """
        Build a lexicon from plain data.

        ``verbs`` may be a list of rows ``[base, present, past, pp, ing]``,
        a list of dicts with those keys, or a dict keyed by base form.
        ``nouns`` is a list of ``[singular, plural]`` pairs.
        """
        raw_verbs = data.get('verbs', [])
        verbs = []
        if isinstance(raw_verbs, dict):
            raw_verbs = [dict(forms, base=base) for base, forms in raw_verbs.items()]
        for row in raw_verbs:
            if isinstance(row, dict):
                verbs.append(VerbEntry(
                    base=row.get('base', ''),
                    present=row.get('present', ''),
                    past=row.get('past', ''),
                    past_participle=row.get('past_participle', row.get('pastParticiple', '')),
                    ing=row.get('ing', ''),
                ))
            else:
                verbs.append(VerbEntry(*row))

        nouns = [tuple(pair) for pair in data.get('nouns', [])]
        for pair in nouns:
            if len(pair) != 2:
                raise ValueError(f"Noun entry must be a [singular, plural] pair: {pair}")

        return cls(
            verbs=verbs,
            nouns=nouns,
            common_words=data.get('common_words', data.get('commonWords', [])),
            adjectives=data.get('adjectives', []),
            vowels=data.get('vowels', 'aeiou'),
            irregular_plurals=data.get('irregular_plurals', IRREGULAR_PLURALS),
        )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'Lexicon':
        with open(path, 'r', encoding='utf-8') as f:
            return cls.from_dict(json.load(f))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @property
    def verbs(self):
        return self._verbs

    @property
    def nouns(self) -> Tuple[Tuple[str, str], ...]:
        return self._nouns

    @property
    def common_words(self) -> frozenset:
        return self._common_words

    @property
    def adjectives(self) -> frozenset:
        return self._adjectives

    @property
    def candidate_pool(self) -> Tuple[str, ...]:
        return self._candidate_pool

    def verb_entry(self, word: str) -> Optional[VerbEntry]:
        """The verb any inflected form belongs to, or None."""
        return self._verb_index.get(word.lower())

    def is_verb_form(self, word: str) -> bool:
        return word.lower() in self._verb_index

    def is_noun(self, word: str) -> bool:
        word = word.lower()
        return word in self._singulars or word in self._plurals

    def is_plural_noun(self, word: str) -> bool:
        """
        True for listed plurals, for ``<singular>s`` of a listed noun, and
        for the fixed irregular plurals. Words that are also a singular form
        (``fish``, ``sheep``) are not plural.
        """
        word = word.lower()
        if word in self._singulars:
            return False
        if word in self._plurals:
            return True
        if len(word) > 2 and word.endswith('s') and not word.endswith('ss'):
            if word[:-1] in self._singulars:
                return True
        return word in self._irregular_plurals

    def is_adjective(self, word: str) -> bool:
        return word.lower() in self._adjectives

    def is_comparative(self, word: str) -> bool:
        """``-er`` form of a listed adjective, or better/worse."""
        word = word.lower()
        if word in IRREGULAR_COMPARATIVES:
            return True
        return word.endswith('er') and self._has_adjective_stem(word, 'er')

    def is_superlative(self, word: str) -> bool:
        """``-est`` form of a listed adjective, or best/worst."""
        word = word.lower()
        if word in IRREGULAR_SUPERLATIVES:
            return True
        return word.endswith('est') and self._has_adjective_stem(word, 'est')

    def _has_adjective_stem(self, word: str, ending: str) -> bool:
        stem = word[:-len(ending)]
        candidates = [stem, stem + 'e']
        if len(stem) > 2 and stem[-1] == stem[-2]:
            candidates.append(stem[:-1])        # bigger -> big
        if stem.endswith('i'):
            candidates.append(stem[:-1] + 'y')  # happier -> happy
        return any(c in self._adjectives for c in candidates)

    def is_known(self, word: str) -> bool:
        """True if the word appears anywhere in the lexicon."""
        return word.lower() in self._known

    def get_status(self) -> Dict[str, int]:
        return {
            'verbs': len(self._verbs),
            'verb_forms': len(self._verb_index),
            'nouns': len(self._nouns),
            'common_words': len(self._common_words),
            'adjectives': len(self._adjectives),
            'candidates': len(self._candidate_pool),
        }

    def __repr__(self) -> str:
        return f"<Lexicon verbs={len(self._verbs)} nouns={len(self._nouns)}>"
