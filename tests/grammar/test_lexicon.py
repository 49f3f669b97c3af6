"""
Tests for the Lexicon and Error Tables
======================================
Verb index, plural detection, comparatives and table construction.
"""

import json
import dataclasses

import pytest

from grammarfix.lexicon import (
    Lexicon, VerbEntry, ErrorTables, get_default_lexicon, get_default_tables,
)


class TestVerbIndex:
    """Tests for inflected-form lookup."""

    def test_any_form_finds_its_verb(self, lexicon):
        """Test that every inflection maps back to the base verb."""
        assert lexicon.verb_entry('seen').base == 'see'
        assert lexicon.verb_entry('went').base == 'go'
        assert lexicon.verb_entry('SAW').base == 'see'

    def test_unknown_word(self, lexicon):
        assert lexicon.verb_entry('xyzzy') is None
        assert not lexicon.is_verb_form('apple')

    def test_pattern_present_form(self):
        """Test the 3rd-person fallback when no present form is listed."""
        assert VerbEntry('walk').singular_present == 'walks'
        assert VerbEntry('go', present='goes').singular_present == 'goes'

    def test_base_required(self):
        with pytest.raises(ValueError):
            VerbEntry('')

    def test_entries_are_immutable(self, lexicon):
        """Test that the lexicon cannot be changed after construction."""
        entry = lexicon.verb_entry('go')
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.past = 'goed'
        with pytest.raises(TypeError):
            lexicon.verbs['go'] = VerbEntry('go', past='goed')


class TestNouns:
    """Tests for plural detection."""

    def test_listed_plurals(self, lexicon):
        assert lexicon.is_plural_noun('apples')
        assert lexicon.is_plural_noun('children')

    def test_irregular_fallback(self, lexicon):
        """Test plurals that only the fixed irregular list knows."""
        assert lexicon.is_plural_noun('oxen')

    def test_singulars_are_not_plural(self, lexicon):
        assert not lexicon.is_plural_noun('apple')
        assert not lexicon.is_plural_noun('fish')
        assert not lexicon.is_plural_noun('glass')
        assert not lexicon.is_plural_noun('boss')


class TestAdjectives:
    """Tests for comparative and superlative detection."""

    def test_comparatives(self, lexicon):
        for word in ('taller', 'bigger', 'happier', 'nicer', 'better', 'worse'):
            assert lexicon.is_comparative(word), word

    def test_superlatives(self, lexicon):
        for word in ('tallest', 'biggest', 'happiest', 'nicest', 'best', 'worst'):
            assert lexicon.is_superlative(word), word

    def test_lookalikes_rejected(self, lexicon):
        """Test words that merely end in -er/-est."""
        assert not lexicon.is_comparative('water')
        assert not lexicon.is_superlative('honest')


class TestLexiconConstruction:
    """Tests for building alternative lexicons."""

    def test_default_is_shared(self):
        assert get_default_lexicon() is get_default_lexicon()

    def test_candidate_pool_starts_with_verbs(self, lexicon):
        """Test the suggestion order: verbs first."""
        assert lexicon.candidate_pool[0] == 'be'
        assert len(set(lexicon.candidate_pool)) == len(lexicon.candidate_pool)

    def test_from_dict_rows(self):
        lexicon = Lexicon.from_dict({
            'verbs': [['fly', 'flies', 'flew', 'flown', 'flying']],
            'nouns': [['mouse', 'mice']],
            'common_words': ['the'],
        })
        assert lexicon.verb_entry('flew').base == 'fly'
        assert lexicon.is_plural_noun('mice')
        assert lexicon.is_known('the')
        assert not lexicon.is_known('go')

    def test_from_dict_keyed_verbs(self):
        lexicon = Lexicon.from_dict({'verbs': {'go': {'past': 'went'}}, 'nouns': []})
        entry = lexicon.verb_entry('went')
        assert entry.base == 'go'
        assert entry.singular_present == 'gos'

    def test_bad_noun_pair(self):
        with pytest.raises(ValueError):
            Lexicon.from_dict({'nouns': [['cat']]})

    def test_from_json(self, tmp_path):
        path = tmp_path / 'lexicon.json'
        path.write_text(json.dumps({
            'verbs': [{'base': 'see', 'past': 'saw', 'past_participle': 'seen'}],
            'nouns': [['cat', 'cats']],
        }), encoding='utf-8')
        lexicon = Lexicon.from_json(path)
        assert lexicon.verb_entry('seen').past == 'saw'
        assert lexicon.is_plural_noun('cats')


class TestErrorTables:
    """Tests for the exact-match correction tables."""

    def test_defaults(self, tables):
        assert tables.spelling['teh'] == 'the'
        assert tables.contractions['dont'] == "don't"
        assert tables.verb_forms['goed'] == 'went'
        assert tables.grammar['should of'] == 'should have'

    def test_default_is_shared(self):
        assert get_default_tables() is get_default_tables()

    def test_tables_must_be_disjoint(self):
        with pytest.raises(ValueError):
            ErrorTables(spelling={'dont': "don't"})

    def test_keys_must_be_lowercase(self):
        with pytest.raises(ValueError):
            ErrorTables(spelling={'Teh': 'the'})

    def test_from_dict_lowercases_keys(self):
        tables = ErrorTables.from_dict({'spelling': {'Wrng': 'wrong'}})
        assert tables.spelling['wrng'] == 'wrong'
        assert tables.contractions['dont'] == "don't"
