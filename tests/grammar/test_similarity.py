"""
Tests for the Similarity Matcher
================================
Edit distance and nearest-word suggestions.
"""

import gc
import weakref

from grammarfix.lexicon import Lexicon
from grammarfix.spelling import SimilarityMatcher, edit_distance, get_matcher


class TestEditDistance:
    """Tests for edit_distance."""

    def test_classic_examples(self):
        assert edit_distance('kitten', 'sitting') == 3
        assert edit_distance('flaw', 'lawn') == 2

    def test_empty_and_equal(self):
        assert edit_distance('', 'abc') == 3
        assert edit_distance('same', 'same') == 0

    def test_symmetric(self):
        assert edit_distance('abc', 'abcd') == edit_distance('abcd', 'abc') == 1


class TestBestMatch:
    """Tests for SimilarityMatcher.best_match."""

    def test_closest_candidate(self):
        matcher = SimilarityMatcher(['cat', 'hat', 'bat'])
        assert matcher.best_match('cst') == 'cat'

    def test_exact_match_is_not_a_suggestion(self):
        matcher = SimilarityMatcher(['cat', 'cut'])
        assert matcher.best_match('cat') == 'cut'

    def test_ties_go_to_first_candidate(self):
        matcher = SimilarityMatcher(['bat', 'cat'])
        assert matcher.best_match('hat') == 'bat'

    def test_length_filter(self):
        """Test that candidates more than two letters longer are skipped."""
        matcher = SimilarityMatcher(['elephant'])
        assert matcher.best_match('ele') is None

    def test_distance_threshold(self):
        matcher = SimilarityMatcher(['abcdef'])
        assert matcher.best_match('uvwxyz') is None

    def test_lexicon_pool(self, lexicon):
        """Test a misspelling against the default lexicon."""
        assert get_matcher(lexicon).best_match('hapy') == 'happy'

    def test_suggestions_sorted(self):
        matcher = SimilarityMatcher(['cart', 'cat', 'dog'])
        assert matcher.suggestions('cst') == ['cat', 'cart']


class TestMatcherCache:
    """Tests for get_matcher."""

    def test_cached_per_lexicon(self, lexicon):
        assert get_matcher(lexicon) is get_matcher(lexicon)
        assert get_matcher(lexicon) is not get_matcher(lexicon, max_edit_distance=1)

    def test_released_with_lexicon(self):
        """Test that the cache does not keep a discarded lexicon alive."""
        lexicon = Lexicon.from_dict({'common_words': ['coffee']})
        assert get_matcher(lexicon).best_match('cofee') == 'coffee'
        reference = weakref.ref(lexicon)

        del lexicon
        gc.collect()
        assert reference() is None
