"""
Tests for the Tense Analyzer
============================
Dominant tense detection from indicators and auxiliaries.
"""

from grammarfix.verbs import TenseAnalyzer, get_analyzer


class TestDetectTense:
    """Tests for TenseAnalyzer.detect_tense."""

    def test_past_indicator(self):
        assert get_analyzer().detect_tense(['i', 'went', 'home', 'yesterday']) == 'past'

    def test_future_indicator_and_auxiliary(self):
        analysis = TenseAnalyzer().analyze(['i', 'will', 'go', 'tomorrow'])
        assert analysis.tense == 'future'
        assert analysis.scores['future'] == 3

    def test_multiword_indicator(self):
        """Test indicators spanning several words ('last week')."""
        assert TenseAnalyzer().detect_tense(['i', 'saw', 'it', 'last', 'week']) == 'past'

    def test_no_signal(self):
        assert TenseAnalyzer().detect_tense(['the', 'cat', 'sat']) is None

    def test_single_auxiliary_is_too_weak(self):
        """Test that a score of 1 does not pick a tense."""
        assert TenseAnalyzer().detect_tense(['i', 'was', 'here']) is None

    def test_tie_returns_none(self):
        assert TenseAnalyzer().detect_tense(['yesterday', 'tomorrow']) is None

    def test_multiword_auxiliary(self):
        """Test 'going to' against 'is': one point each, no winner."""
        analysis = TenseAnalyzer().analyze(['he', 'is', 'going', 'to', 'leave'])
        assert analysis.scores['future'] == 1
        assert analysis.scores['present'] == 1
        assert analysis.tense is None

    def test_indicator_inside_word(self):
        """Test that indicators match inside tokens ('know' contains 'now')."""
        assert TenseAnalyzer().detect_tense(['i', 'know', 'it']) == 'present'

    def test_empty(self):
        assert TenseAnalyzer().detect_tense([]) is None

    def test_to_dict(self):
        data = TenseAnalyzer().analyze(['yesterday']).to_dict()
        assert data['tense'] == 'past'
        assert set(data['scores']) == {'past', 'present', 'future'}


class TestIndicatorScoring:
    """Tests for how overlapping indicators are counted."""

    def test_token_scores_once(self):
        """Test that 'nowadays' (containing 'now' too) adds two points, not four."""
        assert TenseAnalyzer().analyze(['nowadays', 'i', 'walk']).scores['present'] == 2

    def test_phrase_over_scored_token(self):
        """Test that 'right now' adds nothing once 'now' has scored."""
        analysis = TenseAnalyzer().analyze(['yesterday', 'i', 'walk', 'home', 'right', 'now'])
        assert analysis.scores == {'past': 2, 'present': 2, 'future': 0}
        assert analysis.tense is None

    def test_phrase_without_single_word_match(self):
        analysis = TenseAnalyzer().analyze(['at', 'present', 'i', 'walk'])
        assert analysis.scores['present'] == 2
