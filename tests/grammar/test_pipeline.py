"""
Tests for the Correction Pipeline
=================================
End-to-end scenarios, confidence scoring and per-call isolation.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from grammarfix.lexicon import Lexicon
from grammarfix.pipeline import CorrectionPipeline, compute_confidence


class TestScenarios:
    """Literal input/output scenarios."""

    def test_dont_after_singular_subject(self, pipeline):
        result = pipeline.correct("He dont know.")
        assert result.corrected == "He doesn't know."
        assert "doesn't" in result.corrected
        assert result.correction_count >= 1

    def test_article_and_tense(self, pipeline):
        result = pipeline.correct("I seen a apple yesterday.")
        assert "an apple" in result.corrected
        assert result.corrected == "I saw an apple yesterday."

    def test_spelling_then_capitalization(self, pipeline):
        result = pipeline.correct("Teh cat run.")
        assert result.corrected.startswith("The cat run.")

    def test_plural_subject_agreement(self, pipeline):
        result = pipeline.correct("They is happy.")
        assert "They are happy." in result.corrected

    def test_redundant_word(self, pipeline):
        result = pipeline.correct("I want want coffee.")
        assert result.corrected == "I want coffee."
        assert result.correction_count == 1

    @pytest.mark.parametrize("text,expected", [
        ("I think he dont know.", "I think he doesn't know."),
        ("She said they is happy.", "She said they are happy."),
    ])
    def test_agreement_in_clause_after_verb(self, pipeline, text, expected):
        assert pipeline.correct(text).corrected == expected

    def test_tied_tense_cues_leave_verbs_alone(self, pipeline):
        text = "Yesterday he walked home right now."
        result = pipeline.correct(text)
        assert result.corrected == text
        assert result.correction_count == 0

    @pytest.mark.parametrize("text", [
        "Hello world.",
        "It does not matter.",
        "Their garden has roses.",
        "The dog barked loudly.",
    ])
    def test_correct_words_outside_lexicon_survive(self, pipeline, text):
        result = pipeline.correct(text)
        assert result.corrected == text
        assert result.correction_count == 0


class TestPipelineOutput:
    """Tests for the CorrectionResult contents."""

    def test_multiple_sentences(self, pipeline):
        result = pipeline.correct("he dont know. they is happy")
        assert result.corrected == "He doesn't know. They are happy."
        assert result.correction_count == 6
        assert result.confidence == pytest.approx(0.5)

    def test_question_mark_kept(self, pipeline):
        result = pipeline.correct("is it ready?")
        assert result.corrected == "Is it ready?"
        assert result.correction_count == 1

    def test_clean_text_unchanged(self, pipeline):
        result = pipeline.correct("The cat sat on the mat.")
        assert result.corrected == "The cat sat on the mat."
        assert result.correction_count == 0
        assert result.confidence == 1.0

    def test_log_matches_count(self, pipeline):
        result = pipeline.correct("me and him dont want want a apples. she go home")
        assert result.correction_count == len(result.applied_rules) == len(result.corrections)

    def test_sentence_index_recorded(self, pipeline):
        result = pipeline.correct("Fine. teh end.")
        assert [c.sentence_index for c in result.corrections] == [1, 1]

    def test_category_counts(self, pipeline):
        result = pipeline.correct("He dont know.")
        assert result.category_counts() == {'Contraction': 1, 'Subject-Verb Agreement': 1}
        assert result.to_dict()['category_counts'] == result.category_counts()

    def test_empty_input(self, pipeline):
        result = pipeline.correct("")
        assert result.corrected == ""
        assert result.correction_count == 0
        assert result.confidence == 1.0

    def test_single_word_never_empty(self, pipeline):
        assert pipeline.correct("hello").corrected == "Hello."


class TestConfidence:
    """Tests for compute_confidence."""

    def test_formula(self):
        assert compute_confidence(1, 4) == pytest.approx(0.875)

    def test_bounds(self):
        assert compute_confidence(100, 2) == 0.1
        assert compute_confidence(0, 10) == 1.0
        assert compute_confidence(3, 0) == 1.0

    def test_results_in_range(self, pipeline):
        for text in ("a a a a", "He dont know.", "teh teh teh", "ok"):
            assert 0.1 <= pipeline.correct(text).confidence <= 1.0


class TestIdempotence:
    """Re-running on corrected text finds nothing new."""

    @pytest.mark.parametrize("text", [
        "He dont know.",
        "I seen a apple yesterday.",
        "Teh cat run.",
        "They is happy.",
        "I want want coffee.",
        "i goed home, we should of stayed",
    ])
    def test_second_pass_is_clean(self, pipeline, text):
        first = pipeline.correct(text)
        second = pipeline.correct(first.corrected)
        assert second.correction_count == 0
        assert second.corrected == first.corrected


class TestConfiguration:
    """Tests for pipeline configuration."""

    def test_disabled_rule(self, pipeline, config):
        config.rules.disabled_rules = ['GF009']
        result = pipeline.correct("hello there.")
        assert result.corrected == "hello there."
        assert all(rule.RULE_ID != 'GF009' for rule in pipeline.active_rules)

    def test_custom_lexicon(self, tables, config):
        lexicon = Lexicon.from_dict({
            'verbs': [['see', 'sees', 'saw', 'seen', 'seeing']],
            'nouns': [['apple', 'apples']],
            'common_words': ['i', 'a', 'an', 'yesterday'],
        })
        pipeline = CorrectionPipeline(lexicon=lexicon, tables=tables, config=config)
        assert pipeline.correct("I seen a apple yesterday.").corrected == "I saw an apple yesterday."

    def test_concurrent_calls_are_isolated(self, pipeline):
        texts = ["He dont know.", "They is happy.", "I want want coffee."] * 10
        expected = [pipeline.correct(t).correction_count for t in texts]
        with ThreadPoolExecutor(max_workers=4) as executor:
            counts = [r.correction_count for r in executor.map(pipeline.correct, texts)]
        assert counts == expected
