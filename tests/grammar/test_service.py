"""
Tests for the GrammarFix Service
================================
Orchestration of rule-based and AI correction, fallbacks and summaries.
"""

from unittest.mock import MagicMock

import pytest

from config_logging import ValidationError, AICorrectionError
from grammarfix.ai import AICorrectionResult, AIError
from grammarfix.service import (
    GrammarService, AnalysisSummary, validate_text,
    AI_SUCCESS, AI_ERROR, AI_NOT_CONFIGURED, AI_DISABLED, AI_MESSAGES,
)


def _ai_result(text: str) -> AICorrectionResult:
    return AICorrectionResult(
        original=text,
        corrected="He doesn't know.",
        errors=[AIError(type='grammar', original='dont', correction="doesn't"),
                AIError(type='spelling', original='knw', correction='know')],
        confidence=0.9,
    )


@pytest.fixture
def ai_client():
    client = MagicMock()
    client.is_configured = False
    client.get_status.return_value = {'configured': False}
    return client


@pytest.fixture
def scorer():
    scorer = MagicMock()
    scorer.reading_level.return_value = 'Standard'
    return scorer


@pytest.fixture
def service(pipeline, ai_client, config, scorer):
    service = GrammarService(pipeline=pipeline, ai_client=ai_client,
                             config=config, scorer=scorer)
    yield service
    service.shutdown()


class TestValidation:
    """Tests for input validation."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
    def test_blank_input_rejected(self, text):
        with pytest.raises(ValidationError) as excinfo:
            validate_text(text)
        assert excinfo.value.message == "Please enter some text to check."
        assert excinfo.value.status_code == 400

    def test_check_rejects_blank(self, service, ai_client):
        with pytest.raises(ValidationError):
            service.check("  ")
        ai_client.correct.assert_not_called()

    def test_correct_text_rejects_blank(self, service):
        with pytest.raises(ValidationError):
            service.correct_text("")


class TestRuleOnlyChecks:
    """Checks without a working AI collaborator."""

    def test_not_configured(self, service, ai_client):
        report = service.check("He dont know.")

        assert report.ai_status == AI_NOT_CONFIGURED
        assert report.ai_message == 'Get free API key from console.groq.com'
        assert report.ai_result is None
        assert report.corrected == "He doesn't know."
        ai_client.correct.assert_not_called()

    def test_rule_summary(self, service):
        summary = service.check("He dont know.").summary

        assert summary.error_count == 2
        assert summary.correction_count == 2
        assert summary.error_breakdown == {'Contraction': 1, 'Subject-Verb Agreement': 1}
        assert summary.confidence_percent == 67
        assert summary.reading_level == 'Standard'

    def test_disabled_per_request(self, service, ai_client):
        ai_client.is_configured = True
        report = service.check("He dont know.", use_ai=False)

        assert report.ai_status == AI_DISABLED
        assert report.ai_message == AI_MESSAGES[AI_DISABLED]
        ai_client.correct.assert_not_called()

    def test_readability_disabled(self, service, config, scorer):
        config.readability.enabled = False
        assert service.check("He dont know.").summary.reading_level == 'Unknown'
        scorer.reading_level.assert_not_called()


class TestAIChecks:
    """Checks with the AI collaborator configured."""

    def test_success(self, service, ai_client):
        ai_client.is_configured = True
        ai_client.correct.side_effect = _ai_result

        report = service.check("He dont knw.")

        assert report.ai_status == AI_SUCCESS
        assert report.ai_message == 'AI correction completed'
        assert report.corrected == "He doesn't know."
        ai_client.correct.assert_called_once_with("He dont knw.")

        summary = report.summary
        assert summary.error_count == report.rule_result.correction_count + 2
        assert summary.error_breakdown == {'Grammar': 1, 'Spelling': 1}
        assert summary.confidence == 0.9

    def test_failure_falls_back(self, service, ai_client):
        ai_client.is_configured = True
        ai_client.correct.side_effect = AICorrectionError("API request failed: 401",
                                                          http_status=401)

        report = service.check("He dont know.")

        assert report.ai_status == AI_ERROR
        assert report.ai_message == 'AI unavailable, using rule-based correction'
        assert report.ai_result is None
        assert report.corrected == "He doesn't know."
        assert report.summary.error_count == 2

    def test_unexpected_failure_falls_back(self, service, ai_client):
        ai_client.is_configured = True
        ai_client.correct.side_effect = RuntimeError("boom")

        report = service.check("He dont know.")
        assert report.ai_status == AI_ERROR
        assert report.corrected == "He doesn't know."

    def test_report_dict(self, service, ai_client):
        ai_client.is_configured = True
        ai_client.correct.side_effect = _ai_result

        data = service.check("He dont know.").to_dict()
        assert data['ai_status'] == AI_SUCCESS
        assert data['ai']['confidence'] == 0.9
        assert data['rule_based']['corrected'] == "He doesn't know."
        assert data['summary']['error_breakdown'] == {'Grammar': 1, 'Spelling': 1}

    def test_zero_ai_confidence_reported(self, service, ai_client):
        ai_client.is_configured = True
        ai_client.correct.side_effect = lambda text: AICorrectionResult(
            original=text, corrected=text, confidence=0.0)

        summary = service.check("He dont know.").summary
        assert summary.confidence == 0.0
        assert summary.confidence_percent == 0


class TestSummary:
    """Tests for AnalysisSummary and service status."""

    def test_confidence_percent_rounds(self):
        assert AnalysisSummary(confidence=0.856).confidence_percent == 86
        assert AnalysisSummary().confidence_percent == 100

    def test_status_lists_rules(self, service, config):
        config.rules.disabled_rules = ['GF013']
        status = service.get_status()

        assert len(status['rules']) == 14
        disabled = [rule['id'] for rule in status['rules'] if not rule['enabled']]
        assert disabled == ['GF013']
        assert status['lexicon']['verbs'] > 0
