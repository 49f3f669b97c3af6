"""
GrammarFix Service
==================
Orchestrates one grammar check for callers (web API, CLI):

1. Validate the input (blank text is rejected)
2. Submit the AI request to a worker thread when the client is configured
3. Run the rule-based pipeline meanwhile
4. Collect the AI result; any AI failure degrades to the rule-based result
5. Summarize: error count, correction count, reading level, confidence,
   per-category breakdown
"""

import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

from config_logging import get_logger, ValidationError, AICorrectionError, StructuredLogger

from .base import CorrectionResult
from .config import GrammarConfig, get_config
from .pipeline import CorrectionPipeline, get_pipeline
from .ai import AICorrectionClient, AICorrectionResult
from .readability import get_scorer

__version__ = "1.0.0"

logger = get_logger('grammarfix_service')

EMPTY_TEXT_MESSAGE = "Please enter some text to check."

AI_SUCCESS = 'success'
AI_ERROR = 'error'
AI_NOT_CONFIGURED = 'not_configured'
AI_DISABLED = 'disabled'

AI_MESSAGES = {
    AI_SUCCESS: 'AI correction completed',
    AI_ERROR: 'AI unavailable, using rule-based correction',
    AI_NOT_CONFIGURED: 'Get free API key from console.groq.com',
    AI_DISABLED: 'AI correction disabled for this request',
}

# Extra wait on top of the HTTP timeout before giving up on the worker
AI_RESULT_GRACE_SECONDS = 5.0


@dataclass
class AnalysisSummary:
    """Figures shown next to the corrected text."""
    error_count: int = 0
    correction_count: int = 0
    reading_level: str = "Unknown"
    confidence: float = 1.0
    error_breakdown: Dict[str, int] = field(default_factory=dict)

    @property
    def confidence_percent(self) -> int:
        return round(self.confidence * 100)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'error_count': self.error_count,
            'correction_count': self.correction_count,
            'reading_level': self.reading_level,
            'confidence': self.confidence,
            'confidence_percent': self.confidence_percent,
            'error_breakdown': dict(self.error_breakdown),
        }


@dataclass
class GrammarCheckReport:
    """Everything one check produced."""
    text: str
    rule_result: CorrectionResult
    summary: AnalysisSummary
    ai_result: Optional[AICorrectionResult] = None
    ai_status: str = AI_NOT_CONFIGURED
    ai_message: str = AI_MESSAGES[AI_NOT_CONFIGURED]
    correlation_id: str = ""
    processing_time_ms: float = 0.0

    @property
    def corrected(self) -> str:
        """Preferred correction: the AI's when it succeeded, else the rules'."""
        if self.ai_status == AI_SUCCESS and self.ai_result is not None:
            return self.ai_result.corrected
        return self.rule_result.corrected

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'corrected': self.corrected,
            'rule_based': self.rule_result.to_dict(),
            'ai': self.ai_result.to_dict() if self.ai_result else None,
            'ai_status': self.ai_status,
            'ai_message': self.ai_message,
            'summary': self.summary.to_dict(),
            'correlation_id': self.correlation_id,
            'processing_time_ms': self.processing_time_ms,
        }


def validate_text(text: Optional[str]) -> str:
    """Reject missing or blank input before any processing."""
    if text is None or not isinstance(text, str) or not text.strip():
        raise ValidationError(EMPTY_TEXT_MESSAGE, field='text')
    return text


class GrammarService:
    """
    Runs rule-based and AI correction side by side.

    Usage:
        service = GrammarService()
        report = service.check("He dont know.")
        print(report.summary.error_count)
    """

    def __init__(self,
                 pipeline: Optional[CorrectionPipeline] = None,
                 ai_client: Optional[AICorrectionClient] = None,
                 config: Optional[GrammarConfig] = None,
                 scorer=None,
                 max_workers: int = 4):
        self.config = config or get_config()
        self.pipeline = pipeline or get_pipeline()
        self.ai_client = ai_client or AICorrectionClient(self.config.ai)
        self.scorer = scorer or get_scorer()
        self._executor = ThreadPoolExecutor(max_workers=max_workers,
                                            thread_name_prefix='grammarfix-ai')

    def correct_text(self, text: str) -> CorrectionResult:
        """Rule-based correction only."""
        return self.pipeline.correct(validate_text(text))

    def check(self, text: str, use_ai: bool = True) -> GrammarCheckReport:
        """Full check: rules plus (when configured) AI, with a summary."""
        text = validate_text(text)
        start_time = time.time()
        correlation_id = StructuredLogger.get_correlation_id()

        with logger.log_operation('grammar_check', words=len(text.split())):
            future = None
            if not use_ai:
                ai_status = AI_DISABLED
            elif self.ai_client.is_configured:
                future = self._executor.submit(self.ai_client.correct, text)
                ai_status = AI_SUCCESS
            else:
                ai_status = AI_NOT_CONFIGURED

            rule_result = self.pipeline.correct(text)

            ai_result = None
            if future is not None:
                ai_result = self._collect_ai_result(future)
                if ai_result is None:
                    ai_status = AI_ERROR

            summary = self.summarize(rule_result, ai_result)

        return GrammarCheckReport(
            text=text,
            rule_result=rule_result,
            summary=summary,
            ai_result=ai_result,
            ai_status=ai_status,
            ai_message=AI_MESSAGES[ai_status],
            correlation_id=correlation_id,
            processing_time_ms=round((time.time() - start_time) * 1000, 2),
        )

    def _collect_ai_result(self, future) -> Optional[AICorrectionResult]:
        timeout = self.config.ai.timeout_seconds + AI_RESULT_GRACE_SECONDS
        try:
            return future.result(timeout=timeout)
        except AICorrectionError as e:
            logger.warning(f"AI correction failed: {e.message}", code=e.code,
                           http_status=e.details.get('http_status'))
        except FutureTimeout:
            future.cancel()
            logger.warning("AI correction timed out", timeout_seconds=timeout)
        except Exception as e:
            logger.exception(f"Unexpected AI correction failure: {e}")
        return None

    def summarize(self, rule_result: CorrectionResult,
                  ai_result: Optional[AICorrectionResult] = None) -> AnalysisSummary:
        """
        Build the display summary.

        With an AI result, errors are the rule corrections plus the AI's
        errors, the breakdown follows the AI's error types and the AI's
        confidence is preferred. Without one, everything comes from the rules.
        """
        if ai_result is not None:
            breakdown = Counter((e.type or 'other').capitalize() for e in ai_result.errors)
            return AnalysisSummary(
                error_count=rule_result.correction_count + len(ai_result.errors),
                correction_count=len(rule_result.applied_rules),
                reading_level=self._reading_level(ai_result.corrected),
                confidence=(rule_result.confidence if ai_result.confidence is None
                            else ai_result.confidence),
                error_breakdown=dict(breakdown),
            )

        breakdown = Counter(description.split(':')[0]
                            for description in rule_result.applied_rules)
        return AnalysisSummary(
            error_count=rule_result.correction_count,
            correction_count=len(rule_result.applied_rules),
            reading_level=self._reading_level(rule_result.corrected),
            confidence=rule_result.confidence,
            error_breakdown=dict(breakdown),
        )

    def _reading_level(self, text: str) -> str:
        if not self.config.readability.enabled:
            return "Unknown"
        return self.scorer.reading_level(text)

    def get_status(self) -> Dict[str, Any]:
        return {
            'rules': [
                {'id': rule.RULE_ID, 'name': rule.RULE_NAME,
                 'enabled': rule in self.pipeline.active_rules}
                for rule in self.pipeline.rules
            ],
            'lexicon': self.pipeline.lexicon.get_status(),
            'tables': self.pipeline.tables.get_status(),
            'ai': self.ai_client.get_status(),
            'readability': {'enabled': self.config.readability.enabled},
        }

    def shutdown(self):
        self._executor.shutdown(wait=False)


_service = None


def get_service() -> GrammarService:
    """Get the shared GrammarService (lazy loaded)."""
    global _service
    if _service is None:
        _service = GrammarService()
    return _service


def reset_service():
    """Shut down and drop the shared service (for testing)."""
    global _service
    if _service is not None:
        _service.shutdown()
    _service = None
