"""
AI Correction Client for GrammarFix
===================================
Asks an OpenAI-compatible chat-completions endpoint (Groq by default) for
an alternate correction with structured error and suggestion metadata.

The rule-based pipeline never depends on this client:
- malformed model output is replaced by a safe default result
- transport failures raise AICorrectionError so callers can fall back

Requires: pip install requests
"""

import re
import json
import time
from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field

import requests

from config_logging import get_logger, AICorrectionError

from ..config import AIConfig, PLACEHOLDER_API_KEY, get_config

__version__ = "1.0.0"

logger = get_logger('grammarfix_ai')

SYSTEM_PROMPT = ("You are a professional grammar correction assistant. "
                 "Always respond with valid JSON only.")

USER_PROMPT_TEMPLATE = """Please analyze and correct the following text for grammar, spelling, punctuation, and style errors. Provide your response in the following JSON format:
{{
    "corrected": "the corrected text",
    "errors": [
        {{
            "type": "error type (grammar/spelling/punctuation/style)",
            "original": "original text",
            "correction": "corrected text",
            "explanation": "brief explanation"
        }}
    ],
    "confidence": 0.95,
    "suggestions": [
        {{
            "type": "suggestion type",
            "suggestion": "improvement suggestion"
        }}
    ]
}}

Text to correct: "{text}"

Respond ONLY with valid JSON, no additional text."""

JSON_BLOCK = re.compile(r'\{[\s\S]*\}')

SAFE_DEFAULT_CONFIDENCE = 0.5
MISSING_CONFIDENCE = 0.8


@dataclass
class AIError:
    """One error the model reported."""
    type: str = ""
    original: str = ""
    correction: str = ""
    explanation: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            'type': self.type,
            'original': self.original,
            'correction': self.correction,
            'explanation': self.explanation,
        }


@dataclass
class AISuggestion:
    """A style suggestion from the model."""
    type: str = ""
    suggestion: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {'type': self.type, 'suggestion': self.suggestion}


@dataclass
class AICorrectionResult:
    """The model's correction of one text."""
    original: str
    corrected: str
    errors: List[AIError] = field(default_factory=list)
    confidence: float = MISSING_CONFIDENCE
    suggestions: List[AISuggestion] = field(default_factory=list)
    source: str = 'ai'
    parsed: bool = True
    processing_time_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'original': self.original,
            'corrected': self.corrected,
            'errors': [e.to_dict() for e in self.errors],
            'confidence': self.confidence,
            'suggestions': [s.to_dict() for s in self.suggestions],
            'source': self.source,
            'parsed': self.parsed,
            'processing_time_ms': self.processing_time_ms,
        }


def safe_default(text: str) -> AICorrectionResult:
    """Result used when the model's reply cannot be understood."""
    return AICorrectionResult(original=text, corrected=text, errors=[],
                              confidence=SAFE_DEFAULT_CONFIDENCE, suggestions=[],
                              parsed=False)


def parse_model_content(content: str, text: str) -> AICorrectionResult:
    """
    Parse the first {...} block of the model's reply.

    Malformed content yields the safe default; missing fields fall back to
    the input text, no errors, confidence 0.8 and no suggestions.
    """
    match = JSON_BLOCK.search(content or '')
    if not match:
        logger.warning("AI reply contained no JSON object")
        return safe_default(text)

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.warning(f"Could not parse AI reply: {e}")
        return safe_default(text)

    if not isinstance(data, dict):
        return safe_default(text)

    errors = [
        AIError(
            type=str(item.get('type', '')),
            original=str(item.get('original', '')),
            correction=str(item.get('correction', '')),
            explanation=str(item.get('explanation', '')),
        )
        for item in data.get('errors') or [] if isinstance(item, dict)
    ]
    suggestions = [
        AISuggestion(type=str(item.get('type', '')), suggestion=str(item.get('suggestion', '')))
        for item in data.get('suggestions') or [] if isinstance(item, dict)
    ]

    raw_confidence = data.get('confidence')
    try:
        confidence = MISSING_CONFIDENCE if raw_confidence is None else float(raw_confidence)
    except (TypeError, ValueError):
        confidence = MISSING_CONFIDENCE

    return AICorrectionResult(
        original=text,
        corrected=data.get('corrected') or text,
        errors=errors,
        confidence=max(0.0, min(1.0, confidence)),
        suggestions=suggestions,
    )


class AICorrectionClient:
    """
    Client for the AI correction endpoint.

    Usage:
        client = AICorrectionClient()
        if client.is_configured:
            result = client.correct("He dont know.")
    """

    def __init__(self, config: Optional[AIConfig] = None):
        self.config = config or get_config().ai

    @property
    def is_configured(self) -> bool:
        """True when enabled with a real API key."""
        key = (self.config.api_key or '').strip()
        return bool(self.config.enabled and key and key != PLACEHOLDER_API_KEY)

    def build_payload(self, text: str) -> Dict[str, Any]:
        return {
            'model': self.config.model,
            'messages': [
                {'role': 'system', 'content': SYSTEM_PROMPT},
                {'role': 'user', 'content': USER_PROMPT_TEMPLATE.format(text=text)},
            ],
            'temperature': self.config.temperature,
            'max_tokens': self.config.max_tokens,
        }

    def correct(self, text: str) -> AICorrectionResult:
        """
        Request a correction.

        Raises:
            AICorrectionError: not configured, network failure, non-2xx
                status or an unreadable response envelope
        """
        if not self.is_configured:
            raise AICorrectionError("AI correction is not configured (missing API key)")

        start_time = time.time()
        headers = {
            'Authorization': f'Bearer {self.config.api_key}',
            'Content-Type': 'application/json',
        }

        try:
            response = requests.post(
                self.config.url,
                headers=headers,
                json=self.build_payload(text),
                timeout=self.config.timeout_seconds,
            )
        except requests.exceptions.Timeout:
            raise AICorrectionError(
                f"AI request timed out after {self.config.timeout_seconds}s")
        except requests.exceptions.RequestException as e:
            raise AICorrectionError(f"AI request failed: {e}")

        if not response.ok:
            logger.warning("AI request rejected", http_status=response.status_code)
            raise AICorrectionError(f"API request failed: {response.status_code}",
                                    http_status=response.status_code)

        try:
            content = response.json()['choices'][0]['message']['content']
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise AICorrectionError(f"Unexpected AI response format: {e}",
                                    http_status=response.status_code)

        result = parse_model_content(content, text)
        result.processing_time_ms = round((time.time() - start_time) * 1000, 2)
        logger.info("AI correction received", errors=len(result.errors),
                    parsed=result.parsed, duration_ms=result.processing_time_ms)
        return result

    def get_status(self) -> Dict[str, Any]:
        return {
            'configured': self.is_configured,
            'enabled': self.config.enabled,
            'model': self.config.model,
            'url': self.config.url,
        }
