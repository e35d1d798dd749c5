"""Shared behaviour of network-backed analysis providers.

Concrete vendors only implement ``_complete``: send one system + user
message pair and return the reply text. This class builds the prompts,
parses and normalizes the replies, and turns every failure into an
AnalysisProviderError with a caller-facing message.
"""

from __future__ import annotations

import json
import re
from abc import abstractmethod
from typing import Any, Dict, List, Optional

from app.analysis import prompts
from app.analysis.base import AnalysisProvider
from app.exceptions import AnalysisProviderError
from app.logger import Logger, session_logger
from app.validation.models import AnalysisResult, ComplianceResult, RiskLevel

_FENCED_JSON = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)

# Token budgets per operation
ANALYSIS_MAX_TOKENS = 2000
SUMMARY_MAX_TOKENS = 500
SUGGESTIONS_MAX_TOKENS = 1000
COMPLIANCE_MAX_TOKENS = 1000

EMPTY_SUMMARY_FALLBACK = "Não foi possível gerar o resumo."


def parse_json_reply(text: str) -> Dict[str, Any]:
    """Parse a vendor reply that should hold one JSON object.

    Tolerates the reply being wrapped in a markdown code fence.

    Raises:
        ValueError: If the text is not a JSON object
    """
    stripped = text.strip()
    match = _FENCED_JSON.match(stripped)
    if match:
        stripped = match.group(1)
    data = json.loads(stripped)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]


def normalize_analysis(data: Dict[str, Any]) -> AnalysisResult:
    """Fill defaults for missing or malformed fields of an analysis reply."""
    risk = data.get("riskLevel")
    try:
        risk_level = RiskLevel(risk)
    except ValueError:
        risk_level = RiskLevel.MEDIUM
    reading_time = data.get("estimatedReadingTime")
    if isinstance(reading_time, bool) or not isinstance(reading_time, (int, float)):
        reading_time = None
    summary = data.get("summary")
    return AnalysisResult(
        summary=summary if isinstance(summary, str) else "",
        key_points=_string_list(data.get("keyPoints")),
        risk_level=risk_level,
        suggestions=_string_list(data.get("suggestions")),
        estimated_reading_time=reading_time,
    )


def normalize_compliance(data: Dict[str, Any]) -> ComplianceResult:
    """Fill defaults for missing or malformed fields of a compliance reply."""
    compliant = data.get("compliant")
    return ComplianceResult(
        compliant=compliant if isinstance(compliant, bool) else True,
        issues=_string_list(data.get("issues")),
    )


class VendorAnalysisProvider(AnalysisProvider):
    """Base for providers that talk to a chat-completion style API."""

    def __init__(self, model: str, logger: Optional[Logger] = None):
        self.model = model
        self.logger: Logger = logger or session_logger

    @abstractmethod
    async def _complete(
        self, system: str, prompt: str, max_tokens: int, json_mode: bool
    ) -> Optional[str]:
        """Send one request and return the reply text (None or "" if empty)."""

    @staticmethod
    def _describe_error(exc: Exception) -> str:
        """Short vendor error description, including an HTTP status when known."""
        message = str(exc) or type(exc).__name__
        code = getattr(exc, "status_code", None) or getattr(exc, "code", None)
        return f"{message} ({code})" if code else message

    async def _request_json(
        self, operation: str, failure: str, system: str, prompt: str, max_tokens: int
    ) -> Dict[str, Any]:
        try:
            text = await self._complete(system, prompt, max_tokens, json_mode=True)
            if not text:
                raise ValueError(f"Resposta vazia do {self.vendor}")
            return parse_json_reply(text)
        except AnalysisProviderError:
            raise
        except Exception as exc:
            detail = self._describe_error(exc)
            self.logger.error(
                "Analysis request failed",
                vendor=self.vendor,
                operation=operation,
                error_type=type(exc).__name__,
                error=detail,
            )
            raise AnalysisProviderError(
                f"{failure}: {detail}", vendor=self.vendor, details={"operation": operation}
            ) from exc

    async def analyze_document(self, content: str) -> AnalysisResult:
        data = await self._request_json(
            "analyze_document",
            "Falha ao analisar documento",
            prompts.ANALYSIS_SYSTEM,
            prompts.analysis_prompt(content),
            ANALYSIS_MAX_TOKENS,
        )
        return normalize_analysis(data)

    async def generate_summary(self, content: str) -> str:
        try:
            text = await self._complete(
                prompts.SUMMARY_SYSTEM,
                prompts.summary_prompt(content),
                SUMMARY_MAX_TOKENS,
                json_mode=False,
            )
        except Exception as exc:
            detail = self._describe_error(exc)
            self.logger.error(
                "Analysis request failed",
                vendor=self.vendor,
                operation="generate_summary",
                error_type=type(exc).__name__,
                error=detail,
            )
            raise AnalysisProviderError(
                f"Falha ao gerar resumo: {detail}",
                vendor=self.vendor,
                details={"operation": "generate_summary"},
            ) from exc
        return text.strip() if text and text.strip() else EMPTY_SUMMARY_FALLBACK

    async def suggest_improvements(self, content: str) -> List[str]:
        data = await self._request_json(
            "suggest_improvements",
            "Falha ao gerar sugestões",
            prompts.SUGGESTIONS_SYSTEM,
            prompts.suggestions_prompt(content),
            SUGGESTIONS_MAX_TOKENS,
        )
        return _string_list(data.get("suggestions"))

    async def check_compliance(
        self, content: str, rules: Optional[List[str]] = None
    ) -> ComplianceResult:
        data = await self._request_json(
            "check_compliance",
            "Falha ao verificar conformidade",
            prompts.COMPLIANCE_SYSTEM,
            prompts.compliance_prompt(content, rules),
            COMPLIANCE_MAX_TOKENS,
        )
        return normalize_compliance(data)
