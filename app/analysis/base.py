"""Analysis provider interface.

An analysis provider answers four questions about a document's text. All
operations are coroutines and may raise AnalysisProviderError.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.validation.models import AnalysisResult, ComplianceResult


class AnalysisProvider(ABC):
    """Capability set every analysis vendor (or stand-in) implements."""

    #: Short vendor identifier used in logs and error details
    vendor: str = "unknown"

    @abstractmethod
    async def analyze_document(self, content: str) -> AnalysisResult:
        """Structured analysis: summary, key points, risk level, suggestions."""

    @abstractmethod
    async def generate_summary(self, content: str) -> str:
        """Short professional summary."""

    @abstractmethod
    async def suggest_improvements(self, content: str) -> List[str]:
        """Actionable improvement suggestions."""

    @abstractmethod
    async def check_compliance(
        self, content: str, rules: Optional[List[str]] = None
    ) -> ComplianceResult:
        """Check the text against optional compliance rules."""
