"""Deterministic analysis provider used when no vendor credential is configured.

Answers are fixed and well-typed so every tool stays callable without
network access.
"""

from typing import List, Optional

from app.analysis.base import AnalysisProvider
from app.validation.models import AnalysisResult, ComplianceResult, RiskLevel

CONFIGURE_HINT = "Configure OPENAI_API_KEY ou ANTHROPIC_API_KEY"


class StandInAnalysisProvider(AnalysisProvider):
    vendor = "stand-in"

    async def analyze_document(self, content: str) -> AnalysisResult:
        return AnalysisResult(
            summary="Análise mock - configure uma API key para análise real",
            key_points=["Ponto 1", "Ponto 2"],
            risk_level=RiskLevel.MEDIUM,
            suggestions=[CONFIGURE_HINT],
            estimated_reading_time=5,
        )

    async def generate_summary(self, content: str) -> str:
        return "Resumo mock - configure uma API key para resumo real"

    async def suggest_improvements(self, content: str) -> List[str]:
        return [f"{CONFIGURE_HINT} para sugestões reais"]

    async def check_compliance(
        self, content: str, rules: Optional[List[str]] = None
    ) -> ComplianceResult:
        return ComplianceResult(
            compliant=True,
            issues=["Configure uma API key para verificação real"],
        )
