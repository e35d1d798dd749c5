"""Analysis provider result models."""

from typing import List, Optional, Union

from pydantic import Field

from .common import CamelModel, RiskLevel


class AnalysisResult(CamelModel):
    summary: str = ""
    key_points: List[str] = Field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.MEDIUM
    suggestions: List[str] = Field(default_factory=list)
    estimated_reading_time: Optional[Union[int, float]] = None


class ComplianceResult(CamelModel):
    compliant: bool = True
    issues: List[str] = Field(default_factory=list)
