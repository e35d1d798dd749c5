"""Analysis providers

Pluggable text-analysis backends behind one async interface:
- OpenAIAnalysisProvider / AnthropicAnalysisProvider: network-backed vendors
- StandInAnalysisProvider: deterministic answers when no credential is set
"""

from app.analysis.base import AnalysisProvider
from app.analysis.factory import AnalysisProviderCache, create_analysis_provider
from app.analysis.stand_in_provider import StandInAnalysisProvider

__all__ = [
    "AnalysisProvider",
    "AnalysisProviderCache",
    "StandInAnalysisProvider",
    "create_analysis_provider",
]
