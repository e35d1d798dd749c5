"""Analysis provider selection and memoization."""

from __future__ import annotations

from typing import Callable, Optional

from app.analysis.anthropic_provider import AnthropicAnalysisProvider
from app.analysis.base import AnalysisProvider
from app.analysis.openai_provider import OpenAIAnalysisProvider
from app.analysis.stand_in_provider import StandInAnalysisProvider
from app.config import Settings
from app.logger import Logger, session_logger

ANTHROPIC = "anthropic"
OPENAI = "openai"


def create_analysis_provider(settings: Settings, logger: Optional[Logger] = None) -> AnalysisProvider:
    """
    Build the analysis provider named by ``settings.llm_provider``

    A missing credential is not an error: a warning is logged and the
    deterministic stand-in is returned. Unrecognized vendor names use the
    OpenAI branch.

    Args:
        settings: Service settings
        logger: Logger instance

    Returns:
        AnalysisProvider implementation
    """
    logger = logger or session_logger

    if settings.llm_provider == ANTHROPIC:
        if not settings.anthropic_api_key:
            logger.warning("ANTHROPIC_API_KEY not configured, using stand-in analysis provider")
            return StandInAnalysisProvider()
        logger.info("Analysis provider selected", vendor=ANTHROPIC, model=settings.anthropic_model)
        return AnthropicAnalysisProvider(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_model,
            timeout=settings.analysis_timeout,
            logger=logger,
        )

    if settings.llm_provider != OPENAI:
        logger.warning(
            "Unknown LLM_PROVIDER, falling back to OpenAI", llm_provider=settings.llm_provider
        )
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY not configured, using stand-in analysis provider")
        return StandInAnalysisProvider()
    logger.info("Analysis provider selected", vendor=OPENAI, model=settings.openai_model)
    return OpenAIAnalysisProvider(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout=settings.analysis_timeout,
        logger=logger,
    )


class AnalysisProviderCache:
    """Owns the process-wide analysis provider instance.

    The provider is built on the first ``get()`` and reused afterwards.
    ``reset()`` drops it so the next ``get()`` rebuilds it, e.g. after a
    configuration change.
    """

    def __init__(
        self,
        settings: Settings,
        logger: Optional[Logger] = None,
        factory: Callable[[Settings, Logger], AnalysisProvider] = create_analysis_provider,
    ):
        self.settings = settings
        self.logger: Logger = logger or session_logger
        self._factory = factory
        self._provider: Optional[AnalysisProvider] = None

    @property
    def is_initialized(self) -> bool:
        return self._provider is not None

    def get(self) -> AnalysisProvider:
        if self._provider is None:
            try:
                self._provider = self._factory(self.settings, self.logger)
            except Exception as exc:
                self.logger.error(
                    "Failed to initialize analysis provider",
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
                raise
        return self._provider

    def reset(self, settings: Optional[Settings] = None) -> None:
        """Forget the cached provider, optionally switching to new settings."""
        if settings is not None:
            self.settings = settings
        self._provider = None
        self.logger.debug("Analysis provider cache reset")
