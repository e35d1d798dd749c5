"""Runtime settings resolved from the environment.

See app/config_docs.py for the variable reference.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from app import config_docs
from app.exceptions import ConfigurationError

ENV_PREFIX = "BILL_SIGNING"


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


def _float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = _env(environ, name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}", {"variable": name})


def _int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = _env(environ, name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}", {"variable": name})


def normalize_base_path(raw: str) -> str:
    """Leading slash, no trailing slash; the root path becomes ""."""
    path = "/" + raw.strip("/")
    return "" if path == "/" else path


@dataclass(frozen=True)
class Settings:
    """Immutable service configuration."""

    llm_provider: str = config_docs.DEFAULT_LLM_PROVIDER
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    openai_model: str = config_docs.DEFAULT_OPENAI_MODEL
    anthropic_model: str = config_docs.DEFAULT_ANTHROPIC_MODEL
    analysis_timeout_seconds: float = config_docs.DEFAULT_ANALYSIS_TIMEOUT_SECONDS
    data_file: Optional[str] = None
    web_host: str = config_docs.DEFAULT_WEB_HOST
    web_port: int = config_docs.DEFAULT_WEB_PORT
    mcp_base_path: str = config_docs.DEFAULT_MCP_BASE_PATH
    cors_origin: str = config_docs.DEFAULT_CORS_ORIGIN
    log_level: str = config_docs.DEFAULT_LOG_LEVEL

    @property
    def analysis_timeout(self) -> Optional[float]:
        """Timeout to apply to analysis calls, or None when disabled."""
        if self.analysis_timeout_seconds <= 0:
            return None
        return self.analysis_timeout_seconds

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        return cls(
            llm_provider=(_env(env, "LLM_PROVIDER") or config_docs.DEFAULT_LLM_PROVIDER).lower(),
            openai_api_key=_env(env, "OPENAI_API_KEY"),
            anthropic_api_key=_env(env, "ANTHROPIC_API_KEY"),
            openai_model=_env(env, f"{ENV_PREFIX}_OPENAI_MODEL") or config_docs.DEFAULT_OPENAI_MODEL,
            anthropic_model=(
                _env(env, f"{ENV_PREFIX}_ANTHROPIC_MODEL") or config_docs.DEFAULT_ANTHROPIC_MODEL
            ),
            analysis_timeout_seconds=_float(
                env,
                f"{ENV_PREFIX}_ANALYSIS_TIMEOUT",
                config_docs.DEFAULT_ANALYSIS_TIMEOUT_SECONDS,
            ),
            data_file=_env(env, f"{ENV_PREFIX}_DATA_FILE"),
            web_host=_env(env, f"{ENV_PREFIX}_WEB_HOST") or config_docs.DEFAULT_WEB_HOST,
            web_port=_int(env, f"{ENV_PREFIX}_WEB_PORT", config_docs.DEFAULT_WEB_PORT),
            mcp_base_path=normalize_base_path(
                _env(env, f"{ENV_PREFIX}_MCP_BASE_PATH") or config_docs.DEFAULT_MCP_BASE_PATH
            ),
            cors_origin=_env(env, f"{ENV_PREFIX}_CORS_ORIGIN") or config_docs.DEFAULT_CORS_ORIGIN,
            log_level=(_env(env, f"{ENV_PREFIX}_LOG_LEVEL") or config_docs.DEFAULT_LOG_LEVEL).upper(),
        )

    def with_overrides(self, **overrides) -> "Settings":
        """Return a copy with command-line overrides applied (None values are skipped)."""
        values = {key: value for key, value in overrides.items() if value is not None}
        if "mcp_base_path" in values:
            values["mcp_base_path"] = normalize_base_path(values["mcp_base_path"])
        return replace(self, **values)
