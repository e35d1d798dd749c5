"""Centralized configuration documentation and defaults for the bill-signing service.

This module provides a comprehensive overview of all configuration options
and their environment variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# Analysis provider
# -----------------
# LLM_PROVIDER: Analysis vendor selector (default: openai)
#   Values: "openai", "anthropic". Any other value uses the OpenAI branch.
# OPENAI_API_KEY: OpenAI credential. Missing -> deterministic stand-in provider
# ANTHROPIC_API_KEY: Anthropic credential. Missing -> deterministic stand-in provider
# BILL_SIGNING_OPENAI_MODEL: OpenAI chat model (default: gpt-4o-mini)
# BILL_SIGNING_ANTHROPIC_MODEL: Anthropic model (default: claude-3-5-sonnet-20241022)
# BILL_SIGNING_ANALYSIS_TIMEOUT: Seconds to wait for one analysis call (default: 60)
#   A value <= 0 disables the timeout.
#
# Data
# ----
# BILL_SIGNING_DATA_FILE: JSON file holding the document collection
#   Unset: bundled sample documents are loaded into memory (nothing persisted)
#
# HTTP server
# -----------
# BILL_SIGNING_WEB_HOST: Bind address (default: 0.0.0.0)
# BILL_SIGNING_WEB_PORT: Bind port (default: 3001)
# BILL_SIGNING_MCP_BASE_PATH: Mount point of the MCP routes (default: /api/mcp)
# BILL_SIGNING_CORS_ORIGIN: Frontend origin allowed by CORS (default: http://localhost:5173)
#
# Development
# -----------
# BILL_SIGNING_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

DEFAULT_LLM_PROVIDER = "openai"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_ANTHROPIC_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_ANALYSIS_TIMEOUT_SECONDS = 60.0

DEFAULT_WEB_HOST = "0.0.0.0"
DEFAULT_WEB_PORT = 3001
DEFAULT_MCP_BASE_PATH = "/api/mcp"
DEFAULT_CORS_ORIGIN = "http://localhost:5173"
DEFAULT_LOG_LEVEL = "INFO"

# =============================================================================
# CONFIGURATION HELPER FUNCTIONS
# =============================================================================


def get_config_summary(settings=None) -> dict:
    """Get a summary of the current configuration.

    Credentials are reported only as present/absent.

    Args:
        settings: Settings instance (defaults to Settings.from_env())

    Returns:
        Dictionary with current configuration values
    """
    from app.config import Settings

    settings = settings or Settings.from_env()
    return {
        "llm_provider": settings.llm_provider,
        "openai_api_key_set": bool(settings.openai_api_key),
        "anthropic_api_key_set": bool(settings.anthropic_api_key),
        "openai_model": settings.openai_model,
        "anthropic_model": settings.anthropic_model,
        "analysis_timeout_seconds": settings.analysis_timeout_seconds,
        "data_file": settings.data_file or "(bundled sample data)",
        "web_host": settings.web_host,
        "web_port": settings.web_port,
        "mcp_base_path": settings.mcp_base_path,
        "cors_origin": settings.cors_origin,
        "log_level": settings.log_level,
    }
