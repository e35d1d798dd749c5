"""Validation module for the bill-signing service.

Validation happens through Pydantic models: document models validate data
loaded by the stores, and per-tool input models validate MCP arguments.
"""

from app.validation.models import *  # noqa: F401,F403
from app.validation.models import __all__  # noqa: F401
