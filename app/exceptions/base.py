"""Base exception classes for the bill-signing service.

Every domain error carries a machine readable ``code``, a human readable
``message`` (surfaced verbatim to MCP and HTTP callers) and optional
``details``.
"""

from typing import Any, Dict, Optional


class BillSigningError(Exception):
    """Root of all domain errors raised by the service."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(BillSigningError):
    """Malformed request: bad arguments, unknown names, illegal transitions."""

    pass


class ResourceNotFoundError(BillSigningError):
    """The addressed entity does not exist."""

    pass


class ConfigurationError(BillSigningError):
    """Invalid service configuration detected at startup."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="INVALID_CONFIGURATION", message=message, details=details)
