"""Custom exceptions for the bill-signing service.

All exceptions carry a message meant to be shown to callers as-is, so MCP
clients and the HTTP frontend receive the same wording.
"""

from app.exceptions.base import (
    BillSigningError,
    ConfigurationError,
    ResourceNotFoundError,
    ValidationError,
)
from app.exceptions.analysis import AnalysisProviderError, AnalysisTimeoutError
from app.exceptions.document import (
    DocumentNotFoundError,
    InvalidSignatureStateError,
    SignatureNotFoundError,
)
from app.exceptions.tool import InvalidToolArgumentsError, UnknownToolError

__all__ = [
    # Base exceptions
    "BillSigningError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    # Specific exceptions
    "DocumentNotFoundError",
    "SignatureNotFoundError",
    "InvalidSignatureStateError",
    "UnknownToolError",
    "InvalidToolArgumentsError",
    "AnalysisProviderError",
    "AnalysisTimeoutError",
]
