"""Analysis provider exceptions."""

from typing import Any, Dict, Optional

from app.exceptions.base import BillSigningError


class AnalysisProviderError(BillSigningError):
    """Raised when an analysis vendor call fails or returns an unusable reply."""

    def __init__(
        self, message: str, vendor: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            code="ANALYSIS_PROVIDER_ERROR",
            message=message,
            details={"vendor": vendor, **(details or {})},
        )
        self.vendor = vendor


class AnalysisTimeoutError(AnalysisProviderError):
    """Raised when an analysis call exceeds the configured timeout."""

    def __init__(self, operation: str, timeout_seconds: float):
        super().__init__(
            message=(
                f"Tempo limite excedido ao executar {operation} "
                f"({timeout_seconds:g}s)"
            ),
            vendor="unknown",
            details={"operation": operation, "timeout_seconds": timeout_seconds},
        )
        self.code = "ANALYSIS_TIMEOUT"
        self.operation = operation
        self.timeout_seconds = timeout_seconds
