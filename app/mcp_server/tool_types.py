"""Shared types for tool handlers and dispatch."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar

from mcp.types import CallToolResult

from app.analysis import AnalysisProvider, AnalysisProviderCache
from app.exceptions import AnalysisTimeoutError
from app.logger import Logger
from app.storage.base import DocumentStoreBase
from app.validation.models import ToolInput

T = TypeVar("T")


class ErrorCategory(str, Enum):
    """Why a tool call failed; each binding maps it to its own status channel."""

    MALFORMED_REQUEST = "malformed_request"
    NOT_FOUND = "not_found"
    DOWNSTREAM_FAILURE = "downstream_failure"


HTTP_STATUS_BY_CATEGORY: Dict[ErrorCategory, int] = {
    ErrorCategory.MALFORMED_REQUEST: 400,
    ErrorCategory.NOT_FOUND: 404,
    ErrorCategory.DOWNSTREAM_FAILURE: 500,
}


@dataclass(frozen=True)
class ToolCallResult:
    envelope: CallToolResult
    category: Optional[ErrorCategory] = None

    @property
    def is_error(self) -> bool:
        return bool(self.envelope.isError)

    @property
    def http_status(self) -> int:
        if self.category is None:
            return 200
        return HTTP_STATUS_BY_CATEGORY[self.category]


@dataclass
class ToolContext:
    """Collaborators available to a tool handler."""

    store: DocumentStoreBase
    provider_cache: AnalysisProviderCache
    logger: Logger
    analysis_timeout: Optional[float] = None

    @property
    def provider(self) -> AnalysisProvider:
        return self.provider_cache.get()

    async def run_analysis(self, operation: str, call: Awaitable[T]) -> T:
        """Await an analysis call, bounded by the configured timeout."""
        if self.analysis_timeout is None:
            return await call
        try:
            return await asyncio.wait_for(call, timeout=self.analysis_timeout)
        except asyncio.TimeoutError as exc:
            raise AnalysisTimeoutError(operation, self.analysis_timeout) from exc


ToolHandler = Callable[[ToolInput, ToolContext], Awaitable[Any]]
