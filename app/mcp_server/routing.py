"""Tool routing and dispatch for the MCP service.

The dispatcher is the single boundary between transports and collaborators:
whatever happens inside a handler comes back as a ToolCallResult, never as
an exception.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from app.exceptions import (
    BillSigningError,
    InvalidToolArgumentsError,
    ResourceNotFoundError,
    UnknownToolError,
    ValidationError,
)
from app.logger import Logger
from app.mcp_server.responses import error_result, success_result
from app.mcp_server.tool_schemas import TOOL_REGISTRY, ToolDefinition
from app.mcp_server.tool_types import ErrorCategory, ToolCallResult, ToolContext

TOOL_NAME_REQUIRED_MESSAGE = "Nome da ferramenta é obrigatório"


def _category_for(exc: BillSigningError) -> ErrorCategory:
    if isinstance(exc, ValidationError):
        return ErrorCategory.MALFORMED_REQUEST
    if isinstance(exc, ResourceNotFoundError):
        return ErrorCategory.NOT_FOUND
    return ErrorCategory.DOWNSTREAM_FAILURE


class ToolDispatcher:
    """Validates and executes tool calls against the catalog."""

    def __init__(
        self,
        context: ToolContext,
        registry: Optional[Dict[str, ToolDefinition]] = None,
    ):
        self.context = context
        self.registry = registry if registry is not None else TOOL_REGISTRY

    @property
    def logger(self) -> Logger:
        return self.context.logger

    def list_tools(self) -> List[ToolDefinition]:
        """The tools this dispatcher serves, in catalog order."""
        return list(self.registry.values())

    @staticmethod
    def missing_name() -> ToolCallResult:
        """Result for an invocation request that carries no usable tool name."""
        return ToolCallResult(
            envelope=error_result(TOOL_NAME_REQUIRED_MESSAGE),
            category=ErrorCategory.MALFORMED_REQUEST,
        )

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolCallResult:
        arguments = arguments if isinstance(arguments, dict) else {}
        self.logger.info("Tool invocation started", tool=name, args_keys=list(arguments.keys()))

        try:
            tool = self.registry.get(name)
            if tool is None:
                self.logger.error(
                    "Unknown tool requested", tool=name, available_tools=list(self.registry)
                )
                raise UnknownToolError(name, list(self.registry))

            try:
                payload = tool.input_model.model_validate(arguments)
            except PydanticValidationError as exc:
                self.logger.error(
                    "Validation error",
                    tool=name,
                    error_count=len(exc.errors()),
                    errors=[{"loc": e["loc"], "msg": e["msg"], "type": e["type"]} for e in exc.errors()],
                )
                raise InvalidToolArgumentsError.from_validation_error(name, exc) from exc

            result = await tool.handler(payload, self.context)
        except BillSigningError as exc:
            category = _category_for(exc)
            self.logger.error(
                "Domain error",
                tool=name,
                error_code=exc.code,
                error_type=type(exc).__name__,
                error_message=str(exc),
                category=category.value,
            )
            return ToolCallResult(envelope=error_result(str(exc)), category=category)
        except Exception as exc:
            self.logger.error(
                "Unexpected tool failure",
                tool=name,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return ToolCallResult(
                envelope=error_result(str(exc)), category=ErrorCategory.DOWNSTREAM_FAILURE
            )

        self.logger.info("Tool completed successfully", tool=name)
        return ToolCallResult(envelope=success_result(result))
