"""MCP result envelope helpers.

Every tool call answers with one text content block holding JSON:
- success: the payload, pretty-printed with two-space indentation
- error: a compact ``{"error": "<message>"}`` object with ``isError`` set
"""

from __future__ import annotations

import json
from typing import Any, Dict

from mcp.types import CallToolResult, TextContent

UNKNOWN_ERROR_MESSAGE = "Erro desconhecido"


def _json_serializer(obj: Any) -> Any:
    """Custom JSON serializer for non-standard types."""
    # Pydantic models go out with their wire (camelCase) names
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
    if hasattr(obj, "__dict__"):
        return obj.__dict__
    return str(obj)


def dump_json(payload: Any, pretty: bool = True) -> str:
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False, default=_json_serializer)
    return json.dumps(
        payload, separators=(",", ":"), ensure_ascii=False, default=_json_serializer
    )


def _json_text(payload: Any, pretty: bool = True) -> TextContent:
    return TextContent(type="text", text=dump_json(payload, pretty=pretty))


def success_result(payload: Any) -> CallToolResult:
    return CallToolResult(content=[_json_text(payload)], isError=False)


def error_result(message: str) -> CallToolResult:
    body: Dict[str, Any] = {"error": message or UNKNOWN_ERROR_MESSAGE}
    return CallToolResult(content=[_json_text(body, pretty=False)], isError=True)


def envelope_to_dict(envelope: CallToolResult) -> Dict[str, Any]:
    """Wire form of an envelope as sent by the HTTP binding."""
    return envelope.model_dump(mode="json", by_alias=True, exclude_none=True)
