"""MCP facade: tool catalog, dispatcher, resources and the stdio binding."""

from app.mcp_server.components import ServerComponents, initialize_components
from app.mcp_server.mcp_server import create_mcp_server, run_stdio
from app.mcp_server.routing import ToolDispatcher
from app.mcp_server.tool_schemas import CATALOG_VERSION, TOOL_DEFINITIONS, list_tools
from app.mcp_server.tool_types import ErrorCategory, ToolCallResult

__all__ = [
    "CATALOG_VERSION",
    "ErrorCategory",
    "ServerComponents",
    "TOOL_DEFINITIONS",
    "ToolCallResult",
    "ToolDispatcher",
    "create_mcp_server",
    "initialize_components",
    "list_tools",
    "run_stdio",
]
