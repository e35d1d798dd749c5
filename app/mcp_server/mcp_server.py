"""Stdio MCP server binding.

Registers the four MCP handlers on a low-level ``mcp.server.Server`` and
delegates each to the shared dispatcher or resource reader. Stdout carries
the JSON-RPC stream, so nothing here prints; all logging goes to stderr.

Unknown resource URIs answer with empty contents rather than an error
(the HTTP binding answers 404 for the same request).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from app.mcp_server.components import ServerComponents
from app.mcp_server.tool_schemas import CATALOG_VERSION

SERVER_NAME = "bill-signing-mcp-server"


def create_mcp_server(components: ServerComponents) -> Server:
    """Build the MCP server bound to the given components."""
    server: Server = Server(SERVER_NAME, version=CATALOG_VERSION)
    logger = components.logger

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return [tool.to_mcp_tool() for tool in components.dispatcher.list_tools()]

    # Arguments are validated by the dispatcher so its messages are the only
    # validation output clients see.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str, arguments: Optional[Dict[str, Any]]
    ) -> types.CallToolResult:
        result = await components.dispatcher.call_tool(name, arguments or {})
        return result.envelope

    @server.list_resources()
    async def handle_list_resources() -> List[types.Resource]:
        return [
            types.Resource(
                uri=AnyUrl(descriptor.uri),
                name=descriptor.name,
                description=descriptor.description,
                mimeType=descriptor.mimeType,
            )
            for descriptor in components.resource_reader.list_resources()
        ]

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl) -> List[ReadResourceContents]:
        contents = components.resource_reader.read_resource(str(uri))
        if contents is None:
            return []
        return [ReadResourceContents(content=contents.text, mime_type=contents.mimeType)]

    logger.debug("MCP handlers registered", server=SERVER_NAME, version=CATALOG_VERSION)
    return server


async def run_stdio(server: Server) -> None:
    """Serve newline-delimited JSON-RPC on stdin/stdout until EOF."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
