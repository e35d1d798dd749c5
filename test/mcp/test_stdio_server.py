"""Tests for the stdio MCP server binding, driven through an in-memory client session."""

import json

import pytest
from mcp.shared.memory import create_connected_server_and_client_session
from mcp.types import TextContent
from pydantic import AnyUrl

from app.mcp_server import create_mcp_server
from app.mcp_server.mcp_server import SERVER_NAME


def _extract_text(result) -> str:
    """Extract text from MCP tool result."""
    content = result.content[0]
    assert isinstance(content, TextContent)
    return content.text


@pytest.fixture
def server(components):
    return create_mcp_server(components)


class TestStdioTools:
    @pytest.mark.asyncio
    async def test_server_identity(self, server):
        assert server.name == SERVER_NAME == "bill-signing-mcp-server"
        assert server.version == "1.0.0"

    @pytest.mark.asyncio
    async def test_list_tools(self, server):
        async with create_connected_server_and_client_session(server) as session:
            first = await session.list_tools()
            second = await session.list_tools()

        names = [tool.name for tool in first.tools]
        assert names[0] == "get_documents"
        assert names[-1] == "get_user_documents"
        assert len(names) == 8
        assert [t.model_dump() for t in first.tools] == [t.model_dump() for t in second.tools]

    @pytest.mark.asyncio
    async def test_call_tool_success(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.call_tool("get_document", {"documentId": "doc-1"})

        assert not result.isError
        assert json.loads(_extract_text(result))["id"] == "doc-1"

    @pytest.mark.asyncio
    async def test_call_tool_not_found(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.call_tool("get_document", {"documentId": "missing"})

        assert result.isError is True
        assert json.loads(_extract_text(result)) == {"error": "Documento não encontrado"}

    @pytest.mark.asyncio
    async def test_dispatcher_messages_are_the_only_validation_output(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.call_tool("get_document", {})

        assert result.isError is True
        assert json.loads(_extract_text(result)) == {"error": "documentId é obrigatório"}

    @pytest.mark.asyncio
    async def test_unknown_tool(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.call_tool("nope", {})

        assert result.isError is True
        assert json.loads(_extract_text(result)) == {"error": "Ferramenta desconhecida: nope"}

    @pytest.mark.asyncio
    async def test_provider_failure_does_not_break_session(self, server, spy_provider):
        spy_provider.analyze_document.side_effect = Exception("boom")

        async with create_connected_server_and_client_session(server) as session:
            failed = await session.call_tool("analyze_document", {"documentId": "doc-1"})
            after = await session.call_tool("get_documents", {})

        assert failed.isError is True
        assert "boom" in json.loads(_extract_text(failed))["error"]
        assert not after.isError


class TestStdioResources:
    @pytest.mark.asyncio
    async def test_list_resources(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.list_resources()

        assert [str(r.uri) for r in result.resources] == ["documents://all", "documents://pending"]
        assert [r.mimeType for r in result.resources] == ["application/json"] * 2

    @pytest.mark.asyncio
    async def test_read_all_documents(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.read_resource(AnyUrl("documents://all"))

        assert len(result.contents) == 1
        assert result.contents[0].mimeType == "application/json"
        assert len(json.loads(result.contents[0].text)) == 4

    @pytest.mark.asyncio
    async def test_read_pending_documents(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.read_resource(AnyUrl("documents://pending"))

        documents = json.loads(result.contents[0].text)
        assert {doc["id"] for doc in documents} == {"doc-1", "doc-3"}

    @pytest.mark.asyncio
    async def test_unknown_resource_has_empty_contents(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.read_resource(AnyUrl("unknown://x"))

        assert result.contents == []
