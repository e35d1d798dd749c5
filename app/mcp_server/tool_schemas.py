"""MCP tool catalog for the bill signing service.

Each tool is one ToolDefinition: its public schema plus the input model that
validates arguments and the handler that produces the payload. The catalog
order is the order clients see in list_tools; adding a tool means appending
one definition here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Type

from mcp.types import Tool

from app.mcp_server.tool_types import ToolHandler
from app.mcp_server.tools.analysis import (
    _tool_analyze_document,
    _tool_check_document_compliance,
    _tool_generate_document_summary,
    _tool_suggest_document_improvements,
)
from app.mcp_server.tools.documents import (
    _tool_get_document,
    _tool_get_documents,
    _tool_get_user_documents,
)
from app.mcp_server.tools.signatures import _tool_get_pending_signatures
from app.validation.models import (
    CheckComplianceInput,
    DocumentIdInput,
    GetDocumentsInput,
    NoArgumentsInput,
    ToolDescriptor,
    ToolInput,
    UserIdInput,
)

CATALOG_VERSION = "1.0.0"


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Dict[str, Any]
    input_model: Type[ToolInput]
    handler: ToolHandler

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(
            name=self.name, description=self.description, inputSchema=self.input_schema
        )

    def to_mcp_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


def _document_id_schema(description: str) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "documentId": {"type": "string", "description": description},
        },
        "required": ["documentId"],
    }


TOOL_DEFINITIONS: List[ToolDefinition] = [
    ToolDefinition(
        name="get_documents",
        description="Lista todos os documentos do sistema de assinatura",
        input_schema={
            "type": "object",
            "properties": {
                "status": {
                    "type": "string",
                    "enum": ["pending", "signed", "rejected", "expired"],
                    "description": "Filtrar documentos por status (opcional)",
                },
            },
        },
        input_model=GetDocumentsInput,
        handler=_tool_get_documents,
    ),
    ToolDefinition(
        name="get_document",
        description="Obtém detalhes de um documento específico por ID",
        input_schema=_document_id_schema("ID do documento"),
        input_model=DocumentIdInput,
        handler=_tool_get_document,
    ),
    ToolDefinition(
        name="analyze_document",
        description=(
            "Analisa um documento usando LLM para extrair insights, pontos-chave e sugestões"
        ),
        input_schema=_document_id_schema("ID do documento a ser analisado"),
        input_model=DocumentIdInput,
        handler=_tool_analyze_document,
    ),
    ToolDefinition(
        name="generate_document_summary",
        description="Gera um resumo inteligente de um documento usando LLM",
        input_schema=_document_id_schema("ID do documento"),
        input_model=DocumentIdInput,
        handler=_tool_generate_document_summary,
    ),
    ToolDefinition(
        name="suggest_document_improvements",
        description="Sugere melhorias para um documento usando análise de LLM",
        input_schema=_document_id_schema("ID do documento"),
        input_model=DocumentIdInput,
        handler=_tool_suggest_document_improvements,
    ),
    ToolDefinition(
        name="check_document_compliance",
        description="Verifica conformidade de um documento com regras específicas usando LLM",
        input_schema={
            "type": "object",
            "properties": {
                "documentId": {"type": "string", "description": "ID do documento"},
                "rules": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Lista de regras de conformidade a verificar (opcional)",
                },
            },
            "required": ["documentId"],
        },
        input_model=CheckComplianceInput,
        handler=_tool_check_document_compliance,
    ),
    ToolDefinition(
        name="get_pending_signatures",
        description="Lista todas as assinaturas pendentes no sistema",
        input_schema={"type": "object", "properties": {}},
        input_model=NoArgumentsInput,
        handler=_tool_get_pending_signatures,
    ),
    ToolDefinition(
        name="get_user_documents",
        description="Lista documentos criados por um usuário específico",
        input_schema={
            "type": "object",
            "properties": {
                "userId": {"type": "string", "description": "ID do usuário"},
            },
            "required": ["userId"],
        },
        input_model=UserIdInput,
        handler=_tool_get_user_documents,
    ),
]

TOOL_REGISTRY: Dict[str, ToolDefinition] = {tool.name: tool for tool in TOOL_DEFINITIONS}


def list_tools() -> List[ToolDefinition]:
    """The catalog, in its fixed order."""
    return list(TOOL_DEFINITIONS)
