"""Document listing and lookup tool handlers."""

from __future__ import annotations

from typing import List

from app.mcp_server.tool_types import ToolContext
from app.mcp_server.tools.common import require_document
from app.validation.models import Document, DocumentIdInput, GetDocumentsInput, UserIdInput


async def _tool_get_documents(payload: GetDocumentsInput, context: ToolContext) -> List[Document]:
    documents = context.store.get_all_documents()
    # Falsy status (absent, "", null) means no filter
    if payload.status:
        documents = [doc for doc in documents if doc.status == payload.status]
    return documents


async def _tool_get_document(payload: DocumentIdInput, context: ToolContext) -> Document:
    return require_document(context, payload.documentId)


async def _tool_get_user_documents(payload: UserIdInput, context: ToolContext) -> List[Document]:
    return context.store.get_documents_by_user(payload.userId)
