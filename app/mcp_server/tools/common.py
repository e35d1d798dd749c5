from __future__ import annotations

from app.exceptions import DocumentNotFoundError
from app.mcp_server.tool_types import ToolContext
from app.validation.models import Document


def require_document(context: ToolContext, document_id: str) -> Document:
    """Fetch a document or raise DocumentNotFoundError.

    Args:
        context: Tool context holding the store
        document_id: Document identifier (already validated as non-empty)

    Returns:
        The stored document
    """
    document = context.store.get_document_by_id(document_id)
    if document is None:
        raise DocumentNotFoundError(document_id)
    return document
