"""Signature tool handlers."""

from __future__ import annotations

from typing import List

from app.mcp_server.tool_types import ToolContext
from app.validation.models import (
    NoArgumentsInput,
    PendingSignatureItem,
    SignatureStatus,
)


async def _tool_get_pending_signatures(
    payload: NoArgumentsInput, context: ToolContext
) -> List[PendingSignatureItem]:
    """Flatten pending signatures across all documents, in store order."""
    return [
        PendingSignatureItem(documentId=doc.id, documentTitle=doc.title, signature=signature)
        for doc in context.store.get_all_documents()
        for signature in doc.signatures
        if signature.status == SignatureStatus.PENDING
    ]
