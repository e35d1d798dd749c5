"""In-memory document store

Keeps documents in an insertion-ordered dict guarded by a re-entrant lock.
Reads hand out deep copies so callers can never mutate the collection.
"""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from app.exceptions import (
    DocumentNotFoundError,
    InvalidSignatureStateError,
    SignatureNotFoundError,
)
from app.logger import Logger, session_logger
from app.storage.base import DocumentStoreBase
from app.validation.models import Document, DocumentStatus, SignatureStatus


def utc_now_iso() -> str:
    """Current UTC time in the ISO-8601 form used for document timestamps."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class InMemoryDocumentStore(DocumentStoreBase):
    """Document store held entirely in process memory"""

    def __init__(
        self, documents: Optional[Iterable[Document]] = None, logger: Optional[Logger] = None
    ):
        self.logger: Logger = logger or session_logger
        self._lock = threading.RLock()
        self._documents: Dict[str, Document] = {}
        for document in documents or []:
            self._documents[document.id] = document.model_copy(deep=True)
        self.logger.debug("In-memory store initialized", documents_count=len(self._documents))

    def __len__(self) -> int:
        return len(self._documents)

    def get_all_documents(self) -> List[Document]:
        with self._lock:
            return [doc.model_copy(deep=True) for doc in self._documents.values()]

    def get_document_by_id(self, document_id: str) -> Optional[Document]:
        with self._lock:
            document = self._documents.get(document_id)
            return document.model_copy(deep=True) if document else None

    def create_document(self, document: Document) -> Document:
        with self._lock:
            if document.id in self._documents:
                raise ValueError(f"Document '{document.id}' already exists")
            staged = dict(self._documents)
            staged[document.id] = document.model_copy(deep=True)
            self._commit(staged)
        self.logger.info("Document created", document_id=document.id)
        return document.model_copy(deep=True)

    def update_document(self, document_id: str, updates: Dict[str, Any]) -> Optional[Document]:
        with self._lock:
            existing = self._documents.get(document_id)
            if existing is None:
                return None
            merged = existing.model_dump(by_alias=True)
            for key, value in updates.items():
                field = Document.model_fields.get(key)
                merged[field.alias if field and field.alias else key] = value
            merged["id"] = document_id
            merged["updatedAt"] = utc_now_iso()
            updated = Document.model_validate(merged)
            staged = dict(self._documents)
            staged[document_id] = updated
            self._commit(staged)
        self.logger.info("Document updated", document_id=document_id, fields=sorted(updates))
        return updated.model_copy(deep=True)

    def delete_document(self, document_id: str) -> bool:
        with self._lock:
            staged = dict(self._documents)
            removed = staged.pop(document_id, None)
            if removed is not None:
                self._commit(staged)
        if removed is not None:
            self.logger.info("Document deleted", document_id=document_id)
        return removed is not None

    def apply_signature(
        self,
        document_id: str,
        signature_id: str,
        status: SignatureStatus,
        comment: Optional[str] = None,
    ) -> Document:
        if status == SignatureStatus.PENDING:
            raise ValueError("A signature can only be signed or rejected")

        with self._lock:
            existing = self._documents.get(document_id)
            if existing is None:
                raise DocumentNotFoundError(document_id)

            document = existing.model_copy(deep=True)
            signature = next((sig for sig in document.signatures if sig.id == signature_id), None)
            if signature is None:
                raise SignatureNotFoundError(document_id, signature_id)
            if signature.status != SignatureStatus.PENDING:
                raise InvalidSignatureStateError(signature_id, signature.status.value)

            now = utc_now_iso()
            signature.status = status
            signature.comment = comment
            if status == SignatureStatus.SIGNED:
                signature.signed_at = now

            if status == SignatureStatus.REJECTED:
                document.status = DocumentStatus.REJECTED
            elif all(sig.status == SignatureStatus.SIGNED for sig in document.signatures):
                document.status = DocumentStatus.SIGNED
            document.updated_at = now

            staged = dict(self._documents)
            staged[document_id] = document
            self._commit(staged)

        self.logger.info(
            "Signature applied",
            document_id=document_id,
            signature_id=signature_id,
            signature_status=status.value,
            document_status=document.status.value,
        )
        return document.model_copy(deep=True)

    def _commit(self, staged: Dict[str, Document]) -> None:
        """Persist ``staged`` and make it the live collection; called under the lock.

        The live collection is replaced only once persisting succeeded, so a
        failed write leaves the store unchanged.
        """
        self._persist(staged)
        self._documents = staged

    def _persist(self, documents: Dict[str, Document]) -> None:
        """Hook for subclasses that write the collection somewhere."""
        pass
