"""Base interface for document stores

Defines the abstract interface that all document store implementations must
follow. The MCP dispatch layer only reads through ``get_all_documents`` and
``get_document_by_id``; the mutation methods serve the surrounding
document workflow.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from app.validation.models import Document, DocumentStatus, SignatureStatus


class DocumentStoreBase(ABC):
    """Abstract base class for document store implementations"""

    @abstractmethod
    def get_all_documents(self) -> List[Document]:
        """
        List every document in insertion order

        Returns:
            Copies of the stored documents
        """
        pass

    @abstractmethod
    def get_document_by_id(self, document_id: str) -> Optional[Document]:
        """
        Retrieve a document by identifier

        Args:
            document_id: Document identifier

        Returns:
            Copy of the document, or None if not found
        """
        pass

    def get_documents_by_user(self, user_id: str) -> List[Document]:
        """List documents created by ``user_id``."""
        return [doc for doc in self.get_all_documents() if doc.created_by.id == user_id]

    def get_documents_by_status(self, status: DocumentStatus) -> List[Document]:
        """List documents with the given status."""
        return [doc for doc in self.get_all_documents() if doc.status == status]

    @abstractmethod
    def create_document(self, document: Document) -> Document:
        """
        Store a new document

        Args:
            document: Document to store (its id must be unused)

        Returns:
            The stored document

        Raises:
            ValueError: If a document with the same id already exists
        """
        pass

    @abstractmethod
    def update_document(self, document_id: str, updates: Dict[str, Any]) -> Optional[Document]:
        """
        Apply field updates to a document and refresh ``updated_at``

        Args:
            document_id: Document identifier
            updates: Field values keyed by Python (snake_case) or wire (camelCase) name

        Returns:
            The updated document, or None if not found
        """
        pass

    @abstractmethod
    def delete_document(self, document_id: str) -> bool:
        """
        Delete a document

        Returns:
            True if deleted, False if not found
        """
        pass

    @abstractmethod
    def apply_signature(
        self,
        document_id: str,
        signature_id: str,
        status: SignatureStatus,
        comment: Optional[str] = None,
    ) -> Document:
        """
        Atomically sign or reject one signature of a document

        The read-modify-write of the signature list happens under the
        store's lock, so concurrent calls on the same document never lose
        an update.

        Args:
            document_id: Document identifier
            signature_id: Signature identifier within the document
            status: SignatureStatus.SIGNED or SignatureStatus.REJECTED
            comment: Optional signer comment

        Returns:
            The updated document

        Raises:
            DocumentNotFoundError: If the document does not exist
            SignatureNotFoundError: If the signature is not on the document
            InvalidSignatureStateError: If the signature is no longer pending
            ValueError: If status is PENDING
        """
        pass
