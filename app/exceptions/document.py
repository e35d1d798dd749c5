"""Document and signature exceptions."""

from typing import Any, Dict, Optional

from app.exceptions.base import ResourceNotFoundError, ValidationError


class DocumentNotFoundError(ResourceNotFoundError):
    """Raised when a document id matches nothing in the store."""

    def __init__(self, document_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="DOCUMENT_NOT_FOUND",
            message="Documento não encontrado",
            details={"document_id": document_id, **(details or {})},
        )
        self.document_id = document_id


class SignatureNotFoundError(ResourceNotFoundError):
    """Raised when a signature id is not part of the document."""

    def __init__(self, document_id: str, signature_id: str):
        super().__init__(
            code="SIGNATURE_NOT_FOUND",
            message="Assinatura não encontrada",
            details={"document_id": document_id, "signature_id": signature_id},
        )
        self.document_id = document_id
        self.signature_id = signature_id


class InvalidSignatureStateError(ValidationError):
    """Raised when a signature that already left ``pending`` is changed again."""

    def __init__(self, signature_id: str, current_status: str):
        super().__init__(
            code="INVALID_SIGNATURE_STATE",
            message=f"Assinatura já processada (status atual: {current_status})",
            details={"signature_id": signature_id, "current_status": current_status},
        )
        self.signature_id = signature_id
        self.current_status = current_status
