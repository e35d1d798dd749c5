"""Document, signature and user models."""

from typing import List, Optional

from pydantic import Field

from .common import CamelModel, DocumentStatus, SignatureStatus


class User(CamelModel):
    id: str
    name: str
    email: str
    avatar: Optional[str] = None


class Signature(CamelModel):
    """One signer's slot on a document.

    A signature starts ``pending`` and moves to ``signed`` or ``rejected``
    exactly once.
    """

    id: str
    user_id: str
    user_name: str
    user_email: str
    status: SignatureStatus = SignatureStatus.PENDING
    signed_at: Optional[str] = None
    comment: Optional[str] = None


class Document(CamelModel):
    """A document awaiting (or done with) signatures.

    Timestamps are ISO-8601 strings, as stored by the persistence layer.
    """

    id: str
    title: str
    description: str
    status: DocumentStatus = DocumentStatus.PENDING
    created_at: str
    updated_at: str
    expires_at: Optional[str] = None
    created_by: User
    signatures: List[Signature] = Field(default_factory=list)
    file_url: Optional[str] = None

    @property
    def analysis_content(self) -> str:
        """Text handed to the analysis provider."""
        return f"{self.title}\n\n{self.description}"
