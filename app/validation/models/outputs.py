"""Output models for MCP tools and resources."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from .documents import Signature

JSON_MIME_TYPE = "application/json"


class PendingSignatureItem(BaseModel):
    """Entry of the get_pending_signatures payload."""

    documentId: str
    documentTitle: str
    signature: Signature


class ToolDescriptor(BaseModel):
    """Public description of a catalog tool."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias="inputSchema")


class ResourceDescriptor(BaseModel):
    """Public description of a URI-addressed resource."""

    model_config = ConfigDict(frozen=True)

    uri: str
    name: str
    description: str
    mimeType: str = JSON_MIME_TYPE


class ResourceContents(BaseModel):
    """One block of resource content."""

    uri: str
    mimeType: str = JSON_MIME_TYPE
    text: str
