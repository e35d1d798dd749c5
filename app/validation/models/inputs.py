"""Input models for MCP tools.

Each model is the validator of one tool: arguments arrive as untyped JSON
and are checked here before any collaborator is touched. Field names match
the wire names, and unknown keys are ignored.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class ToolInput(BaseModel):
    """Base class for tool input models."""

    model_config = ConfigDict(extra="ignore")  # Ignore extra fields from MCP


class NoArgumentsInput(ToolInput):
    """Input for tools that take no arguments (get_pending_signatures)."""

    pass


class GetDocumentsInput(ToolInput):
    """Input for get_documents.

    Args:
        status: Optional exact-match status filter. Applied only when truthy;
            a value that is not a known status simply matches nothing.
    """

    status: Optional[Any] = None


class DocumentIdInput(ToolInput):
    """Input for tools addressing one document.

    Args:
        documentId: Non-empty document identifier
    """

    documentId: StrictStr = Field(min_length=1)


class CheckComplianceInput(DocumentIdInput):
    """Input for check_document_compliance.

    Args:
        documentId: Non-empty document identifier
        rules: Optional rule list passed to the provider unchanged. Anything
            that is not a list is treated as absent.
    """

    rules: Optional[List[Any]] = None

    @field_validator("rules", mode="before")
    @classmethod
    def _drop_non_list_rules(cls, value: Any) -> Optional[List[Any]]:
        return value if isinstance(value, list) else None


class UserIdInput(ToolInput):
    """Input for get_user_documents.

    Args:
        userId: Non-empty user identifier
    """

    userId: StrictStr = Field(min_length=1)
