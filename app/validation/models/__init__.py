"""Document signing models.

This package contains the Pydantic models used by the service, organized by
logical grouping:
- common.py: Base model and status enums
- documents.py: Document, signature and user models
- analysis.py: Analysis provider results
- inputs.py: Input models for MCP tools
- outputs.py: Output models for MCP tools and resources
"""

from .analysis import AnalysisResult, ComplianceResult
from .common import CamelModel, DocumentStatus, RiskLevel, SignatureStatus
from .documents import Document, Signature, User
from .inputs import (
    CheckComplianceInput,
    DocumentIdInput,
    GetDocumentsInput,
    NoArgumentsInput,
    ToolInput,
    UserIdInput,
)
from .outputs import (
    JSON_MIME_TYPE,
    PendingSignatureItem,
    ResourceContents,
    ResourceDescriptor,
    ToolDescriptor,
)

__all__ = [
    "AnalysisResult",
    "CamelModel",
    "CheckComplianceInput",
    "ComplianceResult",
    "Document",
    "DocumentIdInput",
    "DocumentStatus",
    "GetDocumentsInput",
    "JSON_MIME_TYPE",
    "NoArgumentsInput",
    "PendingSignatureItem",
    "ResourceContents",
    "ResourceDescriptor",
    "RiskLevel",
    "Signature",
    "SignatureStatus",
    "ToolDescriptor",
    "ToolInput",
    "User",
    "UserIdInput",
]
