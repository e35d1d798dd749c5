"""Analysis tool handlers.

Each handler resolves the document first, so a missing document never
reaches the analysis provider.
"""

from __future__ import annotations

from typing import Dict, List

from app.mcp_server.tool_types import ToolContext
from app.mcp_server.tools.common import require_document
from app.validation.models import (
    AnalysisResult,
    CheckComplianceInput,
    ComplianceResult,
    DocumentIdInput,
)


async def _tool_analyze_document(payload: DocumentIdInput, context: ToolContext) -> AnalysisResult:
    document = require_document(context, payload.documentId)
    provider = context.provider
    return await context.run_analysis(
        "analyze_document", provider.analyze_document(document.analysis_content)
    )


async def _tool_generate_document_summary(
    payload: DocumentIdInput, context: ToolContext
) -> Dict[str, str]:
    document = require_document(context, payload.documentId)
    provider = context.provider
    summary = await context.run_analysis(
        "generate_summary", provider.generate_summary(document.analysis_content)
    )
    return {"summary": summary}


async def _tool_suggest_document_improvements(
    payload: DocumentIdInput, context: ToolContext
) -> Dict[str, List[str]]:
    document = require_document(context, payload.documentId)
    provider = context.provider
    suggestions = await context.run_analysis(
        "suggest_improvements", provider.suggest_improvements(document.analysis_content)
    )
    return {"suggestions": suggestions}


async def _tool_check_document_compliance(
    payload: CheckComplianceInput, context: ToolContext
) -> ComplianceResult:
    document = require_document(context, payload.documentId)
    provider = context.provider
    return await context.run_analysis(
        "check_compliance",
        provider.check_compliance(document.analysis_content, payload.rules),
    )
