"""Pytest configuration and fixtures

Shared fixtures: a small document set, an in-memory store, a spy analysis
provider and the server components wired around them. Every test gets fresh
instances, so nothing leaks between tests.
"""

import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.analysis import AnalysisProvider, AnalysisProviderCache
from app.config import Settings
from app.logger import Logger, session_logger
from app.mcp_server import ServerComponents, initialize_components
from app.storage import InMemoryDocumentStore
from app.validation.models import AnalysisResult, ComplianceResult, Document, RiskLevel

TIMESTAMP = "2025-01-15T10:00:00.000Z"


def build_document(
    document_id: str,
    *,
    title: str = "Contrato",
    description: str = "Descrição",
    status: str = "pending",
    created_by: str = "user-1",
    signatures: Optional[List[Dict[str, Any]]] = None,
) -> Document:
    return Document.model_validate(
        {
            "id": document_id,
            "title": title,
            "description": description,
            "status": status,
            "createdAt": TIMESTAMP,
            "updatedAt": TIMESTAMP,
            "createdBy": {"id": created_by, "name": created_by, "email": f"{created_by}@example.com"},
            "signatures": signatures or [],
        }
    )


def build_signature(signature_id: str, status: str = "pending", user_id: str = "user-9") -> Dict[str, Any]:
    return {
        "id": signature_id,
        "userId": user_id,
        "userName": "Signer",
        "userEmail": "signer@example.com",
        "status": status,
    }


@pytest.fixture
def logger() -> Logger:
    """Provide logger for tests."""
    return session_logger


@pytest.fixture
def document_factory() -> Callable[..., Document]:
    return build_document


@pytest.fixture
def signature_factory() -> Callable[..., Dict[str, Any]]:
    return build_signature


@pytest.fixture
def sample_documents() -> List[Document]:
    """Four documents: two pending, one signed, one rejected; three pending signatures."""
    return [
        build_document(
            "doc-1",
            title="T",
            description="D",
            created_by="user-1",
            signatures=[build_signature("sig-1", "signed"), build_signature("sig-2")],
        ),
        build_document(
            "doc-2",
            title="Contrato de Serviço",
            status="signed",
            created_by="user-2",
            signatures=[build_signature("sig-3", "signed")],
        ),
        build_document(
            "doc-3",
            title="Aditivo",
            created_by="user-1",
            signatures=[build_signature("sig-4"), build_signature("sig-5")],
        ),
        build_document("doc-4", title="Distrato", status="rejected", created_by="user-3"),
    ]


@pytest.fixture
def store(sample_documents, logger) -> InMemoryDocumentStore:
    return InMemoryDocumentStore(sample_documents, logger=logger)


@pytest.fixture
def settings() -> Settings:
    """Settings without vendor credentials."""
    return Settings(analysis_timeout_seconds=5.0)


@pytest.fixture
def spy_provider() -> MagicMock:
    """Analysis provider whose calls can be inspected."""
    provider = MagicMock(spec=AnalysisProvider)
    provider.analyze_document = AsyncMock(
        return_value=AnalysisResult(
            summary="Resumo",
            key_points=["a", "b"],
            risk_level=RiskLevel.LOW,
            suggestions=["c"],
            estimated_reading_time=3,
        )
    )
    provider.generate_summary = AsyncMock(return_value="Resumo curto")
    provider.suggest_improvements = AsyncMock(return_value=["Melhorar cláusula 2"])
    provider.check_compliance = AsyncMock(
        return_value=ComplianceResult(compliant=False, issues=["Falta assinatura"])
    )
    return provider


@pytest.fixture
def provider_cache(settings, logger, spy_provider) -> AnalysisProviderCache:
    return AnalysisProviderCache(settings, logger, factory=lambda _settings, _logger: spy_provider)


@pytest.fixture
def components(settings, logger, store, provider_cache) -> ServerComponents:
    return initialize_components(
        settings=settings, logger=logger, store=store, provider_cache=provider_cache
    )


@pytest.fixture
def dispatcher(components):
    return components.dispatcher
