"""Tests for tool dispatch: payload shapes, validation and error categories."""

import asyncio
import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.analysis import AnalysisProviderCache
from app.config import Settings
from app.mcp_server import ErrorCategory, initialize_components


def _payload(result) -> Any:
    """Parse the JSON text of a dispatch result."""
    assert len(result.envelope.content) == 1
    content = result.envelope.content[0]
    assert content.type == "text"
    return json.loads(content.text)


# ==============================================================================
# Document tools
# ==============================================================================


class TestGetDocuments:
    @pytest.mark.asyncio
    async def test_returns_all_documents_without_filter(self, dispatcher, store):
        result = await dispatcher.call_tool("get_documents", {})

        assert result.is_error is False
        assert result.category is None
        documents = _payload(result)
        assert len(documents) == len(store.get_all_documents())
        assert [doc["id"] for doc in documents] == ["doc-1", "doc-2", "doc-3", "doc-4"]

    @pytest.mark.asyncio
    async def test_filters_by_status(self, dispatcher, store):
        result = await dispatcher.call_tool("get_documents", {"status": "pending"})

        documents = _payload(result)
        expected = [doc for doc in store.get_all_documents() if doc.status == "pending"]
        assert len(documents) == len(expected) == 2
        assert all(doc["status"] == "pending" for doc in documents)

    @pytest.mark.asyncio
    async def test_empty_status_means_no_filter(self, dispatcher):
        result = await dispatcher.call_tool("get_documents", {"status": ""})

        assert len(_payload(result)) == 4

    @pytest.mark.asyncio
    async def test_status_filter_is_case_sensitive(self, dispatcher):
        result = await dispatcher.call_tool("get_documents", {"status": "PENDING"})

        assert result.is_error is False
        assert _payload(result) == []

    @pytest.mark.asyncio
    async def test_payload_uses_camel_case_and_omits_unset_fields(self, dispatcher):
        result = await dispatcher.call_tool("get_documents", {"status": "signed"})

        document = _payload(result)[0]
        assert document["createdBy"]["id"] == "user-2"
        assert "createdAt" in document
        assert "expiresAt" not in document
        assert "fileUrl" not in document

    @pytest.mark.asyncio
    async def test_success_text_is_indented_two_spaces(self, dispatcher):
        result = await dispatcher.call_tool("get_documents", {"status": "rejected"})

        text = result.envelope.content[0].text
        assert text.startswith("[\n  {\n    ")


class TestGetDocument:
    @pytest.mark.asyncio
    async def test_existing_document(self, dispatcher):
        result = await dispatcher.call_tool("get_document", {"documentId": "doc-1"})

        assert not result.is_error
        assert _payload(result)["id"] == "doc-1"

    @pytest.mark.asyncio
    async def test_missing_document_is_not_found(self, dispatcher):
        result = await dispatcher.call_tool("get_document", {"documentId": "missing"})

        assert result.is_error is True
        assert result.category == ErrorCategory.NOT_FOUND
        assert result.http_status == 404
        assert _payload(result) == {"error": "Documento não encontrado"}

    @pytest.mark.asyncio
    async def test_error_text_is_compact(self, dispatcher):
        result = await dispatcher.call_tool("get_document", {"documentId": "missing"})

        assert result.envelope.content[0].text == '{"error":"Documento não encontrado"}'

    @pytest.mark.asyncio
    @pytest.mark.parametrize("arguments", [{}, {"documentId": ""}, {"documentId": 42}, {"documentId": None}])
    async def test_invalid_document_id_touches_no_collaborator(
        self, settings, logger, store, spy_provider, arguments
    ):
        store_spy = MagicMock(wraps=store)
        cache = AnalysisProviderCache(settings, logger, factory=lambda *_: spy_provider)
        components = initialize_components(
            settings=settings, logger=logger, store=store_spy, provider_cache=cache
        )

        result = await components.dispatcher.call_tool("get_document", arguments)

        assert result.is_error is True
        assert result.category == ErrorCategory.MALFORMED_REQUEST
        assert result.http_status == 400
        assert _payload(result) == {"error": "documentId é obrigatório"}
        store_spy.get_document_by_id.assert_not_called()
        store_spy.get_all_documents.assert_not_called()
        assert cache.is_initialized is False

    @pytest.mark.asyncio
    async def test_extra_arguments_are_ignored(self, dispatcher):
        result = await dispatcher.call_tool(
            "get_document", {"documentId": "doc-2", "unexpected": True}
        )

        assert _payload(result)["id"] == "doc-2"


class TestGetUserDocuments:
    @pytest.mark.asyncio
    async def test_filters_by_creator(self, dispatcher):
        result = await dispatcher.call_tool("get_user_documents", {"userId": "user-1"})

        documents = _payload(result)
        assert [doc["id"] for doc in documents] == ["doc-1", "doc-3"]
        assert all(doc["createdBy"]["id"] == "user-1" for doc in documents)

    @pytest.mark.asyncio
    async def test_unknown_user_gets_empty_list(self, dispatcher):
        result = await dispatcher.call_tool("get_user_documents", {"userId": "nobody"})

        assert result.is_error is False
        assert _payload(result) == []

    @pytest.mark.asyncio
    async def test_user_id_is_required(self, dispatcher):
        result = await dispatcher.call_tool("get_user_documents", {})

        assert result.category == ErrorCategory.MALFORMED_REQUEST
        assert _payload(result) == {"error": "userId é obrigatório"}

    @pytest.mark.asyncio
    async def test_uses_store_creator_lookup(self, settings, logger, store, provider_cache):
        spy_store = MagicMock(wraps=store)
        components = initialize_components(
            settings=settings, logger=logger, store=spy_store, provider_cache=provider_cache
        )

        result = await components.dispatcher.call_tool("get_user_documents", {"userId": "user-1"})

        assert [doc["id"] for doc in _payload(result)] == ["doc-1", "doc-3"]
        spy_store.get_documents_by_user.assert_called_once_with("user-1")
        spy_store.get_all_documents.assert_not_called()


class TestGetPendingSignatures:
    @pytest.mark.asyncio
    async def test_flattens_pending_signatures_in_order(self, dispatcher, store):
        result = await dispatcher.call_tool("get_pending_signatures", {})

        entries = _payload(result)
        expected_count = sum(
            1 for doc in store.get_all_documents() for sig in doc.signatures if sig.status == "pending"
        )
        assert len(entries) == expected_count == 3
        assert [(e["documentId"], e["signature"]["id"]) for e in entries] == [
            ("doc-1", "sig-2"),
            ("doc-3", "sig-4"),
            ("doc-3", "sig-5"),
        ]
        known_ids = {doc.id for doc in store.get_all_documents()}
        for entry in entries:
            assert entry["documentId"] in known_ids
            assert entry["signature"]["status"] == "pending"
            assert entry["signature"]["userId"] == "user-9"

    @pytest.mark.asyncio
    async def test_document_title_is_included(self, dispatcher):
        result = await dispatcher.call_tool("get_pending_signatures", {})

        assert _payload(result)[0]["documentTitle"] == "T"


# ==============================================================================
# Analysis tools
# ==============================================================================


class TestAnalysisTools:
    @pytest.mark.asyncio
    async def test_analyze_document(self, dispatcher, spy_provider):
        result = await dispatcher.call_tool("analyze_document", {"documentId": "doc-1"})

        assert result.is_error is False
        assert _payload(result) == {
            "summary": "Resumo",
            "keyPoints": ["a", "b"],
            "riskLevel": "low",
            "suggestions": ["c"],
            "estimatedReadingTime": 3,
        }
        spy_provider.analyze_document.assert_awaited_once_with("T\n\nD")

    @pytest.mark.asyncio
    async def test_generate_summary_wraps_text(self, dispatcher, spy_provider):
        result = await dispatcher.call_tool("generate_document_summary", {"documentId": "doc-1"})

        assert _payload(result) == {"summary": "Resumo curto"}
        spy_provider.generate_summary.assert_awaited_once_with("T\n\nD")

    @pytest.mark.asyncio
    async def test_suggest_improvements_wraps_list(self, dispatcher):
        result = await dispatcher.call_tool(
            "suggest_document_improvements", {"documentId": "doc-1"}
        )

        assert _payload(result) == {"suggestions": ["Melhorar cláusula 2"]}

    @pytest.mark.asyncio
    async def test_check_compliance_passes_rules(self, dispatcher, spy_provider):
        rules = ["Deve ter data", "Deve ter assinatura"]
        result = await dispatcher.call_tool(
            "check_document_compliance", {"documentId": "doc-1", "rules": rules}
        )

        assert _payload(result) == {"compliant": False, "issues": ["Falta assinatura"]}
        spy_provider.check_compliance.assert_awaited_once_with("T\n\nD", rules)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rules", ["not-a-list", 7, {"a": 1}])
    async def test_non_list_rules_are_dropped(self, dispatcher, spy_provider, rules):
        result = await dispatcher.call_tool(
            "check_document_compliance", {"documentId": "doc-1", "rules": rules}
        )

        assert result.is_error is False
        spy_provider.check_compliance.assert_awaited_once_with("T\n\nD", None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "tool",
        [
            "analyze_document",
            "generate_document_summary",
            "suggest_document_improvements",
            "check_document_compliance",
        ],
    )
    async def test_missing_document_id_never_reaches_provider(self, dispatcher, spy_provider, tool):
        result = await dispatcher.call_tool(tool, {})

        assert result.category == ErrorCategory.MALFORMED_REQUEST
        assert _payload(result) == {"error": "documentId é obrigatório"}
        spy_provider.analyze_document.assert_not_called()
        spy_provider.generate_summary.assert_not_called()
        spy_provider.suggest_improvements.assert_not_called()
        spy_provider.check_compliance.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_document_never_reaches_provider(self, dispatcher, spy_provider):
        result = await dispatcher.call_tool("analyze_document", {"documentId": "missing"})

        assert result.category == ErrorCategory.NOT_FOUND
        assert _payload(result) == {"error": "Documento não encontrado"}
        spy_provider.analyze_document.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_failure_is_downstream_error(self, dispatcher, spy_provider):
        spy_provider.analyze_document.side_effect = Exception("boom")

        result = await dispatcher.call_tool("analyze_document", {"documentId": "doc-1"})

        assert result.is_error is True
        assert result.category == ErrorCategory.DOWNSTREAM_FAILURE
        assert result.http_status == 500
        assert "boom" in _payload(result)["error"]

    @pytest.mark.asyncio
    async def test_empty_exception_message_becomes_unknown_error(self, dispatcher, spy_provider):
        spy_provider.generate_summary.side_effect = RuntimeError()

        result = await dispatcher.call_tool("generate_document_summary", {"documentId": "doc-1"})

        assert _payload(result) == {"error": "Erro desconhecido"}

    @pytest.mark.asyncio
    async def test_slow_provider_times_out(self, logger, store, spy_provider):
        async def never_finishes(content):
            await asyncio.sleep(10)

        spy_provider.analyze_document = AsyncMock(side_effect=never_finishes)
        settings = Settings(analysis_timeout_seconds=0.05)
        components = initialize_components(
            settings=settings,
            logger=logger,
            store=store,
            provider_cache=AnalysisProviderCache(settings, logger, factory=lambda *_: spy_provider),
        )

        result = await components.dispatcher.call_tool("analyze_document", {"documentId": "doc-1"})

        assert result.category == ErrorCategory.DOWNSTREAM_FAILURE
        assert "Tempo limite excedido" in _payload(result)["error"]

    @pytest.mark.asyncio
    async def test_provider_is_built_once_across_calls(self, settings, logger, store, spy_provider):
        factory = MagicMock(return_value=spy_provider)
        components = initialize_components(
            settings=settings,
            logger=logger,
            store=store,
            provider_cache=AnalysisProviderCache(settings, logger, factory=factory),
        )

        await components.dispatcher.call_tool("analyze_document", {"documentId": "doc-1"})
        await components.dispatcher.call_tool("generate_document_summary", {"documentId": "doc-3"})

        factory.assert_called_once()

    @pytest.mark.asyncio
    async def test_provider_construction_failure_is_downstream_error(self, settings, logger, store):
        def broken_factory(_settings, _logger):
            raise RuntimeError("no provider")

        components = initialize_components(
            settings=settings,
            logger=logger,
            store=store,
            provider_cache=AnalysisProviderCache(settings, logger, factory=broken_factory),
        )

        result = await components.dispatcher.call_tool("analyze_document", {"documentId": "doc-1"})

        assert result.category == ErrorCategory.DOWNSTREAM_FAILURE
        assert _payload(result) == {"error": "no provider"}


# ==============================================================================
# Unknown tools and store failures
# ==============================================================================


class TestDispatchErrors:
    @pytest.mark.asyncio
    async def test_unknown_tool(self, dispatcher):
        result = await dispatcher.call_tool("delete_everything", {})

        assert result.is_error is True
        assert result.category == ErrorCategory.MALFORMED_REQUEST
        assert result.http_status == 400
        assert _payload(result) == {"error": "Ferramenta desconhecida: delete_everything"}

    @pytest.mark.asyncio
    async def test_tool_names_match_exactly(self, dispatcher):
        result = await dispatcher.call_tool("Get_Documents", {})

        assert _payload(result) == {"error": "Ferramenta desconhecida: Get_Documents"}

    @pytest.mark.asyncio
    async def test_non_dict_arguments_are_treated_as_empty(self, dispatcher):
        result = await dispatcher.call_tool("get_documents", ["not", "a", "dict"])

        assert len(_payload(result)) == 4

    @pytest.mark.asyncio
    async def test_store_failure_is_downstream_error(self, settings, logger, spy_provider):
        broken_store = MagicMock()
        broken_store.get_all_documents.side_effect = ConnectionError("database unavailable")
        components = initialize_components(
            settings=settings,
            logger=logger,
            store=broken_store,
            provider_cache=AnalysisProviderCache(settings, logger, factory=lambda *_: spy_provider),
        )

        result = await components.dispatcher.call_tool("get_documents", {})

        assert result.category == ErrorCategory.DOWNSTREAM_FAILURE
        assert _payload(result) == {"error": "database unavailable"}

    def test_missing_name_result(self, dispatcher):
        result = dispatcher.missing_name()

        assert result.category == ErrorCategory.MALFORMED_REQUEST
        assert _payload(result) == {"error": "Nome da ferramenta é obrigatório"}
