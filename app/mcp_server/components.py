"""Component initialization for the MCP service.

Both transports are built on one ServerComponents instance, so they share
the store, the analysis provider cache, the dispatcher and the resource
reader.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from app.analysis import AnalysisProviderCache
from app.config import Settings
from app.logger import Logger
from app.mcp_server.resources import ResourceReader
from app.mcp_server.routing import ToolDispatcher
from app.mcp_server.tool_types import ToolContext
from app.storage import create_store
from app.storage.base import DocumentStoreBase


@dataclass
class ServerComponents:
    settings: Settings
    store: DocumentStoreBase
    provider_cache: AnalysisProviderCache
    dispatcher: ToolDispatcher
    resource_reader: ResourceReader
    logger: Logger


def initialize_components(
    *,
    settings: Settings,
    logger: Logger,
    store: Optional[DocumentStoreBase] = None,
    provider_cache: Optional[AnalysisProviderCache] = None,
) -> ServerComponents:
    """Initialize all server components.

    Args:
        settings: Resolved service settings
        logger: Logger
        store: Optional document store override (tests)
        provider_cache: Optional provider cache override (tests)
    """
    if store is None:
        store = create_store(data_file=settings.data_file, logger=logger)
    if provider_cache is None:
        provider_cache = AnalysisProviderCache(settings=settings, logger=logger)

    context = ToolContext(
        store=store,
        provider_cache=provider_cache,
        logger=logger,
        analysis_timeout=settings.analysis_timeout,
    )
    dispatcher = ToolDispatcher(context)
    resource_reader = ResourceReader(store=store, logger=logger)
    logger.info(
        "Server components initialized",
        store=type(store).__name__,
        llm_provider=settings.llm_provider,
    )

    return ServerComponents(
        settings=settings,
        store=store,
        provider_cache=provider_cache,
        dispatcher=dispatcher,
        resource_reader=resource_reader,
        logger=logger,
    )
