"""URI-addressed read-only document views."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from app.logger import Logger
from app.mcp_server.responses import dump_json
from app.storage.base import DocumentStoreBase
from app.validation.models import (
    Document,
    DocumentStatus,
    JSON_MIME_TYPE,
    ResourceContents,
    ResourceDescriptor,
)

ALL_DOCUMENTS_URI = "documents://all"
PENDING_DOCUMENTS_URI = "documents://pending"

RESOURCES: List[ResourceDescriptor] = [
    ResourceDescriptor(
        uri=ALL_DOCUMENTS_URI,
        name="Todos os Documentos",
        description="Acesso a todos os documentos do sistema",
        mimeType=JSON_MIME_TYPE,
    ),
    ResourceDescriptor(
        uri=PENDING_DOCUMENTS_URI,
        name="Documentos Pendentes",
        description="Documentos aguardando assinatura",
        mimeType=JSON_MIME_TYPE,
    ),
]


class ResourceReader:
    """Serves the resource list and resolves resource URIs to contents.

    Unknown URIs resolve to ``None``; each transport decides how to report
    that (stdio: empty contents, HTTP: 404).
    """

    def __init__(self, store: DocumentStoreBase, logger: Logger):
        self.store = store
        self.logger = logger
        self._views: Dict[str, Callable[[], List[Document]]] = {
            ALL_DOCUMENTS_URI: self.store.get_all_documents,
            PENDING_DOCUMENTS_URI: lambda: self.store.get_documents_by_status(
                DocumentStatus.PENDING
            ),
        }

    def list_resources(self) -> List[ResourceDescriptor]:
        return list(RESOURCES)

    def read_resource(self, uri: str) -> Optional[ResourceContents]:
        view = self._views.get(uri)
        if view is None:
            self.logger.warning("Unknown resource requested", uri=uri)
            return None
        documents = view()
        self.logger.debug("Resource read", uri=uri, documents_count=len(documents))
        return ResourceContents(uri=uri, mimeType=JSON_MIME_TYPE, text=dump_json(documents))
