"""Document store module

Provides the abstract store interface and its implementations:
- InMemoryDocumentStore: process-local collection (optionally seeded)
- JsonFileDocumentStore: collection persisted to a JSON file
"""

from pathlib import Path
from typing import Optional

from app.logger import Logger, session_logger
from app.storage.base import DocumentStoreBase
from app.storage.file_storage import JsonFileDocumentStore, load_documents
from app.storage.memory_store import InMemoryDocumentStore

SAMPLE_DOCUMENTS_PATH = Path(__file__).parent.parent / "content" / "sample_documents.json"


def create_store(
    data_file: Optional[str] = None, logger: Optional[Logger] = None
) -> DocumentStoreBase:
    """
    Create the document store for a process

    Args:
        data_file: JSON file to persist documents in. If None, the bundled
                   sample documents are loaded into memory.
        logger: Logger instance

    Returns:
        DocumentStoreBase implementation
    """
    logger = logger or session_logger
    if data_file:
        return JsonFileDocumentStore(data_file, logger=logger)
    documents = load_documents(SAMPLE_DOCUMENTS_PATH)
    logger.info("Using in-memory store with sample documents", documents_count=len(documents))
    return InMemoryDocumentStore(documents=documents, logger=logger)


__all__ = [
    "DocumentStoreBase",
    "InMemoryDocumentStore",
    "JsonFileDocumentStore",
    "SAMPLE_DOCUMENTS_PATH",
    "create_store",
    "load_documents",
]
