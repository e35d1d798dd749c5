"""JSON file document store

Loads a JSON array of documents at startup and rewrites the whole file after
each mutation. Writes go to a temporary file in the same directory which
then replaces the original, so readers never see a half-written file.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from app.exceptions import ConfigurationError
from app.logger import Logger, session_logger
from app.storage.memory_store import InMemoryDocumentStore
from app.validation.models import Document


def load_documents(path: Path) -> List[Document]:
    """
    Read a JSON array of documents

    Args:
        path: JSON file path

    Returns:
        Parsed documents (empty list if the file does not exist)

    Raises:
        ConfigurationError: If the file is not a JSON array of valid documents
    """
    if not path.exists():
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to read documents file {path}: {e}", {"path": str(path)})

    if not isinstance(data, list):
        raise ConfigurationError(
            f"Documents file {path} must contain a JSON array", {"path": str(path)}
        )
    try:
        return [Document.model_validate(item) for item in data]
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Documents file {path} contains an invalid document: {e.error_count()} error(s)",
            {"path": str(path)},
        )


class JsonFileDocumentStore(InMemoryDocumentStore):
    """Document store persisted to a single JSON file"""

    def __init__(self, path: str, logger: Optional[Logger] = None):
        self.path = Path(path)
        logger = logger or session_logger
        documents = load_documents(self.path)
        super().__init__(documents=documents, logger=logger)
        self.logger.info(
            "JSON file store initialized", path=str(self.path), documents_count=len(documents)
        )

    def _persist(self, documents: Dict[str, Document]) -> None:
        payload = [doc.to_wire() for doc in documents.values()]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".documents-", suffix=".json", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            self.logger.error("Failed to save documents file", path=str(self.path), error=str(e))
            Path(tmp_name).unlink(missing_ok=True)
            raise RuntimeError(f"Failed to save documents file: {e}") from e
        self.logger.debug("Documents file saved", documents_count=len(payload))
