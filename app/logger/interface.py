"""Abstract logger interface.

All loggers accept a human readable message plus arbitrary structured fields,
e.g. ``logger.info("Tool completed", tool="get_document")``.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Structured logger contract used across the service."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
