"""Console logger writing structured lines to stderr.

stdout is reserved for protocol frames when the MCP server runs over stdio,
so this logger never writes there.
"""

import logging
import sys
from typing import Any, Optional, TextIO, Union

from .interface import Logger

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConsoleLogger(Logger):
    """Logger backed by the standard ``logging`` module.

    Structured fields are appended to the message as ``key=value`` pairs.
    """

    def __init__(
        self,
        name: str = "bill_signing",
        level: Union[int, str] = logging.INFO,
        stream: Optional[TextIO] = None,
    ):
        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        self.set_level(level)
        if not self._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(logging.Formatter(_FORMAT))
            self._logger.addHandler(handler)

    def set_level(self, level: Union[int, str]) -> None:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                level = logging.INFO
        self._logger.setLevel(level)

    @staticmethod
    def _format(message: str, fields: dict) -> str:
        if not fields:
            return message
        rendered = " ".join(f"{key}={value!r}" for key, value in fields.items())
        return f"{message} {rendered}"

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._format(message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(self._format(message, kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self._logger.critical(self._format(message, kwargs))
