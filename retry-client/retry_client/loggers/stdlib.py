"""Request logger backed by the standard ``logging`` module."""

from __future__ import annotations

import json
import logging

from retry_client.protocols import LogContext

__all__ = [
    'StdlibLogger',
]


class StdlibLogger:
    """Forward request lifecycle events to a ``logging.Logger``.

    The context is appended to the message as JSON and also attached to the
    record as ``record.context`` for handlers that want the raw mapping.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger('retry_client')

    def error(self, message: str, context: LogContext | None = None) -> None:
        self._log(logging.ERROR, message, context)

    def warning(self, message: str, context: LogContext | None = None) -> None:
        self._log(logging.WARNING, message, context)

    def info(self, message: str, context: LogContext | None = None) -> None:
        self._log(logging.INFO, message, context)

    def debug(self, message: str, context: LogContext | None = None) -> None:
        self._log(logging.DEBUG, message, context)

    def _log(self, level: int, message: str, context: LogContext | None) -> None:
        if not self._logger.isEnabledFor(level):
            return
        context = dict(context or {})
        rendered = f'{message} {json.dumps(context, default=str)}' if context else message
        self._logger.log(level, rendered, extra={'context': context})
