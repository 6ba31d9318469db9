"""No-op request logger, the client's default sink."""

from __future__ import annotations

from retry_client.protocols import LogContext

__all__ = [
    'NullLogger',
]


class NullLogger:
    """Discards every message."""

    def error(self, message: str, context: LogContext | None = None) -> None:
        pass

    def warning(self, message: str, context: LogContext | None = None) -> None:
        pass

    def info(self, message: str, context: LogContext | None = None) -> None:
        pass

    def debug(self, message: str, context: LogContext | None = None) -> None:
        pass
