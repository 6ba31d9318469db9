"""Request logger sinks."""

from __future__ import annotations

from retry_client.loggers.file import FileLogger, LogLevel
from retry_client.loggers.null import NullLogger
from retry_client.loggers.stdlib import StdlibLogger

__all__ = [
    'FileLogger',
    'LogLevel',
    'NullLogger',
    'StdlibLogger',
]
