"""Append-only file logger with cross-process locking.

Line format::

    [2026-01-31 12:00:00.123456] [WARNING] HTTP request failed, will retry {"status_code":503}

``{key}`` placeholders in the message are replaced with string context values.
"""

from __future__ import annotations

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Literal

import filelock

from retry_client.protocols import LogContext

__all__ = [
    'FileLogger',
    'LogLevel',
]

type LogLevel = Literal['debug', 'info', 'warning', 'error']

_LEVEL_ORDER: dict[LogLevel, int] = {'debug': 0, 'info': 1, 'warning': 2, 'error': 3}

_PLACEHOLDER = re.compile(r'\{(\w+)\}')

DATE_FORMAT = '%Y-%m-%d %H:%M:%S.%f'


class FileLogger:
    """Write leveled log lines to a file.

    Writes are serialized with a sibling ``.lock`` file so concurrent
    threads and processes never interleave partial lines.
    """

    def __init__(self, file_path: Path | str, min_level: LogLevel = 'debug') -> None:
        """Initialize logger.

        Args:
            file_path: Log file. Parent directories are created if missing.
            min_level: Messages below this level are dropped. Errors are always written.
        """
        if min_level not in _LEVEL_ORDER:
            raise ValueError(f'Unknown log level: {min_level!r}')
        self._file_path = Path(file_path)
        self._min_level = min_level
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = filelock.FileLock(self._file_path.with_name(self._file_path.name + '.lock'))

    @property
    def file_path(self) -> Path:
        return self._file_path

    def error(self, message: str, context: LogContext | None = None) -> None:
        self._log('error', message, context)

    def warning(self, message: str, context: LogContext | None = None) -> None:
        self._log('warning', message, context)

    def info(self, message: str, context: LogContext | None = None) -> None:
        self._log('info', message, context)

    def debug(self, message: str, context: LogContext | None = None) -> None:
        self._log('debug', message, context)

    def _log(self, level: LogLevel, message: str, context: LogContext | None) -> None:
        if _LEVEL_ORDER[level] < _LEVEL_ORDER[self._min_level]:
            return

        context = context or {}
        timestamp = datetime.now().strftime(DATE_FORMAT)
        context_json = f' {json.dumps(dict(context), separators=(",", ":"), default=str)}' if context else ''
        entry = f'[{timestamp}] [{level.upper()}] {_interpolate(message, context)}{context_json}\n'

        with self._lock, self._file_path.open('a', encoding='utf-8') as f:
            f.write(entry)


def _interpolate(message: str, context: LogContext) -> str:
    """Replace ``{key}`` with the context value when that value is a string."""

    def replace(match: re.Match[str]) -> str:
        value = context.get(match.group(1))
        return value if isinstance(value, str) else match.group(0)

    return _PLACEHOLDER.sub(replace, message)
