"""Protocol definitions for the client's collaborators.

Transports, request loggers and retry strategies are injected into
HttpClient. Anything with compatible methods satisfies these protocols;
no inheritance required.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from retry_client.schemas.http import HttpRequest, HttpResponse

__all__ = [
    'LogContext',
    'RequestLogger',
    'RetryStrategy',
    'Transport',
]

type LogContext = Mapping[str, Any]


class Transport(Protocol):
    """Performs the actual network exchange."""

    def send(self, request: HttpRequest) -> HttpResponse:
        """Send a request and return the response, whatever its status.

        Raises:
            TransportError: On connectivity, DNS or timeout failures.
        """
        ...


class RequestLogger(Protocol):
    """Leveled sink for request lifecycle events with structured context."""

    def error(self, message: str, context: LogContext | None = None) -> None: ...

    def warning(self, message: str, context: LogContext | None = None) -> None: ...

    def info(self, message: str, context: LogContext | None = None) -> None: ...

    def debug(self, message: str, context: LogContext | None = None) -> None: ...


class RetryStrategy(Protocol):
    """Decides retry eligibility and backoff delay.

    Implementations hold fixed configuration only. Every answer is a pure
    function of the arguments (plus jitter randomness).
    """

    @property
    def max_attempts(self) -> int:
        """Total attempts allowed, including the first. Always >= 1."""
        ...

    def is_retryable_response(self, response: HttpResponse) -> bool:
        """Whether the status code is one worth re-sending. Ignores attempt count."""
        ...

    def should_retry(self, response: HttpResponse, attempt_number: int) -> bool:
        """Whether to retry after ``attempt_number`` (1-based, just completed)."""
        ...

    def get_delay_ms(self, attempt_number: int) -> int:
        """Milliseconds to wait after ``attempt_number`` failed. Never negative."""
        ...
