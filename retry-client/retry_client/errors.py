"""Exception taxonomy for the retrying HTTP client.

Exception Hierarchy
===================

    HttpClientError                 ← non-retryable HTTP failure (code = status)
    ├── TransportError              ← network never produced a response
    │   ├── kind='timeout'
    │   ├── kind='dns'
    │   └── kind='connection'
    └── MaxRetriesExceededError     ← attempt budget consumed without success

Propagation
-----------
- **TransportError** is raised by transports and absorbed by the client's
  retry loop. Callers only see it as ``__cause__`` of MaxRetriesExceededError.
- **HttpClientError** is raised immediately for non-successful responses
  whose status is not retryable.
- **MaxRetriesExceededError** carries the attempt count, the last response
  (None when every attempt failed at the transport level) and the last
  transport error as its chained cause.

The transport kind only shapes the message. All transport failures are
retried identically.
"""

from __future__ import annotations

from typing import Literal

from retry_client.schemas.http import HttpResponse

__all__ = [
    'HttpClientError',
    'MaxRetriesExceededError',
    'TransportError',
    'TransportErrorKind',
]

type TransportErrorKind = Literal['timeout', 'dns', 'connection']


class HttpClientError(Exception):
    """HTTP request failed.

    Args:
        message: Human-readable description.
        code: Error code, typically the HTTP status code. 0 when there is none.
        response: The response that caused the error, if any.
    """

    def __init__(self, message: str, *, code: int = 0, response: HttpResponse | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.response = response

    @classmethod
    def from_response(cls, response: HttpResponse, message: str = '') -> HttpClientError:
        default_message = f'HTTP request failed with status {response.status_code}: {response.reason_phrase}'
        return cls(message or default_message, code=response.status_code, response=response)


class TransportError(HttpClientError):
    """The transport could not complete the exchange (connect, DNS, timeout).

    Raise with ``from`` to keep the lower-level cause::

        raise TransportError.timeout(url, 30) from exc
    """

    def __init__(self, message: str, *, kind: TransportErrorKind = 'connection') -> None:
        super().__init__(message)
        self.kind: TransportErrorKind = kind

    @classmethod
    def connection_failed(cls, url: str) -> TransportError:
        return cls(f'Failed to connect to {url}', kind='connection')

    @classmethod
    def timeout(cls, url: str, timeout_seconds: float) -> TransportError:
        return cls(f'Request to {url} timed out after {timeout_seconds:g} seconds', kind='timeout')

    @classmethod
    def dns_resolution_failed(cls, host: str) -> TransportError:
        return cls(f'Failed to resolve DNS for host: {host}', kind='dns')


class MaxRetriesExceededError(HttpClientError):
    """Every attempt failed with a retryable outcome."""

    def __init__(self, attempts: int, last_response: HttpResponse | None = None) -> None:
        last_status = last_response.status_code if last_response is not None else 'N/A'
        super().__init__(
            f'Maximum retry attempts ({attempts}) exceeded. Last status code: {last_status}',
            code=last_response.status_code if last_response is not None else 0,
            response=last_response,
        )
        self.attempts = attempts

    @property
    def last_response(self) -> HttpResponse | None:
        return self.response
