"""Synchronous httpx transport.

Thin wrapper around ``httpx.Client``. Performs exactly one exchange per
``send`` call - retries belong to HttpClient. Network-level failures are
translated to TransportError; everything else propagates.
"""

from __future__ import annotations

import httpx

from retry_client.schemas.http import HttpRequest, HttpResponse
from retry_client.transports import httpx_errors

__all__ = [
    'HttpxTransport',
]

_BODY_METHODS = frozenset({'POST', 'PUT', 'PATCH'})


class HttpxTransport:
    """Transport that sends requests through a shared ``httpx.Client``.

    Safe to share between threads: httpx.Client is thread-safe and the
    transport keeps no request-scoped state.
    """

    DEFAULT_TIMEOUT_SECONDS = 30.0
    DEFAULT_MAX_REDIRECTS = 5

    def __init__(
        self,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        verify_ssl: bool = True,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize transport.

        Args:
            timeout_seconds: Connect/read/write/pool timeout for each attempt.
            verify_ssl: Verify TLS certificates.
            max_redirects: Redirects followed before httpx gives up.
            transport: Low-level httpx transport override (e.g. httpx.MockTransport in tests).
        """
        self._timeout_seconds = timeout_seconds
        self._client = httpx.Client(
            timeout=timeout_seconds,
            verify=verify_ssl,
            follow_redirects=True,
            max_redirects=max_redirects,
            transport=transport,
        )

    def send(self, request: HttpRequest) -> HttpResponse:
        """Send one request.

        Raises:
            TransportError: On timeouts, DNS failures and connection errors.
        """
        content = request.json_body() if request.method in _BODY_METHODS and request.body else None

        try:
            response = self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=content,
            )
        except httpx.HTTPError as exc:
            if not httpx_errors.is_transport_failure(exc):
                raise
            raise httpx_errors.to_transport_error(exc, request.url, self._timeout_seconds) from exc

        return HttpResponse(
            status_code=response.status_code,
            body=response.text,
            headers={name.lower(): value for name, value in response.headers.items()},
        )

    def close(self) -> None:
        """Close the underlying httpx client and its connections."""
        self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()
