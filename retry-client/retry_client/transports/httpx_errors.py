"""Translate httpx exceptions into TransportError.

Private module - import from the transports package.

HTTPX Exception Hierarchy
=========================

Reference for which exceptions to translate vs propagate::

    httpx.HTTPError (base)
    ├── httpx.RequestError
    │   ├── httpx.TransportError
    │   │   ├── httpx.TimeoutException   ← TransportError.timeout
    │   │   ├── httpx.NetworkError
    │   │   │   ├── ConnectError         ← dns_resolution_failed if gaierror, else connection_failed
    │   │   │   ├── ReadError            ← connection_failed
    │   │   │   ├── WriteError           ← connection_failed
    │   │   │   └── CloseError           ← connection_failed
    │   │   ├── httpx.ProtocolError
    │   │   │   ├── LocalProtocolError   ← PROPAGATE (our bug)
    │   │   │   └── RemoteProtocolError  ← connection_failed (server sent invalid HTTP)
    │   │   ├── ProxyError               ← PROPAGATE (config error)
    │   │   └── UnsupportedProtocol      ← PROPAGATE (code error)
    │   ├── DecodingError                ← PROPAGATE (response malformed)
    │   └── TooManyRedirects             ← PROPAGATE (config/server error)
    └── httpx.InvalidURL                 ← PROPAGATE (code error)
"""

from __future__ import annotations

import socket

import httpx

from retry_client.errors import TransportError

__all__ = [
    'is_transport_failure',
    'to_transport_error',
]


def is_transport_failure(exc: BaseException) -> bool:
    """Check if exception is a transient network failure worth retrying.

    Translates:
    - httpx.TimeoutException (all subclasses: Connect/Read/Write/PoolTimeout)
    - httpx.NetworkError (all subclasses: Connect/Read/Write/CloseError)
    - httpx.RemoteProtocolError (server sent invalid HTTP)
    """
    if isinstance(exc, (httpx.TimeoutException, httpx.NetworkError)):
        return True

    if isinstance(exc, httpx.RemoteProtocolError):
        return True

    return False


def to_transport_error(exc: httpx.HTTPError, url: str, timeout_seconds: float) -> TransportError:
    """Build the TransportError sub-kind matching an httpx failure.

    Caller must check ``is_transport_failure`` first and raise the result
    ``from exc``.
    """
    if isinstance(exc, httpx.TimeoutException):
        return TransportError.timeout(url, timeout_seconds)

    if isinstance(exc, httpx.ConnectError) and _caused_by_dns_failure(exc):
        return TransportError.dns_resolution_failed(httpx.URL(url).host or url)

    return TransportError.connection_failed(url)


def _caused_by_dns_failure(exc: BaseException) -> bool:
    """Walk the cause/context chain looking for a resolver error."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, socket.gaierror):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return False
