"""Concrete transports."""

from __future__ import annotations

from retry_client.transports.httpx_transport import HttpxTransport

__all__ = [
    'HttpxTransport',
]
