"""HTTP client with retry-with-backoff and structured logging over a pluggable transport."""

from __future__ import annotations

from retry_client.client import HttpClient
from retry_client.errors import HttpClientError, MaxRetriesExceededError, TransportError
from retry_client.loggers import FileLogger, NullLogger, StdlibLogger
from retry_client.protocols import RequestLogger, RetryStrategy, Transport
from retry_client.retry import ExponentialBackoffStrategy, strategy_for_preset
from retry_client.schemas import ClientConfig, HttpRequest, HttpResponse, load_config, save_config
from retry_client.transports import HttpxTransport

__all__ = [
    'ClientConfig',
    'ExponentialBackoffStrategy',
    'FileLogger',
    'HttpClient',
    'HttpClientError',
    'HttpRequest',
    'HttpResponse',
    'HttpxTransport',
    'MaxRetriesExceededError',
    'NullLogger',
    'RequestLogger',
    'RetryStrategy',
    'StdlibLogger',
    'Transport',
    'TransportError',
    'create_client',
    'load_config',
    'save_config',
    'strategy_for_preset',
]


def create_client(config: ClientConfig, *, logger: RequestLogger | None = None) -> HttpClient:
    """Create an HttpClient over HttpxTransport from configuration.

    Args:
        config: Client configuration.
        logger: Request logger used when ``config.log_file`` is not set.

    Returns:
        Configured client. The HttpxTransport stays reachable as
        ``client.transport`` for callers that need to close it.
    """
    if config.log_file is not None:
        logger = FileLogger(config.log_file, min_level=config.log_level)

    transport = HttpxTransport(timeout_seconds=config.timeout_seconds, verify_ssl=config.verify_ssl)
    return HttpClient(
        transport,
        logger=logger,
        retry_strategy=config.retry_strategy,
        base_url=config.base_url,
        default_headers=config.default_headers,
    )
