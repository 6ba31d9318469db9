"""HTTP client with retry and structured request logging.

Wraps an injected Transport. The transport performs one exchange per call;
this module owns the attempt loop, built on ``tenacity.Retrying``:

    Attempting(n) ──successful──────────────────────────► return response
        │
        ├── non-successful, not retryable ──────────────► raise HttpClientError
        ├── retryable status or TransportError, n < max ► wait get_delay_ms(n), Attempting(n+1)
        └── retryable status or TransportError, n = max ► raise MaxRetriesExceededError

Example::

    client = HttpClient(
        HttpxTransport(timeout_seconds=10),
        logger=FileLogger('/var/log/http-client.log'),
        retry_strategy=ExponentialBackoffStrategy(max_attempts=3),
        base_url='https://api.example.com',
    )
    response = client.post('/users', {'name': 'John Doe'})
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

import tenacity

from retry_client.errors import HttpClientError, MaxRetriesExceededError, TransportError
from retry_client.loggers.null import NullLogger
from retry_client.protocols import LogContext, RequestLogger, RetryStrategy, Transport
from retry_client.retry.backoff import ExponentialBackoffStrategy
from retry_client.schemas.http import HttpRequest, HttpResponse

__all__ = [
    'HttpClient',
]

logger = logging.getLogger(__name__)

WARNING_BODY_LIMIT = 500
ERROR_BODY_LIMIT = 1000


class _RetryableResponse(Exception):
    """Signals a retryable non-successful response to tenacity.

    Never escapes HttpClient.
    """

    def __init__(self, response: HttpResponse) -> None:
        super().__init__(f'Retryable status {response.status_code}')
        self.response = response


class HttpClient:
    """Synchronous HTTP client with retry and request logging.

    Holds no per-call state: attempt count, last response and last error
    live inside each ``send`` call, so one instance can serve concurrent
    callers as long as the transport can.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        logger: RequestLogger | None = None,
        retry_strategy: RetryStrategy | None = None,
        base_url: str = '',
        default_headers: Mapping[str, str] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize client.

        Args:
            transport: Performs the network exchange.
            logger: Request lifecycle sink. Defaults to NullLogger.
            retry_strategy: Retry policy. Defaults to ExponentialBackoffStrategy.default().
            base_url: Prepended to every endpoint when non-empty.
            default_headers: Sent with every request. Per-call headers win on collision.
            sleep: Blocking wait in seconds between attempts.
        """
        self._transport = transport
        self._logger: RequestLogger = logger if logger is not None else NullLogger()
        self._retry_strategy: RetryStrategy = (
            retry_strategy if retry_strategy is not None else ExponentialBackoffStrategy.default()
        )
        self._base_url = base_url
        self._default_headers = dict(default_headers or {})
        self._sleep = sleep

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def retry_strategy(self) -> RetryStrategy:
        return self._retry_strategy

    # -- Verb methods --

    def get(self, endpoint: str, headers: Mapping[str, str] | None = None) -> HttpResponse:
        """Send a GET request.

        Raises:
            MaxRetriesExceededError: If all attempts fail.
            HttpClientError: If a non-retryable error occurs.
        """
        return self.send(HttpRequest.get(self._build_url(endpoint), self._merge_headers(headers)))

    def post(
        self,
        endpoint: str,
        body: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """Send a POST request with a JSON body.

        Raises:
            MaxRetriesExceededError: If all attempts fail.
            HttpClientError: If a non-retryable error occurs.
        """
        return self.send(HttpRequest.post(self._build_url(endpoint), body, self._merge_headers(headers)))

    def put(
        self,
        endpoint: str,
        body: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """Send a PUT request with a JSON body."""
        return self.send(HttpRequest.put(self._build_url(endpoint), body, self._merge_headers(headers)))

    def patch(
        self,
        endpoint: str,
        body: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """Send a PATCH request with a JSON body."""
        return self.send(HttpRequest.patch(self._build_url(endpoint), body, self._merge_headers(headers)))

    def delete(self, endpoint: str, headers: Mapping[str, str] | None = None) -> HttpResponse:
        """Send a DELETE request."""
        return self.send(HttpRequest.delete(self._build_url(endpoint), self._merge_headers(headers)))

    # -- Retry loop --

    def send(self, request: HttpRequest) -> HttpResponse:
        """Send a prebuilt request with the configured retry strategy.

        Returns:
            The first successful response.

        Raises:
            MaxRetriesExceededError: If every attempt failed with a retryable outcome.
                ``__cause__`` is the last TransportError, if any.
            HttpClientError: On the first non-successful, non-retryable response.
        """
        max_attempts = self._retry_strategy.max_attempts
        retrying = tenacity.Retrying(
            stop=tenacity.stop_after_attempt(max_attempts),
            wait=self._wait_seconds,
            retry=tenacity.retry_if_exception_type((_RetryableResponse, TransportError)),
            before_sleep=self._log_wait,
            sleep=self._sleep,
        )

        last_response: HttpResponse | None = None
        last_transport_error: TransportError | None = None
        try:
            for attempt in retrying:
                with attempt:
                    attempt_number = attempt.retry_state.attempt_number
                    try:
                        response = self._attempt(request, attempt_number, max_attempts)
                    except _RetryableResponse as exc:
                        last_response = exc.response
                        raise
                    except TransportError as exc:
                        last_transport_error = exc
                        raise
                    return response
        except tenacity.RetryError:
            self._emit(
                'error',
                'Maximum retry attempts exceeded',
                {
                    'method': request.method,
                    'url': request.url,
                    'max_attempts': max_attempts,
                    'last_status_code': last_response.status_code if last_response is not None else None,
                    'last_reason': last_response.reason_phrase if last_response is not None else None,
                },
            )
            raise MaxRetriesExceededError(max_attempts, last_response) from last_transport_error

        raise AssertionError('tenacity stopped without a result or RetryError')

    def _attempt(self, request: HttpRequest, attempt_number: int, max_attempts: int) -> HttpResponse:
        """Run one exchange and classify the outcome.

        Raises _RetryableResponse or TransportError for tenacity to retry,
        HttpClientError to stop immediately.
        """
        self._emit(
            'debug',
            'Sending HTTP request',
            {
                'method': request.method,
                'url': request.url,
                'attempt': attempt_number,
                'max_attempts': max_attempts,
            },
        )

        try:
            response = self._transport.send(request)
        except TransportError as exc:
            self._emit(
                'error',
                'HTTP transport error',
                {
                    'method': request.method,
                    'url': request.url,
                    'error': str(exc),
                    'attempt': attempt_number,
                },
            )
            raise

        if response.is_successful:
            self._emit(
                'info',
                'HTTP request successful',
                {
                    'method': request.method,
                    'url': request.url,
                    'status_code': response.status_code,
                    'attempt': attempt_number,
                },
            )
            return response

        if not self._retry_strategy.is_retryable_response(response):
            self._emit(
                'error',
                'HTTP request failed with non-retryable error',
                {
                    'method': request.method,
                    'url': request.url,
                    'status_code': response.status_code,
                    'reason': response.reason_phrase,
                    'response_body': response.body[:ERROR_BODY_LIMIT],
                },
            )
            raise HttpClientError.from_response(response, f'Non-retryable error on attempt {attempt_number}')

        self._emit(
            'warning',
            'HTTP request failed, will retry',
            {
                'method': request.method,
                'url': request.url,
                'status_code': response.status_code,
                'reason': response.reason_phrase,
                'attempt': attempt_number,
                'response_body': response.body[:WARNING_BODY_LIMIT],
            },
        )
        raise _RetryableResponse(response)

    def _wait_seconds(self, retry_state: tenacity.RetryCallState) -> float:
        """Backoff for the attempt that just failed."""
        return self._retry_strategy.get_delay_ms(retry_state.attempt_number) / 1000

    def _log_wait(self, retry_state: tenacity.RetryCallState) -> None:
        delay_seconds = retry_state.next_action.sleep if retry_state.next_action else 0.0
        self._emit(
            'debug',
            'Waiting before retry',
            {
                'attempt': retry_state.attempt_number,
                'delay_ms': round(delay_seconds * 1000),
            },
        )

    # -- Helpers --

    def _build_url(self, endpoint: str) -> str:
        if not self._base_url:
            return endpoint
        return f'{self._base_url.rstrip("/")}/{endpoint.lstrip("/")}'

    def _merge_headers(self, headers: Mapping[str, str] | None) -> dict[str, str]:
        return {**self._default_headers, **(headers or {})}

    def _emit(self, level: str, message: str, context: LogContext) -> None:
        """Deliver a log event. Sink failures never abort the request."""
        try:
            getattr(self._logger, level)(message, context)
        except Exception:
            logger.exception(f'[LOG] Request logger failed on {level} {message!r}')
