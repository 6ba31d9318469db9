"""Tests for the HttpClientError taxonomy."""

from __future__ import annotations

import pytest

from retry_client.errors import HttpClientError, MaxRetriesExceededError, TransportError
from retry_client.schemas.http import HttpResponse


class TestHttpClientError:
    def test_from_response_default_message(self) -> None:
        response = HttpResponse(status_code=404, body='nope')
        error = HttpClientError.from_response(response)

        assert str(error) == 'HTTP request failed with status 404: Not Found'
        assert error.code == 404
        assert error.response is response

    def test_from_response_custom_message(self) -> None:
        error = HttpClientError.from_response(HttpResponse(status_code=400), 'Non-retryable error on attempt 2')
        assert error.message == 'Non-retryable error on attempt 2'
        assert error.code == 400

    def test_defaults(self) -> None:
        error = HttpClientError('boom')
        assert error.code == 0
        assert error.response is None


class TestTransportError:
    @pytest.mark.parametrize(
        'error, kind, message',
        [
            (
                TransportError.connection_failed('https://api.example.com/users'),
                'connection',
                'Failed to connect to https://api.example.com/users',
            ),
            (
                TransportError.timeout('https://api.example.com/users', 30),
                'timeout',
                'Request to https://api.example.com/users timed out after 30 seconds',
            ),
            (
                TransportError.timeout('https://api.example.com/users', 2.5),
                'timeout',
                'Request to https://api.example.com/users timed out after 2.5 seconds',
            ),
            (
                TransportError.dns_resolution_failed('api.example.com'),
                'dns',
                'Failed to resolve DNS for host: api.example.com',
            ),
        ],
    )
    def test_sub_kinds(self, error: TransportError, kind: str, message: str) -> None:
        assert error.kind == kind
        assert str(error) == message
        assert error.code == 0
        assert error.response is None

    def test_is_http_client_error(self) -> None:
        assert isinstance(TransportError.connection_failed('x'), HttpClientError)

    def test_chains_cause(self) -> None:
        cause = ConnectionRefusedError('refused')
        with pytest.raises(TransportError) as exc_info:
            try:
                raise cause
            except ConnectionRefusedError as exc:
                raise TransportError.connection_failed('https://x.test') from exc

        assert exc_info.value.__cause__ is cause


class TestMaxRetriesExceededError:
    def test_with_last_response(self) -> None:
        response = HttpResponse(status_code=503)
        error = MaxRetriesExceededError(5, response)

        assert error.attempts == 5
        assert error.last_response is response
        assert error.response is response
        assert error.code == 503
        assert str(error) == 'Maximum retry attempts (5) exceeded. Last status code: 503'

    def test_without_response(self) -> None:
        error = MaxRetriesExceededError(3)

        assert error.last_response is None
        assert error.code == 0
        assert str(error) == 'Maximum retry attempts (3) exceeded. Last status code: N/A'
