"""Tests for HttpRequest / HttpResponse value objects."""

from __future__ import annotations

import json

import pydantic
import pytest

from retry_client.schemas.http import HttpRequest, HttpResponse


class TestHttpRequestFactories:
    """Verify verb factories build the right request shape."""

    def test_post_adds_json_content_type(self) -> None:
        request = HttpRequest.post('https://api.example.com/users', {'name': 'John'})

        assert request.method == 'POST'
        assert request.headers == {'Content-Type': 'application/json'}
        assert request.json_body() == '{"name":"John"}'

    @pytest.mark.parametrize('factory', [HttpRequest.post, HttpRequest.put, HttpRequest.patch])
    def test_body_methods_carry_content_type(self, factory: object) -> None:
        request = factory('https://api.example.com/items/1', {'qty': 2})  # type: ignore[operator]
        assert request.headers['Content-Type'] == 'application/json'
        assert request.body == {'qty': 2}

    def test_caller_header_overrides_content_type(self) -> None:
        request = HttpRequest.post('https://x.test', {'a': 1}, {'Content-Type': 'application/vnd.api+json'})
        assert request.headers == {'Content-Type': 'application/vnd.api+json'}

    @pytest.mark.parametrize(
        'factory, method',
        [
            (HttpRequest.get, 'GET'),
            (HttpRequest.delete, 'DELETE'),
        ],
    )
    def test_bodyless_methods(self, factory: object, method: str) -> None:
        request = factory('https://x.test/thing', {'Accept': 'text/plain'})  # type: ignore[operator]
        assert request.method == method
        assert request.body == {}
        assert request.headers == {'Accept': 'text/plain'}

    def test_body_preserves_key_order(self) -> None:
        request = HttpRequest.post('https://x.test', {'b': 1, 'a': 2, 'c': 3})
        assert list(request.body) == ['b', 'a', 'c']
        assert request.json_body() == '{"b":1,"a":2,"c":3}'

    def test_identical_arguments_build_equal_requests(self) -> None:
        first = HttpRequest.post('https://x.test', {'name': 'John'}, {'X-Trace': '1'})
        second = HttpRequest.post('https://x.test', {'name': 'John'}, {'X-Trace': '1'})
        assert first == second
        assert first is not second


class TestHttpRequestImmutability:
    """Requests never change after construction."""

    def test_with_headers_returns_new_instance(self) -> None:
        original = HttpRequest.get('https://x.test', {'Accept': 'text/plain'})
        updated = original.with_headers({'Accept': 'application/json', 'X-Trace': 'abc'})

        assert updated.headers == {'Accept': 'application/json', 'X-Trace': 'abc'}
        assert original.headers == {'Accept': 'text/plain'}
        assert updated.url == original.url
        assert updated.method == original.method

    def test_assignment_rejected(self) -> None:
        request = HttpRequest.get('https://x.test')
        with pytest.raises(pydantic.ValidationError):
            request.url = 'https://other.test'  # type: ignore[misc]

    def test_unknown_method_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            HttpRequest(url='https://x.test', method='TRACE')  # type: ignore[arg-type]


class TestHttpResponseClassification:
    """Derived classifications are pure functions of the status code."""

    @pytest.mark.parametrize('status', [200, 201, 202, 203, 204, 205, 206])
    def test_successful(self, status: int) -> None:
        assert HttpResponse(status_code=status).is_successful

    @pytest.mark.parametrize('status', [100, 207, 301, 304, 400, 500])
    def test_not_successful(self, status: int) -> None:
        assert not HttpResponse(status_code=status).is_successful

    @pytest.mark.parametrize(
        'status, client_error, server_error',
        [
            (399, False, False),
            (400, True, False),
            (404, True, False),
            (499, True, False),
            (500, False, True),
            (599, False, True),
            (600, False, False),
        ],
    )
    def test_error_ranges(self, status: int, client_error: bool, server_error: bool) -> None:
        response = HttpResponse(status_code=status)
        assert response.is_client_error is client_error
        assert response.is_server_error is server_error

    @pytest.mark.parametrize('status', [408, 429, 500, 502, 503, 504])
    def test_default_retryable(self, status: int) -> None:
        assert HttpResponse(status_code=status).is_retryable

    @pytest.mark.parametrize('status', [200, 400, 401, 403, 404, 501])
    def test_default_not_retryable(self, status: int) -> None:
        assert not HttpResponse(status_code=status).is_retryable


class TestHttpResponseAccessors:
    def test_header_names_lowercased(self) -> None:
        response = HttpResponse(status_code=200, headers={'Content-Type': 'text/html', 'X-Request-ID': 'r1'})
        assert response.headers == {'content-type': 'text/html', 'x-request-id': 'r1'}

    def test_header_lookup_case_insensitive(self) -> None:
        response = HttpResponse(status_code=200, headers={'Retry-After': '5'})
        assert response.header('retry-after') == '5'
        assert response.header('RETRY-AFTER') == '5'
        assert response.header('missing') is None

    @pytest.mark.parametrize(
        'status, reason',
        [
            (200, 'OK'),
            (204, 'No Content'),
            (429, 'Too Many Requests'),
            (503, 'Service Unavailable'),
            (418, 'Unknown'),
        ],
    )
    def test_reason_phrase(self, status: int, reason: str) -> None:
        assert HttpResponse(status_code=status).reason_phrase == reason

    def test_decode_json(self) -> None:
        response = HttpResponse(status_code=200, body='{"status":"ok","items":[1,2]}')
        assert response.decode_json() == {'status': 'ok', 'items': [1, 2]}

    def test_decode_invalid_json_raises(self) -> None:
        response = HttpResponse(status_code=200, body='<html>')
        with pytest.raises(json.JSONDecodeError):
            response.decode_json()

    def test_strict_status_code(self) -> None:
        """No implicit coercion: '200' is not a status code."""
        with pytest.raises(pydantic.ValidationError):
            HttpResponse(status_code='200')  # type: ignore[arg-type]
