"""HTTP request and response value objects.

Both are frozen models. Requests are built through the verb factories
(``HttpRequest.post(...)`` etc.) and never mutated; ``with_headers`` returns
a new instance. Responses are produced once per transport call.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Literal

import pydantic

from retry_client.schemas.base import StrictModel

__all__ = [
    'HttpMethod',
    'HttpRequest',
    'HttpResponse',
    'JSON_CONTENT_TYPE',
    'RETRYABLE_STATUS_CODES',
    'SUCCESS_STATUS_CODES',
]

type HttpMethod = Literal['GET', 'POST', 'PUT', 'PATCH', 'DELETE']

JSON_CONTENT_TYPE = {'Content-Type': 'application/json'}

SUCCESS_STATUS_CODES = frozenset({200, 201, 202, 203, 204, 205, 206})

# 408: Request timeout
# 429: Rate limit exceeded
# 500: Internal server error
# 502: Bad gateway
# 503: Service unavailable
# 504: Gateway timeout
RETRYABLE_STATUS_CODES = frozenset({408, 429, 500, 502, 503, 504})

_REASON_PHRASES: Mapping[int, str] = {
    200: 'OK',
    201: 'Created',
    202: 'Accepted',
    204: 'No Content',
    400: 'Bad Request',
    401: 'Unauthorized',
    403: 'Forbidden',
    404: 'Not Found',
    408: 'Request Timeout',
    429: 'Too Many Requests',
    500: 'Internal Server Error',
    502: 'Bad Gateway',
    503: 'Service Unavailable',
    504: 'Gateway Timeout',
}


class HttpRequest(StrictModel):
    """Immutable HTTP request.

    Body is an ordered mapping that the transport encodes as JSON.
    """

    url: str
    method: HttpMethod = 'POST'
    body: dict[str, Any] = pydantic.Field(default_factory=dict)
    headers: dict[str, str] = pydantic.Field(default_factory=dict)

    @classmethod
    def get(cls, url: str, headers: Mapping[str, str] | None = None) -> HttpRequest:
        return cls(url=url, method='GET', headers=dict(headers or {}))

    @classmethod
    def post(
        cls,
        url: str,
        body: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpRequest:
        return cls._with_json_body(url, 'POST', body, headers)

    @classmethod
    def put(
        cls,
        url: str,
        body: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpRequest:
        return cls._with_json_body(url, 'PUT', body, headers)

    @classmethod
    def patch(
        cls,
        url: str,
        body: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpRequest:
        return cls._with_json_body(url, 'PATCH', body, headers)

    @classmethod
    def delete(cls, url: str, headers: Mapping[str, str] | None = None) -> HttpRequest:
        return cls(url=url, method='DELETE', headers=dict(headers or {}))

    @classmethod
    def _with_json_body(
        cls,
        url: str,
        method: HttpMethod,
        body: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None,
    ) -> HttpRequest:
        """Build a body-carrying request. Caller headers override the JSON content type."""
        return cls(
            url=url,
            method=method,
            body=dict(body or {}),
            headers={**JSON_CONTENT_TYPE, **(headers or {})},
        )

    def with_headers(self, headers: Mapping[str, str]) -> HttpRequest:
        """Return a copy with ``headers`` merged in. New values win on collision."""
        return self.model_copy(update={'headers': {**self.headers, **headers}})

    def json_body(self) -> str:
        """Encode the body as compact JSON."""
        return json.dumps(self.body, separators=(',', ':'))


class HttpResponse(StrictModel):
    """Immutable HTTP response. Header names are stored lowercased."""

    status_code: int
    body: str = ''
    headers: dict[str, str] = pydantic.Field(default_factory=dict)

    @pydantic.field_validator('headers')
    @classmethod
    def _lowercase_header_names(cls, headers: dict[str, str]) -> dict[str, str]:
        return {name.lower(): value for name, value in headers.items()}

    @property
    def is_successful(self) -> bool:
        return self.status_code in SUCCESS_STATUS_CODES

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600

    @property
    def is_retryable(self) -> bool:
        """Status is one of the default retryable codes.

        Retry strategies carry their own code set; this is the library default.
        """
        return self.status_code in RETRYABLE_STATUS_CODES

    @property
    def reason_phrase(self) -> str:
        return _REASON_PHRASES.get(self.status_code, 'Unknown')

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower())

    def decode_json(self) -> Any:
        """Parse the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """
        return json.loads(self.body)
