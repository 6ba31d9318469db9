"""Pydantic schemas for requests, responses and client configuration."""

from __future__ import annotations

from retry_client.schemas.base import StrictModel
from retry_client.schemas.config import ClientConfig, load_config, save_config
from retry_client.schemas.http import (
    JSON_CONTENT_TYPE,
    RETRYABLE_STATUS_CODES,
    SUCCESS_STATUS_CODES,
    HttpMethod,
    HttpRequest,
    HttpResponse,
)

__all__ = [
    'ClientConfig',
    'HttpMethod',
    'HttpRequest',
    'HttpResponse',
    'JSON_CONTENT_TYPE',
    'RETRYABLE_STATUS_CODES',
    'SUCCESS_STATUS_CODES',
    'StrictModel',
    'load_config',
    'save_config',
]
