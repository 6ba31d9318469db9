"""Shared pytest fixtures for retry_client tests.

Collaborator fakes live in ``tests/retry_client/fakes.py``; this module
wires them into fixtures. pythonpath=[".", "retry-client"] in pyproject.toml
makes both ``tests.*`` and ``retry_client`` importable without installing.
"""

from __future__ import annotations

import pytest

from retry_client.retry import ExponentialBackoffStrategy
from tests.retry_client.fakes import MockTransport, RecordingSleep, SpyLogger


@pytest.fixture
def transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def spy_logger() -> SpyLogger:
    return SpyLogger()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def no_jitter_strategy() -> ExponentialBackoffStrategy:
    """3 attempts, 100ms base, doubling, deterministic delays (200ms, 400ms, ...)."""
    return ExponentialBackoffStrategy(max_attempts=3, base_delay_ms=100, multiplier=2.0, use_jitter=False)
