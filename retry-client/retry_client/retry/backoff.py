"""Exponential backoff retry strategy.

Formula: delay = min(base_delay_ms * multiplier ** attempt + jitter, max_delay_ms)

Example with defaults (base_delay_ms=100, multiplier=2, max_delay_ms=30000):
- After attempt 1: ~200ms
- After attempt 2: ~400ms
- After attempt 3: ~800ms

Jitter adds up to 10% of the computed delay to keep many clients from
retrying in lockstep.
"""

from __future__ import annotations

import math
import random
from typing import Annotated

import pydantic

from retry_client.schemas.base import StrictModel
from retry_client.schemas.http import RETRYABLE_STATUS_CODES, HttpResponse

__all__ = [
    'ExponentialBackoffStrategy',
]

JITTER_FRACTION = 0.1

# Accept any iterable of ints (set, list from JSON config) and store a frozenset
StatusCodes = Annotated[frozenset[int], pydantic.Field(strict=False)]


class ExponentialBackoffStrategy(StrictModel):
    """Immutable exponential backoff configuration.

    Satisfies the RetryStrategy protocol. Named presets cover the common
    cases: ``default()``, ``for_rate_limited_api()``, ``aggressive()`` and
    ``conservative()``.
    """

    max_attempts: int = pydantic.Field(default=3, ge=1)
    base_delay_ms: int = pydantic.Field(default=100, ge=0)
    multiplier: Annotated[float, pydantic.Field(strict=False)] = pydantic.Field(default=2.0, ge=0)
    max_delay_ms: int = pydantic.Field(default=30_000, ge=0)
    use_jitter: bool = True
    retryable_status_codes: StatusCodes = RETRYABLE_STATUS_CODES

    @classmethod
    def default(cls) -> ExponentialBackoffStrategy:
        """3 attempts, 100ms base, doubling, capped at 30s."""
        return cls()

    @classmethod
    def for_rate_limited_api(cls) -> ExponentialBackoffStrategy:
        """Longer delays, retries only on 429 and 503."""
        return cls(
            max_attempts=5,
            base_delay_ms=1000,
            multiplier=2.0,
            max_delay_ms=60_000,
            use_jitter=True,
            retryable_status_codes=frozenset({429, 503}),
        )

    @classmethod
    def aggressive(cls) -> ExponentialBackoffStrategy:
        """Many quick retries for critical operations."""
        return cls(
            max_attempts=5,
            base_delay_ms=50,
            multiplier=1.5,
            max_delay_ms=5000,
            use_jitter=True,
        )

    @classmethod
    def conservative(cls) -> ExponentialBackoffStrategy:
        """One retry after a long pause, for non-critical operations."""
        return cls(
            max_attempts=2,
            base_delay_ms=500,
            multiplier=3.0,
            max_delay_ms=10_000,
            use_jitter=True,
        )

    def is_retryable_response(self, response: HttpResponse) -> bool:
        return response.status_code in self.retryable_status_codes

    def should_retry(self, response: HttpResponse, attempt_number: int) -> bool:
        if attempt_number >= self.max_attempts:
            return False
        return self.is_retryable_response(response)

    def get_delay_ms(self, attempt_number: int) -> int:
        """Delay to wait after ``attempt_number`` (1-based) before the next attempt."""
        try:
            delay = math.floor(self.base_delay_ms * self.multiplier**attempt_number)
        except OverflowError:
            return self.max_delay_ms

        if self.use_jitter:
            delay += random.randint(0, math.floor(delay * JITTER_FRACTION))

        return min(delay, self.max_delay_ms)
