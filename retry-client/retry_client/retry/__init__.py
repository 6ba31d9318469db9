"""Retry strategies and named presets."""

from __future__ import annotations

from typing import Literal

from retry_client.retry.backoff import ExponentialBackoffStrategy

__all__ = [
    'ExponentialBackoffStrategy',
    'RetryPreset',
    'strategy_for_preset',
]

type RetryPreset = Literal['default', 'rate_limited', 'aggressive', 'conservative']


def strategy_for_preset(preset: RetryPreset) -> ExponentialBackoffStrategy:
    """Resolve a preset name to its strategy."""
    match preset:
        case 'default':
            return ExponentialBackoffStrategy.default()
        case 'rate_limited':
            return ExponentialBackoffStrategy.for_rate_limited_api()
        case 'aggressive':
            return ExponentialBackoffStrategy.aggressive()
        case 'conservative':
            return ExponentialBackoffStrategy.conservative()

    raise ValueError(f'Unknown retry preset: {preset!r}')
