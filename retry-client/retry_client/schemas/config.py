"""Client configuration schema.

Persistent, JSON-backed settings for building an HttpClient via
``retry_client.create_client``. Missing files fall back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pydantic

from retry_client.loggers.file import LogLevel
from retry_client.retry import ExponentialBackoffStrategy, RetryPreset, strategy_for_preset
from retry_client.schemas.base import StrictModel

__all__ = [
    'ClientConfig',
    'load_config',
    'save_config',
]

logger = logging.getLogger(__name__)


class ClientConfig(StrictModel):
    """Settings for one HttpClient + HttpxTransport pair.

    ``retry_preset``, when set, takes precedence over ``retry``.
    """

    base_url: str = ''
    default_headers: dict[str, str] = pydantic.Field(default_factory=dict)
    timeout_seconds: float = pydantic.Field(default=30.0, gt=0, strict=False)
    verify_ssl: bool = True
    retry: ExponentialBackoffStrategy = pydantic.Field(default_factory=ExponentialBackoffStrategy.default)
    retry_preset: RetryPreset | None = None
    log_file: Path | None = pydantic.Field(default=None, strict=False)
    log_level: LogLevel = 'debug'

    @classmethod
    def default(cls) -> ClientConfig:
        """Create default config: no base URL, default retry, no log file."""
        return cls()

    @property
    def retry_strategy(self) -> ExponentialBackoffStrategy:
        """Effective strategy after applying ``retry_preset``."""
        if self.retry_preset is not None:
            return strategy_for_preset(self.retry_preset)
        return self.retry


def load_config(path: Path) -> ClientConfig:
    """Load config from a JSON file. Returns defaults if the file does not exist.

    Raises:
        pydantic.ValidationError: If the file contents are invalid.
    """
    if not path.exists():
        logger.debug(f'No client config at {path}, using defaults')
        return ClientConfig.default()
    return ClientConfig.model_validate_json(path.read_text())


def save_config(config: ClientConfig, path: Path) -> None:
    """Save config atomically (write temp file, then rename)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix('.tmp')
    temp_path.write_text(json.dumps(config.model_dump(mode='json'), indent=2) + '\n')
    temp_path.rename(path)
