"""Settings for the retrying HTTP client."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """HTTP client settings; durations are in seconds."""

    timeout: float = 30.0
    max_retries: int = 2
    retry_delay: float = 1.0
    retry_backoff: bool = True


def default_config() -> Config:
    """Return the default client settings."""
    return Config()