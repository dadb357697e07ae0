"""Configuration of the Volumio API client."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from mashumaro import DataClassDictMixin

from .const import (
    DEFAULT_BASE_URL,
    DEFAULT_HEADERS,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TIMEOUT,
    ENV_BASE_URL,
    ENV_RETRIES,
    ENV_TIMEOUT,
)


def _merge_headers(overrides: Mapping[str, str]) -> dict[str, str]:
    """Return the default headers updated with overrides (case-insensitive keys)."""
    overridden = {key.lower() for key in overrides}
    headers = {
        key: value for key, value in DEFAULT_HEADERS.items() if key.lower() not in overridden
    }
    headers.update(overrides)
    return headers


@dataclass(frozen=True)
class ClientConfig(DataClassDictMixin):
    """Settings for one Volumio device, fixed for the lifetime of a client."""

    base_url: str = DEFAULT_BASE_URL
    # seconds, applied to every single attempt
    timeout: float = DEFAULT_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Normalize and validate the settings."""
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "headers", _merge_headers(self.headers))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> ClientConfig:
        """Create the config from VOLUMIO_API_* environment variables.

        Keyword overrides take precedence over the environment.
        """
        if environ is None:
            environ = os.environ
        values: dict[str, Any] = {
            "base_url": environ.get(ENV_BASE_URL, DEFAULT_BASE_URL),
            "timeout": float(environ.get(ENV_TIMEOUT, DEFAULT_TIMEOUT)),
            "max_attempts": int(environ.get(ENV_RETRIES, DEFAULT_MAX_ATTEMPTS)),
        }
        values.update(overrides)
        return cls(**values)
