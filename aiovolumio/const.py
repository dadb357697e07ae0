"""Constants for the Volumio API client."""

from __future__ import annotations

from importlib.metadata import version
from typing import Final

from aiohttp import hdrs

LOGGER_NAME: Final[str] = "aiovolumio"
APPLICATION_NAME: Final[str] = "aiovolumio"
VERSION: Final[str] = version("aiovolumio")

API_PREFIX: Final[str] = "/api/v1"
COMMANDS_PATH: Final[str] = f"{API_PREFIX}/commands/"

CONTENT_TYPE_JSON: Final[str] = "application/json"
DEFAULT_HEADERS: Final[dict[str, str]] = {
    hdrs.ACCEPT: CONTENT_TYPE_JSON,
    hdrs.CONTENT_TYPE: CONTENT_TYPE_JSON,
}

ENV_BASE_URL: Final[str] = "VOLUMIO_API_URL"
ENV_TIMEOUT: Final[str] = "VOLUMIO_API_TIMEOUT"
ENV_RETRIES: Final[str] = "VOLUMIO_API_RETRIES"

DEFAULT_BASE_URL: Final[str] = "http://localhost:3000"
DEFAULT_TIMEOUT: Final[float] = 10
DEFAULT_MAX_ATTEMPTS: Final[int] = 3

# backoff after failed attempt N is 2**N * BACKOFF_BASE seconds
BACKOFF_BASE: Final[float] = 0.1

PING_FALLBACK: Final[str] = "pong"
