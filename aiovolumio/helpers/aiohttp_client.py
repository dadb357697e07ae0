"""Helpers for setting up a aiohttp session (and related)."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

import aiohttp
from aiohttp.hdrs import USER_AGENT

from aiovolumio.const import APPLICATION_NAME, VERSION

from .json import json_dumps

if TYPE_CHECKING:
    from aiovolumio.config import ClientConfig

# a single device never needs many parallel connections
MAXIMUM_CONNECTIONS_PER_HOST = 10


def create_clientsession(config: ClientConfig, **kwargs: Any) -> aiohttp.ClientSession:
    """Create the ClientSession used to talk to one Volumio device.

    This method must be run in the event loop.
    """
    headers = {USER_AGENT: user_agent(), **config.headers}
    return aiohttp.ClientSession(
        connector=aiohttp.TCPConnector(limit_per_host=MAXIMUM_CONNECTIONS_PER_HOST),
        json_serialize=json_dumps,
        headers=headers,
        **kwargs,
    )


def user_agent() -> str:
    """Return the user agent we identify with."""
    return (
        f"{APPLICATION_NAME}/{VERSION} "
        f"aiohttp/{aiohttp.__version__} Python/{sys.version_info[0]}.{sys.version_info[1]}"
    )
