"""Fixtures for testing the Volumio API client."""

import logging
from collections.abc import AsyncGenerator, Generator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from aiovolumio import ClientConfig

from .helpers import FakeVolumio, mock_response


@pytest.fixture(name="caplog")
def caplog_fixture(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Set log level to debug for tests using the caplog fixture."""
    caplog.set_level(logging.DEBUG)
    return caplog


@pytest.fixture
def config() -> ClientConfig:
    """Return a config pointing to a fake device."""
    return ClientConfig(base_url="http://volumio.test/", timeout=5, max_attempts=3)


@pytest.fixture
def session_mock() -> MagicMock:
    """Return a mock aiohttp session answering every request with an empty object."""
    session = MagicMock()
    session.request = MagicMock(return_value=mock_response())
    session.close = AsyncMock()
    return session


@pytest.fixture
def sleep_mock() -> Generator[AsyncMock, None, None]:
    """Patch out the backoff sleeps, recording the requested delays."""
    with patch("asyncio.sleep", new_callable=AsyncMock) as mock:
        yield mock


@pytest.fixture
async def volumio_server() -> AsyncGenerator[FakeVolumio, None]:
    """Run a fake Volumio device on a random local port."""
    fake = FakeVolumio()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", fake.handle)
    async with TestServer(app, host="127.0.0.1") as server:
        fake.base_url = f"http://127.0.0.1:{server.port}"
        yield fake
