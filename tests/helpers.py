"""Helpers for the aiovolumio tests."""

import socket
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import AsyncMock

from aiohttp import ClientResponse, web

from aiovolumio.helpers.json import json_dumps, json_loads


def get_free_port() -> int:
    """Get a free port number.

    :return: Available port number.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("", 0))
        s.listen(1)
        port: int = s.getsockname()[1]
        return port


def mock_response(status: int = 200, body: bytes = b"{}") -> AsyncMock:
    """Return a mock usable as ``async with session.request(...) as response``."""
    response = AsyncMock(spec=ClientResponse)
    response.status = status
    response.read.return_value = body
    request_ctx = AsyncMock()
    request_ctx.__aenter__.return_value = response
    return request_ctx


@dataclass
class ReceivedRequest:
    """A request as seen by the fake Volumio device."""

    method: str
    path: str
    query: list[tuple[str, str]]
    headers: dict[str, str]
    body: Any


@dataclass
class FakeVolumio:
    """A local aiohttp server standing in for a Volumio device."""

    base_url: str = ""
    requests: list[ReceivedRequest] = field(default_factory=list)
    # path -> (status, raw body)
    responses: dict[str, tuple[int, bytes]] = field(default_factory=dict)

    def reply(self, path: str, payload: Any, status: int = 200) -> None:
        """Set the json payload returned for a path."""
        self.responses[path] = (status, json_dumps(payload).encode())

    async def handle(self, request: web.Request) -> web.Response:
        """Record the request and answer it."""
        raw = await request.read()
        self.requests.append(
            ReceivedRequest(
                method=request.method,
                path=request.path,
                query=list(request.query.items()),
                headers=dict(request.headers),
                body=json_loads(raw) if raw else None,
            )
        )
        status, body = self.responses.get(request.path, (200, b"{}"))
        return web.Response(status=status, body=body, content_type="application/json")
