"""Request engine: issues Volumio API requests with bounded retries.

Each call runs a sequential attempt loop. A response that reaches us (whatever
its HTTP status) ends the loop and its body is decoded as JSON. A transport
failure (connection refused, timeout, DNS/TLS error, dropped connection) is
retried after an exponential backoff of ``2**attempt * 100ms`` until
``max_attempts`` is reached, after which ExhaustedRetriesError is raised.

The engine holds no per-call state, so one instance may serve many concurrent
calls. The aiohttp session is created once (or injected) and shared.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import aiohttp

from .const import BACKOFF_BASE, LOGGER_NAME
from .errors import ExhaustedRetriesError, RequestCancelledError, TransportError
from .helpers.aiohttp_client import create_clientsession
from .helpers.json import JSON_DECODE_EXCEPTIONS, json_loads

if TYPE_CHECKING:
    from .config import ClientConfig
    from .models import RequestDescriptor

LOGGER = logging.getLogger(f"{LOGGER_NAME}.engine")

# failures to deliver a request and receive any response
TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (aiohttp.ClientError, TimeoutError, OSError)


@dataclass(frozen=True, slots=True)
class Success:
    """A response was received, result holds the decoded body."""

    result: Any


@dataclass(frozen=True, slots=True)
class RetryableFailure:
    """The attempt failed at the transport level and another attempt is allowed."""

    error: TransportError


@dataclass(frozen=True, slots=True)
class FatalFailure:
    """The attempt failed at the transport level and it was the last one."""

    error: TransportError


AttemptOutcome = Success | RetryableFailure | FatalFailure


def backoff_delay(attempt: int) -> float:
    """Return the seconds to wait after failed attempt number ``attempt`` (1-indexed)."""
    return float(2**attempt * BACKOFF_BASE)


def decode_body(body: bytes) -> Any:
    """Decode a response body, degrading empty/invalid/null json to an empty dict."""
    if not body:
        return {}
    try:
        result = json_loads(body)
    except JSON_DECODE_EXCEPTIONS:
        return {}
    return {} if result is None else result


class RequestEngine:
    """Execute request descriptors against one Volumio device."""

    def __init__(
        self,
        config: ClientConfig,
        session: aiohttp.ClientSession | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the engine, optionally with a borrowed session."""
        self.config = config
        self.logger = logger or LOGGER
        self._session = session
        self._owns_session = session is None
        self._timeout = aiohttp.ClientTimeout(total=config.timeout)

    @property
    def session(self) -> aiohttp.ClientSession:
        """Return the (shared) aiohttp session, creating it on first use."""
        if self._session is None:
            self._session = create_clientsession(self.config)
        return self._session

    async def close(self) -> None:
        """Close the session if this engine created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def execute(
        self,
        descriptor: RequestDescriptor,
        *,
        operation: str | None = None,
        deadline: float | None = None,
    ) -> Any:
        """Execute a request and return its decoded body.

        :param descriptor: The request to send.
        :param operation: Name used in logs and errors, defaults to the request target.
        :param deadline: Optional limit in seconds for the whole call, retries included.
        :raises ExhaustedRetriesError: All attempts failed at the transport level.
        :raises RequestCancelledError: The deadline expired.
        """
        operation = operation or f"{descriptor.method} {descriptor.target}"
        if deadline is None:
            return await self._run(descriptor, operation)
        timeout_scope = asyncio.timeout(deadline)
        try:
            async with timeout_scope:
                return await self._run(descriptor, operation)
        except TimeoutError as err:
            if timeout_scope.expired():
                raise RequestCancelledError(operation, deadline) from err
            raise

    async def _run(self, descriptor: RequestDescriptor, operation: str) -> Any:
        """Run the attempt loop until success or the attempts are exhausted."""
        attempt = 0
        while True:
            attempt += 1
            match await self._attempt(descriptor, operation, attempt):
                case Success(result=result):
                    return result
                case RetryableFailure(error=error):
                    self._log_failure(error)
                    await asyncio.sleep(backoff_delay(attempt))
                case FatalFailure(error=error):
                    self._log_failure(error)
                    raise ExhaustedRetriesError(operation, attempt, error) from error.cause

    async def _attempt(
        self, descriptor: RequestDescriptor, operation: str, attempt: int
    ) -> AttemptOutcome:
        """Send the request once and classify the outcome."""
        self.logger.debug(
            "%s %s (attempt %s/%s)",
            descriptor.method,
            descriptor.target,
            attempt,
            self.config.max_attempts,
        )
        try:
            async with self.session.request(
                descriptor.method,
                f"{self.config.base_url}{descriptor.path}",
                params=descriptor.params or None,
                json=descriptor.body,
                headers=self.config.headers,
                timeout=self._timeout,
                raise_for_status=False,
            ) as response:
                body = await response.read()
        except TRANSPORT_ERRORS as err:
            error = TransportError(operation, attempt, err)
            if attempt >= self.config.max_attempts:
                return FatalFailure(error)
            return RetryableFailure(error)
        # http error statuses are not retried, their body is returned like any other
        if response.status >= 400:
            self.logger.debug("%s returned HTTP %s", descriptor.target, response.status)
        return Success(decode_body(body))

    def _log_failure(self, error: TransportError) -> None:
        self.logger.warning(
            "Volumio API request %s failed (attempt %s/%s): %s",
            error.operation,
            error.attempt,
            self.config.max_attempts,
            error.cause,
        )
