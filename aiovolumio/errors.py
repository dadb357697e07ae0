"""Errors raised by the Volumio API client."""

from __future__ import annotations

from music_assistant_models.errors import (
    MusicAssistantError,
    ResourceTemporarilyUnavailable,
    RetriesExhausted,
)


class TransportError(ResourceTemporarilyUnavailable):
    """Request did not complete delivery (connect, timeout, TLS, dropped connection)."""

    error_code = 900

    def __init__(self, operation: str, attempt: int, cause: BaseException) -> None:
        """Initialize."""
        super().__init__(f"{operation} failed on attempt {attempt}: {cause!r}")
        self.operation = operation
        self.attempt = attempt
        self.cause = cause


class ExhaustedRetriesError(RetriesExhausted):
    """All permitted attempts of a request failed at the transport level."""

    error_code = 901

    def __init__(self, operation: str, attempts: int, last_error: TransportError) -> None:
        """Initialize."""
        super().__init__(
            f"Volumio API request {operation} failed after {attempts} attempts: "
            f"{last_error.cause!r}"
        )
        self.operation = operation
        self.attempts = attempts
        self.last_error = last_error


class RequestCancelledError(MusicAssistantError):
    """The deadline of a request expired before it completed."""

    error_code = 902

    def __init__(self, operation: str, deadline: float) -> None:
        """Initialize."""
        super().__init__(f"Volumio API request {operation} cancelled after {deadline}s deadline")
        self.operation = operation
        self.deadline = deadline
