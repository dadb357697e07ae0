"""Value types shared by the command encoder and the request engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Any
from urllib.parse import urlencode

VOLUME_MIN = 0
VOLUME_MAX = 100


class VolumeCommand(StrEnum):
    """Symbolic volume values understood by Volumio."""

    MUTE = "mute"
    UNMUTE = "unmute"
    PLUS = "plus"
    MINUS = "minus"


@dataclass(frozen=True)
class VolumeLevel:
    """Either an absolute volume (0-100) or a symbolic volume command."""

    value: int | VolumeCommand

    def __post_init__(self) -> None:
        """Validate the volume value."""
        if isinstance(self.value, VolumeCommand):
            return
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Invalid volume: {self.value!r}")
        if not VOLUME_MIN <= self.value <= VOLUME_MAX:
            raise ValueError(f"Volume {self.value} out of range {VOLUME_MIN}-{VOLUME_MAX}")

    @classmethod
    def parse(cls, value: int | str | VolumeCommand | VolumeLevel) -> VolumeLevel:
        """Build a VolumeLevel from an int, a command (or its name on the wire)."""
        if isinstance(value, VolumeLevel):
            return value
        if isinstance(value, str) and not isinstance(value, VolumeCommand):
            try:
                value = VolumeCommand(value.lower())
            except ValueError as err:
                raise ValueError(f"Invalid volume command: {value!r}") from err
        return cls(value)

    @property
    def wire_value(self) -> str:
        """Return the value as sent in the query string."""
        if isinstance(self.value, VolumeCommand):
            return self.value.value
        return str(self.value)


class ModeSwitch(Enum):
    """Tri-state switch for the repeat and random modes."""

    TOGGLE = "toggle"
    ON = "true"
    OFF = "false"

    @classmethod
    def from_value(cls, value: ModeSwitch | bool | None) -> ModeSwitch:
        """Map None/True/False (or a ModeSwitch) to a ModeSwitch."""
        if isinstance(value, ModeSwitch):
            return value
        if value is None:
            return cls.TOGGLE
        return cls.ON if value else cls.OFF


@dataclass(frozen=True)
class RequestDescriptor:
    """A single Volumio API request, not yet bound to a host."""

    method: str
    path: str
    params: tuple[tuple[str, str], ...] = ()
    body: Any = None

    @property
    def query(self) -> str:
        """Return the url-encoded query string (without leading '?')."""
        return urlencode(self.params)

    @property
    def target(self) -> str:
        """Return path and form-encoded query for logs and display.

        The query aiohttp puts on the wire may quote differently (e.g. a literal
        "/"), both decode to the same parameters.
        """
        if not self.params:
            return self.path
        return f"{self.path}?{self.query}"
