"""Tests for the value types."""

import pytest

from aiovolumio.models import ModeSwitch, RequestDescriptor, VolumeCommand, VolumeLevel


def test_volume_level_parse() -> None:
    """Test every accepted volume input resolves to the expected wire value."""
    assert VolumeLevel.parse(0).wire_value == "0"
    assert VolumeLevel.parse(100).wire_value == "100"
    assert VolumeLevel.parse(VolumeCommand.UNMUTE).wire_value == "unmute"
    assert VolumeLevel.parse("PLUS").value is VolumeCommand.PLUS
    level = VolumeLevel(42)
    assert VolumeLevel.parse(level) is level


@pytest.mark.parametrize("value", [-1, 101, False, None, "up", 12.0])
def test_volume_level_invalid(value: object) -> None:
    """Test values outside the vocabulary and range are rejected."""
    with pytest.raises(ValueError):
        VolumeLevel.parse(value)  # type: ignore[arg-type]


def test_mode_switch_from_value() -> None:
    """Test None maps to toggle, not to off."""
    assert ModeSwitch.from_value(None) is ModeSwitch.TOGGLE
    assert ModeSwitch.from_value(True) is ModeSwitch.ON
    assert ModeSwitch.from_value(False) is ModeSwitch.OFF
    assert ModeSwitch.from_value(ModeSwitch.OFF) is ModeSwitch.OFF


def test_request_descriptor_target() -> None:
    """Test rendering of the request target."""
    descriptor = RequestDescriptor("GET", "/api/v1/browse")
    assert descriptor.target == "/api/v1/browse"
    assert descriptor.query == ""
    descriptor = RequestDescriptor("GET", "/api/v1/search", (("query", "miles davis"),))
    assert descriptor.query == "query=miles+davis"
    assert descriptor.target == "/api/v1/search?query=miles+davis"
