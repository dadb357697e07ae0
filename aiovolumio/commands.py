"""Encode Volumio player operations into request descriptors.

Every function here is pure: it maps typed arguments onto the method, path,
query parameters and JSON body of one Volumio REST call. Values are not
validated beyond what the types enforce (the device answers bad input with an
error body); volume is the exception, see ``VolumeLevel``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from aiohttp import hdrs

from .const import API_PREFIX, COMMANDS_PATH
from .models import ModeSwitch, RequestDescriptor, VolumeLevel

if TYPE_CHECKING:
    from .models import VolumeCommand


def _get(path: str, *params: tuple[str, str]) -> RequestDescriptor:
    return RequestDescriptor(hdrs.METH_GET, f"{API_PREFIX}/{path}", params)


def _command(cmd: str, *params: tuple[str, str]) -> RequestDescriptor:
    return RequestDescriptor(hdrs.METH_GET, COMMANDS_PATH, (("cmd", cmd), *params))


def _mode(cmd: str, switch: ModeSwitch | bool | None) -> RequestDescriptor:
    switch = ModeSwitch.from_value(switch)
    if switch is ModeSwitch.TOGGLE:
        return _command(cmd)
    return _command(cmd, ("value", switch.value))


# player state and transport


def get_state() -> RequestDescriptor:
    """Return the request for the current player state."""
    return _get("getState")


def get_queue() -> RequestDescriptor:
    """Return the request for the current queue."""
    return _get("getQueue")


def toggle() -> RequestDescriptor:
    """Return the request toggling between play and pause."""
    return _command("toggle")


def pause() -> RequestDescriptor:
    """Return the request pausing playback."""
    return _command("pause")


def next_track() -> RequestDescriptor:
    """Return the request skipping to the next track."""
    return _command("next")


def previous_track() -> RequestDescriptor:
    """Return the request going back to the previous track."""
    return _command("prev")


def stop() -> RequestDescriptor:
    """Return the request stopping playback."""
    return _command("stop")


def set_volume(volume: int | str | VolumeCommand | VolumeLevel) -> RequestDescriptor:
    """Return the request setting the volume (0-100 or mute/unmute/plus/minus)."""
    level = VolumeLevel.parse(volume)
    return _command("volume", ("volume", level.wire_value))


def play(position: int = 0) -> RequestDescriptor:
    """Return the request playing the queue item at position."""
    return _command("play", ("N", str(position)))


def clear_queue() -> RequestDescriptor:
    """Return the request clearing the queue."""
    return _command("clearQueue")


def repeat(switch: ModeSwitch | bool | None = ModeSwitch.TOGGLE) -> RequestDescriptor:
    """Return the request toggling, enabling or disabling repeat."""
    return _mode("repeat", switch)


def random(switch: ModeSwitch | bool | None = ModeSwitch.TOGGLE) -> RequestDescriptor:
    """Return the request toggling, enabling or disabling random."""
    return _mode("random", switch)


# library


def list_playlists() -> RequestDescriptor:
    """Return the request listing the playlists."""
    return _get("listplaylists")


def play_playlist(name: str) -> RequestDescriptor:
    """Return the request playing a playlist by name."""
    return _command("playplaylist", ("name", name))


def browse(
    uri: str | None = None, limit: int | None = None, offset: int | None = None
) -> RequestDescriptor:
    """Return the request browsing the library.

    Only the given arguments end up in the query string, always in the order
    uri, limit, offset. Without arguments the root is browsed.
    """
    params: list[tuple[str, str]] = []
    if uri is not None:
        params.append(("uri", uri))
    if limit is not None:
        params.append(("limit", str(limit)))
    if offset is not None:
        params.append(("offset", str(offset)))
    return _get("browse", *params)


def search(query: str) -> RequestDescriptor:
    """Return the request searching the library."""
    return _get("search", ("query", query))


def add_to_queue(items: list[Any]) -> RequestDescriptor:
    """Return the request appending items to the queue."""
    return RequestDescriptor(hdrs.METH_POST, f"{API_PREFIX}/addToQueue", body=items)


def replace_and_play(data: dict[str, Any]) -> RequestDescriptor:
    """Return the request replacing the queue and starting playback.

    ``data`` is either a single item or ``{"item": ..., "list": ..., "index": ...}``.
    """
    return RequestDescriptor(hdrs.METH_POST, f"{API_PREFIX}/replaceAndPlay", body=data)


# system


def get_collection_stats() -> RequestDescriptor:
    """Return the request for the collection statistics."""
    return _get("collectionstats")


def get_zones() -> RequestDescriptor:
    """Return the request for the multiroom zones."""
    return _get("getzones")


def ping() -> RequestDescriptor:
    """Return the ping request."""
    return _get("ping")


def get_system_version() -> RequestDescriptor:
    """Return the request for the system version."""
    return _get("getSystemVersion")


def get_system_info() -> RequestDescriptor:
    """Return the request for the system information."""
    return _get("getSystemInfo")


# push notifications


def get_push_notification_urls() -> RequestDescriptor:
    """Return the request listing the push notification urls."""
    return _get("pushNotificationUrls")


def add_push_notification_url(url: str) -> RequestDescriptor:
    """Return the request registering a push notification url."""
    return RequestDescriptor(
        hdrs.METH_POST, f"{API_PREFIX}/pushNotificationUrls", body={"url": url}
    )


def remove_push_notification_url(url: str) -> RequestDescriptor:
    """Return the request removing a push notification url."""
    return RequestDescriptor(
        hdrs.METH_DELETE, f"{API_PREFIX}/pushNotificationUrls", (("url", url),)
    )
