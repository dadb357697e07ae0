"""Volumio REST API client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

from . import commands
from .config import ClientConfig
from .const import LOGGER_NAME, PING_FALLBACK
from .engine import RequestEngine
from .models import ModeSwitch, VolumeCommand

if TYPE_CHECKING:
    from types import TracebackType

    import aiohttp

    from .models import RequestDescriptor, VolumeLevel


class VolumioClient:
    """Control a single Volumio device through its REST API.

    Every call is retried on transport failures (see RequestEngine) and returns
    the decoded json body of the response, whatever its HTTP status.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the client, reading the environment when no config is given."""
        self.config = config or ClientConfig.from_env()
        self.logger = logging.getLogger(LOGGER_NAME)
        self.engine = RequestEngine(self.config, session)

    async def __aenter__(self) -> Self:
        """Enter context manager."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying session (when owned by this client)."""
        await self.engine.close()

    async def request(
        self,
        descriptor: RequestDescriptor,
        operation: str | None = None,
        deadline: float | None = None,
    ) -> Any:
        """Execute any request descriptor, for endpoints without a dedicated method."""
        return await self.engine.execute(descriptor, operation=operation, deadline=deadline)

    # player state and transport

    async def get_state(self, deadline: float | None = None) -> Any:
        """Get the current state of the player."""
        return await self.request(commands.get_state(), "get_state", deadline)

    async def get_queue(self, deadline: float | None = None) -> Any:
        """Get the current queue."""
        return await self.request(commands.get_queue(), "get_queue", deadline)

    async def toggle(self, deadline: float | None = None) -> Any:
        """Toggle between play and pause."""
        return await self.request(commands.toggle(), "toggle", deadline)

    async def pause(self, deadline: float | None = None) -> Any:
        """Pause the current track."""
        return await self.request(commands.pause(), "pause", deadline)

    async def next_track(self, deadline: float | None = None) -> Any:
        """Play the next track."""
        return await self.request(commands.next_track(), "next_track", deadline)

    async def previous_track(self, deadline: float | None = None) -> Any:
        """Play the previous track."""
        return await self.request(commands.previous_track(), "previous_track", deadline)

    async def stop(self, deadline: float | None = None) -> Any:
        """Stop playback."""
        return await self.request(commands.stop(), "stop", deadline)

    async def play(self, position: int = 0, deadline: float | None = None) -> Any:
        """Play the item at position in the queue."""
        return await self.request(commands.play(position), "play", deadline)

    async def clear_queue(self, deadline: float | None = None) -> Any:
        """Clear the queue."""
        return await self.request(commands.clear_queue(), "clear_queue", deadline)

    async def repeat(
        self, switch: ModeSwitch | bool | None = ModeSwitch.TOGGLE, deadline: float | None = None
    ) -> Any:
        """Toggle repeat, or set it when switch is ON/OFF (True/False)."""
        return await self.request(commands.repeat(switch), "repeat", deadline)

    async def random(
        self, switch: ModeSwitch | bool | None = ModeSwitch.TOGGLE, deadline: float | None = None
    ) -> Any:
        """Toggle random, or set it when switch is ON/OFF (True/False)."""
        return await self.request(commands.random(switch), "random", deadline)

    # volume

    async def set_volume(
        self, volume: int | str | VolumeCommand | VolumeLevel, deadline: float | None = None
    ) -> Any:
        """Set the volume to 0-100, or send mute/unmute/plus/minus."""
        return await self.request(commands.set_volume(volume), "set_volume", deadline)

    async def volume_up(self, deadline: float | None = None) -> Any:
        """Increase the volume."""
        return await self.set_volume(VolumeCommand.PLUS, deadline)

    async def volume_down(self, deadline: float | None = None) -> Any:
        """Decrease the volume."""
        return await self.set_volume(VolumeCommand.MINUS, deadline)

    async def mute(self, deadline: float | None = None) -> Any:
        """Mute the volume."""
        return await self.set_volume(VolumeCommand.MUTE, deadline)

    async def unmute(self, deadline: float | None = None) -> Any:
        """Unmute the volume."""
        return await self.set_volume(VolumeCommand.UNMUTE, deadline)

    # library

    async def list_playlists(self, deadline: float | None = None) -> Any:
        """Get the list of available playlists."""
        return await self.request(commands.list_playlists(), "list_playlists", deadline)

    async def play_playlist(self, name: str, deadline: float | None = None) -> Any:
        """Play a playlist by name."""
        return await self.request(commands.play_playlist(name), "play_playlist", deadline)

    async def browse(
        self,
        uri: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        deadline: float | None = None,
    ) -> Any:
        """Browse the music library, from the root when no uri is given."""
        return await self.request(commands.browse(uri, limit, offset), "browse", deadline)

    async def search(self, query: str, deadline: float | None = None) -> Any:
        """Search the music library."""
        return await self.request(commands.search(query), "search", deadline)

    async def add_to_queue(self, items: list[Any], deadline: float | None = None) -> Any:
        """Add items to the queue."""
        return await self.request(commands.add_to_queue(items), "add_to_queue", deadline)

    async def replace_and_play(self, data: dict[str, Any], deadline: float | None = None) -> Any:
        """Replace the queue and play.

        :param data: A single item or ``{"item": item, "list": items, "index": index}``.
        """
        return await self.request(commands.replace_and_play(data), "replace_and_play", deadline)

    # system

    async def get_collection_stats(self, deadline: float | None = None) -> Any:
        """Get collection statistics."""
        return await self.request(
            commands.get_collection_stats(), "get_collection_stats", deadline
        )

    async def get_zones(self, deadline: float | None = None) -> Any:
        """Get information about Volumio (multiroom) zones."""
        return await self.request(commands.get_zones(), "get_zones", deadline)

    async def ping(self, deadline: float | None = None) -> str:
        """Ping the device, returning its answer ("pong" when it does not say)."""
        result = await self.request(commands.ping(), "ping", deadline)
        if not isinstance(result, dict):
            return PING_FALLBACK
        response = result.get("response")
        return PING_FALLBACK if response is None else str(response)

    async def get_system_version(self, deadline: float | None = None) -> Any:
        """Get system version information."""
        return await self.request(commands.get_system_version(), "get_system_version", deadline)

    async def get_system_info(self, deadline: float | None = None) -> Any:
        """Get system information."""
        return await self.request(commands.get_system_info(), "get_system_info", deadline)

    # push notifications

    async def get_push_notification_urls(self, deadline: float | None = None) -> Any:
        """Get the registered push notification urls."""
        return await self.request(
            commands.get_push_notification_urls(), "get_push_notification_urls", deadline
        )

    async def add_push_notification_url(self, url: str, deadline: float | None = None) -> Any:
        """Register a push notification url."""
        self.logger.debug("Registering push notification url %s", url)
        return await self.request(
            commands.add_push_notification_url(url), "add_push_notification_url", deadline
        )

    async def remove_push_notification_url(self, url: str, deadline: float | None = None) -> Any:
        """Remove a push notification url."""
        self.logger.debug("Removing push notification url %s", url)
        return await self.request(
            commands.remove_push_notification_url(url), "remove_push_notification_url", deadline
        )
