"""Async client for the Volumio REST API."""

from .client import VolumioClient
from .config import ClientConfig
from .errors import ExhaustedRetriesError, RequestCancelledError, TransportError
from .models import ModeSwitch, RequestDescriptor, VolumeCommand, VolumeLevel

__all__ = [
    "ClientConfig",
    "ExhaustedRetriesError",
    "ModeSwitch",
    "RequestCancelledError",
    "RequestDescriptor",
    "TransportError",
    "VolumeCommand",
    "VolumeLevel",
    "VolumioClient",
]
