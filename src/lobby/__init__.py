"""Lobby — a single-room realtime chat hub."""

from lobby.config import LobbyConfig
from lobby.hub import BroadcastHub
from lobby.presence import PresenceTracker
from lobby.registry import ConnectionRegistry

__version__ = "0.1.0"
__all__ = ["BroadcastHub", "ConnectionRegistry", "LobbyConfig", "PresenceTracker"]
