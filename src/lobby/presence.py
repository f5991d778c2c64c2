"""Presence tracker: the distinct set of online usernames."""

from __future__ import annotations

from lobby.registry import ConnectionRegistry


class PresenceTracker:
    """Read-only view over a :class:`ConnectionRegistry`.

    Nothing is cached: every :meth:`snapshot` is rebuilt from the current
    sessions.
    """

    def __init__(self, registry: ConnectionRegistry) -> None:
        self._registry = registry

    def snapshot(self) -> list[str]:
        """Distinct usernames, ordered by their first session."""
        return list(dict.fromkeys(self._registry.usernames()))
