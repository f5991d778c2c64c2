"""Connection registry: which live connection speaks for which username."""

from __future__ import annotations

from lobby.exceptions import InvalidJoin


class ConnectionRegistry:
    """Authoritative ``connection_id -> username`` table.

    A connection holds at most one session; a username may be held by any
    number of connections (several tabs or devices). The registry only
    mutates the table, it never broadcasts.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, str] = {}

    def register(self, connection_id: str, username: str | None) -> str | None:
        """Bind *connection_id* to *username*. Returns the previous username.

        Raises :class:`InvalidJoin` when *username* is blank; no session is
        created in that case.
        """
        name = (username or "").strip()
        if not name:
            raise InvalidJoin(connection_id)
        previous = self._sessions.get(connection_id)
        self._sessions[connection_id] = name
        return previous

    def unregister(self, connection_id: str) -> str | None:
        """Drop the session for *connection_id*, returning its username if any."""
        return self._sessions.pop(connection_id, None)

    def lookup(self, connection_id: str) -> str | None:
        return self._sessions.get(connection_id)

    def usernames(self) -> list[str]:
        """Session usernames in session-creation order (duplicates kept)."""
        return list(self._sessions.values())

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
