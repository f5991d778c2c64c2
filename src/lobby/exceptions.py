"""Lobby exceptions."""


class LobbyError(Exception):
    """Base exception for all Lobby errors."""


class InvalidJoin(LobbyError):
    """Raised when a join carries no usable username."""

    def __init__(self, connection_id: str):
        self.connection_id = connection_id
        super().__init__(f"Connection {connection_id} sent a join without a username")


class MalformedEvent(LobbyError):
    """Raised when an inbound frame is not a known event."""


class ConfigError(LobbyError):
    """Raised on invalid configuration."""


class IdentityError(LobbyError):
    """Base for account and credential failures."""


class InvalidInput(IdentityError):
    """Raised when username or password is missing."""


class UsernameTaken(IdentityError):
    """Raised when signing up with a username that already exists."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username {username!r} already taken")


class InvalidCredentials(IdentityError):
    """Raised when a username/password pair does not match."""
