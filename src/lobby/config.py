"""Lobby configuration."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from lobby.exceptions import ConfigError


class LobbyConfig(BaseModel):
    """Settings for a Lobby chat server."""

    db_path: Path = Field(
        default_factory=lambda: Path.home() / ".lobby" / "chat.db",
    )
    host: str = "0.0.0.0"
    port: int = Field(default=3001, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    unknown_sender: str = "Unknown"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> LobbyConfig:
        """Build a config from ``LOBBY_*`` environment variables."""
        values: dict[str, object] = {}
        if db_path := os.environ.get("LOBBY_DB_PATH"):
            values["db_path"] = Path(db_path)
        if host := os.environ.get("LOBBY_HOST"):
            values["host"] = host
        port = os.environ.get("LOBBY_PORT") or os.environ.get("PORT")
        if port:
            values["port"] = port
        if origins := os.environ.get("LOBBY_CORS_ORIGINS"):
            values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
        if level := os.environ.get("LOBBY_LOG_LEVEL"):
            values["log_level"] = level.upper()
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc
