"""Wire events exchanged between clients and the hub.

Every frame is a JSON object with an ``event`` key naming the event and the
payload fields alongside it, e.g. ``{"event": "join", "username": "alice"}``.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ValidationError

from lobby.exceptions import MalformedEvent

# ------------------------------------------------------------------
# Inbound (client -> hub)
# ------------------------------------------------------------------


class JoinEvent(BaseModel):
    event: Literal["join"] = "join"
    username: str | None = None


class MessageEvent(BaseModel):
    event: Literal["message"] = "message"
    text: str | None = None


InboundEvent = Union[JoinEvent, MessageEvent]

_INBOUND: dict[str, type[BaseModel]] = {
    "join": JoinEvent,
    "message": MessageEvent,
}


def parse_inbound(frame: Any) -> InboundEvent:
    """Validate a decoded JSON frame into an inbound event."""
    if not isinstance(frame, dict):
        raise MalformedEvent(f"Expected a JSON object, got {type(frame).__name__}")
    model = _INBOUND.get(frame.get("event"))
    if model is None:
        raise MalformedEvent(f"Unknown event {frame.get('event')!r}")
    try:
        return model.model_validate(frame)
    except ValidationError as exc:
        raise MalformedEvent(str(exc)) from exc


# ------------------------------------------------------------------
# Outbound (hub -> every connection)
# ------------------------------------------------------------------


class UsersEvent(BaseModel):
    """Current presence set."""

    event: Literal["users"] = "users"
    users: list[str]


class SystemEvent(BaseModel):
    """Join / leave notice synthesized by the hub."""

    event: Literal["system"] = "system"
    text: str


class ChatEvent(BaseModel):
    """A chat message; ``ts`` is epoch milliseconds at broadcast time."""

    event: Literal["message"] = "message"
    username: str
    msg: str
    ts: int


OutboundEvent = Union[UsersEvent, SystemEvent, ChatEvent]
