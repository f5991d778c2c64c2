"""Broadcast hub — the join / message / disconnect state machine.

The hub owns the connection registry. Inbound events are applied one at a
time under an ``asyncio.Lock``: the registry mutation and the presence
snapshot that goes out with it are computed inside the same locked block.
Delivery to connections happens after the lock is released.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable

from lobby.events import (
    ChatEvent,
    InboundEvent,
    JoinEvent,
    MessageEvent,
    OutboundEvent,
    SystemEvent,
    UsersEvent,
)
from lobby.exceptions import InvalidJoin
from lobby.presence import PresenceTracker
from lobby.registry import ConnectionRegistry
from lobby.transport import Transport

log = logging.getLogger(__name__)


class BroadcastHub:
    """Single shared room: every state change goes to every connection.

    >>> hub = BroadcastHub(transport)
    >>> await hub.join("c1", "alice")      # users + "alice joined"
    >>> await hub.message("c1", "  hi  ")  # message{alice, "hi", ts}
    >>> await hub.disconnect("c1")         # users + "alice left"
    """

    def __init__(
        self,
        transport: Transport,
        registry: ConnectionRegistry | None = None,
        *,
        unknown_sender: str = "Unknown",
        clock: Callable[[], float] = time.time,
    ):
        self._transport = transport
        self._registry = registry if registry is not None else ConnectionRegistry()
        self._presence = PresenceTracker(self._registry)
        self._unknown_sender = unknown_sender
        self._clock = clock
        self._lock = asyncio.Lock()

    @property
    def registry(self) -> ConnectionRegistry:
        return self._registry

    def online(self) -> list[str]:
        """Current presence set."""
        return self._presence.snapshot()

    # ------------------------------------------------------------------
    # Inbound events
    # ------------------------------------------------------------------

    async def handle(self, connection_id: str, event: InboundEvent) -> None:
        """Dispatch a parsed inbound event from *connection_id*."""
        if isinstance(event, JoinEvent):
            await self.join(connection_id, event.username)
        elif isinstance(event, MessageEvent):
            await self.message(connection_id, event.text)
        else:
            raise TypeError(f"Unsupported event {type(event).__name__}")

    async def join(self, connection_id: str, username: str | None) -> None:
        """Bind the connection to *username* and announce it.

        A blank username terminates the connection; any session it held is
        torn down exactly as on disconnect.
        """
        async with self._lock:
            try:
                previous = self._registry.register(connection_id, username)
            except InvalidJoin:
                log.warning("Invalid join from %s, closing connection", connection_id)
                outbound = self._depart(self._registry.unregister(connection_id))
                rejected = True
            else:
                rejected = False
                name = self._registry.lookup(connection_id)
                outbound = [UsersEvent(users=self._presence.snapshot())]
                if previous != name:
                    log.info("%s joined (connection %s)", name, connection_id)
                    outbound.append(SystemEvent(text=f"{name} joined"))

        if rejected:
            await self._transport.close(connection_id)
        await self._deliver(outbound)

    async def message(self, connection_id: str, text: str | None) -> None:
        """Broadcast a chat message to everyone, the sender included."""
        body = (text or "").strip()
        if not body:
            log.debug("Dropped empty message from %s", connection_id)
            return
        async with self._lock:
            username = self._registry.lookup(connection_id) or self._unknown_sender
        chat = ChatEvent(username=username, msg=body, ts=int(self._clock() * 1000))
        await self._deliver([chat])

    async def disconnect(self, connection_id: str) -> None:
        """Forget the connection; announce the departure if it had joined."""
        async with self._lock:
            outbound = self._depart(self._registry.unregister(connection_id))
        await self._deliver(outbound)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _depart(self, username: str | None) -> list[OutboundEvent]:
        # Caller holds the lock and has already unregistered the connection.
        if username is None:
            return []
        log.info("%s left", username)
        return [
            UsersEvent(users=self._presence.snapshot()),
            SystemEvent(text=f"{username} left"),
        ]

    async def _deliver(self, outbound: list[OutboundEvent]) -> None:
        for event in outbound:
            await self._transport.broadcast(event)
