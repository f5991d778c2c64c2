"""Transport protocol the hub delivers outbound events through."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lobby.events import OutboundEvent


@runtime_checkable
class Transport(Protocol):
    """Interface for connection-owning transports (WebSocket, test doubles)."""

    async def broadcast(self, event: OutboundEvent) -> None:
        """Deliver *event* to every currently connected connection."""
        ...

    async def close(self, connection_id: str) -> None:
        """Terminate *connection_id* at the transport level."""
        ...
