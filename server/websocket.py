"""WebSocket transport for the chat hub."""

from __future__ import annotations

import asyncio
import logging
import uuid

from fastapi import WebSocket

from lobby.events import OutboundEvent

log = logging.getLogger(__name__)


class ConnectionManager:
    """Owns the live WebSocket connections, keyed by a generated connection id."""

    def __init__(self) -> None:
        self._connections: dict[str, WebSocket] = {}

    async def connect(self, websocket: WebSocket) -> str:
        await websocket.accept()
        connection_id = uuid.uuid4().hex
        self._connections[connection_id] = websocket
        log.debug("WebSocket %s connected", connection_id)
        return connection_id

    def disconnect(self, connection_id: str) -> None:
        self._connections.pop(connection_id, None)

    async def close(self, connection_id: str) -> None:
        """Close *connection_id* from the server side."""
        websocket = self._connections.pop(connection_id, None)
        if websocket is None:
            return
        try:
            await websocket.close()
        except RuntimeError:
            log.debug("WebSocket %s already closed", connection_id)

    async def broadcast(self, event: OutboundEvent) -> None:
        """Send *event* to every open connection."""
        message = event.model_dump_json()
        targets = list(self._connections.items())
        results = await asyncio.gather(
            *(ws.send_text(message) for _, ws in targets),
            return_exceptions=True,
        )
        for (connection_id, _), result in zip(targets, results):
            if isinstance(result, Exception):
                log.debug("WebSocket %s dropped during broadcast: %s", connection_id, result)
                self.disconnect(connection_id)

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._connections

    def __len__(self) -> int:
        return len(self._connections)
