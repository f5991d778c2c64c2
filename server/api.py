"""FastAPI server for Lobby: account routes plus the realtime socket."""

from __future__ import annotations

import json
import logging

from dotenv import load_dotenv
from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware

import lobby
from lobby.config import LobbyConfig
from lobby.events import parse_inbound
from lobby.exceptions import MalformedEvent
from lobby.hub import BroadcastHub
from server.auth.database import UserStore
from server.auth.identity import IdentityService
from server.auth.routes import router as auth_router
from server.models import HealthResponse, StatusResponse
from server.websocket import ConnectionManager

load_dotenv()

log = logging.getLogger(__name__)

config = LobbyConfig.from_env()

app = FastAPI(
    title="Lobby",
    description="Single-room realtime chat.",
    version=lobby.__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.state.identity = IdentityService(UserStore(config.db_path))
app.include_router(auth_router)

manager = ConnectionManager()
hub = BroadcastHub(manager, unknown_sender=config.unknown_sender)


# ------------------------------------------------------------------
# Health
# ------------------------------------------------------------------


@app.get("/", response_model=StatusResponse)
def root():
    return StatusResponse(status="ok")


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        status="ok",
        version=lobby.__version__,
        online=len(hub.online()),
        connections=len(manager),
    )


# ------------------------------------------------------------------
# WebSocket
# ------------------------------------------------------------------


@app.websocket("/ws")
async def ws_endpoint(websocket: WebSocket):
    connection_id = await manager.connect(websocket)
    try:
        # The hub closes the socket itself on an invalid join.
        while connection_id in manager:
            raw = await websocket.receive_text()
            try:
                event = parse_inbound(json.loads(raw))
            except (ValueError, MalformedEvent) as exc:
                log.debug("Ignoring frame from %s: %s", connection_id, exc)
                continue
            await hub.handle(connection_id, event)
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(connection_id)
        await hub.disconnect(connection_id)


# ------------------------------------------------------------------
# Entrypoint
# ------------------------------------------------------------------


def run():
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("server.api:app", host=config.host, port=config.port)


if __name__ == "__main__":
    run()
