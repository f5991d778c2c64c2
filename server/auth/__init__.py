"""Authentication module for Lobby."""

from server.auth.database import UserStore
from server.auth.identity import IdentityService
from server.auth.routes import router as auth_router

__all__ = ["IdentityService", "UserStore", "auth_router"]
