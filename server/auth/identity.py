"""Identity service: account creation and credential checks."""

from __future__ import annotations

import logging
import sqlite3

from lobby.exceptions import InvalidCredentials, InvalidInput, UsernameTaken
from server.auth.database import UserStore
from server.auth.passwords import hash_password, verify_password

log = logging.getLogger(__name__)


class IdentityService:
    """Verifies credentials and hands back the validated username.

    The chat hub never calls this; a successful :meth:`authenticate` is what
    a client does before opening the realtime socket and sending ``join``.
    """

    def __init__(self, store: UserStore, *, iterations: int | None = None):
        self._store = store
        self._iterations = iterations

    def _hash(self, password: str) -> str:
        if self._iterations is None:
            return hash_password(password)
        return hash_password(password, iterations=self._iterations)

    @staticmethod
    def _clean(username: str | None, password: str | None) -> tuple[str, str]:
        name = (username or "").strip()
        if not name or not password:
            raise InvalidInput("username and password required")
        return name, password

    def create_account(self, username: str | None, password: str | None) -> str:
        """Create an account. Returns the stored username."""
        name, password = self._clean(username, password)
        try:
            self._store.create_user(name, self._hash(password))
        except sqlite3.IntegrityError:
            raise UsernameTaken(name) from None
        log.info("Account created for %s", name)
        return name

    def authenticate(self, username: str | None, password: str | None) -> str:
        """Check credentials. Returns the validated username."""
        name, password = self._clean(username, password)
        user = self._store.get_user(name)
        if user is None or not verify_password(password, user["password_hash"]):
            raise InvalidCredentials("invalid credentials")
        return name
