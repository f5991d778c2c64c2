"""Tests for the identity service."""

from pathlib import Path

import pytest

from lobby.exceptions import InvalidCredentials, InvalidInput, UsernameTaken


class TestPasswords:
    def test_hash_and_verify(self):
        from server.auth.passwords import hash_password, verify_password

        h = hash_password("hunter2", iterations=1_000)
        assert h.startswith("pbkdf2_sha256$1000$")
        assert verify_password("hunter2", h)
        assert not verify_password("wrong", h)

    def test_different_salts(self):
        from server.auth.passwords import hash_password

        assert hash_password("same", iterations=1_000) != hash_password("same", iterations=1_000)

    @pytest.mark.parametrize("stored", ["", "garbage", "md5$1$aa$bb", "pbkdf2_sha256$x$aa$bb"])
    def test_bad_stored_hash(self, stored):
        from server.auth.passwords import verify_password

        assert not verify_password("pw", stored)


class TestUserStore:
    def test_create_and_get(self, tmp_path: Path):
        import sqlite3

        from server.auth.database import UserStore

        store = UserStore(tmp_path / "nested" / "users.db")
        user = store.create_user("alice", "hash")
        assert user["username"] == "alice"
        assert store.get_user("alice")["password_hash"] == "hash"
        assert store.get_user("bob") is None
        with pytest.raises(sqlite3.IntegrityError):
            store.create_user("alice", "other")


class TestIdentityService:
    @pytest.fixture()
    def identity(self, tmp_path: Path):
        from server.auth.database import UserStore
        from server.auth.identity import IdentityService

        return IdentityService(UserStore(tmp_path / "users.db"), iterations=1_000)

    def test_create_then_authenticate(self, identity):
        assert identity.create_account(" alice ", "pw") == "alice"
        assert identity.authenticate("alice", "pw") == "alice"

    def test_username_taken(self, identity):
        identity.create_account("alice", "pw")
        with pytest.raises(UsernameTaken) as exc:
            identity.create_account("alice", "other")
        assert exc.value.username == "alice"

    @pytest.mark.parametrize("username,password", [(None, "pw"), ("", "pw"), ("  ", "pw"), ("alice", ""), ("alice", None)])
    def test_invalid_input(self, identity, username, password):
        with pytest.raises(InvalidInput):
            identity.create_account(username, password)
        with pytest.raises(InvalidInput):
            identity.authenticate(username, password)

    def test_wrong_password(self, identity):
        identity.create_account("alice", "pw")
        with pytest.raises(InvalidCredentials):
            identity.authenticate("alice", "nope")

    def test_unknown_user(self, identity):
        with pytest.raises(InvalidCredentials):
            identity.authenticate("ghost", "pw")
