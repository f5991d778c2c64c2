"""Tests for the connection registry and presence tracker."""

import pytest

from lobby.exceptions import InvalidJoin
from lobby.presence import PresenceTracker
from lobby.registry import ConnectionRegistry


@pytest.fixture()
def registry() -> ConnectionRegistry:
    return ConnectionRegistry()


class TestRegister:
    def test_register_and_lookup(self, registry: ConnectionRegistry):
        assert registry.register("c1", "alice") is None
        assert registry.lookup("c1") == "alice"
        assert "c1" in registry
        assert len(registry) == 1

    def test_username_is_trimmed(self, registry: ConnectionRegistry):
        registry.register("c1", "  alice ")
        assert registry.lookup("c1") == "alice"

    @pytest.mark.parametrize("username", [None, "", "   ", "\t\n"])
    def test_blank_username_rejected(self, registry: ConnectionRegistry, username):
        with pytest.raises(InvalidJoin) as exc:
            registry.register("c1", username)
        assert exc.value.connection_id == "c1"
        assert "c1" not in registry

    def test_rejoin_overwrites(self, registry: ConnectionRegistry):
        registry.register("c1", "alice")
        assert registry.register("c1", "bob") == "alice"
        assert registry.lookup("c1") == "bob"
        assert len(registry) == 1


class TestUnregister:
    def test_unregister_returns_username(self, registry: ConnectionRegistry):
        registry.register("c1", "alice")
        assert registry.unregister("c1") == "alice"
        assert registry.lookup("c1") is None

    def test_unregister_unknown_is_noop(self, registry: ConnectionRegistry):
        assert registry.unregister("nope") is None
        assert len(registry) == 0


class TestPresence:
    def test_empty(self, registry: ConnectionRegistry):
        assert PresenceTracker(registry).snapshot() == []

    def test_shared_username_counted_once(self, registry: ConnectionRegistry):
        presence = PresenceTracker(registry)
        registry.register("c1", "alice")
        registry.register("c2", "alice")
        registry.register("c3", "bob")
        assert presence.snapshot() == ["alice", "bob"]

        registry.unregister("c1")
        assert presence.snapshot() == ["alice", "bob"]
        registry.unregister("c2")
        assert presence.snapshot() == ["bob"]

    def test_order_follows_first_session(self, registry: ConnectionRegistry):
        presence = PresenceTracker(registry)
        registry.register("c1", "carol")
        registry.register("c2", "alice")
        registry.register("c1", "carol")
        assert presence.snapshot() == ["carol", "alice"]
        assert presence.snapshot() == presence.snapshot()

    def test_view_tracks_registry(self, registry: ConnectionRegistry):
        presence = PresenceTracker(registry)
        joined: dict[str, str] = {}
        steps = [
            ("c1", "alice"), ("c2", "bob"), ("c3", "alice"),
            ("c1", None), ("c4", "dave"), ("c3", None), ("c2", None),
        ]
        for cid, name in steps:
            if name is None:
                registry.unregister(cid)
                joined.pop(cid, None)
            else:
                registry.register(cid, name)
                joined[cid] = name
            assert set(presence.snapshot()) == set(joined.values())
            assert len(presence.snapshot()) == len(set(joined.values()))
