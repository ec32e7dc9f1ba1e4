from session_registry import SessionRegistry


def test_register_assigns_default_nickname():
    registry = SessionRegistry()

    identity = registry.register("sid-1", "1.2.3.4")

    assert identity.address == "1.2.3.4"
    assert identity.nickname == "Anon"
    assert registry.get("sid-1") == identity
    assert "sid-1" in registry


def test_set_nickname_trims_and_last_write_wins():
    registry = SessionRegistry()
    registry.register("sid-1", "1.2.3.4")

    registry.set_nickname("sid-1", "  Alice  ")
    assert registry.get("sid-1").nickname == "Alice"

    registry.set_nickname("sid-1", "Bob")
    assert registry.get("sid-1").nickname == "Bob"


def test_blank_nickname_falls_back_to_anon():
    registry = SessionRegistry()
    registry.register("sid-1", "1.2.3.4")
    registry.set_nickname("sid-1", "Alice")

    registry.set_nickname("sid-1", "   \t ")
    assert registry.get("sid-1").nickname == "Anon"

    registry.set_nickname("sid-1", None)
    assert registry.get("sid-1").nickname == "Anon"


def test_set_nickname_for_unknown_connection_is_a_no_op():
    registry = SessionRegistry()

    registry.set_nickname("ghost", "Alice")

    assert "ghost" not in registry
    assert len(registry) == 0


def test_get_unknown_connection_returns_default_identity():
    registry = SessionRegistry()

    identity = registry.get("ghost")

    assert identity.address == "unknown"
    assert identity.nickname == "Anon"


def test_remove_is_idempotent():
    registry = SessionRegistry()
    registry.register("sid-1", "1.2.3.4")

    registry.remove("sid-1")
    registry.remove("sid-1")
    registry.remove("never-registered")

    assert len(registry) == 0
    assert registry.get("sid-1").nickname == "Anon"


def test_identities_are_not_shared_between_connections():
    registry = SessionRegistry()
    registry.register("sid-1", "1.1.1.1")
    registry.register("sid-2", "2.2.2.2")

    registry.set_nickname("sid-1", "Alice")

    assert registry.get("sid-2").nickname == "Anon"
