"""Tests for the crate index registry."""

import threading

from docsearch.index_registry import IndexRegistry
from docsearch.item_kind import ItemKind
from docsearch.models import CrateIndex, ItemRecord


def make_index(crate_name: str, *names: str) -> CrateIndex:
    """Create a CrateIndex of plain structs for testing."""
    items = tuple(ItemRecord(ItemKind.STRUCT, crate_name, name) for name in names)
    return CrateIndex(crate_name=crate_name, items=items)


def test_register_and_get() -> None:
    """Verify that registered crates can be looked up and listed."""
    registry = IndexRegistry()
    index = make_index("horrorshow", "Renderer")
    assert registry.register(index) is True
    assert registry.get("horrorshow") is index
    assert "horrorshow" in registry
    assert len(registry) == 1
    assert registry.get("missing") is None


def test_all_is_sorted_by_crate_name() -> None:
    """Verify that snapshots list crates in name order."""
    registry = IndexRegistry()
    registry.register(make_index("zeta", "Z"))
    registry.register(make_index("alpha", "A"))
    assert [c.crate_name for c in registry.all()] == ["alpha", "zeta"]
    assert registry.crate_names() == ["alpha", "zeta"]


def test_identical_registration_is_a_no_op() -> None:
    """Verify that registering the same content twice keeps the first object."""
    registry = IndexRegistry()
    first = make_index("demo", "Render")
    registry.register(first)
    assert registry.register(make_index("demo", "Render")) is False
    assert registry.get("demo") is first


def test_reregistration_replaces_last_write_wins() -> None:
    """Verify that differing content replaces the crate's entry."""
    registry = IndexRegistry()
    registry.register(make_index("demo", "Render"))
    newer = make_index("demo", "Render", "Renderer")
    assert registry.register(newer) is True
    assert registry.get("demo") is newer
    assert len(registry) == 1


def test_snapshot_is_not_affected_by_later_writes() -> None:
    """Verify that a snapshot taken before a replace keeps the old index."""
    registry = IndexRegistry()
    old = make_index("demo", "Render")
    registry.register(old)
    snapshot = registry.all()
    registry.register(make_index("demo", "Renderer"))
    registry.register(make_index("other", "Raw"))
    assert snapshot == (old,)


def test_unregister_and_clear() -> None:
    """Verify that crates can be removed for reloads."""
    registry = IndexRegistry()
    registry.register(make_index("demo", "Render"))
    registry.register(make_index("other", "Raw"))
    assert registry.unregister("demo") is True
    assert registry.unregister("demo") is False
    assert registry.crate_names() == ["other"]
    registry.clear()
    assert len(registry) == 0
    # A cleared crate can be registered again.
    assert registry.register(make_index("other", "Raw")) is True


def test_concurrent_registration() -> None:
    """Verify that parallel writers all land and readers see whole indices."""
    registry = IndexRegistry()
    names = [f"crate{i}" for i in range(20)]

    def writer(name: str) -> None:
        registry.register(make_index(name, "Item"))

    threads = [threading.Thread(target=writer, args=(n,)) for n in names]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert registry.crate_names() == sorted(names)
    assert all(len(c.items) == 1 for c in registry.all())
