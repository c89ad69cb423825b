"""Tests for item kind codes and tags."""

from docsearch.item_kind import ItemKind, OpaqueKind, kind_from_code, kind_from_tag


def test_kind_from_code_known() -> None:
    """Verify that payload codes map to their kinds."""
    assert kind_from_code(0) is ItemKind.MODULE
    assert kind_from_code(8) is ItemKind.TRAIT
    assert kind_from_code(10) is ItemKind.TYMETHOD
    assert kind_from_code(14).tag == "macro"


def test_kind_from_code_unknown_is_opaque() -> None:
    """Verify that unknown codes are preserved rather than rejected."""
    kind = kind_from_code(42)
    assert kind == OpaqueKind(42)
    assert kind.code == 42
    assert kind.tag == "kind42"


def test_kind_codes_round_trip() -> None:
    """Verify that every known kind reports its own code."""
    for kind in ItemKind:
        assert kind_from_code(kind.code) is kind


def test_kind_from_tag() -> None:
    """Verify lookups by tag, including the module spelling and whitespace."""
    assert kind_from_tag("fn") is ItemKind.FN
    assert kind_from_tag("mod") is ItemKind.MODULE
    assert kind_from_tag("module") is ItemKind.MODULE
    assert kind_from_tag(" Trait ") is ItemKind.TRAIT
    assert kind_from_tag("widget") is None
