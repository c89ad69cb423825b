"""Tests for query normalization and kind prefixes."""

import pytest

from docsearch.errors import QueryError
from docsearch.item_kind import ItemKind
from docsearch.parse_query import parse_query, resolve_kind_names


def test_parse_query_normalizes() -> None:
    """Verify trimming, lowercasing and whitespace splitting."""
    parsed = parse_query("  Render   STRING\t")
    assert parsed.tokens == ("render", "string")
    assert parsed.kinds is None


def test_parse_query_kind_prefix() -> None:
    """Verify that a known ``kind:`` prefix becomes a filter."""
    parsed = parse_query("Macro:html")
    assert parsed.tokens == ("html",)
    assert parsed.kinds == frozenset({ItemKind.MACRO})

    parsed = parse_query("fn : render")
    assert parsed.tokens == ("render",)
    assert parsed.kinds == frozenset({ItemKind.FN, ItemKind.METHOD, ItemKind.TYMETHOD})


def test_parse_query_leaves_paths_and_unknown_prefixes() -> None:
    """Verify that ``::`` and unknown prefixes are searched as typed."""
    assert parse_query("fmt::write").tokens == ("fmt::write",)
    parsed = parse_query("widget:render")
    assert parsed.tokens == ("widget:render",)
    assert parsed.kinds is None
    assert parse_query("render string:x").kinds is None


def test_parse_query_custom_aliases() -> None:
    """Verify that configured aliases are honoured."""
    parsed = parse_query("callable:render", kind_aliases={"callable": ["fn"]})
    assert parsed.kinds == frozenset({ItemKind.FN})
    # Without the default aliases "fn" is still a plain kind tag.
    assert parse_query("fn:x", kind_aliases={}).kinds == frozenset({ItemKind.FN})


def test_parse_query_max_length() -> None:
    """Verify that overlong queries are cut before tokenizing."""
    assert parse_query("renderer", max_length=6).tokens == ("render",)


def test_resolve_kind_names() -> None:
    """Verify alias expansion and rejection of unknown names."""
    assert resolve_kind_names(["const", "trait"]) == frozenset(
        {ItemKind.CONSTANT, ItemKind.ASSOCIATEDCONSTANT, ItemKind.TRAIT}
    )
    with pytest.raises(QueryError):
        resolve_kind_names(["widget"])
    with pytest.raises(QueryError):
        resolve_kind_names(["odd"], kind_aliases={"odd": ["nothing"]})


def test_resolve_kind_names_single_tag_alias() -> None:
    """Verify that an alias mapped to a bare tag is not split into letters."""
    assert resolve_kind_names(["fn"], kind_aliases={"fn": "method"}) == frozenset(
        {ItemKind.METHOD}
    )
