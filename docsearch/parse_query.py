"""Logic for normalizing free-text search input into tokens and filters."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from docsearch.errors import QueryError
from docsearch.item_kind import ItemKind, kind_from_tag
from docsearch.load_config import DEFAULT_CONFIG


@dataclass(frozen=True)
class ParsedQuery:
    """Lowercased query tokens plus the kinds a ``kind:`` prefix selected."""

    tokens: tuple[str, ...]
    kinds: frozenset[ItemKind] | None = None


def _aliases(
    kind_aliases: Mapping[str, Iterable[str]] | None,
) -> Mapping[str, Iterable[str]]:
    return DEFAULT_CONFIG["kind_aliases"] if kind_aliases is None else kind_aliases


def resolve_kind_names(
    names: Iterable[str],
    kind_aliases: Mapping[str, Iterable[str]] | None = None,
) -> frozenset[ItemKind]:
    """Turn kind tags or aliases (``fn``, ``trait``, ``const``...) into kinds."""
    aliases = _aliases(kind_aliases)
    kinds: set[ItemKind] = set()
    for name in names:
        key = name.strip().lower()
        tags = aliases[key] if key in aliases else [key]
        if isinstance(tags, str):
            tags = [tags]
        for tag in tags:
            kind = kind_from_tag(tag)
            if kind is None:
                msg = f"Unknown item kind: {tag!r}"
                raise QueryError(msg)
            kinds.add(kind)
    return frozenset(kinds)


def parse_query(
    query: str,
    kind_aliases: Mapping[str, Iterable[str]] | None = None,
    max_length: int | None = None,
) -> ParsedQuery:
    """Trim, lowercase and split a query; peel off a leading ``kind:`` prefix.

    ``"macro:html"`` searches macros for ``html``. A prefix that names no
    known kind is left in place and searched as typed. ``::`` path separators
    are never mistaken for a prefix.
    """
    text = query.strip().lower()
    if max_length is not None:
        text = text[:max_length]

    kinds = None
    prefix, sep, rest = text.partition(":")
    prefix = prefix.strip()
    if (
        sep
        and prefix
        and not rest.startswith(":")
        and not any(c.isspace() for c in prefix)
        and _is_kind_name(prefix, kind_aliases)
    ):
        kinds = resolve_kind_names([prefix], kind_aliases)
        text = rest

    return ParsedQuery(tokens=tuple(text.split()), kinds=kinds)


def _is_kind_name(
    name: str, kind_aliases: Mapping[str, Iterable[str]] | None
) -> bool:
    return name in _aliases(kind_aliases) or kind_from_tag(name) is not None
