"""Query engine: match, rank and deduplicate items across registered crates."""

import logging
from collections.abc import Iterable
from typing import Any

from docsearch.item_href import item_display_path, item_href
from docsearch.item_kind import Kind
from docsearch.load_config import DEFAULT_CONFIG
from docsearch.models import CrateIndex, ItemRecord, MatchTier, ScoredResult
from docsearch.parse_query import parse_query
from docsearch.score_record import score_record

logger = logging.getLogger(__name__)


def search(
    query: str,
    crates: Iterable[CrateIndex],
    kind_filter: Iterable[Kind] | None = None,
    limit: int | None = None,
    config: dict[str, Any] | None = None,
) -> list[ScoredResult]:
    """Return ranked results for ``query`` over a snapshot of crate indices.

    Results are ordered by tier, then name, then crate name. Items that
    would link to the same page are reported once. An empty query yields
    an empty list.
    """
    if limit is not None and limit <= 0:
        return []
    cfg = config or DEFAULT_CONFIG
    parsed = parse_query(
        query,
        kind_aliases=cfg["kind_aliases"],
        max_length=cfg["search"].get("max_query_length"),
    )
    if not parsed.tokens:
        return []

    allowed = _allowed_kinds(kind_filter, parsed.kinds)
    hits: list[tuple[tuple[Any, ...], CrateIndex, ItemRecord, MatchTier]] = []
    for crate in crates:
        for position, record in enumerate(crate.items):
            if allowed is not None and record.kind not in allowed:
                continue
            tier = score_record(record, parsed.tokens)
            if tier is None:
                continue
            key = (tier, record.name.lower(), record.name, crate.crate_name, position)
            hits.append((key, crate, record, tier))

    hits.sort(key=lambda hit: hit[0])

    results: list[ScoredResult] = []
    seen: set[tuple[Any, ...]] = set()
    for _, crate, record, tier in hits:
        identity = (
            crate.crate_name,
            record.kind,
            record.path,
            record.parent_ref,
            record.name,
        )
        if identity in seen:
            continue
        seen.add(identity)
        parent = crate.parent_of(record)
        results.append(
            ScoredResult(
                crate_name=crate.crate_name,
                record=record,
                tier=tier,
                parent=parent,
                full_path=item_display_path(record, parent),
                href=item_href(record, parent),
            )
        )
        if limit is not None and len(results) >= limit:
            break

    logger.debug("Query %r: %d hits, %d results", query, len(hits), len(results))
    return results


def _allowed_kinds(
    kind_filter: Iterable[Kind] | None, prefix_kinds: frozenset[Kind] | None
) -> frozenset[Kind] | None:
    if kind_filter is None:
        return prefix_kinds
    allowed = frozenset(kind_filter)
    if prefix_kinds is None:
        return allowed
    return allowed & prefix_kinds
