"""Command-line search over a documentation search payload."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from docsearch.errors import DocSearchError
from docsearch.index_registry import IndexRegistry
from docsearch.init_search import init_search
from docsearch.load_config import load_config
from docsearch.models import ScoredResult
from docsearch.parse_query import resolve_kind_names
from docsearch.read_search_index import read_search_index
from docsearch.search import search


def format_result(result: ScoredResult) -> str:
    """Render one result as a single tab-separated line."""
    record = result.record
    line = f"{int(result.tier)}\t{record.kind.tag}\t{result.full_path}\t{result.href}"
    if record.description:
        line += f"\t{record.description.splitlines()[0]}"
    return line


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the search command."""
    ap = argparse.ArgumentParser(
        description="Search the items of a documentation search index.",
    )
    ap.add_argument(
        "payload",
        type=Path,
        help="search-index.js script or JSON file keyed by crate name",
    )
    ap.add_argument("query", help="Free-text query, optionally prefixed: fn:render")
    ap.add_argument(
        "--kind",
        action="append",
        default=[],
        help="Only return items of this kind or alias (repeatable)",
    )
    ap.add_argument(
        "--limit",
        type=int,
        help="Maximum number of results (default: search.default_limit)",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )
    return ap.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the payload, run one query and print the results."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
    except DocSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    level = logging.DEBUG if args.verbose else config["logging"]["level"]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        payload = read_search_index(args.payload)
        kinds = (
            resolve_kind_names(args.kind, config["kind_aliases"]) if args.kind else None
        )
    except DocSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    registry = IndexRegistry()
    init_search(payload, registry)

    limit = args.limit if args.limit is not None else config["search"]["default_limit"]
    try:
        results = search(
            args.query, registry.all(), kind_filter=kinds, limit=limit, config=config
        )
    except DocSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if not results:
        print("No results.")
        return 0
    for result in results:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
