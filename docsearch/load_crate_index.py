"""Logic for decoding one crate's raw table into a CrateIndex."""

import logging
from collections.abc import Mapping, Sequence

from docsearch.decode_rows import decode_item_row, decode_path_row
from docsearch.errors import DanglingReferenceError, LoadError, MalformedRowError
from docsearch.item_kind import OpaqueKind
from docsearch.models import CrateIndex, IssueKind, ItemRecord, LoadIssue, PathEntry

logger = logging.getLogger(__name__)


def load_crate_index(crate_name: str, raw: object) -> CrateIndex:
    """Decode a crate's ``{"items": [...], "paths": [...]}`` object.

    Bad rows are skipped (or kept, for unknown kinds) and reported on
    ``CrateIndex.issues``. Only a crate whose table cannot be read at all
    raises ``LoadError``.
    """
    if not isinstance(crate_name, str) or not crate_name:
        raise LoadError(str(crate_name), "crate name must be a non-empty string")
    if not isinstance(raw, Mapping):
        reason = f"expected an object with items and paths, got {type(raw).__name__}"
        raise LoadError(crate_name, reason)

    raw_items = raw.get("items")
    raw_paths = raw.get("paths", [])
    if not _is_table(raw_items):
        raise LoadError(crate_name, "'items' must be a list")
    if not _is_table(raw_paths):
        raise LoadError(crate_name, "'paths' must be a list")

    issues: list[LoadIssue] = []
    # Items reference paths by position, so paths are decoded first.
    paths = _decode_paths(crate_name, raw_paths, issues)
    items = _decode_items(crate_name, raw_items, paths, issues)

    logger.debug(
        "Loaded crate %s: %d items, %d paths, %d issues",
        crate_name,
        len(items),
        len(paths),
        len(issues),
    )
    return CrateIndex(
        crate_name=crate_name,
        items=tuple(items),
        paths=tuple(paths),
        issues=tuple(issues),
    )


def _is_table(value: object) -> bool:
    # Any row sequence (list or tuple) will do; a string is not a table.
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _decode_paths(
    crate_name: str, raw_paths: Sequence[object], issues: list[LoadIssue]
) -> list[PathEntry]:
    paths: list[PathEntry] = []
    for i, row in enumerate(raw_paths):
        try:
            entry = decode_path_row(row)
        except MalformedRowError as e:
            _record(issues, IssueKind.MALFORMED_ROW, crate_name, i, str(e), "paths")
            # Keep the slot so later indices stay aligned; nameless = unusable.
            paths.append(PathEntry(kind=OpaqueKind(-1), name=""))
            continue
        if isinstance(entry.kind, OpaqueKind):
            msg = f"unknown kind code {entry.kind.code}"
            _record(issues, IssueKind.UNKNOWN_KIND, crate_name, i, msg, "paths")
        paths.append(entry)
    return paths


def _decode_items(
    crate_name: str,
    raw_items: Sequence[object],
    paths: list[PathEntry],
    issues: list[LoadIssue],
) -> list[ItemRecord]:
    items: list[ItemRecord] = []
    last_path = ""
    for i, row in enumerate(raw_items):
        try:
            record = decode_item_row(row, paths, last_path)
        except MalformedRowError as e:
            _record(issues, IssueKind.MALFORMED_ROW, crate_name, i, str(e))
            continue
        except DanglingReferenceError as e:
            _record(issues, IssueKind.DANGLING_REFERENCE, crate_name, i, str(e))
            continue
        if isinstance(record.kind, OpaqueKind):
            msg = f"unknown kind code {record.kind.code}"
            _record(issues, IssueKind.UNKNOWN_KIND, crate_name, i, msg)
        items.append(record)
        last_path = record.path
    return items


def _record(
    issues: list[LoadIssue],
    kind: IssueKind,
    crate_name: str,
    row: int,
    message: str,
    table: str = "items",
) -> None:
    logger.warning("Crate %s, %s row %d: %s", crate_name, table, row, message)
    issues.append(
        LoadIssue(
            kind=kind, crate_name=crate_name, row=row, message=message, table=table
        )
    )
