"""Decoders for the positional item and path rows of a crate index.

Item rows look like ``[kind, name, path, description, parent, signature]``;
parent and signature are null when absent. Path rows look like ``[kind, name]``.
"""

from collections.abc import Sequence

from docsearch.decode_signature import decode_signature
from docsearch.errors import DanglingReferenceError, MalformedRowError
from docsearch.item_kind import kind_from_code
from docsearch.models import ItemRecord, PathEntry

ITEM_FIELDS = 6
PATH_FIELDS = 2


def _is_code(value: object) -> bool:
    # bool is an int subclass; true/false are never valid codes or indices.
    return isinstance(value, int) and not isinstance(value, bool)


def decode_path_row(row: object) -> PathEntry:
    """Decode one ``[kind, name]`` path row."""
    if not isinstance(row, (list, tuple)) or len(row) != PATH_FIELDS:
        msg = "path row must be a [kind, name] pair"
        raise MalformedRowError(msg)
    code, name = row
    if not _is_code(code):
        msg = f"kind code must be an integer, got {code!r}"
        raise MalformedRowError(msg)
    if not isinstance(name, str) or not name:
        msg = "path entry has no name"
        raise MalformedRowError(msg)
    return PathEntry(kind=kind_from_code(code), name=name)


def decode_item_row(
    row: object,
    paths: Sequence[PathEntry],
    last_path: str = "",
) -> ItemRecord:
    """Decode one item row against an already decoded path table.

    An empty path field means "same path as the previous item" and is
    replaced by ``last_path``.
    """
    if not isinstance(row, (list, tuple)) or len(row) != ITEM_FIELDS:
        msg = f"item row must have {ITEM_FIELDS} fields"
        raise MalformedRowError(msg)

    code, name, path, description, parent, raw_signature = row

    if not _is_code(code):
        msg = f"kind code must be an integer, got {code!r}"
        raise MalformedRowError(msg)
    if not isinstance(name, str):
        msg = "item has no name"
        raise MalformedRowError(msg)
    if not isinstance(path, str):
        msg = f"path must be a string, got {type(path).__name__}"
        raise MalformedRowError(msg)
    if description is not None and not isinstance(description, str):
        msg = f"description must be a string, got {type(description).__name__}"
        raise MalformedRowError(msg)
    if parent is not None:
        if not _is_code(parent):
            msg = f"parent reference must be an integer, got {parent!r}"
            raise MalformedRowError(msg)
        # Placeholder entries for malformed path rows have no name.
        if not 0 <= parent < len(paths) or not paths[parent].name:
            msg = f"parent reference {parent} is outside the path table"
            raise DanglingReferenceError(msg)

    return ItemRecord(
        kind=kind_from_code(code),
        path=path or last_path,
        name=name,
        description=description or "",
        parent_ref=parent,
        signature=decode_signature(raw_signature),
    )
