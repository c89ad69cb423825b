"""Logic for re-encoding decoded records into payload rows."""

from typing import Any

from docsearch.models import CrateIndex, ItemRecord, PathEntry, Signature


def encode_signature(signature: Signature | None) -> dict[str, Any] | None:
    """Encode a signature in the payload's ``{"inputs", "output"}`` shape."""
    if signature is None:
        return None
    return {
        "inputs": [{"name": name} for name in signature.inputs],
        "output": {"name": signature.output} if signature.output is not None else None,
    }


def encode_item_row(record: ItemRecord) -> list[Any]:
    """Encode an item as ``[kind, name, path, description, parent, signature]``.

    Paths are written out in full; the decoder accepts both full and
    compressed (empty) paths.
    """
    return [
        record.kind.code,
        record.name,
        record.path,
        record.description,
        record.parent_ref,
        encode_signature(record.signature),
    ]


def encode_path_row(entry: PathEntry) -> list[Any]:
    """Encode a path entry as ``[kind, name]``."""
    return [entry.kind.code, entry.name]


def encode_crate_index(index: CrateIndex) -> dict[str, list[Any]]:
    """Encode a whole crate back into its payload object."""
    return {
        "items": [encode_item_row(r) for r in index.items],
        "paths": [encode_path_row(p) for p in index.paths],
    }
