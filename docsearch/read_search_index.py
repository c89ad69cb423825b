"""Logic for reading a search payload from a search-index.js or JSON file."""

import json
import re
from pathlib import Path
from typing import Any

from docsearch.errors import LoadError

# Matches: searchIndex['crate'] = {...};
SEARCH_INDEX_ASSIGN_RE = re.compile(
    r"^\s*searchIndex\[(?P<q>['\"])(?P<crate>.+?)(?P=q)\]"
    r"\s*=\s*(?P<body>\{.*\})\s*;?\s*$",
    re.MULTILINE,
)


def parse_search_index_js(text: str) -> dict[str, Any]:
    """Extract every ``searchIndex['crate'] = {...};`` assignment from a script."""
    payload: dict[str, Any] = {}
    for m in SEARCH_INDEX_ASSIGN_RE.finditer(text):
        crate = m.group("crate")
        try:
            payload[crate] = json.loads(m.group("body"))
        except json.JSONDecodeError as e:
            raise LoadError(crate, f"invalid JSON in search index script: {e}") from e
    if not payload:
        raise LoadError(None, "no searchIndex assignments found")
    return payload


def read_search_index(path: Path | str) -> dict[str, Any]:
    """Read a payload file: ``.js`` scripts are scanned, anything else is JSON."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(None, f"cannot read {p}: {e}") from e

    if p.suffix == ".js":
        return parse_search_index_js(text)

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(None, f"invalid JSON in {p}: {e}") from e
    if not isinstance(payload, dict):
        raise LoadError(None, f"{p} must contain an object keyed by crate name")
    return payload
