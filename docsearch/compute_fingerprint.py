"""Logic for computing stable content hashes of crate indices."""

import hashlib
import json

from docsearch.encode_rows import encode_crate_index
from docsearch.models import CrateIndex


def compute_fingerprint(index: CrateIndex) -> str:
    """Compute a stable hash of a crate's name, items and paths.

    Uses canonical JSON serialization (sorted keys) of the re-encoded rows.
    """
    payload = {"crate": index.crate_name, **encode_crate_index(index)}
    payload_json = json.dumps(payload, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(payload_json.encode("utf-8")).hexdigest()
