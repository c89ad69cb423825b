"""Entry point that loads a full search payload into a registry."""

import logging
from collections.abc import Mapping

from docsearch.errors import LoadError
from docsearch.index_registry import IndexRegistry, default_registry
from docsearch.load_crate_index import load_crate_index

logger = logging.getLogger(__name__)


def init_search(payload: object, registry: IndexRegistry | None = None) -> list[str]:
    """Load and register every crate found in ``payload``.

    A crate that cannot be loaded is logged and skipped; the others are still
    registered. Returns the names of the crates loaded by this call.
    """
    target = default_registry if registry is None else registry
    if not isinstance(payload, Mapping):
        logger.error(
            "Search payload must map crate names to indices, got %s",
            type(payload).__name__,
        )
        return []

    loaded: list[str] = []
    for crate_name, raw in payload.items():
        try:
            index = load_crate_index(crate_name, raw)
        except LoadError as e:
            logger.error("%s", e)
            continue
        if index.issues:
            logger.warning(
                "Crate %s loaded with %d row issue(s)", crate_name, len(index.issues)
            )
        target.register(index)
        loaded.append(index.crate_name)
    return loaded
