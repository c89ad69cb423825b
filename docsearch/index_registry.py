"""Process-wide store of the crate indices that searches run against."""

import logging
from threading import RLock

from docsearch.compute_fingerprint import compute_fingerprint
from docsearch.models import CrateIndex

logger = logging.getLogger(__name__)


class IndexRegistry:
    """Accumulates crate indices; one entry per crate name, replace-only.

    Writers serialize on a lock and swap in a fresh mapping, so a reader
    holding a snapshot from ``all()`` never observes a partial update.
    """

    def __init__(self) -> None:
        """Create an empty registry."""
        self._crates: dict[str, CrateIndex] = {}
        self._fingerprints: dict[str, str] = {}
        self._lock = RLock()

    def register(self, index: CrateIndex) -> bool:
        """Insert or replace the index for ``index.crate_name``.

        Returns False when an identical index was already registered.
        """
        fingerprint = compute_fingerprint(index)
        with self._lock:
            if self._fingerprints.get(index.crate_name) == fingerprint:
                logger.debug(
                    "Crate %s unchanged; keeping current index", index.crate_name
                )
                return False
            replacing = index.crate_name in self._crates
            self._crates = {**self._crates, index.crate_name: index}
            self._fingerprints = {**self._fingerprints, index.crate_name: fingerprint}
        logger.info(
            "%s crate %s (%d items)",
            "Replaced" if replacing else "Registered",
            index.crate_name,
            len(index.items),
        )
        return True

    def unregister(self, crate_name: str) -> bool:
        """Drop a crate's index. Returns False if it was not registered."""
        with self._lock:
            if crate_name not in self._crates:
                return False
            self._crates = {k: v for k, v in self._crates.items() if k != crate_name}
            self._fingerprints = {
                k: v for k, v in self._fingerprints.items() if k != crate_name
            }
        logger.info("Unregistered crate %s", crate_name)
        return True

    def get(self, crate_name: str) -> CrateIndex | None:
        """Return the index registered under ``crate_name``, if any."""
        return self._crates.get(crate_name)

    def all(self) -> tuple[CrateIndex, ...]:
        """Return a snapshot of every registered index, ordered by crate name."""
        crates = self._crates
        return tuple(crates[name] for name in sorted(crates))

    def crate_names(self) -> list[str]:
        """Return the registered crate names in sorted order."""
        return sorted(self._crates)

    def clear(self) -> None:
        """Forget every registered crate."""
        with self._lock:
            self._crates = {}
            self._fingerprints = {}

    def __len__(self) -> int:
        return len(self._crates)

    def __contains__(self, crate_name: object) -> bool:
        return crate_name in self._crates


default_registry = IndexRegistry()
