"""Exception types raised while loading and querying search indices."""


class DocSearchError(Exception):
    """Base class for all docsearch errors."""


class LoadError(DocSearchError):
    """A payload (or one crate inside it) could not be read at all."""

    def __init__(self, crate_name: str | None, reason: str) -> None:
        """Record which crate failed and why."""
        self.crate_name = crate_name
        self.reason = reason
        where = f"crate {crate_name!r}" if crate_name is not None else "payload"
        super().__init__(f"Cannot load {where}: {reason}")


class MalformedRowError(DocSearchError):
    """A single row has the wrong shape and must be skipped."""


class DanglingReferenceError(DocSearchError):
    """A row's parent reference does not point into the path table."""


class QueryError(DocSearchError):
    """Query options are invalid (e.g. an unknown kind name)."""


class ConfigError(DocSearchError):
    """A configuration file holds values that cannot be used."""
