"""Data models for decoded search index entries."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from docsearch.item_kind import Kind


@dataclass(frozen=True)
class PathEntry:
    """A crate-level symbol (usually a trait or type) other items name as parent."""

    kind: Kind
    name: str


@dataclass(frozen=True)
class Signature:
    """Type names of a function-like item's inputs and output."""

    inputs: tuple[str, ...] = ()
    output: str | None = None

    def type_names(self) -> tuple[str, ...]:
        """Return input type names followed by the output type, if any."""
        if self.output is None:
            return self.inputs
        return (*self.inputs, self.output)


@dataclass(frozen=True)
class ItemRecord:
    """Represents one searchable item (type, trait, method, macro, etc.)."""

    kind: Kind
    path: str  # module path, "::"-separated; empty for the crate root
    name: str
    description: str = ""
    parent_ref: int | None = None  # index into CrateIndex.paths
    signature: Signature | None = None
    # Lowercased keys, precomputed so queries never re-normalize.
    search_key: str = field(init=False, repr=False, compare=False)
    qualified_key: str = field(init=False, repr=False, compare=False)
    signature_types: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "search_key", f"{self.name} {self.path}".lower())
        object.__setattr__(self, "qualified_key", self.qualified_name.lower())
        types = self.signature.type_names() if self.signature is not None else ()
        object.__setattr__(self, "signature_types", tuple(t.lower() for t in types))

    @property
    def qualified_name(self) -> str:
        """Return ``path::name``, or whichever part is non-empty."""
        return "::".join(part for part in (self.path, self.name) if part)


class IssueKind(Enum):
    """Categories of row-level problems found while loading."""

    MALFORMED_ROW = "malformed_row"
    DANGLING_REFERENCE = "dangling_reference"
    UNKNOWN_KIND = "unknown_kind"


@dataclass(frozen=True)
class LoadIssue:
    """A row the loader skipped or flagged."""

    kind: IssueKind
    crate_name: str
    row: int
    message: str
    table: str = "items"  # "items" or "paths"


@dataclass(frozen=True)
class CrateIndex:
    """The decoded, immutable search index of one crate."""

    crate_name: str
    items: tuple[ItemRecord, ...] = ()
    paths: tuple[PathEntry, ...] = ()
    issues: tuple[LoadIssue, ...] = ()

    def parent_of(self, record: ItemRecord) -> PathEntry | None:
        """Return the path entry a record names as its parent."""
        if record.parent_ref is None:
            return None
        return self.paths[record.parent_ref]


class MatchTier(IntEnum):
    """How well a record matched a query; lower is better."""

    EXACT = 1
    PREFIX = 2
    SUBSTRING = 3
    PATH = 4
    SIGNATURE = 5


@dataclass(frozen=True)
class ScoredResult:
    """One ranked search hit."""

    crate_name: str
    record: ItemRecord
    tier: MatchTier
    parent: PathEntry | None
    full_path: str  # display path, e.g. horrorshow::Render::render
    href: str  # relative to the documentation root
