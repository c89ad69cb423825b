"""Item kind codes used by the search index payload."""

from dataclasses import dataclass
from enum import IntEnum


class ItemKind(IntEnum):
    """Known item kinds, numbered as they appear in the payload."""

    MODULE = 0
    EXTERNCRATE = 1
    IMPORT = 2
    STRUCT = 3
    ENUM = 4
    FN = 5
    TYPE = 6
    STATIC = 7
    TRAIT = 8
    IMPL = 9
    TYMETHOD = 10  # required trait method
    METHOD = 11  # inherent or provided method
    STRUCTFIELD = 12
    VARIANT = 13
    MACRO = 14
    PRIMITIVE = 15
    ASSOCIATEDTYPE = 16
    CONSTANT = 17
    ASSOCIATEDCONSTANT = 18

    @property
    def code(self) -> int:
        """Return the numeric payload code."""
        return int(self)

    @property
    def tag(self) -> str:
        """Return the short tag used in page names and query prefixes."""
        return _TAGS[self]


_TAGS: dict[ItemKind, str] = {kind: kind.name.lower() for kind in ItemKind}
_TAGS[ItemKind.MODULE] = "mod"

_BY_TAG: dict[str, ItemKind] = {tag: kind for kind, tag in _TAGS.items()}
_BY_TAG["module"] = ItemKind.MODULE


@dataclass(frozen=True)
class OpaqueKind:
    """A kind code this version of the payload vocabulary does not know."""

    code: int

    @property
    def tag(self) -> str:
        """Return a placeholder tag naming the raw code."""
        return f"kind{self.code}"


Kind = ItemKind | OpaqueKind


def kind_from_code(code: int) -> Kind:
    """Map a payload code to its kind, keeping unknown codes opaque."""
    try:
        return ItemKind(code)
    except ValueError:
        return OpaqueKind(code)


def kind_from_tag(tag: str) -> ItemKind | None:
    """Look up a known kind by its tag (``fn``, ``trait``, ``mod``...)."""
    return _BY_TAG.get(tag.strip().lower())
