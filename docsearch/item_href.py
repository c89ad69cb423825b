"""Utilities for the display path and page link of a search result."""

from docsearch.item_kind import ItemKind
from docsearch.models import ItemRecord, PathEntry


def item_display_path(record: ItemRecord, parent: PathEntry | None) -> str:
    """Return e.g. ``horrorshow::Render::render`` for a parented method."""
    parts = [record.path, parent.name if parent else "", record.name]
    return "::".join(p for p in parts if p)


def item_href(record: ItemRecord, parent: PathEntry | None) -> str:
    """Generate the documentation page link for an item.

    Modules link to their index page, parented items to an anchor on the
    parent's page, everything else to its own ``<kind>.<name>.html`` page.
    """
    # Modules: a::b -> a/b/
    folder = record.path.replace("::", "/")
    prefix = f"{folder}/" if folder else ""

    if record.kind is ItemKind.MODULE:
        if not record.name:
            return f"{prefix}index.html"
        return f"{prefix}{record.name}/index.html"
    if parent is not None:
        anchor = f"{record.kind.tag}.{record.name}"
        return f"{prefix}{parent.kind.tag}.{parent.name}.html#{anchor}"
    return f"{prefix}{record.kind.tag}.{record.name}.html"
