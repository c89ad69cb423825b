"""Shared fixtures for the docsearch tests."""

from pathlib import Path
from typing import Any

import pytest

from docsearch.read_search_index import read_search_index

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def horrorshow_payload() -> dict[str, Any]:
    """The search payload of the horrorshow crate, as emitted by rustdoc."""
    return read_search_index(FIXTURES / "search-index.js")


@pytest.fixture
def demo_payload() -> dict[str, Any]:
    """A small crate with a trait, its methods and a macro."""
    return {
        "demo": {
            "items": [
                [0, "", "demo", "The demo crate.", None, None],
                [8, "Render", "", "Something that renders.", None, None],
                [
                    11,
                    "render",
                    "",
                    "Render into a new String.",
                    0,
                    {"inputs": [{"name": "render"}], "output": {"name": "string"}},
                ],
                [
                    11,
                    "render_into",
                    "",
                    "Render into a writer.",
                    0,
                    {"inputs": [{"name": "render"}, {"name": "writer"}], "output": None},
                ],
                [3, "Renderer", "demo::output", "A renderer.", None, None],
                [5, "to_string", "demo::output", "Stringify.", None, None],
                [14, "render!", "demo", "Build a template.", None, None],
            ],
            "paths": [[8, "Render"]],
        }
    }
