"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from docsearch.deep_merge import deep_merge
from docsearch.errors import ConfigError
from docsearch.item_kind import kind_from_tag

DEFAULT_CONFIG: dict[str, Any] = {
    "search": {
        "default_limit": 50,
        "max_query_length": 256,
    },
    # Query prefix ("fn:render") -> kind tags it selects.
    "kind_aliases": {
        "fn": ["fn", "method", "tymethod"],
        "type": ["struct", "enum", "type", "primitive", "associatedtype"],
        "const": ["constant", "associatedconstant"],
        "mod": ["mod"],
        "macro": ["macro"],
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    config["kind_aliases"] = _check_kind_aliases(config.get("kind_aliases") or {})
    return config


def _check_kind_aliases(aliases: object) -> dict[str, list[str]]:
    """Normalize alias values to tag lists; a bare string is a single tag."""
    if not isinstance(aliases, dict):
        msg = "kind_aliases must map alias names to kind tags"
        raise ConfigError(msg)
    checked: dict[str, list[str]] = {}
    for alias, tags in aliases.items():
        tag_list = [tags] if isinstance(tags, str) else tags
        if not isinstance(tag_list, list) or not all(
            isinstance(t, str) and kind_from_tag(t) is not None for t in tag_list
        ):
            msg = f"kind_aliases.{alias} must list known kind tags, got {tags!r}"
            raise ConfigError(msg)
        checked[str(alias).lower()] = tag_list
    return checked
