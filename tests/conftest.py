"""Shared fixtures: a translation bundle on disk and helpers to build linters."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from i18n_keycheck.estree import Node, callee_name, walk_with_ancestors
from i18n_keycheck.linter import Linter
from i18n_keycheck.load_config import STRING_LITERAL_RULE, UNDEFINED_KEYS_RULE, load_config
from i18n_keycheck.parse_source import parse_source

DEFAULT_TRANSLATIONS: dict[str, Any] = {
    "pizza": "Pizza",
    "records": {"contracts": "Contracts"},
    "distance": {
        "milesAway_one": "{{count}} mile",
        "milesAway_other": "{{count}} miles",
    },
    "common": {"appName": "My App", "welcome": "Welcome"},
    "errors": {"notFound": "Not found"},
}

COMMON_TRANSLATIONS: dict[str, Any] = {
    "appName": "Common App",
    "title": "Title",
}


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    """Write a mapping with a JSON and a YAML namespace under tmp_path/locales."""
    locales = tmp_path / "locales"
    locales.mkdir()
    (locales / "default.json").write_text(json.dumps(DEFAULT_TRANSLATIONS), encoding="utf-8")
    (locales / "common.yaml").write_text(yaml.dump(COMMON_TRANSLATIONS), encoding="utf-8")
    (locales / "namespaces.json").write_text(
        json.dumps({"default": "./default.json", "common": "common.yaml"}),
        encoding="utf-8",
    )
    return locales


@pytest.fixture
def mapping_file(locales_dir: Path) -> Path:
    """Return the absolute path of the namespace mapping file."""
    return locales_dir / "namespaces.json"


@pytest.fixture
def make_linter(mapping_file: Path) -> Callable[..., Linter]:
    """Build a linter with only the requested rules enabled.

    Each keyword takes the option overrides for that rule, or None to disable it.
    """

    def _make(
        undefined_keys: dict[str, Any] | None = None,
        string_literal: dict[str, Any] | None = None,
    ) -> Linter:
        config = load_config(None)
        rules = config["rules"]
        rules[UNDEFINED_KEYS_RULE]["namespaceTranslationMappingFile"] = str(mapping_file)
        rules[UNDEFINED_KEYS_RULE]["enabled"] = undefined_keys is not None
        rules[UNDEFINED_KEYS_RULE].update(undefined_keys or {})
        rules[STRING_LITERAL_RULE]["enabled"] = string_literal is not None
        rules[STRING_LITERAL_RULE].update(string_literal or {})
        return Linter(config)

    return _make


@pytest.fixture
def find_call() -> Callable[..., tuple[Node, list[Node], Node]]:
    """Parse source and return (call, ancestors, program) for a call by callee name."""

    def _find(source: str, name: str = "t", index: int = 0) -> tuple[Node, list[Node], Node]:
        program = parse_source(source)
        calls = [
            (node, ancestors)
            for node, ancestors in walk_with_ancestors(program)
            if node.get("type") == "CallExpression" and callee_name(node) == name
        ]
        call, ancestors = calls[index]
        return call, ancestors, program

    return _find
