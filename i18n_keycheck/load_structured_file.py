"""Logic for reading JSON and YAML data files straight from disk."""

import json
from pathlib import Path
from typing import Any

import yaml

from i18n_keycheck.config_error import ConfigError

YAML_SUFFIXES = (".yaml", ".yml")
CANDIDATE_SUFFIXES = (".json", ".yaml", ".yml")


def resolve_locator(locator: str, base_dir: Path) -> Path:
    """Resolve a file locator against a base directory.

    Absolute locators are used as-is. A locator without a suffix that does not
    exist on disk is retried with each of the known data file suffixes.
    """
    path = Path(locator)
    if not path.is_absolute():
        path = base_dir / path
    if path.is_file():
        return path
    if not path.suffix:
        for suffix in CANDIDATE_SUFFIXES:
            candidate = path.with_suffix(suffix)
            if candidate.is_file():
                return candidate
    msg = f"Cannot resolve '{locator}' (looked for {path})"
    raise ConfigError(msg)


def load_structured_file(path: Path) -> dict[str, Any]:
    """Read and parse a JSON or YAML file whose root must be a mapping.

    The file is read every time; nothing is cached between calls.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read {path}: {exc}"
        raise ConfigError(msg) from exc

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        msg = f"Cannot parse {path}: {exc}"
        raise ConfigError(msg) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping at the top level"
        raise ConfigError(msg)
    return data
