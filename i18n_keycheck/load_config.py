"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from i18n_keycheck.config_error import ConfigError
from i18n_keycheck.deep_merge import deep_merge

UNDEFINED_KEYS_RULE = "no-undefined-translation-keys"
STRING_LITERAL_RULE = "translation-key-string-literal"

DEFAULT_CONFIG: dict[str, Any] = {
    "files": {
        "extensions": [".js", ".jsx", ".mjs", ".cjs"],
        "exclude_dirs": ["node_modules", ".git", "dist", "build", "coverage"],
        "source_type": "module",
    },
    "translation": {
        "functions": ["t", "translate"],
        "hook_producers": ["useTranslation"],
        "accessor_producers": ["getTranslations", "useTranslations"],
        "namespace_separator": ":",
        "plural_separator": "_",
    },
    "rules": {
        UNDEFINED_KEYS_RULE: {
            "enabled": True,
            "namespaceTranslationMappingFile": None,
            "defaultNamespace": "default",
            "scopeResolution": "lexical",
        },
        STRING_LITERAL_RULE: {
            "enabled": True,
            "allowTHasProtectedConditionals": False,
            "guardComparison": "text",
        },
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            msg = f"Config file {path} is not valid YAML: {exc}"
            raise ConfigError(msg) from exc
        if not isinstance(user_config, dict):
            msg = f"Config file {path} must contain a mapping at the top level"
            raise ConfigError(msg)
        config = deep_merge(config, user_config)
        _check_sections(config, path)
    return config


def _check_sections(config: dict[str, Any], path: str) -> None:
    for section in DEFAULT_CONFIG:
        if not isinstance(config.get(section), dict):
            msg = f"Config file {path}: section '{section}' must be a mapping"
            raise ConfigError(msg)
    for rule_id, options in config["rules"].items():
        if not isinstance(options, dict):
            msg = f"Config file {path}: options for rule '{rule_id}' must be a mapping"
            raise ConfigError(msg)


def rule_options(config: dict[str, Any], rule_id: str) -> dict[str, Any]:
    """Return the option block for a rule, empty when not configured."""
    return config.get("rules", {}).get(rule_id) or {}
