"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from i18n_keycheck.config_error import ConfigError
from i18n_keycheck.deep_merge import deep_merge
from i18n_keycheck.load_config import (
    STRING_LITERAL_RULE,
    UNDEFINED_KEYS_RULE,
    load_config,
    rule_options,
)


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that ordinary lists are replaced."""
    base = {"functions": ["t", "translate"]}
    update = {"functions": ["i18n"]}
    merged = deep_merge(base, update)
    assert merged == {"functions": ["i18n"]}


def test_deep_merge_producers_additive() -> None:
    """Verify that producer and exclusion lists are merged additively."""
    base = {"hook_producers": ["useTranslation"], "exclude_dirs": ["dist"]}
    update = {"hook_producers": ["useI18n", "useTranslation"], "exclude_dirs": ["out"]}
    merged = deep_merge(base, update)
    assert merged["hook_producers"] == ["useI18n", "useTranslation"]
    assert merged["exclude_dirs"] == ["dist", "out"]


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["translation"]["functions"] == ["t", "translate"]
    assert rule_options(config, UNDEFINED_KEYS_RULE)["defaultNamespace"] == "default"
    assert rule_options(config, STRING_LITERAL_RULE)["guardComparison"] == "text"


def test_load_config_returns_fresh_copies() -> None:
    """Mutating one loaded config does not leak into the next."""
    first = load_config(None)
    first["translation"]["functions"].append("i18n")
    assert load_config(None)["translation"]["functions"] == ["t", "translate"]


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "translation": {"accessor_producers": ["getI18n"]},
        "rules": {
            UNDEFINED_KEYS_RULE: {"defaultNamespace": "common"},
            STRING_LITERAL_RULE: {"enabled": False},
        },
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    undefined = rule_options(loaded, UNDEFINED_KEYS_RULE)
    assert undefined["defaultNamespace"] == "common"
    assert undefined["scopeResolution"] == "lexical"  # Default
    assert rule_options(loaded, STRING_LITERAL_RULE)["enabled"] is False
    assert "getI18n" in loaded["translation"]["accessor_producers"]  # Added
    assert "getTranslations" in loaded["translation"]["accessor_producers"]  # Default


def test_load_config_empty_file(tmp_path: Path) -> None:
    """An empty config file leaves the defaults untouched."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("")
    assert load_config(str(config_file)) == load_config(None)


@pytest.mark.parametrize(
    ("content", "match"),
    [
        ("rules: [unclosed", "not valid YAML"),
        ("- just\n- a list\n", "mapping at the top level"),
        ("rules:\n", "section 'rules' must be a mapping"),
        ("files: [src]\n", "section 'files' must be a mapping"),
        ("rules:\n  translation-key-string-literal:\n", "options for rule"),
    ],
)
def test_load_config_rejects_bad_files(tmp_path: Path, content: str, match: str) -> None:
    """Malformed config files raise ConfigError."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(content)
    with pytest.raises(ConfigError, match=match):
        load_config(str(config_file))


def test_load_config_missing_file(tmp_path: Path) -> None:
    """A config path that does not exist raises ConfigError."""
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(str(tmp_path / "absent.yml"))


def test_rule_options_for_unknown_rule() -> None:
    """Unknown rules have no options."""
    assert rule_options(load_config(None), "no-such-rule") == {}
