"""Loading of the namespace mapping and the per-namespace translation resources."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from i18n_keycheck.config_error import ConfigError
from i18n_keycheck.load_structured_file import load_structured_file, resolve_locator
from i18n_keycheck.resolve_key import resolve_key, split_key_path

logger = logging.getLogger(__name__)


def load_mapping(mapping_locator: str) -> tuple[dict[str, str], Path]:
    """Load a namespace mapping file.

    Returns the mapping and the directory that relative resource locators in it
    are resolved against. A relative mapping locator resolves against the current
    working directory.
    """
    mapping_path = resolve_locator(mapping_locator, Path.cwd())
    mapping = load_structured_file(mapping_path)
    for namespace, locator in mapping.items():
        if not isinstance(locator, str):
            msg = (
                f"Namespace '{namespace}' in {mapping_path} must map to a file "
                f"path, got {type(locator).__name__}"
            )
            raise ConfigError(msg)
    return mapping, mapping_path.resolve().parent


def load_resource(locator: str, base_dir: Path) -> dict[str, Any]:
    """Load one namespace's translation resource tree."""
    return load_structured_file(resolve_locator(locator, base_dir))


class TranslationBundle:
    """Holds the resource tree of every namespace for one analysis run."""

    def __init__(self, resources: dict[str, dict[str, Any]]) -> None:
        """Initialize the bundle with already loaded resource trees."""
        self.resources = resources

    @classmethod
    def load(cls, mapping_locator: str) -> TranslationBundle:
        """Read the mapping and every resource it references, fresh from disk."""
        mapping, base_dir = load_mapping(mapping_locator)
        resources = {
            namespace: load_resource(locator, base_dir)
            for namespace, locator in mapping.items()
        }
        logger.debug(
            "Loaded %d namespaces from %s: %s",
            len(resources),
            mapping_locator,
            ", ".join(sorted(resources)),
        )
        return cls(resources)

    @property
    def namespaces(self) -> list[str]:
        """Return the namespace names in mapping order."""
        return list(self.resources)

    def lookup(
        self, namespace: str, key: str, plural_separator: str = "_"
    ) -> Any | None:
        """Resolve a dotted key inside a namespace, None when it is missing."""
        tree = self.resources.get(namespace)
        if tree is None:
            logger.debug("Namespace %s is not in the mapping", namespace)
            return None
        return resolve_key(tree, split_key_path(key), plural_separator)
