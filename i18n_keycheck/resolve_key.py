"""Lookup of dotted translation keys inside a namespace resource tree."""

from typing import Any

PLURAL_SUFFIXES = ("zero", "singular", "one", "two", "few", "many", "other")


def split_key_path(key: str) -> list[str]:
    """Split a key string into its dotted path segments."""
    return key.split(".")


def _child(node: Any, segment: str) -> Any | None:
    if isinstance(node, dict):
        return node.get(segment)
    # Lists are indexed by canonical non-negative integers ("0", "12").
    if isinstance(node, list) and segment.isdecimal() and str(int(segment)) == segment:
        index = int(segment)
        return node[index] if index < len(node) else None
    return None


def resolve_key(
    tree: dict[str, Any], key_path: list[str], plural_separator: str = "_"
) -> Any | None:
    """Walk the key path through the tree and return the value it reaches.

    Every segment but the last must match exactly. When the last segment misses,
    its plural forms (``<segment><separator><suffix>``) are tried against the
    parent in PLURAL_SUFFIXES order and the first defined one is returned.
    Returns None when nothing resolves, including for paths with empty segments.
    """
    if not key_path or not all(key_path):
        return None

    node: Any = tree
    last = len(key_path) - 1
    for index, segment in enumerate(key_path):
        parent = node
        node = _child(parent, segment)
        if node is not None:
            continue
        if index < last:
            return None
        for suffix in PLURAL_SUFFIXES:
            node = _child(parent, f"{segment}{plural_separator}{suffix}")
            if node is not None:
                break
    return node
