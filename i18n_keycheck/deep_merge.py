"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_KEYS = frozenset({"hook_producers", "accessor_producers", "exclude_dirs"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Lists in 'update' replace 'base' lists, except the producer name lists and
      'exclude_dirs', which are additive.
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif key in ADDITIVE_KEYS and isinstance(value, list) and isinstance(current, list):
            result[key] = sorted(set(current) | set(value))
        else:
            result[key] = value
    return result
