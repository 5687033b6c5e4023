"""Merging of key prefixes and selection of the effective namespace."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EffectiveReference:
    """The namespace and key a translation call finally refers to."""

    namespace: str
    key: str


def normalize_reference(
    raw_key: str,
    prefix: str | None,
    inferred_namespace: str | None,
    default_namespace: str,
    namespace_separator: str = ":",
) -> EffectiveReference:
    """Build the effective reference for a literal key.

    Precedence for the namespace: an inline ``namespace:key`` prefix, then the
    namespace inferred from the call site, then the configured default.
    """
    key = f"{prefix}.{raw_key}" if prefix else raw_key

    if namespace_separator and namespace_separator in key:
        namespace, _, rest = key.partition(namespace_separator)
        return EffectiveReference(namespace=namespace, key=rest)

    if inferred_namespace is not None:
        return EffectiveReference(namespace=inferred_namespace, key=key)
    return EffectiveReference(namespace=default_namespace, key=key)
