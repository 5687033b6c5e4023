"""Data model for the namespace and key prefix recovered at a call site."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CallSiteContext:
    """Namespace and key prefix bound to a translation function.

    A None field means the analysis could not determine it.
    """

    prefix: str | None = None
    namespace: str | None = None


EMPTY_CONTEXT = CallSiteContext()
