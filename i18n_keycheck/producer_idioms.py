"""Recognition of the declarations that produce a translation function.

Three shapes are understood::

    const { t } = useTranslation("ns", { keyPrefix: "a.b" })   # HookWithPrefix
    const t = await getTranslations("a.b")                     # AsyncAccessor
    const t = useTranslations("a.b")                           # SyncAccessor

Each idiom inspects one ``VariableDeclarator`` and returns the
:class:`CallSiteContext` it implies, or None when the declarator has a
different shape.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from i18n_keycheck.call_site_context import CallSiteContext
from i18n_keycheck.estree import (
    Node,
    callee_name,
    identifier_name,
    literal_string,
    property_key_name,
)

KEY_PREFIX_OPTION = "keyPrefix"


def _producer_call(node: Node | None, producers: frozenset[str]) -> Node | None:
    if node and node.get("type") == "CallExpression" and callee_name(node) in producers:
        return node
    return None


def _argument(call: Node, index: int) -> Node | None:
    arguments = call.get("arguments") or []
    return arguments[index] if len(arguments) > index else None


def _destructures_name(pattern: Node, name: str) -> bool:
    for prop in pattern.get("properties") or []:
        if prop.get("type") != "Property":
            continue
        value = prop.get("value")
        if value and value.get("type") == "AssignmentPattern":
            value = value.get("left")
        bound = identifier_name(value) or property_key_name(prop)
        if bound == name:
            return True
    return False


def _key_prefix(options: Node | None) -> str | None:
    if not options or options.get("type") != "ObjectExpression":
        return None
    for prop in options.get("properties") or []:
        if prop.get("type") == "Property" and property_key_name(prop) == KEY_PREFIX_OPTION:
            return literal_string(prop.get("value"))
    return None


@dataclass(frozen=True)
class HookWithPrefix:
    """``useTranslation(namespace, { keyPrefix })``, bound or destructured."""

    producers: frozenset[str]

    def extract(self, declarator: Node, name: str) -> CallSiteContext | None:
        call = _producer_call(declarator.get("init"), self.producers)
        if call is None:
            return None

        target = declarator.get("id") or {}
        if target.get("type") == "ObjectPattern":
            if not _destructures_name(target, name):
                return None
        elif identifier_name(target) != name:
            return None

        return CallSiteContext(
            prefix=_key_prefix(_argument(call, 1)),
            namespace=literal_string(_argument(call, 0)),
        )


@dataclass(frozen=True)
class AsyncAccessor:
    """``await getTranslations(prefix)``; the namespace is left to defaults."""

    producers: frozenset[str]

    def extract(self, declarator: Node, name: str) -> CallSiteContext | None:
        if identifier_name(declarator.get("id")) != name:
            return None
        init = declarator.get("init") or {}
        if init.get("type") != "AwaitExpression":
            return None
        call = _producer_call(init.get("argument"), self.producers)
        if call is None:
            return None
        return CallSiteContext(prefix=literal_string(_argument(call, 0)))


@dataclass(frozen=True)
class SyncAccessor:
    """``getTranslations(prefix)`` without an await."""

    producers: frozenset[str]

    def extract(self, declarator: Node, name: str) -> CallSiteContext | None:
        if identifier_name(declarator.get("id")) != name:
            return None
        call = _producer_call(declarator.get("init"), self.producers)
        if call is None:
            return None
        return CallSiteContext(prefix=literal_string(_argument(call, 0)))


ProducerIdiom = HookWithPrefix | AsyncAccessor | SyncAccessor


def build_producer_idioms(
    hook_producers: Iterable[str], accessor_producers: Iterable[str]
) -> tuple[ProducerIdiom, ...]:
    """Create the idiom matchers for the configured producer names."""
    hooks = frozenset(hook_producers)
    accessors = frozenset(accessor_producers)
    return (HookWithPrefix(hooks), AsyncAccessor(accessors), SyncAccessor(accessors))


DEFAULT_PRODUCER_IDIOMS = build_producer_idioms(
    ["useTranslation"], ["getTranslations", "useTranslations"]
)


def match_producer(
    declarator: Node, name: str, idioms: Iterable[ProducerIdiom]
) -> CallSiteContext | None:
    """Return the context from the first idiom matching the declarator."""
    for idiom in idioms:
        context = idiom.extract(declarator, name)
        if context is not None:
            return context
    return None
