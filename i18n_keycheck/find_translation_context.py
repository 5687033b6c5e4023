"""Recovery of the namespace and key prefix bound to a translation call."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from i18n_keycheck.call_site_context import EMPTY_CONTEXT, CallSiteContext
from i18n_keycheck.estree import Node, callee_name
from i18n_keycheck.producer_idioms import (
    DEFAULT_PRODUCER_IDIOMS,
    ProducerIdiom,
    match_producer,
)
from i18n_keycheck.scope_tree import ScopeTree

logger = logging.getLogger(__name__)


def find_translation_context(
    call: Node,
    ancestors: list[Node],
    idioms: Iterable[ProducerIdiom] = DEFAULT_PRODUCER_IDIOMS,
    scopes: ScopeTree | None = None,
) -> CallSiteContext:
    """Determine how the called translation function was produced.

    With a scope tree the callee resolves to its nearest enclosing declaration.
    Without one, every statement list among the ancestors is scanned and the
    last matching declaration wins.
    """
    name = callee_name(call)
    if name is None:
        return EMPTY_CONTEXT

    idioms = tuple(idioms)
    if scopes is not None:
        return _from_scope_tree(name, ancestors, idioms, scopes)
    return _from_ancestor_scan(name, ancestors, idioms)


def _from_scope_tree(
    name: str,
    ancestors: list[Node],
    idioms: tuple[ProducerIdiom, ...],
    scopes: ScopeTree,
) -> CallSiteContext:
    binding = scopes.resolve(name, ancestors)
    if binding is None or binding.declarator is None:
        return EMPTY_CONTEXT
    context = match_producer(binding.declarator, name, idioms)
    if context is None:
        logger.debug("'%s' is bound by a %s that is not a known producer", name, binding.kind)
        return EMPTY_CONTEXT
    return context


def _from_ancestor_scan(
    name: str, ancestors: list[Node], idioms: tuple[ProducerIdiom, ...]
) -> CallSiteContext:
    context = EMPTY_CONTEXT
    for ancestor in ancestors:
        statements = ancestor.get("body")
        if not isinstance(statements, list):
            continue
        for statement in statements:
            for declarator in statement.get("declarations") or []:
                match = match_producer(declarator, name, idioms)
                if match is not None:
                    context = match
    return context
