"""Recognition of the ``t.has(key) ? t(key) : fallback`` guard idiom.

A dynamic key is accepted when the call sits in the consequent of a
conditional whose test checks the same key with ``<alias>.has(...)``. Whether
the two keys are "the same" is decided by comparing either whitespace-collapsed
source text (``text``) or a canonical serialization of the ESTree node that
ignores positions, raw literal text and parentheses (``structure``).
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

from i18n_keycheck.estree import (
    Node,
    callee_name,
    first_argument,
    identifier_name,
    node_text,
)

COMPARISON_MODES = ("text", "structure")
HAS_METHOD = "has"
POSITION_FIELDS = frozenset({"range", "loc", "raw"})
WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class GuardPair:
    """Normalized forms of the checked key and the used key."""

    checked: str
    used: str

    @property
    def matches(self) -> bool:
        """Return True when both sides normalize to the same form."""
        return self.checked == self.used


def normalized_source(node: Node, source: str) -> str:
    """Return the node's source text with whitespace runs collapsed."""
    return WHITESPACE_RE.sub(" ", node_text(node, source)).strip()


def canonical_form(node: Node) -> str:
    """Serialize a node deterministically, without positions or raw text."""
    parts: list[str] = []
    # (True, text) is emitted as is, (False, value) is serialized.
    stack: list[tuple[bool, Any]] = [(False, node)]
    while stack:
        is_text, value = stack.pop()
        if is_text:
            parts.append(value)
        elif isinstance(value, dict):
            fields = sorted(k for k in value if k not in POSITION_FIELDS)
            stack.append((True, "}"))
            for key in reversed(fields):
                stack.append((True, ","))
                stack.append((False, value[key]))
                stack.append((True, f"{json.dumps(key)}:"))
            stack.append((True, "{"))
        elif isinstance(value, list):
            stack.append((True, "]"))
            for item in reversed(value):
                stack.append((True, ","))
                stack.append((False, item))
            stack.append((True, "["))
        else:
            parts.append(json.dumps(value, default=str))
    return "".join(parts)


def is_has_check(node: Node | None, alias: str) -> bool:
    """Return True for a call of the form ``<alias>.has(...)``."""
    if not node or node.get("type") != "CallExpression":
        return False
    callee = node.get("callee") or {}
    return (
        callee.get("type") == "MemberExpression"
        and not callee.get("computed")
        and identifier_name(callee.get("object")) == alias
        and identifier_name(callee.get("property")) == HAS_METHOD
    )


def guard_pair(checked: Node, used: Node, source: str, comparison: str) -> GuardPair:
    """Normalize both key expressions with the chosen comparison mode."""
    if comparison == "text":
        return GuardPair(normalized_source(checked, source), normalized_source(used, source))
    if comparison == "structure":
        return GuardPair(canonical_form(checked), canonical_form(used))
    msg = f"Unknown guard comparison mode: {comparison}"
    raise ValueError(msg)


def is_guarded(
    call: Node, ancestors: list[Node], source: str, comparison: str = "text"
) -> bool:
    """Return True if the call is protected by a matching ``has`` check."""
    alias = callee_name(call)
    used = first_argument(call)
    if alias is None or used is None:
        return False

    chain = [*ancestors, call]
    for index, ancestor in enumerate(ancestors):
        if ancestor.get("type") != "ConditionalExpression":
            continue
        if chain[index + 1] is not ancestor.get("consequent"):
            continue
        test = ancestor.get("test")
        if not is_has_check(test, alias):
            continue
        checked = first_argument(test)
        if checked is not None and guard_pair(checked, used, source, comparison).matches:
            return True
    return False
