"""Helpers for reading ESTree nodes represented as dictionaries."""

from collections.abc import Iterator
from typing import Any

Node = dict[str, Any]

NON_CHILD_FIELDS = frozenset({"type", "range", "loc", "regex"})


def is_node(value: object) -> bool:
    """Return True for a dict that looks like an ESTree node."""
    return isinstance(value, dict) and isinstance(value.get("type"), str)


def iter_child_nodes(node: Node) -> Iterator[Node]:
    """Yield the direct child nodes of a node in field order."""
    for field, value in node.items():
        if field in NON_CHILD_FIELDS:
            continue
        if is_node(value):
            yield value
        elif isinstance(value, list):
            for item in value:
                if is_node(item):
                    yield item


def walk_with_ancestors(root: Node) -> Iterator[tuple[Node, list[Node]]]:
    """Yield every node in pre-order with its ancestors, outermost first."""
    stack: list[tuple[Node, list[Node]]] = [(root, [])]
    while stack:
        node, ancestors = stack.pop()
        yield node, ancestors
        children = list(iter_child_nodes(node))
        chain = [*ancestors, node]
        for child in reversed(children):
            stack.append((child, chain))


def identifier_name(node: Node | None) -> str | None:
    """Return the name of an Identifier node, None for anything else."""
    if node and node.get("type") == "Identifier":
        return node.get("name")
    return None


def callee_name(call: Node) -> str | None:
    """Return the callee name of a call whose callee is a bare identifier."""
    return identifier_name(call.get("callee"))


def is_string_literal(node: Node | None) -> bool:
    """Return True for a Literal node holding a string."""
    return bool(node) and node.get("type") == "Literal" and isinstance(
        node.get("value"), str
    )


def literal_string(node: Node | None) -> str | None:
    """Return the value of a string Literal, None for anything else."""
    if is_string_literal(node):
        return node["value"]
    return None


def first_argument(call: Node) -> Node | None:
    """Return the first argument of a call, None when it has none."""
    arguments = call.get("arguments") or []
    return arguments[0] if arguments else None


def property_key_name(prop: Node) -> str | None:
    """Return the static key of a Property, written as identifier or string."""
    key = prop.get("key")
    if prop.get("computed"):
        return literal_string(key)
    return identifier_name(key) or literal_string(key)


def node_text(node: Node, source: str) -> str:
    """Return the source text a node was parsed from."""
    start, end = node["range"]
    return source[start:end]


def node_position(node: Node) -> tuple[int, int]:
    """Return the 1-based line and column where a node starts."""
    start = (node.get("loc") or {}).get("start") or {}
    return start.get("line", 0), start.get("column", -1) + 1
