"""Lexical scope tree built in a single pre-pass over a parsed file."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from i18n_keycheck.estree import Node, identifier_name, iter_child_nodes

FUNCTION_TYPES = frozenset(
    {"FunctionDeclaration", "FunctionExpression", "ArrowFunctionExpression"}
)
BLOCK_SCOPE_TYPES = frozenset(
    {
        "BlockStatement",
        "ForStatement",
        "ForInStatement",
        "ForOfStatement",
        "CatchClause",
        "SwitchStatement",
    }
)
IMPORT_SPECIFIER_TYPES = frozenset(
    {"ImportSpecifier", "ImportDefaultSpecifier", "ImportNamespaceSpecifier"}
)


@dataclass
class Binding:
    """A name declared in a scope.

    ``declarator`` is the VariableDeclarator for variable bindings, None for
    parameters, imports, classes and function declarations.
    """

    name: str
    kind: str
    declarator: Node | None = None


@dataclass
class Scope:
    """One lexical scope and the names declared directly in it."""

    node: Node
    kind: str  # program/function/block
    parent: Scope | None
    bindings: dict[str, Binding] = field(default_factory=dict)

    def declare(self, binding: Binding) -> None:
        """Add a binding; a redeclaration in the same scope replaces it."""
        self.bindings[binding.name] = binding

    def hoisting_target(self) -> Scope:
        """Return the nearest function or program scope (where ``var`` lands)."""
        scope = self
        while scope.kind == "block" and scope.parent is not None:
            scope = scope.parent
        return scope


def pattern_names(pattern: Node | None) -> Iterator[str]:
    """Yield every identifier a binding pattern declares."""
    if not pattern:
        return
    node_type = pattern.get("type")
    if node_type == "Identifier":
        yield pattern["name"]
    elif node_type == "ObjectPattern":
        for prop in pattern.get("properties") or []:
            if prop.get("type") == "RestElement":
                yield from pattern_names(prop.get("argument"))
            else:
                yield from pattern_names(prop.get("value"))
    elif node_type == "ArrayPattern":
        for element in pattern.get("elements") or []:
            yield from pattern_names(element)
    elif node_type == "AssignmentPattern":
        yield from pattern_names(pattern.get("left"))
    elif node_type == "RestElement":
        yield from pattern_names(pattern.get("argument"))


class ScopeTree:
    """Arena of scopes for one Program, indexed by the node that opens each."""

    def __init__(self, program: Node) -> None:
        """Build every scope of the program in one traversal."""
        self.scopes: list[Scope] = []
        self._by_node: dict[int, Scope] = {}
        self.root = self._open(program, "program", None)
        self._build(program)

    def scope_for(self, node: Node) -> Scope | None:
        """Return the scope a node opens, if any."""
        return self._by_node.get(id(node))

    def innermost_scope(self, ancestors: list[Node]) -> Scope:
        """Return the innermost scope enclosing a node, given its ancestors."""
        for ancestor in reversed(ancestors):
            scope = self.scope_for(ancestor)
            if scope is not None:
                return scope
        return self.root

    def resolve(self, name: str, ancestors: list[Node]) -> Binding | None:
        """Find the binding a name refers to from the given position."""
        scope: Scope | None = self.innermost_scope(ancestors)
        while scope is not None:
            binding = scope.bindings.get(name)
            if binding is not None:
                return binding
            scope = scope.parent
        return None

    def _open(self, node: Node, kind: str, parent: Scope | None) -> Scope:
        scope = Scope(node=node, kind=kind, parent=parent)
        self.scopes.append(scope)
        self._by_node[id(node)] = scope
        return scope

    def _build(self, program: Node) -> None:
        stack: list[tuple[Node, Scope]] = [(program, self.root)]
        while stack:
            node, scope = stack.pop()
            inner = self._enter(node, scope)
            children = list(iter_child_nodes(node))
            for child in reversed(children):
                stack.append((child, inner))

    def _enter(self, node: Node, scope: Scope) -> Scope:
        """Record what a node declares and return the scope of its children."""
        opened = self.scope_for(node)
        if opened is not None:
            return opened

        node_type = node.get("type")
        if node_type in FUNCTION_TYPES:
            return self._enter_function(node, scope)

        if node_type == "VariableDeclaration":
            kind = node.get("kind") or "var"
            target = scope.hoisting_target() if kind == "var" else scope
            for declarator in node.get("declarations") or []:
                for name in pattern_names(declarator.get("id")):
                    target.declare(Binding(name, kind, declarator))
        elif node_type == "ClassDeclaration":
            name = identifier_name(node.get("id"))
            if name:
                scope.declare(Binding(name, "class"))
        elif node_type == "ImportDeclaration":
            for specifier in node.get("specifiers") or []:
                if specifier.get("type") in IMPORT_SPECIFIER_TYPES:
                    name = identifier_name(specifier.get("local"))
                    if name:
                        self.root.declare(Binding(name, "import"))
        elif node_type in BLOCK_SCOPE_TYPES:
            block = self._open(node, "block", scope)
            if node_type == "CatchClause":
                for name in pattern_names(node.get("param")):
                    block.declare(Binding(name, "param"))
            return block

        return scope

    def _enter_function(self, node: Node, scope: Scope) -> Scope:
        name = identifier_name(node.get("id"))
        if name and node.get("type") == "FunctionDeclaration":
            scope.declare(Binding(name, "function"))

        inner = self._open(node, "function", scope)
        if name and node.get("type") == "FunctionExpression":
            inner.declare(Binding(name, "function"))

        for param in node.get("params") or []:
            for param_name in pattern_names(param):
                inner.declare(Binding(param_name, "param"))

        body = node.get("body")
        if body and body.get("type") == "BlockStatement":
            # The body block shares the function scope.
            self._by_node[id(body)] = inner
        return inner
