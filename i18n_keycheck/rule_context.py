"""Per-file state handed to rules while a file is being checked."""

from dataclasses import dataclass, field

from i18n_keycheck.diagnostic import Diagnostic
from i18n_keycheck.estree import Node, node_position
from i18n_keycheck.scope_tree import ScopeTree


@dataclass
class RuleContext:
    """Source, scopes and the report sink for the file being linted."""

    file: str
    source: str
    scopes: ScopeTree
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, rule_id: str, node: Node, message: str) -> None:
        """Record a diagnostic at the start of a node."""
        line, column = node_position(node)
        self.diagnostics.append(
            Diagnostic(
                file=self.file,
                line=line,
                column=column,
                message=message,
                rule_id=rule_id,
            )
        )
