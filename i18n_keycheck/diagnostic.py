"""Data model for a single reported problem."""

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Diagnostic:
    """A problem found at a position in a source file."""

    file: str
    line: int
    column: int
    message: str = field(compare=False)
    rule_id: str | None = field(default=None, compare=False)  # None for fatal errors

    def format(self) -> str:
        """Render the diagnostic as a single terminal line."""
        suffix = f" [{self.rule_id}]" if self.rule_id else ""
        return f"{self.file}:{self.line}:{self.column}: {self.message}{suffix}"
