"""Parsing of JavaScript sources into ESTree dictionaries."""

from typing import Any

import esprima

PARSE_OPTIONS = {"jsx": True, "range": True, "loc": True}


class SourceParseError(Exception):
    """Raised when a source file cannot be parsed."""

    def __init__(self, message: str, line: int = 1, column: int = 1) -> None:
        """Keep the position the parser stopped at."""
        super().__init__(message)
        self.line = line
        self.column = column


def parse_source(source: str, *, source_type: str = "module") -> dict[str, Any]:
    """Parse JavaScript (ES2017 with JSX) and return the Program node as a dict.

    Every node carries ``range`` (character offsets) and ``loc`` (line/column).
    Later syntax such as optional chaining and ``??`` is a parse error.
    """
    if source_type == "module":
        parse = esprima.parseModule
    elif source_type == "script":
        parse = esprima.parseScript
    else:
        msg = f"Unknown source type: {source_type}"
        raise ValueError(msg)

    try:
        return parse(source, dict(PARSE_OPTIONS)).toDict()
    except RecursionError as exc:
        msg = "Expression nesting is too deep to analyze"
        raise SourceParseError(msg) from exc
    except Exception as exc:  # esprima raises its own Error class
        raise SourceParseError(
            getattr(exc, "description", None) or str(exc),
            getattr(exc, "lineNumber", None) or 1,
            getattr(exc, "column", None) or 1,
        ) from exc
