"""Orchestration of one analysis run over JavaScript sources."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any, Protocol

from i18n_keycheck.config_error import ConfigError
from i18n_keycheck.diagnostic import Diagnostic
from i18n_keycheck.estree import Node, walk_with_ancestors
from i18n_keycheck.load_config import STRING_LITERAL_RULE, UNDEFINED_KEYS_RULE, rule_options
from i18n_keycheck.no_undefined_translation_keys import NoUndefinedTranslationKeys
from i18n_keycheck.parse_source import SourceParseError, parse_source
from i18n_keycheck.rule_context import RuleContext
from i18n_keycheck.scope_tree import ScopeTree
from i18n_keycheck.translation_key_string_literal import TranslationKeyStringLiteral

logger = logging.getLogger(__name__)


class Rule(Protocol):
    """What the linter needs from a rule."""

    rule_id: str

    def check_call(self, call: Node, ancestors: list[Node], context: RuleContext) -> None:
        """Inspect one call expression."""


class Linter:
    """Runs the enabled rules over files or source strings."""

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize the linter with a loaded configuration."""
        self.config = config
        files = config.get("files", {})
        self.extensions = {ext.lower() for ext in files.get("extensions", [])}
        self.exclude_dirs = set(files.get("exclude_dirs", []))
        self.source_type = files.get("source_type", "module")
        self.files_checked = 0

    def create_rules(self) -> list[Rule]:
        """Instantiate the enabled rules, loading translation files fresh."""
        rules: list[Rule] = []
        if rule_options(self.config, UNDEFINED_KEYS_RULE).get("enabled", True):
            rules.append(NoUndefinedTranslationKeys.from_config(self.config))
        if rule_options(self.config, STRING_LITERAL_RULE).get("enabled", True):
            rules.append(TranslationKeyStringLiteral.from_config(self.config))
        return rules

    def iter_source_files(self, paths: Iterable[str | Path]) -> Iterator[Path]:
        """Yield the files to lint: explicit files, and matching files under dirs."""
        for raw in paths:
            path = Path(raw)
            if path.is_file():
                yield path
            elif path.is_dir():
                for candidate in sorted(path.rglob("*")):
                    if not candidate.is_file():
                        continue
                    if candidate.suffix.lower() not in self.extensions:
                        continue
                    parents = candidate.relative_to(path).parts[:-1]
                    if any(part in self.exclude_dirs for part in parents):
                        continue
                    yield candidate
            else:
                msg = f"No such file or directory: {path}"
                raise ConfigError(msg)

    def lint_paths(self, paths: Iterable[str | Path]) -> list[Diagnostic]:
        """Lint every source file reachable from the given paths."""
        rules = self.create_rules()
        files = list(self.iter_source_files(paths))
        logger.debug("Linting %d files", len(files))

        diagnostics: list[Diagnostic] = []
        for path in files:
            diagnostics.extend(self._lint_file(path, rules))

        self.files_checked = len(files)
        logger.info("Checked %d files, %d problems", len(files), len(diagnostics))
        return diagnostics

    def lint_source(self, source: str, file_path: str = "<input>") -> list[Diagnostic]:
        """Lint a single source string as its own run."""
        self.files_checked = 1
        return self._lint_text(source, file_path, self.create_rules())

    def _lint_file(self, path: Path, rules: list[Rule]) -> list[Diagnostic]:
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read %s: %s", path, exc)
            return [Diagnostic(file=str(path), line=1, column=1, message=f"Read error: {exc}")]
        return self._lint_text(source, str(path), rules)

    def _lint_text(self, source: str, file: str, rules: list[Rule]) -> list[Diagnostic]:
        try:
            program = parse_source(source, source_type=self.source_type)
        except SourceParseError as exc:
            logger.warning("Cannot parse %s: %s", file, exc)
            return [
                Diagnostic(
                    file=file,
                    line=exc.line,
                    column=exc.column,
                    message=f"Parsing error: {exc}",
                )
            ]

        context = RuleContext(file=file, source=source, scopes=ScopeTree(program))
        for node, ancestors in walk_with_ancestors(program):
            if node.get("type") != "CallExpression":
                continue
            for rule in rules:
                rule.check_call(node, ancestors, context)
        return sorted(context.diagnostics)
