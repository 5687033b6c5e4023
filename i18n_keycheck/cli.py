"""Command line entry point for checking translation keys in JavaScript sources.

Example::

    i18n-keycheck src/ --mapping locales/namespaces.json --allow-guarded
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import Any

from i18n_keycheck.config_error import ConfigError
from i18n_keycheck.guard_matcher import COMPARISON_MODES
from i18n_keycheck.lint_report import LintReport
from i18n_keycheck.linter import Linter
from i18n_keycheck.load_config import STRING_LITERAL_RULE, UNDEFINED_KEYS_RULE, load_config
from i18n_keycheck.no_undefined_translation_keys import SCOPE_RESOLUTION_MODES


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    ap = argparse.ArgumentParser(
        prog="i18n-keycheck",
        description=(
            "Check that translation calls use literal keys that exist in the "
            "translation files."
        ),
    )
    ap.add_argument("paths", nargs="+", help="Files or directories to check")
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "--mapping",
        help="Namespace mapping file (overrides namespaceTranslationMappingFile)",
    )
    ap.add_argument(
        "--default-namespace",
        help="Namespace for keys without an explicit or inferred one",
    )
    ap.add_argument(
        "--allow-guarded",
        action="store_true",
        help="Accept dynamic keys guarded by t.has(key) ? t(key) : ...",
    )
    ap.add_argument(
        "--guard-comparison",
        choices=COMPARISON_MODES,
        help="How guard and call keys are compared (default: text)",
    )
    ap.add_argument(
        "--scope-resolution",
        choices=SCOPE_RESOLUTION_MODES,
        help="How the translation function's declaration is found (default: lexical)",
    )
    ap.add_argument("--json", dest="json_path", help="Write a JSON report to this path")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def apply_overrides(config: dict[str, Any], args: argparse.Namespace) -> dict[str, Any]:
    """Fold command line flags into the loaded configuration."""
    undefined_keys = config["rules"].setdefault(UNDEFINED_KEYS_RULE, {})
    string_literal = config["rules"].setdefault(STRING_LITERAL_RULE, {})

    if args.mapping:
        undefined_keys["namespaceTranslationMappingFile"] = args.mapping
    if args.default_namespace:
        undefined_keys["defaultNamespace"] = args.default_namespace
    if args.scope_resolution:
        undefined_keys["scopeResolution"] = args.scope_resolution
    if args.allow_guarded:
        string_literal["allowTHasProtectedConditionals"] = True
    if args.guard_comparison:
        string_literal["guardComparison"] = args.guard_comparison
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Run the checker and return the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = apply_overrides(load_config(args.config), args)
        report = LintReport(config)
        linter = Linter(config)
        diagnostics = linter.lint_paths(args.paths)
    except ConfigError as exc:
        msg = f"error: {exc}"
        raise SystemExit(msg) from exc

    for diagnostic in diagnostics:
        print(diagnostic.format())

    files_with_problems = len({d.file for d in diagnostics})
    print(
        f"{len(diagnostics)} problem(s) in {files_with_problems} of "
        f"{linter.files_checked} file(s)"
    )

    if args.json_path:
        report.files_checked = linter.files_checked
        report.add_diagnostics(diagnostics)
        report.generate_report(args.json_path)
        print(f"Report written to {args.json_path}")

    return 1 if diagnostics else 0


if __name__ == "__main__":
    raise SystemExit(main())
