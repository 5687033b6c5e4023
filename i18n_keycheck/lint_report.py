"""Logic for writing a JSON report of a lint run."""

import hashlib
import json
import time
from collections import Counter
from pathlib import Path
from typing import Any

from i18n_keycheck.diagnostic import Diagnostic

FATAL_RULE = "fatal"


def config_hash(config: dict[str, Any]) -> str:
    """Compute a stable hash of the configuration (canonical JSON, sorted keys)."""
    config_json = json.dumps(config, sort_keys=True, ensure_ascii=True, default=str)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()


class LintReport:
    """Collects the diagnostics of a run and summarizes them."""

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize the report for a run using the given configuration."""
        self.config_hash = config_hash(config)
        self.diagnostics: list[Diagnostic] = []
        self.files_checked = 0
        self.start_time = time.time()

    def add_diagnostics(self, diagnostics: list[Diagnostic]) -> None:
        """Add the diagnostics of one or more files to the report."""
        self.diagnostics.extend(diagnostics)

    def to_dict(self) -> dict[str, Any]:
        """Build the report structure."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "files_checked": self.files_checked,
                "total_diagnostics": len(self.diagnostics),
            },
            "results": [
                {
                    "file": d.file,
                    "line": d.line,
                    "column": d.column,
                    "rule_id": d.rule_id,
                    "message": d.message,
                }
                for d in self.diagnostics
            ],
            "stats": self._compute_stats(),
        }

    def generate_report(self, path: str) -> None:
        """Write the report to a JSON file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        rule_counts = Counter(d.rule_id or FATAL_RULE for d in self.diagnostics)
        file_counts = Counter(d.file for d in self.diagnostics)
        return {
            "rule_counts": dict(sorted(rule_counts.items())),
            "file_counts": dict(sorted(file_counts.items())),
            "files_with_problems": len(file_counts),
        }
