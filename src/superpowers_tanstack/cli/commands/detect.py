"""Detect command - report the active TanStack Start app as JSON."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from superpowers_tanstack.report import build_report


@dataclass
class Detect:
    """Detect a TanStack Start app and print its setup as JSON."""

    root: Path | None = field(
        default=None,
        metadata={"help": "Directory to search for apps (default: cwd)"},
    )
    cwd: Path | None = field(
        default=None,
        metadata={"help": "Working directory used to pick the active app"},
    )
    indent: int = field(
        default=2,
        metadata={"help": "JSON indentation"},
    )

    def run(self) -> int:
        """Execute the detect command."""
        report = build_report(search_root=self.root, cwd=self.cwd)
        # nothing detected is a successful run with no output
        if report is None:
            return 0
        print(report.to_json(indent=self.indent))
        return 0
