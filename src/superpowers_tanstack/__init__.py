"""Session-start detection of TanStack Start projects."""

from superpowers_tanstack.models import Report
from superpowers_tanstack.report import build_report
from superpowers_tanstack.stack.locator import find_apps, select_active_app
from superpowers_tanstack.stack.lockfile_parser import (
    VersionRecord,
    resolve_version,
)
from superpowers_tanstack.stack.tooling import ToolingProfile, detect_tooling

__version__ = "0.1.0"

__all__ = [
    "Report",
    "ToolingProfile",
    "VersionRecord",
    "build_report",
    "detect_tooling",
    "find_apps",
    "resolve_version",
    "select_active_app",
]
