from __future__ import annotations

import re
from pathlib import Path

from superpowers_tanstack.extract import Extraction, contains, find, read_text

MANIFEST_NAME = "package.json"

UNKNOWN_VERSION = "unknown"

# MAJOR.MINOR capture shared by every version pattern
MAJOR_MINOR = r"(\d+\.\d+)"

# range operators allowed in front of a declared version: ^1.2, ~1.2, >=1.2
_RANGE_PREFIX = r"[\^~>=v\s]*"


def read_manifest(root: Path) -> str | None:
    return read_text(root / MANIFEST_NAME)


def _quoted(package: str) -> str:
    return '"' + re.escape(package) + '"'


def declares_dependency(text: str | None, package: str) -> bool:
    """Check for a `"package": "..."` entry in manifest text."""
    return contains(text, _quoted(package) + r'\s*:\s*"')


def declared_version(text: str | None, package: str) -> Extraction | None:
    """Find the MAJOR.MINOR a manifest declares for package.

    Non-numeric specifiers like "latest" or "workspace:*" yield None.
    """
    pattern = _quoted(package) + r'\s*:\s*"' + _RANGE_PREFIX + MAJOR_MINOR
    return find(text, pattern)


def names_package(text: str | None, package: str) -> bool:
    """Check whether the quoted package identifier appears at all."""
    return contains(text, _quoted(package))
