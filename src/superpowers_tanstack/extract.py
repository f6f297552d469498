"""Line-oriented pattern extraction from semi-structured text.

Lock files and manifests are matched with regular expressions rather than
parsed, so a malformed or half-written file still yields whatever signal
it contains. Nothing here raises on bad input: a missing file reads as
None and None text matches nothing.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import NamedTuple

import structlog

logger = structlog.get_logger(__name__)

PatternLike = str | re.Pattern[str]


class Extraction(NamedTuple):
    """A pattern hit: the matching line and the captured value."""

    line: str
    value: str


def read_text(path: Path) -> str | None:
    """Read a text file, returning None if it is missing or unreadable."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug("failed to read file", path=str(path), error=str(e))
        return None


def _compile(pattern: PatternLike) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _match_value(match: re.Match[str]) -> str:
    if match.re.groups:
        return match.group(1) or ""
    return match.group(0)


def find(text: str | None, pattern: PatternLike) -> Extraction | None:
    """Return the first line matching pattern with its capture."""
    if not text:
        return None
    regex = _compile(pattern)
    for line in text.splitlines():
        match = regex.search(line)
        if match:
            return Extraction(line.strip(), _match_value(match))
    return None


def find_near(
    text: str | None,
    anchor: PatternLike,
    pattern: PatternLike,
    after: int = 0,
    block: bool = False,
) -> Extraction | None:
    """Search for pattern on anchor lines and the `after` lines below them.

    Mirrors `grep -A<after> anchor | grep pattern | head -1`: windows are
    visited in file order and the first matching line wins. With block set,
    a window also ends at the first non-blank line indented no deeper than
    its anchor, so it never reads past the anchored entry.
    """
    if not text:
        return None
    anchor_re = _compile(anchor)
    regex = _compile(pattern)
    lines = text.splitlines()
    for i, line in enumerate(lines):
        if not anchor_re.search(line):
            continue
        depth = _indent(line)
        for offset, candidate in enumerate(lines[i : i + after + 1]):
            if (
                block
                and offset
                and candidate.strip()
                and _indent(candidate) <= depth
            ):
                break
            match = regex.search(candidate)
            if match:
                return Extraction(candidate.strip(), _match_value(match))
    return None


def extract(text: str | None, pattern: PatternLike) -> str | None:
    hit = find(text, pattern)
    return hit.value if hit else None


def extract_near(
    text: str | None,
    anchor: PatternLike,
    pattern: PatternLike,
    after: int = 0,
    block: bool = False,
) -> str | None:
    hit = find_near(text, anchor, pattern, after, block)
    return hit.value if hit else None


def contains(text: str | None, pattern: PatternLike) -> bool:
    """Check whether any part of text matches pattern."""
    if not text:
        return False
    return _compile(pattern).search(text) is not None
