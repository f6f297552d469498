"""TanStack Start app discovery and active app selection."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from superpowers_tanstack.config import EXCLUDED_DIR_NAMES, TARGET_PACKAGE
from superpowers_tanstack.stack.manifest_parser import (
    MANIFEST_NAME,
    declares_dependency,
    read_manifest,
)

logger = structlog.get_logger(__name__)


def _on_walk_error(error: OSError) -> None:
    logger.debug(
        "skipping unreadable directory",
        path=getattr(error, "filename", None),
        error=str(error),
    )


def find_apps(
    search_root: Path,
    target: str = TARGET_PACKAGE,
    exclude_dirs: frozenset[str] = EXCLUDED_DIR_NAMES,
) -> list[Path]:
    """Find directories whose package.json depends on target.

    Walks top-down without following symlinks, pruning exclude_dirs before
    descending. Siblings are visited in name order.

    Args:
        search_root: Directory to search below (inclusive).
        target: Package name a manifest must declare.
        exclude_dirs: Directory names never descended into.

    Returns:
        Resolved app directories in traversal order, empty if none match.
    """
    root = search_root.resolve()
    if not os.path.isdir(root):
        logger.debug("search root is not a directory", root=str(root))
        return []

    apps: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_on_walk_error, followlinks=False
    ):
        dirnames[:] = sorted(d for d in dirnames if d not in exclude_dirs)
        if MANIFEST_NAME not in filenames:
            continue
        app_dir = Path(dirpath)
        if declares_dependency(read_manifest(app_dir), target):
            logger.debug("found app", path=str(app_dir))
            apps.append(app_dir)

    return apps


def _contains(parent: Path, child: Path) -> bool:
    return child == parent or parent in child.parents


def select_active_app(candidates: list[Path], cwd: Path) -> Path | None:
    """Pick the app the working directory is inside of.

    Falls back to the first candidate when cwd is outside all of them.
    Returns None only when there are no candidates.
    """
    if not candidates:
        return None
    cwd = cwd.resolve()
    for candidate in candidates:
        if _contains(candidate.resolve(), cwd):
            return candidate
    return candidates[0]
