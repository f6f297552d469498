"""Detection constants and environment overrides."""

from __future__ import annotations

import os

import structlog

logger = structlog.get_logger(__name__)

# Plugin name reported in every payload
PLUGIN_NAME = "superpowers-tanstack"

# Dependency that marks a directory as a TanStack Start app
TARGET_PACKAGE = "@tanstack/start"

# Environment variable names
ENV_DEBUG = "SUPERPOWERS_TANSTACK_DEBUG"
ENV_SUPPORTED_MAJOR = "SUPERPOWERS_TANSTACK_SUPPORTED_MAJOR"

DEFAULT_SUPPORTED_MAJOR = 1

# dependency caches and VCS metadata, pruned before descending
EXCLUDED_DIR_NAMES: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
        ".hg",
        ".svn",
        ".pnpm-store",
        ".yarn",
    }
)


def get_supported_major() -> int:
    """Get the supported TanStack Start major version.

    Reads SUPERPOWERS_TANSTACK_SUPPORTED_MAJOR, falling back to
    DEFAULT_SUPPORTED_MAJOR when unset or not an integer.
    """
    env = os.environ.get(ENV_SUPPORTED_MAJOR, "").strip()
    if not env:
        return DEFAULT_SUPPORTED_MAJOR
    try:
        return int(env)
    except ValueError:
        logger.warning(
            "ignoring invalid supported major",
            env=ENV_SUPPORTED_MAJOR,
            value=env,
        )
        return DEFAULT_SUPPORTED_MAJOR


def debug_enabled() -> bool:
    """Check whether SUPERPOWERS_TANSTACK_DEBUG asks for debug logging."""
    env = os.environ.get(ENV_DEBUG, "").strip().lower()
    return env in ("1", "true", "yes", "on")
