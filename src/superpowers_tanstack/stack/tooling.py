"""Tooling detection for a single TanStack Start app.

Each detector is an independent function of the app root and falls back
to a fixed default when its signal is missing, so a partial checkout still
produces a complete profile.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import structlog

from superpowers_tanstack.extract import contains, read_text
from superpowers_tanstack.stack.manifest_parser import (
    UNKNOWN_VERSION,
    declared_version,
    names_package,
    read_manifest,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PackageManager:
    name: str
    command: str


@dataclass(frozen=True)
class TypeScriptInfo:
    enabled: bool = False
    strict: bool = False


@dataclass(frozen=True)
class ViteInfo:
    configured: bool = False
    version: str = UNKNOWN_VERSION


@dataclass(frozen=True)
class ToolingProfile:
    """Everything detected about an app besides its framework version."""

    package_manager: PackageManager
    typescript: TypeScriptInfo
    vite: ViteInfo
    integrations: Mapping[str, bool] = field(
        default_factory=lambda: MappingProxyType({})
    )
    test_framework: str = "none"
    styling: str = "css"


DEFAULT_PACKAGE_MANAGER = PackageManager(name="npm", command="npm")

# most specific lock file first
LOCKFILE_MANAGERS: list[tuple[tuple[str, ...], PackageManager]] = [
    (("bun.lockb", "bun.lock"), PackageManager(name="bun", command="bun")),
    (("pnpm-lock.yaml",), PackageManager(name="pnpm", command="pnpm")),
    (("yarn.lock",), PackageManager(name="yarn", command="yarn")),
    (("package-lock.json",), PackageManager(name="npm", command="npm")),
]

TSCONFIG_NAME = "tsconfig.json"
TS_STRICT_PATTERN = r'"strict"\s*:\s*true'

VITE_CONFIG_NAMES = (
    "vite.config.ts",
    "vite.config.js",
    "vite.config.mjs",
    "vite.config.mts",
    "vite.config.cjs",
    "vite.config.cts",
)

# report key -> npm package
INTEGRATION_PACKAGES: dict[str, str] = {
    "tanstack_query": "@tanstack/react-query",
    "tanstack_form": "@tanstack/react-form",
    "tanstack_table": "@tanstack/react-table",
}

# label -> npm package, in label order
TEST_FRAMEWORK_PACKAGES: list[tuple[str, str]] = [
    ("vitest", "vitest"),
    ("playwright", "@playwright/test"),
]

TAILWIND_CONFIG_NAMES = (
    "tailwind.config.js",
    "tailwind.config.ts",
    "tailwind.config.mjs",
    "tailwind.config.cjs",
)
STYLING_PACKAGES: list[tuple[str, str]] = [
    ("styled-components", "styled-components"),
]
DEFAULT_STYLING = "css"


def _any_exists(root: Path, names: tuple[str, ...]) -> bool:
    return any(os.path.isfile(root / name) for name in names)


def detect_package_manager(root: Path) -> PackageManager:
    for lockfiles, manager in LOCKFILE_MANAGERS:
        if _any_exists(root, lockfiles):
            return manager
    return DEFAULT_PACKAGE_MANAGER


def detect_typescript(root: Path) -> TypeScriptInfo:
    """Check for tsconfig.json and whether it turns on strict mode."""
    tsconfig = root / TSCONFIG_NAME
    if not os.path.isfile(tsconfig):
        return TypeScriptInfo()
    return TypeScriptInfo(
        enabled=True,
        strict=contains(read_text(tsconfig), TS_STRICT_PATTERN),
    )


def detect_vite(root: Path) -> ViteInfo:
    hit = declared_version(read_manifest(root), "vite")
    return ViteInfo(
        configured=_any_exists(root, VITE_CONFIG_NAMES),
        version=hit.value if hit else UNKNOWN_VERSION,
    )


def detect_integrations(root: Path) -> dict[str, bool]:
    manifest = read_manifest(root)
    return {
        name: names_package(manifest, package)
        for name, package in INTEGRATION_PACKAGES.items()
    }


def detect_test_framework(root: Path) -> str:
    """Label the test tools in the manifest, joined with '+'.

    Returns "none" when no known test tool is declared.
    """
    manifest = read_manifest(root)
    found = [
        label
        for label, package in TEST_FRAMEWORK_PACKAGES
        if names_package(manifest, package)
    ]
    return "+".join(found) if found else "none"


def detect_styling(root: Path) -> str:
    if _any_exists(root, TAILWIND_CONFIG_NAMES):
        return "tailwind"
    manifest = read_manifest(root)
    for label, package in STYLING_PACKAGES:
        if names_package(manifest, package):
            return label
    return DEFAULT_STYLING


def detect_tooling(root: Path) -> ToolingProfile:
    profile = ToolingProfile(
        package_manager=detect_package_manager(root),
        typescript=detect_typescript(root),
        vite=detect_vite(root),
        integrations=MappingProxyType(detect_integrations(root)),
        test_framework=detect_test_framework(root),
        styling=detect_styling(root),
    )
    logger.debug(
        "detected tooling",
        root=str(root),
        package_manager=profile.package_manager.name,
        test_framework=profile.test_framework,
        styling=profile.styling,
    )
    return profile
