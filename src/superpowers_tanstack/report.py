"""Report assembly: locate, select, resolve, detect, serialize."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import structlog

from superpowers_tanstack.config import TARGET_PACKAGE, get_supported_major
from superpowers_tanstack.models import (
    Commands,
    FrameworkVersion,
    Integrations,
    PackageManagerReport,
    Report,
    TypeScriptReport,
    ViteReport,
)
from superpowers_tanstack.stack.locator import find_apps, select_active_app
from superpowers_tanstack.stack.lockfile_parser import (
    is_latest,
    resolve_version,
)
from superpowers_tanstack.stack.tooling import PackageManager, detect_tooling

logger = structlog.get_logger(__name__)

SCRIPTS = ("dev", "build", "test", "lint")

# managers whose idioms differ from `<command> run <script>`
COMMAND_OVERRIDES: dict[str, dict[str, str]] = {
    "bun": {
        "dev": "bun dev",
        "build": "bun run build",
        "test": "bun test",
        "lint": "bun lint",
    },
}

# (integration that should be present, advice when it is not)
GUIDANCE_RULES: list[tuple[str, str]] = [
    (
        "tanstack_query",
        "Consider adding @tanstack/react-query for advanced data fetching "
        "and caching",
    ),
]


def derive_commands(manager: PackageManager) -> dict[str, str]:
    """Build the dev/build/test/lint invocations for a package manager."""
    commands = {
        script: f"{manager.command} run {script}" for script in SCRIPTS
    }
    commands.update(COMMAND_OVERRIDES.get(manager.name, {}))
    return commands


def compute_guidance(integrations: Mapping[str, bool]) -> str | None:
    for integration, advice in GUIDANCE_RULES:
        if not integrations.get(integration, False):
            return advice
    return None


def build_report(
    search_root: Path | None = None,
    cwd: Path | None = None,
    supported_major: int | None = None,
) -> Report | None:
    """Detect the active TanStack Start app and describe its setup.

    Args:
        search_root: Directory searched for apps. Defaults to cwd.
        cwd: Working directory used to choose the active app. Defaults to
            the process working directory.
        supported_major: Major version counted as latest. Defaults to the
            configured supported major.

    Returns:
        The report, or None when no app was found.
    """
    cwd = (cwd or Path.cwd()).resolve()
    search_root = (search_root or cwd).resolve()
    if supported_major is None:
        supported_major = get_supported_major()

    apps = find_apps(search_root, TARGET_PACKAGE)
    active = select_active_app(apps, cwd)
    if active is None:
        logger.debug("no tanstack start app found", root=str(search_root))
        return None

    record = resolve_version(active, TARGET_PACKAGE)
    tooling = detect_tooling(active)
    manager = tooling.package_manager

    logger.info(
        "detected tanstack start app",
        app=str(active),
        candidates=len(apps),
        version=record.version,
        version_source=record.source,
        version_resolved=record.resolved,
    )

    return Report(
        detected_apps=len(apps),
        active_app=str(active),
        tanstack_start=FrameworkVersion(
            version=record.version,
            is_latest=is_latest(record, supported_major),
        ),
        integrations=Integrations(**tooling.integrations),
        vite=ViteReport(
            configured=tooling.vite.configured,
            version=tooling.vite.version,
        ),
        typescript=TypeScriptReport(
            enabled=tooling.typescript.enabled,
            strict=tooling.typescript.strict,
        ),
        package_manager=PackageManagerReport(
            name=manager.name,
            command=manager.command,
        ),
        test_framework=tooling.test_framework,
        styling=tooling.styling,
        commands=Commands(**derive_commands(manager)),
        guidance=compute_guidance(tooling.integrations),
    )
