from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

import structlog

from superpowers_tanstack.config import TARGET_PACKAGE
from superpowers_tanstack.extract import Extraction, find, find_near, read_text
from superpowers_tanstack.stack.manifest_parser import (
    MAJOR_MINOR,
    MANIFEST_NAME,
    UNKNOWN_VERSION,
    declared_version,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class VersionRecord:
    source: str | None
    raw: str | None
    version: str

    @property
    def major(self) -> int | None:
        head = self.version.split(".", 1)[0]
        return int(head) if head.isdigit() else None

    @property
    def resolved(self) -> bool:
        return self.source is not None


UNRESOLVED = VersionRecord(source=None, raw=None, version=UNKNOWN_VERSION)


@dataclass(frozen=True)
class VersionSource:
    """One place a version can be read from.

    With an anchor, pattern is searched on anchor lines and the `after`
    lines following them; without one, on every line of the file. block
    keeps the search inside the anchored entry.
    """

    kind: str
    pattern: re.Pattern[str]
    anchor: re.Pattern[str] | None = None
    after: int = 0
    block: bool = False

    def extract(self, root: Path) -> VersionRecord | None:
        text = read_text(root / self.kind)
        if text is None:
            return None
        hit: Extraction | None
        if self.anchor is not None:
            hit = find_near(
                text, self.anchor, self.pattern, self.after, self.block
            )
        else:
            hit = find(text, self.pattern)
        if not hit or not hit.value:
            return None
        return VersionRecord(source=self.kind, raw=hit.line, version=hit.value)


@dataclass(frozen=True)
class ManifestVersionSource:
    """Declared (possibly range-prefixed) version in package.json."""

    package: str
    kind: str = MANIFEST_NAME

    def extract(self, root: Path) -> VersionRecord | None:
        hit = declared_version(read_text(root / self.kind), self.package)
        if not hit:
            return None
        return VersionRecord(source=self.kind, raw=hit.line, version=hit.value)


def build_version_sources(
    package: str = TARGET_PACKAGE,
) -> list[VersionSource | ManifestVersionSource]:
    """Version sources for package, most trusted first."""
    pkg = re.escape(package)
    return [
        VersionSource(
            kind="package-lock.json",
            anchor=re.compile(rf'"(?:node_modules/)?{pkg}"\s*:\s*\{{'),
            pattern=re.compile(r'"version"\s*:\s*"' + MAJOR_MINOR),
            after=3,
            block=True,
        ),
        VersionSource(
            kind="yarn.lock",
            anchor=re.compile(rf'(?:^|,\s*)"?{pkg}@'),
            pattern=re.compile(r'^\s+version:?\s+"?' + MAJOR_MINOR),
            after=2,
            block=True,
        ),
        VersionSource(
            kind="pnpm-lock.yaml",
            anchor=re.compile(rf"""^\s*['"]?{pkg}['"]?:\s*$"""),
            pattern=re.compile(r"""version:\s*['"]?""" + MAJOR_MINOR),
            after=5,
            block=True,
        ),
        # lockfile v5 keeps the version inline: '@scope/name': 1.5.0
        VersionSource(
            kind="pnpm-lock.yaml",
            pattern=re.compile(
                rf"""^\s*['"]?{pkg}['"]?:\s*['"]?""" + MAJOR_MINOR
            ),
        ),
        VersionSource(
            kind="bun.lock",
            pattern=re.compile(rf'"{pkg}"\s*:\s*\[\s*"{pkg}@' + MAJOR_MINOR),
        ),
        ManifestVersionSource(package=package),
    ]


def resolve_version(
    root: Path,
    package: str = TARGET_PACKAGE,
    sources: list[VersionSource | ManifestVersionSource] | None = None,
) -> VersionRecord:
    if sources is None:
        sources = build_version_sources(package)

    for source in sources:
        record = source.extract(root)
        if record is not None:
            logger.debug(
                "resolved version",
                package=package,
                source=record.source,
                version=record.version,
            )
            return record

    logger.debug("no version found", package=package, root=str(root))
    return UNRESOLVED


def is_latest(record: VersionRecord, supported_major: int) -> bool:
    return record.major == supported_major
