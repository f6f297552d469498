"""Shared fixtures for building TanStack Start project trees."""

import errno
import json
import os
from collections.abc import Callable
from pathlib import Path

import pytest

from superpowers_tanstack.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _quiet_logging():
    configure_logging(debug=False)


def _write_manifest(
    app_dir: Path,
    dependencies: dict[str, str] | None = None,
    dev_dependencies: dict[str, str] | None = None,
) -> Path:
    app_dir.mkdir(parents=True, exist_ok=True)
    data: dict = {"name": app_dir.name, "private": True}
    if dependencies is not None:
        data["dependencies"] = dependencies
    if dev_dependencies is not None:
        data["devDependencies"] = dev_dependencies
    path = app_dir / "package.json"
    path.write_text(json.dumps(data, indent=2))
    return path


@pytest.fixture
def write_manifest() -> Callable[..., Path]:
    """Write a package.json with the given dependency maps."""
    return _write_manifest


@pytest.fixture
def make_app(tmp_path: Path) -> Callable[..., Path]:
    """Factory for app directories with a package.json under tmp_path."""

    def _make(
        relpath: str = ".",
        start_version: str | None = "^1.2.0",
        dependencies: dict[str, str] | None = None,
        dev_dependencies: dict[str, str] | None = None,
        files: dict[str, str] | None = None,
    ) -> Path:
        app_dir = (tmp_path / relpath).resolve()
        deps = dict(dependencies or {})
        if start_version is not None:
            deps["@tanstack/start"] = start_version
        _write_manifest(app_dir, deps, dev_dependencies)
        for name, content in (files or {}).items():
            target = app_dir / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        return app_dir

    return _make


@pytest.fixture
def deny_access(monkeypatch: pytest.MonkeyPatch) -> Callable[[Path], None]:
    """Make stat and reads of registered paths fail with EACCES.

    Simulates files listed in a directory that lacks the execute bit,
    which root-run test suites cannot reproduce with chmod.
    """
    denied: set[str] = set()
    real_stat = os.stat
    real_read_text = Path.read_text

    def _check(path) -> None:
        if isinstance(path, (str, os.PathLike)) and os.fspath(path) in denied:
            raise PermissionError(
                errno.EACCES, "Permission denied", os.fspath(path)
            )

    def fake_stat(path, *args, **kwargs):
        _check(path)
        return real_stat(path, *args, **kwargs)

    def fake_read_text(self, *args, **kwargs):
        _check(self)
        return real_read_text(self, *args, **kwargs)

    monkeypatch.setattr(os, "stat", fake_stat)
    monkeypatch.setattr(Path, "read_text", fake_read_text)

    def _deny(path: Path) -> None:
        denied.add(str(path))

    return _deny
