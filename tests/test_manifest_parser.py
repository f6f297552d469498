"""Tests for package.json pattern helpers."""

from textwrap import dedent

import pytest

from superpowers_tanstack.stack.manifest_parser import (
    declared_version,
    declares_dependency,
    names_package,
)

MANIFEST = dedent("""
    {
      "name": "web",
      "dependencies": {
        "@tanstack/start": "^1.2.3",
        "@tanstack/react-query": "5.28.0",
        "react": "~18.2.0"
      },
      "devDependencies": {
        "vite": ">=5.1.0",
        "vitest": "latest"
      }
    }
""")


class TestDeclaresDependency:
    def test_declared(self):
        assert declares_dependency(MANIFEST, "@tanstack/start")

    def test_prefix_of_other_package_is_not_a_match(self):
        assert not declares_dependency(MANIFEST, "@tanstack/react")

    def test_mention_without_version_string(self):
        text = '{"keywords": ["@tanstack/start"]}'
        assert not declares_dependency(text, "@tanstack/start")

    def test_missing_manifest(self):
        assert not declares_dependency(None, "@tanstack/start")


class TestDeclaredVersion:
    @pytest.mark.parametrize(
        ("package", "expected"),
        [
            ("@tanstack/start", "1.2"),
            ("@tanstack/react-query", "5.28"),
            ("react", "18.2"),
            ("vite", "5.1"),
        ],
    )
    def test_range_prefixes(self, package: str, expected: str):
        hit = declared_version(MANIFEST, package)
        assert hit is not None
        assert hit.value == expected

    def test_non_numeric_specifier(self):
        assert declared_version(MANIFEST, "vitest") is None

    def test_workspace_protocol(self):
        text = '{"dependencies": {"@tanstack/start": "workspace:*"}}'
        assert declared_version(text, "@tanstack/start") is None

    def test_raw_line_is_kept(self):
        hit = declared_version(MANIFEST, "@tanstack/start")
        assert hit is not None
        assert hit.line == '"@tanstack/start": "^1.2.3",'


class TestNamesPackage:
    def test_named(self):
        assert names_package(MANIFEST, "vitest")

    def test_not_named(self):
        assert not names_package(MANIFEST, "@playwright/test")

    def test_scoped_prefix_does_not_match(self):
        assert not names_package(MANIFEST, "@tanstack/react")
