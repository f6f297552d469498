"""Pydantic models for the session-start JSON report."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from superpowers_tanstack.config import PLUGIN_NAME


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class FrameworkVersion(_Frozen):
    version: str = Field(description="MAJOR.MINOR or 'unknown'")
    is_latest: bool = Field(description="Major matches the supported major")


class ViteReport(_Frozen):
    configured: bool
    version: str


class TypeScriptReport(_Frozen):
    enabled: bool
    strict: bool


class PackageManagerReport(_Frozen):
    name: str
    command: str = Field(description="Base invocation, e.g. 'pnpm'")


class Commands(_Frozen):
    dev: str
    build: str
    test: str
    lint: str


class Integrations(_Frozen):
    """Integration name to presence flag, in detection order."""

    model_config = ConfigDict(frozen=True, extra="allow")

    def as_dict(self) -> dict[str, bool]:
        return dict(self.__pydantic_extra__ or {})


class Report(_Frozen):
    """Detection report for the active TanStack Start app.

    Field order is the serialized key order. Absent values serialize as
    null rather than being dropped.
    """

    plugin: str = PLUGIN_NAME
    detected_apps: int = Field(description="Number of candidate apps found")
    active_app: str | None = Field(description="Absolute path of active app")
    tanstack_start: FrameworkVersion
    integrations: Integrations
    vite: ViteReport
    typescript: TypeScriptReport
    package_manager: PackageManagerReport
    test_framework: str
    styling: str
    commands: Commands
    guidance: str | None = None

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent)
