"""Pydantic models for modhelper project configuration."""

import re
from datetime import date, time
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

MOD_ID_PATTERN = re.compile(r"^[a-z][a-z0-9_]{1,63}$")

TOML_SCALARS = (str, int, float, bool, date, time)


def _check_toml_value(value: Any, path: str) -> None:
    """Raise ValueError if ``value`` cannot be written to a TOML document."""
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValueError(f"{path}: key {key!r} is not a string")
            _check_toml_value(item, f"{path}.{key}")
    elif isinstance(value, list):
        for index, item in enumerate(value):
            _check_toml_value(item, f"{path}[{index}]")
    elif value is None:
        raise ValueError(f"{path}: null values cannot be written to TOML")
    elif not isinstance(value, TOML_SCALARS):
        raise ValueError(
            f"{path}: {type(value).__name__} values cannot be written to TOML"
        )


class ProjectType(str, Enum):
    """Kind of artifact the project produces."""

    MOD = "mod"
    LIBRARY = "library"

    @property
    def mod_type(self) -> str:
        """Value of the FMLModType archive attribute."""
        return "MOD" if self is ProjectType.MOD else "GAMELIBRARY"


class LicenseConfig(BaseModel):
    """License shipped with the artifact."""

    name: str
    url: str | None = None
    file: str | None = None  # Path relative to the project root


class LoaderConfig(BaseModel):
    """Mod loader language provider."""

    name: str = "javafml"
    version: str = "[1,)"  # Version range


class MavenConfig(BaseModel):
    """Remote Maven repository and its credentials."""

    url: str | None = None
    user: str | None = None
    password: str | None = None

    def missing_fields(self) -> list[str]:
        """Names of the settings needed for a remote publish that are unset."""
        return [
            name
            for name in ("url", "user", "password")
            if not getattr(self, name)
        ]

    @property
    def valid(self) -> bool:
        return not self.missing_fields()


class GitHubConfig(BaseModel):
    """Source hosting coordinates used for POM metadata."""

    owner: str
    repo: str
    issues_url: str | None = None
    actions_url: str | None = None

    @property
    def url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}"

    @property
    def connection(self) -> str:
        return f"scm:git:git://github.com/{self.owner}/{self.repo}.git"

    @property
    def developer_connection(self) -> str:
        return f"scm:git:git@github.com:{self.owner}/{self.repo}.git"


class JavaConfig(BaseModel):
    """Java toolchain selection."""

    version: int = Field(default=21, ge=8)
    vendor: str = "any"


class McPublishConfig(BaseModel):
    """Project identifiers on external mod hosting services."""

    modrinth: str | None = None
    curseforge: str | None = None

    @property
    def present(self) -> bool:
        return bool(self.modrinth or self.curseforge)


class DependencyOrdering(str, Enum):
    NONE = "NONE"
    BEFORE = "BEFORE"
    AFTER = "AFTER"


class DependencySide(str, Enum):
    BOTH = "BOTH"
    CLIENT = "CLIENT"
    SERVER = "SERVER"


class DependencyDescriptor(BaseModel):
    """A dependency on another mod, as declared in the mod manifest."""

    mod_id: str
    version_range: str
    required: bool = True
    ordering: DependencyOrdering = DependencyOrdering.NONE
    side: DependencySide = DependencySide.BOTH

    def to_manifest(self) -> dict[str, str]:
        return {
            "modId": self.mod_id,
            "type": "required" if self.required else "optional",
            "versionRange": self.version_range,
            "ordering": self.ordering.value,
            "side": self.side.value,
        }


class ProjectConfig(BaseModel):
    """Everything a mod build needs to know about the project."""

    id: str
    group: str
    version: str
    name: str | None = None
    vendor: str | None = None
    authors: str | None = None
    description: str | None = None
    url: str | None = None
    type: ProjectType = ProjectType.MOD

    minecraft_version: str
    neo_version: str

    license: LicenseConfig
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    java: JavaConfig = Field(default_factory=JavaConfig)

    maven: MavenConfig | None = None
    github: GitHubConfig | None = None
    mc_publish: McPublishConfig | None = None
    dependencies: list[DependencyDescriptor] | None = None
    properties: dict[str, Any] | None = None

    @field_validator("id")
    @classmethod
    def _check_mod_id(cls, value: str) -> str:
        if not MOD_ID_PATTERN.match(value):
            raise ValueError(
                f"invalid mod id {value!r}: must match {MOD_ID_PATTERN.pattern}"
            )
        return value

    @field_validator("group", "version", "minecraft_version", "neo_version")
    @classmethod
    def _check_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("properties")
    @classmethod
    def _check_properties(cls, value: dict[str, Any] | None) -> dict[str, Any] | None:
        if value is not None:
            _check_toml_value(value, "properties")
        return value

    @property
    def full_version(self) -> str:
        """Version string used for publishing, prefixed by the game version."""
        return f"{self.minecraft_version}-{self.version}"

    @property
    def artifact_locator(self) -> str:
        return f"{self.group}:{self.id}:{self.full_version}"
