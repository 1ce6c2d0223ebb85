"""Mod-loader manifest document model."""

from typing import Any

from pydantic import BaseModel, Field


class ModEntry(BaseModel):
    """One ``[[mods]]`` entry."""

    mod_id: str
    version: str
    display_name: str
    display_url: str
    authors: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {
            "modId": self.mod_id,
            "version": self.version,
            "displayName": self.display_name,
            "displayURL": self.display_url,
            "authors": self.authors,
            "description": self.description,
        }


class McPublish(BaseModel):
    """Identifiers consumed by the mc-publish release action."""

    modrinth: str | None = None
    curseforge: str | None = None

    def to_dict(self) -> dict[str, str]:
        data = {}
        if self.modrinth:
            data["modrinth"] = self.modrinth
        if self.curseforge:
            data["curseforge"] = self.curseforge
        return data


class ManifestDocument(BaseModel):
    """Structure serialized to ``META-INF/neoforge.mods.toml``."""

    mod_loader: str
    loader_version: str
    license: str
    mods: list[ModEntry] = Field(min_length=1)
    mc_publish: McPublish | None = None
    dependencies: dict[str, list[dict[str, str]]] | None = None
    mod_properties: dict[str, dict[str, Any]] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest as plain data, omitting absent optional blocks."""
        data: dict[str, Any] = {
            "modLoader": self.mod_loader,
            "loaderVersion": self.loader_version,
            "license": self.license,
            "mods": [mod.to_dict() for mod in self.mods],
        }
        if self.mc_publish is not None:
            data["mc-publish"] = self.mc_publish.to_dict()
        if self.dependencies:
            data["dependencies"] = self.dependencies
        if self.mod_properties:
            data["modproperties"] = self.mod_properties
        return data
