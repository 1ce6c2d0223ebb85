"""Mod manifest generator — renders project metadata into neoforge.mods.toml."""

import logging
from pathlib import Path

import tomli_w

from modhelper.config.loader import ConfigError, MissingConfigurationError
from modhelper.config.models import ProjectConfig
from modhelper.manifest.models import ManifestDocument, McPublish, ModEntry

logger = logging.getLogger(__name__)

MANIFEST_DIR = "META-INF"
MANIFEST_FILE_NAME = "neoforge.mods.toml"


def _require(value: str | None, field: str) -> str:
    if value is None or not str(value).strip():
        raise MissingConfigurationError(field)
    return value


class ManifestGenerator:
    """Builds and writes the mod-loader manifest for a project."""

    def __init__(
        self,
        config: ProjectConfig,
        file_name: str = MANIFEST_FILE_NAME,
    ) -> None:
        self.config = config
        self.file_name = file_name

    def build(self) -> ManifestDocument:
        """Validate the configuration and shape the manifest document.

        Raises:
            MissingConfigurationError: If a required field is absent or empty.
        """
        config = self.config

        mod_loader = _require(config.loader.name, "loader.name")
        loader_version = _require(config.loader.version, "loader.version")
        license_name = _require(config.license.name, "license.name")

        mod = ModEntry(
            mod_id=_require(config.id, "id"),
            version=_require(config.version, "version"),
            display_name=_require(config.name, "name"),
            display_url=_require(config.url, "url"),
            authors=_require(config.authors, "authors"),
            description=_require(config.description, "description"),
        )

        mc_publish = None
        if config.mc_publish is not None and config.mc_publish.present:
            mc_publish = McPublish(
                modrinth=config.mc_publish.modrinth,
                curseforge=config.mc_publish.curseforge,
            )

        dependencies = None
        if config.dependencies:
            dependencies = {
                config.id: [dep.to_manifest() for dep in config.dependencies]
            }

        mod_properties = None
        if config.properties:
            mod_properties = {config.id: dict(config.properties)}

        return ManifestDocument(
            mod_loader=mod_loader,
            loader_version=loader_version,
            license=license_name,
            mods=[mod],
            mc_publish=mc_publish,
            dependencies=dependencies,
            mod_properties=mod_properties,
        )

    def render(self, document: ManifestDocument | None = None) -> str:
        """Serialize the manifest to TOML text."""
        if document is None:
            document = self.build()
        try:
            return tomli_w.dumps(document.to_dict())
        except TypeError as e:
            raise ConfigError(f"Cannot write mod manifest: {e}") from e

    def output_path(self, resources_dir: Path) -> Path:
        return resources_dir / MANIFEST_DIR / self.file_name

    def write(self, resources_dir: Path) -> Path:
        """Write the manifest below ``resources_dir``.

        The document is fully built and rendered before anything touches
        the filesystem, so a configuration error never leaves a partial file.

        Returns:
            Path to the written manifest.
        """
        text = self.render()
        path = self.output_path(resources_dir)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info(f"Wrote mod manifest to {path}")
        return path
