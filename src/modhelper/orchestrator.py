"""Build orchestrator: runs the metadata steps of a mod build in order."""

import logging
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from modhelper.archive.attributes import (
    CLASSIFIERS,
    build_archive_attributes,
    render_manifest_mf,
)
from modhelper.ci.github_output import GitHubOutputWriter, ci_output_values
from modhelper.config.loader import ConfigError
from modhelper.config.models import ProjectConfig, ProjectType
from modhelper.javadoc.options import javadoc_options, write_options_file
from modhelper.manifest.generator import ManifestGenerator
from modhelper.publishing.pom import Publication, build_publication, render_pom
from modhelper.publishing.target import PublishTarget, resolve_publish_target
from modhelper.resources.json_minify import minify_json_resources

logger = logging.getLogger(__name__)

ARCHIVE_TASKS = {"": "jar", "sources": "sourcesJar", "javadoc": "javadocJar"}


@dataclass
class BuildResult:
    """Outputs of one orchestrator run."""

    minified_resources: List[Path] = field(default_factory=list)
    license_path: Optional[Path] = None
    manifest_path: Optional[Path] = None
    ci_output_path: Optional[Path] = None
    archive_attributes: Dict[str, Dict[str, str]] = field(default_factory=dict)
    archive_manifests: Dict[str, Path] = field(default_factory=dict)
    javadoc_options_path: Optional[Path] = None
    publish_target: Optional[PublishTarget] = None
    publication: Optional[Publication] = None
    pom_path: Optional[Path] = None


class BuildOrchestrator:
    """Runs every metadata step for a project against a build directory."""

    def __init__(
        self,
        config: ProjectConfig,
        build_dir: Path,
        github_output: Optional[Path] = None,
        project_dir: Optional[Path] = None,
    ) -> None:
        self.config = config
        self.build_dir = build_dir
        self.project_dir = project_dir or Path.cwd()
        self.ci_writer = GitHubOutputWriter(github_output)

    @property
    def resources_dir(self) -> Path:
        return self.build_dir / "resources" / "main"

    @property
    def generated_resources_dir(self) -> Path:
        return self.build_dir / "generated" / "resources"

    def process_resources(self) -> List[Path]:
        return minify_json_resources(self.resources_dir)

    def copy_license(self) -> Optional[Path]:
        """Copy the license file to the root of the packaged resources."""
        if not self.config.license.file:
            logger.debug("No license file configured, skipping")
            return None
        src = self.project_dir / self.config.license.file
        if not src.is_file():
            raise ConfigError(f"License file not found: {src}")
        dest = self.resources_dir / src.name
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dest)
        logger.info(f"Copied license file to {dest}")
        return dest

    def generate_manifest(self) -> Optional[Path]:
        if self.config.type is not ProjectType.MOD:
            logger.debug(f"Project type is {self.config.type.value}, no mod manifest")
            return None
        return ManifestGenerator(self.config).write(self.generated_resources_dir)

    def write_ci_output(self) -> Optional[Path]:
        if not self.ci_writer.enabled:
            logger.debug("CI output not configured, skipping")
            return None
        return self.ci_writer.write(ci_output_values(self.config))

    def write_archive_manifests(
        self, now: Optional[datetime] = None
    ) -> tuple[Dict[str, Dict[str, str]], Dict[str, Path]]:
        attributes = {}
        paths = {}
        for classifier in CLASSIFIERS:
            attrs = build_archive_attributes(self.config, classifier, now=now)
            task = ARCHIVE_TASKS[classifier]
            path = self.build_dir / "tmp" / task / "MANIFEST.MF"
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(render_manifest_mf(attrs), encoding="utf-8", newline="")
            attributes[classifier] = attrs
            paths[classifier] = path
        logger.info(f"Wrote {len(paths)} archive manifests")
        return attributes, paths

    def write_javadoc_options(self) -> Path:
        path = self.build_dir / "tmp" / "javadoc" / "javadoc.options"
        return write_options_file(path, javadoc_options(self.config.java.version))

    def write_pom(self, publication: Publication) -> Path:
        path = self.build_dir / "publications" / publication.name / "pom-default.xml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            render_pom(publication, display_name=self.config.name), encoding="utf-8"
        )
        logger.info(f"Wrote POM to {path}")
        return path

    def run(self, now: Optional[datetime] = None) -> BuildResult:
        """Run every step in order and collect the outputs."""
        result = BuildResult()
        result.minified_resources = self.process_resources()
        result.license_path = self.copy_license()
        result.manifest_path = self.generate_manifest()
        result.ci_output_path = self.write_ci_output()
        result.archive_attributes, result.archive_manifests = (
            self.write_archive_manifests(now=now)
        )
        result.javadoc_options_path = self.write_javadoc_options()
        result.publish_target = resolve_publish_target(self.config, self.build_dir)
        result.publication = build_publication(self.config)
        result.pom_path = self.write_pom(result.publication)
        return result
