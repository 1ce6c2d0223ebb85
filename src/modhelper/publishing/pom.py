"""Maven publication metadata and POM rendering."""

import xml.etree.ElementTree as ET
from typing import Optional

from pydantic import BaseModel

from modhelper.config.models import ProjectConfig

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"
POM_SCHEMA_LOCATION = (
    "http://maven.apache.org/POM/4.0.0 https://maven.apache.org/xsd/maven-4.0.0.xsd"
)


class Scm(BaseModel):
    connection: str
    developer_connection: str
    url: str


class ManagementLink(BaseModel):
    """Issue tracker or CI system reference."""

    system: str
    url: str


class PomLicense(BaseModel):
    name: str
    url: Optional[str] = None
    distribution: str = "repo"


class Publication(BaseModel):
    """A Maven publication of the main jar with its POM metadata."""

    name: str
    group_id: str
    artifact_id: str
    version: str
    packaging: str = "jar"
    url: Optional[str] = None
    scm: Optional[Scm] = None
    issue_management: Optional[ManagementLink] = None
    ci_management: Optional[ManagementLink] = None
    license: PomLicense


def build_publication(config: ProjectConfig) -> Publication:
    """Derive the publication from the project configuration."""
    scm = None
    issue_management = None
    ci_management = None
    if config.github is not None:
        github = config.github
        scm = Scm(
            connection=github.connection,
            developer_connection=github.developer_connection,
            url=github.url,
        )
        if github.issues_url:
            issue_management = ManagementLink(system="github", url=github.issues_url)
        if github.actions_url:
            ci_management = ManagementLink(system="github", url=github.actions_url)

    return Publication(
        name=f"{config.id}ToMaven",
        group_id=config.group,
        artifact_id=config.id,
        version=config.full_version,
        url=config.url,
        scm=scm,
        issue_management=issue_management,
        ci_management=ci_management,
        license=PomLicense(name=config.license.name, url=config.license.url),
    )


def _text(parent: ET.Element, tag: str, value: Optional[str]) -> None:
    if value:
        ET.SubElement(parent, tag).text = value


def render_pom(publication: Publication, display_name: Optional[str] = None) -> str:
    """Render the publication as POM XML."""
    project = ET.Element(
        "project",
        {
            "xmlns": POM_NAMESPACE,
            "xmlns:xsi": "http://www.w3.org/2001/XMLSchema-instance",
            "xsi:schemaLocation": POM_SCHEMA_LOCATION,
        },
    )
    _text(project, "modelVersion", "4.0.0")
    _text(project, "groupId", publication.group_id)
    _text(project, "artifactId", publication.artifact_id)
    _text(project, "version", publication.version)
    _text(project, "packaging", publication.packaging)
    _text(project, "name", display_name or publication.artifact_id)
    _text(project, "url", publication.url)

    licenses = ET.SubElement(project, "licenses")
    license_el = ET.SubElement(licenses, "license")
    _text(license_el, "name", publication.license.name)
    _text(license_el, "url", publication.license.url)
    _text(license_el, "distribution", publication.license.distribution)

    if publication.scm is not None:
        scm = ET.SubElement(project, "scm")
        _text(scm, "connection", publication.scm.connection)
        _text(scm, "developerConnection", publication.scm.developer_connection)
        _text(scm, "url", publication.scm.url)

    for tag, link in (
        ("issueManagement", publication.issue_management),
        ("ciManagement", publication.ci_management),
    ):
        if link is not None:
            el = ET.SubElement(project, tag)
            _text(el, "system", link.system)
            _text(el, "url", link.url)

    ET.indent(project)
    body = ET.tostring(project, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"
