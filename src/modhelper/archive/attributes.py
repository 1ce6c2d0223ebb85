"""Archive manifest attributes embedded in every built jar."""

from datetime import datetime, timezone
from typing import Dict, Optional

from modhelper.config.models import ProjectConfig

CLASSIFIERS = ("", "sources", "javadoc")
MAX_LINE_BYTES = 72


def classifier_suffix(classifier: Optional[str]) -> str:
    """Suffix appended to the implementation title for an archive variant."""
    return f"-{classifier}" if classifier else ""


def format_timestamp(now: Optional[datetime] = None) -> str:
    """Format an instant as ISO-8601 in UTC, e.g. ``2024-05-01T10:15:30Z``."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def build_archive_attributes(
    config: ProjectConfig,
    classifier: Optional[str] = "",
    now: Optional[datetime] = None,
) -> Dict[str, str]:
    """Compute the manifest attributes for one archive.

    The timestamp is taken when this is called, so every archive build
    gets its own value.

    Args:
        config: Project configuration.
        classifier: Archive classifier ("", "sources" or "javadoc").
        now: Override for the build time.

    Returns:
        Ordered attribute mapping.
    """
    vendor = config.vendor or ""
    return {
        "Maven-Artifact": config.artifact_locator,
        "Specification-Title": config.id,
        "Specification-Vendor": vendor,
        "Specification-Version": "1",
        "Implementation-Title": config.id + classifier_suffix(classifier),
        "Implementation-Version": config.version,
        "Implementation-Vendor": vendor,
        "Built-On-Java": f"{config.java.version} ({config.java.vendor})",
        "Built-On-Minecraft": config.minecraft_version,
        "Built-On-NeoForge": config.neo_version,
        "Timestamp": format_timestamp(now),
        "FMLModType": config.type.mod_type,
        "LICENSE": config.license.name,
    }


def _wrap(line: str) -> list[str]:
    """Split a header line into 72-byte chunks with space continuations."""
    chunks = []
    current = ""
    for char in line:
        if len((current + char).encode("utf-8")) > MAX_LINE_BYTES:
            chunks.append(current)
            current = " "
        current += char
    chunks.append(current)
    return chunks


def render_manifest_mf(attributes: Dict[str, str]) -> str:
    """Render attributes as ``META-INF/MANIFEST.MF`` text."""
    lines = ["Manifest-Version: 1.0"]
    for key, value in attributes.items():
        lines.append(f"{key}: {value}")

    out = []
    for line in lines:
        out.extend(_wrap(line))
    return "\r\n".join(out) + "\r\n\r\n"
