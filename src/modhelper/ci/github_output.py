"""GitHub Actions step output writer."""

import logging
from pathlib import Path
from typing import Mapping, Optional

from modhelper.config.models import ProjectConfig

logger = logging.getLogger(__name__)


def ci_output_values(config: ProjectConfig) -> dict[str, str]:
    """Values exposed to later workflow steps."""
    return {
        "modid": config.id,
        "version": config.full_version,
        "minecraft_version": config.minecraft_version,
    }


class GitHubOutputWriter:
    """Append ``key=value`` lines to a GitHub Actions output file."""

    def __init__(self, output_file: Optional[Path] = None) -> None:
        """Initialize the writer.

        Args:
            output_file: Path of the step output file, usually taken from
                ``GITHUB_OUTPUT``. When None, the writer is disabled.
        """
        self.output_file = Path(output_file) if output_file else None

    @property
    def enabled(self) -> bool:
        return self.output_file is not None

    def write(self, values: Mapping[str, str]) -> Optional[Path]:
        """Append one line per value, in mapping order.

        Existing content is kept; running twice appends the lines twice.

        Returns:
            The output path, or None if the writer is disabled.

        Raises:
            ValueError: If a key or value would break the line format.
        """
        if self.output_file is None:
            logger.debug("No CI output file configured, skipping")
            return None

        lines = []
        for key, value in values.items():
            value = str(value)
            if any(c in key for c in "=\r\n") or any(c in value for c in "\r\n"):
                raise ValueError(f"Cannot write CI output {key!r}: invalid characters")
            lines.append(f"{key}={value}\n")

        with open(self.output_file, "a", encoding="utf-8") as f:
            f.writelines(lines)

        logger.info(f"Appended {len(lines)} CI outputs to {self.output_file}")
        return self.output_file
