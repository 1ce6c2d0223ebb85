"""Compact JSON resources before they are packaged."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ResourceProcessingError(Exception):
    """Raised when a resource file cannot be processed."""


def minify_json_file(path: Path) -> None:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ResourceProcessingError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ResourceProcessingError(f"{path} is not valid UTF-8: {e}") from e
    path.write_text(
        json.dumps(data, separators=(",", ":"), ensure_ascii=False),
        encoding="utf-8",
    )


def minify_json_resources(directory: Path) -> list[Path]:
    """Rewrite every ``*.json`` file below ``directory`` without whitespace.

    Returns:
        The files that were rewritten, sorted.
    """
    if not directory.is_dir():
        logger.debug(f"Resource directory {directory} does not exist, skipping")
        return []

    files = sorted(p for p in directory.rglob("*.json") if p.is_file())
    for path in files:
        minify_json_file(path)

    logger.info(f"Minified {len(files)} JSON resources in {directory}")
    return files
