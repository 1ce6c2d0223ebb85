"""Javadoc tool options."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CUSTOM_TAGS = [
    "side:a:Side:",
    "apiNote:a:API Note:",
    "implSpec:a:Implementation Requirements:",
    "implNote:a:Implementation Note:",
]


def javadoc_options(java_version: int) -> list[str]:
    """Command line options for the javadoc tool."""
    options = ["-encoding", "UTF-8", "-Xdoclint:all,-missing", "-public"]
    for tag in CUSTOM_TAGS:
        options.extend(["-tag", tag])
    if java_version >= 9:
        options.append("-html5")
    return options


def _quote(arg: str) -> str:
    if any(c in arg for c in " \t'\"\\"):
        escaped = arg.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return arg


def write_options_file(path: Path, options: list[str]) -> Path:
    """Write options as a javadoc ``@argfile``, one argument per line."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(_quote(o) for o in options) + "\n", encoding="utf-8")
    logger.info(f"Wrote javadoc options to {path}")
    return path
