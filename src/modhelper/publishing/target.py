"""Publish target selection."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from modhelper.config.models import MavenConfig, ProjectConfig

logger = logging.getLogger(__name__)

LOCAL_REPO_DIR = "repo"


class InvalidCredentialsError(Exception):
    """Raised when remote repository credentials are incomplete."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Incomplete Maven credentials, missing: {', '.join(missing)}")


@dataclass
class PublishTarget:
    """Where the publication is uploaded."""

    url: str
    local: bool
    username: Optional[str] = None
    password: Optional[str] = None


def require_credentials(maven: Optional[MavenConfig]) -> MavenConfig:
    """Return the Maven settings if they allow a remote publish.

    Raises:
        InvalidCredentialsError: If url, user or password is missing.
    """
    if maven is None:
        raise InvalidCredentialsError(["url", "user", "password"])
    missing = maven.missing_fields()
    if missing:
        raise InvalidCredentialsError(missing)
    return maven


def resolve_publish_target(config: ProjectConfig, build_dir: Path) -> PublishTarget:
    """Pick the remote repository, or a local folder when credentials are incomplete."""
    try:
        maven = require_credentials(config.maven)
    except InvalidCredentialsError as e:
        if config.maven is not None:
            logger.warning(f"{e}; falling back to local repository")
        repo_dir = build_dir / LOCAL_REPO_DIR
        logger.info(f"Using repo folder {repo_dir}")
        return PublishTarget(url=repo_dir.resolve().as_uri(), local=True)

    return PublishTarget(
        url=maven.url,
        local=False,
        username=maven.user,
        password=maven.password,
    )
