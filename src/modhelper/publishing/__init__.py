"""Maven publication and publish target selection."""

from .pom import Publication, build_publication, render_pom
from .target import InvalidCredentialsError, PublishTarget, resolve_publish_target

__all__ = [
    "Publication",
    "build_publication",
    "render_pom",
    "InvalidCredentialsError",
    "PublishTarget",
    "resolve_publish_target",
]
