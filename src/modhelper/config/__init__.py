"""Project configuration models and loading."""

from .loader import ConfigError, MissingConfigurationError, load_project_config
from .models import ProjectConfig

__all__ = [
    "ConfigError",
    "MissingConfigurationError",
    "load_project_config",
    "ProjectConfig",
]
