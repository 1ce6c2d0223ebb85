"""YAML configuration file loading with Pydantic validation."""

from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from .models import ProjectConfig

T = TypeVar("T", bound=BaseModel)

DEFAULT_CONFIG_FILE = Path("modhelper.yaml")


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


class MissingConfigurationError(ConfigError):
    """Raised when a required configuration field is absent."""

    def __init__(self, field: str, source: str | None = None) -> None:
        self.field = field
        message = f"Missing required configuration field: {field}"
        if source:
            message += f" ({source})"
        super().__init__(message)


def load_yaml(path: Path) -> dict:
    """Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
            if data is None:
                return {}
            if not isinstance(data, dict):
                raise ConfigError(f"Expected a mapping at the top of {path}")
            return data
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def _first_missing_field(error: ValidationError) -> str | None:
    for detail in error.errors():
        if detail.get("type") == "missing":
            return ".".join(str(part) for part in detail["loc"])
    return None


def load_config(path: Path, model_class: type[T]) -> T:
    """Load and validate a YAML config file against a Pydantic model.

    Args:
        path: Path to the YAML configuration file.
        model_class: Pydantic model class to validate against.

    Returns:
        Validated configuration model instance.

    Raises:
        MissingConfigurationError: If a required field is absent.
        ConfigError: If validation fails for any other reason.
    """
    data = load_yaml(path)
    return validate_config(data, model_class, source=str(path))


def validate_config(data: dict, model_class: type[T], source: str = "<dict>") -> T:
    """Validate an already parsed mapping against a Pydantic model."""
    try:
        return model_class(**data)
    except ValidationError as e:
        missing = _first_missing_field(e)
        if missing:
            raise MissingConfigurationError(missing, source) from e
        raise ConfigError(f"Configuration validation failed for {source}: {e}") from e


def load_project_config(path: Path = DEFAULT_CONFIG_FILE) -> ProjectConfig:
    """Load a project configuration file."""
    return load_config(path, ProjectConfig)
