"""Process settings and configuration-file loading for neo-auth.

Settings come from the environment (prefix ``NEO_AUTH_``) and an optional
``.env`` file; the authentication configuration itself is a YAML or JSON
document whose path is one of those settings.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..configuration.authentication import AuthConfiguration
from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class AuthSettings(BaseSettings):
    """Environment-driven settings of a service embedding neo-auth."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="neo-auth")
    environment: str = Field(default="development")
    config_file: Optional[Path] = Field(default=None)

    # Logging, read from the same variables as LoggingConfig
    log_level: str = Field(
        default="INFO", validation_alias=AliasChoices("NEO_AUTH_LOG_LEVEL", "LOG_LEVEL")
    )
    log_verbosity: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("NEO_AUTH_LOG_VERBOSITY", "LOG_VERBOSITY")
    )
    log_format: str = Field(
        default="simple", validation_alias=AliasChoices("NEO_AUTH_LOG_FORMAT", "LOG_FORMAT")
    )

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


_settings: Optional[AuthSettings] = None


def get_settings() -> AuthSettings:
    """Get the process-wide settings, creating them on first use."""
    global _settings
    if _settings is None:
        _settings = AuthSettings()
    return _settings


def override_settings(**overrides: Any) -> AuthSettings:
    """Replace the process-wide settings with a copy carrying ``overrides``."""
    global _settings
    _settings = get_settings().model_copy(update=overrides)
    return _settings


def reset_settings() -> None:
    """Forget the process-wide settings; the next get_settings() rebuilds them."""
    global _settings
    _settings = None


def read_configuration_document(path: Union[str, Path]) -> Mapping[str, Any]:
    """Read a configuration document from a YAML or JSON file.

    Args:
        path: Path to the document

    Returns:
        The parsed top-level mapping

    Raises:
        ConfigurationError: If the file is missing, unreadable, malformed
            or not a mapping
    """
    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {file_path}",
            details={"path": str(file_path)},
        )

    suffix = file_path.suffix.lower()
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            if suffix in YAML_SUFFIXES:
                document = yaml.safe_load(f)
            elif suffix == ".json":
                document = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported configuration file format: {file_path.suffix}",
                    details={"path": str(file_path)},
                )
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Failed to read configuration file {file_path}: {e}",
            details={"path": str(file_path)},
        ) from e

    if not isinstance(document, Mapping):
        raise ConfigurationError(
            f"Configuration file {file_path} must contain a mapping at the top level",
            details={"path": str(file_path)},
        )
    return document


def load_auth_configuration(
    path: Optional[Union[str, Path]] = None,
    settings: Optional[AuthSettings] = None,
) -> AuthConfiguration:
    """Load and validate the authentication configuration.

    Args:
        path: Configuration file; defaults to ``settings.config_file``
        settings: Settings to use; defaults to get_settings()

    Returns:
        Validated AuthConfiguration

    Raises:
        ConfigurationError: If no file is configured or it cannot be read
        StructuralValidationError: If the document has an invalid shape
    """
    settings = settings or get_settings()
    path = path if path is not None else settings.config_file
    if path is None:
        raise ConfigurationError(
            "No authentication configuration file configured (set NEO_AUTH_CONFIG_FILE)"
        )

    logger.debug(f"Loading authentication configuration from {path}")
    document = read_configuration_document(path)
    return AuthConfiguration.from_dict(document)
