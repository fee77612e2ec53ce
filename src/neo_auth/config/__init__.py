"""Settings, configuration loading and logging for neo-auth."""

from .logging_config import (
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
    setup_logging,
)
from .settings import (
    AuthSettings,
    get_settings,
    override_settings,
    reset_settings,
    read_configuration_document,
    load_auth_configuration,
)

__all__ = [
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
    "setup_logging",
    "AuthSettings",
    "get_settings",
    "override_settings",
    "reset_settings",
    "read_configuration_document",
    "load_auth_configuration",
]
