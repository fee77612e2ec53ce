"""Centralized logging configuration for neo-auth.

Provides consistent, environment-controlled logging for the embedding
service and for neo-auth's own modules.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Warnings and above
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


ENV_PREFIX = "NEO_AUTH_"


def _env_value(environ: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    """Read NEO_AUTH_<name>, falling back to the bare <name>."""
    value = environ.get(f"{ENV_PREFIX}{name}")
    if value is None:
        value = environ.get(name, default)
    return value


def _env_flag(name: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    environ = os.environ if environ is None else environ
    return _env_value(environ, name, "false").lower() == "true"


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Feature loggers kept at WARNING unless their ENABLE_* flag is set
    FEATURE_MODULES = {
        "ENABLE_TOKEN_GATE_LOGGING": "neo_auth.configuration.web3.token_gate",
        "ENABLE_TWO_FACTOR_LOGGING": "neo_auth.two_factor",
    }

    @classmethod
    def build_config(cls, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """Build the dictConfig document for the given environment.

        Args:
            environ: Environment mapping; defaults to os.environ

        Returns:
            Configuration suitable for logging.config.dictConfig
        """
        environ = os.environ if environ is None else environ
        log_verbosity = _env_value(environ, "LOG_VERBOSITY")
        if log_verbosity:
            effective_log_level = get_log_level_from_verbosity(log_verbosity)
        else:
            effective_log_level = _env_value(environ, "LOG_LEVEL", LogLevel.INFO.value).upper()
            if effective_log_level not in LogLevel.__members__:
                effective_log_level = LogLevel.INFO.value

        try:
            log_format = LogFormat(_env_value(environ, "LOG_FORMAT", "simple").lower())
        except ValueError:
            log_format = LogFormat.SIMPLE

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": FORMAT_STRINGS[log_format],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {},
        }

        for flag, module in cls.FEATURE_MODULES.items():
            if not _env_flag(flag, environ):
                logging_config["loggers"][module] = {
                    "level": "WARNING" if effective_log_level != "DEBUG" else "INFO",
                }

        return logging_config

    @classmethod
    def configure(cls) -> None:
        """Configure logging based on environment variables."""
        logging_config = cls.build_config()
        logging.config.dictConfig(logging_config)

        logger = logging.getLogger(__name__)
        if logging_config["root"]["level"] == "DEBUG":
            logger.debug(
                f"Logging configured: level={logging_config['root']['level']}, "
                f"token_gate={_env_flag('ENABLE_TOKEN_GATE_LOGGING')}, "
                f"two_factor={_env_flag('ENABLE_TWO_FACTOR_LOGGING')}"
            )


def setup_logging() -> None:
    """Setup logging configuration from environment variables.

    Called once when neo_auth is imported.
    """
    LoggingConfig.configure()
