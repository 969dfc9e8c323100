"""
Configuration module for pagescope.

This module provides:
- Strongly-typed option classes validated by Pydantic
- Configuration file loading (JSON, YAML, TOML)
- Environment variable support
- A process-wide active configuration with explicit set/reset

Example usage:
    from pagescope.config import configure, set_default_load_validations

    configure("pagescope.config.toml")
    set_default_load_validations(False)

Environment variables:
    PAGESCOPE_DEFAULT_LOAD_VALIDATIONS=false
    PAGESCOPE_LOG_LEVEL=debug
"""

from pagescope.exceptions import ConfigurationError

from .defaults import (
    DEFAULT_LOAD_VALIDATIONS,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    LOGGER_NAME,
)
from .env import ENV_MAPPINGS, load_env_config
from .loader import load_config, load_file
from .options import (
    LoadOptions,
    LoggingOptions,
    LogLevel,
    PageScopeConfig,
)
from .settings import (
    configure,
    default_load_validations,
    get_config,
    reset_config,
    set_config,
    set_default_load_validations,
)

__all__ = [
    # Main configuration class
    "PageScopeConfig",
    # Option classes
    "LoadOptions",
    "LoggingOptions",
    "LogLevel",
    # Runtime settings
    "get_config",
    "set_config",
    "configure",
    "reset_config",
    "default_load_validations",
    "set_default_load_validations",
    # Loading
    "load_config",
    "load_file",
    "load_env_config",
    "ENV_MAPPINGS",
    "ConfigurationError",
    # Default values
    "DEFAULT_LOAD_VALIDATIONS",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_FORMAT",
    "LOGGER_NAME",
]
