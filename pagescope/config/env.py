"""
Environment variable support for pagescope configuration.

Each supported variable maps onto one ``section.option`` of
:class:`~pagescope.config.options.PageScopeConfig`.
"""

import os
from typing import Any

from .defaults import ENV_PREFIX

# Config key -> (variable name, value type)
ENV_MAPPINGS: dict[str, tuple[str, type]] = {
    "load.default_load_validations": (f"{ENV_PREFIX}DEFAULT_LOAD_VALIDATIONS", bool),
    "logging.level": (f"{ENV_PREFIX}LOG_LEVEL", str),
    "logging.format": (f"{ENV_PREFIX}LOG_FORMAT", str),
}


def parse_bool(value: str) -> bool:
    """Parse a switch value such as ``"true"``, ``"1"`` or ``"off"``."""
    return value.strip().lower() in ("true", "1", "yes", "on", "enabled")


def load_env_config() -> dict[str, Any]:
    """Load configuration from the mapped environment variables.

    Returns:
        Nested dictionary of configuration values; sections with no
        variables set are omitted.
    """
    result: dict[str, Any] = {}

    for key, (env_var, value_type) in ENV_MAPPINGS.items():
        value = os.environ.get(env_var)
        if value is None:
            continue
        section, option = key.split(".", 1)
        result.setdefault(section, {})[option] = (
            parse_bool(value) if value_type is bool else value
        )

    return result
