"""
Configuration file loading for pagescope.

A configuration is assembled from up to three sources, later ones winning
key by key: an optional file (JSON, TOML or YAML), the ``PAGESCOPE_*``
environment variables and programmatic overrides. Anything left unset
keeps its default.
"""

import json
import tomllib
from pathlib import Path
from typing import Any, Callable, Optional, Union

from pydantic import ValidationError

from pagescope.exceptions import ConfigurationError

from .env import load_env_config
from .options import PageScopeConfig


def _read_json(path: Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        import yaml
    except ImportError:
        raise ConfigurationError(
            "PyYAML is required to load YAML config files. "
            "Install with: pip install pagescope[yaml]"
        )

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


_READERS: dict[str, Callable[[Path], dict[str, Any]]] = {
    ".json": _read_json,
    ".toml": _read_toml,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
}


def load_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read a configuration file, picking the format from its extension.

    Args:
        path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file is missing, its format is not
            supported, or its contents cannot be parsed
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ConfigurationError(f"Unsupported configuration format: {path.suffix}")

    try:
        return reader(path)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(base.get(key), dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
) -> PageScopeConfig:
    """Build a configuration from a file, the environment and overrides.

    Priority (highest to lowest):
    1. Programmatic overrides
    2. Environment variables
    3. Configuration file
    4. Default values

    Args:
        config_file: Path to configuration file
        overrides: Programmatic overrides
        load_env: Whether to read environment variables

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If the file cannot be read or the merged values
            fail validation
    """
    merged: dict[str, Any] = {}

    if config_file is not None:
        _deep_merge(merged, load_file(config_file))
    if load_env:
        _deep_merge(merged, load_env_config())
    if overrides:
        _deep_merge(merged, overrides)

    try:
        return PageScopeConfig.from_dict(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
