"""
Process-wide configuration for pagescope.

The active :class:`PageScopeConfig` is built lazily from defaults and
environment variables on first use. ``configure`` replaces it from a file
or overrides, and ``reset_config`` drops it so the next read starts over.
"""

from pathlib import Path
from typing import Any, Optional, Union

from .loader import load_config
from .options import PageScopeConfig

_config: Optional[PageScopeConfig] = None


def get_config() -> PageScopeConfig:
    """Get the active configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: PageScopeConfig) -> PageScopeConfig:
    """Replace the active configuration.

    Args:
        config: New configuration

    Returns:
        The configuration now active
    """
    global _config
    _config = config
    _apply_logging(config)
    return config


def configure(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
) -> PageScopeConfig:
    """Load configuration from the given sources and make it active.

    Args:
        config_file: Path to configuration file
        overrides: Programmatic overrides
        load_env: Whether to load environment variables

    Returns:
        The configuration now active
    """
    return set_config(
        load_config(config_file=config_file, overrides=overrides, load_env=load_env)
    )


def reset_config() -> None:
    """Forget the active configuration."""
    global _config
    _config = None


def default_load_validations() -> bool:
    """Check whether pages get the built-in load validation."""
    return get_config().load.default_load_validations


def set_default_load_validations(enabled: bool) -> None:
    """Switch the built-in page load validation on or off.

    Only validation lists materialized after the call are affected.

    Args:
        enabled: New switch value
    """
    global _config
    config = get_config()
    _config = config.model_copy(
        update={"load": config.load.model_copy(update={"default_load_validations": enabled})}
    )


def _apply_logging(config: PageScopeConfig) -> None:
    from pagescope.log import set_log_level

    set_log_level(config.logging.level.value)
