"""
Configuration options classes for pagescope.

This module provides strongly-typed option classes for load validation and
logging configuration with validation and type checking.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    DEFAULT_LOAD_VALIDATIONS,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
)


class LogLevel(str, Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoadOptions(BaseModel):
    """Load validation options."""

    default_load_validations: bool = Field(
        DEFAULT_LOAD_VALIDATIONS,
        description="Seed pages with the built-in 'displayed' load validation",
    )


class LoggingOptions(BaseModel):
    """Diagnostic logging options."""

    level: LogLevel = Field(LogLevel(DEFAULT_LOG_LEVEL), description="Log level")
    format: str = Field(DEFAULT_LOG_FORMAT, description="Log record format")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class PageScopeConfig(BaseModel):
    """Main configuration class combining all options."""

    load: LoadOptions = Field(default_factory=LoadOptions, description="Load options")
    logging: LoggingOptions = Field(
        default_factory=LoggingOptions, description="Logging options"
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageScopeConfig":
        """Create configuration from dictionary."""
        return cls(**data)

