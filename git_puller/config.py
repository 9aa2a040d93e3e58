"""
Configuration handling for git_puller.

Defines the configuration schema and provides methods for loading defaults
from an optional YAML file and merging command-line overrides on top.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator


# Level names accepted by --log-level, mapped onto stdlib logging levels
LOG_LEVELS: dict[str, int] = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL,
}

DEFAULT_LOG_LEVEL = "error"


def parse_log_level(name: str) -> int:
    """
    Convert a level name into a logging level.

    Raises:
        ValueError: If the name is not one of LOG_LEVELS.
    """
    try:
        return LOG_LEVELS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Invalid log level: {name!r} "
            f"(options: {', '.join(LOG_LEVELS)})"
        ) from None


class PullerConfig(BaseModel):
    """Runtime configuration for a pull run."""

    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Logging level name (see LOG_LEVELS)",
    )
    debug: bool = Field(
        default=False, description="Force debug logging regardless of log_level"
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Maximum number of repositories pulled at once (None = executor default)",
    )
    show_detail: bool = Field(
        default=False,
        description="Add a Detail column with the git error for failed repositories",
    )
    metadata_dir: str = Field(
        default=".git",
        min_length=1,
        description="Directory name that marks a repository root",
    )
    git_executable: str = Field(
        default="git", min_length=1, description="Git binary to invoke"
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        parse_log_level(value)
        return value.strip().lower()

    @property
    def effective_log_level(self) -> int:
        """The logging level to use, taking --debug into account."""
        if self.debug:
            return logging.DEBUG
        return parse_log_level(self.log_level)

    @classmethod
    def from_yaml(cls, path: Path) -> "PullerConfig":
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    def with_overrides(self, **overrides) -> "PullerConfig":
        """
        Return a copy with the given values applied.

        Values that are None are ignored, so unset command-line options keep
        whatever the file (or the defaults) provided.
        """
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return PullerConfig.model_validate(data)
