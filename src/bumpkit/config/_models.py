"""Configuration models.

This module provides the Pydantic models for bumpkit settings. Every section
is frozen and ignores unknown keys so that shared config files can carry
settings for other tools.
"""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    file: str = ""


class IdentityConfig(BaseModel):
    """Identity used as author, committer and tagger of fixture objects."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    name: str = "John Doe"
    email: str = "john@doe.org"

    def as_bytes(self) -> bytes:
        """Return the identity in git's "Name <email>" form."""
        return f"{self.name} <{self.email}>".encode()


class FixtureConfig(BaseModel):
    """Branch names of the fixture repository.

    Attributes:
        default_branch: Branch holding the baseline history.
        release_branch: Side branch created from the default branch tip.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    default_branch: str = Field(default="master", min_length=1)
    release_branch: str = Field(default="release-v1.0.0", min_length=1)


class GitConfig(BaseModel):
    """Settings for the git executable used by queries."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    executable: str = Field(default="git", min_length=1)


class HarnessConfig(BaseModel):
    """Top-level bumpkit configuration.

    Example:
        >>> config = HarnessConfig()
        >>> config.fixture.default_branch
        'master'
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    identity: IdentityConfig = Field(default_factory=IdentityConfig)
    fixture: FixtureConfig = Field(default_factory=FixtureConfig)
    git: GitConfig = Field(default_factory=GitConfig)
