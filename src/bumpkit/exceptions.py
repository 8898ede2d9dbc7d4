"""bumpkit exceptions."""

# ruff: noqa: TC003  # Path and Sequence needed at runtime for annotations
from collections.abc import Sequence
from pathlib import Path


class BumpkitError(Exception):
    """Base exception for bumpkit errors."""


# =============================================================================
# Fixture Exceptions
# =============================================================================


class InitializationError(BumpkitError):
    """Raised when the fixture repository cannot be set up.

    Fixture construction is fail-fast: the first failing step raises this
    error and no later step runs against the half-built repository.

    Attributes:
        path: The directory the fixture was being built in.
        operation: The construction step that failed (init, commit, tag, ...).
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        operation: str | None = None,
    ) -> None:
        """Initialize with error message and fixture context.

        Args:
            message: Human-readable error message.
            path: The directory the fixture was being built in.
            operation: The construction step that failed.
        """
        super().__init__(message)
        self.path: Path | None = path
        self.operation: str | None = operation


# =============================================================================
# Query Exceptions
# =============================================================================


class QueryError(BumpkitError):
    """Raised when a git query fails or its output cannot be parsed.

    Attributes:
        operation: The query operation that failed.
        command: The git argv that was executed, if any.
        stderr: Standard error captured from git, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        command: Sequence[str] | None = None,
        stderr: str | None = None,
    ) -> None:
        """Initialize with error message and query context.

        Args:
            message: Human-readable error message.
            operation: The query operation that failed.
            command: The git argv that was executed.
            stderr: Standard error captured from git.
        """
        super().__init__(message)
        self.operation: str | None = operation
        self.command: tuple[str, ...] | None = (
            tuple(command) if command is not None else None
        )
        self.stderr: str | None = stderr


class NotFoundError(BumpkitError, KeyError):
    """Raised when no decorated commit matches a reference name.

    Attributes:
        operation: The query operation that was looking for the reference.
        ref: The reference name that was not found.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        ref: str | None = None,
    ) -> None:
        """Initialize with error message and reference context.

        Args:
            message: Human-readable error message.
            operation: The query operation that was looking for the reference.
            ref: The reference name that was not found.
        """
        super().__init__(message)
        self.operation: str | None = operation
        self.ref: str | None = ref

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(BumpkitError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column
