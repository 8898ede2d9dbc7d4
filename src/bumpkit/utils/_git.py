"""Helpers for running the git executable."""

import subprocess
from collections.abc import Sequence

from bumpkit.exceptions import QueryError


def decode_bytes(value: bytes | str) -> str:
    """Decode bytes to str if needed.

    Args:
        value: A bytes or str value.

    Returns:
        The value as a string.
    """
    if isinstance(value, bytes):
        return value.decode()
    return value


def _decode_output(data: bytes, *, operation: str, command: Sequence[str]) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"git output is not valid UTF-8: {e}"
        raise QueryError(msg, operation=operation, command=command) from e


def run_git(
    args: Sequence[str],
    *,
    executable: str = "git",
    operation: str = "git",
) -> str:
    """Run git and return its standard output.

    The call blocks until git exits; no timeout is applied.

    Args:
        args: Arguments passed to git (without the executable).
        executable: The git executable to run.
        operation: Name of the calling operation, recorded on errors.

    Returns:
        Standard output decoded as UTF-8.

    Raises:
        QueryError: If git cannot be started, exits with a non-zero status,
            or prints output that is not valid UTF-8.
    """
    command = [executable, *args]
    try:
        result = subprocess.run(  # noqa: S603
            command,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        msg = f"Failed to run {executable}: {e}"
        raise QueryError(msg, operation=operation, command=command) from e

    stdout = _decode_output(result.stdout, operation=operation, command=command)
    stderr = _decode_output(result.stderr, operation=operation, command=command)
    if result.returncode != 0:
        msg = (
            f"git {' '.join(args)} exited with status {result.returncode}: "
            f"{stderr.strip()}"
        )
        raise QueryError(msg, operation=operation, command=command, stderr=stderr)

    return stdout
