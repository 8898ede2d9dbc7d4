"""Structured git log queries.

git is asked to print every commit through a fixed template that renders
one JSON object per entry, each followed by a comma. The output therefore
ends in a stray separator which is removed before the entries are wrapped
in brackets and decoded as a JSON array. Output that does not fit the
template is rejected rather than parsed leniently.
"""

from pathlib import Path  # noqa: TC003
from typing import Final

import orjson
from pydantic import ValidationError

from bumpkit.exceptions import QueryError
from bumpkit.refs._models import CommitRecord
from bumpkit.utils import run_git

GIT_LOG_FORMAT: Final = (
    '{"commit": "%H", "parent": "%P", "refs": "%D", "subject": "%s", '
    '"author": {"name": "%aN", "email": "%aE", "date": "%ad"}, '
    '"committer": {"name": "%cN", "email": "%cE", "date": "%cd"}},'
)

RECORD_SEPARATOR: Final = ","

# Everything after this marker is a revision, even if it starts with "-"
END_OF_OPTIONS: Final = "--end-of-options"


def git_log_args(repo_dir: Path | str, ref: str = "") -> list[str]:
    """Build the git arguments for a structured log query.

    Args:
        repo_dir: Repository working directory.
        ref: Branch name or commit SHA to scope the query to. Empty means
            every branch. Never interpreted as an option.

    Returns:
        Arguments for git (without the executable).
    """
    args = [
        "-C",
        str(repo_dir),
        "log",
        "--date=iso-strict",
        "--first-parent",
        "--decorate=full",
        f"--pretty=format:{GIT_LOG_FORMAT}",
    ]
    if ref:
        args.extend((END_OF_OPTIONS, ref))
    else:
        args.append("--all")
    return args


def parse_log_output(output: str) -> list[CommitRecord]:
    """Parse structured git log output into commit records.

    Args:
        output: Raw standard output of a log query using GIT_LOG_FORMAT.

    Returns:
        Commit records in log order (newest first). Empty output yields an
        empty list.

    Raises:
        QueryError: If the output does not end with the record separator,
            is not valid JSON once wrapped, or an entry does not match the
            CommitRecord fields.
    """
    text = output.strip()
    if not text:
        return []

    if not text.endswith(RECORD_SEPARATOR):
        msg = "git log output does not end with the record separator"
        raise QueryError(msg, operation="parse_log_output")

    payload = f"[{text[: -len(RECORD_SEPARATOR)]}]"
    try:
        entries = orjson.loads(payload)
    except orjson.JSONDecodeError as e:
        msg = f"git log output is not valid structured text: {e}"
        raise QueryError(msg, operation="parse_log_output") from e

    try:
        return [CommitRecord.model_validate(entry) for entry in entries]
    except ValidationError as e:
        msg = f"git log entry does not match the log template: {e}"
        raise QueryError(msg, operation="parse_log_output") from e


def git_log(
    repo_dir: Path | str,
    ref: str = "",
    *,
    executable: str = "git",
) -> list[CommitRecord]:
    """Run a structured log query and parse its output.

    Args:
        repo_dir: Repository working directory.
        ref: Branch name or commit SHA; empty for all branches.
        executable: The git executable to run.

    Returns:
        Commit records following first parents, newest first.

    Raises:
        QueryError: If git fails (including for an unknown ref) or its output
            cannot be parsed.
    """
    output = run_git(
        git_log_args(repo_dir, ref),
        executable=executable,
        operation="log",
    )
    return parse_log_output(output)


def describe_hash(
    repo_dir: Path | str,
    commit_hash: str,
    *,
    executable: str = "git",
) -> str:
    """Describe a commit relative to the nearest tag.

    Falls back to the abbreviated hash when no tag is reachable.

    Args:
        repo_dir: Repository working directory.
        commit_hash: Commit SHA or any revision git understands.
        executable: The git executable to run.

    Returns:
        The description, e.g. ``v0.0.2-1-g1a2b3c4``.

    Raises:
        QueryError: If git describe fails.
    """
    args = [
        "-C",
        str(repo_dir),
        "describe",
        "--tags",
        "--always",
        END_OF_OPTIONS,
        commit_hash,
    ]
    return run_git(args, executable=executable, operation="describe").strip()
