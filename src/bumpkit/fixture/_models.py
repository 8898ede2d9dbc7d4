# ruff: noqa: TC003  # Path and Mapping needed at runtime for dataclass fields
"""Fixture repository models.

This module defines the handle returned by the fixture builder and the names
it registers in the tag/commit map.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from dulwich.repo import Repo

# Names registered in the tag/commit map
ANNOTATED_TAG: Final = "v0.0.1"
LIGHTWEIGHT_TAG: Final = "v0.0.2"
ANNOTATED_BRANCH_TAG: Final = "v1.0.0"
LIGHTWEIGHT_BRANCH_TAG: Final = "v1.0.1"
DUMMY_FALSE_COMMIT: Final = "dummy_false_commit"

_LATEST_LABEL_PREFIX: Final = "dummy_tag_latest_"

type TagCommitMap = Mapping[str, str]


def latest_label(branch: str) -> str:
    """Return the map key that records the newest commit of `branch`.

    Example:
        >>> latest_label("master")
        'dummy_tag_latest_master'
    """
    return f"{_LATEST_LABEL_PREFIX}{branch}"


@dataclass(frozen=True, slots=True)
class FixtureCommit:
    """A commit created by the fixture builder.

    Attributes:
        file_name: The empty file added by the commit.
        branch: Branch the commit was made on.
        sha: Full 40-character commit SHA.
        parent: SHA of the parent commit, None for the root commit.
    """

    file_name: str
    branch: str
    sha: str
    parent: str | None


@dataclass(frozen=True, slots=True)
class FixtureRepository:
    """Handle to a built fixture repository.

    Attributes:
        path: Working directory of the repository.
        default_branch: Name of the default branch.
        release_branch: Name of the branch created from the default branch.
        tag_commit_map: Read-only map from tag names and synthetic labels to
            commit SHAs.
        commits: Commits in creation order.
        branch_tips: Branch name to the SHA of its newest commit.
    """

    path: Path
    default_branch: str
    release_branch: str
    tag_commit_map: TagCommitMap
    commits: tuple[FixtureCommit, ...]
    branch_tips: Mapping[str, str]

    def open(self) -> Repo:
        """Open the repository with dulwich.

        The caller owns the returned Repo and must close it.
        """
        return Repo(str(self.path))

    def commits_on(self, branch: str) -> tuple[str, ...]:
        """Return the first-parent ancestry of a branch, newest first.

        Args:
            branch: Branch name.

        Returns:
            Commit SHAs from the branch tip back to the root commit.

        Raises:
            KeyError: If the branch was not created by the fixture.
        """
        by_sha = {commit.sha: commit for commit in self.commits}
        shas: list[str] = []
        current: str | None = self.branch_tips[branch]
        while current is not None:
            shas.append(current)
            current = by_sha[current].parent
        return tuple(shas)
