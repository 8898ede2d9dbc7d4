# ruff: noqa: TC003  # datetime needed at runtime for model fields
"""Local refs API models.

This module defines the parsed form of a git log entry and the response
objects handed to consumers. The response objects mirror the shape of a
hosting API client (a reference carries its name and the object it points
to; a commit listing carries the commit SHA) so that consumer code does not
care whether it talks to the local fake or the real service.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from bumpkit.refs._decorations import split_decorations


class Signature(BaseModel):
    """Identity and timestamp of a commit author or committer."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    name: str
    email: str
    date: datetime


class CommitRecord(BaseModel):
    """One entry of the structured git log output.

    Attributes:
        commit: Full 40-character commit SHA.
        parent: Space-separated parent SHAs (empty for a root commit).
        refs: Raw decoration string, e.g. ``HEAD -> refs/heads/master,
            tag: refs/tags/v0.0.1``.
        subject: First line of the commit message.
        author: Author identity and date.
        committer: Committer identity and date.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    commit: str = Field(pattern=r"^[0-9a-f]{40}$")
    parent: str
    refs: str
    subject: str
    author: Signature
    committer: Signature

    @property
    def parents(self) -> tuple[str, ...]:
        """Parent SHAs, first parent first."""
        return tuple(self.parent.split())

    @property
    def ref_names(self) -> tuple[str, ...]:
        """Individual decoration names with ``tag: `` / ``HEAD -> `` removed."""
        return split_decorations(self.refs)


@dataclass(frozen=True, slots=True)
class GitObject:
    """Object a reference points to.

    Attributes:
        sha: Full 40-character SHA of the commit.
        type: Object type; local references always resolve to commits.
    """

    sha: str
    type: str = "commit"


@dataclass(frozen=True, slots=True)
class Reference:
    """A named reference and its target.

    Attributes:
        ref: Reference name, e.g. ``refs/tags/v1.0.0``.
        object: The object the reference points to.
    """

    ref: str
    object: GitObject

    @property
    def name(self) -> str:
        """Alias for ``ref``."""
        return self.ref

    @property
    def target_hash(self) -> str:
        """SHA of the commit the reference points to."""
        return self.object.sha


@dataclass(frozen=True, slots=True)
class RepositoryCommit:
    """Minimal commit listing entry.

    Attributes:
        sha: Full 40-character commit SHA.
    """

    sha: str
