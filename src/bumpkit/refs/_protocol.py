"""Refs API protocol for type-safe dependency injection.

This module defines a runtime-checkable Protocol covering the reference and
commit queries a version-bumping tool issues against its hosting service.
The local fake in this package and a networked client both satisfy it, so
consumers receive whichever one the caller injects.
"""

from typing import Protocol, runtime_checkable

from bumpkit.refs._models import Reference, RepositoryCommit


@runtime_checkable
class RefsApiProtocol(Protocol):
    """Protocol for hosting API reference and commit queries.

    ``owner`` and ``repo`` identify the hosted repository. Implementations
    bound to a single repository may ignore them.

    Example:
        >>> def latest_tag(api: RefsApiProtocol) -> str:
        ...     return api.list_matching_refs("acme", "widget", "tags/")[0].ref
    """

    def list_matching_refs(self, owner: str, repo: str, ref: str) -> list[Reference]:
        """List references whose name contains `ref`.

        Args:
            owner: Repository owner.
            repo: Repository name.
            ref: Substring to match against reference names.

        Returns:
            Matching references, newest commit first. Empty when nothing
            matches.

        Raises:
            QueryError: If the backend query fails.
        """
        ...

    def list_commits(
        self, owner: str, repo: str, sha: str = ""
    ) -> list[RepositoryCommit]:
        """List commits along the first-parent ancestry of a branch or SHA.

        Args:
            owner: Repository owner.
            repo: Repository name.
            sha: Branch name or commit SHA. Empty lists all branches.

        Returns:
            Commits, newest first.

        Raises:
            QueryError: If the backend query fails or the ref is unknown.
        """
        ...

    def get_ref(self, owner: str, repo: str, ref: str) -> Reference:
        """Get the most recent reference whose name contains `ref`.

        Args:
            owner: Repository owner.
            repo: Repository name.
            ref: Substring to match against reference names.

        Returns:
            The first matching reference.

        Raises:
            NotFoundError: If no reference matches.
            QueryError: If the backend query fails.
        """
        ...
