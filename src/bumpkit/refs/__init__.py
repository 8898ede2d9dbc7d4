"""Hosting API shaped queries over a local repository.

Classes:
    RefsApiProtocol: Runtime-checkable protocol for reference/commit queries.
    LocalRefsApi: Implementation backed by git log on a local directory.

Models:
    CommitRecord: One parsed git log entry.
    Signature: Author or committer identity with date.
    Reference: Reference name and target object.
    GitObject: Target of a reference.
    RepositoryCommit: Commit listing entry.

Example:
    >>> from bumpkit.refs import LocalRefsApi
    >>> api = LocalRefsApi("/tmp/repo")
    >>> sorted(r.ref for r in api.list_matching_refs("acme", "widget", "refs/tags/"))
    ['refs/tags/v0.0.1', 'refs/tags/v0.0.2', 'refs/tags/v1.0.0', 'refs/tags/v1.0.1']
"""

from bumpkit.refs._convert import to_references, to_repository_commits
from bumpkit.refs._decorations import (
    DECORATION_PREFIXES,
    DECORATION_SEPARATOR,
    split_decorations,
    strip_decoration,
)
from bumpkit.refs._local import LocalRefsApi
from bumpkit.refs._log import (
    GIT_LOG_FORMAT,
    describe_hash,
    git_log,
    git_log_args,
    parse_log_output,
)
from bumpkit.refs._models import (
    CommitRecord,
    GitObject,
    Reference,
    RepositoryCommit,
    Signature,
)
from bumpkit.refs._protocol import RefsApiProtocol

__all__ = [
    "DECORATION_PREFIXES",
    "DECORATION_SEPARATOR",
    "GIT_LOG_FORMAT",
    "CommitRecord",
    "GitObject",
    "LocalRefsApi",
    "Reference",
    "RefsApiProtocol",
    "RepositoryCommit",
    "Signature",
    "describe_hash",
    "git_log",
    "git_log_args",
    "parse_log_output",
    "split_decorations",
    "strip_decoration",
    "to_references",
    "to_repository_commits",
]
