"""bumpkit: fixture repository and local refs API for version-bumping tests.

The fixture builder creates a throwaway git repository with a scripted
history of commits, branches, annotated and lightweight tags. LocalRefsApi
answers hosting API shaped reference and commit queries against it by
running git log, so version resolution logic can be tested without network
access.

Example:
    >>> from bumpkit import LocalRefsApi, build_fixture
    >>> fixture, tag_map = build_fixture(tmp_path / "repo")
    >>> api = LocalRefsApi.from_fixture(fixture)
    >>> [c.sha for c in api.list_commits("acme", "widget", "master")] == list(
    ...     fixture.commits_on("master")
    ... )
    True
"""

from bumpkit.exceptions import (
    BumpkitError,
    InitializationError,
    NotFoundError,
    QueryError,
)
from bumpkit.fixture import FixtureBuilder, FixtureRepository, build_fixture
from bumpkit.refs import LocalRefsApi, Reference, RefsApiProtocol, RepositoryCommit

__all__ = [
    "BumpkitError",
    "FixtureBuilder",
    "FixtureRepository",
    "InitializationError",
    "LocalRefsApi",
    "NotFoundError",
    "QueryError",
    "Reference",
    "RefsApiProtocol",
    "RepositoryCommit",
    "build_fixture",
]
