"""Deterministic fixture repository for version-bumping tests.

Classes:
    FixtureBuilder: Builds the fixture repository in a directory.
    FixtureRepository: Handle to a built repository.
    FixtureCommit: A commit created by the builder.

Example:
    >>> from bumpkit.fixture import build_fixture
    >>> fixture, tag_map = build_fixture(tmp_path / "repo")
    >>> fixture.commits_on("master")[0] == tag_map["dummy_tag_latest_master"]
    True
"""

from bumpkit.fixture._builder import FixtureBuilder, build_fixture
from bumpkit.fixture._models import (
    ANNOTATED_BRANCH_TAG,
    ANNOTATED_TAG,
    DUMMY_FALSE_COMMIT,
    LIGHTWEIGHT_BRANCH_TAG,
    LIGHTWEIGHT_TAG,
    FixtureCommit,
    FixtureRepository,
    TagCommitMap,
    latest_label,
)

__all__ = [
    "ANNOTATED_BRANCH_TAG",
    "ANNOTATED_TAG",
    "DUMMY_FALSE_COMMIT",
    "LIGHTWEIGHT_BRANCH_TAG",
    "LIGHTWEIGHT_TAG",
    "FixtureBuilder",
    "FixtureCommit",
    "FixtureRepository",
    "TagCommitMap",
    "build_fixture",
    "latest_label",
]
