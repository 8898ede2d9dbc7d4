"""Conversion of parsed log entries into API response objects."""

from collections.abc import Iterable

from bumpkit.refs._models import CommitRecord, GitObject, Reference, RepositoryCommit


def to_references(records: Iterable[CommitRecord], ref_filter: str) -> list[Reference]:
    """Build references for every decoration name containing `ref_filter`.

    A commit decorated with several names yields one reference per matching
    name. Log order (newest first) is preserved.

    Args:
        records: Parsed log entries in log order.
        ref_filter: Substring a decoration name must contain. An empty filter
            matches every decorated commit.

    Returns:
        Matching references, possibly empty.
    """
    return [
        Reference(ref=name, object=GitObject(sha=record.commit))
        for record in records
        for name in record.ref_names
        if ref_filter in name
    ]


def to_repository_commits(records: Iterable[CommitRecord]) -> list[RepositoryCommit]:
    """Build commit listing entries in log order."""
    return [RepositoryCommit(sha=record.commit) for record in records]
