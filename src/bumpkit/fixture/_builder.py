"""Fixture repository builder.

FixtureBuilder creates a small git repository with a fixed history that
covers the reference shapes a version-bumping tool has to resolve:

    master:          static -- tagged_annotated (v0.0.1) --
                     tagged_lightweight (v0.0.2) -- latest_master
    release-v1.0.0:  (branched from latest_master) --
                     tagged_annotated_branch (v1.0.0) --
                     tagged_lightweight_branch (v1.0.1) -- latest_branch

Commit timestamps are real; only the topology and the names are fixed.
Every step is fail-fast: the first failure raises InitializationError and
nothing further is written to the directory.
"""

import secrets
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from dulwich import porcelain
from dulwich.refs import SYMREF
from dulwich.repo import Repo

from bumpkit.config import HarnessConfig
from bumpkit.exceptions import InitializationError
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
from bumpkit.utils import decode_bytes, logger_from_config

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_HEAD: Final = b"HEAD"
_BRANCH_PREFIX: Final = b"refs/heads/"
_SHA_HEX_LENGTH: Final = 40


def _branch_ref(branch: str) -> bytes:
    return _BRANCH_PREFIX + branch.encode()


class FixtureBuilder:
    """Builds the fixture repository in a directory.

    A builder maps to exactly one directory and builds it once.

    Example:
        >>> builder = FixtureBuilder(tmp_path / "repo")
        >>> fixture, tag_map = builder.build()
        >>> sorted(tag_map)[:2]
        ['dummy_false_commit', 'dummy_tag_latest_master']
    """

    __slots__ = (
        "_built",
        "_commits",
        "_config",
        "_identity",
        "_log",
        "_path",
        "_tag_commit_map",
    )

    def __init__(
        self,
        directory: Path | str,
        *,
        config: HarnessConfig | None = None,
        logger: "FilteringBoundLogger | None" = None,
    ) -> None:
        """Initialize the builder.

        Args:
            directory: Directory to build the repository in. Must be absent
                or empty.
            config: Configuration supplying identity and branch names.
            logger: Logger for construction steps. Defaults to one created
                from the configuration.
        """
        self._path: Path = Path(directory).resolve()
        self._config: HarnessConfig = config if config is not None else HarnessConfig()
        self._identity: bytes = self._config.identity.as_bytes()
        base_logger = (
            logger if logger is not None else logger_from_config(self._config)
        )
        self._log: FilteringBoundLogger = base_logger.bind(fixture=str(self._path))
        self._tag_commit_map: dict[str, str] = {}
        self._commits: list[FixtureCommit] = []
        self._built: bool = False

    @property
    def path(self) -> Path:
        """Directory the repository is built in."""
        return self._path

    def build(self) -> tuple[FixtureRepository, TagCommitMap]:
        """Create the repository and record its tags and commits.

        Returns:
            The fixture handle and its tag/commit map. The map holds the four
            tag names, one ``dummy_tag_latest_<branch>`` label per branch and
            ``dummy_false_commit``, a SHA that is not in the repository.

        Raises:
            InitializationError: If the builder was already used, the
                directory is not empty, or any git operation fails.
        """
        if self._built:
            msg = "FixtureBuilder instances build exactly one repository"
            raise InitializationError(msg, path=self._path, operation="build")
        self._built = True

        default = self._config.fixture.default_branch
        release = self._config.fixture.release_branch

        repo = self._init_repo(default)
        try:
            self._commit_without_tag(repo, "static", default, add_latest=False)
            self._commit_with_annotated_tag(
                repo, "tagged_annotated", ANNOTATED_TAG, default
            )
            self._commit_with_lightweight_tag(
                repo, "tagged_lightweight", LIGHTWEIGHT_TAG, default
            )
            self._commit_without_tag(repo, "latest_master", default, add_latest=True)
            self._create_branch(repo, release)
            self._commit_with_annotated_tag(
                repo, "tagged_annotated_branch", ANNOTATED_BRANCH_TAG, release
            )
            self._commit_with_lightweight_tag(
                repo, "tagged_lightweight_branch", LIGHTWEIGHT_BRANCH_TAG, release
            )
            self._commit_without_tag(repo, "latest_branch", release, add_latest=True)
            self._add_dummy_false_commit(repo)
            branch_tips = {
                branch: self._read_branch_tip(repo, branch)
                for branch in (default, release)
            }
        finally:
            repo.close()

        self._log.info("fixture_built", commits=len(self._commits))
        tag_commit_map = MappingProxyType(dict(self._tag_commit_map))
        fixture = FixtureRepository(
            path=self._path,
            default_branch=default,
            release_branch=release,
            tag_commit_map=tag_commit_map,
            commits=tuple(self._commits),
            branch_tips=MappingProxyType(branch_tips),
        )
        return fixture, tag_commit_map

    # =========================================================================
    # Construction Steps
    # =========================================================================

    @contextmanager
    def _step(self, operation: str) -> Iterator[None]:
        """Convert any failure inside a construction step to InitializationError."""
        try:
            yield
        except InitializationError as e:
            self._log.error("fixture_step_failed", operation=operation, error=str(e))
            raise
        except Exception as e:
            msg = f"Fixture step '{operation}' failed in {self._path}: {e}"
            self._log.error("fixture_step_failed", operation=operation, error=str(e))
            raise InitializationError(msg, path=self._path, operation=operation) from e

    def _init_repo(self, default_branch: str) -> Repo:
        self._log.info("creating_repository", default_branch=default_branch)
        with self._step("init"):
            if self._path.exists() and any(self._path.iterdir()):
                msg = f"Fixture directory is not empty: {self._path}"
                raise InitializationError(msg, path=self._path, operation="init")
            self._path.mkdir(parents=True, exist_ok=True)
            repo = Repo.init(str(self._path))
            try:
                config = repo.get_config()
                config.set((b"commit",), b"gpgsign", False)
                config.set((b"tag",), b"gpgsign", False)
                config.write_to_path()
                repo.refs.set_symbolic_ref(_HEAD, _branch_ref(default_branch))
            except BaseException:
                repo.close()
                raise
        return repo

    def _checkout(self, repo: Repo, branch: str) -> None:
        """Point HEAD at `branch`.

        Only a branch whose tip is the current HEAD commit can be checked
        out, so the index and working tree never need updating.
        """
        target = _branch_ref(branch)
        if repo.refs.read_ref(_HEAD) == SYMREF + target:
            return
        if repo.refs[target] != repo.head():
            msg = f"Cannot check out {branch}: its tip differs from HEAD"
            raise InitializationError(msg, path=self._path, operation="checkout")
        repo.refs.set_symbolic_ref(_HEAD, target)

    def _commit(self, repo: Repo, file_name: str, branch: str) -> str:
        self._log.info("committing_file", file=file_name, branch=branch)
        with self._step("commit"):
            self._checkout(repo, branch)
            parent = self._read_branch_tip(repo, branch) if self._commits else None

            file_path = self._path / file_name
            _ = file_path.write_bytes(b"")
            _ = porcelain.add(repo, paths=[str(file_path)])

            sha = decode_bytes(
                porcelain.commit(
                    repo,
                    message=f"adding file {file_name}".encode(),
                    author=self._identity,
                    committer=self._identity,
                )
            )

        self._commits.append(
            FixtureCommit(file_name=file_name, branch=branch, sha=sha, parent=parent)
        )
        return sha

    def _commit_without_tag(
        self, repo: Repo, file_name: str, branch: str, *, add_latest: bool
    ) -> None:
        sha = self._commit(repo, file_name, branch)
        if add_latest:
            label = latest_label(branch)
            self._log.info("recording_latest_label", label=label, sha=sha)
            self._tag_commit_map[label] = sha

    def _commit_with_annotated_tag(
        self, repo: Repo, file_name: str, tag_name: str, branch: str
    ) -> None:
        sha = self._commit(repo, file_name, branch)
        self._log.info("creating_annotated_tag", tag=tag_name, sha=sha)
        with self._step("tag"):
            porcelain.tag_create(
                repo,
                tag_name.encode(),
                author=self._identity,
                message=file_name.encode(),
                annotated=True,
                objectish=sha.encode(),
            )
        self._tag_commit_map[tag_name] = sha

    def _commit_with_lightweight_tag(
        self, repo: Repo, file_name: str, tag_name: str, branch: str
    ) -> None:
        sha = self._commit(repo, file_name, branch)
        self._log.info("creating_lightweight_tag", tag=tag_name, sha=sha)
        with self._step("tag"):
            porcelain.tag_create(repo, tag_name.encode(), objectish=sha.encode())
        self._tag_commit_map[tag_name] = sha

    def _create_branch(self, repo: Repo, branch: str) -> None:
        self._log.info("creating_branch", branch=branch)
        with self._step("branch"):
            target = _branch_ref(branch)
            if target in repo.refs:
                msg = f"Branch already exists: {branch}"
                raise InitializationError(msg, path=self._path, operation="branch")
            porcelain.branch_create(repo, branch.encode(), objectish=repo.head())

    def _add_dummy_false_commit(self, repo: Repo) -> None:
        sha = secrets.token_hex(_SHA_HEX_LENGTH // 2)
        while sha.encode() in repo.object_store:
            sha = secrets.token_hex(_SHA_HEX_LENGTH // 2)
        self._log.info("recording_dummy_false_commit", sha=sha)
        self._tag_commit_map[DUMMY_FALSE_COMMIT] = sha

    def _read_branch_tip(self, repo: Repo, branch: str) -> str:
        with self._step("read_ref"):
            return decode_bytes(repo.refs[_branch_ref(branch)])


def build_fixture(
    directory: Path | str,
    *,
    config: HarnessConfig | None = None,
    logger: "FilteringBoundLogger | None" = None,
) -> tuple[FixtureRepository, TagCommitMap]:
    """Build the fixture repository in `directory`.

    Shorthand for ``FixtureBuilder(directory, ...).build()``.

    Raises:
        InitializationError: If the repository cannot be built.
    """
    return FixtureBuilder(directory, config=config, logger=logger).build()
