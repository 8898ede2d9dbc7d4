"""Local refs API backed by git log.

LocalRefsApi implements RefsApiProtocol without any network access: every
query runs git against a local working directory and reshapes the log
entries into the response objects a hosting API client returns.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Self

from bumpkit.exceptions import NotFoundError
from bumpkit.refs._convert import to_references, to_repository_commits
from bumpkit.refs._log import describe_hash, git_log
from bumpkit.refs._models import Reference, RepositoryCommit
from bumpkit.utils import create_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from bumpkit.config import HarnessConfig
    from bumpkit.fixture import FixtureRepository


class LocalRefsApi:
    """Refs API answering queries from a local repository.

    Each call runs a fresh git process; nothing is cached, so results always
    reflect the current state of the repository.

    Example:
        >>> fixture, tag_map = build_fixture(tmp_path / "repo")
        >>> api = LocalRefsApi.from_fixture(fixture)
        >>> ref = api.get_ref("acme", "widget", "tags/v0.0.1")
        >>> ref.target_hash == tag_map["v0.0.1"]
        True
    """

    __slots__ = ("_executable", "_log", "_repo_dir")

    def __init__(
        self,
        repo_dir: Path | str,
        *,
        executable: str = "git",
        logger: "FilteringBoundLogger | None" = None,
    ) -> None:
        """Bind the API to a repository working directory.

        Args:
            repo_dir: Repository working directory.
            executable: The git executable to run.
            logger: Logger for query events. Defaults to a stderr logger.
        """
        self._repo_dir: Path = Path(repo_dir)
        self._executable: str = executable
        base_logger = logger if logger is not None else create_logger()
        self._log: FilteringBoundLogger = base_logger.bind(
            repo_dir=str(self._repo_dir)
        )

    @classmethod
    def from_fixture(
        cls,
        fixture: "FixtureRepository",
        *,
        config: "HarnessConfig | None" = None,
        logger: "FilteringBoundLogger | None" = None,
    ) -> Self:
        """Create an API bound to a built fixture repository.

        Args:
            fixture: Handle returned by the fixture builder.
            config: Configuration supplying the git executable.
            logger: Logger for query events.

        Returns:
            A LocalRefsApi for the fixture's directory.
        """
        executable = config.git.executable if config is not None else "git"
        return cls(fixture.path, executable=executable, logger=logger)

    @property
    def repo_dir(self) -> Path:
        """The repository working directory queries run against."""
        return self._repo_dir

    def list_matching_refs(self, owner: str, repo: str, ref: str) -> list[Reference]:
        """List references whose name contains `ref`.

        ``owner`` and ``repo`` are accepted for compatibility and ignored.

        Raises:
            QueryError: If git fails or its output cannot be parsed.
        """
        _ = owner, repo
        records = git_log(self._repo_dir, executable=self._executable)
        references = to_references(records, ref)
        self._log.debug(
            "list_matching_refs",
            ref=ref,
            commits=len(records),
            matches=len(references),
        )
        return references

    def list_commits(
        self, owner: str, repo: str, sha: str = ""
    ) -> list[RepositoryCommit]:
        """List commits along the first-parent ancestry of `sha`.

        An empty `sha` lists the first-parent history of every branch. An
        unknown branch or SHA makes git exit with an error, which is raised
        as QueryError.

        Raises:
            QueryError: If git fails or its output cannot be parsed.
        """
        _ = owner, repo
        records = git_log(self._repo_dir, sha, executable=self._executable)
        self._log.debug("list_commits", sha=sha, commits=len(records))
        return to_repository_commits(records)

    def get_ref(self, owner: str, repo: str, ref: str) -> Reference:
        """Get the most recent reference whose name contains `ref`.

        Raises:
            NotFoundError: If no decorated commit matches `ref`.
            QueryError: If git fails or its output cannot be parsed.
        """
        references = self.list_matching_refs(owner, repo, ref)
        if not references:
            msg = f"reference {ref} not found"
            raise NotFoundError(msg, operation="get_ref", ref=ref)
        return references[0]

    def describe(self, commit_hash: str) -> str:
        """Describe a commit relative to the nearest reachable tag.

        Raises:
            QueryError: If git describe fails.
        """
        return describe_hash(
            self._repo_dir, commit_hash, executable=self._executable
        )
