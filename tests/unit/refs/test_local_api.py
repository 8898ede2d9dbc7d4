"""Unit tests for LocalRefsApi with git mocked out."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture
from structlog.testing import LogCapture
from structlog.typing import FilteringBoundLogger

from bumpkit.config import GitConfig, HarnessConfig
from bumpkit.exceptions import NotFoundError, QueryError
from bumpkit.refs import LocalRefsApi, RefsApiProtocol, RepositoryCommit


@pytest.fixture
def mock_run_git(mocker: MockerFixture, golden_log_output: str) -> MagicMock:
    return mocker.patch("bumpkit.refs._log.run_git", return_value=golden_log_output)


@pytest.fixture
def api(capturing_logger: FilteringBoundLogger) -> LocalRefsApi:
    return LocalRefsApi(Path("/repo"), logger=capturing_logger)


class TestLocalRefsApiProtocolConformance:
    def test_isinstance_refs_api_protocol(self, api: LocalRefsApi) -> None:
        assert isinstance(api, RefsApiProtocol) is True

    def test_repo_dir(self, api: LocalRefsApi) -> None:
        assert api.repo_dir == Path("/repo")


class TestListMatchingRefs:
    def test_queries_all_branches(
        self, api: LocalRefsApi, mock_run_git: MagicMock
    ) -> None:
        _ = api.list_matching_refs("owner", "repo", "tags/")

        args = mock_run_git.call_args.args[0]
        assert args[-1] == "--all"

    def test_returns_matching_references(
        self, api: LocalRefsApi, mock_run_git: MagicMock
    ) -> None:
        refs = api.list_matching_refs("owner", "repo", "tags/v0.0.2")

        assert [(r.ref, r.target_hash) for r in refs] == [
            ("refs/tags/v0.0.2", "2" * 40)
        ]

    def test_empty_when_nothing_matches(
        self, api: LocalRefsApi, mock_run_git: MagicMock
    ) -> None:
        assert api.list_matching_refs("owner", "repo", "tags/v9") == []

    def test_propagates_query_error(
        self, api: LocalRefsApi, mocker: MockerFixture
    ) -> None:
        _ = mocker.patch(
            "bumpkit.refs._log.run_git",
            side_effect=QueryError("git failed", operation="log"),
        )

        with pytest.raises(QueryError, match="git failed"):
            api.list_matching_refs("owner", "repo", "tags/")

    def test_logs_query(
        self, api: LocalRefsApi, mock_run_git: MagicMock, log_capture: LogCapture
    ) -> None:
        _ = api.list_matching_refs("owner", "repo", "refs/tags/")

        entry = log_capture.entries[-1]
        assert entry["event"] == "list_matching_refs"
        assert entry["matches"] == 2
        assert entry["repo_dir"] == "/repo"


class TestListCommits:
    def test_scopes_to_sha(self, api: LocalRefsApi, mock_run_git: MagicMock) -> None:
        commits = api.list_commits("owner", "repo", "master")

        assert mock_run_git.call_args.args[0][-1] == "master"
        assert commits == [
            RepositoryCommit(sha="3" * 40),
            RepositoryCommit(sha="2" * 40),
            RepositoryCommit(sha="1" * 40),
        ]

    def test_option_like_sha_passed_as_revision(
        self, api: LocalRefsApi, mock_run_git: MagicMock
    ) -> None:
        _ = api.list_commits("owner", "repo", "--since=2999-01-01")

        args = mock_run_git.call_args.args[0]
        assert args[-2:] == ["--end-of-options", "--since=2999-01-01"]

    def test_empty_sha_lists_all_branches(
        self, api: LocalRefsApi, mock_run_git: MagicMock
    ) -> None:
        _ = api.list_commits("owner", "repo")

        assert mock_run_git.call_args.args[0][-1] == "--all"

    def test_unknown_ref_raises_query_error(
        self, api: LocalRefsApi, mocker: MockerFixture
    ) -> None:
        _ = mocker.patch(
            "bumpkit.refs._log.run_git",
            side_effect=QueryError(
                "unknown revision", operation="log", stderr="fatal: bad revision"
            ),
        )

        with pytest.raises(QueryError) as exc_info:
            api.list_commits("owner", "repo", "no-such-branch")

        assert exc_info.value.stderr == "fatal: bad revision"


class TestGetRef:
    def test_returns_first_match(
        self, api: LocalRefsApi, mock_run_git: MagicMock
    ) -> None:
        ref = api.get_ref("owner", "repo", "refs/")

        assert ref.ref == "refs/heads/master"
        assert ref.target_hash == "3" * 40

    def test_raises_not_found(self, api: LocalRefsApi, mock_run_git: MagicMock) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            api.get_ref("owner", "repo", "dummy_false_commit")

        assert exc_info.value.ref == "dummy_false_commit"
        assert exc_info.value.operation == "get_ref"
        assert str(exc_info.value) == "reference dummy_false_commit not found"

    def test_not_found_is_key_error(
        self, api: LocalRefsApi, mock_run_git: MagicMock
    ) -> None:
        with pytest.raises(KeyError):
            api.get_ref("owner", "repo", "missing")


class TestDescribe:
    def test_delegates_to_git_describe(
        self, api: LocalRefsApi, mocker: MockerFixture
    ) -> None:
        run_git = mocker.patch("bumpkit.refs._log.run_git", return_value="v0.0.1\n")

        assert api.describe("abc") == "v0.0.1"
        args = run_git.call_args.args[0]
        assert args[2] == "describe"
        assert args[-2:] == ["--end-of-options", "abc"]


class TestFromFixture:
    def test_uses_configured_executable(
        self, mocker: MockerFixture, golden_log_output: str
    ) -> None:
        run_git = mocker.patch(
            "bumpkit.refs._log.run_git", return_value=golden_log_output
        )
        fixture = MagicMock()
        fixture.path = Path("/fixture")
        config = HarnessConfig(git=GitConfig(executable="/opt/git/bin/git"))

        api = LocalRefsApi.from_fixture(fixture, config=config)
        _ = api.list_commits("owner", "repo")

        assert api.repo_dir == Path("/fixture")
        assert run_git.call_args.kwargs["executable"] == "/opt/git/bin/git"
