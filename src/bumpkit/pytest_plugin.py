"""pytest fixtures for tests that need the fixture repository.

Registered through the ``pytest11`` entry point, so installing bumpkit makes
these fixtures available to every test suite:

    def test_latest_release(local_refs_api, tag_commit_map):
        ref = local_refs_api.get_ref("acme", "widget", "tags/v1.0.1")
        assert ref.target_hash == tag_commit_map["v1.0.1"]

Each test gets its own repository under ``tmp_path``. Settings come from
``[tool.bumpkit]`` in the project's pyproject.toml, ``bumpkit.toml`` at the
pytest root directory and ``BUMPKIT_*`` environment variables.
"""

from pathlib import Path

import pytest

from bumpkit.config import HarnessConfig, load_config
from bumpkit.fixture import FixtureRepository, TagCommitMap, build_fixture
from bumpkit.refs import LocalRefsApi


@pytest.fixture
def bumpkit_config(pytestconfig: pytest.Config) -> HarnessConfig:
    """Configuration loaded for the project under test.

    Override this fixture to pin settings for a test module.
    """
    return load_config(project_root=pytestconfig.rootpath)


@pytest.fixture
def fixture_build(
    tmp_path: Path, bumpkit_config: HarnessConfig
) -> tuple[FixtureRepository, TagCommitMap]:
    """Build the fixture repository in ``tmp_path / "repo"``."""
    return build_fixture(tmp_path / "repo", config=bumpkit_config)


@pytest.fixture
def fixture_repo(
    fixture_build: tuple[FixtureRepository, TagCommitMap],
) -> FixtureRepository:
    """Handle to the fixture repository."""
    return fixture_build[0]


@pytest.fixture
def tag_commit_map(
    fixture_build: tuple[FixtureRepository, TagCommitMap],
) -> TagCommitMap:
    """Tag/commit map of the fixture repository."""
    return fixture_build[1]


@pytest.fixture
def local_refs_api(
    fixture_repo: FixtureRepository, bumpkit_config: HarnessConfig
) -> LocalRefsApi:
    """LocalRefsApi bound to the fixture repository."""
    return LocalRefsApi.from_fixture(fixture_repo, config=bumpkit_config)
