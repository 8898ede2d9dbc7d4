"""Unit tests for the exception hierarchy."""

from pathlib import Path

import pytest

from bumpkit.exceptions import (
    BumpkitError,
    ConfigError,
    ConfigLoadError,
    InitializationError,
    NotFoundError,
    QueryError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [InitializationError, QueryError, NotFoundError, ConfigError, ConfigLoadError],
    )
    def test_all_derive_from_base(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, BumpkitError)

    def test_not_found_is_key_error(self) -> None:
        assert issubclass(NotFoundError, KeyError)

    def test_query_error_is_not_not_found(self) -> None:
        assert not issubclass(QueryError, NotFoundError)


class TestAttributes:
    def test_initialization_error(self) -> None:
        err = InitializationError("boom", path=Path("/repo"), operation="commit")

        assert str(err) == "boom"
        assert err.path == Path("/repo")
        assert err.operation == "commit"

    def test_query_error_command_is_tuple(self) -> None:
        err = QueryError("boom", operation="log", command=["git", "log"])

        assert err.command == ("git", "log")
        assert err.stderr is None

    def test_not_found_str_is_plain_message(self) -> None:
        err = NotFoundError("reference x not found", operation="get_ref", ref="x")

        assert str(err) == "reference x not found"
        assert err.ref == "x"

    def test_config_load_error_location(self) -> None:
        err = ConfigLoadError("bad", path=Path("a.toml"), line=3, column=7)

        assert (err.line, err.column) == (3, 7)
