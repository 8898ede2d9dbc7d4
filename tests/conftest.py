"""Shared test fixtures for bumpkit tests."""

import os
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import LogCapture
from structlog.typing import FilteringBoundLogger

from bumpkit.utils import close_log_files

# Output of `git log --pretty=format:<GIT_LOG_FORMAT>` for a three commit
# history, exactly as git prints it: entries separated by newlines, the last
# one followed by the stray separator and no newline.
GOLDEN_LOG_OUTPUT = (
    '{"commit": "3333333333333333333333333333333333333333", '
    '"parent": "2222222222222222222222222222222222222222", '
    '"refs": "HEAD -> refs/heads/master", "subject": "adding file latest_master", '
    '"author": {"name": "John Doe", "email": "john@doe.org", '
    '"date": "2026-10-18T12:00:02+02:00"}, '
    '"committer": {"name": "John Doe", "email": "john@doe.org", '
    '"date": "2026-10-18T12:00:02+02:00"}},\n'
    '{"commit": "2222222222222222222222222222222222222222", '
    '"parent": "1111111111111111111111111111111111111111", '
    '"refs": "tag: refs/tags/v0.0.2, tag: refs/tags/v0.0.1", '
    '"subject": "adding file tagged_annotated", '
    '"author": {"name": "John Doe", "email": "john@doe.org", '
    '"date": "2026-10-18T12:00:01+02:00"}, '
    '"committer": {"name": "John Doe", "email": "john@doe.org", '
    '"date": "2026-10-18T12:00:01+02:00"}},\n'
    '{"commit": "1111111111111111111111111111111111111111", '
    '"parent": "", "refs": "", "subject": "adding file static", '
    '"author": {"name": "John Doe", "email": "john@doe.org", '
    '"date": "2026-10-18T12:00:00+02:00"}, '
    '"committer": {"name": "John Doe", "email": "john@doe.org", '
    '"date": "2026-10-18T12:00:00+02:00"}},'
)


@pytest.fixture
def golden_log_output() -> str:
    """Structured git log output for a small three commit history."""
    return GOLDEN_LOG_OUTPUT


@pytest.fixture
def log_capture() -> LogCapture:
    """Capture structlog events emitted by loggers built from it."""
    return LogCapture()


@pytest.fixture
def capturing_logger(
    log_capture: LogCapture,
) -> FilteringBoundLogger:
    """A standalone logger that records events into ``log_capture``."""
    return structlog.wrap_logger(
        structlog.ReturnLogger(),
        processors=[log_capture],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
    )


@pytest.fixture(autouse=True)
def _close_log_files() -> Iterator[None]:
    """Close log files opened during a test so the next test reopens them."""
    yield
    close_log_files()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove BUMPKIT_* variables so tests see only what they set."""
    for key in list(os.environ):
        if key.startswith("BUMPKIT_"):
            monkeypatch.delenv(key)
    return monkeypatch
