import shutil
from pathlib import Path

import pytest

_GIT_MISSING = shutil.which("git") is None


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)
            if _GIT_MISSING:
                item.add_marker(pytest.mark.skip(reason="git executable not found"))
