import shutil
import sys

import pytest

PYTHON = sys.executable


@pytest.fixture(scope="session", autouse=True)
def _require_posix_tools() -> None:
    for tool in ("cat", "false"):
        if shutil.which(tool) is None:
            pytest.skip(f"'{tool}' is not available on PATH")


@pytest.fixture()
def python_filter() -> list[str]:
    """Command prefix that runs an inline Python script as the filter program."""
    return [PYTHON, "-c"]
