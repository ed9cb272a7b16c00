import logging
from collections.abc import Generator

import pytest

from b64map.config.settings import Settings


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Default settings, unaffected by the caller's environment."""
    for name in (
        "LOG_LEVEL",
        "DEBUG",
        "PROGRESS_EVERY",
        "READ_CHUNK_SIZE",
        "IO_STRATEGY",
        "LINE_ENDING",
    ):
        monkeypatch.delenv(f"B64MAP_{name}", raising=False)
    return Settings()


@pytest.fixture(autouse=True)
def _reset_logger() -> Generator[None, None, None]:
    """Drop handlers bound to streams that CliRunner has since closed."""
    yield
    logger = logging.getLogger("b64map")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
