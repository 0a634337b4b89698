from __future__ import annotations

import logging
import time
from collections.abc import Iterator

import pytest

from filetimes import config
from filetimes.codepoints import release_default_decoder
from filetimes.messages import LOGGER_NAME


@pytest.fixture
def minus_two_tz() -> Iterator[None]:
    """Pin the local zone to a fixed UTC-02:00 offset (POSIX TZ signs are reversed)."""
    with pytest.MonkeyPatch.context() as mp:
        mp.setenv("TZ", "XXX+02:00")
        time.tzset()
        yield
    time.tzset()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "CONFIG_FILE", tmp_path / "filetimes.toml")


@pytest.fixture(autouse=True)
def fresh_decoder() -> Iterator[None]:
    yield
    release_default_decoder()


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    logger = logging.getLogger(LOGGER_NAME)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
