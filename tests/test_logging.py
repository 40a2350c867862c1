"""Tests for the file log set up by the game loop."""

from __future__ import annotations

import logging

import pytest

from neon_rush.config.settings import GameSettings
from neon_rush.simulation.loop import initialise_logger


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("neon_rush")
    saved = list(logger.handlers)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved


def _runtime(tmp_path, level="INFO") -> GameSettings:
    return GameSettings().with_updates({"LOG_DIRECTORY": tmp_path / "logs", "DEBUG_LOG_LEVEL": level})


def test_log_file_is_appended_across_sessions(clean_logger, tmp_path):
    runtime = _runtime(tmp_path)
    log_path = tmp_path / "logs" / runtime.DEBUG_LOG_FILE
    log_path.parent.mkdir(parents=True)
    log_path.write_text("earlier session\n", encoding="utf-8")

    initialise_logger(runtime).info("new session line")
    for handler in clean_logger.handlers:
        handler.flush()

    content = log_path.read_text(encoding="utf-8")
    assert content.startswith("earlier session\n")
    assert "session start" in content
    assert "new session line" in content


def test_repeat_initialisation_keeps_one_handler(clean_logger, tmp_path):
    runtime = _runtime(tmp_path, level="DEBUG")
    initialise_logger(runtime)
    initialise_logger(runtime)
    assert len(clean_logger.handlers) == 1
    assert clean_logger.level == logging.DEBUG
