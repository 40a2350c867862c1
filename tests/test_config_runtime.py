"""Tests for the runtime configuration loader."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from neon_rush.config import settings


def _write_tmp_config(tmp_path: Path, content: str) -> Path:
    file_path = tmp_path / "conf.yaml"
    file_path.write_text(content, encoding="utf-8")
    return file_path


def test_defaults_match_reference_tuning():
    conf = settings.GameSettings()
    assert conf.BASE_SPEED == 5.0
    assert conf.MAX_SPEED == 15.0
    assert conf.BOOST_DURATION_MS == 3000.0
    assert conf.frame_ms == pytest.approx(1000 / 60)


def test_env_overrides_take_effect(monkeypatch):
    monkeypatch.setenv("NEON_RUSH_WINDOW_WIDTH", "1024")
    conf = settings.load_runtime_settings(args=[], env=os.environ)
    assert conf.WINDOW_WIDTH == 1024


def test_cli_overrides_take_precedence():
    conf = settings.load_runtime_settings(args=["--window-width", "480"])
    assert conf.WINDOW_WIDTH == 480


def test_config_file_used_when_provided(tmp_path):
    config = _write_tmp_config(tmp_path, "window_width: 640\nfps: 30\nseed: 42\n")
    conf = settings.load_runtime_settings(args=["--config", str(config)])
    assert conf.WINDOW_WIDTH == 640
    assert conf.FPS == 30
    assert conf.SEED == 42


def test_env_overrides_config(monkeypatch, tmp_path):
    config = _write_tmp_config(tmp_path, "window_width: 400\n")
    monkeypatch.setenv("NEON_RUSH_WINDOW_WIDTH", "450")
    conf = settings.load_runtime_settings(args=["--config", str(config)], env=os.environ)
    assert conf.WINDOW_WIDTH == 450


def test_cli_overrides_config_and_env(monkeypatch, tmp_path):
    config = _write_tmp_config(tmp_path, "window_width: 400\n")
    monkeypatch.setenv("NEON_RUSH_WINDOW_WIDTH", "450")
    conf = settings.load_runtime_settings(args=["--config", str(config), "--window-width", "470"], env=os.environ)
    assert conf.WINDOW_WIDTH == 470


def test_invalid_field_in_config_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "unknown_value: 1\n")
    with pytest.raises(ValueError, match="Unknown config field"):
        settings.load_runtime_settings(args=["--config", str(config)])


def test_missing_config_file_errors(tmp_path):
    missing = tmp_path / "missing.yaml"
    with pytest.raises(FileNotFoundError):
        settings.load_runtime_settings(args=["--config", str(missing)])


def test_invalid_numeric_range_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "double_obstacle_chance: 1.5\n")
    with pytest.raises(ValueError, match="DOUBLE_OBSTACLE_CHANCE"):
        settings.load_runtime_settings(args=["--config", str(config)])


def test_invalid_relationship_raises(tmp_path):
    config = _write_tmp_config(tmp_path, "base_speed: 20\nmax_speed: 10\n")
    with pytest.raises(ValueError, match="BASE_SPEED cannot exceed MAX_SPEED"):
        settings.load_runtime_settings(args=["--config", str(config)])


def test_log_level_is_normalised():
    conf = settings.load_runtime_settings(args=["--log-level", "debug"])
    assert conf.DEBUG_LOG_LEVEL == "DEBUG"
