"""Configuration constants for the Neon Rush simulation."""

from __future__ import annotations

import argparse
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

import yaml

from .constants import DEFAULTS

_PATH_FIELDS = {"LOG_DIRECTORY", "HIGH_SCORE_FILE"}
_STRING_FIELDS = {"DEBUG_LOG_FILE", "DEBUG_LOG_LEVEL"}
_OPTIONAL_INT_FIELDS = {"SEED"}
_FLOAT_FIELDS = {
    "BASE_SPEED",
    "MAX_SPEED",
    "SPEED_STEP",
    "SPEEDUP_DISTANCE",
    "BOOST_MULTIPLIER",
    "BOOST_DURATION_MS",
    "COMBO_HINT_MS",
    "OBSTACLE_BASE_INTERVAL_MS",
    "OBSTACLE_INTERVAL_DECAY_MS",
    "OBSTACLE_INTERVAL_FLOOR_MS",
    "DOUBLE_OBSTACLE_CHANCE",
    "POWER_UP_INTERVAL_MS",
    "MAX_FRAME_MS",
}

WINDOW_WIDTH = DEFAULTS["WINDOW_WIDTH"]
WINDOW_HEIGHT = DEFAULTS["WINDOW_HEIGHT"]
LANE_WIDTH = DEFAULTS["LANE_WIDTH"]
TRACK_LENGTH = DEFAULTS["TRACK_LENGTH"]

FPS = 60

MAX_LIVES = 3
BASE_SPEED = 5.0
MAX_SPEED = 15.0
SPEED_STEP = 0.5
SPEEDUP_DISTANCE = 500.0

BOOST_MULTIPLIER = 1.5
BOOST_DURATION_MS = 3000.0
COMBO_HINT_MS = 500.0
COIN_SCORE = 100

OBSTACLE_BASE_INTERVAL_MS = 1500.0
OBSTACLE_INTERVAL_DECAY_MS = 50.0
OBSTACLE_INTERVAL_FLOOR_MS = 500.0
DOUBLE_OBSTACLE_CHANCE = 0.3
POWER_UP_INTERVAL_MS = 5000.0

MAX_FRAME_MS = 250.0
SEED: Optional[int] = None

CONFIG_ENV_VAR = "NEON_RUSH_CONFIG_FILE"
DEFAULT_CONFIG_FILE = Path("configs/default.yaml")
LOG_DIRECTORY = Path(os.getenv("NEON_RUSH_LOG_DIR", "logs"))
DEBUG_LOG_FILE = os.getenv("NEON_RUSH_DEBUG_LOG", "neon_rush.log")
DEBUG_LOG_LEVEL = os.getenv("NEON_RUSH_DEBUG_LOG_LEVEL", "INFO")
HIGH_SCORE_FILE = Path(os.getenv("NEON_RUSH_HIGH_SCORE_FILE", "neon_rush_scores.json"))


@dataclass(frozen=True)
class GameSettings:
    WINDOW_WIDTH: int = WINDOW_WIDTH
    WINDOW_HEIGHT: int = WINDOW_HEIGHT
    LANE_WIDTH: int = LANE_WIDTH
    TRACK_LENGTH: int = TRACK_LENGTH
    FPS: int = FPS
    MAX_LIVES: int = MAX_LIVES
    BASE_SPEED: float = BASE_SPEED
    MAX_SPEED: float = MAX_SPEED
    SPEED_STEP: float = SPEED_STEP
    SPEEDUP_DISTANCE: float = SPEEDUP_DISTANCE
    BOOST_MULTIPLIER: float = BOOST_MULTIPLIER
    BOOST_DURATION_MS: float = BOOST_DURATION_MS
    COMBO_HINT_MS: float = COMBO_HINT_MS
    COIN_SCORE: int = COIN_SCORE
    OBSTACLE_BASE_INTERVAL_MS: float = OBSTACLE_BASE_INTERVAL_MS
    OBSTACLE_INTERVAL_DECAY_MS: float = OBSTACLE_INTERVAL_DECAY_MS
    OBSTACLE_INTERVAL_FLOOR_MS: float = OBSTACLE_INTERVAL_FLOOR_MS
    DOUBLE_OBSTACLE_CHANCE: float = DOUBLE_OBSTACLE_CHANCE
    POWER_UP_INTERVAL_MS: float = POWER_UP_INTERVAL_MS
    MAX_FRAME_MS: float = MAX_FRAME_MS
    SEED: Optional[int] = SEED
    LOG_DIRECTORY: Path = LOG_DIRECTORY
    DEBUG_LOG_FILE: str = DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL: str = DEBUG_LOG_LEVEL
    HIGH_SCORE_FILE: Path = HIGH_SCORE_FILE

    @property
    def frame_ms(self) -> float:
        return 1000.0 / self.FPS

    def with_updates(self, overrides: Dict[str, Any]) -> "GameSettings":
        merged = asdict(self)
        merged.update(overrides)
        _validate_settings_dict(merged)
        return GameSettings(**merged)


_ACTIVE_SETTINGS = GameSettings()
_ENV_VARS: Dict[str, str] = {
    "WINDOW_WIDTH": "NEON_RUSH_WINDOW_WIDTH",
    "WINDOW_HEIGHT": "NEON_RUSH_WINDOW_HEIGHT",
    "LANE_WIDTH": "NEON_RUSH_LANE_WIDTH",
    "FPS": "NEON_RUSH_FPS",
    "MAX_LIVES": "NEON_RUSH_MAX_LIVES",
    "BASE_SPEED": "NEON_RUSH_BASE_SPEED",
    "MAX_SPEED": "NEON_RUSH_MAX_SPEED",
    "BOOST_DURATION_MS": "NEON_RUSH_BOOST_DURATION_MS",
    "POWER_UP_INTERVAL_MS": "NEON_RUSH_POWER_UP_INTERVAL_MS",
    "SEED": "NEON_RUSH_SEED",
    "LOG_DIRECTORY": "NEON_RUSH_LOG_DIR",
    "DEBUG_LOG_FILE": "NEON_RUSH_DEBUG_LOG",
    "DEBUG_LOG_LEVEL": "NEON_RUSH_DEBUG_LOG_LEVEL",
    "HIGH_SCORE_FILE": "NEON_RUSH_HIGH_SCORE_FILE",
}


def _coerce(value: str, field: str) -> Any:
    if field in _PATH_FIELDS:
        return Path(value)
    if field in _STRING_FIELDS:
        return value
    if field in _OPTIONAL_INT_FIELDS:
        return int(value) if value.strip() else None
    if field in _FLOAT_FIELDS:
        return float(value)
    return int(value)


def _collect_env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field, env_name in _ENV_VARS.items():
        raw = env.get(env_name)
        if raw is not None:
            overrides[field] = _coerce(raw, field)
    return overrides


def _normalize_numeric(value: Any, caster: type[float | int]) -> float | int:
    if isinstance(value, bool):
        raise ValueError("Invalid numeric value in config")
    if isinstance(value, (int, float)):
        return caster(value)
    if isinstance(value, str):
        return caster(float(value) if caster is float else int(float(value)))
    raise ValueError("Invalid numeric value in config")


def _normalize_config_value(field: str, value: Any) -> Any:
    if field in _PATH_FIELDS:
        if isinstance(value, Path):
            return value
        if isinstance(value, str):
            return Path(value)
        raise ValueError(f"Field {field} must be a path or string")
    if field in _STRING_FIELDS:
        if isinstance(value, str):
            return value
        raise ValueError(f"Field {field} must be a string")
    if field in _OPTIONAL_INT_FIELDS:
        if value is None:
            return None
        return int(_normalize_numeric(value, int))
    if field in _FLOAT_FIELDS:
        return float(_normalize_numeric(value, float))
    return int(_normalize_numeric(value, int))


_NUMERIC_BOUNDS: Dict[str, tuple[float, float]] = {
    "WINDOW_WIDTH": (200, 7680),
    "WINDOW_HEIGHT": (200, 4320),
    "LANE_WIDTH": (20, 400),
    "TRACK_LENGTH": (200, 4000),
    "FPS": (1, 360),
    "MAX_LIVES": (1, 9),
    "BASE_SPEED": (0.5, 100.0),
    "MAX_SPEED": (0.5, 100.0),
    "SPEED_STEP": (0.0, 10.0),
    "SPEEDUP_DISTANCE": (1.0, 100000.0),
    "BOOST_MULTIPLIER": (1.0, 5.0),
    "BOOST_DURATION_MS": (0.0, 60000.0),
    "COMBO_HINT_MS": (0.0, 10000.0),
    "COIN_SCORE": (0, 100000),
    "OBSTACLE_BASE_INTERVAL_MS": (50.0, 60000.0),
    "OBSTACLE_INTERVAL_DECAY_MS": (0.0, 1000.0),
    "OBSTACLE_INTERVAL_FLOOR_MS": (50.0, 60000.0),
    "DOUBLE_OBSTACLE_CHANCE": (0.0, 1.0),
    "POWER_UP_INTERVAL_MS": (50.0, 600000.0),
    "MAX_FRAME_MS": (1.0, 5000.0),
}

_CHOICE_FIELDS: Dict[str, set[str]] = {
    "DEBUG_LOG_LEVEL": {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
}


def _validate_settings_dict(values: Dict[str, Any]) -> None:
    for field, (lower, upper) in _NUMERIC_BOUNDS.items():
        current = values.get(field)
        if current is None:
            continue
        if not (lower <= current <= upper):
            raise ValueError(f"{field} must be between {lower} and {upper}, got {current}")
    for field, choices in _CHOICE_FIELDS.items():
        current = values.get(field)
        if current is None:
            continue
        if isinstance(current, str) and current.upper() in choices:
            values[field] = current.upper()
            continue
        raise ValueError(f"{field} must be one of {sorted(choices)} (got {current})")
    _validate_relationships(values)


def _validate_relationships(values: Mapping[str, Any]) -> None:
    base_speed = values.get("BASE_SPEED")
    max_speed = values.get("MAX_SPEED")
    if base_speed and max_speed and base_speed > max_speed:
        raise ValueError("BASE_SPEED cannot exceed MAX_SPEED")
    floor = values.get("OBSTACLE_INTERVAL_FLOOR_MS")
    base_interval = values.get("OBSTACLE_BASE_INTERVAL_MS")
    if floor and base_interval and floor > base_interval:
        raise ValueError("OBSTACLE_INTERVAL_FLOOR_MS cannot exceed OBSTACLE_BASE_INTERVAL_MS")
    window_width = values.get("WINDOW_WIDTH")
    lane_width = values.get("LANE_WIDTH")
    if window_width and lane_width and lane_width * 3 > window_width:
        raise ValueError("Three lanes of LANE_WIDTH must fit inside WINDOW_WIDTH")


def _load_config_overrides(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise ValueError(f"Invalid YAML in config file {path}") from error
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must define a mapping")
    valid_fields = set(GameSettings.__dataclass_fields__.keys())
    overrides: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = str(raw_key).upper()
        if key not in valid_fields:
            raise ValueError(f"Unknown config field: {raw_key}")
        overrides[key] = _normalize_config_value(key, value)
    return overrides


def _resolve_config_path(cli_value: str | None, env: Mapping[str, str]) -> Path | None:
    candidate_strings = [cli_value, env.get(CONFIG_ENV_VAR)]
    for candidate in candidate_strings:
        if not candidate:
            continue
        path = Path(candidate).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path
    if DEFAULT_CONFIG_FILE.exists():
        return DEFAULT_CONFIG_FILE
    return None


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Neon Rush with runtime overrides")
    parser.add_argument("--config", type=str, help="Path to a YAML config file with runtime settings")
    parser.add_argument("--window-width", type=int, help="Window width in pixels")
    parser.add_argument("--window-height", type=int, help="Window height in pixels")
    parser.add_argument("--fps", type=int, help="Target frames per second")
    parser.add_argument("--max-lives", type=int, help="Lives at the start of a run")
    parser.add_argument("--base-speed", type=float, help="Starting speed")
    parser.add_argument("--max-speed", type=float, help="Speed ceiling")
    parser.add_argument("--seed", type=int, help="Seed for the spawn random source")
    parser.add_argument("--high-score-file", type=str, help="JSON file holding the best score")
    parser.add_argument("--log-level", type=str, help="Debug log level")
    return parser


def load_runtime_settings(args: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> GameSettings:
    env_mapping = env or os.environ
    parser = _build_arg_parser()
    parsed = parser.parse_args(args=args)
    overrides: Dict[str, Any] = {}
    config_path = _resolve_config_path(parsed.config, env_mapping)
    if config_path is not None:
        overrides.update(_load_config_overrides(config_path))
    overrides.update(_collect_env_overrides(env_mapping))
    cli_mapping = {
        "WINDOW_WIDTH": parsed.window_width,
        "WINDOW_HEIGHT": parsed.window_height,
        "FPS": parsed.fps,
        "MAX_LIVES": parsed.max_lives,
        "BASE_SPEED": parsed.base_speed,
        "MAX_SPEED": parsed.max_speed,
        "SEED": parsed.seed,
        "HIGH_SCORE_FILE": None if parsed.high_score_file is None else Path(parsed.high_score_file),
        "DEBUG_LOG_LEVEL": parsed.log_level,
    }
    overrides.update({k: v for k, v in cli_mapping.items() if v is not None})
    return _ACTIVE_SETTINGS.with_updates(overrides)


def apply_runtime_settings(new_settings: GameSettings) -> GameSettings:
    global _ACTIVE_SETTINGS
    global WINDOW_WIDTH, WINDOW_HEIGHT, FPS
    global LOG_DIRECTORY, DEBUG_LOG_FILE, DEBUG_LOG_LEVEL, HIGH_SCORE_FILE

    _ACTIVE_SETTINGS = new_settings
    WINDOW_WIDTH = new_settings.WINDOW_WIDTH
    WINDOW_HEIGHT = new_settings.WINDOW_HEIGHT
    FPS = new_settings.FPS
    LOG_DIRECTORY = new_settings.LOG_DIRECTORY
    DEBUG_LOG_FILE = new_settings.DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL = new_settings.DEBUG_LOG_LEVEL
    HIGH_SCORE_FILE = new_settings.HIGH_SCORE_FILE
    return _ACTIVE_SETTINGS


def current_settings() -> GameSettings:
    return _ACTIVE_SETTINGS
