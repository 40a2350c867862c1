"""Persistence helpers for the best score."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger("neon_rush.storage")


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[int]:
        """Return the stored integer, or None when absent or unreadable."""

    def set(self, key: str, value: int) -> None:
        """Store ``value`` under ``key``; failures must not raise."""


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, int]] = None) -> None:
        self.values: Dict[str, int] = dict(initial or {})

    def get(self, key: str) -> Optional[int]:
        return self.values.get(key)

    def set(self, key: str, value: int) -> None:
        self.values[key] = int(value)


class JsonFileStore:
    """Integer values kept in a small JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError) as exc:
            logger.warning("Unable to read score file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Score file %s does not hold a JSON object; ignoring it", self.path)
            return {}
        return data

    def get(self, key: str) -> Optional[int]:
        raw = self._read_all().get(key)
        if raw is None:
            return None
        try:
            return int(raw)
        except (TypeError, ValueError):
            logger.warning("Stored value for %s is not an integer: %r", key, raw)
            return None

    def set(self, key: str, value: int) -> None:
        data = self._read_all()
        data[key] = int(value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2)
        except OSError as exc:
            logger.warning("Unable to write score file %s: %s", self.path, exc)


def load_best_score(store: KeyValueStore, key: str) -> int:
    try:
        value = store.get(key)
    except Exception as exc:
        logger.warning("Best score lookup failed: %s", exc)
        return 0
    if value is None or value < 0:
        return 0
    return int(value)


def save_best_score(store: KeyValueStore, key: str, value: int) -> None:
    try:
        store.set(key, value)
    except Exception as exc:
        logger.warning("Best score write failed: %s", exc)
