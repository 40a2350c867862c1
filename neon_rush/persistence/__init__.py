"""Best-score persistence."""

from __future__ import annotations

from .storage import JsonFileStore, KeyValueStore, MemoryStore, load_best_score, save_best_score

__all__ = ["JsonFileStore", "KeyValueStore", "MemoryStore", "load_best_score", "save_best_score"]
