"""Simulation package containing the run controller, clock and state."""

from __future__ import annotations

from .commands import Command
from .state import RunSnapshot, RunState, RunStatus

__all__ = [
    "Command",
    "RunSnapshot",
    "RunState",
    "RunStatus",
    "clock",
    "engine",
    "loop",
]
