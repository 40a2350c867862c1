"""Timing utilities for the simulation package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TickInput:
    """Simulation advance produced by one clock step."""

    tick: int
    elapsed_ms: float
    scale: float
    now_ms: float


class Clock:
    """Accumulates simulation time and scales deltas to the reference frame.

    ``scale`` is the elapsed time expressed in reference frames, so per-frame
    quantities (speed, score accrual) multiplied by it stay frame-rate
    independent. Time only moves when :meth:`advance` is called, which the
    run controller does for playing ticks only.
    """

    def __init__(self, frame_ms: float, max_elapsed_ms: float) -> None:
        self.frame_ms = frame_ms
        self.max_elapsed_ms = max_elapsed_ms
        self.now_ms = 0.0
        self.tick = 0

    def advance(self, elapsed_ms: Optional[float] = None) -> TickInput:
        if elapsed_ms is None:
            elapsed = self.frame_ms
        else:
            elapsed = min(max(0.0, float(elapsed_ms)), self.max_elapsed_ms)
        self.now_ms += elapsed
        self.tick += 1
        return TickInput(
            tick=self.tick,
            elapsed_ms=elapsed,
            scale=elapsed / self.frame_ms,
            now_ms=self.now_ms,
        )

    def reset(self) -> None:
        self.now_ms = 0.0
        self.tick = 0
