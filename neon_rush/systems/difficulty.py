"""Speed ramp driven by accumulated distance."""

from __future__ import annotations

import math

from ..config.settings import GameSettings
from ..simulation.state import RunState


def update_speed(state: RunState, settings: GameSettings) -> bool:
    """Reward every newly crossed distance milestone with one speed step.

    Milestones are counted, not detected from the per-tick delta, so a
    threshold pays out exactly once however far a tick overshoots it.
    Returns True when the speed changed.
    """
    player = state.player
    milestones = int(math.floor(player.distance / settings.SPEEDUP_DISTANCE))
    crossed = milestones - state.speed_milestones
    if crossed <= 0:
        return False
    state.speed_milestones = milestones
    new_speed = min(settings.MAX_SPEED, player.speed + settings.SPEED_STEP * crossed)
    if new_speed == player.speed:
        return False
    player.speed = new_speed
    return True
