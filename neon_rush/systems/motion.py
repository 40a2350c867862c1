"""Longitudinal motion of live track entities."""

from __future__ import annotations

from ..config.constants import OBSTACLE_DESPAWN_MARGIN, POWER_UP_DESPAWN_MARGIN
from ..simulation.state import PlayerState, RunState


def effective_speed(player: PlayerState, boost_multiplier: float) -> float:
    """Base speed scaled by the boost multiplier while boost is active."""
    if player.boost.active:
        return player.speed * boost_multiplier
    return player.speed


def advance(state: RunState, delta: float, track_length: float) -> int:
    """Move every entity ``delta`` units toward the player and cull the ones
    that left the track. Returns the number of entities removed."""
    for obstacle in state.obstacles:
        obstacle.position += delta
    for power_up in state.power_ups:
        power_up.position += delta

    before = len(state.obstacles) + len(state.power_ups)
    obstacle_limit = track_length + OBSTACLE_DESPAWN_MARGIN
    power_up_limit = track_length + POWER_UP_DESPAWN_MARGIN
    state.obstacles[:] = [obs for obs in state.obstacles if obs.position < obstacle_limit]
    state.power_ups[:] = [pu for pu in state.power_ups if pu.position < power_up_limit]
    return before - len(state.obstacles) - len(state.power_ups)
