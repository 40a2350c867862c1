"""Player/entity overlap tests and their consequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..config.constants import HITBOX_WIDTH_RATIO, PLAYER_BOTTOM_MARGIN, PLAYER_HEIGHT, POWER_UP_BAND_MARGIN
from ..config.settings import GameSettings
from ..simulation.state import RunState, RunStatus
from ..world.types import Lane, Obstacle, PowerUp
from . import effects
from .events import COMBO_TRIGGERED, LIFE_LOST, POWER_UP_COLLECTED, GameEvent


@dataclass(frozen=True)
class Hitbox:
    """Fixed player region: a lane-centred span and a band near the track end."""

    center_x: float
    half_width: float
    top: float
    height: float

    @classmethod
    def for_lane(cls, lane: Lane, settings: GameSettings) -> "Hitbox":
        return cls(
            center_x=lane.offset(settings.LANE_WIDTH),
            half_width=settings.LANE_WIDTH * HITBOX_WIDTH_RATIO,
            top=settings.TRACK_LENGTH - PLAYER_HEIGHT - PLAYER_BOTTOM_MARGIN,
            height=PLAYER_HEIGHT,
        )

    def overlaps(self, lane: Lane, position: float, extent: float, lane_width: float) -> bool:
        if abs(lane.offset(lane_width) - self.center_x) >= self.half_width:
            return False
        return self.top - extent < position < self.top + self.height


class CollisionResolver:
    def __init__(self, settings: GameSettings) -> None:
        self.settings = settings

    def obstacle_hits(self, state: RunState, obstacle: Obstacle) -> bool:
        hitbox = Hitbox.for_lane(state.player.lane, self.settings)
        return hitbox.overlaps(obstacle.lane, obstacle.position, obstacle.height, self.settings.LANE_WIDTH)

    def power_up_hits(self, state: RunState, power_up: PowerUp) -> bool:
        hitbox = Hitbox.for_lane(state.player.lane, self.settings)
        return hitbox.overlaps(power_up.lane, power_up.position, POWER_UP_BAND_MARGIN, self.settings.LANE_WIDTH)

    def resolve(self, state: RunState, now_ms: float) -> List[GameEvent]:
        """Resolve this tick's overlaps in insertion order.

        Every overlapping obstacle counts as its own hit, so one tick can
        cost several lives; the shield only covers the first of them.
        Resolution stops as soon as the run is lost.
        """
        events: List[GameEvent] = []
        player = state.player

        for obstacle in list(state.obstacles):
            if not self.obstacle_hits(state, obstacle):
                continue
            state.obstacles.remove(obstacle)
            if player.shield:
                combo = effects.absorb_hit(state, now_ms, self.settings)
                events.append(GameEvent(COMBO_TRIGGERED, combo, now_ms))
                continue
            player.lives = max(0, player.lives - 1)
            effects.break_combo(state)
            events.append(GameEvent(LIFE_LOST, player.lives, now_ms))
            if player.lives == 0:
                state.status = RunStatus.GAME_OVER
                return events

        for power_up in list(state.power_ups):
            if not self.power_up_hits(state, power_up):
                continue
            state.power_ups.remove(power_up)
            effects.apply_power_up(state, power_up.kind, now_ms, self.settings)
            events.append(GameEvent(POWER_UP_COLLECTED, power_up.kind.value, now_ms))

        return events
