from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple

from ..world.types import Lane, Obstacle, PowerUp


class RunStatus(str, Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class BoostState:
    active: bool = False
    expires_at_ms: float = 0.0


@dataclass
class ComboHint:
    value: int
    expires_at_ms: float


@dataclass
class PlayerState:
    lane: Lane = Lane.CENTER
    lives: int = 3
    shield: bool = False
    boost: BoostState = field(default_factory=BoostState)
    combo: int = 0
    coins: int = 0
    score: int = 0
    distance: float = 0.0
    score_remainder: float = 0.0
    speed: float = 5.0


@dataclass
class RunState:
    status: RunStatus = RunStatus.PLAYING
    player: PlayerState = field(default_factory=PlayerState)
    obstacles: List[Obstacle] = field(default_factory=list)
    power_ups: List[PowerUp] = field(default_factory=list)
    last_obstacle_spawn_ms: Optional[float] = None
    last_power_up_spawn_ms: Optional[float] = None
    next_entity_id: int = 0
    speed_milestones: int = 0
    combo_hint: Optional[ComboHint] = None
    best_score: int = 0
    best_score_recorded: bool = False


@dataclass(frozen=True)
class RunSnapshot:
    """Detached, read-only view of a run handed to observers."""

    status: RunStatus
    tick: int
    time_ms: float
    player: PlayerState
    obstacles: Tuple[Obstacle, ...]
    power_ups: Tuple[PowerUp, ...]
    best_score: int
    effective_speed: float
    combo_hint: Optional[int]
    boost_remaining_ms: float

    @classmethod
    def capture(
        cls,
        state: RunState,
        *,
        tick: int,
        time_ms: float,
        effective_speed: float,
    ) -> "RunSnapshot":
        player = replace(state.player, boost=replace(state.player.boost))
        boost_remaining = 0.0
        if player.boost.active:
            boost_remaining = max(0.0, player.boost.expires_at_ms - time_ms)
        return cls(
            status=state.status,
            tick=tick,
            time_ms=time_ms,
            player=player,
            obstacles=tuple(replace(obstacle) for obstacle in state.obstacles),
            power_ups=tuple(replace(power_up) for power_up in state.power_ups),
            best_score=state.best_score,
            effective_speed=effective_speed,
            combo_hint=state.combo_hint.value if state.combo_hint else None,
            boost_remaining_ms=boost_remaining,
        )
