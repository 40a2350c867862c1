"""Procedural spawning of obstacles and power-ups."""

from __future__ import annotations

import random
from typing import List

from ..config.constants import POWER_UP_SIZE, POWER_UP_WEIGHTS
from ..config.settings import GameSettings
from ..simulation.clock import TickInput
from ..simulation.state import RunState
from ..world.types import Entity, Lane, Obstacle, ObstacleKind, PowerUp, PowerUpKind

_LANES = list(Lane)
_OBSTACLE_KINDS = list(ObstacleKind)
_POWER_UP_KINDS = [PowerUpKind(name) for name in POWER_UP_WEIGHTS]
_POWER_UP_WEIGHTS = [POWER_UP_WEIGHTS[kind.value] for kind in _POWER_UP_KINDS]


class Spawner:
    """Emits obstacle batches and power-ups on two independent cadences.

    All randomness is drawn from ``rng`` so a seeded ``random.Random`` gives a
    reproducible spawn sequence.
    """

    def __init__(self, settings: GameSettings, rng: random.Random) -> None:
        self.settings = settings
        self.rng = rng

    def obstacle_interval(self, speed: float) -> float:
        interval = self.settings.OBSTACLE_BASE_INTERVAL_MS - speed * self.settings.OBSTACLE_INTERVAL_DECAY_MS
        return max(interval, self.settings.OBSTACLE_INTERVAL_FLOOR_MS)

    def spawn(self, state: RunState, tick: TickInput) -> List[Entity]:
        spawned: List[Entity] = []
        now = tick.now_ms

        last = state.last_obstacle_spawn_ms
        if last is None or now - last > self.obstacle_interval(state.player.speed):
            batch = self._obstacle_batch(state)
            state.obstacles.extend(batch)
            spawned.extend(batch)
            state.last_obstacle_spawn_ms = now

        last = state.last_power_up_spawn_ms
        if last is None or now - last > self.settings.POWER_UP_INTERVAL_MS:
            power_up = self._power_up(state)
            state.power_ups.append(power_up)
            spawned.append(power_up)
            state.last_power_up_spawn_ms = now

        return spawned

    def _obstacle_batch(self, state: RunState) -> List[Obstacle]:
        count = 2 if self.rng.random() < self.settings.DOUBLE_OBSTACLE_CHANCE else 1
        batch = []
        for lane in self.rng.sample(_LANES, count):
            kind = self.rng.choice(_OBSTACLE_KINDS)
            batch.append(Obstacle(id=_next_id(state), lane=lane, position=-float(kind.height), kind=kind))
        return batch

    def _power_up(self, state: RunState) -> PowerUp:
        lane = self.rng.choice(_LANES)
        kind = self.rng.choices(_POWER_UP_KINDS, weights=_POWER_UP_WEIGHTS, k=1)[0]
        return PowerUp(id=_next_id(state), lane=lane, position=-float(POWER_UP_SIZE), kind=kind)


def _next_id(state: RunState) -> int:
    entity_id = state.next_entity_id
    state.next_entity_id += 1
    return entity_id
