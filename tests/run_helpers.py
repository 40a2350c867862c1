"""Shared builders for run controller tests."""

from __future__ import annotations

import random
from typing import Optional

from neon_rush.config.settings import GameSettings
from neon_rush.persistence.storage import KeyValueStore, MemoryStore
from neon_rush.simulation.engine import RunController
from neon_rush.world.types import Lane, Obstacle, ObstacleKind, PowerUp, PowerUpKind

# Pushes both spawn cadences out of reach so tests control every entity.
QUIET_SPAWNS = {
    "OBSTACLE_BASE_INTERVAL_MS": 60000.0,
    "OBSTACLE_INTERVAL_FLOOR_MS": 60000.0,
    "POWER_UP_INTERVAL_MS": 600000.0,
}

# Just inside the player's band once one reference tick of motion is applied.
HIT_POSITION = 450.0


def quiet_settings(**overrides) -> GameSettings:
    return GameSettings().with_updates({**QUIET_SPAWNS, **overrides})


def quiet_controller(store: Optional[KeyValueStore] = None, **overrides) -> RunController:
    controller = RunController(
        quiet_settings(**overrides),
        store=store if store is not None else MemoryStore(),
        rng=random.Random(1),
    )
    controller.state.last_obstacle_spawn_ms = 0.0
    controller.state.last_power_up_spawn_ms = 0.0
    return controller


def place_obstacle(
    controller: RunController,
    lane: Lane = Lane.CENTER,
    position: float = HIT_POSITION,
    kind: ObstacleKind = ObstacleKind.CAR,
) -> Obstacle:
    state = controller.state
    obstacle = Obstacle(id=state.next_entity_id, lane=lane, position=position, kind=kind)
    state.next_entity_id += 1
    state.obstacles.append(obstacle)
    return obstacle


def place_power_up(
    controller: RunController,
    kind: PowerUpKind,
    lane: Lane = Lane.CENTER,
    position: float = HIT_POSITION,
) -> PowerUp:
    state = controller.state
    power_up = PowerUp(id=state.next_entity_id, lane=lane, position=position, kind=kind)
    state.next_entity_id += 1
    state.power_ups.append(power_up)
    return power_up
