"""Tests for entity motion and culling."""

from __future__ import annotations

from neon_rush.simulation.state import BoostState, PlayerState, RunState
from neon_rush.systems import motion
from neon_rush.world.types import Lane, Obstacle, ObstacleKind, PowerUp, PowerUpKind


def test_effective_speed_applies_boost_multiplier():
    player = PlayerState(speed=6.0)
    assert motion.effective_speed(player, 1.5) == 6.0
    player.boost = BoostState(active=True, expires_at_ms=3000.0)
    assert motion.effective_speed(player, 1.5) == 9.0


def test_advance_moves_every_entity():
    state = RunState(
        obstacles=[Obstacle(0, Lane.LEFT, 10.0, ObstacleKind.CAR)],
        power_ups=[PowerUp(1, Lane.RIGHT, -50.0, PowerUpKind.COIN)],
    )
    removed = motion.advance(state, 7.5, track_length=600)
    assert removed == 0
    assert state.obstacles[0].position == 17.5
    assert state.power_ups[0].position == -42.5


def test_entities_past_the_track_end_are_removed():
    state = RunState(
        obstacles=[
            Obstacle(0, Lane.LEFT, 695.0, ObstacleKind.CAR),
            Obstacle(1, Lane.CENTER, 690.0, ObstacleKind.TRUCK),
        ],
        power_ups=[
            PowerUp(2, Lane.RIGHT, 645.0, PowerUpKind.SHIELD),
            PowerUp(3, Lane.RIGHT, 640.0, PowerUpKind.BOOST),
        ],
    )
    removed = motion.advance(state, 5.0, track_length=600)
    assert removed == 2
    assert [obstacle.id for obstacle in state.obstacles] == [1]
    assert [power_up.id for power_up in state.power_ups] == [3]


def test_cull_limit_is_inclusive():
    state = RunState(
        obstacles=[
            Obstacle(0, Lane.LEFT, 700.0, ObstacleKind.CAR),
            Obstacle(1, Lane.LEFT, 699.5, ObstacleKind.CAR),
        ],
        power_ups=[
            PowerUp(2, Lane.RIGHT, 650.0, PowerUpKind.COIN),
            PowerUp(3, Lane.RIGHT, 649.5, PowerUpKind.COIN),
        ],
    )
    removed = motion.advance(state, 0.0, track_length=600)
    assert removed == 2
    assert [obstacle.id for obstacle in state.obstacles] == [1]
    assert [power_up.id for power_up in state.power_ups] == [3]
