"""Tests for the distance-driven speed ramp."""

from __future__ import annotations

from neon_rush.config.settings import GameSettings
from neon_rush.simulation.state import PlayerState, RunState
from neon_rush.systems.difficulty import update_speed

from .run_helpers import quiet_controller


def test_first_threshold_raises_speed_exactly_once():
    controller = quiet_controller()
    controller.state.player.distance = 498.0

    controller.tick()
    assert controller.state.player.distance == 503.0
    assert controller.state.player.speed == 5.5

    for _ in range(20):
        controller.tick()
        assert controller.state.player.speed == 5.5


def test_second_threshold_raises_again():
    controller = quiet_controller()
    controller.state.player.distance = 498.0
    controller.tick()
    controller.state.player.distance = 997.0
    controller.tick()
    assert controller.state.player.speed == 6.0


def test_speed_is_capped():
    runtime = GameSettings()
    state = RunState(player=PlayerState(speed=15.0, distance=5000.0), speed_milestones=9)
    assert update_speed(state, runtime) is False
    assert state.player.speed == 15.0
    assert state.speed_milestones == 10


def test_each_milestone_pays_once_even_when_overshot():
    runtime = GameSettings()
    state = RunState(player=PlayerState(distance=1600.0))
    assert update_speed(state, runtime) is True
    assert state.player.speed == 6.5
    assert update_speed(state, runtime) is False
    assert state.player.speed == 6.5


def test_no_change_below_threshold():
    state = RunState(player=PlayerState(distance=499.9))
    assert update_speed(state, GameSettings()) is False
    assert state.player.speed == 5.0
