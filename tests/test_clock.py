"""Tests for the simulation clock."""

from __future__ import annotations

import pytest

from neon_rush.simulation.clock import Clock


def test_default_advance_is_one_reference_frame():
    clock = Clock(frame_ms=1000 / 60, max_elapsed_ms=250)
    step = clock.advance()
    assert step.scale == 1.0
    assert step.tick == 1
    assert step.now_ms == pytest.approx(1000 / 60)


def test_scale_tracks_elapsed_time():
    clock = Clock(frame_ms=20.0, max_elapsed_ms=250)
    step = clock.advance(50.0)
    assert step.scale == pytest.approx(2.5)
    assert step.elapsed_ms == 50.0


def test_long_stalls_are_clamped():
    clock = Clock(frame_ms=20.0, max_elapsed_ms=100.0)
    step = clock.advance(5000.0)
    assert step.elapsed_ms == 100.0
    assert step.scale == pytest.approx(5.0)
    assert clock.now_ms == 100.0


def test_negative_elapsed_counts_as_zero():
    clock = Clock(frame_ms=20.0, max_elapsed_ms=100.0)
    step = clock.advance(-30.0)
    assert step.elapsed_ms == 0.0
    assert step.scale == 0.0
    assert step.tick == 1


def test_reset_returns_to_origin():
    clock = Clock(frame_ms=20.0, max_elapsed_ms=100.0)
    clock.advance(40.0)
    clock.advance(40.0)
    clock.reset()
    assert clock.now_ms == 0.0
    assert clock.tick == 0
