"""Constant values for the Neon Rush simulation."""

from __future__ import annotations

DEFAULTS = {
    "WINDOW_WIDTH": 360,
    "WINDOW_HEIGHT": 600,
    "LANE_WIDTH": 80,
    "TRACK_LENGTH": 600,
}

# Track units. The player's car sits near the bottom of the track.
PLAYER_HEIGHT = 100
PLAYER_BOTTOM_MARGIN = 20
HITBOX_WIDTH_RATIO = 0.7

OBSTACLE_HEIGHTS = {
    "car": 80,
    "barrier": 40,
    "truck": 120,
}
POWER_UP_SIZE = 50
# Power-ups are caught in a band reaching further up the track than the
# tallest obstacle's.
POWER_UP_BAND_MARGIN = max(OBSTACLE_HEIGHTS.values()) + 10

OBSTACLE_DESPAWN_MARGIN = 100
POWER_UP_DESPAWN_MARGIN = 50

# shield : boost : coin
POWER_UP_WEIGHTS = {
    "shield": 1,
    "boost": 1,
    "coin": 3,
}

BEST_SCORE_KEY = "neon_rush_high_score"
