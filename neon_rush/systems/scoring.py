"""Score, coin and distance bookkeeping."""

from __future__ import annotations

import logging
import math

from ..config.constants import BEST_SCORE_KEY
from ..persistence.storage import KeyValueStore, save_best_score
from ..simulation.state import PlayerState, RunState

logger = logging.getLogger("neon_rush.scoring")

# Absorbs float drift when many small slices should sum to a whole point.
_ROUNDING_SLACK = 1e-9


def combo_multiplier(combo: int) -> float:
    if combo <= 0:
        return 1.0
    return combo * 0.5 + 1


def accrue(player: PlayerState, speed: float, scale: float) -> int:
    """Add one tick's distance and score. Returns the score gained.

    Only whole points reach ``player.score``; the fraction carries over to the
    next tick so the total does not depend on how finely time is sliced.
    """
    travelled = speed * scale
    player.distance += travelled
    earned = travelled * combo_multiplier(player.combo) + player.score_remainder
    gained = int(math.floor(earned + _ROUNDING_SLACK))
    player.score_remainder = earned - gained
    player.score += gained
    return gained


def collect_coin(player: PlayerState, coin_score: int) -> None:
    player.coins += 1
    player.score += coin_score


def record_final_score(state: RunState, store: KeyValueStore) -> bool:
    """Promote the run's score to best score once per run.

    Returns True when a new best was set. A failing store write is logged by
    the store and never rolls back the in-memory value.
    """
    if state.best_score_recorded:
        return False
    state.best_score_recorded = True
    score = state.player.score
    if score <= state.best_score:
        return False
    state.best_score = score
    logger.info("New best score %d", score)
    save_best_score(store, BEST_SCORE_KEY, score)
    return True
