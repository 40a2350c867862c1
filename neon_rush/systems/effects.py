"""Transient player effects: shield, boost and combo.

Every timed effect stores a simulation-time deadline that :func:`expire`
checks during the tick. Nothing is scheduled, so pausing freezes the
countdowns and a restart drops them with the rest of the run state.
"""

from __future__ import annotations

from ..config.settings import GameSettings
from ..simulation.state import ComboHint, RunState
from ..world.types import PowerUpKind
from . import scoring


def apply_power_up(state: RunState, kind: PowerUpKind, now_ms: float, settings: GameSettings) -> None:
    player = state.player
    if kind is PowerUpKind.SHIELD:
        player.shield = True
    elif kind is PowerUpKind.BOOST:
        # Re-collecting refreshes the deadline instead of stacking.
        player.boost.active = True
        player.boost.expires_at_ms = now_ms + settings.BOOST_DURATION_MS
    elif kind is PowerUpKind.COIN:
        scoring.collect_coin(player, settings.COIN_SCORE)
    else:
        raise ValueError(f"Unhandled power-up kind: {kind!r}")


def absorb_hit(state: RunState, now_ms: float, settings: GameSettings) -> int:
    """Spend the shield on one hit and bump the combo. Returns the combo."""
    player = state.player
    player.shield = False
    player.combo += 1
    state.combo_hint = ComboHint(value=player.combo, expires_at_ms=now_ms + settings.COMBO_HINT_MS)
    return player.combo


def break_combo(state: RunState) -> None:
    state.player.combo = 0


def expire(state: RunState, now_ms: float) -> None:
    boost = state.player.boost
    if boost.active and now_ms >= boost.expires_at_ms:
        boost.active = False
        boost.expires_at_ms = 0.0
    hint = state.combo_hint
    if hint is not None and now_ms >= hint.expires_at_ms:
        state.combo_hint = None
