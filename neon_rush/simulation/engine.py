"""Run controller: the Playing/Paused/GameOver state machine driving a run."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Union

from ..config import settings as settings_module
from ..config.constants import BEST_SCORE_KEY
from ..config.settings import GameSettings
from ..persistence.storage import KeyValueStore, MemoryStore, load_best_score
from ..systems import difficulty, effects, motion, scoring
from ..systems.collision import CollisionResolver
from ..systems.events import GAME_OVER, EventBus, GameEvent
from ..systems.spawner import Spawner
from .clock import Clock
from .commands import Command, parse_command
from .state import PlayerState, RunSnapshot, RunState, RunStatus

logger = logging.getLogger("neon_rush.engine")


class RunController:
    """Owns the run state and advances it one tick at a time.

    Collaborators interact through :meth:`handle`, :meth:`tick`,
    :meth:`snapshot` and the event bus; none of them get a reference to the
    mutable :class:`RunState`.
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        store: Optional[KeyValueStore] = None,
        rng: Optional[random.Random] = None,
        events: Optional[EventBus] = None,
    ) -> None:
        self.settings = settings or settings_module.current_settings()
        self.store: KeyValueStore = store if store is not None else MemoryStore()
        self.events = events or EventBus()
        self.clock = Clock(self.settings.frame_ms, self.settings.MAX_FRAME_MS)
        self.spawner = Spawner(self.settings, rng or random.Random(self.settings.SEED))
        self.collisions = CollisionResolver(self.settings)
        self.state = self._new_state(best_score=load_best_score(self.store, BEST_SCORE_KEY), next_entity_id=0)
        logger.info("Run started (best score %d)", self.state.best_score)

    def _new_state(self, best_score: int, next_entity_id: int) -> RunState:
        player = PlayerState(lives=self.settings.MAX_LIVES, speed=self.settings.BASE_SPEED)
        return RunState(player=player, best_score=best_score, next_entity_id=next_entity_id)

    @property
    def status(self) -> RunStatus:
        return self.state.status

    @property
    def best_score(self) -> int:
        return self.state.best_score

    def effective_speed(self) -> float:
        return motion.effective_speed(self.state.player, self.settings.BOOST_MULTIPLIER)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def handle(self, command: Union[Command, str, None]) -> bool:
        """Apply a command. Returns False when it was ignored."""
        parsed = parse_command(command)
        if parsed is None:
            logger.debug("Ignoring unmapped input %r", command)
            return False
        if parsed is Command.RESTART:
            self.restart()
            return True

        status = self.state.status
        if parsed is Command.PAUSE_TOGGLE:
            if status is RunStatus.PLAYING:
                self.state.status = RunStatus.PAUSED
                return True
            if status is RunStatus.PAUSED:
                self.state.status = RunStatus.PLAYING
                return True
            return False

        if status is not RunStatus.PLAYING:
            logger.debug("Ignoring %s while %s", parsed.value, status.value)
            return False
        direction = -1 if parsed is Command.SHIFT_LEFT else 1
        player = self.state.player
        player.lane = player.lane.shifted(direction)
        return True

    def restart(self) -> None:
        self.state = self._new_state(
            best_score=self.state.best_score,
            next_entity_id=self.state.next_entity_id,
        )
        self.clock.reset()
        logger.info("Run restarted (best score %d)", self.state.best_score)

    # ------------------------------------------------------------------
    # Simulation step
    # ------------------------------------------------------------------

    def tick(self, elapsed_ms: Optional[float] = None) -> List[GameEvent]:
        """Advance one tick; a no-op unless the run is playing.

        Order: spawn, move, resolve collisions, expire effects, accrue score,
        ramp difficulty. The effective speed is sampled once so motion and
        scoring agree for the tick.
        """
        state = self.state
        if state.status is not RunStatus.PLAYING:
            return []

        step = self.clock.advance(elapsed_ms)
        speed = self.effective_speed()

        self.spawner.spawn(state, step)
        motion.advance(state, speed * step.scale, self.settings.TRACK_LENGTH)
        events = self.collisions.resolve(state, step.now_ms)

        if state.status is RunStatus.GAME_OVER:
            events.append(self._finish_run(step.now_ms))
        else:
            effects.expire(state, step.now_ms)
            scoring.accrue(state.player, speed, step.scale)
            if difficulty.update_speed(state, self.settings):
                logger.debug("Speed raised to %.1f at distance %.0f", state.player.speed, state.player.distance)

        for event in events:
            self.events.emit(event)
        return events

    def _finish_run(self, now_ms: float) -> GameEvent:
        final_score = self.state.player.score
        scoring.record_final_score(self.state, self.store)
        logger.info(
            "Game over: score %d, distance %.0f, coins %d (best %d)",
            final_score,
            self.state.player.distance,
            self.state.player.coins,
            self.state.best_score,
        )
        return GameEvent(GAME_OVER, final_score, now_ms)

    def snapshot(self) -> RunSnapshot:
        return RunSnapshot.capture(
            self.state,
            tick=self.clock.tick,
            time_ms=self.clock.now_ms,
            effective_speed=self.effective_speed(),
        )
