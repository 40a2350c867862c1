"""Main pygame loop for Neon Rush."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import pygame

from ..config import settings
from ..config.settings import GameSettings
from ..controls import command_for_key
from ..persistence.storage import JsonFileStore
from ..rendering.notifications import NotificationManager
from ..rendering.renderer import TrackRenderer
from ..systems.events import EventBus, GameEvent
from .commands import Command
from .engine import RunController
from .state import RunStatus


def initialise_logger(runtime: GameSettings) -> logging.Logger:
    """Attach an appending file log for the whole ``neon_rush`` tree.

    Sessions accumulate in one file, each opened with a marker line.
    Calling again with the same file keeps the existing handler.
    """
    log_path = Path(runtime.LOG_DIRECTORY) / runtime.DEBUG_LOG_FILE
    logger = logging.getLogger("neon_rush")
    logger.setLevel(runtime.DEBUG_LOG_LEVEL.upper())

    target = str(log_path.resolve())
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            return logger

    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s [%(levelname)s] %(message)s"))
    logger.addHandler(file_handler)
    logger.propagate = False

    logger.info("--- session start (log level %s) ---", runtime.DEBUG_LOG_LEVEL)
    return logger


def _load_font(size: int) -> Optional[pygame.font.Font]:
    try:
        pygame.font.init()
        return pygame.font.Font(None, size)
    except pygame.error as exc:
        logging.getLogger("neon_rush").warning("Unable to load font: %s", exc)
        return None


def run(runtime: Optional[GameSettings] = None) -> None:
    runtime = runtime or settings.current_settings()
    logger = initialise_logger(runtime)

    pygame.init()
    screen = pygame.display.set_mode((runtime.WINDOW_WIDTH, runtime.WINDOW_HEIGHT))
    pygame.display.set_caption("Neon Rush")
    frame_clock = pygame.time.Clock()
    font = _load_font(24)

    bus = EventBus()
    notifications = NotificationManager()
    bus.subscribe_all(notifications.on_event)

    def _log_event(event: GameEvent) -> None:
        logger.debug("Event %s -> %r at %.0f ms", event.name, event.value, event.time_ms)

    bus.subscribe_all(_log_event)

    engine = RunController(runtime, store=JsonFileStore(runtime.HIGH_SCORE_FILE), events=bus)
    renderer = TrackRenderer(runtime, font)

    running = True
    while running:
        elapsed_ms = frame_clock.tick(runtime.FPS)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                command = command_for_key(event.key, engine.status)
                if command is Command.RESTART:
                    notifications.clear()
                engine.handle(command)

        engine.tick(elapsed_ms)
        snapshot = engine.snapshot()
        if snapshot.status is RunStatus.PLAYING:
            notifications.update(elapsed_ms)

        renderer.draw(screen, snapshot)
        notifications.draw(screen, font)
        pygame.display.flip()

    logger.info("Shutting down (best score %d)", engine.best_score)
    pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    runtime = settings.load_runtime_settings(argv)
    settings.apply_runtime_settings(runtime)
    run(runtime)
