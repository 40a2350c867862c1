"""Keyboard mapping from pygame keys to run commands."""
from __future__ import annotations

from typing import Dict, Optional

import pygame

from .simulation.commands import Command
from .simulation.state import RunStatus

_PLAYING_KEYS: Dict[int, Command] = {
    pygame.K_LEFT: Command.SHIFT_LEFT,
    pygame.K_a: Command.SHIFT_LEFT,
    pygame.K_RIGHT: Command.SHIFT_RIGHT,
    pygame.K_d: Command.SHIFT_RIGHT,
    pygame.K_SPACE: Command.PAUSE_TOGGLE,
    pygame.K_ESCAPE: Command.PAUSE_TOGGLE,
    pygame.K_r: Command.RESTART,
}

_PAUSED_KEYS: Dict[int, Command] = {
    pygame.K_SPACE: Command.PAUSE_TOGGLE,
    pygame.K_RETURN: Command.PAUSE_TOGGLE,
    pygame.K_ESCAPE: Command.PAUSE_TOGGLE,
    pygame.K_r: Command.RESTART,
}

_GAME_OVER_KEYS: Dict[int, Command] = {
    pygame.K_SPACE: Command.RESTART,
    pygame.K_RETURN: Command.RESTART,
    pygame.K_r: Command.RESTART,
}

_KEYMAPS = {
    RunStatus.PLAYING: _PLAYING_KEYS,
    RunStatus.PAUSED: _PAUSED_KEYS,
    RunStatus.GAME_OVER: _GAME_OVER_KEYS,
}


def command_for_key(key: int, status: RunStatus) -> Optional[Command]:
    return _KEYMAPS[status].get(key)
