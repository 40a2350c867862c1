"""Abstract player commands consumed by the run controller."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class Command(str, Enum):
    SHIFT_LEFT = "shift_left"
    SHIFT_RIGHT = "shift_right"
    PAUSE_TOGGLE = "pause_toggle"
    RESTART = "restart"


def parse_command(raw: Union[Command, str, None]) -> Optional[Command]:
    """Return the matching command, or None for unmapped input."""
    if raw is None:
        return None
    if isinstance(raw, Command):
        return raw
    try:
        return Command(str(raw).strip().lower())
    except ValueError:
        return None
