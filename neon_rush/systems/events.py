"""Discrete game events and the bus collaborators subscribe to."""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, DefaultDict, List, Optional

COMBO_TRIGGERED = "combo_triggered"
GAME_OVER = "game_over"
LIFE_LOST = "life_lost"
POWER_UP_COLLECTED = "power_up_collected"

EVENT_NAMES = (COMBO_TRIGGERED, GAME_OVER, LIFE_LOST, POWER_UP_COLLECTED)


@dataclass(frozen=True)
class GameEvent:
    name: str
    value: object
    time_ms: float


Handler = Callable[[GameEvent], None]


class EventBus:
    def __init__(self) -> None:
        self._handlers: DefaultDict[str, List[Handler]] = defaultdict(list)
        self._catch_all: List[Handler] = []

    def subscribe(self, name: str, handler: Handler) -> None:
        if name not in EVENT_NAMES:
            raise ValueError(f"Unknown event name: {name}")
        self._handlers[name].append(handler)

    def subscribe_all(self, handler: Handler) -> None:
        self._catch_all.append(handler)

    def unsubscribe(self, handler: Handler, name: Optional[str] = None) -> None:
        names = [name] if name is not None else list(self._handlers)
        for key in names:
            if handler in self._handlers.get(key, []):
                self._handlers[key].remove(handler)
        if name is None and handler in self._catch_all:
            self._catch_all.remove(handler)

    def emit(self, event: GameEvent) -> None:
        for handler in list(self._handlers.get(event.name, [])):
            handler(event)
        for handler in list(self._catch_all):
            handler(event)

    def clear(self) -> None:
        self._handlers.clear()
        self._catch_all.clear()
