"""Banner overlay fed by engine events."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from ..systems.events import GAME_OVER, LIFE_LOST, POWER_UP_COLLECTED, GameEvent

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
RED: Color = (255, 150, 150)
CYAN: Color = (150, 240, 255)
GOLD: Color = (253, 224, 71)

DEFAULT_DURATION_MS = 1200.0


@dataclass
class Notification:
    message: str
    color: Color
    remaining_ms: float


class NotificationManager:
    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def add(self, message: str, color: Color = WHITE, duration_ms: Optional[float] = None) -> None:
        if duration_ms is None:
            duration_ms = DEFAULT_DURATION_MS
        self.notifications.append(Notification(message, color, duration_ms))

    def clear(self) -> None:
        self.notifications.clear()

    def on_event(self, event: GameEvent) -> None:
        if event.name == LIFE_LOST:
            self.add(f"CRASH! {event.value} lives left", RED)
        elif event.name == POWER_UP_COLLECTED:
            color = GOLD if event.value == "coin" else CYAN
            self.add(f"+ {str(event.value).upper()}", color, 800.0)
        elif event.name == GAME_OVER:
            self.clear()

    def update(self, elapsed_ms: float) -> None:
        for notification in list(self.notifications):
            notification.remaining_ms -= elapsed_ms
            if notification.remaining_ms <= 0:
                self.notifications.remove(notification)

    def draw(self, surface: pygame.Surface, font: Optional[pygame.font.Font], limit: int = 3) -> None:
        if font is None:
            return
        y_offset = surface.get_height() - 160
        for notification in self.notifications[-limit:]:
            text_surface = font.render(notification.message, True, notification.color)
            surface.blit(text_surface, (surface.get_width() // 2 - text_surface.get_width() // 2, y_offset))
            y_offset += 20
