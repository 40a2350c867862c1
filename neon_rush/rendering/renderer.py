"""Pygame drawing of run snapshots."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame

from ..config.constants import PLAYER_BOTTOM_MARGIN, PLAYER_HEIGHT, POWER_UP_SIZE
from ..config.settings import GameSettings
from ..simulation.state import RunSnapshot, RunStatus
from ..world.types import Lane, ObstacleKind, PowerUpKind

Color = Tuple[int, int, int]

BACKGROUND: Color = (10, 0, 21)
LANE_LINE: Color = (90, 40, 120)
PLAYER: Color = (0, 255, 255)
SHIELD_RING: Color = (96, 165, 250)
TEXT: Color = (240, 240, 240)
SCORE: Color = (232, 121, 249)
WARNING: Color = (251, 146, 60)
OVERLAY: Tuple[int, int, int, int] = (0, 0, 0, 170)

OBSTACLE_COLORS: Dict[ObstacleKind, Color] = {
    ObstacleKind.CAR: (239, 68, 68),
    ObstacleKind.BARRIER: (234, 179, 8),
    ObstacleKind.TRUCK: (107, 114, 128),
}
POWER_UP_COLORS: Dict[PowerUpKind, Color] = {
    PowerUpKind.SHIELD: (34, 211, 238),
    PowerUpKind.BOOST: (250, 204, 21),
    PowerUpKind.COIN: (253, 224, 71),
}

ENTITY_WIDTH = 40


class TrackRenderer:
    """Draws the track, entities and HUD for one snapshot.

    Track units map one-to-one to pixels vertically; lanes are centred on the
    surface horizontally. Text is skipped when no font is supplied so the
    renderer works without ``pygame.font`` being initialised.
    """

    def __init__(self, settings: GameSettings, font: Optional[pygame.font.Font] = None) -> None:
        self.settings = settings
        self.font = font

    def lane_x(self, surface: pygame.Surface, lane: Lane) -> int:
        return int(surface.get_width() / 2 + lane.offset(self.settings.LANE_WIDTH))

    def draw(self, surface: pygame.Surface, snapshot: RunSnapshot) -> None:
        surface.fill(BACKGROUND)
        self._draw_lanes(surface)
        for power_up in snapshot.power_ups:
            rect = pygame.Rect(0, 0, POWER_UP_SIZE - 10, POWER_UP_SIZE - 10)
            rect.center = (self.lane_x(surface, power_up.lane), int(power_up.position + POWER_UP_SIZE / 2))
            pygame.draw.ellipse(surface, POWER_UP_COLORS[power_up.kind], rect)
        for obstacle in snapshot.obstacles:
            rect = pygame.Rect(0, int(obstacle.position), ENTITY_WIDTH, obstacle.height)
            rect.centerx = self.lane_x(surface, obstacle.lane)
            pygame.draw.rect(surface, OBSTACLE_COLORS[obstacle.kind], rect, border_radius=6)
        self._draw_player(surface, snapshot)
        self._draw_hud(surface, snapshot)
        if snapshot.status is not RunStatus.PLAYING:
            self._draw_overlay(surface, snapshot)

    def _draw_lanes(self, surface: pygame.Surface) -> None:
        half = self.settings.LANE_WIDTH / 2
        for lane in (Lane.LEFT, Lane.RIGHT):
            x = int(self.lane_x(surface, lane) - lane.value * half)
            pygame.draw.line(surface, LANE_LINE, (x, 0), (x, surface.get_height()), 2)

    def _draw_player(self, surface: pygame.Surface, snapshot: RunSnapshot) -> None:
        top = self.settings.TRACK_LENGTH - PLAYER_HEIGHT - PLAYER_BOTTOM_MARGIN
        rect = pygame.Rect(0, top, ENTITY_WIDTH, PLAYER_HEIGHT)
        rect.centerx = self.lane_x(surface, snapshot.player.lane)
        pygame.draw.rect(surface, PLAYER, rect, border_radius=8)
        if snapshot.player.shield:
            pygame.draw.rect(surface, SHIELD_RING, rect.inflate(12, 12), 3, border_radius=12)

    def _text(self, surface: pygame.Surface, message: str, color: Color, center: Tuple[int, int]) -> None:
        if self.font is None:
            return
        text_surface = self.font.render(message, True, color)
        surface.blit(text_surface, text_surface.get_rect(center=center))

    def _draw_hud(self, surface: pygame.Surface, snapshot: RunSnapshot) -> None:
        player = snapshot.player
        mid = surface.get_width() // 2
        self._text(surface, f"{player.score:,}", SCORE, (mid, 20))
        self._text(
            surface,
            f"DISTANCE: {int(player.distance)}m  SPEED: {player.speed:.1f}x",
            TEXT,
            (mid, 44),
        )
        self._text(surface, f"LIVES {player.lives}  COINS {player.coins}", TEXT, (mid, 66))
        y = 88
        if player.shield:
            self._text(surface, "SHIELD ACTIVE", SHIELD_RING, (mid, y))
            y += 20
        if player.boost.active:
            self._text(surface, f"BOOST {snapshot.boost_remaining_ms / 1000:.1f}s", WARNING, (mid, y))
        if snapshot.combo_hint is not None:
            self._text(surface, f"COMBO x{snapshot.combo_hint}!", SCORE, (mid, surface.get_height() // 3))

    def _draw_overlay(self, surface: pygame.Surface, snapshot: RunSnapshot) -> None:
        shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        shade.fill(OVERLAY)
        surface.blit(shade, (0, 0))
        mid_x = surface.get_width() // 2
        mid_y = surface.get_height() // 2
        if snapshot.status is RunStatus.PAUSED:
            self._text(surface, "PAUSED", TEXT, (mid_x, mid_y))
            self._text(surface, "Space to resume", TEXT, (mid_x, mid_y + 28))
            return
        self._text(surface, "GAME OVER", WARNING, (mid_x, mid_y - 30))
        self._text(surface, f"Score {snapshot.player.score:,}", SCORE, (mid_x, mid_y))
        self._text(surface, f"Best {snapshot.best_score:,}", TEXT, (mid_x, mid_y + 26))
        self._text(surface, "Enter to restart", TEXT, (mid_x, mid_y + 56))
