"""Shared track data structures: lanes and the entities that move along them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from ..config.constants import OBSTACLE_HEIGHTS, POWER_UP_SIZE


class Lane(IntEnum):
    LEFT = -1
    CENTER = 0
    RIGHT = 1

    def shifted(self, direction: int) -> "Lane":
        """Return the neighbouring lane, clamped to the three-lane track."""
        value = max(Lane.LEFT.value, min(Lane.RIGHT.value, self.value + direction))
        return Lane(value)

    def offset(self, lane_width: float) -> float:
        return self.value * lane_width


class ObstacleKind(str, Enum):
    CAR = "car"
    BARRIER = "barrier"
    TRUCK = "truck"

    @property
    def height(self) -> int:
        return OBSTACLE_HEIGHTS[self.value]


class PowerUpKind(str, Enum):
    SHIELD = "shield"
    BOOST = "boost"
    COIN = "coin"


@dataclass(slots=True)
class Obstacle:
    id: int
    lane: Lane
    position: float
    kind: ObstacleKind

    @property
    def height(self) -> int:
        return self.kind.height


@dataclass(slots=True)
class PowerUp:
    id: int
    lane: Lane
    position: float
    kind: PowerUpKind

    @property
    def height(self) -> int:
        return POWER_UP_SIZE


Entity = Union[Obstacle, PowerUp]
