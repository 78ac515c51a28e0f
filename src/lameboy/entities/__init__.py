"""
Lameboy entities
"""

from __future__ import annotations

from dataclasses import dataclass

from lameboy.constants import (
    BULLET_SIZE,
    BULLET_SPEED,
    ENEMY_SIZE,
    PLAYER_SIZE,
    PLAYER_SPEED,
    PLAYER_X,
    ULTIMATE_DURATION_MS,
)


@dataclass(frozen=True)
class Box:
    """
    Axis-aligned rectangle used for every overlap test.
    """

    x: float
    y: float
    width: float
    height: float

    def intersects(self, other: Box) -> bool:
        """
        Strict overlap; touching edges do not count.

        :param other: Box to test against
        :type other: Box

        :return: True if both boxes overlap
        :rtype: bool
        """
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def contains(self, x: float, y: float) -> bool:
        return (
            self.x <= x < self.x + self.width
            and self.y <= y < self.y + self.height
        )


@dataclass
class Player:
    """
    Player ship entity
    """

    x: float = PLAYER_X
    y: float = 0.0
    width: float = PLAYER_SIZE[0]
    height: float = PLAYER_SIZE[1]
    speed: float = PLAYER_SPEED
    last_shot_time: float | None = None

    @property
    def collider(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass(eq=False)
class Bullet:
    """
    Bullet entity, always travels to the right.
    """

    x: float
    y: float
    width: float = BULLET_SIZE[0]
    height: float = BULLET_SIZE[1]
    speed: float = BULLET_SPEED

    @property
    def collider(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass(eq=False)
class Enemy:
    """
    Enemy entity, always travels to the left.
    """

    x: float
    y: float
    speed: float
    width: float = ENEMY_SIZE[0]
    height: float = ENEMY_SIZE[1]

    @property
    def collider(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass
class UltimateLaser:
    """
    Trapezoid beam: narrow at the ship, wide at the right edge.
    """

    start_x: float
    end_x: float
    start_y: float  # top of the narrow end
    start_height: float
    end_y: float  # top of the wide end
    end_height: float
    center_y: float
    start_time: float
    duration: float = ULTIMATE_DURATION_MS

    def expired(self, now: float) -> bool:
        return now - self.start_time > self.duration

    def span_at(self, x: float) -> tuple[float, float]:
        """
        Beam top and height at a given x.

        The interpolation parameter is clamped to [0, 1] so anything left
        of the ship or right of the screen uses the nearest end.

        :param x: Horizontal position
        :type x: float

        :return: (top, height)
        :rtype: tuple[float, float]
        """
        length = self.end_x - self.start_x
        t = (x - self.start_x) / length if length else 0.0
        t = max(0.0, min(1.0, t))
        top = self.start_y + (self.end_y - self.start_y) * t
        height = self.start_height + (self.end_height - self.start_height) * t
        return top, height

    def hits(self, box: Box) -> bool:
        """
        :param box: Collider to test
        :type box: Box

        :return: True if the box lies inside the beam
        :rtype: bool
        """
        if not (box.x + box.width > self.start_x and box.x < self.end_x):
            return False
        top, height = self.span_at(box.x)
        return box.y < top + height and box.y + box.height > top
