"""Positioned, team-aware objects with axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from hexfront.kinds import Allegiance

Point = Tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def _span(self) -> Tuple[float, float, float, float]:
        x0, x1 = sorted((self.left, self.left + self.width))
        y0, y1 = sorted((self.top, self.top + self.height))
        return x0, y0, x1, y1

    def intersection(self, other: "Rect") -> Optional["Rect"]:
        """The overlapping area, or None when the rectangles only touch or miss."""
        ax0, ay0, ax1, ay1 = self._span()
        bx0, by0, bx1, by1 = other._span()
        left, top = max(ax0, bx0), max(ay0, by0)
        right, bottom = min(ax1, bx1), min(ay1, by1)
        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None

    def intersects(self, other: "Rect") -> bool:
        return self.intersection(other) is not None


class GameObject:
    """Base for everything placed in the world."""

    size: Point = (25.0, 25.0)
    scale_factor = 1.0

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 allegiance: Allegiance = Allegiance.NEUTRAL):
        self.x = x
        self.y = y
        self.allegiance = allegiance

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    @position.setter
    def position(self, value: Point) -> None:
        self.x, self.y = value

    @property
    def is_friendly(self) -> bool:
        return self.allegiance is Allegiance.FRIENDLY

    @property
    def is_enemy(self) -> bool:
        return self.allegiance is Allegiance.ENEMY

    @property
    def bounding_box(self) -> Rect:
        """Box of the scaled size, centred on the position."""
        width = self.size[0] * self.scale_factor
        height = self.size[1] * self.scale_factor
        return Rect(self.x - width / 2.0, self.y - height / 2.0, width, height)

    def collides_with(self, other: "GameObject") -> bool:
        return self.bounding_box.intersects(other.bounding_box)