"""Hex tiles in cube coordinates and the pixel layout of a pointy-top grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

Color = Tuple[int, int, int, int]
Point = Tuple[float, float]

DEFAULT_COLOR: Color = (100, 100, 100, 255)
BLACK: Color = (0, 0, 0, 255)
TRANSPARENT: Color = (0, 0, 0, 0)

HEX_SIZE = 25.0
_SPACING = 0.95
_SQRT3 = 1.732


class TerrainType(Enum):
    """Ground a hex is made of."""

    PLAINS = 0
    WATER = 1
    FOREST = 2
    URBAN = 3


@dataclass(frozen=True, order=True)
class CubeCoord:
    """A cube coordinate; ordering is lexicographic on (q, r, s)."""

    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise ValueError("Cube coordinates must satisfy q + r + s = 0")

    @classmethod
    def from_axial(cls, q: int, r: int) -> "CubeCoord":
        return cls(q, r, -q - r)

    def __add__(self, other: "CubeCoord") -> "CubeCoord":
        if not isinstance(other, CubeCoord):
            return NotImplemented
        return CubeCoord(self.q + other.q, self.r + other.r, self.s + other.s)


DIRECTIONS: Tuple[CubeCoord, ...] = (
    CubeCoord(1, -1, 0),  # east
    CubeCoord(1, 0, -1),  # south-east
    CubeCoord(0, 1, -1),  # south-west
    CubeCoord(-1, 1, 0),  # west
    CubeCoord(-1, 0, 1),  # north-west
    CubeCoord(0, -1, 1),  # north-east
)


def cube_to_pixel(cube: CubeCoord, size: float) -> Point:
    """Centre of a hex in world pixels, slightly tightened to avoid gaps."""
    x = size * _SQRT3 * (cube.q + cube.r / 2.0) * _SPACING
    y = size * 1.5 * cube.r * _SPACING
    return (x, y)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def pixel_to_cube(pixel: Point, size: float) -> CubeCoord:
    """The hex containing a world pixel."""
    px, py = pixel
    q = px / (_SQRT3 * size * _SPACING) - py / (3.0 * size * _SPACING)
    r = py * 2.0 / (3.0 * size * _SPACING)
    s = -q - r

    rq, rr, rs = _round_half_away(q), _round_half_away(r), _round_half_away(s)
    q_diff, r_diff, s_diff = abs(rq - q), abs(rr - r), abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs
    else:
        rs = -rq - rr
    return CubeCoord(int(rq), int(rr), int(rs))


def neighbor(cube: CubeCoord, direction: int) -> CubeCoord:
    """The adjacent hex in one of the six directions (taken modulo 6)."""
    return cube + DIRECTIONS[direction % 6]


def distance(a: CubeCoord, b: CubeCoord) -> int:
    """Number of steps between two hexes."""
    return (abs(a.q - b.q) + abs(a.r - b.r) + abs(a.s - b.s)) // 2


class Hexagon:
    """One tile of the grid, with its colour state and what stands on it."""

    SIZE = HEX_SIZE

    def __init__(self, coord: CubeCoord, terrain_type: TerrainType = TerrainType.PLAINS):
        self.coord = coord
        self.position: Point = cube_to_pixel(coord, self.SIZE)
        self.terrain_type = terrain_type
        self.base_color: Color = DEFAULT_COLOR
        self.fill_color: Color = DEFAULT_COLOR
        self.outline_color: Color = BLACK
        self.outline_thickness = 1.0
        self.is_highlighted = False
        self.highlight_color: Color = TRANSPARENT
        self.visible = False
        self.explored = False
        self._building: Optional[Any] = None
        self._character: Optional[Any] = None
        self._resource: Optional[Any] = None

    @classmethod
    def from_axial(cls, q: int, r: int) -> "Hexagon":
        return cls(CubeCoord.from_axial(q, r))

    def __repr__(self) -> str:
        return f"Hexagon({self.coord!r}, {self.terrain_type.name})"

    @property
    def corners(self) -> Tuple[Point, ...]:
        """The six corner points of the pointy-top outline."""
        cx, cy = self.position
        return tuple(
            (
                cx + self.SIZE * math.cos(math.radians(i * 60 + 30)),
                cy + self.SIZE * math.sin(math.radians(i * 60 + 30)),
            )
            for i in range(6)
        )

    # Colour handling

    def set_fill_color(self, color: Color) -> None:
        """Fill with a colour; it becomes the base colour unless highlighted."""
        if not self.is_highlighted:
            self.base_color = color
        self.fill_color = color

    def set_base_color(self, color: Color) -> None:
        """Change the permanent colour, shown once no highlight is active."""
        self.base_color = color
        if not self.is_highlighted:
            self.fill_color = color

    def highlight(self, color: Color) -> None:
        self.is_highlighted = True
        self.highlight_color = color
        self.fill_color = color

    def remove_highlight(self) -> None:
        self.is_highlighted = False
        self.fill_color = self.base_color

    # Occupants (not owned by the hex)

    @property
    def building(self) -> Optional[Any]:
        return self._building

    @property
    def character(self) -> Optional[Any]:
        return self._character

    @property
    def resource(self) -> Optional[Any]:
        return self._resource

    def set_building(self, building: Any) -> None:
        """Place a building if the slot is free and move it to the hex centre."""
        if self._building is None and building is not None:
            self._building = building
            building.position = self.position

    def remove_building(self) -> None:
        self._building = None

    def has_building(self) -> bool:
        return self._building is not None

    def set_character(self, character: Any) -> None:
        """Place a unit if the slot is free, updating its position and hex."""
        if self._character is None and character is not None:
            self._character = character
            character.position = self.position
            character.hex_coord = self.coord

    def remove_character(self) -> None:
        self._character = None

    def has_character(self) -> bool:
        return self._character is not None

    def set_resource(self, resource: Any) -> None:
        """Place a resource if the slot is free and move it to the hex centre."""
        if self._resource is None and resource is not None:
            self._resource = resource
            resource.position = self.position

    def remove_resource(self) -> None:
        self._resource = None

    def has_resource(self) -> bool:
        return self._resource is not None