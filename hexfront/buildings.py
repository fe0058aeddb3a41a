"""Buildings that stand on hexes, with health and defences."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from hexfront.game_object import GameObject
from hexfront.hexagon import Hexagon
from hexfront.kinds import Allegiance, BuildingType

Point = Tuple[float, float]

_log = logging.getLogger(__name__)

STANDARD_SIZE = 25.0


class Building(GameObject, ABC):
    """A structure with defences that absorb damage before health does."""

    size: Point = (STANDARD_SIZE, STANDARD_SIZE)
    scale_factor = 1.0
    image_path = ""
    default_visibility_range = 2

    def __init__(self, position: Point = (0.0, 0.0),
                 allegiance: Allegiance = Allegiance.FRIENDLY):
        super().__init__(position[0], position[1], allegiance)
        self.visibility_range = self.default_visibility_range
        self.max_health = 100
        self.max_defenses = 100
        self.health = 100
        self.defenses = 100

    @property
    @abstractmethod
    def building_type(self) -> BuildingType:
        """What kind of building this is."""

    def is_building_type(self, building_type: BuildingType) -> bool:
        return self.building_type is building_type

    @property
    def render_size(self) -> Point:
        """Drawn size: the building's size scaled by its scale factor."""
        return (self.size[0] * self.scale_factor, self.size[1] * self.scale_factor)

    def update(self, delta_time: float) -> None:
        """Per-frame hook; buildings do nothing by default."""

    def take_damage(self, damage: int) -> None:
        """Reduce defences first, carrying any excess over to health."""
        if self.defenses > 0:
            self.defenses -= damage
            if self.defenses < 0:
                self.health += self.defenses
                self.defenses = 0
        else:
            self.health -= damage
        if self.health < 0:
            self.health = 0
        _log.info("Building damaged! Health: %d, Defenses: %d", self.health, self.defenses)

    def repair(self, amount: int) -> None:
        """Restore health first, carrying any excess over to defences."""
        if self.health < self.max_health:
            self.health += amount
            if self.health > self.max_health:
                excess = self.health - self.max_health
                self.health = self.max_health
                self.defenses = min(self.defenses + excess, self.max_defenses)
        else:
            self.defenses = min(self.defenses + amount, self.max_defenses)


class CityCenter(Building):
    """The heart of a city; sees far."""

    SCALE = 1.2
    size: Point = (STANDARD_SIZE * SCALE, STANDARD_SIZE * SCALE)
    scale_factor = SCALE
    image_path = "assets/images/CityCenter.png"
    default_visibility_range = 6

    def __init__(self, position: Point = (0.0, 0.0),
                 allegiance: Allegiance = Allegiance.NEUTRAL):
        super().__init__(position, allegiance)

    @property
    def building_type(self) -> BuildingType:
        return BuildingType.CITY_CENTER


class ResidentialArea(Building):
    """Housing next to a city centre."""

    SCALE = 1.1
    size: Point = (STANDARD_SIZE * SCALE, STANDARD_SIZE * SCALE)
    scale_factor = 1.0
    image_path = "assets/images/Residentialarea.png"
    default_visibility_range = 3

    def __init__(self, position: Point = (0.0, 0.0),
                 allegiance: Allegiance = Allegiance.FRIENDLY):
        super().__init__(position, allegiance)
        self.households: list = []

    @property
    def building_type(self) -> BuildingType:
        return BuildingType.RESIDENTIAL_AREA


class Base(Building):
    """A military base bound to one hex; has the widest view."""

    size: Point = (40.0, 40.0)
    scale_factor = 1.0
    image_path = "assets/images/Base.png"
    default_visibility_range = 7

    def __init__(self, hexagon: Hexagon):
        super().__init__(hexagon.position)
        self.hexagon = hexagon

    @property
    def building_type(self) -> BuildingType:
        return BuildingType.BASE


def create_building(kind: str, hexagon: Optional[Hexagon]) -> Optional[Building]:
    """Build a building by name on a hex; None for no hex or an unknown name."""
    if hexagon is None:
        return None
    if kind == "Base":
        return Base(hexagon)
    return None