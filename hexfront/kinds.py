"""Enumerations shared across the game model."""

from enum import Enum, auto


class Allegiance(Enum):
    """Which side an entity belongs to."""

    FRIENDLY = auto()
    ENEMY = auto()
    NEUTRAL = auto()


class BuildingType(Enum):
    """Kinds of building that can stand on a hex."""

    NONE = auto()
    CITY_CENTER = auto()
    RESIDENTIAL_AREA = auto()
    FACTORY = auto()
    FARM = auto()
    MINE = auto()
    MARKET = auto()
    SCHOOL = auto()
    HOSPITAL = auto()
    BASE = auto()
    OIL_REFINERY = auto()
    WORKPLACE = auto()


class Product(Enum):
    """Goods produced by workplaces."""

    FOOD = 0
    REFINED_OIL = 1


class ResourceType(Enum):
    """Natural resources found on the map."""

    OIL = auto()
    WOOD = auto()
    IRON = auto()
    GOLD = auto()
    UNKNOWN = auto()


class CharacterType(Enum):
    """Kinds of unit."""

    NONE = auto()
    SOLDIER = auto()
    CIVILIAN = auto()
    WORKER = auto()
    MERCHANT = auto()
    DOCTOR = auto()
    STUDENT = auto()
    TEACHER = auto()
    FARMER = auto()
    TANK = auto()


class ProjectileType(Enum):
    """Kinds of projectile a unit can fire."""

    NONE = auto()
    BULLET = auto()
    ARROW = auto()
    ROCKET = auto()
    TANK_AMMO = auto()