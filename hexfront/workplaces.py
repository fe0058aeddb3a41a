"""Workplaces: buildings with employees that produce and sell goods."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple

from hexfront.buildings import Building
from hexfront.kinds import BuildingType, Product, ResourceType

Point = Tuple[float, float]


@dataclass
class Profession:
    """A kind of job and what it pays."""

    name: str = "Default Profession"
    compensation: int = 0
    # how much one point of education increases productivity
    education_productivity_factor: int = 1


class Workplace(Building):
    """A building that employs people and keeps a stock of one product."""

    scale_factor = 0.7
    default_max_employees = 10
    default_product = Product.FOOD
    default_stock = 0
    default_visibility_range = 2

    def __init__(self, position: Point = (0.0, 0.0)):
        super().__init__(position)
        self.name = "Default Workplace"
        self.profession: Profession | None = None
        self.max_employees = self.default_max_employees
        self.employees: List[Any] = []
        self.money = 0.0
        self.stock = self.default_stock
        self.min_stock = 2000
        self.available_resource_types: List[ResourceType] = []
        self._product_type = self.default_product

    @property
    def building_type(self) -> BuildingType:
        return BuildingType.WORKPLACE

    @property
    def required_resource_type(self) -> ResourceType:
        """Resource the workplace needs on its hex."""
        return ResourceType.UNKNOWN

    @property
    def product_type(self) -> Product:
        return self._product_type

    @property
    def current_employees(self) -> int:
        return len(self.employees)

    def add_employee(self, employee: Any) -> None:
        """Hire someone if there is room; None is ignored."""
        if employee is not None and self.current_employees < self.max_employees:
            self.employees.append(employee)

    def remove_employee(self, employee: Any) -> None:
        """Let an employee go; unknown people are ignored."""
        if employee is not None and employee in self.employees:
            self.employees.remove(employee)

    def generate_product(self) -> None:
        """Produce one unit of stock."""
        self.stock += 1

    def sell_product(self, product: Product, amount: int, price: float) -> bool:
        """Sell from stock while it stays above the minimum; True if sold."""
        if self.stock >= amount and self.stock > self.min_stock:
            self.money += amount * price
            self.stock -= amount
            return True
        return False


class Farm(Workplace):
    """Produces food."""

    scale_factor = 0.8
    image_path = "assets/images/farm.png"
    default_max_employees = 5
    default_product = Product.FOOD
    default_stock = 50

    def __init__(self, position: Point = (0.0, 0.0)):
        super().__init__(position)
        self.name = "Farm"

    @property
    def building_type(self) -> BuildingType:
        return BuildingType.FARM

    @property
    def product_type(self) -> Product:
        return Product.FOOD


class OilRefinery(Workplace):
    """Refines oil drawn from a nearby oil field."""

    size: Point = (35.0, 35.0)
    scale_factor = 0.8
    image_path = "assets/images/OilRefinery.png"
    default_visibility_range = 3
    default_product = Product.REFINED_OIL

    @property
    def building_type(self) -> BuildingType:
        return BuildingType.OIL_REFINERY

    @property
    def required_resource_type(self) -> ResourceType:
        return ResourceType.OIL

    @property
    def product_type(self) -> Product:
        return Product.REFINED_OIL