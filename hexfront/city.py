"""Cities: a cluster of hexes with a centre and housing."""

from __future__ import annotations

import math
from typing import Dict, List, Sequence, Tuple

from hexfront.buildings import Building, CityCenter, ResidentialArea
from hexfront.hexagon import CubeCoord, Hexagon
from hexfront.kinds import Allegiance

Point = Tuple[float, float]


class City:
    """Owns the buildings generated on its hexes."""

    def __init__(self, hexes: Sequence[Hexagon],
                 allegiance: Allegiance = Allegiance.NEUTRAL):
        self._hexes: List[Hexagon] = list(hexes)
        self.allegiance = allegiance
        self.name = ""
        self._buildings: Dict[CubeCoord, Building] = {}
        self._generate_buildings()

    @property
    def hexes(self) -> List[Hexagon]:
        return list(self._hexes)

    @property
    def buildings(self) -> Dict[CubeCoord, Building]:
        return dict(self._buildings)

    @property
    def position(self) -> Point:
        """Centre of the first hex, or the origin for an empty city."""
        return self._hexes[0].position if self._hexes else (0.0, 0.0)

    def _find_center(self) -> Hexagon:
        count = len(self._hexes)
        avg_q = sum(h.coord.q for h in self._hexes) / count
        avg_r = sum(h.coord.r for h in self._hexes) / count
        avg_s = sum(h.coord.s for h in self._hexes) / count

        def spread(hexagon: Hexagon) -> float:
            c = hexagon.coord
            return math.sqrt((c.q - avg_q) ** 2 + (c.r - avg_r) ** 2 + (c.s - avg_s) ** 2)

        # min keeps the first of equally close hexes
        return min(self._hexes, key=spread)

    def _generate_buildings(self) -> None:
        if not self._hexes:
            return

        center = self._find_center()
        city_center = CityCenter(center.position, self.allegiance)
        center.set_building(city_center)
        self._buildings[center.coord] = city_center

        if len(self._hexes) > 1:
            for hexagon in self._hexes:
                if hexagon is center or hexagon.has_building():
                    continue
                area = ResidentialArea(hexagon.position, self.allegiance)
                hexagon.set_building(area)
                self._buildings[hexagon.coord] = area
                break