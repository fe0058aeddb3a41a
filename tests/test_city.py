from hexfront.buildings import CityCenter, ResidentialArea
from hexfront.hexagon import CubeCoord, Hexagon, neighbor
from hexfront.kinds import Allegiance, BuildingType


def _cluster():
    origin = CubeCoord(0, 0, 0)
    ring = [Hexagon(neighbor(origin, d)) for d in range(6)]
    return ring[:3] + [Hexagon(origin)] + ring[3:]


def test_empty_city_has_no_buildings():
    city = City([])
    assert city.buildings == {}
    assert city.position == (0.0, 0.0)


def test_single_hex_gets_only_center():
    hexagon = Hexagon.from_axial(4, -2)
    city = City([hexagon], Allegiance.ENEMY)
    buildings = city.buildings
    assert list(buildings) == [hexagon.coord]
    center = buildings[hexagon.coord]
    assert isinstance(center, CityCenter)
    assert center.allegiance is Allegiance.ENEMY
    assert hexagon.building is center
    assert center.position == hexagon.position


def test_center_is_middle_hex():
    hexes = _cluster()
    city = City(hexes, Allegiance.FRIENDLY)
    center_hex = hexes[3]
    assert center_hex.building.is_building_type(BuildingType.CITY_CENTER)
    assert city.buildings[center_hex.coord] is center_hex.building


def test_one_residential_area_on_first_free_hex():
    hexes = _cluster()
    city = City(hexes, Allegiance.FRIENDLY)
    areas = [b for b in city.buildings.values() if isinstance(b, ResidentialArea)]
    assert len(areas) == 1
    assert hexes[0].building is areas[0]
    assert areas[0].allegiance is Allegiance.FRIENDLY
    assert len(city.buildings) == 2


def test_residential_skips_occupied_hexes():
    hexes = _cluster()
    hexes[0].set_building(CityCenter())
    city = City(hexes)
    area_coords = [c for c, b in city.buildings.items() if isinstance(b, ResidentialArea)]
    assert area_coords == [hexes[1].coord]


def test_position_is_first_hex():
    hexes = _cluster()
    city = City(hexes)
    assert city.position == hexes[0].position
    assert city.hexes == hexes


def test_buildings_view_is_a_copy():
    city = City([Hexagon.from_axial(0, 0)])
    view = city.buildings
    view.clear()
    assert len(city.buildings) == 1


from hexfront.city import City  # noqa: E402