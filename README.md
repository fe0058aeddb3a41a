# hexfront

The game model behind a hexagonal-grid strategy game, in plain Python with no
dependencies and no rendering code.

## What is in it

- **`hexfront.hexagon`**: hex geometry and tiles.
  - `CubeCoord(q, r, s)` is a frozen, ordered cube coordinate; it raises
    `ValueError` when `q + r + s != 0`. `CubeCoord.from_axial(q, r)` fills in `s`,
    and two coordinates can be added with `+`.
  - `cube_to_pixel(cube, size)` and `pixel_to_cube(pixel, size)` convert between
    cube coordinates and the pixel centres of a pointy-top layout.
  - `neighbor(cube, direction)` gives the adjacent hex in one of six directions
    (taken modulo 6), and `distance(a, b)` the number of steps between two hexes.
  - `Hexagon` is one tile: terrain (`TerrainType`: `PLAINS`, `WATER`, `FOREST`,
    `URBAN`), fill and base colours, highlighting (`highlight`,
    `remove_highlight`, `set_fill_color`, `set_base_color`), visibility flags, and
    one slot each for a building, a character and a resource (`set_building`,
    `remove_building`, `has_building`, and likewise for characters and resources).
    A slot that is already taken is left as it is; placing something moves it to
    the hex centre, and a character also gets the hex's coordinate.
- **`hexfront.game_object`**: `GameObject` with a position, an `Allegiance` and a
  `bounding_box` centred on the position; `collides_with` checks overlap using
  `Rect.intersection` / `Rect.intersects` (rectangles that only touch do not
  intersect).
- **`hexfront.perlin`**: `PerlinNoise(seed)` with `noise(x, y)`, a 2D gradient
  noise that is zero at every integer lattice point.
- **`hexfront.buildings`**: `Building`, whose `take_damage` uses up defences
  before health and whose `repair` restores health before defences, both capped
  at 100; the `CityCenter`, `ResidentialArea` and `Base` types, each with its own
  size and visibility range; and `create_building(kind, hexagon)`, which returns a
  `Base` for `"Base"` and `None` for any other name or a missing hex.
- **`hexfront.city`**: `City(hexes, allegiance)` puts a `CityCenter` on the hex
  nearest the average of its hexes' coordinates and one `ResidentialArea` on the
  first other free hex. `buildings` maps coordinates to those buildings.
- **`hexfront.workplaces`**: `Profession`, and `Workplace`, `Farm` and
  `OilRefinery` with employees (`add_employee`, `remove_employee`, capped at
  `max_employees`), `generate_product` (one unit of stock), and `sell_product`,
  which only sells while stock is above `min_stock` (2000) and returns whether it
  did.
- **`hexfront.camera`**: `CameraInput` tracks held W/A/S/D keys; `press` returns
  `True` for the game action keys Q, R and Escape, and `movement(delta_time)`
  gives the camera displacement, normalised on diagonals, at 400 units per second
  by default.
- **`hexfront.player`**: `Player`, a 50×50 box moved by `handle_input(pressed)`
  and `update(delta_time)` and kept inside an 800×600 area.

Shared enumerations (`Allegiance`, `BuildingType`, `Product`, `ResourceType`,
`CharacterType`, `ProjectileType`) live in `hexfront.kinds`.

## Install

```
pip install .
```

## Example

```python
from hexfront.buildings import CityCenter
from hexfront.hexagon import CubeCoord, Hexagon, distance, neighbor
from hexfront.kinds import Allegiance

origin = CubeCoord(0, 0, 0)
east = neighbor(origin, 0)
print(distance(origin, CubeCoord(2, -1, -1)))  # 2

hexagon = Hexagon(east)
center = CityCenter(hexagon.position, Allegiance.FRIENDLY)
hexagon.set_building(center)
center.take_damage(120)
print(center.defenses, center.health)  # 0 80
```

## What it does not do

This package is the model only. It has no window, drawing, game loop or
command to run. There is no grid container that generates a whole map, no
units, projectiles or combat, no fog of war, and no national economy or
government; those would have to be built on top of the pieces above.

## Tests

```
pip install .[test]
pytest
```