# tilegame

The logic core of a tile-based world game. It covers a world made of tile
layers, heat conduction between neighbouring tiles, small 2D geometry helpers,
and turning keyboard, touch and mouse-wheel input into movement and camera
changes. Everything is plain Python with no dependencies. You can drive and
test each piece on its own.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `tilegame.geometry`

- `Vec2`: an immutable 2D vector. It supports `+`, `-`, unary `-` and
  multiplication by a scalar. Its methods are `magnitude2`, `length`, `dot`,
  `cross`, `normalize` and `is_nan`. `Vec2.from_coord(a, b)` gives the vector
  from `b` to `a`. Normalising the zero vector gives NaN components.
- `Circle(a, b, c)`: the circle through three points. `classify(point)`
  returns a `Containment`: `INSIDE`, `INTERSECT` or `OUTSIDE`. The result
  comes from the sign of the in-circle determinant.
- `Edge(a, b, c)`: the line `a*x + b*y + c`.
  - `Edge.from_points(p, q)` builds the perpendicular bisector of two points.
  - `evaluate(x, y)` tests for an exact zero.
  - `evaluate_x(y)` and `evaluate_y(x)` solve for the other coordinate.

### `tilegame.polygon`

- `Polygon(vertices)` needs at least three vertices. Fewer raise `ValueError`.
  - It provides `add_vertex`, `remove_vertex` (removes every equal vertex),
    `vertex(index)` (returns `None` when out of range), `double_area`,
    `area`, `perimeter`, `centroid`, `bounding_box` and `contains_point`.
  - `contains_point` uses even-odd ray casting after a bounding-box check.
  - A degenerate polygon has a NaN centroid.
- `point_in_bounds(point, (min, max))` tests a point against an
  axis-aligned box.
- `Region` wraps one polygon. `Diagram` holds a list of sites and a list of
  regions.

### `tilegame.simulation`

- `MapSize`, `Temperature`, `ThermalConductivity` (default `1.0`) and
  `HeatCell` are the thermal data records.
- `calculate_heat_transfer(cell1, cell2, dt, transfer_coefficient)`
  returns the pair of temperature changes for two neighbouring cells over
  `dt` seconds. The two changes always cancel out.
- `HeatGrid(size)`: a rectangular grid of heat cells.
  - Positions without a cell are filled with default cells.
  - `cell(x, y)` returns a cell and raises `IndexError` off the map.
  - `neighbors(x, y)` lists the orthogonal neighbours that are on the map.
  - `conduct(dt)` exchanges heat between all neighbouring pairs in one step.
- `Timer(duration, repeating=True)` is measured in seconds. `tick(delta)`
  returns whether the timer finished during that tick.
- `ThermalSimulation(grid)` runs conduction on a repeating 0.2-second timer.
  `update(delta)` returns `True` on the frames in which heat moved.

### `tilegame.states`

- `GameState`: `LOADING`, `PLAYING`, `MENU`.
- `GenerationState`: `IDLE`, `INITIALIZING`, `GENERATING`, `DONE`. It has
  `is_generating()` and `is_done()`.
- Data records: `Tile`, `Tileset`, `ElementConfig`, `ElementConfigs`,
  `TileTemperature`, `TileMass` and `FallTileBundle`.

### `tilegame.controls`

Keys are passed as any container of key names, such as `{"KeyW", "ArrowLeft"}`.

- `GameControl` has the members `UP`, `DOWN`, `LEFT` and `RIGHT`. Each is
  bound to a WASD key and an arrow key.
- `get_movement(control, keys)` returns `1.0` or `0.0`.
- `movement_vector(keys, touch_position=None, player_position=None)`
  returns a unit vector, or `None` when there is no movement.
  - A touch more than `FOLLOW_EPSILON` (5.0) away from the player overrides
    the keys.
  - A touch without a player position raises `ValueError`.
- `set_movement_actions(actions, ...)` stores that result in an `Actions`
  record.
- `Camera` has a position, a depth and a zoom scale.
  - `camera_movement(camera, keys, delta_secs)` pans at 500 units per second
    with WASD.
  - In the same call, Z and X zoom by 0.1 and the scale is clamped at 0.5.
- `zoom_scroll(camera, events)` applies `MouseWheel` events:
  - `ScrollUnit.LINE` changes the scale by 0.1 per unit.
  - `ScrollUnit.PIXEL` changes the scale by 0.01 per unit.

### `tilegame.world`

- `LayerType`: `BACKGROUND` (-1) through `SOLID` (6).
- `Layer` is one tile layer. Its `tiles` is a `HeatGrid` once the layer has
  a size.
- `LayerBuilder` builds a `Layer` fluently with `with_name`, `with_type`,
  `with_size`, `with_transform` and `build`.
- `Grid` is a list of layers. It has `layer(layer_id)` and `add_layer`, and a
  default size of 32×32.
- `GameWorld` takes a world through its generation states:
  - `initialize()` creates an empty grid and moves to `GENERATING`.
  - `generate()` adds a background layer and a solid layer of the map size
    (3×3 by default) and moves to `DONE`. Calling it before `initialize()`
    raises `RuntimeError`.
  - `drop()` removes the grid.

## Example

```python
from tilegame.geometry import Vec2
from tilegame.polygon import Polygon

square = Polygon([Vec2(0, 0), Vec2(1, 0), Vec2(1, 1), Vec2(0, 1)])
square.area()                         # 1.0
square.centroid()                     # Vec2(x=0.5, y=0.5)
square.contains_point(Vec2(0.5, 0.5)) # True
```

Heat spreads from a hot tile to the tiles around it:

```python
from tilegame.simulation import HeatGrid, MapSize, ThermalSimulation

grid = HeatGrid(MapSize(3, 3))
grid.cell(1, 1).temperature.value = 100.0

simulation = ThermalSimulation(grid)
for _ in range(20):
    simulation.update(0.016)   # steps 0.016 s per frame; heat moves once 0.2 s have passed
```

## What it does not do

This package has no window, rendering, audio, asset loading or menu screen.
It also has no command to start a game. It holds the game's state and rules,
and you drive it from your own loop.

`Diagram` and `Region` only hold sites and polygons. The package does not
compute a Voronoi diagram or a triangulation from a set of points.