"""The game world: a grid of tile layers and its generation steps."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from tilegame.simulation import HeatGrid, MapSize
from tilegame.states import GenerationState

_log = logging.getLogger(__name__)

CHUNK_SIZE = MapSize(32, 32)
TILE_SIZE = (16.0, 16.0)
DEFAULT_MAP_SIZE = MapSize(3, 3)


class LayerType(Enum):
    """What a layer holds; also its drawing order."""

    BACKGROUND = -1
    EMPTY = 0
    GAS = 1
    GAS_PIPE = 2
    LIQUID = 3
    LIQUID_PIPE = 4
    NPC = 5
    SOLID = 6  # walls, floors and the like

    @classmethod
    def default(cls) -> LayerType:
        return cls.EMPTY


@dataclass
class Layer:
    """One tile layer of the world.

    ``tiles`` is None until the layer is given a size; then it holds one
    heat cell per tile position.
    """

    id: int = 0
    layer_type: LayerType = LayerType.EMPTY
    name: Optional[str] = None
    transform: Any = None
    tile_size: tuple[float, float] = TILE_SIZE
    grid_size: Optional[tuple[float, float]] = None
    tiles: Optional[HeatGrid] = None

    @property
    def size(self) -> Optional[MapSize]:
        return self.tiles.size if self.tiles is not None else None


class LayerBuilder:
    """Fluent builder for :class:`Layer`."""

    def __init__(self) -> None:
        self._name: Optional[str] = None
        self._layer_type: Optional[LayerType] = None
        self._size: Optional[MapSize] = None
        self._transform: Any = None

    def with_name(self, name: str) -> LayerBuilder:
        self._name = str(name)
        return self

    def with_type(self, layer_type: LayerType) -> LayerBuilder:
        self._layer_type = layer_type
        return self

    def with_size(self, size: MapSize) -> LayerBuilder:
        self._size = size
        return self

    def with_transform(self, transform: Any) -> LayerBuilder:
        self._transform = transform
        return self

    def build(self) -> Layer:
        """Create the layer, filling it with default tiles if a size was given."""
        _log.info("Building layer")
        layer = Layer(name=self._name, transform=self._transform)
        if self._layer_type is not None:
            layer.layer_type = self._layer_type

        if self._size is not None:
            tile_x, tile_y = TILE_SIZE
            layer.grid_size = (self._size.x * tile_x, self._size.y * tile_y)
            layer.tiles = HeatGrid(self._size)
            _log.debug("Filled layer with %d tiles", len(layer.tiles.cells))
        return layer


@dataclass
class Grid:
    """The world as a collection of layers, drawn in order of their id."""

    size: MapSize = CHUNK_SIZE
    layers: list[Layer] = field(default_factory=list)

    def layer(self, layer_id: int) -> Optional[Layer]:
        """The first layer with ``layer_id``, or None."""
        return next((layer for layer in self.layers if layer.id == layer_id), None)

    def add_layer(self, layer: Layer) -> None:
        self.layers.append(layer)


@dataclass
class GameWorld:
    """Drives world generation through its states."""

    map_size: MapSize = DEFAULT_MAP_SIZE
    generation_state: GenerationState = GenerationState.IDLE
    grid: Optional[Grid] = None
    name: str = "World"

    def initialize(self) -> Grid:
        """Create an empty grid and move on to generating."""
        self.grid = Grid()
        self.generation_state = GenerationState.GENERATING
        return self.grid

    def generate(self) -> Grid:
        """Build the background and solid layers, then mark generation done."""
        if self.grid is None:
            raise RuntimeError("the world has no grid; initialize it first")

        _log.info("Building background layer")
        self.grid.add_layer(
            LayerBuilder()
            .with_name("Background Layer")
            .with_type(LayerType.BACKGROUND)
            .with_size(self.map_size)
            .build()
        )
        _log.info("Building solid layer")
        self.grid.add_layer(
            LayerBuilder()
            .with_name("Solid Layer")
            .with_type(LayerType.SOLID)
            .with_size(self.map_size)
            .build()
        )
        self.generation_state = GenerationState.DONE
        return self.grid

    def drop(self) -> None:
        """Remove the grid and all of its layers."""
        self.grid = None