"""Game and generation states, and the plain data records of the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GameState(Enum):
    """Top-level state of the game; starts in LOADING."""

    LOADING = "loading"
    PLAYING = "playing"
    MENU = "menu"


class GenerationState(Enum):
    """Progress of world generation; starts in IDLE."""

    IDLE = "idle"
    INITIALIZING = "initializing"
    GENERATING = "generating"
    DONE = "done"

    def is_generating(self) -> bool:
        return self in (GenerationState.GENERATING, GenerationState.INITIALIZING)

    def is_done(self) -> bool:
        return self is GenerationState.DONE


@dataclass
class Tile:
    id: int


@dataclass
class Tileset:
    tiles: list[Tile] = field(default_factory=list)


@dataclass
class ElementConfig:
    """Physical properties of one element."""

    id: int
    name: str
    symbol: str
    density: float
    specific_heat: float


@dataclass
class ElementConfigs:
    elements: list[ElementConfig] = field(default_factory=list)


@dataclass
class TileTemperature:
    value: float = 0.0


@dataclass
class TileMass:
    value: float = 0.0


@dataclass
class FallTileBundle:
    """Components of a tile that can fall."""

    tile_mass: TileMass = field(default_factory=TileMass)
    tile_temperature: TileTemperature = field(default_factory=TileTemperature)