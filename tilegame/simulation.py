"""Heat conduction across a tile grid, driven by a repeating timer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

_log = logging.getLogger(__name__)

Position = tuple[int, int]

TRANSFER_COEFFICIENT = 0.5


@dataclass(frozen=True)
class MapSize:
    """Size of the tile map in tiles."""

    x: int = 0
    y: int = 0

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass
class Temperature:
    value: float = 0.0


@dataclass
class ThermalConductivity:
    value: float = 1.0


@dataclass
class HeatCell:
    """A tile's thermal state."""

    temperature: Temperature = field(default_factory=Temperature)
    conductivity: ThermalConductivity = field(default_factory=ThermalConductivity)


@dataclass
class Timer:
    """A timer measured in seconds, either one-shot or repeating."""

    duration: float
    repeating: bool = True
    elapsed: float = field(default=0.0, init=False)
    finished: bool = field(default=False, init=False)
    times_finished_this_tick: int = field(default=0, init=False)

    @property
    def just_finished(self) -> bool:
        """True if the timer finished during the last tick."""
        return self.times_finished_this_tick > 0

    def tick(self, delta: float) -> bool:
        """Advance by ``delta`` seconds; return whether the timer just finished."""
        if not self.repeating and self.finished:
            self.times_finished_this_tick = 0
            return False

        self.elapsed += delta
        self.finished = self.elapsed >= self.duration
        if not self.finished:
            self.times_finished_this_tick = 0
        elif self.repeating:
            if self.duration > 0:
                self.times_finished_this_tick = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
            else:
                self.times_finished_this_tick = 1
                self.elapsed = 0.0
        else:
            self.times_finished_this_tick = 1
            self.elapsed = self.duration
        return self.just_finished


def calculate_heat_transfer(
    cell1: HeatCell,
    cell2: HeatCell,
    dt: float,
    transfer_coefficient: float,
) -> tuple[float, float]:
    """Temperature changes of two neighbouring cells over ``dt`` seconds.

    Heat flows from the hotter cell to the colder one; the two changes
    always cancel out.
    """
    avg_conductivity = (cell1.conductivity.value + cell2.conductivity.value) * 0.5
    temp_diff = cell2.temperature.value - cell1.temperature.value
    heat_transfer = avg_conductivity * temp_diff * dt * transfer_coefficient * 0.5

    _log.debug(
        "heat transfer %s between %s and %s (conductivity %s, coefficient %s, dt %s)",
        heat_transfer,
        cell1.temperature.value,
        cell2.temperature.value,
        avg_conductivity,
        transfer_coefficient,
        dt,
    )
    return heat_transfer, -heat_transfer


@dataclass
class HeatGrid:
    """A rectangular grid of heat cells, keyed by ``(x, y)``."""

    size: MapSize
    cells: dict[Position, HeatCell] = field(default_factory=dict)
    transfer_coefficient: float = TRANSFER_COEFFICIENT

    def __post_init__(self) -> None:
        for position in self.cells:
            if not self._in_bounds(*position):
                raise ValueError(f"cell position {position} is outside the map")
        for position in self._positions():
            self.cells.setdefault(position, HeatCell())

    def _positions(self):
        for x in range(self.size.x):
            for y in range(self.size.y):
                yield x, y

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size.x and 0 <= y < self.size.y

    def _index(self, x: int, y: int) -> int:
        return y * self.size.x + x

    def cell(self, x: int, y: int) -> HeatCell:
        """The cell at ``(x, y)``."""
        if not self._in_bounds(x, y):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.cells[(x, y)]

    def neighbors(self, x: int, y: int) -> list[Position]:
        """Positions of the orthogonal neighbours of ``(x, y)`` on the map."""
        candidates = ((x, y + 1), (x + 1, y), (x, y - 1), (x - 1, y))
        return [pos for pos in candidates if self._in_bounds(*pos)]

    def conduct(self, dt: float) -> None:
        """Exchange heat between every pair of neighbours over ``dt`` seconds."""
        accumulators = [0.0] * (self.size.x * self.size.y)

        for (x, y), cell in self.cells.items():
            for nx, ny in self.neighbors(x, y):
                neighbor = self.cells.get((nx, ny))
                if neighbor is None:
                    continue
                change, neighbor_change = calculate_heat_transfer(
                    cell, neighbor, dt, self.transfer_coefficient
                )
                accumulators[self._index(x, y)] += change
                accumulators[self._index(nx, ny)] += neighbor_change

        for (x, y), cell in self.cells.items():
            cell.temperature.value += accumulators[self._index(x, y)]


def _default_rate() -> Timer:
    return Timer(0.2, repeating=True)


@dataclass
class ThermalSimulation:
    """Runs heat conduction on a grid at a fixed simulation rate."""

    grid: HeatGrid
    rate: Timer = field(default_factory=_default_rate)

    def update(self, delta: float) -> bool:
        """Advance by one frame of ``delta`` seconds; return whether heat moved."""
        if not self.rate.tick(delta):
            return False
        self.grid.conduct(delta)
        return True


def _cell_at(temperature: float, conductivity: Optional[float] = None) -> HeatCell:
    cell = HeatCell(Temperature(temperature))
    if conductivity is not None:
        cell.conductivity.value = conductivity
    return cell