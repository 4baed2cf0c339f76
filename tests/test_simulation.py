import pytest

from tilegame.simulation import (
    HeatCell,
    HeatGrid,
    MapSize,
    Temperature,
    ThermalConductivity,
    ThermalSimulation,
    Timer,
    calculate_heat_transfer,
)


def _hot_center_grid() -> HeatGrid:
    size = MapSize(3, 3)
    cells = {
        (x, y): HeatCell(Temperature(100.0 if (x, y) == (1, 1) else 20.0))
        for x in range(3)
        for y in range(3)
    }
    return HeatGrid(size, cells)


def test_calculate_heat_transfer():
    cell1 = HeatCell(Temperature(100.0), ThermalConductivity(1.0))
    cell2 = HeatCell(Temperature(0.0), ThermalConductivity(1.0))
    first, second = calculate_heat_transfer(cell1, cell2, 1.0, 1.0)
    assert first == -50.0
    assert second == 50.0


def test_heat_transfer_between_equal_cells_is_zero():
    a = HeatCell(Temperature(30.0))
    b = HeatCell(Temperature(30.0))
    assert calculate_heat_transfer(a, b, 1.0, 0.5) == (0.0, -0.0)


def test_heat_cell_defaults():
    cell = HeatCell()
    assert cell.temperature.value == 0.0
    assert cell.conductivity.value == 1.0


def test_thermal_conduction():
    simulation = ThermalSimulation(_hot_center_grid(), rate=Timer(0.001))
    for _ in range(5):
        simulation.update(0.016)

    grid = simulation.grid
    assert grid.cell(1, 1).temperature.value < 100.0
    for (x, y), cell in grid.cells.items():
        if (x, y) != (1, 1):
            assert cell.temperature.value > 20.0


def test_conduction_conserves_total_heat():
    grid = _hot_center_grid()
    before = sum(c.temperature.value for c in grid.cells.values())
    grid.conduct(0.1)
    after = sum(c.temperature.value for c in grid.cells.values())
    assert after == pytest.approx(before)


def test_uniform_grid_is_unchanged():
    grid = HeatGrid(MapSize(4, 2))
    for cell in grid.cells.values():
        cell.temperature.value = 42.0
    grid.conduct(1.0)
    assert all(c.temperature.value == 42.0 for c in grid.cells.values())


def test_grid_fills_missing_cells():
    grid = HeatGrid(MapSize(3, 2))
    assert len(grid.cells) == 6


def test_grid_rejects_out_of_bounds_cells():
    with pytest.raises(ValueError):
        HeatGrid(MapSize(2, 2), {(5, 5): HeatCell()})


def test_cell_out_of_bounds():
    with pytest.raises(IndexError):
        HeatGrid(MapSize(2, 2)).cell(2, 0)


def test_neighbors():
    grid = HeatGrid(MapSize(3, 3))
    assert set(grid.neighbors(0, 0)) == {(1, 0), (0, 1)}
    assert set(grid.neighbors(1, 1)) == {(1, 2), (2, 1), (1, 0), (0, 1)}


def test_repeating_timer():
    timer = Timer(0.2)
    assert timer.tick(0.1) is False
    assert timer.tick(0.1) is True
    assert timer.just_finished
    assert timer.tick(0.1) is False


def test_one_shot_timer_finishes_once():
    timer = Timer(0.2, repeating=False)
    assert timer.tick(0.3) is True
    assert timer.elapsed == 0.2
    assert timer.tick(0.3) is False
    assert timer.finished


def test_simulation_waits_for_rate():
    grid = _hot_center_grid()
    simulation = ThermalSimulation(grid)
    assert simulation.update(0.1) is False
    assert grid.cell(1, 1).temperature.value == 100.0
    assert simulation.update(0.1) is True
    assert grid.cell(1, 1).temperature.value < 100.0