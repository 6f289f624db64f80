import numpy as np
import pytest

from qrgen.grid import CellState, ModuleGrid


def test_new_grid_is_unwritten() -> None:
    grid = ModuleGrid(21)
    assert grid.count(CellState.UNWRITTEN) == 21 * 21


@pytest.mark.parametrize("size", [0, 19, 22])
def test_invalid_size(size: int) -> None:
    with pytest.raises(ValueError):
        ModuleGrid(size)


def test_copy_is_independent() -> None:
    grid = ModuleGrid(21)
    grid[3, 4] = CellState.DATA_DARK
    clone = grid.copy()
    assert clone == grid

    clone[3, 4] = CellState.DATA_LIGHT
    assert grid[3, 4] is CellState.DATA_DARK
    assert clone != grid


def test_state_flags() -> None:
    assert CellState.DATA_DARK.is_dark and CellState.DATA_DARK.is_data
    assert CellState.RESERVED_DARK.is_dark and CellState.RESERVED_DARK.is_reserved
    assert not CellState.FORMAT_RESERVED.is_dark
    assert not CellState.FORMAT_RESERVED.is_data
    assert not CellState.UNWRITTEN.is_reserved


def test_to_bits_and_array() -> None:
    grid = ModuleGrid(21, fill=CellState.DATA_LIGHT)
    grid[0, 1] = CellState.DATA_DARK
    grid[2, 0] = CellState.RESERVED_DARK

    bits = grid.to_bits()
    assert bits[0][1] == 1 and bits[2][0] == 1
    assert sum(map(sum, bits)) == 2

    array = grid.to_array()
    assert array.dtype == np.uint8
    assert array.shape == (21, 21)
    assert array.sum() == 2


def test_cells_row_major() -> None:
    grid = ModuleGrid(21)
    cells = list(grid.cells())
    assert cells[0][:2] == (0, 0)
    assert cells[1][:2] == (0, 1)
    assert cells[21][:2] == (1, 0)
