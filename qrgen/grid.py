# -*- coding: utf-8 -*-
"""
QR Module Grid

A square matrix of tagged cell states. Placement code writes ``UNWRITTEN``,
``RESERVED_*`` and ``FORMAT_RESERVED`` cells; masking only touches ``DATA_*``
cells.

Classes:
    CellState: Tagged state of a single module
    ModuleGrid: Owned, clonable square matrix of cell states
"""

from enum import Enum
from typing import Iterator, List, Tuple

import numpy as np


class CellState(Enum):
    UNWRITTEN = 'unwritten'
    RESERVED_LIGHT = 'reserved_light'
    RESERVED_DARK = 'reserved_dark'
    DATA_LIGHT = 'data_light'
    DATA_DARK = 'data_dark'
    FORMAT_RESERVED = 'format_reserved'

    @property
    def is_dark(self) -> bool:
        return self in (CellState.RESERVED_DARK, CellState.DATA_DARK)

    @property
    def is_data(self) -> bool:
        return self in (CellState.DATA_LIGHT, CellState.DATA_DARK)

    @property
    def is_reserved(self) -> bool:
        return self in (CellState.RESERVED_LIGHT, CellState.RESERVED_DARK)

    @classmethod
    def reserved(cls, dark: bool) -> 'CellState':
        return cls.RESERVED_DARK if dark else cls.RESERVED_LIGHT

    @classmethod
    def data(cls, dark: bool) -> 'CellState':
        return cls.DATA_DARK if dark else cls.DATA_LIGHT


class ModuleGrid:
    """
    Square matrix of ``CellState`` values addressed as ``grid[row, col]``.

    Grids are never shared between pipeline stages: ``copy()`` returns an
    independent clone, and every stage that changes cells works on its own.

    Example:
        >>> grid = ModuleGrid(21)
        >>> grid[0, 0] = CellState.RESERVED_DARK
        >>> clone = grid.copy()
        >>> clone[0, 0] = CellState.RESERVED_LIGHT
        >>> grid[0, 0]
        <CellState.RESERVED_DARK: 'reserved_dark'>
    """

    def __init__(self, size: int, fill: CellState = CellState.UNWRITTEN):
        if size < 21 or size % 2 == 0:
            raise ValueError(f"Invalid grid size: {size}")
        self.size = size
        self._rows: List[List[CellState]] = [[fill] * size for _ in range(size)]

    def __getitem__(self, pos: Tuple[int, int]) -> CellState:
        row, col = pos
        return self._rows[row][col]

    def __setitem__(self, pos: Tuple[int, int], state: CellState) -> None:
        row, col = pos
        self._rows[row][col] = state

    def __eq__(self, other) -> bool:
        if not isinstance(other, ModuleGrid):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"ModuleGrid(size={self.size})"

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def copy(self) -> 'ModuleGrid':
        clone = ModuleGrid.__new__(ModuleGrid)
        clone.size = self.size
        clone._rows = [list(row) for row in self._rows]
        return clone

    def cells(self) -> Iterator[Tuple[int, int, CellState]]:
        """Yield ``(row, col, state)`` in row-major order."""
        for r, row in enumerate(self._rows):
            for c, state in enumerate(row):
                yield r, c, state

    def rows(self) -> List[List[CellState]]:
        return [list(row) for row in self._rows]

    def count(self, state: CellState) -> int:
        return sum(row.count(state) for row in self._rows)

    def to_bits(self) -> List[List[int]]:
        """Return the grid as rows of 1 (dark) and 0 (light)."""
        return [[int(state.is_dark) for state in row] for row in self._rows]

    def to_array(self) -> np.ndarray:
        """Return the grid as a ``uint8`` array, 1 = dark."""
        return np.array(self.to_bits(), dtype=np.uint8)
