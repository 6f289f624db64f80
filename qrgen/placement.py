# -*- coding: utf-8 -*-
"""
QR Data Placement Module

Threads the codeword bits into the free modules of a reserved grid using the
standard zig-zag traversal: two-column strips from right to left, alternating
upward and downward, skipping the vertical timing column.

Functions:
    iter_zigzag: Yield module coordinates in placement order
    place_payload: Write payload bits into the free modules
"""

import logging
from typing import Iterator, Sequence, Tuple

from .exceptions import PlacementError
from .grid import CellState, ModuleGrid
from .tables import get_bit

logger = logging.getLogger(__name__)

TIMING_COLUMN = 6


def iter_zigzag(size: int) -> Iterator[Tuple[int, int]]:
    """
    Yield ``(row, col)`` pairs in zig-zag order starting at the bottom-right.

    Within a strip the column alternates right, left, right, left...; the row
    advances after every right/left pair. At the top or bottom edge the
    vertical direction reverses and the strip moves two columns left, or to
    column 5 when that would land on the timing column.

    Example:
        >>> list(iter_zigzag(21))[:4]
        [(20, 20), (20, 19), (19, 20), (19, 19)]
    """
    row = col = size - 1
    col_step = -1
    row_step = -1

    while col >= 0:
        yield row, col

        col += col_step
        if col_step == -1:
            col_step = 1
        else:
            col_step = -1
            row += row_step

        # Both modules of the row are done and we've walked off an edge
        if row in (-1, size):
            row_step = -row_step
            row = 0 if row_step == 1 else size - 1

            if col - 2 == TIMING_COLUMN:
                col = TIMING_COLUMN - 1
            else:
                col -= 2


def place_payload(grid: ModuleGrid, payload: Sequence[int]) -> ModuleGrid:
    """
    Write the payload bits, most significant bit first, into unwritten modules.

    Args:
        grid (ModuleGrid): Grid with function patterns placed
        payload (Sequence[int]): Data and parity codewords

    Returns:
        ModuleGrid: New grid with no UNWRITTEN modules left; any module the
        payload did not reach becomes DATA_LIGHT

    Raises:
        PlacementError: If the grid runs out of free modules before the
            payload is fully placed
    """
    placed = grid.copy()
    total_bits = len(payload) * 8
    bit_index = 0

    if total_bits:
        for row, col in iter_zigzag(placed.size):
            if placed[row, col] is not CellState.UNWRITTEN:
                continue
            byte = payload[bit_index // 8]
            bit = get_bit(byte, 7 - bit_index % 8)
            placed[row, col] = CellState.data(bool(bit))
            bit_index += 1
            if bit_index == total_bits:
                break

    if bit_index < total_bits:
        raise PlacementError(
            f"Grid of size {placed.size} only holds {bit_index} of {total_bits} payload bits"
        )

    leftover = 0
    for row, col, state in list(placed.cells()):
        if state is CellState.UNWRITTEN:
            placed[row, col] = CellState.DATA_LIGHT
            leftover += 1

    logger.debug("Placed %d bits, %d remainder modules", total_bits, leftover)
    return placed
