# -*- coding: utf-8 -*-
"""
Terminal printing of module grids.

Each module is two characters wide so the symbol looks square in a terminal.
Intermediate grids can be printed too: unwritten modules show as ``..`` and
reserved format modules as ``FF``.
"""

import sys
from typing import Optional, Sequence, TextIO, Union

from .grid import CellState, ModuleGrid

DARK = "██"
LIGHT = "  "
UNWRITTEN = ".."
FORMAT = "FF"


def _cell_text(state: CellState) -> str:
    if state is CellState.UNWRITTEN:
        return UNWRITTEN
    if state is CellState.FORMAT_RESERVED:
        return FORMAT
    return DARK if state.is_dark else LIGHT


def format_matrix(matrix: Union[ModuleGrid, Sequence[Sequence[int]]], quiet: int = 2) -> str:
    """Return the text rendering of a grid or 0/1 matrix with ``quiet`` blank modules around it."""
    if isinstance(matrix, ModuleGrid):
        rows = [[_cell_text(state) for state in row] for row in matrix.rows()]
    else:
        rows = [[DARK if v else LIGHT for v in row] for row in matrix]

    width = len(rows) + 2 * quiet
    gap = LIGHT * width
    pad = LIGHT * quiet

    lines = [gap] * quiet
    lines.extend(pad + "".join(row) + pad for row in rows)
    lines.extend([gap] * quiet)
    return "\n".join(lines)


def print_qr(matrix: Union[ModuleGrid, Sequence[Sequence[int]]], stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    print(format_matrix(matrix), file=stream)
