# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

This module stamps the function patterns of a QR symbol into an empty module
grid before any data is placed. Function patterns include finder patterns,
separators, the alignment pattern, timing patterns, the format information
areas and the dark module.

Functions:
    compute_alignment_origin: Top-left corner of the alignment pattern
    place_finder_pattern: Stamp one 7x7 finder pattern
    place_separators: Surround finder patterns with light modules
    reserve_format_areas: Mark the format information strips
    place_alignment_pattern: Stamp the 5x5 alignment pattern (v2+)
    place_timing_patterns: Alternating strips on row 6 and column 6
    place_dark_module: The single always-dark module
    build_reserved_grid: Run all of the above in order
"""

from typing import Optional, Tuple

from .grid import CellState, ModuleGrid
from .tables import get_version


def compute_alignment_origin(version: int) -> Optional[Tuple[int, int]]:
    """
    Calculate the top-left corner of the alignment pattern for a given version.

    Version 1 has no alignment pattern. For versions 2-6 there is a single
    pattern whose centre sits 7 modules in from the bottom-right corner.

    Args:
        version (int): QR code version

    Returns:
        Optional[Tuple[int, int]]: (row, col) of the pattern's corner, or None

    Example:
        >>> compute_alignment_origin(2)
        (16, 16)
    """
    if version == 1:
        return None
    size = 4 * (version - 1) + 21
    return size - 9, size - 9


def _nested_square(grid: ModuleGrid, row0: int, col0: int, width: int) -> None:
    # Dark outer ring, light inner ring, dark core
    last = width - 1
    for r in range(width):
        for c in range(width):
            ring = min(r, c, last - r, last - c)
            grid[row0 + r, col0 + c] = CellState.reserved(ring != 1)


def place_finder_pattern(grid: ModuleGrid, row0: int, col0: int) -> None:
    """
    Stamp a 7x7 finder pattern with its top-left corner at ``(row0, col0)``.

    Pattern: 1111111
             1000001
             1011101
             1011101
             1011101
             1000001
             1111111
    """
    _nested_square(grid, row0, col0, 7)


def place_separators(grid: ModuleGrid) -> None:
    """
    Mark every unwritten neighbour of a reserved dark module as reserved light.

    Runs right after the finder patterns, when the only dark modules are the
    finder rings and cores, so this draws the one-module light border around
    each finder pattern.
    """
    for row, col, state in list(grid.cells()):
        if state is not CellState.RESERVED_DARK:
            continue
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                r, c = row + dr, col + dc
                if grid.in_bounds(r, c) and grid[r, c] is CellState.UNWRITTEN:
                    grid[r, c] = CellState.RESERVED_LIGHT


def reserve_format_areas(grid: ModuleGrid) -> None:
    """
    Mark the format information strips along row 8 and column 8.

    Column 8 is reserved for rows ``< 9`` and ``> size - 9``; row 8 for columns
    ``< 9`` and ``> size - 9``. Modules already taken by a finder pattern or
    separator are left alone; timing modules and the dark module overwrite
    some of these cells later.
    """
    size = grid.size
    for i in range(size):
        if i < 9 or i > size - 9:
            for pos in ((i, 8), (8, i)):
                if grid[pos] is CellState.UNWRITTEN:
                    grid[pos] = CellState.FORMAT_RESERVED


def place_alignment_pattern(grid: ModuleGrid, version: int) -> None:
    """
    Stamp the 5x5 alignment pattern (versions 2+).

    Pattern: 11111
             10001
             10101
             10001
             11111
    """
    origin = compute_alignment_origin(version)
    if origin is None:
        return
    _nested_square(grid, origin[0], origin[1], 5)


def place_timing_patterns(grid: ModuleGrid) -> None:
    """Alternate dark/light along row 6 and column 6 between the finders, dark first."""
    for i in range(8, grid.size - 8):
        dark = i % 2 == 0
        grid[6, i] = CellState.reserved(dark)
        grid[i, 6] = CellState.reserved(dark)


def place_dark_module(grid: ModuleGrid, version: int) -> None:
    grid[4 * version + 9, 8] = CellState.RESERVED_DARK


def build_reserved_grid(version: int) -> ModuleGrid:
    """
    Build a grid with every function pattern of ``version`` in place.

    Args:
        version (int): QR code version (1 or 2)

    Returns:
        ModuleGrid: Grid whose cells are UNWRITTEN, RESERVED_* or FORMAT_RESERVED

    Raises:
        UnsupportedLayout: If the version is not supported

    Example:
        >>> grid = build_reserved_grid(1)
        >>> grid.size
        21
        >>> grid.count(CellState.UNWRITTEN)
        208
    """
    size = get_version(version).size
    grid = ModuleGrid(size)

    # Top-left, top-right, bottom-left
    for row0, col0 in ((0, 0), (0, size - 7), (size - 7, 0)):
        place_finder_pattern(grid, row0, col0)

    place_separators(grid)
    reserve_format_areas(grid)
    place_alignment_pattern(grid, version)
    place_timing_patterns(grid)
    place_dark_module(grid, version)
    return grid
