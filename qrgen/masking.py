# -*- coding: utf-8 -*-
"""
QR Mask Generation Module

Builds the eight masked candidates of a placed symbol. Each candidate is an
independent clone of the placed grid with one mask pattern applied to its
data modules and the matching format information written into the reserved
format strips.

Functions:
    apply_mask: Flip data modules selected by a mask pattern
    overlay_format: Fill the format strips for a mask id
    build_candidates: Produce all eight candidates
"""

from typing import Callable, Dict, List, Optional

from .grid import CellState, ModuleGrid
from .tables import FORMAT_STRINGS_Q, get_bit

# Mask predicates over (row, col); a data module is inverted when True.
MASK_PATTERNS: Dict[int, Callable[[int, int], bool]] = {
    0: lambda r, c: (r + c) % 2 == 0,
    1: lambda r, c: r % 2 == 0,
    2: lambda r, c: c % 3 == 0,
    3: lambda r, c: (r + c) % 3 == 0,
    4: lambda r, c: (r // 2 + c // 3) % 2 == 0,
    5: lambda r, c: (r * c) % 2 + (r * c) % 3 == 0,
    6: lambda r, c: ((r * c) % 2 + (r * c) % 3) % 2 == 0,
    7: lambda r, c: ((r + c) % 2 + (r * c) % 3) % 2 == 0,
}

# Format bit 7 sits at (8, 8), shared by the row and column strips
SHARED_FORMAT_BIT = 7


class MaskCandidate:
    """One masked rendering of the symbol and its penalty score."""

    def __init__(self, mask_id: int, grid: ModuleGrid, penalty: Optional[int] = None):
        self.mask_id = mask_id
        self.grid = grid
        self.penalty = penalty

    def __repr__(self) -> str:
        return f"MaskCandidate(mask_id={self.mask_id}, penalty={self.penalty})"


def apply_mask(grid: ModuleGrid, mask_id: int) -> ModuleGrid:
    """
    Return a copy of ``grid`` with mask ``mask_id`` applied.

    Only DATA_LIGHT/DATA_DARK modules are flipped; reserved and format
    modules are never touched.

    Raises:
        ValueError: If ``mask_id`` is not 0-7
    """
    if mask_id not in MASK_PATTERNS:
        raise ValueError(f"Invalid mask pattern: {mask_id}")

    predicate = MASK_PATTERNS[mask_id]
    masked = grid.copy()
    for row, col, state in grid.cells():
        if state.is_data and predicate(row, col):
            masked[row, col] = CellState.data(not state.is_dark)
    return masked


def overlay_format(grid: ModuleGrid, mask_id: int) -> None:
    """
    Write the 15-bit level Q format string for ``mask_id`` into ``grid``.

    Row 8 is filled left to right: bits 14..7 in the left half and bits 7..0
    in the right half. Column 8 is filled top to bottom with bits 0..6 and
    then 8..14; bit 7 is the shared (8, 8) module already written by the row
    pass. Written modules become RESERVED_* so later stages treat them as
    function modules.
    """
    format_string = FORMAT_STRINGS_Q[mask_id]
    size = grid.size

    horizontal_bit = 0
    for col in range(size):
        if grid[8, col] is not CellState.FORMAT_RESERVED:
            continue
        if col < size // 2:
            offset = 14 - horizontal_bit
        else:
            offset = 15 - horizontal_bit
        grid[8, col] = CellState.reserved(bool(get_bit(format_string, offset)))
        horizontal_bit += 1

    vertical_bit = 0
    for row in range(size):
        if grid[row, 8] is not CellState.FORMAT_RESERVED:
            continue
        if vertical_bit == SHARED_FORMAT_BIT:
            vertical_bit += 1
        grid[row, 8] = CellState.reserved(bool(get_bit(format_string, vertical_bit)))
        vertical_bit += 1


def build_candidates(grid: ModuleGrid) -> List[MaskCandidate]:
    """
    Build the eight mask candidates of a placed grid.

    Args:
        grid (ModuleGrid): Grid with function patterns and payload placed

    Returns:
        List[MaskCandidate]: Candidates for masks 0-7, penalties not yet set
    """
    candidates = []
    for mask_id in range(len(MASK_PATTERNS)):
        masked = apply_mask(grid, mask_id)
        overlay_format(masked, mask_id)
        candidates.append(MaskCandidate(mask_id, masked))
    return candidates
