import pytest

from qrgen.grid import CellState, ModuleGrid
from qrgen.masking import (
    MASK_PATTERNS,
    MaskCandidate,
    apply_mask,
    build_candidates,
    overlay_format,
)
from qrgen.placement import place_payload
from qrgen.tables import FORMAT_STRINGS_Q


@pytest.fixture
def blank_v1(reserved_v1: ModuleGrid) -> ModuleGrid:
    return place_payload(reserved_v1, bytes(26))


@pytest.mark.parametrize("mask_id", range(8))
def test_mask_flips_only_data_modules(blank_v1: ModuleGrid, mask_id: int) -> None:
    masked = apply_mask(blank_v1, mask_id)
    predicate = MASK_PATTERNS[mask_id]
    for row, col, state in blank_v1.cells():
        if state.is_data:
            assert masked[row, col].is_data
            assert masked[row, col].is_dark == predicate(row, col)
        else:
            assert masked[row, col] is state


def test_mask_predicates() -> None:
    assert MASK_PATTERNS[0](1, 1) and not MASK_PATTERNS[0](1, 2)
    assert MASK_PATTERNS[1](2, 5) and not MASK_PATTERNS[1](3, 5)
    assert MASK_PATTERNS[2](1, 3) and not MASK_PATTERNS[2](3, 1)
    assert MASK_PATTERNS[5](0, 7) and not MASK_PATTERNS[5](1, 1)


def test_mask_is_an_involution(blank_v1: ModuleGrid) -> None:
    assert apply_mask(apply_mask(blank_v1, 4), 4) == blank_v1


def test_invalid_mask(blank_v1: ModuleGrid) -> None:
    with pytest.raises(ValueError):
        apply_mask(blank_v1, 8)


def _read_format(grid: ModuleGrid):
    size = grid.size
    bits = {}
    # first copy
    for col, offset in zip((0, 1, 2, 3, 4, 5, 7, 8), range(14, 6, -1)):
        bits.setdefault(offset, set()).add(int(grid[8, col].is_dark))
    for row, offset in zip((0, 1, 2, 3, 4, 5, 7), range(7)):
        bits.setdefault(offset, set()).add(int(grid[row, 8].is_dark))
    # second copy
    for col, offset in zip(range(size - 8, size), range(7, -1, -1)):
        bits.setdefault(offset, set()).add(int(grid[8, col].is_dark))
    for row, offset in zip(range(size - 7, size), range(8, 15)):
        bits.setdefault(offset, set()).add(int(grid[row, 8].is_dark))
    return bits


@pytest.mark.parametrize("version", [1, 2])
@pytest.mark.parametrize("mask_id", range(8))
def test_format_overlay(version: int, mask_id: int, request) -> None:
    reserved = request.getfixturevalue(f"reserved_v{version}")
    grid = place_payload(reserved, bytes(26 if version == 1 else 44))
    overlay_format(grid, mask_id)

    assert grid.count(CellState.FORMAT_RESERVED) == 0
    bits = _read_format(grid)
    assert sorted(bits) == list(range(15))
    # both copies agree
    assert all(len(values) == 1 for values in bits.values())
    value = sum(values.pop() << offset for offset, values in bits.items())
    assert value == FORMAT_STRINGS_Q[mask_id]


def test_candidates_are_independent(blank_v1: ModuleGrid) -> None:
    original = blank_v1.copy()
    candidates = build_candidates(blank_v1)

    assert [c.mask_id for c in candidates] == list(range(8))
    assert all(c.penalty is None for c in candidates)
    assert blank_v1 == original
    assert blank_v1.count(CellState.FORMAT_RESERVED) == 30

    candidates[0].grid[10, 10] = CellState.DATA_DARK
    candidates[1].grid[10, 10] = CellState.DATA_LIGHT
    assert candidates[0].grid[10, 10] is CellState.DATA_DARK


def test_candidate_penalty(blank_v1: ModuleGrid) -> None:
    assert MaskCandidate(0, blank_v1).penalty is None
    candidate = MaskCandidate(3, blank_v1, 42)
    assert candidate.penalty == 42
    assert repr(candidate) == "MaskCandidate(mask_id=3, penalty=42)"
