# -*- coding: utf-8 -*-
"""
QR Code Mask Penalty Evaluation Module

This module implements the mask pattern evaluation used to choose between the
eight masked candidates of a symbol. Each candidate receives a penalty score
based on four criteria (N1-N4); the candidate with the lowest total wins.

Functions:
    penalty_N1: Evaluate adjacent modules in runs (Rule N1)
    penalty_N2: Evaluate 2x2 blocks of same color (Rule N2)
    penalty_N3: Evaluate finder-like patterns (Rule N3)
    penalty_N4: Evaluate dark/light module ratio (Rule N4)
    compute_mask_penalty: Calculate total penalty score
    select_best: Pick the lowest-penalty mask candidate
"""

import logging
from typing import List, Sequence

from .masking import MaskCandidate

logger = logging.getLogger(__name__)

FINDER_LIKE = [1, 0, 1, 1, 1, 0, 1, 0, 0, 0, 0]
FINDER_LIKE_REVERSED = FINDER_LIKE[::-1]


def _columns(rows: List[List[int]]) -> List[List[int]]:
    return [list(col) for col in zip(*rows)]


def _run_penalty(line: Sequence[int]) -> int:
    score = 0
    run = 1
    for i in range(1, len(line)):
        if line[i] == line[i - 1]:
            run += 1
        else:
            if run >= 5:
                score += 3 + (run - 5)
            run = 1
    # Check final run at the edge
    if run >= 5:
        score += 3 + (run - 5)
    return score


def penalty_N1(rows: List[List[int]]) -> int:
    """
    Calculate penalty for adjacent modules in runs (Rule N1).

    Runs of 5 or more modules of the same color cost 3 + (run_length - 5).
    Rows and columns are scanned independently.

    Args:
        rows (List[List[int]]): QR matrix (1=dark, 0=light)

    Returns:
        int: Penalty score for rule N1

    Example:
        >>> penalty_N1([[1, 1, 1, 1, 1, 1, 0]])
        4
    """
    score = sum(_run_penalty(row) for row in rows)
    score += sum(_run_penalty(col) for col in _columns(rows))
    return score


def penalty_N2(rows: List[List[int]]) -> int:
    """
    Calculate penalty for 2x2 blocks of same color (Rule N2).

    Each 2x2 block whose four modules match costs 3; overlapping blocks are
    all counted.
    """
    score = 0
    height = len(rows)
    for r in range(height - 1):
        for c in range(len(rows[r]) - 1):
            value = rows[r][c]
            if (rows[r][c + 1] == value and
                    rows[r + 1][c] == value and
                    rows[r + 1][c + 1] == value):
                score += 3
    return score


def _count_finder_like(line: Sequence[int]) -> int:
    line = list(line)
    count = 0
    for i in range(len(line) - len(FINDER_LIKE) + 1):
        window = line[i:i + len(FINDER_LIKE)]
        if window == FINDER_LIKE or window == FINDER_LIKE_REVERSED:
            count += 1
    return count


def penalty_N3(rows: List[List[int]]) -> int:
    """
    Calculate penalty for finder-like patterns (Rule N3).

    Every horizontal or vertical occurrence of 10111010000 or 00001011101
    costs 40. The window slides over every position, so overlaps with rule
    N1 runs are counted as well.

    Args:
        rows (List[List[int]]): QR matrix (1=dark, 0=light)

    Returns:
        int: Penalty score for rule N3
    """
    count = sum(_count_finder_like(row) for row in rows)
    count += sum(_count_finder_like(col) for col in _columns(rows))
    return 40 * count


def penalty_N4(rows: List[List[int]]) -> int:
    """
    Calculate penalty for dark/light module ratio (Rule N4).

    With ``p`` the truncated percentage of dark modules, the two nearest
    multiples of five are ``p - p % 5`` and ``p + (5 - p % 5)``; the penalty is
    10 for every step of five the closer of them lies from 50.

    Example:
        >>> penalty_N4([[1, 0], [0, 1]])
        0
        >>> penalty_N4([[1, 1], [1, 0]])
        50
    """
    total = sum(len(row) for row in rows)
    dark = sum(sum(row) for row in rows)
    percentage = dark * 100 // total

    previous_multiple = percentage - percentage % 5
    next_multiple = percentage + (5 - percentage % 5)
    steps = min(abs(previous_multiple - 50), abs(next_multiple - 50)) // 5
    return steps * 10


def compute_mask_penalty(matrix: List[List[int]]) -> int:
    """
    Calculate total mask penalty score for a QR code matrix.

    Args:
        matrix (List[List[int]]): QR matrix (truthy=dark)

    Returns:
        int: Total penalty score (lower is better)
    """
    rows = [[1 if v else 0 for v in row] for row in matrix]
    return penalty_N1(rows) + penalty_N2(rows) + penalty_N3(rows) + penalty_N4(rows)


def select_best(candidates: List[MaskCandidate]) -> MaskCandidate:
    """
    Score every candidate and return the one with the lowest penalty.

    Ties go to the lowest mask id.
    """
    best = None
    for candidate in candidates:
        candidate.penalty = compute_mask_penalty(candidate.grid.to_bits())
        logger.debug("Mask %d penalty %d", candidate.mask_id, candidate.penalty)
        if best is None or candidate.penalty < best.penalty:
            best = candidate

    logger.info("Best mask is mask %d with penalty %d", best.mask_id, best.penalty)
    return best
