# -*- coding: utf-8 -*-
"""
QR Code Generator Module

This module runs the full symbol construction pipeline for short byte-mode
messages at error correction level Q:

    data encoding -> error correction -> function patterns
        -> zig-zag placement -> masking and evaluation

Functions:
    make_qr: Generate a QR code symbol for a message
    evaluate_all_masks: Score all mask patterns for a message
"""

import logging
from typing import Dict, Optional, Tuple, Union

from .data_encoder import encode_data
from .ecc import build_payload
from .functional_areas import build_reserved_grid
from .grid import ModuleGrid
from .masking import MASK_PATTERNS, MaskCandidate, build_candidates
from .penalties import select_best
from .placement import place_payload

logger = logging.getLogger(__name__)


class QRSymbol:
    """
    A finished QR code symbol.

    Attributes:
        version (int): Symbol version (1 or 2)
        size (int): Modules per side
        mask (int): Applied mask pattern (0-7)
        penalty (int): Penalty score of the applied mask
        scores (Dict[int, int]): Penalty score of every mask pattern
        data_codewords (bytes): Data codewords (header, message, padding)
        payload (bytes): Data codewords followed by parity codewords
        grid (ModuleGrid): Final tagged module grid
    """

    error = 'Q'

    def __init__(self, version: int, mask: int, penalty: int, scores: Dict[int, int],
                 data_codewords: bytes, payload: bytes, grid: ModuleGrid):
        self.version = version
        self.size = grid.size
        self.mask = mask
        self.penalty = penalty
        self.scores = scores
        self.data_codewords = data_codewords
        self.payload = payload
        self.grid = grid

    @property
    def matrix(self) -> Tuple[Tuple[int, ...], ...]:
        """Rows of 1 (dark) and 0 (light), without quiet zone."""
        return tuple(tuple(row) for row in self.grid.to_bits())

    def __repr__(self) -> str:
        return f"QRSymbol(version={self.version}, size={self.size}, mask={self.mask})"


def _build_candidates(message: Union[str, bytes]):
    info, data = encode_data(message)
    payload = build_payload(data, info)
    reserved = build_reserved_grid(info.version)
    placed = place_payload(reserved, payload)
    return info, data, payload, build_candidates(placed)


def make_qr(message: Union[str, bytes], mask: Union[str, int, None] = 'auto') -> QRSymbol:
    """
    Generate a QR code symbol for a short message.

    The smallest version that holds the message is selected automatically.
    All eight masks are generated and scored; the lowest penalty wins, ties
    going to the lowest mask id.

    Args:
        message (Union[str, bytes]): Data to encode; text is UTF-8 encoded
        mask (Union[str, int, None]): Mask pattern
            - 'auto' or None: Apply the lowest-penalty mask
            - int: Force a specific mask pattern (0-7)

    Returns:
        QRSymbol: The finished symbol

    Raises:
        MessageTooLong: If the message does not fit in version 2
        UnsupportedLayout: If the layout needs more than one ECC block
        ValueError: If ``mask`` is not 'auto' or 0-7

    Example:
        >>> qr = make_qr("A")
        >>> qr.version, qr.size
        (1, 21)
    """
    forced: Optional[int] = None
    if mask not in (None, 'auto'):
        forced = int(mask)
        if forced not in MASK_PATTERNS:
            raise ValueError(f"Invalid mask pattern: {mask}")

    info, data, payload, candidates = _build_candidates(message)
    best = select_best(candidates)
    scores = {candidate.mask_id: candidate.penalty for candidate in candidates}

    chosen: MaskCandidate = best if forced is None else candidates[forced]
    if forced is not None:
        logger.info("Using forced mask %d (penalty %d)", chosen.mask_id, chosen.penalty)

    return QRSymbol(
        version=info.version,
        mask=chosen.mask_id,
        penalty=chosen.penalty,
        scores=scores,
        data_codewords=data,
        payload=payload,
        grid=chosen.grid,
    )


def evaluate_all_masks(message: Union[str, bytes]) -> Tuple[int, int, Dict[int, int]]:
    """
    Evaluate all mask patterns (0-7) for a message.

    Returns:
        Tuple[int, int, Dict[int, int]]: (best_mask, best_score, all_scores)

    Example:
        >>> best_mask, best_score, scores = evaluate_all_masks("Hello")
        >>> scores[best_mask] == best_score
        True
    """
    qr = make_qr(message)
    return qr.mask, qr.penalty, dict(qr.scores)

