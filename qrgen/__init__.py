# -*- coding: utf-8 -*-
"""
QR Generator - Core Module

This package builds QR code symbols (versions 1-2, error correction level Q,
byte mode) from scratch and renders them as images.

Modules:
    qr_generator: Main QR code generation functions
    data_encoder: Mode/length header, nibble packing and padding
    ecc: Reed-Solomon parity codewords
    grid: Tagged module grid
    functional_areas: Finder, timing, alignment and format areas
    placement: Zig-zag data placement
    masking: Mask patterns and format information
    penalties: Mask pattern evaluation algorithms
    renderer: Image output
    printer: Terminal output
"""

__version__ = "1.0.0"

from .exceptions import MessageTooLong, PlacementError, QREncodeError, UnsupportedLayout
from .grid import CellState, ModuleGrid
from .penalties import compute_mask_penalty
from .qr_generator import QRSymbol, evaluate_all_masks, make_qr
from .renderer import render_png_bytes, render_svg_from_matrix, save_image, to_image
from .printer import format_matrix, print_qr

__all__ = [
    'make_qr',
    'evaluate_all_masks',
    'QRSymbol',
    'CellState',
    'ModuleGrid',
    'compute_mask_penalty',
    'to_image',
    'save_image',
    'render_png_bytes',
    'render_svg_from_matrix',
    'format_matrix',
    'print_qr',
    'QREncodeError',
    'MessageTooLong',
    'UnsupportedLayout',
    'PlacementError',
]
