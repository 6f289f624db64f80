# -*- coding: utf-8 -*-
"""
QR Code Renderer Module

Turns a finished module matrix into images. The core hands over rows of
1 (dark) and 0 (light); everything here is presentation only.

Functions:
    to_image: Grayscale PIL image with quiet zone, scaled to a pixel size
    save_image: Write the grayscale image to a file
    render_png_bytes: Grayscale PNG as bytes
    render_svg_from_matrix: Black and white SVG made of module rectangles
"""

import logging
from io import BytesIO
from typing import Sequence, Union

import numpy as np
from PIL import Image

from .grid import ModuleGrid

logger = logging.getLogger(__name__)

QUIET_ZONE = 4

Matrix = Union[ModuleGrid, Sequence[Sequence[int]]]


def _as_array(matrix: Matrix) -> np.ndarray:
    if isinstance(matrix, ModuleGrid):
        return matrix.to_array()
    return np.array([[1 if v else 0 for v in row] for row in matrix], dtype=np.uint8)


def to_image(matrix: Matrix, size_px: int, border: int = QUIET_ZONE) -> Image.Image:
    """
    Render a module matrix as a grayscale image.

    Dark modules become black (0), light modules and the quiet zone white
    (255). The symbol is drawn one pixel per module and then resized with
    nearest-neighbour filtering so module edges stay sharp.

    Args:
        matrix (Matrix): ModuleGrid or rows of 1 (dark) / 0 (light)
        size_px (int): Width and height of the output image in pixels
        border (int): Quiet zone size in modules

    Returns:
        Image.Image: Image in mode "L"

    Example:
        >>> from qrgen import make_qr
        >>> img = to_image(make_qr("A").matrix, 290)
        >>> img.size
        (290, 290)
    """
    if size_px <= 0:
        raise ValueError(f"Invalid image size: {size_px}")
    if border < 0:
        raise ValueError(f"Invalid quiet zone: {border}")

    modules = np.pad(_as_array(matrix), border, mode='constant', constant_values=0)
    pixels = ((1 - modules) * 255).astype(np.uint8)
    img = Image.fromarray(pixels)
    return img.resize((size_px, size_px), Image.Resampling.NEAREST)


def save_image(matrix: Matrix, path: str, size_px: int, border: int = QUIET_ZONE) -> None:
    """Render ``matrix`` with ``to_image`` and save it; the format follows the file extension."""
    to_image(matrix, size_px, border=border).save(path)
    logger.info("Saved to %s", path)


def render_png_bytes(matrix: Matrix, size_px: int, border: int = QUIET_ZONE) -> bytes:
    buf = BytesIO()
    to_image(matrix, size_px, border=border).save(buf, format='PNG')
    return buf.getvalue()


def render_svg_from_matrix(
    matrix: Matrix,
    border: int = QUIET_ZONE,
    scale: int = 10,
    light: str = "#ffffff",
    dark: str = "#000000"
) -> bytes:
    """
    Render a module matrix as SVG, one rectangle per dark module.

    Args:
        matrix (Matrix): ModuleGrid or rows of 1 (dark) / 0 (light)
        border (int): Quiet zone size in modules
        scale (int): Pixel size per module
        light (str): Background color
        dark (str): Module color

    Returns:
        bytes: UTF-8 encoded SVG content
    """
    rows = _as_array(matrix)
    n = rows.shape[0]
    px = (n + 2 * border) * scale

    out = []
    out.append('<?xml version="1.0" encoding="UTF-8"?>')
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{px}" height="{px}" viewBox="0 0 {px} {px}">')
    out.append(f'<rect width="{px}" height="{px}" fill="{light}"/>')

    for r in range(n):
        for c in range(n):
            if not rows[r, c]:
                continue
            x = (c + border) * scale
            y = (r + border) * scale
            out.append(f'<rect x="{x}" y="{y}" width="{scale}" height="{scale}" fill="{dark}"/>')

    out.append('</svg>')
    return "\n".join(out).encode("utf-8")
