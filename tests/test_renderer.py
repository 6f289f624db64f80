from pathlib import Path

import pytest
from PIL import Image

from qrgen import make_qr, render_png_bytes, render_svg_from_matrix, save_image, to_image


@pytest.fixture
def matrix():
    return make_qr("A").matrix


def test_image_size_and_mode(matrix) -> None:
    img = to_image(matrix, 1000)
    assert img.size == (1000, 1000)
    assert img.mode == "L"


def test_quiet_zone_and_modules(matrix) -> None:
    # 21 modules + 2 * 4 quiet zone, 10 px per module
    img = to_image(matrix, 290)
    assert img.getpixel((0, 0)) == 255
    assert img.getpixel((39, 39)) == 255
    # top-left finder corner is dark
    assert img.getpixel((45, 45)) == 0
    # finder light ring
    assert img.getpixel((55, 55)) == 255


def test_accepts_module_grid() -> None:
    qr = make_qr("A")
    assert list(to_image(qr.grid, 290).getdata()) == list(to_image(qr.matrix, 290).getdata())


@pytest.mark.parametrize("size_px", [0, -5])
def test_invalid_size(matrix, size_px: int) -> None:
    with pytest.raises(ValueError):
        to_image(matrix, size_px)


def test_save_image(matrix, tmp_path: Path) -> None:
    path = tmp_path / "qr.png"
    save_image(matrix, str(path), 500)
    with Image.open(path) as img:
        assert img.size == (500, 500)


def test_png_bytes(matrix) -> None:
    assert render_png_bytes(matrix, 100).startswith(b"\x89PNG")


def test_svg(matrix) -> None:
    svg = render_svg_from_matrix(matrix, border=4, scale=10).decode("utf-8")
    dark = sum(map(sum, matrix))
    assert svg.startswith('<?xml version="1.0"')
    assert 'width="290"' in svg
    assert svg.count("<rect") == dark + 1
