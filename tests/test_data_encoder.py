import pytest
from pytest import MonkeyPatch

from qrgen.data_encoder import (
    build_header,
    encode_data,
    pack_nibbles,
    pad_codewords,
    select_version,
)
from qrgen.exceptions import MessageTooLong, PlacementError


@pytest.mark.parametrize(
    "length, version",
    [(0, 1), (1, 1), (11, 1), (12, 2), (20, 2)],
)
def test_select_version(length: int, version: int) -> None:
    assert select_version(length).version == version


@pytest.mark.parametrize("length", [21, 152, 1000])
def test_select_version_too_long(length: int) -> None:
    with pytest.raises(MessageTooLong) as excinfo:
        select_version(length)
    assert excinfo.value.length == length
    assert excinfo.value.capacity == 20


def test_header_has_mode_and_length() -> None:
    assert build_header(b"AB", 1) == [0x4, 2, 0x41, 0x42]


def test_header_uses_two_length_bytes_from_version_10() -> None:
    assert build_header(b"A" * 300, 10)[:3] == [0x4, 0x01, 0x2C]


def test_pack_nibbles() -> None:
    assert pack_nibbles([0x4, 0x01, 0x41]) == [0x40, 0x14, 0x10]


def test_pad_codewords_alternate() -> None:
    assert pad_codewords([0x40], 6) == [0x40, 0xEC, 0x11, 0xEC, 0x11, 0xEC]


def test_pad_codewords_full_stream_untouched() -> None:
    assert pad_codewords([1, 2, 3], 3) == [1, 2, 3]


def test_encode_single_character() -> None:
    info, data = encode_data("A")
    assert info.version == 1
    assert list(data) == [0x40, 0x14, 0x10] + [0xEC, 0x11] * 5


@pytest.mark.parametrize("length", range(0, 21))
def test_data_length_matches_version(length: int) -> None:
    info, data = encode_data(b"x" * length)
    assert len(data) == info.total_codewords - info.parity_codewords


def test_full_version_1_has_no_padding() -> None:
    info, data = encode_data(b"\xff" * 11)
    assert info.version == 1
    assert len(data) == 13
    assert data[-1] == 0xF0


def test_text_is_utf8_encoded() -> None:
    _, data = encode_data("é")
    # two bytes: 0xC3 0xA9
    assert list(data[:4]) == [0x40, 0x2C, 0x3A, 0x90]


def test_too_long_message_raises() -> None:
    with pytest.raises(MessageTooLong):
        encode_data("x" * 152)


def test_overflowing_data_codewords_raise(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(
        "qrgen.data_encoder.pad_codewords", lambda packed, n: list(packed) + [0xEC] * n
    )
    with pytest.raises(PlacementError):
        encode_data(b"A")
