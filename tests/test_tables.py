import pytest

from qrgen.exceptions import UnsupportedLayout
from qrgen.tables import FORMAT_STRINGS_Q, get_bit, get_version


def test_version_descriptors() -> None:
    v1 = get_version(1)
    assert (v1.size, v1.data_codewords, v1.parity_codewords) == (21, 13, 13)
    v2 = get_version(2)
    assert (v2.size, v2.data_codewords, v2.parity_codewords) == (25, 22, 22)


@pytest.mark.parametrize("version", [0, 3, 40])
def test_unknown_version(version: int) -> None:
    with pytest.raises(UnsupportedLayout):
        get_version(version)


def test_format_strings_are_15_bits() -> None:
    assert len(FORMAT_STRINGS_Q) == 8
    assert all(0 <= value < 1 << 15 for value in FORMAT_STRINGS_Q)
    # level Q is 11 in the two leading bits, followed by the mask id
    for mask_id, value in enumerate(FORMAT_STRINGS_Q):
        assert (value ^ 0x5412) >> 10 == 0b11000 | mask_id


def test_get_bit() -> None:
    assert [get_bit(0b1010, i) for i in range(4)] == [0, 1, 0, 1]
