# -*- coding: utf-8 -*-
"""
QR Version Tables

Static data for the supported symbol versions at error correction level Q.

Values come from ISO/IEC 18004:2015 tables 7 and 9 (byte mode, level Q):

    version  size   capacity  total cw  parity cw  blocks
    1        21x21  11        26        13         1
    2        25x25  20        44        22         1
"""

from typing import Dict, List, NamedTuple

from .exceptions import UnsupportedLayout

ECC_LEVEL = 'Q'

# Mode indicator for byte mode (0100)
BYTE_MODE = 0x4

# Pad codewords appended alternately after the packed data
PAD_CODEWORDS = (0xEC, 0x11)


class VersionInfo(NamedTuple):
    """Capacity description of one symbol version."""

    version: int
    capacity_bytes: int
    total_codewords: int
    parity_codewords: int
    block_count: int = 1

    @property
    def data_codewords(self) -> int:
        return self.total_codewords - self.parity_codewords

    @property
    def size(self) -> int:
        return 4 * (self.version - 1) + 21


VERSIONS: Dict[int, VersionInfo] = {
    1: VersionInfo(1, capacity_bytes=11, total_codewords=26, parity_codewords=13),
    2: VersionInfo(2, capacity_bytes=20, total_codewords=44, parity_codewords=22),
}

MAX_VERSION = max(VERSIONS)

# 15-bit format strings for level Q, indexed by mask id
FORMAT_STRINGS_Q: List[int] = [
    0x355F, 0x3068, 0x3F31, 0x3A06, 0x24B4, 0x2183, 0x2EDA, 0x2BED,
]


def get_version(version: int) -> VersionInfo:
    """
    Look up the descriptor of a supported version.

    Raises:
        UnsupportedLayout: if the version is outside the table
    """
    try:
        return VERSIONS[version]
    except KeyError:
        raise UnsupportedLayout(version) from None


def get_bit(value: int, offset: int) -> int:
    """Return bit ``offset`` (0 = least significant) of ``value``."""
    return (value >> offset) & 1
