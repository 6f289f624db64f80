# -*- coding: utf-8 -*-
"""
Error Correction Adapter

Computes Reed-Solomon parity codewords with ``reedsolo`` and appends them to
the data codewords. Only single-block layouts are built.
"""

from reedsolo import RSCodec

from .exceptions import UnsupportedLayout
from .tables import VersionInfo


def compute_parity(data: bytes, parity_codewords: int) -> bytes:
    """
    Return ``parity_codewords`` Reed-Solomon parity bytes for ``data``.

    reedsolo's defaults (primitive polynomial 0x11D, generator 2, first
    consecutive root 0) are the QR code field parameters.
    """
    codec = RSCodec(parity_codewords)
    encoded = codec.encode(bytearray(data))
    return bytes(encoded[len(data):])


def build_payload(data: bytes, info: VersionInfo) -> bytes:
    """
    Concatenate data codewords and their parity codewords.

    Args:
        data (bytes): Data codewords, ``info.data_codewords`` long
        info (VersionInfo): Version descriptor

    Returns:
        bytes: Final codeword sequence, ``info.total_codewords`` long

    Raises:
        UnsupportedLayout: If the version uses more than one block
    """
    if info.block_count > 1:
        raise UnsupportedLayout(info.version, info.block_count)

    return bytes(data) + compute_parity(data, info.parity_codewords)
