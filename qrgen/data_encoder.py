# -*- coding: utf-8 -*-
"""
QR Data Encoder Module

Builds the data codewords of a byte-mode symbol: mode indicator, character
count, message bytes and pad codewords.

Functions:
    select_version: Pick the smallest version that holds the message
    build_header: Mode indicator and length field
    pack_nibbles: Shift a byte stream into 4-bit alignment
    pad_codewords: Fill the remaining data capacity with pad codewords
    encode_data: Run the whole data encoding step
"""

import logging
from typing import List, Sequence, Tuple, Union

from .exceptions import MessageTooLong, PlacementError
from .tables import BYTE_MODE, PAD_CODEWORDS, VERSIONS, VersionInfo

logger = logging.getLogger(__name__)


def select_version(length: int) -> VersionInfo:
    """
    Select the smallest supported version whose byte capacity holds the message.

    Args:
        length (int): Message length in bytes

    Returns:
        VersionInfo: Descriptor of the selected version

    Raises:
        MessageTooLong: If the message exceeds the largest supported version

    Example:
        >>> select_version(1).version
        1
        >>> select_version(15).version
        2
    """
    for number in sorted(VERSIONS):
        info = VERSIONS[number]
        if length <= info.capacity_bytes:
            return info

    largest = VERSIONS[max(VERSIONS)]
    raise MessageTooLong(length, largest.capacity_bytes)


def build_header(message: bytes, version: int) -> List[int]:
    """
    Build the unpacked byte stream ``[mode, length..., message...]``.

    The character count indicator is 8 bits below version 10 and 16 bits
    from version 10 on.
    """
    stream = [BYTE_MODE]
    if version < 10:
        stream.append(len(message) & 0xFF)
    else:
        stream.append((len(message) >> 8) & 0xFF)
        stream.append(len(message) & 0xFF)
    stream.extend(message)
    return stream


def pack_nibbles(stream: Sequence[int]) -> List[int]:
    """
    Shift a byte stream left by four bits.

    Byte mode starts with a 4-bit mode indicator, so every following byte
    straddles two codewords. Each packed byte takes the low nibble of one
    source byte and the high nibble of the next; the last low nibble is
    followed by four zero bits, which double as the terminator.

    Example:
        >>> [hex(b) for b in pack_nibbles([0x4, 0x01, 0x41])]
        ['0x40', '0x14', '0x10']
    """
    packed = []
    for i, byte in enumerate(stream):
        high = (byte & 0x0F) << 4
        low = stream[i + 1] >> 4 if i + 1 < len(stream) else 0
        packed.append(high | low)
    return packed


def pad_codewords(packed: Sequence[int], data_codewords: int) -> List[int]:
    """Append 0xEC, 0x11, 0xEC, ... until ``data_codewords`` bytes are reached."""
    padded = list(packed)
    i = 0
    while len(padded) < data_codewords:
        padded.append(PAD_CODEWORDS[i % 2])
        i += 1
    return padded


def encode_data(message: Union[str, bytes]) -> Tuple[VersionInfo, bytes]:
    """
    Encode a message into the data codewords of the smallest fitting version.

    Args:
        message (Union[str, bytes]): Message to encode; text is UTF-8 encoded

    Returns:
        Tuple[VersionInfo, bytes]: (version_info, data_codewords)
            - data_codewords has exactly ``version_info.data_codewords`` bytes

    Raises:
        MessageTooLong: If the message does not fit in version 2
    """
    if isinstance(message, str):
        message = message.encode('utf-8')

    info = select_version(len(message))
    logger.info("Generating version %d QR code", info.version)

    packed = pack_nibbles(build_header(message, info.version))
    data = pad_codewords(packed, info.data_codewords)

    if len(data) != info.data_codewords:
        raise PlacementError(
            f"{len(data)} data codewords do not fit version {info.version} ({info.data_codewords})"
        )
    return info, bytes(data)
