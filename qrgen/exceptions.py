# -*- coding: utf-8 -*-
"""
QR Encoding Errors

All failures raised by the encoding pipeline. Encoding is deterministic, so
none of these are worth retrying with the same input.
"""


class QREncodeError(ValueError):
    """Base class for errors caused by the requested symbol."""


class MessageTooLong(QREncodeError):
    """The message does not fit in any supported version."""

    def __init__(self, length: int, capacity: int):
        self.length = length
        self.capacity = capacity
        super().__init__(
            f"Message is too long: {length} bytes (must be {capacity} bytes or less)"
        )


class UnsupportedLayout(QREncodeError):
    """The requested version would need a layout this encoder does not build."""

    def __init__(self, version: int, blocks: int = 1):
        self.version = version
        self.blocks = blocks
        if blocks > 1:
            msg = f"Version {version} needs {blocks} error correction blocks"
        else:
            msg = f"Version {version} is not supported"
        super().__init__(msg)


class PlacementError(RuntimeError):
    """Internal invariant violated while building the module grid."""
