# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Shared constants, errors and byte source handling for the LEB128 codecs.

A byte source is anything with a ``read(size)`` method that follows the
file/pyserial convention: ``read(1)`` returns one byte, returns ``b""``
once the source is cleanly exhausted, or raises on failure.
"""

import io
from collections.abc import Sequence as SequenceABC
from typing import BinaryIO, Optional, Sequence, Union

# ceil(64 / 7): longest conforming encoding of a 64-bit integer
MAX_ENCODED_LENGTH = 10

PAYLOAD_MASK = 0x7F
CONTINUATION_BIT = 0x80
SIGN_BIT = 0x40

U64_MASK = (1 << 64) - 1

ByteSource = Union[BinaryIO, bytes, bytearray, memoryview, Sequence[int]]


class Leb128Error(Exception):
    """Base exception for LEB128 decode errors."""
    pass


class Leb128OverflowError(Leb128Error):
    """Encoding is longer than any 64-bit value can need."""
    pass


class SourceError(Leb128Error):
    """The byte source failed while reading."""

    def __init__(self, cause: BaseException):
        super().__init__(f"Byte source read failed: {cause!r}")
        self.cause = cause


def as_source(source: ByteSource) -> BinaryIO:
    """
    Return a readable byte source.

    Bytes-like objects and sequences of ints are wrapped in a BytesIO;
    anything with a ``read`` method is returned unchanged.

    Raises:
        TypeError: If source is neither readable nor a byte sequence
    """
    if hasattr(source, "read"):
        return source
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source))
    if isinstance(source, SequenceABC) and not isinstance(source, str):
        return io.BytesIO(bytes(source))
    raise TypeError(f"Expected a byte source, got {type(source).__name__}")


def read_byte(source: BinaryIO) -> Optional[int]:
    """
    Read a single byte from a source.

    Returns:
        The byte value, or None on clean end of input

    Raises:
        SourceError: If the source raised while reading, or a
            non-blocking source had no byte ready
    """
    try:
        data = source.read(1)
    except Exception as exc:
        raise SourceError(exc) from exc

    # Non-blocking raw streams return None when no data is available yet
    if data is None:
        exc = BlockingIOError("No data available from non-blocking source")
        raise SourceError(exc) from exc

    if len(data) == 0:
        return None
    return data[0]
