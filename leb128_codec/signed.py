# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Signed LEB128 encoding/decoding for 64-bit values.

Same 7-bit grouping as the unsigned form. Bit 6 (0x40) of the last
group is the sign: when set, every bit above the decoded groups is 1.
"""

from .source import (
    CONTINUATION_BIT,
    MAX_ENCODED_LENGTH,
    PAYLOAD_MASK,
    SIGN_BIT,
    U64_MASK,
    ByteSource,
    Leb128OverflowError,
    as_source,
    read_byte,
)

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1


def _to_i64(value: int) -> int:
    """Interpret the low 64 bits of value as two's complement."""
    value &= U64_MASK
    if value & (1 << 63):
        value -= 1 << 64
    return value


def encode_s64(value: int) -> bytes:
    """
    Encode a signed 64-bit integer.

    Args:
        value: Integer in the range [-2**63, 2**63)

    Returns:
        Minimal signed LEB128 encoding (1 to 10 bytes)

    Raises:
        ValueError: If value does not fit in a signed 64-bit integer
    """
    if not I64_MIN <= value <= I64_MAX:
        raise ValueError(f"Value out of range for i64: {value}")

    result = bytearray()
    while True:
        byte = value & PAYLOAD_MASK
        value >>= 7  # arithmetic on Python ints
        sign_set = bool(byte & SIGN_BIT)

        # Done once the rest is only a copy of the sign bit just emitted
        if (value == 0 and not sign_set) or (value == -1 and sign_set):
            result.append(byte)
            break
        result.append(byte | CONTINUATION_BIT)
    return bytes(result)


def decode_s64(source: ByteSource) -> int:
    """
    Decode a signed 64-bit integer from a byte source.

    Stops at the terminating byte and leaves the rest of the source
    unread. If the source runs out first, the bits accumulated so far
    are returned as-is, without sign extension.

    Args:
        source: Object with a ``read(size)`` method, or bytes

    Returns:
        Decoded value in the range [-2**63, 2**63)

    Raises:
        Leb128OverflowError: If more than 10 bytes carry the continuation bit
        SourceError: If the source fails while reading
        TypeError: If source is not a readable object or byte sequence
    """
    source = as_source(source)
    value = 0
    shift = 0

    for index in range(MAX_ENCODED_LENGTH + 1):
        byte = read_byte(source)
        if byte is None:
            break
        if index == MAX_ENCODED_LENGTH:
            raise Leb128OverflowError(
                f"s64 decode: no terminator within {MAX_ENCODED_LENGTH} bytes"
            )

        value |= (byte & PAYLOAD_MASK) << shift
        shift += 7

        if not (byte & CONTINUATION_BIT):
            if byte & SIGN_BIT:
                value |= U64_MASK & ~((1 << shift) - 1)
            break

    return _to_i64(value)
