# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned LEB128 encoding/decoding for 64-bit values.

Each byte carries 7 bits of the value, least significant group first.
The high bit is set on every byte except the last.
"""

from .source import (
    CONTINUATION_BIT,
    MAX_ENCODED_LENGTH,
    PAYLOAD_MASK,
    U64_MASK,
    ByteSource,
    Leb128OverflowError,
    as_source,
    read_byte,
)


def encode_u64(value: int) -> bytes:
    """
    Encode an unsigned 64-bit integer.

    Args:
        value: Integer in the range [0, 2**64)

    Returns:
        Minimal unsigned LEB128 encoding (1 to 10 bytes)

    Raises:
        ValueError: If value does not fit in an unsigned 64-bit integer
    """
    if value < 0:
        raise ValueError(f"Cannot encode negative value as u64: {value}")
    if value > U64_MASK:
        raise ValueError(f"Value too large for u64: {value}")

    result = bytearray()
    while True:
        byte = value & PAYLOAD_MASK
        value >>= 7
        if value == 0:
            result.append(byte)
            break
        result.append(byte | CONTINUATION_BIT)
    return bytes(result)


def decode_u64(source: ByteSource) -> int:
    """
    Decode an unsigned 64-bit integer from a byte source.

    Reading stops at the first byte without the continuation bit, so
    anything after it is left in the source. A source that runs out
    before that byte yields whatever was accumulated (0 if empty).

    Args:
        source: Object with a ``read(size)`` method, or bytes

    Returns:
        Decoded value in the range [0, 2**64)

    Raises:
        Leb128OverflowError: If more than 10 bytes carry the continuation bit
        SourceError: If the source fails while reading
        TypeError: If source is not a readable object or byte sequence
    """
    source = as_source(source)
    value = 0

    for index in range(MAX_ENCODED_LENGTH + 1):
        byte = read_byte(source)
        if byte is None:
            break
        if index == MAX_ENCODED_LENGTH:
            raise Leb128OverflowError(
                f"u64 decode: no terminator within {MAX_ENCODED_LENGTH} bytes"
            )

        value |= (byte & PAYLOAD_MASK) << (7 * index)

        if not (byte & CONTINUATION_BIT):
            break

    # The 10th byte may carry bits past bit 63; they are dropped.
    return value & U64_MASK
