# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 codec for unsigned and signed 64-bit integers.

Decoders read one byte at a time from any object with a ``read(size)``
method (files, BytesIO, serial ports) or from plain bytes.

Example usage:
    import io
    from leb128_codec import encode_u64, decode_u64, encode_s64, decode_s64

    encode_u64(256)                   # b"\\x80\\x02"
    decode_u64(io.BytesIO(b"\\x80\\x02"))  # 256
    encode_s64(-256)                  # b"\\x80\\x7e"
    decode_s64(b"\\x80\\x7e")           # -256

    # Reading from a serial port
    from leb128_codec import SerialSource

    with SerialSource("/dev/ttyACM0") as source:
        value = decode_u64(source)
"""

from .signed import encode_s64, decode_s64
from .source import (
    MAX_ENCODED_LENGTH,
    Leb128Error,
    Leb128OverflowError,
    SourceError,
)
from .transport import (
    SerialSource,
    TransportError,
    TimeoutError,
)
from .unsigned import encode_u64, decode_u64

__version__ = "0.1.0"

__all__ = [
    # Unsigned
    "encode_u64",
    "decode_u64",
    # Signed
    "encode_s64",
    "decode_s64",
    # Errors
    "MAX_ENCODED_LENGTH",
    "Leb128Error",
    "Leb128OverflowError",
    "SourceError",
    # Transport
    "SerialSource",
    "TransportError",
    "TimeoutError",
]
