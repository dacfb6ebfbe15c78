# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Serial port byte source for the LEB128 decoders.

A serial line has no end of input, so an empty read means the read
timed out. By default that is reported as an error.
"""

import logging

import serial

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Base exception for transport errors."""
    pass


class TimeoutError(TransportError):
    """Timeout waiting for data."""
    pass


class SerialSource:
    """
    Byte source reading from a serial port.

    Accepts device paths as well as pyserial URLs such as ``loop://``.
    Can be used as a context manager:
        with SerialSource("/dev/ttyACM0") as source:
            value = decode_u64(source)
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 115200,
        timeout: float = 5.0,
        eof_on_timeout: bool = False,
    ):
        """
        Open the serial port.

        Args:
            port: Serial port path or pyserial URL (e.g., "/dev/ttyACM0")
            baudrate: Baud rate (default 115200)
            timeout: Read timeout in seconds (default 5.0)
            eof_on_timeout: Report a timed out read as end of input
                instead of raising TimeoutError
        """
        self._ser = serial.serial_for_url(port, baudrate, timeout=timeout)
        self._eof_on_timeout = eof_on_timeout
        logger.debug(f"Opened serial source '{port}' at {baudrate} baud")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Close the serial connection."""
        if self._ser and self._ser.is_open:
            self._ser.close()
            logger.debug(f"Closed serial source '{self._ser.port}'")

    @property
    def port(self) -> str:
        """Return the serial port name."""
        return self._ser.port

    def read(self, size: int = 1) -> bytes:
        """
        Read up to size bytes.

        Returns:
            The bytes read, or b"" on timeout when eof_on_timeout is set

        Raises:
            TimeoutError: If nothing arrived before the timeout
        """
        data = self._ser.read(size)
        if not data and size > 0:
            if self._eof_on_timeout:
                return b""
            logger.warning(f"Timeout reading from '{self._ser.port}'")
            raise TimeoutError("Timeout waiting for data")
        return data

    def write(self, data: bytes) -> None:
        """Write raw bytes and flush."""
        self._ser.write(data)
        self._ser.flush()
