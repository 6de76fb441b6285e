"""Byte-level packing and unpacking utilities.

This module provides the cursor-based reader and writer used by the record
and TLV codecs. All multi-byte integers are big-endian, as NDEF requires.
"""

from __future__ import annotations

import struct


class ByteWriter:
    """Appends fixed-width integers and raw bytes to a growing buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_uint8(0xD1)
        >>> writer.write_uint32(300)
        >>> writer.write_bytes(b"U")
        >>> data = writer.to_bytes()
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_uint8(self, value: int) -> None:
        """Write an unsigned 8-bit integer.

        Raises:
            ValueError: If value is outside 0-255
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Value {value} does not fit in 8 bits")
        self._buffer.append(value)

    def write_uint16(self, value: int) -> None:
        """Write an unsigned 16-bit big-endian integer.

        Raises:
            ValueError: If value is outside 0-65535
        """
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"Value {value} does not fit in 16 bits")
        self._buffer.extend(struct.pack(">H", value))

    def write_uint32(self, value: int) -> None:
        """Write an unsigned 32-bit big-endian integer.

        Raises:
            ValueError: If value is outside 0-(2^32 - 1)
        """
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"Value {value} does not fit in 32 bits")
        self._buffer.extend(struct.pack(">I", value))

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._buffer.extend(data)

    def __len__(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the written bytes."""
        return bytes(self._buffer)


class ByteReader:
    """Reads fixed-width integers and raw bytes from a buffer at a cursor.

    Every read checks that enough bytes remain and raises IndexError otherwise,
    so callers can translate a short read into their own error type.

    Example:
        >>> reader = ByteReader(data, offset=0)
        >>> header = reader.read_uint8()
        >>> payload_length = reader.read_uint32()
        >>> payload = reader.read_bytes(payload_length)
    """

    def __init__(self, data: bytes, offset: int = 0) -> None:
        """Initialize a reader over data, starting at offset.

        Args:
            data: Byte buffer to read from
            offset: Initial cursor position
        """
        if not 0 <= offset <= len(data):
            raise ValueError(f"Offset {offset} outside buffer of {len(data)} bytes")
        self._data = data
        self._position = offset

    def _take(self, num_bytes: int) -> bytes:
        if self._position + num_bytes > len(self._data):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )
        chunk = self._data[self._position : self._position + num_bytes]
        self._position += num_bytes
        return bytes(chunk)

    def read_uint8(self) -> int:
        """Read an unsigned 8-bit integer.

        Raises:
            IndexError: If no bytes remain
        """
        return self._take(1)[0]

    def read_uint16(self) -> int:
        """Read an unsigned 16-bit big-endian integer.

        Raises:
            IndexError: If fewer than 2 bytes remain
        """
        return int(struct.unpack(">H", self._take(2))[0])

    def read_uint32(self) -> int:
        """Read an unsigned 32-bit big-endian integer.

        Raises:
            IndexError: If fewer than 4 bytes remain
        """
        return int(struct.unpack(">I", self._take(4))[0])

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read num_bytes raw bytes.

        Raises:
            IndexError: If fewer than num_bytes remain
        """
        return self._take(num_bytes)

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current cursor position in bytes."""
        return self._position
