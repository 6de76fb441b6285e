"""Unit tests for byte buffer utilities."""

from __future__ import annotations

import pytest

from ndefcodec.utils.buffer import ByteReader, ByteWriter


class TestByteWriter:
    """Test ByteWriter functionality."""

    def test_write_integers_big_endian(self) -> None:
        """Test multi-byte integers are written big-endian."""
        writer = ByteWriter()
        writer.write_uint8(0xD1)
        writer.write_uint16(0x013C)
        writer.write_uint32(300)

        assert writer.to_bytes() == b"\xd1\x01\x3c\x00\x00\x01\x2c"
        assert len(writer) == 7

    def test_write_bytes(self) -> None:
        """Test writing raw bytes."""
        writer = ByteWriter()
        writer.write_bytes(b"U")
        writer.write_bytes(b"\x01nfc.com")

        assert writer.to_bytes() == b"U\x01nfc.com"

    def test_write_bounds(self) -> None:
        """Test integer bounds checking."""
        writer = ByteWriter()

        with pytest.raises(ValueError, match="8 bits"):
            writer.write_uint8(256)

        with pytest.raises(ValueError, match="16 bits"):
            writer.write_uint16(-1)

        with pytest.raises(ValueError, match="32 bits"):
            writer.write_uint32(2**32)


class TestByteReader:
    """Test ByteReader functionality."""

    def test_read_sequence(self) -> None:
        """Test reading fields in order advances the cursor."""
        reader = ByteReader(b"\xd1\x01\x3c\x00\x00\x01\x2cU")

        assert reader.read_uint8() == 0xD1
        assert reader.read_uint16() == 0x013C
        assert reader.read_uint32() == 300
        assert reader.read_bytes(1) == b"U"
        assert reader.bytes_remaining() == 0
        assert reader.position() == 8

    def test_start_offset(self) -> None:
        """Test reading from a non-zero offset."""
        reader = ByteReader(b"\x00\x00\x07", offset=2)
        assert reader.read_uint8() == 7

    def test_short_read_raises_index_error(self) -> None:
        """Test reading past the end raises IndexError and keeps the cursor."""
        reader = ByteReader(b"\x01\x02")

        with pytest.raises(IndexError, match="need 4, have 2"):
            reader.read_uint32()

        assert reader.position() == 0
        assert reader.read_uint16() == 0x0102

    def test_invalid_offset(self) -> None:
        """Test an offset past the buffer is rejected."""
        with pytest.raises(ValueError, match="outside buffer"):
            ByteReader(b"\x01", offset=2)
