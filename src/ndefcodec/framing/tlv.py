"""NDEF message TLV framing.

On a tag, the NDEF message is stored inside a Type-Length-Value block:

    [0x03] [length] [NDEF records ...] [0xFE]

The length is a single byte for messages of up to 254 bytes. Longer messages
use the 3-byte form: 0xFF followed by a 2-byte big-endian length. The block is
closed by the terminator TLV 0xFE. Tags are usually zero padded, so leading
and trailing 0x00 bytes are ignored when unframing.
"""

from __future__ import annotations

from ..exceptions import (
    InvalidTLVTagError,
    InvalidTLVTerminatorError,
    LongFormTooShortError,
    MessageTooLargeError,
    TLVLengthMismatchError,
    TLVTooShortError,
)
from ..utils.buffer import ByteWriter

NDEF_TLV_TAG = 0x03
TERMINATOR_TLV = 0xFE
LONG_FORM_MARKER = 0xFF
MAX_SHORT_LENGTH = 0xFE
MAX_LONG_LENGTH = 0xFFFF


def wrap_tlv(value: bytes) -> bytes:
    """Wrap concatenated NDEF records in an NDEF message TLV.

    Args:
        value: Encoded NDEF records

    Returns:
        TLV block including the 0xFE terminator

    Raises:
        MessageTooLargeError: If value is longer than 65535 bytes

    Example:
        >>> wrap_tlv(b"\\x01\\x02").hex()
        '03020102fe'
    """
    length = len(value)
    if length > MAX_LONG_LENGTH:
        raise MessageTooLargeError(
            f"NDEF message of {length} bytes exceeds the TLV limit of {MAX_LONG_LENGTH} bytes"
        )

    writer = ByteWriter()
    writer.write_uint8(NDEF_TLV_TAG)
    if length <= MAX_SHORT_LENGTH:
        writer.write_uint8(length)
    else:
        writer.write_uint8(LONG_FORM_MARKER)
        writer.write_uint16(length)
    writer.write_bytes(value)
    writer.write_uint8(TERMINATOR_TLV)

    return writer.to_bytes()


def strip_zero_padding(data: bytes) -> bytes:
    """Remove leading and trailing 0x00 bytes."""
    start = 0
    end = len(data)
    while start < end and data[start] == 0x00:
        start += 1
    while end > start and data[end - 1] == 0x00:
        end -= 1
    return bytes(data[start:end])


def unwrap_tlv(data: bytes) -> bytes:
    """Validate an NDEF message TLV and return its value.

    Zero padding around the block is stripped first. The checks run in this
    order: minimum size, tag byte, terminator byte, long-form size, total
    length.

    Args:
        data: TLV block, optionally zero padded

    Returns:
        The TLV value (the encoded NDEF records), possibly empty

    Raises:
        TLVTooShortError: If fewer than 3 bytes remain
        InvalidTLVTagError: If the first byte is not 0x03
        InvalidTLVTerminatorError: If the last byte is not 0xFE
        LongFormTooShortError: If the 3-byte length form is cut short
        TLVLengthMismatchError: If the length field disagrees with the data

    Example:
        >>> unwrap_tlv(bytes([0x03, 0x02, 0x01, 0x02, 0xFE]))
        b'\\x01\\x02'
    """
    data = strip_zero_padding(data)

    if len(data) < 3:
        raise TLVTooShortError()
    if data[0] != NDEF_TLV_TAG:
        raise InvalidTLVTagError()
    if data[-1] != TERMINATOR_TLV:
        raise InvalidTLVTerminatorError()

    if data[1] < LONG_FORM_MARKER:
        length = data[1]
        header_size = 2
    else:
        if len(data) < 5:
            raise LongFormTooShortError()
        length = (data[2] << 8) | data[3]
        header_size = 4

    expected_total = header_size + length + 1
    if len(data) != expected_total:
        raise TLVLengthMismatchError(expected_total, len(data))

    return data[header_size : header_size + length]
