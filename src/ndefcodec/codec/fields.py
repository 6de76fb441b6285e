"""Record field codec.

A record on the wire is laid out as:

    [header:1] [type length:1] [payload length:1 or 4] [id length:1, if IL]
    [type] [id, if IL] [payload]

This module packs a single record into that layout and reads it back.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..exceptions import (
    EncodeError,
    IdTooLongError,
    PayloadTooLargeError,
    TruncatedRecordError,
    TypeTooLongError,
)
from ..models.record import NDEFRecord
from ..models.tnf import TNF
from ..utils.buffer import ByteReader, ByteWriter
from .header import RecordHeader

log = logging.getLogger(__name__)

MAX_TYPE_LENGTH = 0xFF
MAX_ID_LENGTH = 0xFF
MAX_PAYLOAD_LENGTH = 0xFFFFFFFF
SHORT_RECORD_LIMIT = 256


@dataclass(frozen=True)
class RawRecord:
    """A record as read from the wire, before payload interpretation.

    Attributes:
        header: Decoded header byte
        raw_type: Type field bytes
        raw_id: ID field bytes, or None if the IL flag was clear
        raw_payload: Payload bytes
        offset: Position of the header byte in the source buffer
        next_offset: Position just after the payload
    """

    header: RecordHeader
    raw_type: bytes
    raw_id: Optional[bytes]
    raw_payload: bytes
    offset: int
    next_offset: int

    @property
    def type_name(self) -> str:
        """Type field decoded as UTF-8."""
        return self.raw_type.decode("utf-8", errors="replace")

    @property
    def id_name(self) -> Optional[str]:
        """ID field decoded as UTF-8, or None."""
        if self.raw_id is None:
            return None
        return self.raw_id.decode("utf-8", errors="replace")

    @property
    def size(self) -> int:
        """Number of bytes the record occupies on the wire."""
        return self.next_offset - self.offset


# ============================================================================
# Encoding
# ============================================================================


def pack_record(
    tnf: TNF,
    raw_type: bytes,
    raw_id: Optional[bytes],
    raw_payload: bytes,
    *,
    is_beginning: bool,
    is_end: bool,
) -> bytes:
    """Pack already-resolved record fields into wire format.

    Args:
        tnf: Type Name Format of the record
        raw_type: Type field bytes
        raw_id: ID field bytes, or None for no ID
        raw_payload: Payload bytes
        is_beginning: Set the message begin flag
        is_end: Set the message end flag

    Returns:
        The encoded record

    Raises:
        TypeTooLongError: If raw_type is longer than 255 bytes
        IdTooLongError: If raw_id is longer than 255 bytes
        PayloadTooLargeError: If raw_payload is longer than 2^32 - 1 bytes

    Example:
        >>> pack_record(TNF.WELL_KNOWN, b"U", None, b"\\x01nfc.com",
        ...             is_beginning=True, is_end=True).hex()
        'd1010855016e66632e636f6d'
    """
    if len(raw_payload) > MAX_PAYLOAD_LENGTH:
        raise PayloadTooLargeError(
            "Payload length exceeds maximum allowed length of 2^32 - 1 bytes."
        )
    if len(raw_type) > MAX_TYPE_LENGTH:
        raise TypeTooLongError("Type length exceeds maximum allowed length of 255 bytes.")
    if raw_id is not None and len(raw_id) > MAX_ID_LENGTH:
        raise IdTooLongError("ID length exceeds maximum allowed length of 255 bytes.")

    is_short = len(raw_payload) < SHORT_RECORD_LIMIT
    has_id = raw_id is not None

    header = RecordHeader(
        tnf=tnf,
        message_begin=is_beginning,
        message_end=is_end,
        short_record=is_short,
        id_length_present=has_id,
    )

    writer = ByteWriter()
    writer.write_uint8(header.to_byte())
    writer.write_uint8(len(raw_type))
    if is_short:
        writer.write_uint8(len(raw_payload))
    else:
        writer.write_uint32(len(raw_payload))
    if raw_id is not None:
        writer.write_uint8(len(raw_id))
    writer.write_bytes(raw_type)
    if raw_id is not None:
        writer.write_bytes(raw_id)
    writer.write_bytes(raw_payload)

    return writer.to_bytes()


def encode_record(record: NDEFRecord, *, is_beginning: bool, is_end: bool) -> bytes:
    """Encode one record, resolving its payload synchronously.

    Raises:
        EncodeError: If the payload accessor returns an awaitable or non-bytes,
            or if any field exceeds its length limit
    """
    raw_payload = resolve_raw_payload(record)
    return pack_record(
        record.tnf,
        record.raw_type(),
        record.raw_id(),
        raw_payload,
        is_beginning=is_beginning,
        is_end=is_end,
    )


async def encode_record_async(record: NDEFRecord, *, is_beginning: bool, is_end: bool) -> bytes:
    """Encode one record, awaiting its payload accessor if needed."""
    raw_payload = record.raw_payload()
    if inspect.isawaitable(raw_payload):
        raw_payload = await raw_payload
    return pack_record(
        record.tnf,
        record.raw_type(),
        record.raw_id(),
        _require_bytes(record, raw_payload),
        is_beginning=is_beginning,
        is_end=is_end,
    )


def resolve_raw_payload(record: NDEFRecord) -> bytes:
    """Return the payload bytes of record, which must be available synchronously.

    Raises:
        EncodeError: If the accessor returns an awaitable or something other
            than bytes
    """
    return _require_bytes(record, record.raw_payload())


def _require_bytes(record: NDEFRecord, value: Any) -> bytes:
    if inspect.isawaitable(value):
        if inspect.iscoroutine(value):
            value.close()
        raise EncodeError(
            f"Payload of {record.type!r} record is produced asynchronously; "
            f"use encode_async() or NDEFMessage.to_bytes_async()"
        )
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise EncodeError(
            f"Raw payload of {record.type!r} record must be bytes, got {type(value).__name__}"
        )
    return bytes(value)


# ============================================================================
# Decoding
# ============================================================================


def decode_record_fields(data: bytes, offset: int, header: RecordHeader) -> RawRecord:
    """Read the fields following an already-decoded header byte.

    Args:
        data: Buffer holding the NDEF records (TLV value)
        offset: Position of the header byte in data
        header: The decoded header at data[offset]

    Returns:
        RawRecord with next_offset pointing just past the payload

    Raises:
        TruncatedRecordError: If data ends before a field is complete
    """
    reader = ByteReader(data, offset + 1)
    field = "TYPE_LENGTH"
    try:
        type_length = reader.read_uint8()

        if header.short_record:
            field = "PAYLOAD_LENGTH (short record)"
            payload_length = reader.read_uint8()
        else:
            field = "PAYLOAD_LENGTH (long record)"
            payload_length = reader.read_uint32()

        id_length = 0
        if header.id_length_present:
            field = "ID_LENGTH"
            id_length = reader.read_uint8()

        field = "TYPE"
        raw_type = reader.read_bytes(type_length)

        raw_id: Optional[bytes] = None
        if header.id_length_present:
            field = "ID"
            raw_id = reader.read_bytes(id_length)

        field = "PAYLOAD"
        raw_payload = reader.read_bytes(payload_length)
    except IndexError as err:
        raise TruncatedRecordError(field) from err

    return RawRecord(
        header=header,
        raw_type=raw_type,
        raw_id=raw_id,
        raw_payload=raw_payload,
        offset=offset,
        next_offset=reader.position(),
    )


def decode_record(data: bytes, offset: int) -> RawRecord:
    """Read the header byte at offset and the fields that follow it.

    Raises:
        TruncatedRecordError: If data ends before the record is complete
        ChunkingUnsupportedError: If the header has the chunk flag set
    """
    if offset >= len(data):
        raise TruncatedRecordError("HEADER")
    header = RecordHeader.from_byte(data[offset])
    record = decode_record_fields(data, offset, header)
    log.debug(
        "Record at offset %d: tnf=%s type=%r payload=%d bytes",
        offset,
        header.tnf.label,
        record.type_name,
        len(record.raw_payload),
    )
    return record
