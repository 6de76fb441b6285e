"""NDEF message decoder.

This module provides decode(), which turns the bytes read from a tag back into
an NDEFMessage, and safe_decode(), which reports failures as a result object
instead of raising.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import DecodeError, NdefError
from ..framing.tlv import strip_zero_padding, unwrap_tlv
from ..models.message import NDEFMessage
from ..models.record import NDEFRecord
from ..payloads.registry import record_from_bytes
from .encoder import validate_markers
from .fields import RawRecord, decode_record

log = logging.getLogger(__name__)


class DecodeResult(BaseModel):
    """Result of safe_decode().

    Attributes:
        success: True if the data decoded
        message: The decoded message (None on failure)
        error: Error text of the failure (None on success)
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    message: Optional[NDEFMessage] = None
    error: Optional[str] = None


def iter_raw_records(value: bytes) -> Iterator[RawRecord]:
    """Iterate over the records of a TLV value without interpreting payloads.

    Iteration stops after the record with the message end flag, or when the
    buffer is exhausted, whichever comes first.

    Raises:
        TruncatedRecordError: If a record is cut short
        ChunkingUnsupportedError: If a record has the chunk flag set
    """
    offset = 0
    while offset < len(value):
        raw = decode_record(value, offset)
        yield raw
        offset = raw.next_offset
        if raw.header.message_end:
            break


def decode(data: bytes, config: CodecConfig | None = None) -> NDEFMessage:
    """Decode a TLV-wrapped NDEF message.

    Leading and trailing zero padding is ignored. Payloads are not interpreted
    here: each record's payload() converts its bytes on demand, so a record
    with a malformed payload does not stop the rest of the message decoding.

    Args:
        data: Bytes read from the tag
        config: Codec configuration (defaults to DEFAULT_CONFIG)

    Returns:
        The decoded message; empty if data holds no records

    Raises:
        MalformedTLVError: If the TLV envelope is invalid
        TruncatedRecordError: If a record is cut short
        ChunkingUnsupportedError: If a record has the chunk flag set
        MarkerError: If config.validate_markers is set and the MB/ME flags
            are not exactly one each
        DecodeError: If config.allow_trailing_bytes is False and bytes follow
            the message end record

    Examples:
        ```python
        from ndefcodec import decode

        message = decode(bytes.fromhex("030cd1010855016e66632e636f6dfe"))
        assert message[0].payload() == "http://www.nfc.com"
        ```
    """
    config = config or DEFAULT_CONFIG

    data = strip_zero_padding(bytes(data))
    if not data:
        return NDEFMessage()

    value = unwrap_tlv(data)
    if not value:
        return NDEFMessage()

    raw_records = list(iter_raw_records(value))

    consumed = raw_records[-1].next_offset
    if consumed < len(value):
        trailing = len(value) - consumed
        if not config.allow_trailing_bytes:
            raise DecodeError(f"{trailing} unexpected bytes after message end record")
        log.warning("Ignoring %d trailing bytes after message end record", trailing)

    if config.validate_markers:
        validate_markers(
            [(raw.header.message_begin, raw.header.message_end) for raw in raw_records]
        )

    records = [_to_record(raw) for raw in raw_records]
    log.debug("Decoded %d records from %d bytes", len(records), len(data))
    return NDEFMessage(records)


def safe_decode(data: bytes, config: CodecConfig | None = None) -> DecodeResult:
    """Decode like decode(), but return a DecodeResult instead of raising.

    Examples:
        ```python
        result = safe_decode(tag_bytes)
        if result.success:
            for record in result.message:
                print(record.type, record.safe_payload())
        else:
            print("Could not read tag:", result.error)
        ```
    """
    try:
        message = decode(data, config=config)
    except NdefError as err:
        log.debug("Decode failed: %s", err)
        return DecodeResult(success=False, error=str(err))
    return DecodeResult(success=True, message=message)


def _to_record(raw: RawRecord) -> NDEFRecord:
    return record_from_bytes(raw.header.tnf, raw.type_name, raw.raw_payload, raw.id_name)
