"""Message size calculation utilities.

This module provides functions to calculate how many bytes records and
messages occupy on a tag, useful for checking that a message fits the
capacity of a tag before writing it.
"""

from __future__ import annotations

from typing import Iterable

from ..codec.fields import SHORT_RECORD_LIMIT, resolve_raw_payload
from ..exceptions import MessageTooLargeError
from ..framing.tlv import MAX_LONG_LENGTH, MAX_SHORT_LENGTH
from ..models.record import NDEFRecord


def field_sizes(record: NDEFRecord) -> dict[str, int]:
    """Get the size in bytes of each wire field of a record.

    Args:
        record: Record to measure

    Returns:
        Dictionary mapping field names to their size in bytes, in wire order

    Raises:
        EncodeError: If the payload is only available asynchronously

    Example:
        >>> field_sizes(uri_record("http://www.nfc.com"))
        {'header': 1, 'type_length': 1, 'payload_length': 1, 'id_length': 0,
         'type': 1, 'id': 0, 'payload': 8}
    """
    raw_payload = resolve_raw_payload(record)
    raw_id = record.raw_id()
    return {
        "header": 1,
        "type_length": 1,
        "payload_length": 1 if len(raw_payload) < SHORT_RECORD_LIMIT else 4,
        "id_length": 0 if raw_id is None else 1,
        "type": len(record.raw_type()),
        "id": 0 if raw_id is None else len(raw_id),
        "payload": len(raw_payload),
    }


def record_size(record: NDEFRecord) -> int:
    """Calculate the encoded size of a single record in bytes."""
    return sum(field_sizes(record).values())


def encoded_size(records: Iterable[NDEFRecord]) -> int:
    """Calculate the size of the TLV-wrapped message in bytes.

    This equals ``len(encode(records))`` without building the output.

    Raises:
        MessageTooLargeError: If the records exceed the 65535-byte TLV limit,
            as encode() would
        EncodeError: If a payload is only available asynchronously

    Example:
        >>> encoded_size([uri_record("http://www.nfc.com")])
        15  # 2 bytes TLV header + 12 bytes record + terminator
    """
    body = sum(record_size(record) for record in records)
    if body == 0:
        return 0
    if body > MAX_LONG_LENGTH:
        raise MessageTooLargeError(
            f"NDEF message of {body} bytes exceeds the TLV limit of {MAX_LONG_LENGTH} bytes"
        )
    tlv_header = 2 if body <= MAX_SHORT_LENGTH else 4
    return tlv_header + body + 1
