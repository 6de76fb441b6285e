"""NDEF message encoder.

This module provides encode() and encode_async(), which serialize a sequence
of records into a TLV-wrapped NDEF message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..exceptions import (
    DuplicateBeginMarkerError,
    DuplicateEndMarkerError,
    MissingBeginMarkerError,
    MissingEndMarkerError,
)
from ..framing.tlv import wrap_tlv
from ..models.record import NDEFRecord
from .fields import encode_record, encode_record_async

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordPlacement:
    """A record together with the begin/end flags its position gives it."""

    record: NDEFRecord
    is_beginning: bool
    is_end: bool


def place_records(records: Iterable[NDEFRecord]) -> list[RecordPlacement]:
    """Assign MB to the first record and ME to the last one."""
    items = list(records)
    last = len(items) - 1
    return [
        RecordPlacement(record, is_beginning=index == 0, is_end=index == last)
        for index, record in enumerate(items)
    ]


def validate_markers(flags: Sequence[tuple[bool, bool]]) -> None:
    """Check that exactly one record begins and exactly one ends the message.

    Args:
        flags: (message_begin, message_end) for each record, in order

    Raises:
        DuplicateBeginMarkerError: If more than one record has MB set
        DuplicateEndMarkerError: If more than one record has ME set
        MissingBeginMarkerError: If no record has MB set
        MissingEndMarkerError: If no record has ME set
    """
    begin_count = sum(1 for begin, _ in flags if begin)
    end_count = sum(1 for _, end in flags if end)

    if begin_count > 1:
        raise DuplicateBeginMarkerError()
    if end_count > 1:
        raise DuplicateEndMarkerError()
    if begin_count == 0:
        raise MissingBeginMarkerError()
    if end_count == 0:
        raise MissingEndMarkerError()


def encode(records: Iterable[NDEFRecord]) -> bytes:
    """Encode records as a TLV-wrapped NDEF message.

    Records are encoded in order; the first gets the message begin flag, the
    last the message end flag. An empty sequence encodes to empty bytes.

    Args:
        records: Records (or an NDEFMessage) to encode

    Returns:
        The TLV block: 0x03, length, records, 0xFE

    Raises:
        EncodeError: If a record cannot be encoded, or a payload can only be
            produced asynchronously
        MarkerError: If the begin/end flags are inconsistent

    Examples:
        ```python
        from ndefcodec import encode, uri_record

        data = encode([uri_record("http://www.nfc.com")])
        assert data.hex() == "030cd1010855016e66632e636f6dfe"
        ```
    """
    placements = place_records(records)
    if not placements:
        return b""

    chunks = [
        encode_record(p.record, is_beginning=p.is_beginning, is_end=p.is_end)
        for p in placements
    ]
    return _finish(placements, chunks)


async def encode_async(records: Iterable[NDEFRecord]) -> bytes:
    """Encode records, awaiting asynchronous payload accessors.

    Accessors are awaited one record at a time, in message order.

    Raises:
        EncodeError: If a record cannot be encoded
        MarkerError: If the begin/end flags are inconsistent
    """
    placements = place_records(records)
    if not placements:
        return b""

    chunks = []
    for p in placements:
        chunks.append(
            await encode_record_async(p.record, is_beginning=p.is_beginning, is_end=p.is_end)
        )
    return _finish(placements, chunks)


def _finish(placements: Sequence[RecordPlacement], chunks: Sequence[bytes]) -> bytes:
    validate_markers([(p.is_beginning, p.is_end) for p in placements])
    body = b"".join(chunks)
    log.debug("Encoded %d records (%d bytes)", len(chunks), len(body))
    return wrap_tlv(body)
