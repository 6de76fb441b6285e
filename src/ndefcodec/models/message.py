"""NDEF message container.

This module provides NDEFMessage, an immutable ordered sequence of records.
Every operation that changes the sequence returns a new message and leaves the
original untouched, so messages can be shared and extended freely.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from pydantic import BaseModel, ConfigDict

from .record import NDEFRecord


class NDEFMessage(BaseModel):
    """An ordered sequence of NDEF records.

    The position of a record determines its message begin / message end flags
    when the message is serialized: the first record carries MB, the last ME.

    Example:
        >>> from ndefcodec import NDEFMessage, uri_record, json_record
        >>> message = (
        ...     NDEFMessage()
        ...     .add(uri_record("https://example.com"))
        ...     .add(json_record({"hello": "world"}))
        ... )
        >>> len(message)
        2
        >>> data = message.to_bytes()
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    records: tuple[NDEFRecord, ...] = ()

    def __init__(self, records: Iterable[NDEFRecord] = (), **data: Any) -> None:
        super().__init__(records=tuple(records), **data)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[NDEFRecord]:  # type: ignore[override]
        return iter(self.records)

    def __getitem__(self, index: int) -> NDEFRecord:
        return self.records[index]

    def add(self, record: NDEFRecord) -> NDEFMessage:
        """Return a new message with record appended."""
        return self.add_tail(record)

    def add_head(self, record: NDEFRecord) -> NDEFMessage:
        """Return a new message with record prepended."""
        return NDEFMessage((record, *self.records))

    def add_tail(self, record: NDEFRecord) -> NDEFMessage:
        """Return a new message with record appended."""
        return NDEFMessage((*self.records, record))

    def remove(self) -> NDEFMessage:
        """Return a new message without the last record."""
        return self.remove_tail()

    def remove_head(self) -> NDEFMessage:
        """Return a new message without the first record (empty stays empty)."""
        return NDEFMessage(self.records[1:])

    def remove_tail(self) -> NDEFMessage:
        """Return a new message without the last record (empty stays empty)."""
        return NDEFMessage(self.records[:-1])

    def to_bytes(self) -> bytes:
        """Serialize the message to TLV-wrapped NDEF bytes.

        Raises:
            EncodeError: If a record cannot be encoded, or a payload can only
                be produced asynchronously (use to_bytes_async)
        """
        from ..codec.encoder import encode

        return encode(self.records)

    async def to_bytes_async(self) -> bytes:
        """Serialize the message, awaiting asynchronous payload sources."""
        from ..codec.encoder import encode_async

        return await encode_async(self.records)
