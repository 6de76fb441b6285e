"""NDEF record model.

An NDEFRecord describes one record of an NDEF message: its TNF category, type
string, optional ID and two payload accessors. The accessors are plain
callables so that payload conversion happens only when it is asked for:

- ``payload()`` returns the logical value (URI string, JSON value, text,
  bytes) and may raise PayloadDecodeError for a decoded record whose bytes
  cannot be interpreted.
- ``raw_payload()`` returns the exact payload bytes as they appear on the
  wire, or an awaitable of them when the source must be read asynchronously.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import PayloadDecodeError
from .tnf import TNF

RawBytes = Union[bytes, Awaitable[bytes]]


class SafePayload(BaseModel):
    """Result of NDEFRecord.safe_payload().

    Attributes:
        success: True if the payload could be reconstructed
        payload: The payload value (None on failure)
        error: Description of the failure (None on success)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    payload: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, payload: Any) -> SafePayload:
        return cls(success=True, payload=payload)

    @classmethod
    def failure(cls, error: str) -> SafePayload:
        return cls(success=False, error=error)


class NDEFRecord(BaseModel):
    """A single NDEF record.

    Records are immutable. They are normally created with the builder functions
    (``uri_record``, ``json_record``, ...) or by ``decode()``, but any pair of
    accessors can be supplied directly.

    Attributes:
        tnf: Type Name Format category (a TNF, its label, or its code)
        type: Record type, e.g. "U" or "application/json"
        id: Optional record identifier
        is_identified: True if the type registry knows how to interpret the
            payload; False for records carried as opaque bytes
        payload_accessor: Callable returning the logical payload
        raw_payload_accessor: Callable returning the wire payload bytes, or an
            awaitable of them

    Example:
        >>> record = NDEFRecord(
        ...     tnf="media",
        ...     type="application/octet-stream",
        ...     payload_accessor=lambda: b"\\x01\\x02",
        ...     raw_payload_accessor=lambda: b"\\x01\\x02",
        ... )
        >>> record.raw_type()
        b'application/octet-stream'
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    tnf: TNF
    type: str
    id: Optional[str] = None
    is_identified: bool = False
    payload_accessor: Callable[[], Any] = Field(repr=False)
    raw_payload_accessor: Callable[[], Any] = Field(repr=False)

    @field_validator("tnf", mode="before")
    @classmethod
    def _coerce_tnf(cls, value: Any) -> Any:
        if isinstance(value, str):
            return TNF.from_label(value)
        return value

    def payload(self) -> Any:
        """Return the logical payload.

        Raises:
            PayloadDecodeError: If the payload bytes cannot be interpreted
        """
        return self.payload_accessor()

    def safe_payload(self) -> SafePayload:
        """Return the payload wrapped in a SafePayload instead of raising."""
        try:
            return SafePayload.ok(self.payload())
        except PayloadDecodeError as err:
            return SafePayload.failure(str(err))

    def raw_payload(self) -> RawBytes:
        """Return the payload bytes (or an awaitable of them)."""
        return self.raw_payload_accessor()

    def raw_type(self) -> bytes:
        """Return the UTF-8 encoded type field."""
        return self.type.encode("utf-8")

    def raw_id(self) -> Optional[bytes]:
        """Return the UTF-8 encoded ID field, or None if the record has no ID."""
        if self.id is None:
            return None
        return self.id.encode("utf-8")
