"""Payload strategies for the record types ndefcodec understands.

A strategy converts between the logical payload of a record (a URI string, a
JSON value, text, raw bytes) and the payload bytes stored on the wire.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Union

from pydantic import TypeAdapter

from ..exceptions import EncodeError, PayloadDecodeError
from ..utils.binary import binary_to_bytes
from .uri import compress_uri, expand_uri


class PayloadStrategy(ABC):
    """Converts a logical payload value to wire bytes and back."""

    #: Short name used in error messages and the CLI
    name: str = "payload"

    @abstractmethod
    def to_bytes(self, value: Any) -> Union[bytes, Awaitable[bytes]]:
        """Encode a logical value as payload bytes.

        Raises:
            EncodeError: If the value cannot be encoded
        """

    @abstractmethod
    def from_bytes(self, raw: bytes) -> Any:
        """Decode payload bytes into a logical value.

        Raises:
            PayloadDecodeError: If the bytes cannot be interpreted
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class UriPayload(PayloadStrategy):
    """Well-known "U" records: identifier code byte + UTF-8 suffix."""

    name = "uri"

    def to_bytes(self, value: Any) -> bytes:
        code, suffix = compress_uri(value)
        return bytes([code]) + suffix.encode("utf-8")

    def from_bytes(self, raw: bytes) -> str:
        if not raw:
            raise PayloadDecodeError("URI record payload cannot be empty")
        suffix = raw[1:].decode("utf-8", errors="replace")
        return expand_uri(raw[0], suffix)


class JsonPayload(PayloadStrategy):
    """application/json records: compact UTF-8 JSON text.

    Any value pydantic can serialize is accepted on the way in (dicts, lists,
    scalars, pydantic models, dataclasses); decoding yields plain Python
    dicts, lists and scalars.
    """

    name = "json"

    _adapter: TypeAdapter[Any] = TypeAdapter(Any)

    def to_bytes(self, value: Any) -> bytes:
        try:
            return self._adapter.dump_json(value)
        except ValueError as err:
            raise EncodeError(f"Cannot serialize JSON payload: {err}") from err

    def from_bytes(self, raw: bytes) -> Any:
        return self._adapter.validate_json(raw)


class TextPayload(PayloadStrategy):
    """text/plain and text/html records: UTF-8 text."""

    name = "text"

    def to_bytes(self, value: Any) -> bytes:
        if not isinstance(value, str):
            raise EncodeError(f"Text payload must be str, got {type(value).__name__}")
        return value.encode("utf-8")

    def from_bytes(self, raw: bytes) -> str:
        return raw.decode("utf-8", errors="replace")


class BinaryPayload(PayloadStrategy):
    """Binary media records (images, audio, video): bytes passed through."""

    name = "binary"

    def to_bytes(self, value: Any) -> Union[bytes, Awaitable[bytes]]:
        return binary_to_bytes(value)

    def from_bytes(self, raw: bytes) -> bytes:
        return raw
