"""ndefcodec: NDEF message codec

A Python library for encoding and decoding NDEF (NFC Data Exchange Format)
messages, the container format used to store typed records on NFC tags.

Key Features:
- NFC Forum record header and field encoding (short and long records)
- NDEF message TLV framing with zero-padding tolerance
- Typed payloads for URI, JSON, text and common media records
- Lazy payload decoding with a non-raising safe accessor
- Immutable, Pydantic-based record and message models

Quick Start:
    >>> from ndefcodec import NDEFMessage, decode, uri_record, json_record
    >>>
    >>> message = (
    ...     NDEFMessage()
    ...     .add(uri_record("https://example.com"))
    ...     .add(json_record({"hello": "world"}))
    ... )
    >>> data = message.to_bytes()
    >>> decoded = decode(data)
    >>> decoded[0].payload()
    'https://example.com'

The library only transforms bytes; reading and writing tags is left to the
NFC stack of your platform.
"""

from __future__ import annotations

from .builders import (
    html_record,
    jpeg_record,
    json_record,
    mp4_record,
    mpeg_record,
    png_record,
    text_record,
    uri_record,
)
from .codec import DecodeResult, decode, encode, encode_async, safe_decode
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    ChunkingUnsupportedError,
    DecodeError,
    DuplicateBeginMarkerError,
    DuplicateEndMarkerError,
    EncodeError,
    IdTooLongError,
    InvalidTLVTagError,
    InvalidTLVTerminatorError,
    InvalidURIError,
    LongFormTooShortError,
    MalformedTLVError,
    MarkerError,
    MessageTooLargeError,
    MissingBeginMarkerError,
    MissingEndMarkerError,
    NdefError,
    PayloadDecodeError,
    PayloadTooLargeError,
    TLVLengthMismatchError,
    TLVTooShortError,
    TruncatedRecordError,
    TypeTooLongError,
    UnknownURIPrefixCodeError,
    UnsupportedBinaryError,
)
from .framing import strip_zero_padding, unwrap_tlv, wrap_tlv
from .models import TNF, NDEFMessage, NDEFRecord, SafePayload
from .utils.sizing import encoded_size, field_sizes, record_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "NDEFMessage",
    "NDEFRecord",
    "SafePayload",
    "TNF",
    "encode",
    "encode_async",
    "decode",
    "safe_decode",
    "DecodeResult",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Record builders
    "uri_record",
    "json_record",
    "text_record",
    "html_record",
    "png_record",
    "jpeg_record",
    "mp4_record",
    "mpeg_record",
    # Exceptions
    "NdefError",
    "EncodeError",
    "TypeTooLongError",
    "IdTooLongError",
    "PayloadTooLargeError",
    "MessageTooLargeError",
    "InvalidURIError",
    "UnsupportedBinaryError",
    "DecodeError",
    "MalformedTLVError",
    "TLVTooShortError",
    "InvalidTLVTagError",
    "InvalidTLVTerminatorError",
    "LongFormTooShortError",
    "TLVLengthMismatchError",
    "ChunkingUnsupportedError",
    "TruncatedRecordError",
    "MarkerError",
    "MissingBeginMarkerError",
    "MissingEndMarkerError",
    "DuplicateBeginMarkerError",
    "DuplicateEndMarkerError",
    "PayloadDecodeError",
    "UnknownURIPrefixCodeError",
    # Framing
    "wrap_tlv",
    "unwrap_tlv",
    "strip_zero_padding",
    # Sizing
    "encoded_size",
    "record_size",
    "field_sizes",
    # Version
    "__version__",
]
