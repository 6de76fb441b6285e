"""Record builder functions.

Convenience constructors for the record types ndefcodec understands. Each one
returns an identified NDEFRecord whose payload() is the value passed in and
whose raw_payload() is the wire encoding of that value.
"""

from __future__ import annotations

from typing import Any, Optional

from .models.record import NDEFRecord
from .models.tnf import TNF
from .payloads.registry import record_from_value
from .payloads.uri import compress_uri


def uri_record(uri: str, record_id: Optional[str] = None) -> NDEFRecord:
    """Create a well-known URI ("U") record.

    The URI is validated immediately, so an invalid URI fails here rather than
    when the message is encoded.

    Args:
        uri: Absolute URI, e.g. "https://example.com", "tel:+15551234",
            "mailto:someone@example.com"
        record_id: Optional record ID

    Raises:
        InvalidURIError: If uri is not a valid URI

    Example:
        >>> record = uri_record("http://www.nfc.com")
        >>> record.raw_payload()
        b'\\x01nfc.com'
    """
    compress_uri(uri)
    return record_from_value(TNF.WELL_KNOWN, "U", uri, record_id)


def json_record(payload: Any, record_id: Optional[str] = None) -> NDEFRecord:
    """Create an application/json media record.

    Example:
        >>> json_record({"hello": "world"}).raw_payload()
        b'{"hello":"world"}'
    """
    return record_from_value(TNF.MEDIA, "application/json", payload, record_id)


def text_record(text: str, record_id: Optional[str] = None) -> NDEFRecord:
    """Create a text/plain media record."""
    return record_from_value(TNF.MEDIA, "text/plain", text, record_id)


def html_record(html: str, record_id: Optional[str] = None) -> NDEFRecord:
    """Create a text/html media record."""
    return record_from_value(TNF.MEDIA, "text/html", html, record_id)


def png_record(data: Any, record_id: Optional[str] = None) -> NDEFRecord:
    """Create an image/png media record from bytes or a binary stream.

    Seekable streams are rewound before every read. A non-seekable stream is
    consumed by the first raw_payload() call.
    """
    return record_from_value(TNF.MEDIA, "image/png", data, record_id)


def jpeg_record(data: Any, record_id: Optional[str] = None) -> NDEFRecord:
    """Create an image/jpeg media record from bytes or a binary stream.

    Seekable streams are rewound before every read. A non-seekable stream is
    consumed by the first raw_payload() call.
    """
    return record_from_value(TNF.MEDIA, "image/jpeg", data, record_id)


def mp4_record(data: Any, record_id: Optional[str] = None) -> NDEFRecord:
    """Create a video/mp4 media record from bytes or a binary stream.

    Seekable streams are rewound before every read. A non-seekable stream is
    consumed by the first raw_payload() call.
    """
    return record_from_value(TNF.MEDIA, "video/mp4", data, record_id)


def mpeg_record(data: Any, record_id: Optional[str] = None) -> NDEFRecord:
    """Create an audio/mpeg media record from bytes or a binary stream.

    Seekable streams are rewound before every read. A non-seekable stream is
    consumed by the first raw_payload() call.
    """
    return record_from_value(TNF.MEDIA, "audio/mpeg", data, record_id)
