"""Type registry: (TNF, type) -> payload strategy.

The registry is a read-only mapping built once at import time. It decides
whether a record is "identified" (its payload is converted to a typed value)
or carried as opaque bytes.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..exceptions import PayloadDecodeError
from ..models.record import NDEFRecord
from ..models.tnf import TNF
from .strategies import BinaryPayload, JsonPayload, PayloadStrategy, TextPayload, UriPayload

log = logging.getLogger(__name__)

_URI = UriPayload()
_JSON = JsonPayload()
_TEXT = TextPayload()
_BINARY = BinaryPayload()

PAYLOAD_REGISTRY: Mapping[tuple[TNF, str], PayloadStrategy] = MappingProxyType(
    {
        (TNF.WELL_KNOWN, "U"): _URI,
        (TNF.MEDIA, "application/json"): _JSON,
        (TNF.MEDIA, "text/plain"): _TEXT,
        (TNF.MEDIA, "text/html"): _TEXT,
        (TNF.MEDIA, "image/png"): _BINARY,
        (TNF.MEDIA, "image/jpeg"): _BINARY,
        (TNF.MEDIA, "video/mp4"): _BINARY,
        (TNF.MEDIA, "audio/mpeg"): _BINARY,
    }
)


def lookup(tnf: TNF, record_type: str) -> Optional[PayloadStrategy]:
    """Return the strategy registered for (tnf, record_type), or None."""
    return PAYLOAD_REGISTRY.get((TNF(tnf), record_type))


def record_from_value(
    tnf: TNF, record_type: str, value: Any, record_id: Optional[str] = None
) -> NDEFRecord:
    """Build an identified record from a logical payload value.

    The wire bytes are produced lazily, each time raw_payload() is called.

    Raises:
        KeyError: If no strategy is registered for (tnf, record_type)
    """
    strategy = lookup(tnf, record_type)
    if strategy is None:
        raise KeyError(f"No payload strategy registered for {TNF(tnf).label} {record_type!r}")

    return NDEFRecord(
        tnf=tnf,
        type=record_type,
        id=record_id,
        is_identified=True,
        payload_accessor=lambda: value,
        raw_payload_accessor=lambda: strategy.to_bytes(value),
    )


def record_from_bytes(
    tnf: TNF, record_type: str, raw: bytes, record_id: Optional[str] = None
) -> NDEFRecord:
    """Build a record from decoded payload bytes.

    Registered (tnf, record_type) pairs give an identified record whose
    payload() decodes the bytes on demand and raises PayloadDecodeError if
    that fails. Anything else gives an unidentified record whose payload()
    returns the bytes unchanged.
    """
    strategy = lookup(tnf, record_type)
    if strategy is None:
        log.debug("No strategy for %s %r, keeping payload as bytes", TNF(tnf).label, record_type)
        return NDEFRecord(
            tnf=tnf,
            type=record_type,
            id=record_id,
            is_identified=False,
            payload_accessor=lambda: raw,
            raw_payload_accessor=lambda: raw,
        )

    def decode_payload() -> Any:
        try:
            return strategy.from_bytes(raw)
        except PayloadDecodeError:
            raise
        except ValueError as err:
            raise PayloadDecodeError(
                f"Failed to decode {record_type} payload: {err}"
            ) from err

    return NDEFRecord(
        tnf=tnf,
        type=record_type,
        id=record_id,
        is_identified=True,
        payload_accessor=decode_payload,
        raw_payload_accessor=lambda: raw,
    )
