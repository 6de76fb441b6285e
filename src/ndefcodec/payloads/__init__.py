"""Payload strategies and the type registry for ndefcodec."""

from __future__ import annotations

from .registry import PAYLOAD_REGISTRY, lookup, record_from_bytes, record_from_value
from .strategies import BinaryPayload, JsonPayload, PayloadStrategy, TextPayload, UriPayload
from .uri import URI_PREFIXES, compress_uri, expand_uri, is_valid_uri

__all__ = [
    "PAYLOAD_REGISTRY",
    "lookup",
    "record_from_bytes",
    "record_from_value",
    "PayloadStrategy",
    "UriPayload",
    "JsonPayload",
    "TextPayload",
    "BinaryPayload",
    "URI_PREFIXES",
    "compress_uri",
    "expand_uri",
    "is_valid_uri",
]
