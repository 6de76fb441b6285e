"""NDEF binary codec for ndefcodec.

This module provides the record header and field codecs and the message-level
encode/decode functions built on them.
"""

from __future__ import annotations

from .decoder import DecodeResult, decode, iter_raw_records, safe_decode
from .encoder import encode, encode_async, validate_markers
from .fields import RawRecord, decode_record, encode_record, encode_record_async, pack_record
from .header import RecordHeader

__all__ = [
    "encode",
    "encode_async",
    "decode",
    "safe_decode",
    "DecodeResult",
    "iter_raw_records",
    "validate_markers",
    "RecordHeader",
    "RawRecord",
    "pack_record",
    "encode_record",
    "encode_record_async",
    "decode_record",
]
