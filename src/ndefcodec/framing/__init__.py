"""TLV framing utilities for ndefcodec.

This module provides wrapping and unwrapping of the NDEF message TLV block
that surrounds the records on a tag.
"""

from __future__ import annotations

from .tlv import strip_zero_padding, unwrap_tlv, wrap_tlv

__all__ = [
    "wrap_tlv",
    "unwrap_tlv",
    "strip_zero_padding",
]
