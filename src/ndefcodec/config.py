"""Codec configuration.

This module provides the configuration dataclass accepted by decode() and
safe_decode().
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    """Options controlling how strictly NDEF messages are decoded.

    The defaults are tolerant: they accept everything a reader in the field is
    likely to produce, as long as the TLV envelope and record fields are
    structurally sound.

    Attributes:
        validate_markers: If True, decode() requires exactly one record with the
            message begin flag (the first) and exactly one with the message end
            flag, raising MarkerError otherwise. Encoding always validates the
            markers it assigns. Default False.

        allow_trailing_bytes: If False, bytes left in the TLV value after the
            record carrying the message end flag raise DecodeError. If True
            (default), they are ignored and a warning is logged.

    Examples:
        ```python
        from ndefcodec import CodecConfig, decode

        strict = CodecConfig(validate_markers=True, allow_trailing_bytes=False)
        message = decode(tag_bytes, config=strict)
        ```
    """

    validate_markers: bool = False
    allow_trailing_bytes: bool = True


DEFAULT_CONFIG = CodecConfig()
