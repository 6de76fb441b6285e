"""Record and message models for ndefcodec.

This module provides the TNF enumeration, the NDEFRecord model and the
immutable NDEFMessage container.
"""

from __future__ import annotations

from .message import NDEFMessage
from .record import NDEFRecord, SafePayload
from .tnf import TNF

__all__ = [
    "TNF",
    "NDEFRecord",
    "SafePayload",
    "NDEFMessage",
]
