"""Utility functions for ndefcodec.

This module provides byte buffer helpers and bytes-like normalization. Size
helpers live in ``ndefcodec.utils.sizing``.
"""

from __future__ import annotations

from .binary import binary_to_bytes
from .buffer import ByteReader, ByteWriter

__all__ = [
    "binary_to_bytes",
    "ByteReader",
    "ByteWriter",
]
