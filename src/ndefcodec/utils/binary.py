"""Normalization of bytes-like payload sources."""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Union

from ..exceptions import UnsupportedBinaryError


def binary_to_bytes(data: Any) -> Union[bytes, Awaitable[bytes]]:
    """Convert a binary payload source to bytes.

    Accepted sources:
    - bytes, bytearray, memoryview
    - readable binary file objects (anything with a ``read()`` returning bytes);
      seekable ones are rewound first so the payload can be read repeatedly
    - async handles whose ``read()`` (and optionally ``seekable()`` and
      ``seek()``) are coroutines; an awaitable of bytes is returned for these
      and the rewind happens when it is awaited

    Non-seekable streams (pipes, sockets) are consumed by the first read, so a
    record built from one yields its payload only once. Read such sources into
    bytes first if the record is measured or encoded more than once.

    Args:
        data: Binary payload source

    Returns:
        The payload bytes, or an awaitable resolving to them

    Raises:
        UnsupportedBinaryError: If data is not one of the accepted sources

    Example:
        >>> binary_to_bytes(bytearray(b"\\x89PNG"))
        b'\\x89PNG'
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)

    read = getattr(data, "read", None)
    if not callable(read):
        raise UnsupportedBinaryError(
            f"Unsupported binary-like type: {type(data).__name__}"
        )

    seekable = getattr(data, "seekable", None)
    if inspect.iscoroutinefunction(read) or inspect.iscoroutinefunction(seekable):
        return _read_async(data)

    if callable(seekable) and seekable():
        data.seek(0)

    chunk = read()
    if inspect.isawaitable(chunk):
        return _await_bytes(chunk)
    return _as_bytes(chunk)


async def _read_async(data: Any) -> bytes:
    seekable = getattr(data, "seekable", None)
    if callable(seekable):
        can_seek = seekable()
        if inspect.isawaitable(can_seek):
            can_seek = await can_seek
        if can_seek:
            rewound = data.seek(0)
            if inspect.isawaitable(rewound):
                await rewound

    chunk = data.read()
    if inspect.isawaitable(chunk):
        chunk = await chunk
    return _as_bytes(chunk)


async def _await_bytes(pending: Awaitable[Any]) -> bytes:
    return _as_bytes(await pending)


def _as_bytes(chunk: Any) -> bytes:
    if not isinstance(chunk, (bytes, bytearray, memoryview)):
        raise UnsupportedBinaryError(
            f"read() returned {type(chunk).__name__}, expected bytes"
        )
    return bytes(chunk)
