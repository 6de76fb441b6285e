"""Message report CLI command."""

from __future__ import annotations

from typing import Any

from ..models.message import NDEFMessage
from ..models.record import NDEFRecord
from ..utils.sizing import encoded_size, field_sizes

_SUMMARY_WIDTH = 48


def summarize_payload(value: Any) -> str:
    """Render a payload value as a single short line."""
    if isinstance(value, (bytes, bytearray)):
        text = f"<{len(value)} bytes> {bytes(value[:16]).hex()}"
        if len(value) > 16:
            text += "..."
        return text
    text = repr(value)
    if len(text) > _SUMMARY_WIDTH:
        text = text[: _SUMMARY_WIDTH - 3] + "..."
    return text


def print_message(message: NDEFMessage) -> None:
    """Print every record of a message with a field size breakdown.

    Args:
        message: Message to report on
    """
    count = len(message)
    print("|" * 7, "ndefcodec: NDEF Message Codec", "|" * 7)
    print(f"{count} record{'s' if count != 1 else ''} decoded.")
    print(f"Encoded size: {encoded_size(message)} bytes")
    print()

    for index, record in enumerate(message, 1):
        print_record(index, record)


def print_record(index: int, record: NDEFRecord) -> None:
    """Print a single record and the size of each of its wire fields."""
    print(f"{'=' * 19} {index}: {record.tnf.label} {record.type} {'=' * 19}")
    if record.id is not None:
        print(f"id: {record.id}")
    print(f"identified: {'yes' if record.is_identified else 'no'}")

    result = record.safe_payload()
    if result.success:
        print(f"payload: {summarize_payload(result.payload)}")
    else:
        print(f"payload: <error: {result.error}>")

    sizes = field_sizes(record)
    print(f"{'-' * 28} Fields {'-' * 28}")
    for name, size in sizes.items():
        dots = "." * max(1, 50 - len(name) - len(str(size)))
        print(f"        {name}{dots}{size} bytes")
    total = sum(sizes.values())
    print(f"        total{'.' * max(1, 50 - len('total') - len(str(total)))}{total} bytes")
    print()
