#!/usr/bin/env python3
"""Basic usage example for ndefcodec.

This example demonstrates:
1. Building a message from typed records
2. Encoding it to the bytes stored on an NFC tag
3. Decoding the bytes back into records
4. Calculating record and message sizes
"""

from __future__ import annotations

from ndefcodec import (
    NDEFMessage,
    decode,
    encoded_size,
    field_sizes,
    json_record,
    text_record,
    uri_record,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("ndefcodec Basic Usage Example")
    print("=" * 60)
    print()

    # Build a message
    print("1. Building a message...")
    message = (
        NDEFMessage()
        .add(uri_record("https://www.example.com/visit"))
        .add(text_record("Welcome!", record_id="greeting"))
        .add(json_record({"room": 12, "open": True}))
    )
    for record in message:
        print(f"   {record.tnf.label:<12} {record.type:<18} {record.payload()!r}")
    print()

    # Analyze field sizes
    print("2. Analyzing field sizes...")
    for record in message:
        sizes = field_sizes(record)
        print(f"   {record.type}: {sum(sizes.values())} bytes {sizes}")
    print(f"   Total on tag: {encoded_size(message)} bytes")
    print()

    # Encode the message
    print("3. Encoding to TLV-wrapped NDEF bytes...")
    data = message.to_bytes()
    print(f"   {len(data)} bytes: {data.hex()}")
    print()

    # Decode the message
    print("4. Decoding...")
    decoded = decode(data)
    for record in decoded:
        print(f"   {record.type:<18} id={record.id!r:<12} {record.payload()!r}")
    print()

    assert decoded.to_bytes() == data
    print("Round trip OK")


if __name__ == "__main__":
    main()
