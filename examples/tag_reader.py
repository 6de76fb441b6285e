#!/usr/bin/env python3
"""Reading damaged and unusual tag images.

Tags in the field are zero padded, sometimes carry records this library does
not know about, and are occasionally corrupted. This example shows how
safe_decode() and NDEFRecord.safe_payload() keep a reader running.
"""

from __future__ import annotations

import asyncio
import logging

from ndefcodec import (
    TNF,
    CodecConfig,
    NDEFMessage,
    NDEFRecord,
    png_record,
    safe_decode,
    uri_record,
)
from ndefcodec.codec.fields import pack_record
from ndefcodec.framing import wrap_tlv

TAG_SIZE = 144


class SlowImage:
    """Image whose bytes arrive asynchronously."""

    async def read(self) -> bytes:
        await asyncio.sleep(0.01)
        return b"\x89PNG\r\n\x1a\n" + b"\x00" * 8


def report(label: str, image: bytes, config: CodecConfig | None = None) -> None:
    print(f"{label}:")
    result = safe_decode(image, config)
    if not result.success:
        print(f"   unreadable: {result.error}")
        print()
        return

    assert result.message is not None
    for record in result.message:
        payload = record.safe_payload()
        status = repr(payload.payload) if payload.success else f"<{payload.error}>"
        known = "" if record.is_identified else " (unknown type)"
        print(f"   {record.tnf.label} {record.type}{known}: {status}")
    print()


def main() -> None:
    """Run the tag reader example."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    # A padded tag image with an async payload source
    message = NDEFMessage([uri_record("https://example.com"), png_record(SlowImage())])
    data = asyncio.run(message.to_bytes_async())
    report("Padded tag", data + b"\x00" * (TAG_SIZE - len(data)))

    # A vendor record next to a URI record with a corrupt prefix code
    vendor = NDEFRecord(
        tnf=TNF.EXTERNAL,
        type="acme.com:lock",
        payload_accessor=lambda: b"\x01",
        raw_payload_accessor=lambda: b"\x01",
    )
    records = NDEFMessage([vendor]).to_bytes()[2:-1]
    records = bytes([records[0] & ~0x40]) + records[1:]
    corrupt_uri = pack_record(
        TNF.WELL_KNOWN, b"U", None, b"\x99example.com", is_beginning=False, is_end=True
    )
    report("Vendor tag", wrap_tlv(records + corrupt_uri))

    # A tag cut short while writing
    report("Torn write", data[:-6] + b"\xfe")

    # Strict reading rejects what the tolerant default accepts
    no_begin = wrap_tlv(
        pack_record(TNF.MEDIA, b"text/plain", None, b"hi", is_beginning=False, is_end=True)
    )
    report("Missing begin flag (default)", no_begin)
    report("Missing begin flag (strict)", no_begin, CodecConfig(validate_markers=True))


if __name__ == "__main__":
    main()
