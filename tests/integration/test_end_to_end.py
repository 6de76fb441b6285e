"""End-to-end integration tests."""

from __future__ import annotations

import asyncio
import io

from ndefcodec import (
    TNF,
    CodecConfig,
    NDEFMessage,
    NDEFRecord,
    decode,
    encoded_size,
    field_sizes,
    html_record,
    jpeg_record,
    json_record,
    mp4_record,
    safe_decode,
    text_record,
    uri_record,
)

# Typical NTAG215 user memory
TAG_CAPACITY = 504


class AsyncFile:
    """Async binary source, like a file opened with an async I/O library."""

    def __init__(self, data: bytes) -> None:
        self._data = data

    async def read(self) -> bytes:
        await asyncio.sleep(0)
        return self._data


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_smart_poster_style_workflow(self) -> None:
        """Test writing a mixed message to a tag image and reading it back."""
        # 1. Build the message
        message = (
            NDEFMessage()
            .add(uri_record("https://example.com/products/42"))
            .add(text_record("Product 42", record_id="title"))
            .add(json_record({"sku": "P-42", "price": 1999, "tags": ["new", "sale"]}))
        )

        # 2. Check it fits the tag
        size = encoded_size(message)
        assert size <= TAG_CAPACITY

        # 3. Encode and pad to the tag size
        data = message.to_bytes()
        assert len(data) == size
        tag_image = data + b"\x00" * (TAG_CAPACITY - len(data))

        # 4. Read it back
        decoded = decode(tag_image, CodecConfig(validate_markers=True, allow_trailing_bytes=False))

        assert len(decoded) == 3
        assert decoded[0].payload() == "https://example.com/products/42"
        assert decoded[1].id == "title"
        assert decoded[1].payload() == "Product 42"
        assert decoded[2].payload() == {"sku": "P-42", "price": 1999, "tags": ["new", "sale"]}

        # 5. Re-encoding the decoded message gives the same bytes
        assert decoded.to_bytes() == data

    def test_large_media_message(self) -> None:
        """Test a message large enough for long records and the long TLV form."""
        image = bytes(range(256)) * 8
        message = NDEFMessage([jpeg_record(io.BytesIO(image)), html_record("<h1>hi</h1>")])

        data = message.to_bytes()
        assert data[1] == 0xFF

        decoded = decode(data)
        assert decoded[0].payload() == image
        assert field_sizes(decoded[0])["payload_length"] == 4
        assert field_sizes(decoded[1])["payload_length"] == 1

    def test_async_sources(self) -> None:
        """Test encoding a message whose payload is read asynchronously."""
        clip = b"\x00\x00\x00\x18ftypmp42" * 4
        message = NDEFMessage().add(mp4_record(AsyncFile(clip))).add(uri_record("tel:+15551234"))

        data = asyncio.run(message.to_bytes_async())
        decoded = decode(data)

        assert decoded[0].type == "video/mp4"
        assert decoded[0].payload() == clip
        assert decoded[1].payload() == "tel:+15551234"

    def test_unknown_records_pass_through(self) -> None:
        """Test records of unknown types survive a decode/encode cycle."""
        vendor = NDEFRecord(
            tnf=TNF.EXTERNAL,
            type="acme.com:cfg",
            id="v1",
            payload_accessor=lambda: b"\xca\xfe",
            raw_payload_accessor=lambda: b"\xca\xfe",
        )
        data = NDEFMessage([uri_record("urn:nfc:sn:handover"), vendor]).to_bytes()

        decoded = decode(data)
        assert decoded[0].payload() == "urn:nfc:sn:handover"
        assert not decoded[1].is_identified
        assert decoded[1].tnf is TNF.EXTERNAL
        assert decoded[1].payload() == b"\xca\xfe"
        assert decoded.to_bytes() == data

    def test_damaged_tag(self) -> None:
        """Test a damaged tag image is reported without raising."""
        data = NDEFMessage([text_record("hello")]).to_bytes()
        damaged = data[:-3] + b"\xfe"

        result = safe_decode(damaged)
        assert not result.success
        assert result.error is not None
        assert result.error.startswith("TLV structure is malformed")
