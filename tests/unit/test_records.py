"""Unit tests for the record model and record builders."""

from __future__ import annotations

import io
from typing import Callable

import pytest
from pydantic import ValidationError

from ndefcodec import (
    TNF,
    InvalidURIError,
    NDEFRecord,
    SafePayload,
    html_record,
    jpeg_record,
    json_record,
    mp4_record,
    mpeg_record,
    png_record,
    text_record,
    uri_record,
)
from ndefcodec.exceptions import PayloadDecodeError


def failing_payload() -> bytes:
    raise PayloadDecodeError("broken payload")


class TestNDEFRecord:
    """Test the NDEFRecord model."""

    def test_tnf_coercion(self) -> None:
        """Test the TNF can be given as a member, label or code."""
        for tnf in (TNF.MEDIA, "media", 2):
            record = NDEFRecord(
                tnf=tnf,
                type="text/plain",
                payload_accessor=lambda: "",
                raw_payload_accessor=lambda: b"",
            )
            assert record.tnf is TNF.MEDIA

    def test_invalid_tnf(self) -> None:
        """Test unknown TNF labels and codes are rejected."""
        for tnf in ("bogus", 9):
            with pytest.raises(ValidationError):
                NDEFRecord(
                    tnf=tnf,
                    type="x",
                    payload_accessor=lambda: b"",
                    raw_payload_accessor=lambda: b"",
                )

    def test_frozen(self, nfc_uri_record: NDEFRecord) -> None:
        """Test records are immutable."""
        with pytest.raises(ValidationError):
            nfc_uri_record.type = "T"  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            NDEFRecord(
                tnf=TNF.EMPTY,
                type="",
                payload_accessor=lambda: b"",
                raw_payload_accessor=lambda: b"",
                chunked=True,
            )

    def test_raw_type_and_id(self) -> None:
        """Test the type and ID are UTF-8 encoded."""
        record = text_record("hi", record_id="näme")

        assert record.raw_type() == b"text/plain"
        assert record.raw_id() == "näme".encode()

    def test_no_id(self, nfc_uri_record: NDEFRecord) -> None:
        """Test a record without ID has no raw ID."""
        assert nfc_uri_record.id is None
        assert nfc_uri_record.raw_id() is None

    def test_empty_id_is_kept(self) -> None:
        """Test an empty ID differs from no ID."""
        assert text_record("hi", record_id="").raw_id() == b""

    def test_safe_payload_success(self, hello_json_record: NDEFRecord) -> None:
        """Test safe_payload wraps a successful payload."""
        result = hello_json_record.safe_payload()

        assert isinstance(result, SafePayload)
        assert result.success
        assert result.payload == {"hello": "world"}
        assert result.error is None

    def test_safe_payload_failure(self) -> None:
        """Test safe_payload reports a payload error instead of raising."""
        record = NDEFRecord(
            tnf=TNF.MEDIA,
            type="application/json",
            is_identified=True,
            payload_accessor=failing_payload,
            raw_payload_accessor=lambda: b"{",
        )

        with pytest.raises(PayloadDecodeError):
            record.payload()

        result = record.safe_payload()
        assert not result.success
        assert result.payload is None
        assert result.error == "broken payload"

    def test_repr_hides_accessors(self, nfc_uri_record: NDEFRecord) -> None:
        """Test the accessors are left out of the repr."""
        text = repr(nfc_uri_record)

        assert "payload_accessor" not in text
        assert "type='U'" in text


class TestBuilders:
    """Test the record builder functions."""

    def test_uri_record(self, nfc_uri_record: NDEFRecord) -> None:
        """Test a URI record."""
        assert nfc_uri_record.tnf is TNF.WELL_KNOWN
        assert nfc_uri_record.type == "U"
        assert nfc_uri_record.is_identified
        assert nfc_uri_record.payload() == "http://www.nfc.com"
        assert nfc_uri_record.raw_payload() == b"\x01nfc.com"

    def test_uri_record_validates_eagerly(self) -> None:
        """Test invalid URIs fail when the record is built."""
        with pytest.raises(InvalidURIError, match="Provided URI is not a valid URI"):
            uri_record("nfc.com")

    def test_json_record(self, hello_json_record: NDEFRecord) -> None:
        """Test a JSON record."""
        assert hello_json_record.tnf is TNF.MEDIA
        assert hello_json_record.type == "application/json"
        assert hello_json_record.raw_payload() == b'{"hello":"world"}'

    def test_text_records(self) -> None:
        """Test text/plain and text/html records."""
        assert text_record("hello").type == "text/plain"
        assert text_record("hello").raw_payload() == b"hello"
        assert html_record("<p>hi</p>").type == "text/html"
        assert html_record("<p>hi</p>").payload() == "<p>hi</p>"

    @pytest.mark.parametrize(
        ("builder", "media_type"),
        [
            (png_record, "image/png"),
            (jpeg_record, "image/jpeg"),
            (mp4_record, "video/mp4"),
            (mpeg_record, "audio/mpeg"),
        ],
    )
    def test_binary_records(
        self, builder: Callable[..., NDEFRecord], media_type: str
    ) -> None:
        """Test the binary media builders accept bytes and streams."""
        record = builder(b"\x00\x01\x02", record_id="media")

        assert record.tnf is TNF.MEDIA
        assert record.type == media_type
        assert record.id == "media"
        assert record.raw_payload() == b"\x00\x01\x02"

        stream_record = builder(io.BytesIO(b"\x03\x04"))
        assert stream_record.raw_payload() == b"\x03\x04"
