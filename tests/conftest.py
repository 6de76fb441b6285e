"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from ndefcodec import NDEFRecord, TNF, json_record, uri_record


@pytest.fixture
def nfc_uri_message_bytes() -> bytes:
    """TLV-wrapped message holding one URI record for http://www.nfc.com."""
    return bytes.fromhex("030cd1010855016e66632e636f6dfe")


@pytest.fixture
def nfc_uri_record() -> NDEFRecord:
    """URI record for http://www.nfc.com."""
    return uri_record("http://www.nfc.com")


@pytest.fixture
def hello_json_record() -> NDEFRecord:
    """application/json record holding {"hello": "world"}."""
    return json_record({"hello": "world"})


@pytest.fixture
def opaque_record() -> NDEFRecord:
    """Forum-external record the type registry does not know about."""
    return NDEFRecord(
        tnf=TNF.EXTERNAL,
        type="example.com:sensor",
        payload_accessor=lambda: b"\x01\x02\x03",
        raw_payload_accessor=lambda: b"\x01\x02\x03",
    )
