"""Unit tests for the record header byte and TNF values."""

from __future__ import annotations

import pytest

from ndefcodec.codec.header import CF, IL, MB, ME, SR, RecordHeader
from ndefcodec.exceptions import ChunkingUnsupportedError
from ndefcodec.models.tnf import TNF


class TestTNF:
    """Test TNF codes and labels."""

    def test_codes(self) -> None:
        """Test the fixed 3-bit codes."""
        assert [int(t) for t in TNF] == list(range(8))
        assert TNF.WELL_KNOWN == 1
        assert TNF.MEDIA == 2
        assert TNF.EXTERNAL == 4

    def test_labels(self) -> None:
        """Test label lookup in both directions."""
        assert TNF.EXTERNAL.label == "forum-external"
        assert TNF.ABSOLUTE_URI.label == "absolute-uri"
        for tnf in TNF:
            assert TNF.from_label(tnf.label) is tnf

    def test_unknown_label(self) -> None:
        """Test an unknown label is rejected."""
        with pytest.raises(ValueError, match="Unknown TNF: bogus"):
            TNF.from_label("bogus")

    def test_unknown_code(self) -> None:
        """Test a code outside 0-7 is rejected."""
        assert TNF.from_code(5) is TNF.UNKNOWN

        with pytest.raises(ValueError, match="Unknown TNF code: 8"):
            TNF.from_code(8)


class TestRecordHeader:
    """Test header packing and unpacking."""

    def test_flag_values(self) -> None:
        """Test the bit positions of each flag."""
        assert (MB, ME, CF, SR, IL) == (0x80, 0x40, 0x20, 0x10, 0x08)

    def test_single_short_uri_record(self) -> None:
        """Test MB, ME and SR with TNF well-known give 0xD1."""
        header = RecordHeader(
            TNF.WELL_KNOWN, message_begin=True, message_end=True, short_record=True
        )
        assert header.to_byte() == 0xD1

    def test_id_flag(self) -> None:
        """Test the IL flag."""
        header = RecordHeader(TNF.MEDIA, short_record=True, id_length_present=True)
        assert header.to_byte() == 0x1A

    def test_from_byte(self) -> None:
        """Test unpacking a header byte."""
        header = RecordHeader.from_byte(0x52)

        assert header.tnf is TNF.MEDIA
        assert not header.message_begin
        assert header.message_end
        assert header.short_record
        assert not header.id_length_present
        assert not header.chunked

    def test_roundtrip_all_unchunked_bytes(self) -> None:
        """Test every header byte without CF survives unpack and repack."""
        for value in range(256):
            if value & CF:
                continue
            assert RecordHeader.from_byte(value).to_byte() == value

    def test_chunk_flag_rejected(self) -> None:
        """Test chunked records are refused."""
        with pytest.raises(ChunkingUnsupportedError, match="Chunked records are not supported yet"):
            RecordHeader.from_byte(0xB1)

    def test_out_of_range(self) -> None:
        """Test values outside a byte are rejected."""
        with pytest.raises(ValueError, match="0-255"):
            RecordHeader.from_byte(256)
