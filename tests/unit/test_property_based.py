"""Property-based tests using hypothesis."""

from __future__ import annotations

import string

from hypothesis import given
from hypothesis import strategies as st

from ndefcodec import (
    NDEFMessage,
    decode,
    encode,
    encoded_size,
    json_record,
    png_record,
    safe_decode,
    text_record,
)
from ndefcodec.framing import unwrap_tlv, wrap_tlv
from ndefcodec.payloads.uri import URI_PREFIXES, compress_uri, expand_uri

json_values = st.recursive(
    st.none() | st.booleans() | st.integers(min_value=-(2**53), max_value=2**53) | st.text(),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=10,
)


class TestFramingProperties:
    """Property-based tests for TLV framing."""

    @given(value=st.binary(max_size=700))
    def test_wrap_unwrap_roundtrip(self, value: bytes) -> None:
        """Test unwrapping recovers the wrapped value."""
        framed = wrap_tlv(value)

        assert unwrap_tlv(framed) == value
        assert len(framed) == len(value) + (3 if len(value) <= 254 else 5)


class TestUriProperties:
    """Property-based tests for URI compression."""

    @given(
        prefix=st.sampled_from([p for code, p in URI_PREFIXES.items() if code != 0x00]),
        rest=st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=20),
    )
    def test_compress_expand_roundtrip(self, prefix: str, rest: str) -> None:
        """Test expansion undoes compression and the longest prefix is used."""
        uri = prefix + rest
        code, suffix = compress_uri(uri)

        assert expand_uri(code, suffix) == uri
        matching = [p for p in URI_PREFIXES.values() if uri.startswith(p)]
        assert len(URI_PREFIXES[code]) == max(len(p) for p in matching)


class TestCodecProperties:
    """Property-based tests for the message codec."""

    @given(texts=st.lists(st.text(max_size=300), min_size=1, max_size=4))
    def test_text_records_roundtrip(self, texts: list[str]) -> None:
        """Test text payloads survive encode and decode."""
        message = NDEFMessage(text_record(t) for t in texts)
        data = message.to_bytes()

        assert encoded_size(message) == len(data)
        assert [r.payload() for r in decode(data)] == texts

    @given(value=json_values)
    def test_json_record_roundtrip(self, value: object) -> None:
        """Test JSON payloads survive encode and decode."""
        assert decode(encode([json_record(value)]))[0].payload() == value

    @given(payload=st.binary(max_size=600), record_id=st.none() | st.text(max_size=10))
    def test_binary_record_roundtrip(self, payload: bytes, record_id: str | None) -> None:
        """Test binary payloads and IDs survive encode and decode."""
        record = decode(encode([png_record(payload, record_id=record_id)]))[0]

        assert record.payload() == payload
        assert record.id == record_id

    @given(data=st.binary(max_size=64))
    def test_decode_arbitrary_bytes(self, data: bytes) -> None:
        """Test arbitrary input never escapes the error hierarchy."""
        result = safe_decode(data)

        if result.success:
            assert result.message is not None
            for record in result.message:
                record.safe_payload()
        else:
            assert result.error
