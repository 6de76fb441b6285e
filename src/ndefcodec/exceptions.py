"""Exception hierarchy for ndefcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from NdefError for easy catching of any ndefcodec-specific error.

Structural problems with the byte stream (TLV envelope, record header, field
lengths) are raised eagerly while decoding. Problems with the content of a
payload are raised only when the payload of a record is requested.
"""

from __future__ import annotations


class NdefError(Exception):
    """Base exception for all ndefcodec errors."""

    pass


# ============================================================================
# Encoding
# ============================================================================


class EncodeError(NdefError):
    """Raised when encoding a record or message fails.

    Examples:
        - Type, ID or payload exceeds the NDEF field limits
        - Payload value cannot be converted to bytes
        - Message too large for the TLV length field
    """

    pass


class TypeTooLongError(EncodeError):
    """Raised when the UTF-8 type field of a record exceeds 255 bytes."""

    pass


class IdTooLongError(EncodeError):
    """Raised when the UTF-8 ID field of a record exceeds 255 bytes."""

    pass


class PayloadTooLargeError(EncodeError):
    """Raised when a record payload exceeds 2^32 - 1 bytes."""

    pass


class MessageTooLargeError(EncodeError):
    """Raised when the concatenated records do not fit a 2-byte TLV length."""

    pass


class InvalidURIError(EncodeError, ValueError):
    """Raised when a URI record is built from a string that is not a valid URI."""

    pass


class UnsupportedBinaryError(EncodeError, TypeError):
    """Raised when a binary payload is not bytes-like or readable."""

    pass


# ============================================================================
# Decoding
# ============================================================================


class DecodeError(NdefError):
    """Raised when decoding binary data fails.

    Examples:
        - Malformed TLV envelope
        - Truncated record (insufficient bytes for a field)
        - Chunked record
    """

    pass


class MalformedTLVError(DecodeError):
    """Raised when the TLV envelope around the NDEF message is malformed."""

    prefix = "TLV structure is malformed"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"{self.prefix}: {reason}")


class TLVTooShortError(MalformedTLVError):
    """Fewer bytes remain after stripping padding than the TLV header needs."""

    def __init__(self, reason: str = "not enough data") -> None:
        super().__init__(reason)


class InvalidTLVTagError(MalformedTLVError):
    """The first byte is not the NDEF message TLV tag (0x03)."""

    def __init__(self) -> None:
        super().__init__("first byte is not 0x03")


class InvalidTLVTerminatorError(MalformedTLVError):
    """The last byte is not the terminator TLV (0xFE)."""

    def __init__(self) -> None:
        super().__init__("last byte is not 0xFE")


class LongFormTooShortError(TLVTooShortError):
    """The 3-byte length form is announced but the buffer is too short."""

    def __init__(self) -> None:
        super().__init__("long length format requires at least 5 bytes")


class TLVLengthMismatchError(MalformedTLVError):
    """The TLV length field disagrees with the size of the buffer."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected total length {expected}, got {actual}")


class ChunkingUnsupportedError(DecodeError):
    """Raised when a record header has the chunk flag (CF) set."""

    def __init__(self) -> None:
        super().__init__("Chunked records are not supported yet")


class TruncatedRecordError(DecodeError):
    """Raised when the buffer ends in the middle of a record.

    Attributes:
        field: Name of the record field that was being read
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Unexpected end of data while reading {field}")


# ============================================================================
# Message begin / end markers
# ============================================================================


class MarkerError(NdefError):
    """Raised when a record sequence does not have exactly one MB and one ME record."""

    pass


class MissingBeginMarkerError(MarkerError):
    def __init__(self) -> None:
        super().__init__(
            "No record with message begin flag found. "
            "At least one record must have the message begin flag."
        )


class MissingEndMarkerError(MarkerError):
    def __init__(self) -> None:
        super().__init__(
            "No record with message end flag found. "
            "At least one record must have the message end flag."
        )


class DuplicateBeginMarkerError(MarkerError):
    def __init__(self) -> None:
        super().__init__(
            "Multiple records with message begin flag found. "
            "Only one record can have the message begin flag."
        )


class DuplicateEndMarkerError(MarkerError):
    def __init__(self) -> None:
        super().__init__(
            "Multiple records with message end flag found. "
            "Only one record can have the message end flag."
        )


# ============================================================================
# Payload content
# ============================================================================


class PayloadDecodeError(NdefError):
    """Raised when the payload of a decoded record cannot be reconstructed.

    This is only raised by NDEFRecord.payload(), never by decode(). Use
    NDEFRecord.safe_payload() to get a result object instead.

    Examples:
        - Malformed JSON in an application/json record
        - Empty payload in a URI record
        - Unknown URI identifier code
    """

    pass


class UnknownURIPrefixCodeError(PayloadDecodeError):
    """Raised when a URI record uses an identifier code outside the prefix table."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Invalid prefix code: {code}")
