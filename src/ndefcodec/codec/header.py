"""NDEF record header byte.

Bit layout, most significant bit first:

    bit 7  MB   message begin
    bit 6  ME   message end
    bit 5  CF   chunk flag (chunked records are not supported)
    bit 4  SR   short record (1-byte payload length)
    bit 3  IL   ID length field present
    bit 2-0     TNF code
"""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import ChunkingUnsupportedError
from ..models.tnf import TNF

MB = 0x80
ME = 0x40
CF = 0x20
SR = 0x10
IL = 0x08
TNF_MASK = 0x07


@dataclass(frozen=True)
class RecordHeader:
    """Flags and TNF carried in the first byte of every record.

    Attributes:
        tnf: Type Name Format of the record
        message_begin: MB flag, set on the first record of a message
        message_end: ME flag, set on the last record of a message
        chunked: CF flag; only ever True if explicitly requested on encode
        short_record: SR flag, set when the payload is shorter than 256 bytes
        id_length_present: IL flag, set when the record has an ID

    Example:
        >>> RecordHeader(TNF.WELL_KNOWN, message_begin=True, message_end=True,
        ...              short_record=True).to_byte()
        209
    """

    tnf: TNF
    message_begin: bool = False
    message_end: bool = False
    chunked: bool = False
    short_record: bool = False
    id_length_present: bool = False

    def to_byte(self) -> int:
        """Pack the header into a single byte value (0-255)."""
        value = int(self.tnf) & TNF_MASK
        if self.message_begin:
            value |= MB
        if self.message_end:
            value |= ME
        if self.chunked:
            value |= CF
        if self.short_record:
            value |= SR
        if self.id_length_present:
            value |= IL
        return value

    @classmethod
    def from_byte(cls, value: int) -> RecordHeader:
        """Unpack a header byte.

        Raises:
            ChunkingUnsupportedError: If the CF bit is set
            ValueError: If value is outside 0-255
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Header byte must be 0-255, got {value}")
        if value & CF:
            raise ChunkingUnsupportedError()
        return cls(
            tnf=TNF.from_code(value & TNF_MASK),
            message_begin=bool(value & MB),
            message_end=bool(value & ME),
            chunked=False,
            short_record=bool(value & SR),
            id_length_present=bool(value & IL),
        )
