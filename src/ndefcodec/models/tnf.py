"""Type Name Format (TNF) values.

The TNF is the 3-bit field in every record header that says how the TYPE
field of the record is to be interpreted.
"""

from __future__ import annotations

import enum

_LABELS = {
    0x00: "empty",
    0x01: "well-known",
    0x02: "media",
    0x03: "absolute-uri",
    0x04: "forum-external",
    0x05: "unknown",
    0x06: "unchanged",
    0x07: "reserved",
}


class TNF(enum.IntEnum):
    """Record type categories with their fixed 3-bit wire codes.

    Example:
        >>> TNF.WELL_KNOWN.label
        'well-known'
        >>> TNF.from_label("media")
        <TNF.MEDIA: 2>
    """

    EMPTY = 0x00
    WELL_KNOWN = 0x01
    MEDIA = 0x02
    ABSOLUTE_URI = 0x03
    EXTERNAL = 0x04
    UNKNOWN = 0x05
    UNCHANGED = 0x06
    RESERVED = 0x07

    @property
    def label(self) -> str:
        """Hyphenated name of the category, e.g. ``"well-known"``."""
        return _LABELS[self.value]

    @classmethod
    def from_label(cls, label: str) -> TNF:
        """Look up a TNF by its label.

        Raises:
            ValueError: If the label is not one of the eight TNF labels
        """
        for code, name in _LABELS.items():
            if name == label:
                return cls(code)
        raise ValueError(f"Unknown TNF: {label}")

    @classmethod
    def from_code(cls, code: int) -> TNF:
        """Look up a TNF by its 3-bit wire code.

        Raises:
            ValueError: If code is outside 0-7
        """
        try:
            return cls(code)
        except ValueError as err:
            raise ValueError(f"Unknown TNF code: {code}") from err
