"""Well-known URI record prefix compression.

A URI record payload starts with a one-byte identifier code that stands for a
common URI prefix, followed by the rest of the URI in UTF-8. For example
``"http://www.nfc.com"`` is stored as ``0x01`` + ``b"nfc.com"``.

Code table (NFC Forum URI RTD):

    0x00  (no prefix)         0x12  rtsp://
    0x01  http://www.         0x13  urn:
    0x02  https://www.        0x14  pop:
    0x03  http://             0x15  sip:
    0x04  https://            0x16  sips:
    0x05  tel:                0x17  tftp:
    0x06  mailto:             0x18  btspp://
    0x07  ftp://anonymous:anonymous@
    0x08  ftp://ftp.          0x19  btl2cap://
    0x09  ftps://             0x1A  btgoep://
    0x0A  sftp://             0x1B  tcpobex://
    0x0B  smb://              0x1C  irdaobex://
    0x0C  nfs://              0x1D  file://
    0x0D  ftp://              0x1E  urn:epc:id:
    0x0E  dav://              0x1F  urn:epc:tag:
    0x0F  news:               0x20  urn:epc:pat:
    0x10  telnet://           0x21  urn:epc:raw:
    0x11  imap:               0x22  urn:epc:
                              0x23  urn:nfc:

Codes 0x24-0xFF are reserved.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import AnyUrl, TypeAdapter, ValidationError

from ..exceptions import InvalidURIError, UnknownURIPrefixCodeError

URI_PREFIXES: Mapping[int, str] = MappingProxyType(
    {
        0x00: "",
        0x01: "http://www.",
        0x02: "https://www.",
        0x03: "http://",
        0x04: "https://",
        0x05: "tel:",
        0x06: "mailto:",
        0x07: "ftp://anonymous:anonymous@",
        0x08: "ftp://ftp.",
        0x09: "ftps://",
        0x0A: "sftp://",
        0x0B: "smb://",
        0x0C: "nfs://",
        0x0D: "ftp://",
        0x0E: "dav://",
        0x0F: "news:",
        0x10: "telnet://",
        0x11: "imap:",
        0x12: "rtsp://",
        0x13: "urn:",
        0x14: "pop:",
        0x15: "sip:",
        0x16: "sips:",
        0x17: "tftp:",
        0x18: "btspp://",
        0x19: "btl2cap://",
        0x1A: "btgoep://",
        0x1B: "tcpobex://",
        0x1C: "irdaobex://",
        0x1D: "file://",
        0x1E: "urn:epc:id:",
        0x1F: "urn:epc:tag:",
        0x20: "urn:epc:pat:",
        0x21: "urn:epc:raw:",
        0x22: "urn:epc:",
        0x23: "urn:nfc:",
    }
)

# Longest prefixes first, so "urn:epc:id:" wins over "urn:epc:" and "urn:".
_BY_LENGTH = sorted(
    ((code, prefix) for code, prefix in URI_PREFIXES.items() if prefix),
    key=lambda item: len(item[1]),
    reverse=True,
)

_URI_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def is_valid_uri(uri: str) -> bool:
    """Return True if uri parses as an absolute URI."""
    try:
        _URI_ADAPTER.validate_python(uri)
    except ValidationError:
        return False
    return True


def compress_uri(uri: str) -> tuple[int, str]:
    """Split a URI into its identifier code and remaining suffix.

    Args:
        uri: Absolute URI, e.g. "https://example.com"

    Returns:
        Tuple of (identifier_code, suffix). Code 0x00 means no prefix matched
        and the suffix is the whole URI.

    Raises:
        InvalidURIError: If uri is not a syntactically valid URI

    Example:
        >>> compress_uri("http://www.nfc.com")
        (1, 'nfc.com')
        >>> compress_uri("urn:epc:id:sgtin:0614141.107346.2017")
        (30, 'sgtin:0614141.107346.2017')
    """
    if not isinstance(uri, str) or not is_valid_uri(uri):
        raise InvalidURIError("Provided URI is not a valid URI")

    for code, prefix in _BY_LENGTH:
        if uri.startswith(prefix):
            return code, uri[len(prefix) :]
    return 0x00, uri


def expand_uri(code: int, suffix: str) -> str:
    """Rebuild a URI from its identifier code and suffix.

    Raises:
        UnknownURIPrefixCodeError: If code is not in the prefix table
    """
    prefix = URI_PREFIXES.get(code)
    if prefix is None:
        raise UnknownURIPrefixCodeError(code)
    return prefix + suffix
