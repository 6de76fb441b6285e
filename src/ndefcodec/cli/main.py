"""Main CLI entry point for ndefcodec."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..builders import text_record, uri_record
from ..codec.decoder import decode
from ..codec.encoder import encode
from ..config import CodecConfig
from ..exceptions import NdefError
from .report import print_message


def _read_input(args: argparse.Namespace) -> bytes:
    if args.file:
        return Path(args.file).read_bytes()
    return bytes.fromhex(args.decode)


def main() -> int:
    """Main entry point for the ndefcodec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="ndefcodec: NDEF Message Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ndefcodec --decode 030cd1010855016e66632e636f6dfe   Decode a hex dump
  ndefcodec --file tag.bin                           Decode a raw tag dump
  ndefcodec --uri https://example.com                Encode a URI record
  ndefcodec --text "hello"                           Encode a text record
  ndefcodec --version                                Show version
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--decode",
        metavar="HEX",
        type=str,
        help="Decode a hex-encoded NDEF message and show its records",
    )
    source.add_argument(
        "--file",
        metavar="PATH",
        type=str,
        help="Decode a binary file containing an NDEF message",
    )
    source.add_argument(
        "--uri",
        metavar="URI",
        type=str,
        help="Encode a single URI record and print the message as hex",
    )
    source.add_argument(
        "--text",
        metavar="TEXT",
        type=str,
        help="Encode a single text/plain record and print the message as hex",
    )

    parser.add_argument(
        "--validate-markers",
        action="store_true",
        help="Reject decoded messages without exactly one begin and one end marker",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"ndefcodec {__version__}",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Handle --decode / --file
    if args.decode is not None or args.file is not None:
        if args.file and not Path(args.file).exists():
            print(f"Error: File not found: {args.file}", file=sys.stderr)
            return 1
        try:
            data = _read_input(args)
        except ValueError as e:
            print(f"Error: Invalid hex input: {e}", file=sys.stderr)
            return 1

        config = CodecConfig(validate_markers=args.validate_markers)
        try:
            message = decode(data, config)
        except NdefError as e:
            print(f"Error decoding message: {e}", file=sys.stderr)
            return 1
        print_message(message)
        return 0

    # Handle --uri / --text
    if args.uri is not None or args.text is not None:
        try:
            if args.uri is not None:
                record = uri_record(args.uri)
            else:
                record = text_record(args.text)
            print(encode([record]).hex())
        except NdefError as e:
            print(f"Error encoding message: {e}", file=sys.stderr)
            return 1
        return 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
