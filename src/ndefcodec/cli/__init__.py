"""Command-line interface for ndefcodec."""
