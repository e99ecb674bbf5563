"""Decoding DNS wire-format names, header flags and resource records."""

__version__ = "0.2.1"