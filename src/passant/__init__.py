"""Passant - PGN record reading, movetext parsing and serialization."""

__version__ = "0.1.0"
