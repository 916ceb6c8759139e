"""Thoughtbox: token-gated sharing of short text records."""

__version__ = "0.1.0"
