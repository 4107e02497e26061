"""Rewrite hexadecimal literals in text as width preserving decimals."""

__version__ = "0.1"
