"""Rewrite macro-style C++ operators (AND, OR, EQ, NEQ, XOR, NULL) to native syntax."""

from __future__ import annotations

__version__ = "0.1.0"


def convert(source: str) -> str:
    """Convert one file's C++ source text and return the rewritten text."""
    from cppconvert.transform import convert as _convert

    return _convert(source)
