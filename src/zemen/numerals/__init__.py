# src/zemen/numerals/__init__.py
"""
zemen.numerals
~~~~~~~~~~~~~~

Geez (Ethiopic) numeral rendering.  Numbers are composed additively from unit
glyphs (፩..፱), tens glyphs (፲..፺) and the hundred marker (፻).

Basic usage::

    from zemen.numerals import to_geez

    to_geez(1)       # → "፩"
    to_geez(2017)    # → "፳፻፲፯"
    to_geez(12345)   # → "12345"  (no Geez composition above four digits)

Public API
----------
to_geez         Render a non-negative integer as Geez numerals.
render_number   Render a number in either Arabic or Geez numerals.
"""

from __future__ import annotations

from zemen.numerals.geez import (
    GEEZ_HUNDRED,
    GEEZ_LIMIT,
    NUMERAL_STYLES,
    Numerals,
    render_number,
    to_geez,
)

__all__ = [
    "GEEZ_HUNDRED",
    "GEEZ_LIMIT",
    "NUMERAL_STYLES",
    "Numerals",
    "render_number",
    "to_geez",
]
