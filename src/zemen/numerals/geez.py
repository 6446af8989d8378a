from __future__ import annotations

from typing import Literal

Numerals = Literal["arabic", "geez"]

NUMERAL_STYLES: tuple[str, ...] = ("arabic", "geez")

# Index 0 is unused: Geez has no zero glyph.
GEEZ_UNITS: tuple[str, ...] = ("", "፩", "፪", "፫", "፬", "፭", "፮", "፯", "፰", "፱")
GEEZ_TENS: tuple[str, ...] = ("", "፲", "፳", "፴", "፵", "፶", "፷", "፸", "፹", "፺")
GEEZ_HUNDRED: str = "፻"

# Values at or above this are rendered with decimal digits.
GEEZ_LIMIT: int = 10_000


def _below_hundred(n: int) -> str:
    tens, ones = divmod(n, 10)
    return GEEZ_TENS[tens] + GEEZ_UNITS[ones]


def to_geez(n: int) -> str:
    """
    Render a non-negative integer in Geez numerals.

    0 renders as the empty string.  Values from 100 to 9999 are written as
    a hundreds-count (itself a sub-100 composition, dropped when it is 1)
    followed by ፻ and the sub-100 remainder, so 2017 → ፳፻፲፯.  Values of
    10000 and above fall back to ``str(n)``.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Geez numerals need an int; got {type(n).__name__}.")
    if n < 0:
        raise ValueError(f"Geez numerals need a non-negative value; got {n}.")
    if n >= GEEZ_LIMIT:
        return str(n)

    hundreds, rest = divmod(n, 100)
    if hundreds == 0:
        return _below_hundred(rest)

    lead = "" if hundreds == 1 else _below_hundred(hundreds)
    return lead + GEEZ_HUNDRED + _below_hundred(rest)


def render_number(n: int, numerals: Numerals = "arabic") -> str:
    if numerals == "geez":
        return to_geez(n)
    if numerals == "arabic":
        return str(n)
    raise ValueError(f"Unknown numeral style {numerals!r}; expected one of {NUMERAL_STYLES}.")
