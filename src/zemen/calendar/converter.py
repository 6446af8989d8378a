"""
Julian Day Number arithmetic for the Ethiopian and Gregorian calendars.

Every helper accepts Python ints or NumPy integer arrays.  Scalar inputs are
worked in exact Python integer arithmetic and give Python ints back; array inputs are broadcast against each other and give
``int64`` arrays of the broadcast shape.
"""

from __future__ import annotations

from typing import Union

import numpy as np

IntLike = Union[int, "np.ndarray"]

# Meskerem 1, year 1 Amete Mihret (29 August 8 CE, Julian).
ETHIOPIAN_EPOCH_JDN: int = 1724221

# Start of the 4-year cycle that contains the epoch year.
_CYCLE_ORIGIN: int = ETHIOPIAN_EPOCH_JDN - 365
_CYCLE_DAYS: int = 4 * 365 + 1


def _is_scalar(*values: IntLike) -> bool:
    return all(np.ndim(v) == 0 for v in values)


def _operands(scalar: bool, *values: IntLike) -> list[IntLike]:
    # Scalars stay Python ints, exact for any year.
    if scalar:
        return [int(v) for v in values]
    arrays = [np.atleast_1d(np.asarray(v, dtype=np.int64)) for v in values]
    return list(np.broadcast_arrays(*arrays))


def _unwrap(arr: IntLike, scalar: bool) -> IntLike:
    return int(arr) if scalar else arr


# ── Ethiopian ────────────────────────────────────────────────────────────────

def ethiopian_to_jdn(year: IntLike, month: IntLike, day: IntLike) -> IntLike:
    scalar = _is_scalar(year, month, day)
    y, m, d = _operands(scalar, year, month, day)
    jdn = (ETHIOPIAN_EPOCH_JDN - 1) + 365 * (y - 1) + y // 4 + 30 * (m - 1) + d
    return _unwrap(jdn, scalar)


def jdn_to_ethiopian(jdn: IntLike) -> tuple[IntLike, IntLike, IntLike]:
    """
    Split a day number into (year, month, day) using the 1461-day cycle.

    The final year of each cycle (year % 4 == 3) gets the 366th day, which
    lands as Pagume 6.
    """
    scalar = _is_scalar(jdn)
    (j,) = _operands(scalar, jdn)
    offset = j - _CYCLE_ORIGIN
    r = offset % _CYCLE_DAYS
    n = r % 365 + 365 * (r // (_CYCLE_DAYS - 1))
    year = 4 * (offset // _CYCLE_DAYS) + r // 365 - r // (_CYCLE_DAYS - 1)
    month = n // 30 + 1
    day = n % 30 + 1
    return _unwrap(year, scalar), _unwrap(month, scalar), _unwrap(day, scalar)


# ── Gregorian ────────────────────────────────────────────────────────────────

def gregorian_to_jdn(year: IntLike, month: IntLike, day: IntLike) -> IntLike:
    scalar = _is_scalar(year, month, day)
    y, m, d = _operands(scalar, year, month, day)
    a = (14 - m) // 12
    yy = y + 4800 - a
    mm = m + 12 * a - 3
    jdn = (
        d + (153 * mm + 2) // 5 + 365 * yy
        + yy // 4 - yy // 100 + yy // 400 - 32045
    )
    return _unwrap(jdn, scalar)


def jdn_to_gregorian(jdn: IntLike) -> tuple[IntLike, IntLike, IntLike]:
    scalar = _is_scalar(jdn)
    (j,) = _operands(scalar, jdn)
    a = j + 32044
    b = (4 * a + 3) // 146097
    c = a - 146097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return _unwrap(year, scalar), _unwrap(month, scalar), _unwrap(day, scalar)


# ── Weekday ──────────────────────────────────────────────────────────────────

def weekday_from_jdn(jdn: IntLike) -> IntLike:
    """Day of week for a day number, 0 = Sunday … 6 = Saturday."""
    scalar = _is_scalar(jdn)
    (j,) = _operands(scalar, jdn)
    return _unwrap((j + 1) % 7, scalar)
