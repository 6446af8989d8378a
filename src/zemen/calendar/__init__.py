# src/zemen/calendar/__init__.py
"""
zemen.calendar
~~~~~~~~~~~~~~

Ethiopian ↔ Gregorian date conversion.  Both calendars are mapped onto the
Julian Day Number; the Ethiopian epoch (Meskerem 1, 1 Amete Mihret) is
JDN 1724221.

Basic usage::

    from zemen.calendar import GregorianDate, to_ethiopian

    eth = to_ethiopian(GregorianDate(2024, 9, 11))   # → EthiopianDate(2017, 1, 1)
    eth.day_geez                                      # → "፩"
    eth.to_gregorian()                                # → GregorianDate(2024, 9, 11)

Untrusted input goes through ``from_gregorian_parts``, which returns ``None``
instead of raising::

    from zemen.calendar import from_gregorian_parts

    from_gregorian_parts(2023, 2, 29)                 # → None

NumPy arrays are accepted by the day-number helpers::

    import numpy as np
    from zemen.calendar import gregorian_to_jdn, jdn_to_ethiopian

    jdn = gregorian_to_jdn(2024, 9, np.arange(1, 31))
    years, months, days = jdn_to_ethiopian(jdn)

Public API
----------
EthiopianDate, GregorianDate   Immutable date values.
to_ethiopian, to_gregorian     Conversion between the two.
today                          Current Ethiopian date from an injectable clock.
weekday_of                     Day of week, 0 = Sunday.
from_gregorian_parts           Validating conversion returning None on bad input.
CalendarError                  Base exception for all calendar-related errors.
"""

from __future__ import annotations

from zemen.calendar._exceptions import CalendarError, InvalidDateError
from zemen.calendar.converter import (
    ETHIOPIAN_EPOCH_JDN,
    ethiopian_to_jdn,
    gregorian_to_jdn,
    jdn_to_ethiopian,
    jdn_to_gregorian,
    weekday_from_jdn,
)
from zemen.calendar.dates import (
    Clock,
    EthiopianDate,
    GregorianDate,
    days_in_gregorian_month,
    days_in_month,
    from_gregorian_parts,
    is_gregorian_leap_year,
    is_leap_year,
    is_valid_gregorian,
    to_ethiopian,
    to_gregorian,
    today,
    weekday_of,
)

__all__ = [
    "CalendarError",
    "Clock",
    "ETHIOPIAN_EPOCH_JDN",
    "EthiopianDate",
    "GregorianDate",
    "InvalidDateError",
    "days_in_gregorian_month",
    "days_in_month",
    "ethiopian_to_jdn",
    "from_gregorian_parts",
    "gregorian_to_jdn",
    "is_gregorian_leap_year",
    "is_leap_year",
    "is_valid_gregorian",
    "jdn_to_ethiopian",
    "jdn_to_gregorian",
    "to_ethiopian",
    "to_gregorian",
    "today",
    "weekday_from_jdn",
    "weekday_of",
]
