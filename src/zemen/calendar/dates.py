from __future__ import annotations

import datetime
import logging
import numbers
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Optional

from zemen.i18n import Language, month_name, weekday_name
from zemen.numerals import to_geez

from ._exceptions import InvalidDateError
from .converter import (
    ETHIOPIAN_EPOCH_JDN,
    ethiopian_to_jdn,
    gregorian_to_jdn,
    jdn_to_ethiopian,
    jdn_to_gregorian,
    weekday_from_jdn,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.date]

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


# ── calendar rules ───────────────────────────────────────────────────────────

def is_leap_year(year: int) -> bool:
    """Ethiopian leap year: the one before every year divisible by 4."""
    return year % 4 == 3


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 13:
        raise InvalidDateError(f"Ethiopian month must be 1..13; got {month}.")
    if month == 13:
        return 6 if is_leap_year(year) else 5
    return 30


def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_gregorian_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Gregorian month must be 1..12; got {month}.")
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def is_valid_gregorian(year: Any, month: Any, day: Any) -> bool:
    if not (_is_int(year) and _is_int(month) and _is_int(day)):
        return False
    if year < 1 or not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_gregorian_month(year, month)


# ── value types ──────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class GregorianDate:
    """A proleptic Gregorian date, year 1 onwards."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not is_valid_gregorian(self.year, self.month, self.day):
            raise InvalidDateError(
                f"Not a Gregorian date: {self.year}-{self.month}-{self.day}."
            )
        for name in ("year", "month", "day"):
            object.__setattr__(self, name, int(getattr(self, name)))

    @classmethod
    def from_date(cls, value: datetime.date) -> "GregorianDate":
        return cls(value.year, value.month, value.day)

    @classmethod
    def from_jdn(cls, jdn: int) -> "GregorianDate":
        return cls(*jdn_to_gregorian(jdn))

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)

    @property
    def jdn(self) -> int:
        return gregorian_to_jdn(self.year, self.month, self.day)


@dataclass(frozen=True, slots=True)
class EthiopianDate:
    """
    A date in the Ethiopian calendar (Amete Mihret era).

    Twelve months of 30 days are followed by Pagume, which has 6 days in
    years where ``year % 4 == 3`` and 5 otherwise.  ``day_geez`` is the day
    rendered in Geez numerals; it is derived from ``day`` and takes no part
    in equality.
    """

    year: int
    month: int
    day: int
    day_geez: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not (_is_int(self.year) and _is_int(self.month) and _is_int(self.day)):
            raise InvalidDateError(
                f"Ethiopian date parts must be ints; got "
                f"({self.year!r}, {self.month!r}, {self.day!r})."
            )
        if self.year < 1:
            raise InvalidDateError(f"Ethiopian year must be >= 1; got {self.year}.")
        limit = days_in_month(self.year, self.month)
        if not 1 <= self.day <= limit:
            raise InvalidDateError(
                f"Day {self.day} is outside 1..{limit} for month {self.month} "
                f"of {self.year}."
            )
        for name in ("year", "month", "day"):
            object.__setattr__(self, name, int(getattr(self, name)))
        object.__setattr__(self, "day_geez", to_geez(self.day))

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def from_jdn(cls, jdn: int) -> "EthiopianDate":
        return cls(*jdn_to_ethiopian(jdn))

    @classmethod
    def from_gregorian(cls, value: GregorianDate | datetime.date) -> "EthiopianDate":
        if not isinstance(value, GregorianDate):
            value = GregorianDate.from_date(value)
        return cls.from_jdn(value.jdn)

    # ── conversion ───────────────────────────────────────────────────────

    @property
    def jdn(self) -> int:
        return ethiopian_to_jdn(self.year, self.month, self.day)

    def to_gregorian(self) -> GregorianDate:
        return GregorianDate.from_jdn(self.jdn)

    # ── derived attributes ───────────────────────────────────────────────

    @property
    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    @property
    def weekday(self) -> int:
        return weekday_from_jdn(self.jdn)

    @property
    def year_geez(self) -> str:
        return to_geez(self.year)

    def month_name(self, language: Language = "am") -> str:
        return month_name(self.month, language)

    def weekday_name(self, language: Language = "am") -> str:
        return weekday_name(self.weekday, language)

    @property
    def amharic_month(self) -> str:
        return self.month_name("am")

    @property
    def english_month(self) -> str:
        return self.month_name("en")

    @property
    def amharic_weekday(self) -> str:
        return self.weekday_name("am")

    @property
    def english_weekday(self) -> str:
        return self.weekday_name("en")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# ── operations ───────────────────────────────────────────────────────────────

def to_ethiopian(value: GregorianDate) -> EthiopianDate:
    return EthiopianDate.from_gregorian(value)


def to_gregorian(value: EthiopianDate) -> GregorianDate:
    return value.to_gregorian()


def weekday_of(value: EthiopianDate) -> int:
    """Day of week (0 = Sunday) of the Gregorian day ``value`` falls on."""
    return weekday_from_jdn(to_gregorian(value).jdn)


def today(clock: Optional[Clock] = None) -> EthiopianDate:
    """
    Today's Ethiopian date according to ``clock``.

    ``clock`` returns the caller's local calendar date; it defaults to
    :meth:`datetime.date.today`.  Pass a fixed callable to pin "today".
    """
    local = (clock or datetime.date.today)()
    result = EthiopianDate.from_gregorian(GregorianDate(local.year, local.month, local.day))
    logger.debug("Resolved today: %s -> %s", local, result)
    return result


def from_gregorian_parts(year: Any, month: Any, day: Any) -> Optional[EthiopianDate]:
    """
    Convert a Gregorian year/month/day, or return ``None``.

    ``None`` covers every triple that is not a proleptic Gregorian date
    (e.g. 2023-02-29, month 13, day 0) and dates before the Ethiopian epoch.
    """
    if not is_valid_gregorian(year, month, day):
        logger.debug("Rejected Gregorian input %r-%r-%r", year, month, day)
        return None
    jdn = gregorian_to_jdn(year, month, day)
    if jdn < ETHIOPIAN_EPOCH_JDN:
        logger.debug("Gregorian %d-%d-%d precedes the Ethiopian epoch", year, month, day)
        return None
    return EthiopianDate.from_jdn(jdn)
