from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

from zemen.calendar import (
    Clock,
    EthiopianDate,
    InvalidDateError,
    today as resolve_today,
    weekday_of,
)
from zemen.i18n import Language, month_name, weekday_name
from zemen.numerals import to_geez

MONTHS_PER_YEAR: int = 13
DAYS_PER_WEEK: int = 7


@dataclass(frozen=True, slots=True)
class CalendarDay:
    day: int
    day_geez: str
    weekday: int
    weekday_name_amharic: str
    weekday_name_english: str
    is_today: bool = False

    def weekday_name(self, language: Language = "am") -> str:
        return weekday_name(self.weekday, language)


@dataclass(frozen=True, slots=True)
class CalendarMonth:
    """
    One Ethiopian month laid out for display.

    ``days`` runs contiguously from 1 to the length of the month and
    ``first_day_weekday`` (0 = Sunday) is the number of blank cells that
    precede day 1 in a Sunday-first grid.
    """

    year: int
    year_geez: str
    month: int
    month_name_amharic: str
    month_name_english: str
    days: tuple[CalendarDay, ...]
    first_day_weekday: int

    def month_name(self, language: Language = "am") -> str:
        return month_name(self.month, language)

    @property
    def today(self) -> Optional[CalendarDay]:
        return next((d for d in self.days if d.is_today), None)

    def weeks(self) -> list[list[Optional[CalendarDay]]]:
        cells: list[Optional[CalendarDay]] = [None] * self.first_day_weekday
        cells.extend(self.days)
        cells.extend([None] * (-len(cells) % DAYS_PER_WEEK))
        return [cells[i:i + DAYS_PER_WEEK] for i in range(0, len(cells), DAYS_PER_WEEK)]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Move ``offset`` months forward (or back) through the 13-month year."""
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidDateError(f"Ethiopian month must be 1..13; got {month}.")
    index = year * MONTHS_PER_YEAR + (month - 1) + offset
    new_year, new_month = divmod(index, MONTHS_PER_YEAR)
    if new_year < 1:
        raise InvalidDateError(f"Cannot move before year 1 (got year {new_year}).")
    return new_year, new_month + 1


def build_month(
    year: int,
    month: int,
    *,
    today: Optional[EthiopianDate] = None,
    clock: Optional[Clock] = None,
) -> CalendarMonth:
    first = EthiopianDate(year, month, 1)
    if today is None:
        today = resolve_today(clock)

    days = []
    for day in range(1, first.days_in_month + 1):
        date = EthiopianDate(first.year, first.month, day)
        weekday = weekday_of(date)
        days.append(
            CalendarDay(
                day=day,
                day_geez=date.day_geez,
                weekday=weekday,
                weekday_name_amharic=weekday_name(weekday, "am"),
                weekday_name_english=weekday_name(weekday, "en"),
                is_today=date == today,
            )
        )

    return CalendarMonth(
        year=first.year,
        year_geez=to_geez(first.year),
        month=first.month,
        month_name_amharic=first.amharic_month,
        month_name_english=first.english_month,
        days=tuple(days),
        first_day_weekday=weekday_of(first),
    )
