from __future__ import annotations

import logging
from typing import Optional

from zemen.calendar import Clock, EthiopianDate, from_gregorian_parts, today
from zemen.display import DisplayOptions, tray_title
from zemen.month import CalendarMonth, build_month

logger = logging.getLogger(__name__)


def get_current_date(clock: Optional[Clock] = None) -> EthiopianDate:
    return today(clock)


def get_month_view(year: int, month: int, clock: Optional[Clock] = None) -> CalendarMonth:
    logger.debug("Building month view for %d/%d", month, year)
    return build_month(year, month, clock=clock)


def convert_gregorian_to_ethiopian(year: int, month: int, day: int) -> Optional[EthiopianDate]:
    """Convert a Gregorian date; ``None`` when the date does not exist."""
    return from_gregorian_parts(year, month, day)


def get_tray_title(
    options: Optional[DisplayOptions] = None,
    clock: Optional[Clock] = None,
) -> str:
    """Tray title for today, e.g. "መስከረም 1 2017"."""
    return tray_title(today(clock), options)
