# src/zemen/month/__init__.py
"""
zemen.month
~~~~~~~~~~~

Month views for a 7-column (Sunday-first) calendar grid.

Basic usage::

    from zemen.month import build_month

    view = build_month(2017, 1)
    view.first_day_weekday        # → 3  (Wednesday)
    view.days[0].day_geez         # → "፩"
    for week in view.weeks():     # None pads the cells before day 1
        ...

Pin "today" for a reproducible ``is_today`` flag::

    from zemen.calendar import EthiopianDate
    view = build_month(2017, 1, today=EthiopianDate(2017, 1, 15))
"""

from __future__ import annotations

from zemen.month.month import CalendarDay, CalendarMonth, build_month, shift_month

__all__ = [
    "CalendarDay",
    "CalendarMonth",
    "build_month",
    "shift_month",
]
