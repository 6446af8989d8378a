# src/zemen/i18n/__init__.py
"""
zemen.i18n
~~~~~~~~~~

Amharic and English names for the thirteen Ethiopian months and the seven
weekdays.  Lookups never fail on an out-of-range index; they return
``"Unknown"`` instead.

Basic usage::

    from zemen.i18n import month_name, weekday_name

    month_name(1)              # → "መስከረም"
    month_name(13, "en")       # → "Pagume"
    weekday_name(0, "en")      # → "Sunday"
"""

from __future__ import annotations

from zemen.i18n.tables import (
    LANGUAGES,
    MONTH_NAMES,
    UNKNOWN,
    WEEKDAY_NAMES,
    Language,
    month_name,
    weekday_name,
)

__all__ = [
    "LANGUAGES",
    "Language",
    "MONTH_NAMES",
    "UNKNOWN",
    "WEEKDAY_NAMES",
    "month_name",
    "weekday_name",
]
