# src/zemen/display/__init__.py
"""
zemen.display
~~~~~~~~~~~~~

Text rendering of Ethiopian dates according to the user's display
preferences.  Preferences are held in :class:`DisplayOptions`, which mirrors
the key/value record the host application persists; this package never reads
or writes that record itself.

Basic usage::

    from zemen.calendar import EthiopianDate
    from zemen.display import DisplayOptions, format_date

    date = EthiopianDate(2017, 1, 1)
    format_date(date)                                             # → "መስከረም 1 2017"
    format_date(date, DisplayOptions(use_amharic=False))          # → "Meskerem 1 2017"
    format_date(date, DisplayOptions(use_geez_numbers=True))      # → "መስከረም ፩ ፳፻፲፯"
"""

from __future__ import annotations

from zemen.display._exceptions import ConfigError
from zemen.display.format import CALENDAR_ICON, ERA_MARKS, format_date, tray_title
from zemen.display.options import DisplayOptions

__all__ = [
    "CALENDAR_ICON",
    "ConfigError",
    "ERA_MARKS",
    "DisplayOptions",
    "format_date",
    "tray_title",
]
