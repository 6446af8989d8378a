# src/zemen/api/__init__.py
"""
zemen.api
~~~~~~~~~

The calls a host application (tray icon, popup window) makes into zemen.
Inputs are plain integers; outputs are immutable values or display strings.

Basic usage::

    from zemen.api import (
        convert_gregorian_to_ethiopian,
        get_current_date,
        get_month_view,
    )

    now = get_current_date()
    view = get_month_view(now.year, now.month)
    convert_gregorian_to_ethiopian(2024, 2, 30)   # → None
"""

from __future__ import annotations

from zemen.api.commands import (
    convert_gregorian_to_ethiopian,
    get_current_date,
    get_month_view,
    get_tray_title,
)

__all__ = [
    "convert_gregorian_to_ethiopian",
    "get_current_date",
    "get_month_view",
    "get_tray_title",
]
