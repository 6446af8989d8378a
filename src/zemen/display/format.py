from __future__ import annotations

from typing import Optional

from zemen.calendar import EthiopianDate
from zemen.numerals import render_number

from .options import DisplayOptions

CALENDAR_ICON: str = "📅"

ERA_MARKS: dict[str, str] = {
    "am": "ዓ.ም",
    "en": "A.M.",
}


def format_date(date: EthiopianDate, options: Optional[DisplayOptions] = None) -> str:
    """
    Render ``date`` as a single line of text.

    Named form is "<month> <day> <year>", numeric form "<day>/<month>/<year>";
    every number follows the chosen numeral style.
    """
    options = options or DisplayOptions()
    language, numerals = options.language, options.numerals

    day = render_number(date.day, numerals)
    year = render_number(date.year, numerals)
    if options.use_numeric_format:
        text = f"{day}/{render_number(date.month, numerals)}/{year}"
    else:
        text = f"{date.month_name(language)} {day} {year}"

    if options.show_qen:
        text = f"{date.weekday_name(language)}, {text}"
    if options.show_amete_mihret:
        text = f"{text} {ERA_MARKS[language]}"
    return text


def tray_title(date: EthiopianDate, options: Optional[DisplayOptions] = None) -> str:
    options = options or DisplayOptions()
    if not options.show_date_in_tray:
        return CALENDAR_ICON
    return format_date(date, options)
