class CalendarError(ValueError):
    """Base exception for calendar and date errors."""


class InvalidDateError(CalendarError):
    """A year/month/day triple that does not exist in its calendar."""
