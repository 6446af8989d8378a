"""
tests/api/test_commands.py

Covers:
  - get_current_date with an injected clock
  - get_month_view marks the injected today
  - convert_gregorian_to_ethiopian: found / not found
  - get_tray_title end to end
"""

import datetime

import pytest

from zemen.api import (
    convert_gregorian_to_ethiopian,
    get_current_date,
    get_month_view,
    get_tray_title,
)
from zemen.calendar import EthiopianDate
from zemen.display import DisplayOptions


@pytest.fixture
def clock():
    return lambda: datetime.date(2024, 9, 11)


class TestGetCurrentDate:

    def test_uses_clock(self, clock):
        current = get_current_date(clock)
        assert current == EthiopianDate(2017, 1, 1)
        assert current.day_geez == "፩"

    def test_default_clock(self):
        assert isinstance(get_current_date(), EthiopianDate)


class TestGetMonthView:

    def test_today_marked(self, clock):
        view = get_month_view(2017, 1, clock=clock)
        assert [d.day for d in view.days if d.is_today] == [1]
        assert view.first_day_weekday == view.days[0].weekday == 3

    def test_other_month_unmarked(self, clock):
        view = get_month_view(2016, 13, clock=clock)
        assert len(view.days) == 5
        assert view.today is None


class TestConvertGregorianToEthiopian:

    def test_found(self):
        result = convert_gregorian_to_ethiopian(2024, 9, 11)
        assert result == EthiopianDate(2017, 1, 1)
        assert result.english_month == "Meskerem"
        assert result.amharic_month == "መስከረም"
        assert result.day_geez == "፩"

    @pytest.mark.parametrize("parts", [(2024, 2, 30), (2024, 13, 1), (2024, 1, 0), (2024, 0, 1), (2024, 1, 32)])
    def test_not_found(self, parts):
        assert convert_gregorian_to_ethiopian(*parts) is None


class TestGetTrayTitle:

    def test_default(self, clock):
        assert get_tray_title(clock=clock) == "መስከረም 1 2017"

    def test_english_geez(self, clock):
        opts = DisplayOptions(use_amharic=False, use_geez_numbers=True)
        assert get_tray_title(opts, clock=clock) == "Meskerem ፩ ፳፻፲፯"
