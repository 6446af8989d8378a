"""
tests/i18n/test_tables.py

Covers:
  - Exact Amharic and English month names (1..13)
  - Exact Amharic and English weekday names (0..6, Sunday first)
  - "Unknown" for out-of-range indices
  - Unsupported language
"""

import pytest

from zemen.i18n import UNKNOWN, month_name, weekday_name


AMHARIC_MONTHS = [
    "መስከረም", "ጥቅምት", "ኅዳር", "ታኅሣሥ", "ጥር", "የካቲት", "መጋቢት",
    "ሚያዝያ", "ግንቦት", "ሰኔ", "ሐምሌ", "ነሐሴ", "ጳጉሜ",
]
ENGLISH_MONTHS = [
    "Meskerem", "Tikimt", "Hidar", "Tahsas", "Tir", "Yekatit", "Megabit",
    "Miazia", "Ginbot", "Sene", "Hamle", "Nehase", "Pagume",
]
AMHARIC_WEEKDAYS = ["እሁድ", "ሰኞ", "ማክሰኞ", "ረቡዕ", "ሐሙስ", "ዓርብ", "ቅዳሜ"]
ENGLISH_WEEKDAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


class TestMonthNames:

    @pytest.mark.parametrize("index", range(1, 14))
    def test_amharic(self, index):
        assert month_name(index, "am") == AMHARIC_MONTHS[index - 1]

    @pytest.mark.parametrize("index", range(1, 14))
    def test_english(self, index):
        assert month_name(index, "en") == ENGLISH_MONTHS[index - 1]

    def test_amharic_is_default(self):
        assert month_name(1) == "መስከረም"

    @pytest.mark.parametrize("index", [0, 14, -1, 100])
    def test_out_of_range_is_unknown(self, index):
        assert month_name(index, "am") == UNKNOWN == "Unknown"
        assert month_name(index, "en") == UNKNOWN


class TestWeekdayNames:

    @pytest.mark.parametrize("index", range(7))
    def test_amharic(self, index):
        assert weekday_name(index, "am") == AMHARIC_WEEKDAYS[index]

    @pytest.mark.parametrize("index", range(7))
    def test_english(self, index):
        assert weekday_name(index, "en") == ENGLISH_WEEKDAYS[index]

    @pytest.mark.parametrize("index", [-1, 7, 8])
    def test_out_of_range_is_unknown(self, index):
        assert weekday_name(index, "en") == UNKNOWN


class TestLanguages:

    def test_unsupported_language_raises(self):
        with pytest.raises(ValueError, match="Unsupported language"):
            month_name(1, "fr")
        with pytest.raises(ValueError, match="Unsupported language"):
            weekday_name(1, "om")
