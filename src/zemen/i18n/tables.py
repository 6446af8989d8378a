from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

Language = Literal["am", "en"]

LANGUAGES: tuple[str, ...] = ("am", "en")

UNKNOWN: str = "Unknown"

# Month 1 (Meskerem) through month 13 (Pagume).
MONTH_NAMES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "am": (
        "መስከረም", "ጥቅምት", "ኅዳር", "ታኅሣሥ", "ጥር", "የካቲት", "መጋቢት",
        "ሚያዝያ", "ግንቦት", "ሰኔ", "ሐምሌ", "ነሐሴ", "ጳጉሜ",
    ),
    "en": (
        "Meskerem", "Tikimt", "Hidar", "Tahsas", "Tir", "Yekatit", "Megabit",
        "Miazia", "Ginbot", "Sene", "Hamle", "Nehase", "Pagume",
    ),
})

# Weekday 0 (Sunday) through 6 (Saturday).
WEEKDAY_NAMES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "am": ("እሁድ", "ሰኞ", "ማክሰኞ", "ረቡዕ", "ሐሙስ", "ዓርብ", "ቅዳሜ"),
    "en": ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
})


def _table(tables: Mapping[str, tuple[str, ...]], language: str) -> tuple[str, ...]:
    try:
        return tables[language]
    except KeyError:
        raise ValueError(
            f"Unsupported language {language!r}; expected one of {LANGUAGES}."
        ) from None


def month_name(index: int, language: Language = "am") -> str:
    names = _table(MONTH_NAMES, language)
    if not 1 <= index <= len(names):
        return UNKNOWN
    return names[index - 1]


def weekday_name(index: int, language: Language = "am") -> str:
    names = _table(WEEKDAY_NAMES, language)
    if not 0 <= index < len(names):
        return UNKNOWN
    return names[index]
