from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

from zemen.display._exceptions import ConfigError
from zemen.i18n import Language
from zemen.numerals import Numerals


@dataclass(frozen=True, slots=True)
class DisplayOptions:
    """
    How dates are shown to the user.

    use_amharic         Amharic month/weekday names instead of English.
    use_geez_numbers    Geez numerals instead of Arabic digits.
    show_date_in_tray   Show the date as the tray title (else an icon).
    use_numeric_format  "day/month/year" instead of "month day year".
    show_qen            Prefix the weekday name.
    show_amete_mihret   Append the era mark (ዓ.ም / A.M.).
    """

    use_amharic: bool = True
    use_geez_numbers: bool = False
    show_date_in_tray: bool = True
    use_numeric_format: bool = False
    show_qen: bool = False
    show_amete_mihret: bool = False

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise ConfigError(
                    f"Display option {f.name!r} must be a bool; got {value!r}."
                )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DisplayOptions":
        """Build from a stored preference record; missing keys keep defaults."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)

    @property
    def language(self) -> Language:
        return "am" if self.use_amharic else "en"

    @property
    def numerals(self) -> Numerals:
        return "geez" if self.use_geez_numbers else "arabic"
