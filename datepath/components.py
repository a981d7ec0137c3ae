from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class CalendarKind(Enum):
    """Calendar systems a pattern can be rendered in."""
    SOLAR = "solar"
    GREGORIAN = "gregorian"

    @classmethod
    def coerce(cls, value: Union["CalendarKind", str, bool]) -> "CalendarKind":
        """
        Accept an enum member, its value, the host record spellings
        (``"persian"``, ``"georgian"``) or the legacy ``use_persian`` flag.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.SOLAR if value else cls.GREGORIAN
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _KIND_ALIASES:
                return _KIND_ALIASES[key]
        raise ValueError("Unknown calendar kind: %r" % (value,))


_KIND_ALIASES = {
    "solar": CalendarKind.SOLAR,
    "persian": CalendarKind.SOLAR,
    "jalali": CalendarKind.SOLAR,
    "gregorian": CalendarKind.GREGORIAN,
    "georgian": CalendarKind.GREGORIAN,
}


@dataclass(frozen=True)
class DateComponents:
    """
    Calendar-relative date components describing a single note.

    ``year`` and ``month`` are always present. A ``month`` of ``1`` doubles as
    the placeholder for year-level notes, so ``DateComponents(1403, 1)`` is a
    yearly note rather than the first month.

    At most one of ``day``, ``week`` and ``quarter`` is expected to be set;
    when several are, they are read in that order of priority.
    """
    year: int
    month: int
    day: Optional[int] = None
    week: Optional[int] = None
    quarter: Optional[int] = None

    @property
    def granularity(self) -> str:
        if self.day is not None:
            return "day"
        if self.week is not None:
            return "week"
        if self.quarter is not None:
            return "quarter"
        if self.month is not None and self.month != 1:
            return "month"
        return "year"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DateComponents":
        return cls(
            year=int(data["year"]),
            month=int(data.get("month") or 1),
            day=_optional_int(data.get("day")),
            week=_optional_int(data.get("week")),
            quarter=_optional_int(data.get("quarter")),
        )

    def as_dict(self) -> Dict[str, int]:
        result = {"year": self.year, "month": self.month}
        for key in ("day", "week", "quarter"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result


def _optional_int(value):
    if value is None or value == "":
        return None
    return int(value)
