"""
Calendar oracle

Builds concrete dates in either supported calendar and renders rewritten
patterns against them. Callers ask a ``CalendarBase`` for a ``CalendarDate``
and call ``CalendarDate.format`` with a pattern produced by
``datepath.tokens.rewrite_pattern``.

Format tokens:
- ``sYYYY sMMMM sMM sM sDD sD``: solar year, month name, month, day
  (solar dates only)
- ``YYYY MMMM MM M DD D``: Gregorian year, month name, month, day
- ``ww``: 2-digit week of year in the date's own calendar
- ``Q``: quarter in the date's own calendar
- ``[...]``: literal text

Any other character is copied to the output, so on a Gregorian date an
``s`` in front of a token is plain text.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Callable, Dict, Optional, Union

import jdatetime
import regex as re
from tzlocal import get_localzone

from datepath.components import CalendarKind
from datepath.tokens import SOLAR_PREFIX

GREGORIAN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

FIELD_TOKENS = ("YYYY", "MMMM", "MM", "M", "DD", "D")


def _format_tokens(*prefixes: str) -> re.Pattern:
    # Longest first inside each prefix group so "MMMM" never matches as "MM".
    fields = [re.escape(prefix + token) for prefix in prefixes for token in FIELD_TOKENS]
    return re.compile(r"\[([^\]]*)\]|" + "|".join(fields) + r"|ww|Q")


GREGORIAN_FORMAT_TOKENS = _format_tokens("")
SOLAR_FORMAT_TOKENS = _format_tokens(SOLAR_PREFIX, "")


class InvalidDateError(ValueError):
    """The calendar cannot build a date from the given components."""


def local_today() -> date:
    return datetime.now(get_localzone()).date()


class CalendarDate(ABC):
    """A single day, viewable in both calendars."""

    kind: CalendarKind
    format_tokens: re.Pattern = GREGORIAN_FORMAT_TOKENS

    def __init__(self, gregorian: date):
        self.gregorian = gregorian
        self._solar = None

    @property
    def solar(self) -> jdatetime.date:
        if self._solar is None:
            self._solar = jdatetime.date.fromgregorian(date=self.gregorian)
        return self._solar

    @property
    @abstractmethod
    def year(self) -> int:
        pass

    @property
    @abstractmethod
    def month(self) -> int:
        pass

    @property
    @abstractmethod
    def day(self) -> int:
        pass

    @property
    @abstractmethod
    def week(self) -> int:
        """Week of year in this date's calendar."""
        pass

    @property
    @abstractmethod
    def month_name(self) -> str:
        pass

    @property
    def quarter(self) -> int:
        return (self.month - 1) // 3 + 1

    def in_gregorian(self) -> "CalendarDate":
        """The same day seen through the Gregorian calendar."""
        return GregorianDate(self.gregorian)

    def format(self, pattern: str) -> str:
        return self.format_tokens.sub(self._render_token, pattern)

    def _render_token(self, match) -> str:
        literal = match.group(1)
        if literal is not None:
            return literal

        token = match.group(0)
        if token == "ww":
            return self._localize("%02d" % self.week)
        if token == "Q":
            return self._localize(str(self.quarter))
        if token.startswith(SOLAR_PREFIX):
            return self._render_field(token[len(SOLAR_PREFIX):])
        return self.in_gregorian()._render_field(token)

    def _render_field(self, token: str) -> str:
        if token == "MMMM":
            return self.month_name
        values = {
            "YYYY": "%04d" % self.year,
            "MM": "%02d" % self.month,
            "M": str(self.month),
            "DD": "%02d" % self.day,
            "D": str(self.day),
        }
        return self._localize(values[token])

    def _localize(self, text: str) -> str:
        return text

    def __eq__(self, other):
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.kind is other.kind and self.gregorian == other.gregorian

    def __hash__(self):
        return hash((self.kind, self.gregorian))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.year}, {self.month}, {self.day})"


class CalendarBase(ABC):
    """
    Factory for ``CalendarDate`` objects in one calendar.

    ``today`` overrides the clock used by ``from_week``; it may be a date or a
    callable returning one. The default is the current date in the local
    timezone.
    """

    kind: CalendarKind

    def __init__(self, today: Optional[Union[date, Callable[[], date]]] = None):
        if today is None:
            self._today = local_today
        elif isinstance(today, date):
            self._today = lambda: today
        else:
            self._today = today

    def today(self) -> date:
        return self._today()

    @abstractmethod
    def from_components(self, year: int, month: int, day: int = 1) -> CalendarDate:
        """Build a date, raising ``InvalidDateError`` for impossible components."""
        pass

    @abstractmethod
    def from_week(self, year: int, week: int) -> CalendarDate:
        """Move today's date to ``year`` and then to week ``week`` of that year."""
        pass


from datepath.calendars.gregorian import GregorianCalendar, GregorianDate  # noqa: E402
from datepath.calendars.solar import SolarCalendar, SolarDate  # noqa: E402

_calendar_classes = {
    CalendarKind.SOLAR: SolarCalendar,
    CalendarKind.GREGORIAN: GregorianCalendar,
}
_default_calendars: Dict[CalendarKind, CalendarBase] = {}


def get_calendar(kind: Union[CalendarKind, str] = CalendarKind.SOLAR) -> CalendarBase:
    kind = CalendarKind.coerce(kind)
    if kind not in _default_calendars:
        _default_calendars[kind] = _calendar_classes[kind]()
    return _default_calendars[kind]


__all__ = [
    "CalendarBase",
    "CalendarDate",
    "CalendarKind",
    "GregorianCalendar",
    "GregorianDate",
    "InvalidDateError",
    "SolarCalendar",
    "SolarDate",
    "get_calendar",
    "local_today",
]
