import logging

import jdatetime
from dateutil.relativedelta import relativedelta

from datepath.components import CalendarKind
from datepath.calendars import SOLAR_FORMAT_TOKENS, CalendarBase, CalendarDate, InvalidDateError
from datepath.calendars.locale import ensure_persian_locale

logger = logging.getLogger(__name__)


def is_leap_year(year: int) -> bool:
    start = jdatetime.date(year, 1, 1).togregorian()
    end = jdatetime.date(year + 1, 1, 1).togregorian()
    return (end - start).days == 366


def month_length(year: int, month: int) -> int:
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap_year(year) else 29


def solar_weekday(gregorian) -> int:
    # Saturday is the first day of the week.
    return (gregorian.weekday() + 2) % 7


def day_of_year(month: int, day: int) -> int:
    if month <= 7:
        return (month - 1) * 31 + day
    return 186 + (month - 7) * 30 + day


class SolarDate(CalendarDate):
    """A date whose ``ww``, ``Q`` and field accessors follow the solar calendar."""

    kind = CalendarKind.SOLAR
    format_tokens = SOLAR_FORMAT_TOKENS

    @property
    def year(self) -> int:
        return self.solar.year

    @property
    def month(self) -> int:
        return self.solar.month

    @property
    def day(self) -> int:
        return self.solar.day

    @property
    def weekday(self) -> int:
        return solar_weekday(self.gregorian)

    @property
    def week(self) -> int:
        new_year = jdatetime.date(self.year, 1, 1).togregorian()
        return (day_of_year(self.month, self.day) - 1 + solar_weekday(new_year)) // 7 + 1

    @property
    def month_name(self) -> str:
        return ensure_persian_locale().month_names[self.month - 1]

    def _localize(self, text: str) -> str:
        return ensure_persian_locale().digits(text)


class SolarCalendar(CalendarBase):
    kind = CalendarKind.SOLAR

    def from_components(self, year: int, month: int, day: int = 1) -> SolarDate:
        ensure_persian_locale()
        try:
            solar = jdatetime.date(year, month, day)
        except ValueError as e:
            raise InvalidDateError(
                f"Invalid solar date {year}/{month}/{day}: {e}"
            ) from e
        return SolarDate(solar.togregorian())

    def from_week(self, year: int, week: int) -> SolarDate:
        ensure_persian_locale()
        today = jdatetime.date.fromgregorian(date=self.today())
        # Only Esfand 30 can be missing in the target year.
        day = min(today.day, month_length(year, today.month))
        moved = self.from_components(year, today.month, day)
        shifted = moved.gregorian + relativedelta(weeks=week - moved.week)
        logger.debug(f"Solar week {year}-W{week} resolved to {shifted.isoformat()}")
        return SolarDate(shifted)
