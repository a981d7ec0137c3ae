import logging
from datetime import date

from dateutil.relativedelta import relativedelta

from datepath.components import CalendarKind
from datepath.calendars import GREGORIAN_MONTHS, CalendarBase, CalendarDate, InvalidDateError

logger = logging.getLogger(__name__)


class GregorianDate(CalendarDate):
    kind = CalendarKind.GREGORIAN

    @property
    def year(self) -> int:
        return self.gregorian.year

    @property
    def month(self) -> int:
        return self.gregorian.month

    @property
    def day(self) -> int:
        return self.gregorian.day

    @property
    def week(self) -> int:
        return self.gregorian.isocalendar()[1]

    @property
    def month_name(self) -> str:
        return GREGORIAN_MONTHS[self.month - 1]

    def in_gregorian(self) -> "GregorianDate":
        return self


class GregorianCalendar(CalendarBase):
    kind = CalendarKind.GREGORIAN

    def from_components(self, year: int, month: int, day: int = 1) -> GregorianDate:
        try:
            return GregorianDate(date(year, month, day))
        except ValueError as e:
            raise InvalidDateError(
                f"Invalid Gregorian date {year}/{month}/{day}: {e}"
            ) from e

    def from_week(self, year: int, week: int) -> GregorianDate:
        try:
            # relativedelta moves Feb 29 to Feb 28 in common years.
            moved = GregorianDate(self.today() + relativedelta(year=year))
        except ValueError as e:
            raise InvalidDateError(f"Invalid Gregorian year {year}: {e}") from e
        shifted = moved.gregorian + relativedelta(weeks=week - moved.week)
        logger.debug(f"Gregorian week {year}-W{week} resolved to {shifted.isoformat()}")
        return GregorianDate(shifted)
