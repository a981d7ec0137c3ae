from datetime import date

import pytest

from datepath import GregorianCalendar, SolarCalendar
from datepath.calendars.locale import reset_persian_locale

# 15 Aban 1403 in the solar calendar.
FIXED_TODAY = date(2024, 11, 5)


@pytest.fixture(autouse=True)
def fresh_locale():
    reset_persian_locale()
    yield
    reset_persian_locale()


@pytest.fixture
def solar_calendar():
    return SolarCalendar(today=FIXED_TODAY)


@pytest.fixture
def gregorian_calendar():
    return GregorianCalendar(today=FIXED_TODAY)
