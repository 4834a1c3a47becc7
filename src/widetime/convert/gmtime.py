"""
widetime.convert.gmtime
-----------------------
Wide epoch seconds <-> broken-down UTC calendar time.

Pure integer arithmetic on Python ints, so no part of it depends on the
width of the host's time_t. The only bound is the year field of the
result (see core.types).
"""

from __future__ import annotations

from ..core.errors import YearOverflowError
from ..core.tables import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_GREGORIAN_CYCLE,
    DAYS_IN_MONTH,
    EPOCH_WEEKDAY,
    LENGTH_OF_YEAR,
    SECONDS_PER_DAY,
    YEARS_IN_GREGORIAN_CYCLE,
)
from ..core.time import days_before_year, is_leap
from ..core.types import CalendarTime, TM_YEAR_BASE, YEAR_FIELD_MAX, YEAR_FIELD_MIN


def check_calendar(cal: CalendarTime) -> None:
    """Field-range invariants of a decomposed time. Violations are bugs, not input errors."""
    # 60 and 61 are leap seconds
    assert 0 <= cal.second <= 61, cal
    assert 0 <= cal.minute <= 59, cal
    assert 0 <= cal.hour <= 23, cal
    assert 1 <= cal.day_of_month <= 31, cal
    assert 0 <= cal.month <= 11, cal
    assert 0 <= cal.weekday <= 6, cal
    assert 0 <= cal.day_of_year <= 365, cal

    if cal.utc_offset is not None:
        assert -SECONDS_PER_DAY <= cal.utc_offset <= SECONDS_PER_DAY, cal

    if not is_leap(cal.full_year):
        assert cal.day_of_year <= 364, cal
        if cal.month == 1:
            assert cal.day_of_month <= 28, cal


def _split_days(days: int) -> tuple[int, int, int]:
    """
    Signed day count since 1970-01-01 -> (absolute year, month, day offset in month).
    """
    m = days
    if m >= 0:
        year = 1970

        # Whole Gregorian cycles first; far dates would otherwise scan year by year.
        cycles, m = divmod(m, DAYS_IN_GREGORIAN_CYCLE)
        year += cycles * YEARS_IN_GREGORIAN_CYCLE

        leap = is_leap(year)
        while m >= LENGTH_OF_YEAR[leap]:
            m -= LENGTH_OF_YEAR[leap]
            year += 1
            leap = is_leap(year)

        month = 0
        while m >= DAYS_IN_MONTH[leap][month]:
            m -= DAYS_IN_MONTH[leap][month]
            month += 1
    else:
        year = 1969

        # Bring m into [-DAYS_IN_GREGORIAN_CYCLE, 0).
        cycles = (-m - 1) // DAYS_IN_GREGORIAN_CYCLE
        m += cycles * DAYS_IN_GREGORIAN_CYCLE
        year -= cycles * YEARS_IN_GREGORIAN_CYCLE

        leap = is_leap(year)
        while m < -LENGTH_OF_YEAR[leap]:
            m += LENGTH_OF_YEAR[leap]
            year -= 1
            leap = is_leap(year)

        month = 11
        while m < -DAYS_IN_MONTH[leap][month]:
            m += DAYS_IN_MONTH[leap][month]
            month -= 1
        m += DAYS_IN_MONTH[leap][month]

    return year, month, m


def wide_gmtime(seconds: int) -> CalendarTime:
    """
    Decompose seconds since 1970-01-01T00:00:00 UTC into UTC calendar fields.

    Raises YearOverflowError if the year does not fit the year field.
    """
    # Floor division borrows from the next unit for negative inputs.
    minutes, sec = divmod(seconds, 60)
    hours, minute = divmod(minutes, 60)
    days, hour = divmod(hours, 24)

    weekday = (days + EPOCH_WEEKDAY) % 7

    year, month, mday0 = _split_days(days)

    tm_year = year - TM_YEAR_BASE
    if not (YEAR_FIELD_MIN <= tm_year <= YEAR_FIELD_MAX):
        raise YearOverflowError(year)

    leap = is_leap(year)
    cal = CalendarTime(
        second=sec,
        minute=minute,
        hour=hour,
        day_of_month=mday0 + 1,
        month=month,
        year=tm_year,
        weekday=weekday,
        day_of_year=DAYS_BEFORE_MONTH[leap][month] + mday0,
        is_dst=0,
        utc_offset=0,
        zone="UTC",
    )
    check_calendar(cal)
    return cal


def timegm(cal: CalendarTime) -> int:
    """
    Compose UTC calendar fields back into seconds since the epoch.

    Reads year, month, day_of_month, hour, minute and second only;
    weekday, day_of_year and offset fields are ignored.
    """
    year = cal.full_year
    days = days_before_year(year)
    days += DAYS_BEFORE_MONTH[is_leap(year)][cal.month]
    days += cal.day_of_month - 1

    return days * SECONDS_PER_DAY + cal.hour * 3600 + cal.minute * 60 + cal.second
