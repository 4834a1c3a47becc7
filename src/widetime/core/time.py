from __future__ import annotations

from .tables import LENGTH_OF_YEAR


def is_leap(year: int) -> bool:
    """Gregorian leap-year rule on the absolute calendar year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_exception_century(year: int) -> bool:
    """
    True for century years that are not leap years (1900, 2100, 2200, ...).
    These break the 28-year weekday repetition of the Julian-style leap rule.
    """
    return year % 100 == 0 and year % 400 != 0


def year_length(year: int) -> int:
    return LENGTH_OF_YEAR[is_leap(year)]


def cycle_offset(year: int) -> int:
    """
    Shift of the 28-year cycle caused by the exception centuries passed
    since 2000. Each one moves the cycle by 16 positions.

    Valid for year >= 2001.
    """
    if year < 2001:
        raise ValueError(f"cycle_offset requires year >= 2001, got {year}")
    year_diff = year - 2000 - 1
    exceptions = year_diff // 100 - year_diff // 400
    return exceptions * 16


def _leap_days_through(year: int) -> int:
    """Number of leap years in the proleptic range [1, year] (floor-extended for year < 1)."""
    return year // 4 - year // 100 + year // 400


def days_before_year(year: int) -> int:
    """
    Signed day count from 1970-01-01 to January 1st of `year`.

    Closed form for the sum of year lengths between 1970 and `year`.
    """
    return 365 * (year - 1970) + _leap_days_through(year - 1) - _leap_days_through(1969)
