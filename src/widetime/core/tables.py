"""
widetime.core.tables
--------------------
Read-only calendar constants. Indexed by leap flag (0 = common, 1 = leap)
where a table has two rows.
"""

from __future__ import annotations

from typing import Tuple

DAYS_IN_MONTH: Tuple[Tuple[int, ...], Tuple[int, ...]] = (
    (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
)

# Day of year (0-based) on which each month starts.
DAYS_BEFORE_MONTH: Tuple[Tuple[int, ...], Tuple[int, ...]] = (
    (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334),
    (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335),
)

LENGTH_OF_YEAR: Tuple[int, int] = (365, 366)

YEARS_IN_GREGORIAN_CYCLE = 400
DAYS_IN_GREGORIAN_CYCLE = 365 * 400 + 100 - 4 + 1  # 146097

SECONDS_PER_DAY = 24 * 60 * 60

# 1970-01-01 was a Thursday.
EPOCH_WEEKDAY = 4

SOLAR_CYCLE_LENGTH = 28

# One 28-year solar cycle, 2010..2037, rotated so that index (year % 28)
# lands on 2016 for 2016.
SAFE_YEARS: Tuple[int, ...] = (
    2016, 2017, 2018, 2019,
    2020, 2021, 2022, 2023,
    2024, 2025, 2026, 2027,
    2028, 2029, 2030, 2031,
    2032, 2033, 2034, 2035,
    2036, 2037, 2010, 2011,
    2012, 2013, 2014, 2015,
)

# Weekday (Sunday = 0) of January 1st for each entry of SAFE_YEARS.
SAFE_YEAR_JAN1_WEEKDAY: Tuple[int, ...] = (
    5, 0, 1, 2,     # 2016 - 2019
    3, 5, 6, 0,
    1, 3, 4, 5,
    6, 1, 2, 3,
    4, 6, 0, 1,
    2, 4, 5, 6,     # 2036, 2037, 2010, 2011
    0, 2, 3, 4,     # 2012, 2013, 2014, 2015
)

SAFE_YEAR_MIN = min(SAFE_YEARS)
SAFE_YEAR_MAX = max(SAFE_YEARS)
