"""
widetime.convert.safe_year
--------------------------
Fold a far-future year onto a year in 2010..2037 with the same leap flag
and the same weekday for January 1st.

Up to 2100 the calendar repeats every 28 years, so (year mod 28) indexes
SAFE_YEARS directly. Every exception century drops a leap day and moves
the cycle by 16 positions; cycle_offset accumulates those moves. An
exception century itself is a common year sitting where the plain cycle
expects a leap year, and lands 11 positions further on.

The +11 is tied to the ordering of SAFE_YEARS. Change one, re-derive the other.
"""

from __future__ import annotations

from ..core.tables import SAFE_YEAR_MAX, SAFE_YEAR_MIN, SAFE_YEARS, SOLAR_CYCLE_LENGTH
from ..core.time import cycle_offset, is_exception_century

EXCEPTION_CENTURY_SHIFT = 11


def safe_year_index(year: int) -> int:
    """Position of `year` in SAFE_YEARS (year >= 2001)."""
    year_cycle = year + cycle_offset(year)
    if is_exception_century(year):
        year_cycle += EXCEPTION_CENTURY_SHIFT
    return year_cycle % SOLAR_CYCLE_LENGTH


def safe_year(year: int) -> int:
    """Anchor year in 2010..2037 equivalent to `year` (year >= 2001)."""
    safe = SAFE_YEARS[safe_year_index(year)]
    assert SAFE_YEAR_MIN <= safe <= SAFE_YEAR_MAX
    return safe
