"""
widetime.convert.localtime
--------------------------
Wide epoch seconds -> local calendar time, through a host whose
local-time facility only covers the 32-bit time_t range.
"""

from __future__ import annotations

from dataclasses import replace

from ..core.errors import YearOverflowError
from ..core.host import LocalTimeHost
from ..core.time import is_leap
from ..core.types import CalendarTime, HOST_MAX_YEAR, TM_YEAR_BASE, YEAR_FIELD_MAX, YEAR_FIELD_MIN
from .gmtime import check_calendar, timegm, wide_gmtime
from .safe_year import safe_year


def wide_localtime(seconds: int, host: LocalTimeHost) -> CalendarTime:
    """
    Decompose `seconds` in the host's local zone.

    Years past HOST_MAX_YEAR are folded onto an anchor year before the
    host sees them; the true year is restored afterwards. Propagates
    YearOverflowError from the UTC decomposition.
    """
    gm = wide_gmtime(seconds)
    orig_year = gm.year

    if gm.full_year > HOST_MAX_YEAR:
        gm = replace(gm, year=safe_year(gm.full_year) - TM_YEAR_BASE)

    local = host.localtime(timegm(gm))

    year = orig_year
    month_diff = local.month - gm.month

    # Local is Dec 31st of the previous year, UTC is Jan 1st.
    if month_diff == 11:
        year -= 1

    # Local is Jan 1st of the next year, UTC is Dec 31st.
    if month_diff == -11:
        year += 1

    if not (YEAR_FIELD_MIN <= year <= YEAR_FIELD_MAX):
        raise YearOverflowError(year + TM_YEAR_BASE)

    # The proxy year can be a leap year where the true one is not, which
    # leaves Dec 31st numbered as day 366.
    day_of_year = local.day_of_year
    if not is_leap(year + TM_YEAR_BASE) and day_of_year == 365:
        day_of_year -= 1

    local = replace(local, year=year, day_of_year=day_of_year)
    check_calendar(local)
    return local
