from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

# `CalendarTime.year` counts from this base, as struct tm does.
TM_YEAR_BASE = 1900

# The year field models a C int.
YEAR_FIELD_MIN = -(2 ** 31)
YEAR_FIELD_MAX = 2 ** 31 - 1

# Last year the host's 32-bit local-time facility can be trusted with.
HOST_MAX_YEAR = 2037

@dataclass(frozen=True)
class CalendarTime:
    """Broken-down time, struct tm layout: 0-based month/yday, Sunday = 0."""
    second: int
    minute: int
    hour: int
    day_of_month: int
    month: int
    year: int  # years since 1900
    weekday: int
    day_of_year: int
    is_dst: int = 0
    utc_offset: Optional[int] = None  # seconds east of UTC
    zone: Optional[str] = None

    @property
    def full_year(self) -> int:
        return self.year + TM_YEAR_BASE
