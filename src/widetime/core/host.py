"""
widetime.core.host
------------------
The local-time collaborator. Local decomposition hands a host-safe
epoch-seconds value to a host and trusts its zone and DST rules.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Protocol

from ..convert.gmtime import wide_gmtime
from .types import CalendarTime, TM_YEAR_BASE


class LocalTimeHost(Protocol):
    def localtime(self, seconds: int) -> CalendarTime: ...


def from_struct_time(st: time.struct_time) -> CalendarTime:
    """Re-base a `time.struct_time` (1-based month/yday, Monday = 0) into a CalendarTime."""
    return CalendarTime(
        second=st.tm_sec,
        minute=st.tm_min,
        hour=st.tm_hour,
        day_of_month=st.tm_mday,
        month=st.tm_mon - 1,
        year=st.tm_year - TM_YEAR_BASE,
        weekday=(st.tm_wday + 1) % 7,
        day_of_year=st.tm_yday - 1,
        is_dst=max(st.tm_isdst, 0),
        utc_offset=getattr(st, "tm_gmtoff", None),
        zone=getattr(st, "tm_zone", None),
    )


class SystemHost:
    """`time.localtime`, honoring the process TZ setting."""

    def localtime(self, seconds: int) -> CalendarTime:
        return from_struct_time(time.localtime(seconds))

    def __repr__(self) -> str:
        return "SystemHost()"


@dataclass(frozen=True)
class FixedOffsetHost:
    """A zone with a constant UTC offset and no DST."""
    offset: int = 0  # seconds east of UTC
    zone: str = "UTC"

    def __post_init__(self) -> None:
        if not (-86400 <= self.offset <= 86400):
            raise ValueError("offset must be within one day of UTC")

    def localtime(self, seconds: int) -> CalendarTime:
        cal = wide_gmtime(seconds + self.offset)
        return replace(cal, utc_offset=self.offset, zone=self.zone)
