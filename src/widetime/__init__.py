"""widetime public API.

64-bit-safe gmtime/localtime: seconds since the epoch <-> broken-down
calendar time, for any year that fits the year field.
"""

from .api import (
    to_utc_calendar,
    to_local_calendar,
    to_seconds,
    set_host,
    get_host,
)
from .convert.safe_year import safe_year
from .core.errors import WideTimeError, YearOverflowError
from .core.host import FixedOffsetHost, LocalTimeHost, SystemHost
from .core.time import cycle_offset, is_exception_century, is_leap
from .core.types import CalendarTime

__all__ = [
    "to_utc_calendar",
    "to_local_calendar",
    "to_seconds",
    "set_host",
    "get_host",
    "safe_year",
    "is_leap",
    "is_exception_century",
    "cycle_offset",
    "CalendarTime",
    "LocalTimeHost",
    "SystemHost",
    "FixedOffsetHost",
    "WideTimeError",
    "YearOverflowError",
]
