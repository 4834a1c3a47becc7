from __future__ import annotations

from typing import Optional

from .core.host import LocalTimeHost, SystemHost
from .core.types import CalendarTime
from .convert.gmtime import timegm, wide_gmtime
from .convert.localtime import wide_localtime

_host: Optional[LocalTimeHost] = None

def set_host(host: Optional[LocalTimeHost]) -> None:
    """Register the process-wide local-time host. None restores the system host."""
    global _host
    _host = host

def get_host() -> LocalTimeHost:
    global _host
    if _host is None:
        _host = SystemHost()
    return _host

def to_utc_calendar(seconds: int) -> CalendarTime:
    return wide_gmtime(seconds)

def to_local_calendar(seconds: int, *, host: Optional[LocalTimeHost] = None) -> CalendarTime:
    """
    Local calendar time for `seconds`, using `host` or the registered one.

    The system host delegates to time.localtime, which reads process-wide
    zone state; callers sharing it across threads serialize their own calls.
    """
    return wide_localtime(seconds, host if host is not None else get_host())

def to_seconds(cal: CalendarTime) -> int:
    """Inverse of to_utc_calendar. Offset and zone fields are ignored."""
    return timegm(cal)
