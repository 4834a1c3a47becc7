# tests/test_localtime.py

import random
import time
from dataclasses import replace
from unittest.mock import Mock

import pytest

import widetime
from widetime import FixedOffsetHost, SystemHost, YearOverflowError, to_local_calendar, to_utc_calendar
from widetime.core.host import from_struct_time

YEAR_3000 = 32503680000  # 3000-01-01T00:00:00Z
JAN1_2101_0030 = 4133982600  # 2101-01-01T00:30:00Z
DEC31_2100_2330 = 4133979000  # 2100-12-31T23:30:00Z


@pytest.fixture
def tz(monkeypatch):
    """Set the process TZ for SystemHost; restored afterwards."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available")

    def set_tz(value):
        monkeypatch.setenv("TZ", value)
        time.tzset()

    yield set_tz
    monkeypatch.undo()
    time.tzset()

@pytest.fixture
def registered_host():
    yield
    widetime.set_host(None)

def _expected(t, host):
    return replace(to_utc_calendar(t + host.offset), utc_offset=host.offset, zone=host.zone)

def test_year_3000_utc_host():
    t = YEAR_3000 + 12 * 3600 + 34 * 60 + 56
    cal = to_local_calendar(t, host=FixedOffsetHost(0, "UTC"))
    assert cal.full_year == 3000
    assert (cal.month, cal.day_of_month, cal.hour, cal.minute, cal.second) == (0, 1, 12, 34, 56)
    assert cal.weekday == 3
    assert cal.day_of_year == 0
    assert cal.utc_offset == 0

def test_host_only_sees_32_bit_times():
    host = Mock(wraps=FixedOffsetHost(-18000, "EST"))
    to_local_calendar(YEAR_3000, host=host)
    (seconds,), _ = host.localtime.call_args
    assert -(2 ** 31) <= seconds < 2 ** 31

def test_local_negative_offset_rolls_back_a_year():
    host = FixedOffsetHost(-5 * 3600, "EST")
    cal = to_local_calendar(JAN1_2101_0030, host=host)
    assert cal.full_year == 2100
    assert (cal.month, cal.day_of_month, cal.hour, cal.minute) == (11, 31, 19, 30)
    assert cal.weekday == 5
    # 2100 is not a leap year even though the proxy year before 2033 is
    assert cal.day_of_year == 364
    assert cal == _expected(JAN1_2101_0030, host)

def test_local_positive_offset_rolls_forward_a_year():
    host = FixedOffsetHost(5 * 3600, "PKT")
    cal = to_local_calendar(DEC31_2100_2330, host=host)
    assert cal.full_year == 2101
    assert (cal.month, cal.day_of_month, cal.hour, cal.minute) == (0, 1, 4, 30)
    assert cal.weekday == 6
    assert cal.day_of_year == 0
    assert cal == _expected(DEC31_2100_2330, host)

@pytest.mark.parametrize("offset", [0, -18000, 19800, -43200, 50400, 3600])
def test_matches_shifted_utc(offset):
    """A fixed-offset zone is UTC shifted by the offset, folding or not."""
    host = FixedOffsetHost(offset, "X")
    random.seed(offset)
    for _ in range(2000):
        t = random.randint(0, 2 ** 37)  # up to about year 6325
        assert to_local_calendar(t, host=host) == _expected(t, host)
    for t in (2 ** 31 - 1, 2 ** 31, 2 ** 31 + 86400 * 365):
        assert to_local_calendar(t, host=host) == _expected(t, host)

def test_year_boundaries_across_centuries():
    for offset in (-36000, 36000):
        host = FixedOffsetHost(offset, "X")
        for year in (2038, 2099, 2100, 2101, 2199, 2200, 2300, 2400, 2401, 3000):
            jan1 = widetime.to_seconds(replace(to_utc_calendar(0), year=year - 1900))
            for t in (jan1 - 1800, jan1, jan1 + 1800):
                assert to_local_calendar(t, host=host) == _expected(t, host)

def test_overflow_propagates():
    with pytest.raises(YearOverflowError):
        to_local_calendar(2 ** 62, host=FixedOffsetHost())

def test_registered_host(registered_host):
    widetime.set_host(FixedOffsetHost(3600, "CET"))
    cal = to_local_calendar(0)
    assert (cal.hour, cal.zone, cal.utc_offset) == (1, "CET", 3600)

    widetime.set_host(None)
    assert isinstance(widetime.get_host(), SystemHost)

def test_fixed_offset_bounds():
    with pytest.raises(ValueError):
        FixedOffsetHost(90000)

def test_from_struct_time():
    st = time.struct_time((2024, 3, 1, 12, 0, 0, 4, 61, 0))
    cal = from_struct_time(st)
    assert (cal.full_year, cal.month, cal.day_of_month) == (2024, 2, 1)
    assert cal.weekday == 5  # Friday
    assert cal.day_of_year == 60

def test_system_host_utc(tz):
    tz("UTC0")
    t = YEAR_3000 + 7 * 3600
    cal = to_local_calendar(t, host=SystemHost())
    assert cal.full_year == 3000
    assert (cal.month, cal.day_of_month, cal.hour) == (0, 1, 7)
    assert cal.utc_offset == 0

def test_system_host_negative_offset(tz):
    tz("EST+5")
    cal = to_local_calendar(JAN1_2101_0030, host=SystemHost())
    assert cal.full_year == 2100
    assert (cal.month, cal.day_of_month, cal.hour, cal.minute) == (11, 31, 19, 30)
    assert cal.day_of_year == 364
    assert cal.utc_offset == -18000
    assert cal.zone == "EST"

def test_system_host_in_range_matches_time_localtime(tz):
    tz("EST+5")
    t = 1700000000
    cal = to_local_calendar(t, host=SystemHost())
    st = time.localtime(t)
    assert (cal.full_year, cal.month + 1, cal.day_of_month, cal.hour) == (st.tm_year, st.tm_mon, st.tm_mday, st.tm_hour)
