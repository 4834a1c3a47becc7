from __future__ import annotations

import argparse
from typing import List, Tuple

from widetime.convert.gmtime import timegm, wide_gmtime
from widetime.convert.safe_year import safe_year
from widetime.core.time import is_exception_century, is_leap
from widetime.core.types import CalendarTime, TM_YEAR_BASE

WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def jan1_weekday(year: int) -> int:
    jan1 = CalendarTime(second=0, minute=0, hour=0, day_of_month=1, month=0,
                        year=year - TM_YEAR_BASE, weekday=0, day_of_year=0)
    return wide_gmtime(timegm(jan1)).weekday


def year_row(year: int) -> Tuple[int, int, bool, bool, int, int]:
    """(year, anchor, leap(year), leap(anchor), Jan-1 weekday of year, Jan-1 weekday of anchor)"""
    s = safe_year(year)
    return year, s, is_leap(year), is_leap(s), jan1_weekday(year), jan1_weekday(s)


def mismatches(from_year: int, to_year: int) -> List[int]:
    out = []
    for y in range(from_year, to_year + 1):
        _, _, ly, ls, wy, ws = year_row(y)
        if ly != ls or wy != ws:
            out.append(y)
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the anchor-year table used when folding far-future years."
    )
    p.add_argument("--from-year", type=int, default=2038)
    p.add_argument("--to-year", type=int, default=2120)
    p.add_argument("--only-centuries", action="store_true",
                   help="List only century years and the year after each.")
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y0 < 2001:
        raise SystemExit("--from-year must be >= 2001")
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Safe", "Leap", "SLeap", "Jan1", "SJan1", "Exc", "OK"]
    colw = [max(6, len(h)) for h in headers]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    bad = 0
    for Y in range(Y0, Y1 + 1):
        if args.only_centuries and Y % 100 not in (0, 1):
            continue
        y, s, ly, ls, wy, ws = year_row(Y)
        ok = ly == ls and wy == ws
        bad += not ok
        row = [str(y), str(s), "yes" if ly else "no", "yes" if ls else "no",
               WEEKDAYS[wy], WEEKDAYS[ws], "yes" if is_exception_century(y) else "", "ok" if ok else "BAD"]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    print(f"\nMismatches: {bad}")
    return 1 if bad else 0


if __name__ == "__main__":
    raise SystemExit(main())
