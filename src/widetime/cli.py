from __future__ import annotations

import argparse
import sys
import re
import importlib
import inspect


_SECONDS_RE = re.compile(r"^-?\d+$")

_WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_calendar(seconds: int, cal) -> None:
    print(f"seconds     = {seconds}")
    print(
        f"date        = {cal.full_year}-{cal.month + 1:02d}-{cal.day_of_month:02d} "
        f"{cal.hour:02d}:{cal.minute:02d}:{cal.second:02d}"
    )
    print(f"weekday     = {cal.weekday} ({_WEEKDAYS[cal.weekday]})")
    print(f"day_of_year = {cal.day_of_year}")
    print(f"is_dst      = {cal.is_dst}")
    print(f"utc_offset  = {cal.utc_offset}")
    print(f"zone        = {cal.zone}")


def cmd_gmtime(argv: list[str]) -> int:
    import widetime

    p = argparse.ArgumentParser(prog="widetime gmtime", description="Epoch seconds -> UTC calendar time")
    p.add_argument("seconds", type=int, help="seconds since 1970-01-01T00:00:00 UTC")
    args = p.parse_args(argv)

    try:
        cal = widetime.to_utc_calendar(args.seconds)
    except widetime.YearOverflowError as e:
        raise SystemExit(str(e)) from e
    _print_calendar(args.seconds, cal)
    return 0


def cmd_localtime(argv: list[str]) -> int:
    import widetime

    p = argparse.ArgumentParser(prog="widetime localtime", description="Epoch seconds -> local calendar time")
    p.add_argument("seconds", type=int, help="seconds since 1970-01-01T00:00:00 UTC")
    p.add_argument("--utc-offset", type=int, default=None,
                   help="fixed zone offset in seconds east of UTC (default: system zone)")
    p.add_argument("--zone", default="LOCAL", help="zone label used with --utc-offset")
    args = p.parse_args(argv)

    host = None
    if args.utc_offset is not None:
        host = widetime.FixedOffsetHost(args.utc_offset, args.zone)

    try:
        cal = widetime.to_local_calendar(args.seconds, host=host)
    except widetime.YearOverflowError as e:
        raise SystemExit(str(e)) from e
    _print_calendar(args.seconds, cal)
    return 0


def cmd_safe_year(argv: list[str]) -> int:
    from widetime.convert.safe_year import safe_year, safe_year_index

    p = argparse.ArgumentParser(prog="widetime safe-year", description="Anchor year (2010-2037) for a year >= 2001")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    if args.year < 2001:
        raise SystemExit("year must be >= 2001")
    print(f"year        = {args.year}")
    print(f"index       = {safe_year_index(args.year)}")
    print(f"safe_year   = {safe_year(args.year)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `widetime SECONDS`
    if argv and _SECONDS_RE.match(argv[0]):
        return cmd_gmtime(argv)

    p = argparse.ArgumentParser(prog="widetime", description="64-bit-safe gmtime/localtime CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("gmtime", help="Epoch seconds -> UTC calendar time")
    sub.add_parser("localtime", help="Epoch seconds -> local calendar time")
    sub.add_parser("safe-year", help="Anchor year used when folding far-future years")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "safe-years", "cross-check", "safe-year-plot"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "gmtime":
        return cmd_gmtime(rest)

    if args.cmd == "localtime":
        return cmd_localtime(rest)

    if args.cmd == "safe-year":
        return cmd_safe_year(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "widetime.diagnostics.round_trip",
            "safe-years": "widetime.diagnostics.safe_years",
            "cross-check": "widetime.diagnostics.cross_check",
            "safe-year-plot": "widetime.diagnostics.safe_year_plot",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
