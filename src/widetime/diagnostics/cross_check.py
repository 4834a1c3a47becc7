#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import Dict

from widetime.convert.gmtime import wide_gmtime
from widetime.core.types import TM_YEAR_BASE

SECONDS_PER_YEAR = 31556952


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "widetime[diagnostics]"') from e


def numpy_fields(np, seconds) -> Dict[str, "np.ndarray"]:
    """
    Calendar fields of int64 epoch seconds via datetime64 unit casts.
    Casting to a coarser unit floors, so negative inputs land on the earlier day.
    """
    s = np.asarray(seconds, dtype=np.int64).astype("datetime64[s]")
    D = s.astype("datetime64[D]")
    M = s.astype("datetime64[M]")
    Y = s.astype("datetime64[Y]")

    sod = (s - D.astype("datetime64[s]")).astype(np.int64)
    return {
        "year": Y.astype(np.int64) + 1970 - TM_YEAR_BASE,
        "month": M.astype(np.int64) - Y.astype("datetime64[M]").astype(np.int64),
        "day_of_month": (D - M.astype("datetime64[D]")).astype(np.int64) + 1,
        "day_of_year": (D - Y.astype("datetime64[D]")).astype(np.int64),
        "weekday": (D.astype(np.int64) + 4) % 7,
        "hour": sod // 3600,
        "minute": (sod // 60) % 60,
        "second": sod % 60,
    }


def cross_check(np, seconds, *, max_failures: int = 5) -> int:
    ref = numpy_fields(np, seconds)
    failures = 0
    for i, t in enumerate(seconds):
        cal = wide_gmtime(int(t))
        diff = {k: (getattr(cal, k), int(v[i])) for k, v in ref.items() if getattr(cal, k) != int(v[i])}
        if diff:
            failures += 1
            print(f"\nFAIL t={int(t)}")
            for k, (ours, theirs) in diff.items():
                print(f"  {k}: widetime={ours} numpy={theirs}")
            if failures >= max_failures:
                break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Compare wide_gmtime with numpy datetime64 calendar arithmetic.")
    p.add_argument("--N", type=int, default=20000, help="Number of random samples.")
    p.add_argument("--years", type=int, default=100_000,
                   help="Sample seconds within +/- this many years of the epoch.")
    p.add_argument("--seed", type=int, default=7)
    p.add_argument("--max-failures", type=int, default=5)
    args = p.parse_args(argv)

    np = _need_numpy()

    span = args.years * SECONDS_PER_YEAR
    rng = np.random.default_rng(args.seed)
    seconds = rng.integers(-span, span, size=args.N, dtype=np.int64, endpoint=True)

    failures = cross_check(np, seconds, max_failures=args.max_failures)
    if failures == 0:
        print(f"{args.N} samples agree with numpy datetime64.")
        return 0

    print(f"Mismatches: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
