from __future__ import annotations

import argparse
import random

from widetime.convert.gmtime import timegm, wide_gmtime

SECONDS_PER_YEAR = 31556952  # mean Gregorian year


def roundtrip_test(
    N: int,
    lo: int,
    hi: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        t0 = random.randint(lo, hi)
        cal = wide_gmtime(t0)
        back = timegm(cal)
        if back != t0:
            failures += 1
            print("\nFAIL")
            print("t0:", t0)
            print("cal:", cal)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: seconds -> UTC calendar -> seconds.")
    p.add_argument("--N", type=int, default=20000, help="Number of trials.")
    p.add_argument("--years", type=int, default=1_000_000,
                   help="Sample seconds within +/- this many years of the epoch.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.years <= 0:
        raise SystemExit("--years must be positive")

    span = args.years * SECONDS_PER_YEAR
    print(f"Testing {args.N} values in [-{span}, {span}] ...")
    failures = roundtrip_test(args.N, -span, span, args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
