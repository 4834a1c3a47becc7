#!/usr/bin/env python3
from __future__ import annotations

import argparse

from widetime.convert.safe_year import safe_year
from widetime.core.time import is_exception_century, is_leap


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "widetime[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "widetime[diagnostics]"') from e


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot the anchor year chosen for each year.")
    p.add_argument("--y0", type=int, default=2038, help="start year")
    p.add_argument("--y1", type=int, default=2438, help="end year")
    p.add_argument("--out", default="safe_years.png", help="output image filename")
    args = p.parse_args(argv)

    if args.y0 < 2001:
        raise SystemExit("--y0 must be >= 2001")
    if args.y1 < args.y0:
        raise SystemExit("--y1 must be >= --y0")

    np = _need_numpy()
    plt = _need_matplotlib()

    ys = np.arange(args.y0, args.y1 + 1, dtype=int)
    safe = np.array([safe_year(int(y)) for y in ys], dtype=int)
    leap = np.array([is_leap(int(y)) for y in ys], dtype=bool)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.scatter(ys[~leap], safe[~leap], s=10, color="0.35", label="common year")
    ax.scatter(ys[leap], safe[leap], s=14, marker="s", color="tab:blue", label="leap year")

    for y in ys:
        if is_exception_century(int(y)):
            ax.axvline(int(y), color="tab:red", linewidth=1, alpha=0.6)

    ax.set_title("Anchor year used for local-time folding")
    ax.set_xlabel("Year")
    ax.set_ylabel("Anchor year")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
