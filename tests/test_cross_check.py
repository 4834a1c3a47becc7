# tests/test_cross_check.py

import pytest

np = pytest.importorskip("numpy")

from widetime.diagnostics import cross_check as cc


def test_agrees_with_datetime64():
    rng = np.random.default_rng(2024)
    span = 50_000 * cc.SECONDS_PER_YEAR
    seconds = rng.integers(-span, span, size=3000, dtype=np.int64, endpoint=True)
    assert cc.cross_check(np, seconds) == 0

def test_epoch_edges():
    seconds = np.array([-86401, -86400, -1, 0, 1, 86399, 86400, 951782400, 4107542400], dtype=np.int64)
    assert cc.cross_check(np, seconds) == 0

def test_main(capsys):
    assert cc.main(["--N", "500", "--years", "1000"]) == 0
    assert "agree" in capsys.readouterr().out
