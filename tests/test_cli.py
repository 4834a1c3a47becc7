# tests/test_cli.py

import pytest

from widetime import cli


def test_seconds_shortcut(capsys):
    assert cli.main(["0"]) == 0
    out = capsys.readouterr().out
    assert "1970-01-01 00:00:00" in out
    assert "(Thu)" in out

def test_gmtime_negative(capsys):
    assert cli.main(["gmtime", "-1"]) == 0
    assert "1969-12-31 23:59:59" in capsys.readouterr().out

def test_gmtime_overflow():
    with pytest.raises(SystemExit):
        cli.main(["gmtime", str(2 ** 62)])

def test_localtime_fixed_offset(capsys):
    assert cli.cmd_localtime(["4133982600", "--utc-offset", "-18000", "--zone", "EST"]) == 0
    out = capsys.readouterr().out
    assert "2100-12-31 19:30:00" in out
    assert "day_of_year = 364" in out
    assert "zone        = EST" in out

def test_safe_year(capsys):
    assert cli.main(["safe-year", "3000"]) == 0
    assert "safe_year   = 2031" in capsys.readouterr().out

def test_safe_year_rejects_early_years():
    with pytest.raises(SystemExit):
        cli.main(["safe-year", "1999"])

def test_diag_safe_years(capsys):
    assert cli.main(["diag", "safe-years", "--from-year", "2095", "--to-year", "2105"]) == 0
    assert "Mismatches: 0" in capsys.readouterr().out

def test_diag_round_trip(capsys):
    assert cli.main(["diag", "round-trip", "--N", "300"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out
