# tests/test_cli.py

import json
import pytest

from caldate.cli import main


def test_date_shorthand(capsys):
    assert main(["2017-07-05", "--hour", "18"]) == 0
    out = capsys.readouterr().out
    assert "Thursday, 12 Tammuz 5777" in out
    assert "(hour 0, part 0)" in out


def test_hebrew_json(capsys):
    assert main(["hebrew", "2017-07-05", "--hour", "18", "--json"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    identifier, payload, _ = json.loads(lines[-1])
    assert identifier == "עברי"
    assert json.loads(payload) == [5777, "10", 12, 0, 0]


def test_gregorian_by_month_name(capsys):
    assert main(["gregorian", "5751", "Iyar", "4", "--hour", "6"]) == 0
    assert "Thursday, 18 April 1991  00:00:00" in capsys.readouterr().out


def test_gregorian_by_ordinal_in_leap_year(capsys):
    # ordinal 7 in a leap year is Adar II
    assert main(["gregorian", "5784", "7", "1"]) == 0
    assert "Sunday, 10 March 2024  18:00:00" in capsys.readouterr().out


def test_gregorian_unknown_month():
    with pytest.raises(SystemExit):
        main(["gregorian", "5784", "Thermidor", "1"])


def test_year(capsys):
    assert main(["year", "5784"]) == 0
    out = capsys.readouterr().out
    assert "Year 5784: leap, 383 days (Deficient)" in out
    assert "Rosh Hashanah: Saturday, 16 September 2023" in out
    assert "Adar I " in out
    assert "Adar II" in out


def test_new_years(capsys):
    assert main(["new-years", "--from-year", "5784", "--to-year", "5786", "--list-rule", "lo ADU rosh"]) == 0
    out = capsys.readouterr().out
    assert "2023-09-16" in out
    assert "2024-10-03" in out
    assert "2025-09-23" in out


def test_pretty_month(capsys):
    assert main(["pretty-month", "--hebrew", "5785", "7", "--greg", "2025", "4"]) == 0
    out = capsys.readouterr().out
    assert "Hebrew month  Nisan 5785" in out
    assert "Gregorian month  2025-04" in out
    assert "Su     Mo" in out


def test_missing_command():
    with pytest.raises(SystemExit):
        main([])
