# tests/test_cli.py

import pytest

from astrochron import cli


def test_easter(capsys):
    assert cli.main(["easter", "2000"]) == 0
    assert capsys.readouterr().out.strip() == "2000 April 23"


def test_jd(capsys):
    assert cli.main(["jd", "2000-01-01T12:00"]) == 0
    out = capsys.readouterr().out
    assert "JD         = 2451545.000000" in out
    assert "Saturday" in out
    assert "Day of year= 1" in out


def test_jd_invalid_date(capsys):
    assert cli.main(["jd", "1582-10-10"]) == 2
    assert "invalid date" in capsys.readouterr().out


def test_bad_date_format():
    with pytest.raises(SystemExit):
        cli.main(["sun", "10/13/1992"])


def test_seasons(capsys):
    assert cli.main(["seasons", "2000"]) == 0
    out = capsys.readouterr().out
    assert "March equinox      2000-03-20" in out
    assert "December solstice  2000-12-21" in out


def test_sun_and_moon(capsys):
    assert cli.main(["sun", "1992-10-13"]) == 0
    assert "Equation of time  = +13." in capsys.readouterr().out

    assert cli.main(["moon", "1992-04-12", "--lunar-theory", "meeus"]) == 0
    assert "Illuminated       = 0.67" in capsys.readouterr().out


def test_planet(capsys):
    assert cli.main(["planet", "venus", "1992-12-20"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Venus at 1992-12-20 00:00 UT")
    assert "Magnitude         = -4.2" in out


def test_unknown_planet():
    with pytest.raises(SystemExit):
        cli.main(["planet", "pluto", "2000-01-01"])


def test_rise_circumpolar_sun(capsys):
    assert cli.main(["rise", "2000-06-21", "--lat", "80", "--lon", "-20", "--body", "sun"]) == 0
    out = capsys.readouterr().out
    assert "Rising  = never" in out
    assert "Setting = never" in out


def test_rise_moon(capsys):
    assert cli.main(["rise", "2024-03-10", "--lat", "47.9", "--lon", "106.9", "--body", "moon"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Moon on 2024-03-10")
    assert "never" not in out


def test_list_theories(capsys, fresh_registry):
    assert cli.main(["--list-theories"]) == 0
    out = capsys.readouterr().out
    assert "planetary  jpl kepler*" in out
    assert "delaunay   iers*" in out


def test_theory_option(capsys, fresh_registry):
    assert cli.main(["--theory", "kepler", "easter", "1991"]) == 0
    assert capsys.readouterr().out.strip() == "1991 March 31"


def test_no_command(capsys):
    assert cli.main([]) == 1
    assert "usage" in capsys.readouterr().out
