# tests/test_solar.py

import logging
import math

import pytest

from astrochron.core.errors import ConvergenceError
from astrochron.core.types import CalendarDate, Equinox, Month, Solstice
from astrochron.reference import solar


@pytest.fixture
def oct_13_1992(no_delta_t):
    return CalendarDate(1992, Month.OCTOBER, 13.0)


def test_meeus_example_25b_sun(oct_13_1992):
    """
    1992 October 13.0 TD.
    Targets (VSOP87): Θ ≈ 199.9073°, λ ≈ 199.9061°, R = 0.99760775 AU.
    Two-body orbits miss the planetary perturbations, a few arcseconds here.
    """
    d = oct_13_1992
    true = solar.sun_true_position(d)
    app = solar.sun_apparent_position(d)

    assert math.degrees(true.longitude) == pytest.approx(199.9073, abs=0.02)
    assert math.degrees(app.longitude) == pytest.approx(199.9061, abs=0.02)
    assert abs(math.degrees(true.latitude)) < 1e-3
    assert solar.sun_distance_to_earth(d) == pytest.approx(0.99760775, abs=2e-4)


def test_apparent_minus_true_is_nutation_and_aberration(oct_13_1992):
    d = oct_13_1992
    diff = solar.sun_apparent_position(d).longitude - solar.sun_true_position(d).longitude
    # Δψ = +15.908", -20.4955"/R = -20.545"
    assert math.degrees(diff) * 3600.0 == pytest.approx(15.908 - 20.545, abs=0.05)


def test_vernal_equinox_2000():
    """2000 March 20, 07h35m UT."""
    d = solar.equinox(2000, Equinox.VERNAL)
    assert (d.year, d.month) == (2000, Month.MARCH)
    assert d.day == pytest.approx(20.0 + (7.0 + 35.0 / 60.0) / 24.0, abs=0.05)


def test_meeus_example_27a_june_solstice_1962():
    """JDE 2437837.39245, i.e. 1962 June 21.892 TD; ΔT is about half a minute."""
    d = solar.solstice(1962, Solstice.SUMMER)
    assert (d.year, d.month) == (1962, Month.JUNE)
    assert d.day == pytest.approx(21.8921, abs=0.05)


@pytest.mark.parametrize("year", [1900, 1987, 2024, 2100])
def test_seasons_are_in_order(year):
    dates = [
        solar.equinox(year, Equinox.VERNAL),
        solar.solstice(year, Solstice.SUMMER),
        solar.equinox(year, Equinox.AUTUMNAL),
        solar.solstice(year, Solstice.WINTER),
    ]
    assert [d.month for d in dates] == [Month.MARCH, Month.JUNE, Month.SEPTEMBER, Month.DECEMBER]
    for d in dates:
        assert 19.0 <= d.day < 24.0


def test_season_apparent_longitude_is_multiple_of_90():
    d = solar.equinox(2010, Equinox.AUTUMNAL)
    lam = solar.sun_apparent_position(d).longitude
    assert math.degrees(lam) == pytest.approx(180.0, abs=1e-5)


def test_wrong_enumerator_gives_sentinel():
    assert solar.equinox(2000, Solstice.SUMMER) == CalendarDate(2000, Month.UNKNOWN, -1.0)
    assert solar.solstice(2000, Equinox.VERNAL) == CalendarDate(2000, Month.UNKNOWN, -1.0)


def test_season_iteration_cap(monkeypatch):
    monkeypatch.setattr(solar, "SEASON_MAX_ITERATIONS", 1)
    with pytest.raises(ConvergenceError) as exc:
        solar.equinox(2000, Equinox.VERNAL)
    assert exc.value.solver == "equinox/solstice"


def test_season_convergence_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="astrochron.reference.solar"):
        solar.solstice(2000, Solstice.WINTER)
    assert "converged" in caplog.text


def test_meeus_example_28a_equation_of_time(oct_13_1992):
    """E = +13m42.6s"""
    d = oct_13_1992
    assert solar.equation_of_time_minutes(d) == pytest.approx(13.71, abs=0.1)
    assert solar.equation_of_time(d) == pytest.approx(13.71 / 60.0, abs=0.002)


def test_equation_of_time_negative_values_wrap_near_24h():
    # mid February the Sun is about 14 minutes slow
    d = CalendarDate(2020, Month.FEBRUARY, 11.5)
    minutes = solar.equation_of_time_minutes(d)
    assert minutes == pytest.approx(-14.2, abs=0.3)
    assert solar.equation_of_time(d) == pytest.approx(24.0 + minutes / 60.0, abs=1e-9)
