# tests/test_validate_theory.py

import math

import pytest

from astrochron.core.types import Planet, SphericalPoint
from astrochron.diagnostics import validate_theory as vt


class _Planetary:
    def __init__(self, lon, r):
        self.lon, self.r = lon, r

    def heliocentric_position(self, tau, planet):
        return SphericalPoint(self.lon, 0.0, self.r)


class _Lunar:
    def __init__(self, lon):
        self.lon = lon

    def geocentric_position(self, T):
        return SphericalPoint(self.lon, 10.0, 384400.0)


def test_residuals_wrap_longitude():
    eps = 1e-6
    out = vt.residuals(_Planetary(eps, 1.0), _Planetary(2.0 * math.pi - eps, 1.5), Planet.MARS, [2451545.0, 2451600.0])
    assert len(out) == 2
    dlon, dlat, dr = out[0]
    assert dlon == pytest.approx(2.0 * eps * 206264.806, rel=1e-6)
    assert dlat == 0.0
    assert dr == pytest.approx(-0.5)


def test_lunar_residuals_in_arcseconds():
    out = vt.lunar_residuals(_Lunar(1295999.0), _Lunar(1.0), [2451545.0])
    assert out == [(-2.0, 0.0, 0.0)]


def test_range_outside_de421():
    pytest.importorskip("numpy")
    with pytest.raises(ValueError):
        vt.main(["--year-start", "2300", "--year-end", "2400"])
