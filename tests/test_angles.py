# tests/test_angles.py

import math
import random

import pytest

from astrochron.reference import angles


def test_normalize_and_wrap():
    assert angles.normalize(-0.5) == pytest.approx(angles.TWO_PI - 0.5)
    assert angles.normalize(7.0) == pytest.approx(7.0 - angles.TWO_PI)
    assert 0.0 <= angles.normalize(-1e-18) < angles.TWO_PI
    assert angles.wrap_pi(math.pi + 0.1) == pytest.approx(-math.pi + 0.1)
    assert angles.wrap_hours(-1.0) == 23.0


def test_sexagesimal():
    assert math.degrees(angles.dms(23, 26, 21.448)) == pytest.approx(23.43929111, abs=1e-8)
    # sign of the degrees applies to the whole angle, including -0
    assert angles.dms(-0.0, 34.0) == pytest.approx(-math.radians(34.0 / 60.0))
    assert angles.dms(-15, 46, 15.9) == pytest.approx(-math.radians(15 + 46 / 60 + 15.9 / 3600))
    assert angles.hms(12) == pytest.approx(math.pi)
    assert angles.rad_to_arcsec(angles.arcsec_to_rad(1.0)) == pytest.approx(1.0)


def test_poly_horner():
    assert angles.poly(2.0, (1.0, 2.0, 3.0)) == 17.0
    assert angles.poly(5.0, ()) == 0.0


def test_spherical_round_trip():
    random.seed(42)
    for _ in range(100):
        lon = random.uniform(0.0, angles.TWO_PI)
        lat = random.uniform(-1.5, 1.5)
        r = random.uniform(0.1, 40.0)
        back = angles.rectangular_to_spherical(angles.spherical_to_rectangular(lon, lat, r))
        assert back == pytest.approx((lon, lat, r), abs=1e-12)
