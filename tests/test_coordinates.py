# tests/test_coordinates.py

import math
import random

import pytest

from astrochron.core.types import CalendarDate, EclipticPoint, EquatorialPoint, GeographicPoint, Month
from astrochron.reference import coordinates
from astrochron.reference.angles import dms, hms


EPS_J2000 = dms(23, 26, 21.448)


def test_meeus_example_13a_pollux():
    """
    Pollux, J2000: α = 7h45m18.946s, δ = +28°01'34.26" with ε = 23.4392911°.
    Target: λ = 113.215630°, β = 6.684170°.
    """
    eq = EquatorialPoint(hms(7, 45, 18.946), dms(28, 1, 34.26))
    ecl = coordinates.equatorial_to_ecliptic(eq, EPS_J2000)

    assert math.degrees(ecl.longitude) == pytest.approx(113.215630, abs=2e-6)
    assert math.degrees(ecl.latitude) == pytest.approx(6.684170, abs=2e-6)

    back = coordinates.ecliptic_to_equatorial(ecl, EPS_J2000)
    assert back.right_ascension == pytest.approx(eq.right_ascension, abs=1e-12)
    assert back.declination == pytest.approx(eq.declination, abs=1e-12)


def test_ecliptic_equatorial_round_trip():
    random.seed(42)
    for _ in range(300):
        eps = random.uniform(-0.5, 0.5)
        p = EclipticPoint(random.uniform(0.0, 2.0 * math.pi), random.uniform(-1.0, 1.0))
        back = coordinates.equatorial_to_ecliptic(coordinates.ecliptic_to_equatorial(p, eps), eps)
        assert math.remainder(back.longitude - p.longitude, 2.0 * math.pi) == pytest.approx(0.0, abs=1e-10)
        assert back.latitude == pytest.approx(p.latitude, abs=1e-10)


def test_meeus_example_13b_venus_horizontal():
    """
    Venus from the US Naval Observatory on 1987 April 10, 19h21m UT.
    Meeus uses apparent sidereal time; mean sidereal time here shifts H by ~3.5".
    """
    d = CalendarDate(1987, Month.APRIL, 10.0 + (19.0 + 21.0 / 60.0) / 24.0)
    usno = GeographicPoint(dms(77, 3, 56), dms(38, 55, 17))
    venus = EquatorialPoint(hms(23, 9, 16.641), dms(-6, 43, 11.61))

    hz = coordinates.equatorial_to_horizontal(d, usno, venus)
    assert math.degrees(hz.azimuth) == pytest.approx(68.0337, abs=0.01)
    assert math.degrees(hz.elevation) == pytest.approx(15.1249, abs=0.01)


def test_horizontal_round_trip():
    random.seed(42)
    d = CalendarDate(2010, Month.MAY, 3.37)
    for _ in range(200):
        loc = GeographicPoint(random.uniform(-math.pi, math.pi), random.uniform(-1.3, 1.3))
        p = EquatorialPoint(random.uniform(0.0, 2.0 * math.pi), random.uniform(-1.3, 1.3))
        back = coordinates.horizontal_to_equatorial(d, loc, coordinates.equatorial_to_horizontal(d, loc, p))
        assert math.remainder(back.right_ascension - p.right_ascension, 2.0 * math.pi) == pytest.approx(0.0, abs=1e-7)
        assert back.declination == pytest.approx(p.declination, abs=1e-7)


def test_hour_angle_on_meridian_is_due_south():
    d = CalendarDate(2010, Month.MAY, 3.37)
    loc = GeographicPoint(0.3, math.radians(50.0))
    H0 = coordinates.local_hour_angle(d, loc, 0.0)
    p = EquatorialPoint(H0 % (2.0 * math.pi), math.radians(10.0))

    hz = coordinates.equatorial_to_horizontal(d, loc, p)
    assert math.remainder(hz.azimuth, 2.0 * math.pi) == pytest.approx(0.0, abs=1e-9)
    assert math.degrees(hz.elevation) == pytest.approx(50.0, abs=1e-9)
