# tests/test_earth.py

import math

import pytest

from astrochron.core.types import CalendarDate, EclipticPoint, GeographicPoint, Month
from astrochron.reference import earth, solar
from astrochron.reference.angles import dms, rad_to_arcsec
from astrochron.reference.calendar import julian_date


def test_meeus_example_22a_nutation_and_obliquity():
    """
    1987 April 10, 0h TD.
    Targets: Δψ = -3.788", Δε = +9.443", ε0 = 23°26'27.407", ε = 23°26'36.850".
    """
    d = CalendarDate(1987, Month.APRIL, 10.0)

    assert rad_to_arcsec(earth.nutation_in_longitude(d)) == pytest.approx(-3.788, abs=0.005)
    assert rad_to_arcsec(earth.nutation_in_obliquity(d)) == pytest.approx(9.443, abs=0.005)
    assert earth.obliquity_of_ecliptic(d) == pytest.approx(dms(23, 26, 27.407), abs=1e-8)
    assert earth.true_obliquity_of_ecliptic(d) == pytest.approx(dms(23, 26, 36.850), abs=5e-8)


def test_mean_obliquity_at_j2000():
    assert earth.mean_obliquity(0.0) == pytest.approx(dms(23, 26, 21.448), abs=1e-12)


def test_nutation_bounds():
    for year in range(1900, 2101, 7):
        d = CalendarDate(year, Month.MARCH, 1.0 + (year % 28))
        assert abs(rad_to_arcsec(earth.nutation_in_longitude(d))) < 20.5
        assert abs(rad_to_arcsec(earth.nutation_in_obliquity(d))) < 11.0


def test_nutation_theory_by_name():
    d = CalendarDate(1987, Month.APRIL, 10.0)
    assert earth.nutation_in_longitude(d, theory="iers") == earth.nutation_in_longitude(d)


def test_meeus_example_11c_geodesic_distance():
    """Paris to Washington: 6181.63 km. Longitudes count positive westward."""
    paris = GeographicPoint(dms(-2, 20, 14), dms(48, 50, 11))
    washington = GeographicPoint(dms(77, 3, 56), dms(38, 55, 17))

    assert earth.geodesic_distance(paris, washington) == pytest.approx(6181.63, abs=0.05)
    assert earth.geodesic_distance(washington, paris) == pytest.approx(6181.63, abs=0.05)


def test_geodesic_distance_coincident_points():
    p = GeographicPoint(0.5, 0.7)
    assert earth.geodesic_distance(p, p) == 0.0


def test_meeus_example_21c_ecliptic_precession():
    """Venus from J2000 to -214 June 30.0: λ = 118.704°, β = 1.615°."""
    p = EclipticPoint(math.radians(149.48194), math.radians(1.76549))
    jd = julian_date(CalendarDate(-214, Month.JUNE, 30.0))
    assert jd == pytest.approx(1643074.5)

    q = earth.precession(p, 2451545.0, jd)
    assert math.degrees(q.longitude) == pytest.approx(118.704, abs=1e-3)
    assert math.degrees(q.latitude) == pytest.approx(1.615, abs=1e-3)


def test_precession_rate_and_round_trip():
    p = EclipticPoint(0.0, 0.0)
    q = earth.precession(p, 2451545.0, 2451545.0 + 36525.0)
    assert math.degrees(q.longitude) == pytest.approx(1.397, abs=0.01)

    p = EclipticPoint(2.1, -0.3)
    back = earth.precession(earth.precession(p, 2451545.0, 2488070.0), 2488070.0, 2451545.0)
    assert back.longitude == pytest.approx(p.longitude, abs=1e-9)
    assert back.latitude == pytest.approx(p.latitude, abs=1e-9)


def test_aberration_at_the_sun_is_minus_kappa():
    d = CalendarDate(1992, Month.OCTOBER, 13.0)
    sun = solar.sun_true_position(d)
    ab = earth.aberration(d, EclipticPoint(sun.longitude, 0.0))

    assert rad_to_arcsec(ab.longitude) == pytest.approx(-20.4955, abs=0.5)
    assert ab.latitude == 0.0


def _transpose(M):
    return tuple(tuple(M[j][i] for j in range(3)) for i in range(3))


@pytest.mark.parametrize("T", [-1.0, -0.1, 0.0, 0.25, 1.0])
def test_icrf_to_ecliptic_of_date_is_a_rotation(T):
    M = earth.icrf_to_ecliptic_of_date(T)
    MMt = earth._matmul(M, _transpose(M))
    for i in range(3):
        for j in range(3):
            assert MMt[i][j] == pytest.approx(1.0 if i == j else 0.0, abs=1e-12)


def test_icrf_to_ecliptic_at_j2000_is_obliquity_rotation():
    M = earth.icrf_to_ecliptic_of_date(0.0)
    eps = earth.mean_obliquity(0.0)
    assert M[0] == pytest.approx((1.0, 0.0, 0.0), abs=1e-15)
    assert M[1] == pytest.approx((0.0, math.cos(eps), math.sin(eps)), abs=1e-15)
    assert M[2] == pytest.approx((0.0, -math.sin(eps), math.cos(eps)), abs=1e-15)


