# reference/earth.py

"""
Effects of the Earth's motion and figure on observed positions:
precession, nutation, obliquity, annual aberration and distances on the
reference ellipsoid (Meeus ch. 11, 21-23).
"""

from __future__ import annotations

import math
from typing import Tuple

from astrochron import api
from astrochron.core.types import CalendarDate, EclipticPoint, GeographicPoint, Planet

from .angles import ARCSEC_TO_RAD, arcsec_to_rad, normalize, poly
from .calendar import julian_date
from .nutation_table import NUTATION_TERMS
from .orbital import orbital_elements
from .time_scales import J2000, DAYS_IN_JULIAN_CENTURY, julian_centuries


EARTH_EQUATORIAL_RADIUS = 6378.14      # km
EARTH_POLAR_RADIUS = 6356.755          # km
EARTH_FLATTENING = 0.00335281
ASTRONOMICAL_UNIT = 149597871.0        # km
ABERRATION_CONSTANT = 20.49552         # arcsec

# ε0 = 23°26'21.448" - 46.8150"T - 0.00059"T^2 + 0.001813"T^3 (IAU 1976)
_MEAN_OBLIQUITY = (84381.448, -46.8150, -0.00059, 0.001813)

# longitude of the Moon's mean ascending node (arcsec)
_LUNAR_NODE = (450160.28, -6962890.539, 7.455, 0.008)

# nutation coefficients are in 0.0001"
_NUTATION_UNIT = 1e-4 * ARCSEC_TO_RAD


def geodesic_distance(p1: GeographicPoint, p2: GeographicPoint) -> float:
    """Distance in km between two points on the ellipsoid (Andoyer-Lambert, Meeus 11)."""
    F = (p1.latitude + p2.latitude) / 2.0
    G = (p1.latitude - p2.latitude) / 2.0
    lam = (p1.longitude - p2.longitude) / 2.0

    sG, cG = math.sin(G) ** 2, math.cos(G) ** 2
    sF, cF = math.sin(F) ** 2, math.cos(F) ** 2
    sl, cl = math.sin(lam) ** 2, math.cos(lam) ** 2

    S = sG * cl + cF * sl
    C = cG * cl + sF * sl
    omega = math.atan(math.sqrt(S / C)) if C > 0.0 else math.pi / 2.0
    if omega == 0.0:
        return 0.0

    R = math.sqrt(S * C) / omega
    D = 2.0 * omega * EARTH_EQUATORIAL_RADIUS
    H1 = (3.0 * R - 1.0) / (2.0 * C)
    H2 = (3.0 * R + 1.0) / (2.0 * S)

    f = EARTH_FLATTENING
    return D * (1.0 + f * H1 * sF * cG - f * H2 * cF * sG)


def precession(p: EclipticPoint, jd0: float, jd: float) -> EclipticPoint:
    """Rigorous reduction of ecliptic coordinates from epoch jd0 to epoch jd (Meeus 21.5-21.7)."""
    T = (jd0 - J2000) / DAYS_IN_JULIAN_CENTURY
    t = (jd - jd0) / DAYS_IN_JULIAN_CENTURY

    eta = arcsec_to_rad(
        (47.0029 - 0.06603 * T + 0.000598 * T * T) * t
        + (-0.03302 + 0.000598 * T) * t * t
        + 0.000060 * t * t * t
    )
    pi_ = arcsec_to_rad(
        629554.9824 + 3289.4789 * T + 0.60622 * T * T
        - (869.8089 + 0.50491 * T) * t
        + 0.03536 * t * t
    )
    p_a = arcsec_to_rad(
        (5029.0966 + 2.22226 * T - 0.000042 * T * T) * t
        + (1.11113 - 0.000042 * T) * t * t
        - 0.000006 * t * t * t
    )

    cb, sb = math.cos(p.latitude), math.sin(p.latitude)
    ce, se = math.cos(eta), math.sin(eta)
    A = ce * cb * math.sin(pi_ - p.longitude) - se * sb
    B = cb * math.cos(pi_ - p.longitude)
    C = ce * sb + se * cb * math.sin(pi_ - p.longitude)

    return EclipticPoint(normalize(p_a + pi_ - math.atan2(A, B)), math.asin(C))


def _nutation(d: CalendarDate, theory) -> Tuple[float, float]:
    T = julian_centuries(julian_date(d))
    l, lp, F, D = api.delaunay_arguments(theory).arguments(T)
    node = poly(T, _LUNAR_NODE)

    dpsi = 0.0
    deps = 0.0
    for (i1, i2, i3, i4, i5), (_period, a, b, c, e) in NUTATION_TERMS:
        arg = (i1 * l + i2 * lp + i3 * F + i4 * D + i5 * node) * ARCSEC_TO_RAD
        dpsi += (a + b * T) * math.sin(arg)
        deps += (c + e * T) * math.cos(arg)
    return dpsi * _NUTATION_UNIT, deps * _NUTATION_UNIT


def nutation_in_longitude(d: CalendarDate, *, theory=None) -> float:
    """Δψ in radians; `theory` selects the Delaunay arguments."""
    return _nutation(d, theory)[0]


def nutation_in_obliquity(d: CalendarDate, *, theory=None) -> float:
    """Δε in radians; `theory` selects the Delaunay arguments."""
    return _nutation(d, theory)[1]


def mean_obliquity(T: float) -> float:
    """Mean obliquity of the ecliptic (radians), T in Julian centuries from J2000."""
    return arcsec_to_rad(poly(T, _MEAN_OBLIQUITY))


def obliquity_of_ecliptic(d: CalendarDate) -> float:
    return mean_obliquity(julian_centuries(julian_date(d)))


def true_obliquity_of_ecliptic(d: CalendarDate, *, theory=None) -> float:
    """ε = ε0 + Δε"""
    return obliquity_of_ecliptic(d) + nutation_in_obliquity(d, theory=theory)


def aberration(d: CalendarDate, p: EclipticPoint, *, theory=None) -> EclipticPoint:
    """
    Change of ecliptic coordinates due to annual aberration (Meeus 23.2).

    The result is a delta to be added to `p`; `theory` selects the planetary
    theory used for the Sun's true longitude.
    """
    from .solar import sun_true_position

    sun = sun_true_position(d, theory=theory)
    earth = orbital_elements(d, Planet.EARTH)
    e = earth.eccentricity
    perihelion = earth.perihelion_longitude
    k = arcsec_to_rad(ABERRATION_CONSTANT)

    dlon = -k * (math.cos(sun.longitude - p.longitude) - e * math.cos(perihelion - p.longitude)) / math.cos(p.latitude)
    dlat = -k * math.sin(p.latitude) * (math.sin(sun.longitude - p.longitude) - e * math.sin(perihelion - p.longitude))
    return EclipticPoint(dlon, dlat)


# ------------------------------------------------------------
# Precession matrix
# ------------------------------------------------------------

def _matmul(A, B):
    return tuple(
        tuple(sum(A[i][k] * B[k][j] for k in range(3)) for j in range(3))
        for i in range(3)
    )

# Rotation matrices (passive coordinate rotations)
def _rot_x(a):
    c, s = math.cos(a), math.sin(a)
    return ((1.0, 0.0, 0.0), (0.0, c, s), (0.0, -s, c))

def _rot_y(a):
    c, s = math.cos(a), math.sin(a)
    return ((c, 0.0, -s), (0.0, 1.0, 0.0), (s, 0.0, c))

def _rot_z(a):
    c, s = math.cos(a), math.sin(a)
    return ((c, s, 0.0), (-s, c, 0.0), (0.0, 0.0, 1.0))


def icrf_to_ecliptic_of_date(T: float) -> Tuple[Tuple[float, ...], ...]:
    """
    Rotation from the J2000 equator (ICRF) to the mean ecliptic and equinox
    of date: IAU 1976 precession angles ζ, z, θ followed by the mean obliquity.
    """
    zeta = arcsec_to_rad(2306.2181 * T + 0.30188 * T * T + 0.017998 * T * T * T)
    z = arcsec_to_rad(2306.2181 * T + 1.09468 * T * T + 0.018203 * T * T * T)
    theta = arcsec_to_rad(2004.3109 * T - 0.42665 * T * T - 0.041833 * T * T * T)

    eq_precession = _matmul(_rot_z(-z), _matmul(_rot_y(theta), _rot_z(-zeta)))
    return _matmul(_rot_x(mean_obliquity(T)), eq_precession)
