# reference/planets.py

"""
Geocentric ephemerides of the major planets from a heliocentric planetary
theory: true and apparent positions, distances, phase and magnitude
(Meeus ch. 32, 33, 41, 45).

Earth is a degenerate body here: its geocentric position is (0, 0), its
distances are 0, phase angle and illuminated fraction are -1 and its
magnitude is nan.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Tuple

from astrochron import api
from astrochron.core.errors import ConvergenceError
from astrochron.core.types import CalendarDate, EclipticPoint, Planet, SphericalPoint

from .angles import Vector, arcsec_to_rad, normalize, rectangular_to_spherical, spherical_to_rectangular, wrap_pi
from .calendar import julian_ephemeris_date
from .earth import aberration, nutation_in_longitude
from .time_scales import julian_centuries, julian_millennia

logger = logging.getLogger(__name__)

LIGHT_TIME_PER_AU = 0.0057755183    # days
LIGHT_TIME_TOLERANCE = 1e-7         # days
LIGHT_TIME_MAX_ITERATIONS = 50

_ORIGIN = EclipticPoint(0.0, 0.0)


def _heliocentric(jde: float, planet: Planet, theory) -> SphericalPoint:
    return api.planetary_theory(theory).heliocentric_position(julian_millennia(jde), planet)


def _rectangular(p: SphericalPoint) -> Vector:
    return spherical_to_rectangular(p.longitude, p.latitude, p.distance)


def _geocentric(planet: SphericalPoint, earth: SphericalPoint) -> Tuple[float, float, float]:
    """(longitude, latitude, distance) of the planet as seen from the Earth."""
    px, py, pz = _rectangular(planet)
    ex, ey, ez = _rectangular(earth)
    return rectangular_to_spherical((px - ex, py - ey, pz - ez))


def fk5_correction(lon: float, lat: float, T: float) -> EclipticPoint:
    """Correction from the VSOP dynamical ecliptic to FK5 (Meeus 32.3), as a delta."""
    lp = lon - math.radians(1.397 * T + 0.00031 * T * T)
    c, s = math.cos(lp), math.sin(lp)
    return EclipticPoint(
        arcsec_to_rad(-0.09033 + 0.03916 * (c + s) * math.tan(lat)),
        arcsec_to_rad(0.03916 * (c - s)),
    )


def light_time(jde: float, planet: Planet, earth: SphericalPoint, theory) -> Tuple[SphericalPoint, float]:
    """
    Heliocentric position of the planet at the moment it emitted the light
    seen at `jde`, and the light time τ in days.
    """
    tau = 0.0
    for i in range(1, LIGHT_TIME_MAX_ITERATIONS + 1):
        p = _heliocentric(jde - tau, planet, theory)
        tau_next = LIGHT_TIME_PER_AU * _geocentric(p, earth)[2]
        if abs(tau_next - tau) <= LIGHT_TIME_TOLERANCE:
            logger.debug("light time for %s converged after %d iterations: %.9f d", planet.name, i, tau_next)
            return p, tau_next
        tau = tau_next
    raise ConvergenceError("light-time", LIGHT_TIME_MAX_ITERATIONS, tau_next - tau)


def planet_true_position(d: CalendarDate, planet: Planet, *, theory=None) -> EclipticPoint:
    """Geometric geocentric position referred to the mean equinox of date (FK5)."""
    if planet is Planet.EARTH:
        return _ORIGIN
    jde = julian_ephemeris_date(d)
    lon, lat, _ = _geocentric(_heliocentric(jde, planet, theory), _heliocentric(jde, Planet.EARTH, theory))
    fk5 = fk5_correction(lon, lat, julian_centuries(jde))
    return EclipticPoint(normalize(lon + fk5.longitude), lat + fk5.latitude)


def planet_apparent_position(d: CalendarDate, planet: Planet, *, theory=None) -> EclipticPoint:
    """Light time, FK5, aberration and nutation in longitude applied."""
    if planet is Planet.EARTH:
        return _ORIGIN
    jde = julian_ephemeris_date(d)
    earth = _heliocentric(jde, Planet.EARTH, theory)
    p, _ = light_time(jde, planet, earth, theory)
    lon, lat, _ = _geocentric(p, earth)

    fk5 = fk5_correction(lon, lat, julian_centuries(jde))
    lon += fk5.longitude
    lat += fk5.latitude

    ab = aberration(d, EclipticPoint(lon, lat), theory=theory)
    lon += ab.longitude + nutation_in_longitude(d)
    lat += ab.latitude
    return EclipticPoint(normalize(lon), lat)


def planet_distance_to_sun(d: CalendarDate, planet: Planet, *, theory=None) -> float:
    """Heliocentric distance r in AU."""
    if planet is Planet.EARTH:
        return 0.0
    return _heliocentric(julian_ephemeris_date(d), planet, theory).distance


def planet_distance_to_earth(d: CalendarDate, planet: Planet, *, theory=None) -> float:
    """Geometric distance Δ in AU."""
    if planet is Planet.EARTH:
        return 0.0
    jde = julian_ephemeris_date(d)
    return _geocentric(_heliocentric(jde, planet, theory), _heliocentric(jde, Planet.EARTH, theory))[2]


def planet_phase_angle(d: CalendarDate, planet: Planet, *, theory=None) -> float:
    """cos i = (r² + Δ² - R²) / (2rΔ); -1 for the Earth."""
    if planet is Planet.EARTH:
        return -1.0
    jde = julian_ephemeris_date(d)
    earth = _heliocentric(jde, Planet.EARTH, theory)
    p = _heliocentric(jde, planet, theory)
    r, R = p.distance, earth.distance
    delta = _geocentric(p, earth)[2]
    c = (r * r + delta * delta - R * R) / (2.0 * r * delta)
    return math.acos(max(-1.0, min(1.0, c)))


def planet_disk_illuminated_fraction(d: CalendarDate, planet: Planet, *, theory=None) -> float:
    if planet is Planet.EARTH:
        return -1.0
    return (1.0 + math.cos(planet_phase_angle(d, planet, theory=theory))) / 2.0


# ------------------------------------------------------------
# Saturn's rings (Meeus ch. 45)
# ------------------------------------------------------------

def _ring_plane(T: float) -> Tuple[float, float]:
    """Inclination and ascending node of the ring plane on the ecliptic of date."""
    i = math.radians(28.075216 - 0.012998 * T + 0.000004 * T * T)
    node = math.radians(169.508470 + 1.394681 * T + 0.000412 * T * T)
    return i, node


def _ring_coordinates(lon: float, lat: float, i: float, node: float) -> Tuple[float, float]:
    """Longitude and latitude of a direction referred to the ring plane."""
    u = math.atan2(
        math.sin(i) * math.sin(lat) + math.cos(i) * math.cos(lat) * math.sin(lon - node),
        math.cos(lat) * math.cos(lon - node),
    )
    b = math.asin(math.sin(i) * math.cos(lat) * math.sin(lon - node) - math.cos(i) * math.sin(lat))
    return normalize(u), b


def saturn_ring_geometry(d: CalendarDate, *, theory=None) -> Tuple[float, float]:
    """
    (B, ΔU): saturnicentric latitude of the Earth referred to the ring plane
    and the difference between the saturnicentric longitudes of the Sun and
    the Earth, both in radians.
    """
    jde = julian_ephemeris_date(d)
    T = julian_centuries(jde)
    i, node = _ring_plane(T)

    saturn = planet_apparent_position(d, Planet.SATURN, theory=theory)
    u_earth, B = _ring_coordinates(saturn.longitude, saturn.latitude, i, node)

    earth = _heliocentric(jde, Planet.EARTH, theory)
    s, _ = light_time(jde, Planet.SATURN, earth, theory)
    # correction for the Sun's aberration as seen from Saturn
    N = math.radians(113.6655 + 0.8771 * T)
    lon = s.longitude - math.radians(0.01759) / s.distance
    lat = s.latitude - math.radians(0.000764) * math.cos(s.longitude - N) / s.distance
    u_sun, _ = _ring_coordinates(lon, lat, i, node)

    return B, wrap_pi(u_sun - u_earth)


# ------------------------------------------------------------
# Magnitudes (Meeus ch. 41)
# ------------------------------------------------------------

MagnitudeLaw = Callable[[float, CalendarDate, object], float]

def _saturn(i_deg: float, d: CalendarDate, theory) -> float:
    B, dU = saturn_ring_geometry(d, theory=theory)
    sb = math.sin(abs(B))
    return -8.88 + 0.044 * abs(math.degrees(dU)) - 2.60 * sb + 1.25 * sb * sb

# magnitude at unit distances as a function of the phase angle in degrees
MAGNITUDE_LAWS: Dict[Planet, MagnitudeLaw] = {
    Planet.MERCURY: lambda i, d, theory: -0.42 + 0.0380 * i - 0.000273 * i * i + 0.000002 * i * i * i,
    Planet.VENUS: lambda i, d, theory: -4.40 + 0.0009 * i + 0.000239 * i * i - 0.00000065 * i * i * i,
    Planet.MARS: lambda i, d, theory: -1.52 + 0.016 * i,
    Planet.JUPITER: lambda i, d, theory: -9.40 + 0.005 * i,
    Planet.SATURN: _saturn,
    Planet.URANUS: lambda i, d, theory: -7.19,
    Planet.NEPTUNE: lambda i, d, theory: -6.87,
}


def planet_apparent_magnitude(d: CalendarDate, planet: Planet, *, theory=None) -> float:
    if planet not in MAGNITUDE_LAWS:
        return math.nan
    r = planet_distance_to_sun(d, planet, theory=theory)
    delta = planet_distance_to_earth(d, planet, theory=theory)
    i = math.degrees(planet_phase_angle(d, planet, theory=theory))
    return 5.0 * math.log10(r * delta) + MAGNITUDE_LAWS[planet](i, d, theory)
