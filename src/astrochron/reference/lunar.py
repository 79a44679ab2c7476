# reference/lunar.py

from __future__ import annotations

import math

from astrochron import api
from astrochron.core.types import CalendarDate, EclipticPoint, SphericalPoint

from .angles import arcsec_to_rad, normalize
from .calendar import julian_ephemeris_date
from .coordinates import ecliptic_to_equatorial
from .earth import ASTRONOMICAL_UNIT, EARTH_EQUATORIAL_RADIUS, nutation_in_longitude, true_obliquity_of_ecliptic
from .solar import sun_apparent_position, sun_distance_to_earth
from .time_scales import julian_centuries


def _geocentric(d: CalendarDate, theory) -> SphericalPoint:
    T = julian_centuries(julian_ephemeris_date(d))
    return api.lunar_theory(theory).geocentric_position(T)


def moon_true_position(d: CalendarDate, *, theory=None) -> EclipticPoint:
    p = _geocentric(d, theory)
    return EclipticPoint(normalize(arcsec_to_rad(p.longitude)), arcsec_to_rad(p.latitude))


def moon_apparent_position(d: CalendarDate, *, theory=None) -> EclipticPoint:
    """True position plus nutation in longitude; lunar series already contain light time."""
    p = moon_true_position(d, theory=theory)
    return EclipticPoint(normalize(p.longitude + nutation_in_longitude(d)), p.latitude)


def moon_distance_to_earth(d: CalendarDate, *, theory=None) -> float:
    """Distance between the centres of Earth and Moon in AU."""
    return _geocentric(d, theory).distance / ASTRONOMICAL_UNIT


def moon_horizontal_parallax(d: CalendarDate, *, theory=None) -> float:
    """Equatorial horizontal parallax π = asin(a / Δ)."""
    return math.asin(EARTH_EQUATORIAL_RADIUS / _geocentric(d, theory).distance)


def moon_phase_angle(d: CalendarDate, *, theory=None, planetary_theory=None) -> float:
    """
    Selenocentric elongation of the Earth from the Sun (Meeus 48.2, 48.3):
      cos ψ = cos β cos(λ - λ0),  tan i = R sin ψ / (Δ - R cos ψ).

    `theory` selects the lunar theory, `planetary_theory` the one used for the Sun.
    """
    moon = moon_apparent_position(d, theory=theory)
    sun = sun_apparent_position(d, theory=planetary_theory)
    psi = math.acos(math.cos(moon.latitude) * math.cos(moon.longitude - sun.longitude))

    R = sun_distance_to_earth(d, theory=planetary_theory)
    delta = moon_distance_to_earth(d, theory=theory)
    return math.atan2(R * math.sin(psi), delta - R * math.cos(psi))


def moon_disk_illuminated_fraction(d: CalendarDate, *, theory=None, planetary_theory=None) -> float:
    i = moon_phase_angle(d, theory=theory, planetary_theory=planetary_theory)
    return (1.0 + math.cos(i)) / 2.0


def moon_bright_limb_position_angle(d: CalendarDate, *, theory=None, planetary_theory=None) -> float:
    """Position angle of the midpoint of the illuminated limb, from north through east (Meeus 48.5)."""
    eps = true_obliquity_of_ecliptic(d)
    sun = ecliptic_to_equatorial(sun_apparent_position(d, theory=planetary_theory), eps)
    moon = ecliptic_to_equatorial(moon_apparent_position(d, theory=theory), eps)

    da = sun.right_ascension - moon.right_ascension
    chi = math.atan2(
        math.cos(sun.declination) * math.sin(da),
        math.sin(sun.declination) * math.cos(moon.declination)
        - math.cos(sun.declination) * math.sin(moon.declination) * math.cos(da),
    )
    return normalize(chi)
