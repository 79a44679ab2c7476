# reference/observer.py

"""
Circumstances for an observer on the Earth's surface (Meeus ch. 14-16, 40).

Rising, setting and transit are the closed-form single-pass solution: the
body's coordinates are taken as constant over the day, so results for the
Moon can be off by several minutes. Times are UT hours of the given date.
"""

from __future__ import annotations

import math

from astrochron.core.types import CalendarDate, EquatorialPoint, GeographicPoint

from .angles import dms, hours_to_rad, normalize
from .calendar import greenwich_mean_sidereal_time
from .earth import EARTH_EQUATORIAL_RADIUS, EARTH_POLAR_RADIUS, nutation_in_longitude, true_obliquity_of_ecliptic


SEA_LEVEL = 0.0                     # m
STANDARD_TEMPERATURE = 283.15       # K
STANDARD_PRESSURE = 101325.0        # Pa

STARS_STANDARD_ALTITUDE = dms(-0.0, 34.0)       # also planets
SUN_STANDARD_ALTITUDE = dms(-0.0, 50.0)

NEVER = -1.0


def moon_standard_altitude(parallax: float) -> float:
    """h0 = 0.7275 π - 0°34' for the Moon's horizontal parallax π."""
    return 0.7275 * parallax + STARS_STANDARD_ALTITUDE


def apparent_sidereal_time(d: CalendarDate) -> float:
    """Apparent sidereal time at Greenwich in radians: θ0 + Δψ cos ε."""
    return hours_to_rad(greenwich_mean_sidereal_time(d)) \
        + nutation_in_longitude(d) * math.cos(true_obliquity_of_ecliptic(d))


def parallactic_angle(d: CalendarDate, location: GeographicPoint, p: EquatorialPoint) -> float:
    """tan q = sin H / (tan φ cos δ - sin δ cos H)"""
    H = apparent_sidereal_time(d) - location.longitude - p.right_ascension
    return math.atan2(
        math.sin(H),
        math.tan(location.latitude) * math.cos(p.declination) - math.sin(p.declination) * math.cos(H),
    )


def transit(d: CalendarDate, location: GeographicPoint, p: EquatorialPoint) -> float:
    """Hour (UT) of the upper meridian crossing: m0 = (α + L - θ0) / 2π, θ0 at 0h."""
    theta0 = apparent_sidereal_time(d.at_midnight())
    m = math.fmod((p.right_ascension + location.longitude - theta0) / (2.0 * math.pi), 1.0)
    if m < 0.0:
        m += 1.0
    return m * 24.0


def _hour_angle_at(location: GeographicPoint, p: EquatorialPoint, altitude: float) -> float:
    """H0 for the given altitude of the centre; nan when the body never reaches it."""
    cos_h0 = (math.sin(altitude) - math.sin(location.latitude) * math.sin(p.declination)) \
        / (math.cos(location.latitude) * math.cos(p.declination))
    if abs(cos_h0) > 1.0:
        return math.nan
    return math.acos(cos_h0)


def rising(d: CalendarDate, location: GeographicPoint, p: EquatorialPoint,
           standard_altitude: float = STARS_STANDARD_ALTITUDE) -> float:
    """Hour (UT) of rising in [0, 24), or -1 if the body is circumpolar or never rises."""
    h0 = _hour_angle_at(location, p, standard_altitude)
    if math.isnan(h0):
        return NEVER
    m = transit(d, location, p) - 12.0 * h0 / math.pi
    return m + 24.0 if m < 0.0 else m


def setting(d: CalendarDate, location: GeographicPoint, p: EquatorialPoint,
            standard_altitude: float = STARS_STANDARD_ALTITUDE) -> float:
    """Hour (UT) of setting in [0, 24), or -1 if the body is circumpolar or never rises."""
    h0 = _hour_angle_at(location, p, standard_altitude)
    if math.isnan(h0):
        return NEVER
    m = transit(d, location, p) + 12.0 * h0 / math.pi
    return m - 24.0 if m >= 24.0 else m


def atmospheric_refraction(altitude: float, temperature: float = STANDARD_TEMPERATURE,
                           pressure: float = STANDARD_PRESSURE) -> float:
    """
    Refraction to add to a true (airless) altitude, Sæmundsson's formula
      R = 1.02' / tan(h + 10.3 / (h + 5.11)),  h in degrees,
    scaled by (P / 101325 Pa)(283.15 K / T). Radians in and out.
    """
    h = math.degrees(altitude)
    r = 1.02 / math.tan(math.radians(h + 10.3 / (h + 5.11)))
    r *= (pressure / STANDARD_PRESSURE) * (STANDARD_TEMPERATURE / temperature)
    return math.radians(r / 60.0)


def diurnal_parallax(d: CalendarDate, location: GeographicPoint, height: float,
                     p: EquatorialPoint, parallax: float) -> EquatorialPoint:
    """
    Topocentric right ascension and declination (Meeus 40.2, 40.3) for an
    observer `height` metres above sea level; `parallax` is the body's
    equatorial horizontal parallax.
    """
    ba = EARTH_POLAR_RADIUS / EARTH_EQUATORIAL_RADIUS
    ha = height / (EARTH_EQUATORIAL_RADIUS * 1000.0)
    phi = location.latitude

    u = math.atan(ba * math.tan(phi))
    rho_sin = ba * math.sin(u) + ha * math.sin(phi)
    rho_cos = math.cos(u) + ha * math.cos(phi)

    H = apparent_sidereal_time(d) - location.longitude - p.right_ascension
    sp = math.sin(parallax)
    cd = math.cos(p.declination)

    da = math.atan2(-rho_cos * sp * math.sin(H), cd - rho_cos * sp * math.cos(H))
    dec = math.atan2(
        (math.sin(p.declination) - rho_sin * sp) * math.cos(da),
        cd - rho_cos * sp * math.cos(H),
    )
    return EquatorialPoint(normalize(p.right_ascension + da), dec)
