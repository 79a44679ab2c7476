# reference/coordinates.py

"""
Transformations between ecliptic, equatorial and horizontal coordinates
(Meeus ch. 13). Angles in radians.

Poles are not trapped: a declination or latitude of ±π/2 makes tan() blow
up and the result is whatever IEEE arithmetic produces.
"""

from __future__ import annotations

import math

from astrochron.core.types import (
    CalendarDate,
    EclipticPoint,
    EquatorialPoint,
    GeographicPoint,
    HorizontalPoint,
)

from .angles import hours_to_rad, normalize
from .calendar import greenwich_mean_sidereal_time


def ecliptic_to_equatorial(p: EclipticPoint, obliquity: float) -> EquatorialPoint:
    """(13.3), (13.4)"""
    sl, cl = math.sin(p.longitude), math.cos(p.longitude)
    se, ce = math.sin(obliquity), math.cos(obliquity)
    ra = math.atan2(sl * ce - math.tan(p.latitude) * se, cl)
    dec = math.asin(math.sin(p.latitude) * ce + math.cos(p.latitude) * se * sl)
    return EquatorialPoint(normalize(ra), dec)


def equatorial_to_ecliptic(p: EquatorialPoint, obliquity: float) -> EclipticPoint:
    """(13.1), (13.2)"""
    sa, ca = math.sin(p.right_ascension), math.cos(p.right_ascension)
    se, ce = math.sin(obliquity), math.cos(obliquity)
    lon = math.atan2(sa * ce + math.tan(p.declination) * se, ca)
    lat = math.asin(math.sin(p.declination) * ce - math.cos(p.declination) * se * sa)
    return EclipticPoint(normalize(lon), lat)


def local_hour_angle(d: CalendarDate, location: GeographicPoint, right_ascension: float) -> float:
    """H = θ0 - L - α with θ0 the Greenwich mean sidereal time and L west-positive."""
    theta0 = hours_to_rad(greenwich_mean_sidereal_time(d))
    return theta0 - location.longitude - right_ascension


def equatorial_to_horizontal(d: CalendarDate, location: GeographicPoint, p: EquatorialPoint) -> HorizontalPoint:
    """(13.5), (13.6); azimuth from the south, westward."""
    H = local_hour_angle(d, location, p.right_ascension)
    phi = location.latitude
    az = math.atan2(math.sin(H), math.cos(H) * math.sin(phi) - math.tan(p.declination) * math.cos(phi))
    el = math.asin(
        math.sin(phi) * math.sin(p.declination)
        + math.cos(phi) * math.cos(p.declination) * math.cos(H)
    )
    return HorizontalPoint(normalize(az), el)


def horizontal_to_equatorial(d: CalendarDate, location: GeographicPoint, p: HorizontalPoint) -> EquatorialPoint:
    theta0 = hours_to_rad(greenwich_mean_sidereal_time(d))
    phi = location.latitude
    H = math.atan2(
        math.sin(p.azimuth),
        math.cos(p.azimuth) * math.sin(phi) + math.tan(p.elevation) * math.cos(phi),
    )
    dec = math.asin(
        math.sin(phi) * math.sin(p.elevation)
        - math.cos(phi) * math.cos(p.elevation) * math.cos(p.azimuth)
    )
    return EquatorialPoint(normalize(theta0 - location.longitude - H), dec)
