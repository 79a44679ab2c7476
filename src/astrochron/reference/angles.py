from __future__ import annotations

import math
from math import fmod
from typing import Sequence, Tuple


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

TWO_PI = 2.0 * math.pi
ARCSEC_TO_RAD = math.pi / 648000.0

def normalize(x_rad: float) -> float:
    """Wrap radians to [0, 2π)."""
    y = fmod(x_rad, TWO_PI)
    if y < 0.0:
        y += TWO_PI
    # fmod of a tiny negative value can round up to exactly 2π
    if y >= TWO_PI:
        y -= TWO_PI
    return y

def wrap_pi(x_rad: float) -> float:
    """Wrap radians to [-π, π)."""
    return (x_rad + math.pi) % TWO_PI - math.pi

def wrap_hours(h: float) -> float:
    """Wrap hours to [0, 24)."""
    y = fmod(h, 24.0)
    if y < 0.0:
        y += 24.0
    return y

def arcsec_to_rad(arcsec: float) -> float:
    return arcsec * ARCSEC_TO_RAD

def rad_to_arcsec(rad: float) -> float:
    return rad / ARCSEC_TO_RAD

def hours_to_rad(h: float) -> float:
    return h * math.pi / 12.0

def rad_to_hours(rad: float) -> float:
    return rad * 12.0 / math.pi

def dms(deg: float, minutes: float = 0.0, seconds: float = 0.0) -> float:
    """Sexagesimal degrees to radians; the sign of `deg` applies to the whole angle."""
    sign = -1.0 if deg < 0.0 or (deg == 0.0 and math.copysign(1.0, deg) < 0.0) else 1.0
    return sign * math.radians(abs(deg) + minutes / 60.0 + seconds / 3600.0)

def hms(hours: float, minutes: float = 0.0, seconds: float = 0.0) -> float:
    """Sexagesimal hours to radians."""
    return hours_to_rad(hours + minutes / 60.0 + seconds / 3600.0)


def poly(u: float, coeffs: Sequence[float]) -> float:
    """Horner evaluation for Σ coeffs[k] u^k."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * u + c
    return acc


# ------------------------------------------------------------
# Spherical <-> rectangular
# ------------------------------------------------------------

Vector = Tuple[float, float, float]

def spherical_to_rectangular(longitude: float, latitude: float, distance: float = 1.0) -> Vector:
    cb = math.cos(latitude)
    return (
        distance * cb * math.cos(longitude),
        distance * cb * math.sin(longitude),
        distance * math.sin(latitude),
    )

def rectangular_to_spherical(v: Vector) -> Tuple[float, float, float]:
    """Returns (longitude in [0, 2π), latitude, distance)."""
    x, y, z = v
    rho = math.hypot(x, y)
    return normalize(math.atan2(y, x)), math.atan2(z, rho), math.sqrt(rho * rho + z * z)

def apply_matrix(M: Tuple[Tuple[float, ...], ...], v: Sequence[float]) -> Vector:
    """Applies a 3x3 matrix to a 3D vector."""
    return (
        M[0][0]*v[0] + M[0][1]*v[1] + M[0][2]*v[2],
        M[1][0]*v[0] + M[1][1]*v[1] + M[1][2]*v[2],
        M[2][0]*v[0] + M[2][1]*v[1] + M[2][2]*v[2]
    )
