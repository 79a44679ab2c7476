"""astrochron public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_theories,
    default_theories,
    register_theory,
    use_theories,
)
from .core.errors import AstrochronError, ConvergenceError, TheoryUnavailableError
from .core.types import (
    CalendarDate,
    EclipticPoint,
    EquatorialPoint,
    Equinox,
    Frame,
    GeographicPoint,
    HorizontalPoint,
    Month,
    OrbitalElements,
    Planet,
    Solstice,
    SphericalPoint,
    Weekday,
)
from .reference.calendar import (
    calendar_date,
    date_of_easter,
    day_of_week,
    day_of_year,
    dynamical_time_difference,
    dynamical_time_uncertainty,
    greenwich_mean_sidereal_time,
    is_leap_year,
    is_valid,
    julian_date,
    julian_ephemeris_date,
)
from .reference.coordinates import (
    ecliptic_to_equatorial,
    equatorial_to_ecliptic,
    equatorial_to_horizontal,
    horizontal_to_equatorial,
)
from .reference.earth import (
    aberration,
    geodesic_distance,
    nutation_in_longitude,
    nutation_in_obliquity,
    obliquity_of_ecliptic,
    precession,
    true_obliquity_of_ecliptic,
)
from .reference.orbital import orbital_elements
from .reference.solar import (
    equation_of_time,
    equation_of_time_minutes,
    equinox,
    solstice,
    sun_apparent_position,
    sun_distance_to_earth,
    sun_true_position,
)
from .reference.lunar import (
    moon_apparent_position,
    moon_bright_limb_position_angle,
    moon_disk_illuminated_fraction,
    moon_distance_to_earth,
    moon_horizontal_parallax,
    moon_phase_angle,
    moon_true_position,
)
from .reference.planets import (
    planet_apparent_magnitude,
    planet_apparent_position,
    planet_disk_illuminated_fraction,
    planet_distance_to_earth,
    planet_distance_to_sun,
    planet_phase_angle,
    planet_true_position,
)
from .reference.observer import (
    atmospheric_refraction,
    diurnal_parallax,
    moon_standard_altitude,
    parallactic_angle,
    rising,
    setting,
    transit,
)

__all__ = [
    "list_theories",
    "default_theories",
    "register_theory",
    "use_theories",
    "AstrochronError",
    "ConvergenceError",
    "TheoryUnavailableError",
    "CalendarDate",
    "EclipticPoint",
    "EquatorialPoint",
    "Equinox",
    "Frame",
    "GeographicPoint",
    "HorizontalPoint",
    "Month",
    "OrbitalElements",
    "Planet",
    "Solstice",
    "SphericalPoint",
    "Weekday",
    "calendar_date",
    "date_of_easter",
    "day_of_week",
    "day_of_year",
    "dynamical_time_difference",
    "dynamical_time_uncertainty",
    "greenwich_mean_sidereal_time",
    "is_leap_year",
    "is_valid",
    "julian_date",
    "julian_ephemeris_date",
    "ecliptic_to_equatorial",
    "equatorial_to_ecliptic",
    "equatorial_to_horizontal",
    "horizontal_to_equatorial",
    "aberration",
    "geodesic_distance",
    "nutation_in_longitude",
    "nutation_in_obliquity",
    "obliquity_of_ecliptic",
    "precession",
    "true_obliquity_of_ecliptic",
    "orbital_elements",
    "equation_of_time",
    "equation_of_time_minutes",
    "equinox",
    "solstice",
    "sun_apparent_position",
    "sun_distance_to_earth",
    "sun_true_position",
    "moon_apparent_position",
    "moon_bright_limb_position_angle",
    "moon_disk_illuminated_fraction",
    "moon_distance_to_earth",
    "moon_horizontal_parallax",
    "moon_phase_angle",
    "moon_true_position",
    "planet_apparent_magnitude",
    "planet_apparent_position",
    "planet_disk_illuminated_fraction",
    "planet_distance_to_earth",
    "planet_distance_to_sun",
    "planet_phase_angle",
    "planet_true_position",
    "atmospheric_refraction",
    "diurnal_parallax",
    "moon_standard_altitude",
    "parallactic_angle",
    "rising",
    "setting",
    "transit",
]
