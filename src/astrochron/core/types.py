from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum


class Month(IntEnum):
    UNKNOWN = 0
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class Weekday(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class Planet(Enum):
    MERCURY = 1
    VENUS = 2
    EARTH = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8


class Frame(Enum):
    """Reference equinox of orbital elements."""
    J2000 = "J2000"
    OF_DATE = "of-date"


class Equinox(IntEnum):
    VERNAL = 0      # March
    AUTUMNAL = 2    # September


class Solstice(IntEnum):
    SUMMER = 1      # June
    WINTER = 3      # December


@dataclass(frozen=True)
class CalendarDate:
    """
    Civil date in astronomical year numbering (year 0 = 1 BC).

    `day` carries the time of day as a fraction, e.g. 4.81 is 4th day at 19h26m.
    Julian calendar before 15 October 1582, Gregorian from then on.
    """
    year: int
    month: int
    day: float

    @property
    def hours(self) -> float:
        """Time of day in hours."""
        return (self.day - int(self.day)) * 24.0

    def at_midnight(self) -> "CalendarDate":
        return CalendarDate(self.year, self.month, float(int(self.day)))


@dataclass(frozen=True)
class GeographicPoint:
    """Longitude measured positive westward, latitude positive northward (radians)."""
    longitude: float
    latitude: float


@dataclass(frozen=True)
class HorizontalPoint:
    """Azimuth measured from the south, positive westward; elevation above horizon."""
    azimuth: float
    elevation: float


@dataclass(frozen=True)
class EquatorialPoint:
    right_ascension: float
    declination: float


@dataclass(frozen=True)
class EclipticPoint:
    longitude: float
    latitude: float


@dataclass(frozen=True)
class SphericalPoint:
    """Output of the planetary/lunar theories: angles plus radius vector."""
    longitude: float
    latitude: float
    distance: float


@dataclass(frozen=True)
class OrbitalElements:
    mean_longitude: float
    semi_major_axis: float          # AU
    eccentricity: float
    inclination: float
    ascending_node_longitude: float
    perihelion_longitude: float
    frame: Frame = Frame.OF_DATE
