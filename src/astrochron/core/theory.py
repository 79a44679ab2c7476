"""
astrochron.core.theory
----------------------
Boundaries between the reduction engine and the theories it consumes.

Time arguments follow the conventions of the theories themselves:
  - planetary theories take Julian millennia from J2000.0 (TT),
  - lunar theories and Delaunay arguments take Julian centuries from J2000.0 (TT).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Protocol, Tuple

from .errors import TheoryUnavailableError
from .types import Planet, SphericalPoint


class PlanetaryTheory(Protocol):
    def heliocentric_position(self, tau: float, planet: Planet) -> SphericalPoint:
        """
        Heliocentric ecliptic position referred to the mean ecliptic and
        equinox of date: longitude and latitude in radians, distance in AU.
        """
        ...


class LunarTheory(Protocol):
    def geocentric_position(self, T: float) -> SphericalPoint:
        """
        Geocentric ecliptic position of the Moon referred to the mean equinox
        of date: longitude and latitude in arcseconds, distance in kilometres.
        """
        ...


class DelaunayArguments(Protocol):
    def arguments(self, T: float, terms: int = 5) -> Tuple[float, float, float, float]:
        """
        Delaunay arguments (l, l', F, D) in arcseconds.

        `terms` is the number of polynomial powers summed (1 = constant only).
        """
        ...


KINDS = ("planetary", "lunar", "delaunay")

TheoryFactory = Callable[[], object]


@dataclass
class TheoryRegistry:
    """
    Named theory factories per kind. Instances are built on first use, so an
    optional backend is only imported when somebody asks for it.
    """
    _factories: Dict[str, Dict[str, TheoryFactory]] = field(default_factory=lambda: {k: {} for k in KINDS})
    _instances: Dict[Tuple[str, str], object] = field(default_factory=dict)
    defaults: Dict[str, str] = field(default_factory=dict)

    def _check_kind(self, kind: str) -> None:
        if kind not in KINDS:
            raise ValueError(f"kind must be one of: {', '.join(KINDS)}")

    def get(self, kind: str, name: str) -> object:
        self._check_kind(kind)
        if name not in self._factories[kind]:
            raise TheoryUnavailableError(
                f"Unknown {kind} theory '{name}'. Available: {sorted(self._factories[kind])}"
            )
        key = (kind, name)
        if key not in self._instances:
            self._instances[key] = self._factories[kind][name]()
        return self._instances[key]

    def default(self, kind: str) -> object:
        self._check_kind(kind)
        return self.get(kind, self.defaults[kind])

    def list(self, kind: str) -> List[str]:
        self._check_kind(kind)
        return sorted(self._factories[kind].keys())

    def register(self, kind: str, name: str, factory: TheoryFactory, *, overwrite: bool = False) -> None:
        self._check_kind(kind)
        if (not overwrite) and (name in self._factories[kind]):
            raise KeyError(f"{kind} theory '{name}' already exists. Use overwrite=True to replace.")
        self._factories[kind][name] = factory
        self._instances.pop((kind, name), None)

    def set_default(self, kind: str, name: str) -> None:
        self._check_kind(kind)
        if name not in self._factories[kind]:
            raise TheoryUnavailableError(
                f"Unknown {kind} theory '{name}'. Available: {sorted(self._factories[kind])}"
            )
        self.defaults[kind] = name
