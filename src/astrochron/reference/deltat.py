from __future__ import annotations

"""
astrochron.reference.deltat

ΔT (= TD − UT) model used to turn civil dates into ephemeris time.

Model
-----
- For calendar years -1000..2020 ΔT is linearly interpolated in the
  Morrison–Stephenson tables: a pre-telescope table sampled every 100 years
  (-1000..1700) and a telescope-era table sampled every 10 years
  (1700..2020). Both carry the published uncertainty as a third column.
  Dates within 2020 continue the 2010-2020 segment.
- For all other years the long-term parabola
      ΔT = -20 + 32 u^2,   u = (y - 1820) / 100
  is used.

A CSV table (columns ``decimal_year, delta_t_seconds``) named by the
ASTROCHRON_DELTAT_TABLE environment variable takes precedence over the
built-in tables inside its own range, e.g. a monthly IERS-derived table.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Optional, Tuple
import csv
import logging
import math
import os
from pathlib import Path

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Table model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeltaTTable:
    """
    Piecewise-linear ΔT table over decimal-year coordinate.
    """
    x: Tuple[float, ...]   # decimal years (strictly increasing)
    y: Tuple[float, ...]   # ΔT in seconds
    u: Tuple[float, ...] = ()   # uncertainty in seconds (optional)

    def __len__(self) -> int:
        return len(self.x)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        """
        Iterate over (decimal_year, delta_t_seconds) pairs.
        """
        return iter(zip(self.x, self.y))

    def _bracket(self, xq: float, extend: bool = False) -> Tuple[int, int, float]:
        if extend and xq > self.x[-1]:
            lo, hi = len(self.x) - 2, len(self.x) - 1
            return lo, hi, (xq - self.x[lo]) / (self.x[hi] - self.x[lo])
        if not (self.x[0] <= xq <= self.x[-1]):
            raise ValueError(f"x out of range [{self.x[0]}, {self.x[-1]}]: {xq}")
        # binary search
        lo, hi = 0, len(self.x) - 1
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if self.x[mid] <= xq:
                lo = mid
            else:
                hi = mid
        x0, x1 = self.x[lo], self.x[hi]
        t = 0.0 if x1 == x0 else (xq - x0) / (x1 - x0)
        return lo, hi, t

    def eval(self, xq: float, *, extend: bool = False) -> float:
        """Interpolate at xq; with `extend`, the last segment continues past the end."""
        lo, hi, t = self._bracket(xq, extend)
        return self.y[lo] + t * (self.y[hi] - self.y[lo])

    def uncertainty(self, xq: float, *, extend: bool = False) -> float:
        if not self.u:
            return math.nan
        lo, hi, t = self._bracket(xq, extend)
        return self.u[lo] + t * (self.u[hi] - self.u[lo])

    @property
    def range(self) -> Tuple[float, float]:
        return (self.x[0], self.x[-1])


def _table(rows: Tuple[Tuple[int, int, int], ...]) -> DeltaTTable:
    return DeltaTTable(
        x=tuple(float(r[0]) for r in rows),
        y=tuple(float(r[1]) for r in rows),
        u=tuple(float(r[2]) for r in rows),
    )


# (year, ΔT seconds, uncertainty seconds)
PRE_TELESCOPE_ERA = _table((
    (-1000, 25400, 640),
    (-900, 23700, 590),
    (-800, 22000, 550),
    (-700, 20400, 500),
    (-600, 18800, 460),
    (-500, 17190, 430),
    (-400, 15530, 390),
    (-300, 14080, 360),
    (-200, 12790, 330),
    (-100, 11640, 290),
    (0, 10580, 260),
    (100, 9600, 240),
    (200, 8640, 210),
    (300, 7680, 180),
    (400, 6700, 160),
    (500, 5710, 140),
    (600, 4740, 120),
    (700, 3810, 100),
    (800, 2960, 80),
    (900, 2200, 70),
    (1000, 1570, 55),
    (1100, 1090, 40),
    (1200, 740, 30),
    (1300, 490, 20),
    (1400, 320, 20),
    (1500, 200, 20),
    (1600, 120, 20),
    (1700, 9, 5),
))

TELESCOPE_ERA = _table((
    (1700, 9, 5),
    (1710, 10, 3),
    (1720, 11, 3),
    (1730, 11, 3),
    (1740, 12, 2),
    (1750, 13, 2),
    (1760, 15, 2),
    (1770, 16, 2),
    (1780, 17, 1),
    (1790, 17, 1),
    (1800, 14, 1),
    (1810, 13, 1),
    (1820, 12, 1),
    (1830, 8, 1),
    (1840, 6, 0),
    (1850, 7, 0),
    (1860, 8, 0),
    (1870, 2, 0),
    (1880, -5, 0),
    (1890, -6, 0),
    (1900, -3, 0),
    (1910, 10, 0),
    (1920, 21, 0),
    (1930, 24, 0),
    (1940, 24, 0),
    (1950, 29, 0),
    (1960, 33, 0),
    (1970, 40, 0),
    (1980, 51, 0),
    (1990, 57, 0),
    (2000, 65, 0),
    (2010, 66, 0),
    (2020, 71, 4),
))

TABLE_START_YEAR = PRE_TELESCOPE_ERA.range[0]
TELESCOPE_ERA_START_YEAR = TELESCOPE_ERA.range[0]
TABLE_END_YEAR = TELESCOPE_ERA.range[1]


def _read_csv_xy(rows: Iterable[dict], *, xcol: str, ycol: str) -> DeltaTTable:
    xs: list[float] = []
    ys: list[float] = []
    for r in rows:
        xs.append(float(r[xcol]))
        ys.append(float(r[ycol]))
    if len(xs) < 2:
        raise ValueError("ΔT table needs at least two rows")
    # ensure strict monotonicity
    for i in range(1, len(xs)):
        if not (xs[i] > xs[i - 1]):
            raise ValueError("ΔT table x is not strictly increasing")
    return DeltaTTable(tuple(xs), tuple(ys))


@lru_cache(maxsize=1)
def load_override_table() -> Optional[DeltaTTable]:
    """
    Load the CSV table named by ASTROCHRON_DELTAT_TABLE, if any.

    Expected CSV columns:
      decimal_year, ..., delta_t_seconds
    """
    p = os.environ.get("ASTROCHRON_DELTAT_TABLE", "").strip()
    if not p:
        return None
    path = Path(p).expanduser()
    if not path.is_file():
        logger.warning("ASTROCHRON_DELTAT_TABLE=%s is not a file; using built-in tables", path)
        return None
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            return _read_csv_xy(reader, xcol="decimal_year", ycol="delta_t_seconds")
    except (OSError, KeyError, ValueError) as e:
        logger.warning("cannot read ΔT table %s (%s); using built-in tables", path, e)
        return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def delta_t_parabola(y: float) -> float:
    """Long-term ΔT(y) = -20 + 32 ((y - 1820)/100)^2 seconds."""
    u = (y - 1820.0) / 100.0
    return -20.0 + 32.0 * u * u


def in_tables(year: int) -> bool:
    """True when the calendar year is covered by the built-in tables."""
    return TABLE_START_YEAR <= year <= TABLE_END_YEAR


def _tabulated(y: float, uncertainty: bool = False) -> float:
    # dates in TABLE_END_YEAR itself continue the last table segment
    tbl = PRE_TELESCOPE_ERA if y < TELESCOPE_ERA_START_YEAR else TELESCOPE_ERA
    if uncertainty:
        return tbl.uncertainty(y, extend=True)
    return tbl.eval(y, extend=True)


def delta_t_seconds(y: float, year: Optional[int] = None) -> float:
    """
    ΔT(y) in seconds, where y is a decimal year.

    Tables or parabola are chosen by the calendar year, which defaults to
    floor(y). Pass it explicitly when y = year + day_of_year / length of year,
    because 31 December then gives y = year + 1.
    """
    tbl = load_override_table()
    if tbl is not None:
        a, b = tbl.range
        if a <= y <= b:
            return tbl.eval(y)

    if year is None:
        year = math.floor(y)
    if not in_tables(year):
        return delta_t_parabola(y)
    return _tabulated(y)


def delta_t_uncertainty(y: float, year: Optional[int] = None) -> float:
    """Published ΔT uncertainty (seconds) at decimal year y; nan outside the tables."""
    if year is None:
        year = math.floor(y)
    if not in_tables(year):
        return math.nan
    return _tabulated(y, uncertainty=True)
