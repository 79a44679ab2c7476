#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from astrochron import api
from astrochron.core.types import Planet
from astrochron.reference.angles import rad_to_arcsec, wrap_pi
from astrochron.reference.time_scales import J2000, julian_millennia, julian_centuries


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "astrochron[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "astrochron[diagnostics]"') from e


# DE421 coverage
MIN_JD = 2414864.5
MAX_JD = 2471184.5


def residuals(theory, reference, planet: Planet, jds) -> List[tuple]:
    """(Δλ, Δβ) in arcseconds and Δr in AU, theory minus reference, per Julian date."""
    out = []
    for jd in jds:
        tau = julian_millennia(float(jd))
        a = theory.heliocentric_position(tau, planet)
        b = reference.heliocentric_position(tau, planet)
        out.append((
            rad_to_arcsec(wrap_pi(a.longitude - b.longitude)),
            rad_to_arcsec(a.latitude - b.latitude),
            a.distance - b.distance,
        ))
    return out


def lunar_residuals(theory, reference, jds) -> List[tuple]:
    out = []
    for jd in jds:
        T = julian_centuries(float(jd))
        a = theory.geocentric_position(T)
        b = reference.geocentric_position(T)
        dlon = (a.longitude - b.longitude + 648000.0) % 1296000.0 - 648000.0
        out.append((dlon, a.latitude - b.latitude, a.distance - b.distance))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compare analytic theories against a JPL kernel.")
    p.add_argument("--theory", default="kepler", help="planetary theory to validate")
    p.add_argument("--lunar-theory", default="meeus", help="lunar theory to validate")
    p.add_argument("--year-start", type=int, default=1900)
    p.add_argument("--year-end", type=int, default=2050)
    p.add_argument("--step-days", type=float, default=30.0)
    p.add_argument("--out-png", default=None, help="write a residual plot")
    args = p.parse_args(argv)

    np = _need_numpy()

    jd_start = max(J2000 + (args.year_start - 2000) * 365.25, MIN_JD + 1.0)
    jd_end = min(J2000 + (args.year_end - 2000) * 365.25, MAX_JD - 1.0)
    if jd_start > jd_end:
        raise ValueError(f"Requested range is outside valid ephemeris range [{MIN_JD}, {MAX_JD}]")

    jds = np.arange(jd_start, jd_end, args.step_days)
    years = 2000 + (jds - J2000) / 365.25

    theory = api.planetary_theory(args.theory)
    reference = api.planetary_theory("jpl")
    print(f"Validating '{args.theory}' against JPL on {len(jds)} points, {years[0]:.0f} to {years[-1]:.0f}")
    print("body        rms dλ\"  max |dλ|\"    rms dβ\"  max |dr| AU")

    rows = {}
    for planet in Planet:
        res = np.array(residuals(theory, reference, planet, jds))
        rows[planet.name.lower()] = res
        print(
            f"{planet.name.lower():<9} {np.sqrt(np.mean(res[:, 0] ** 2)):10.1f} {np.max(np.abs(res[:, 0])):11.1f} "
            f"{np.sqrt(np.mean(res[:, 1] ** 2)):10.1f} {np.max(np.abs(res[:, 2])):12.2e}"
        )

    moon = np.array(lunar_residuals(api.lunar_theory(args.lunar_theory), api.lunar_theory("jpl"), jds))
    rows["moon"] = moon
    print(
        f"{'moon':<9} {np.sqrt(np.mean(moon[:, 0] ** 2)):10.1f} {np.max(np.abs(moon[:, 0])):11.1f} "
        f"{np.sqrt(np.mean(moon[:, 1] ** 2)):10.1f} {np.max(np.abs(moon[:, 2])):9.1f} km"
    )

    if args.out_png:
        plt = _need_matplotlib()
        fig, axs = plt.subplots(len(rows), 1, figsize=(12, 2.2 * len(rows)), sharex=True)
        for ax, (name, res) in zip(axs, rows.items()):
            ax.scatter(years, res[:, 0], s=1, alpha=0.5)
            ax.set_ylabel(f"{name} dλ (\")")
            ax.grid(True, alpha=0.3)
        axs[-1].set_xlabel("Year")
        plt.suptitle(f"Longitude residuals against JPL ({years[0]:.0f} to {years[-1]:.0f})", fontsize=14)
        plt.tight_layout()
        plt.savefig(args.out_png, dpi=200)
        print(f"Plot saved to {args.out_png}")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
