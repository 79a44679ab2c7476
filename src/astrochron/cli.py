from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import math
import re

from astrochron.core.types import CalendarDate, Equinox, Planet, Solstice


_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})(?:[T ](\d{1,2}):(\d{2})(?::(\d{2}(?:\.\d*)?))?)?$")

_BODIES = ["sun", "moon"] + [p.name.lower() for p in Planet if p is not Planet.EARTH]


def _parse_date(s: str) -> CalendarDate:
    """YYYY-MM-DD[THH:MM[:SS]], astronomical (signed) year numbering."""
    m = _DATE_RE.match(s.strip())
    if m is None:
        raise argparse.ArgumentTypeError(f"bad date '{s}', expected YYYY-MM-DD[THH:MM]")
    y, mo, d, hh, mm, ss = m.groups()
    day = int(d) + (int(hh or 0) + int(mm or 0) / 60.0 + float(ss or 0) / 3600.0) / 24.0
    return CalendarDate(int(y), int(mo), day)


def _parse_planet(s: str) -> Planet:
    try:
        return Planet[s.upper()]
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown planet '{s}'") from None


def _fmt_date(d: CalendarDate) -> str:
    h = d.hours
    hh = int(h)
    mm = int(round((h - hh) * 60.0))
    if mm == 60:
        hh, mm = hh + 1, 0
    return f"{d.year}-{int(d.month):02d}-{int(d.day):02d} {hh:02d}:{mm:02d} UT"


def _fmt_hours(h: float) -> str:
    if h < 0.0:
        return "never"
    hh = int(h)
    mm = (h - hh) * 60.0
    return f"{hh:02d}h{mm:05.2f}m"


def _fmt_deg(rad: float) -> str:
    return f"{math.degrees(rad):12.6f}°"


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_jd(argv: list[str]) -> int:
    from astrochron.reference import calendar

    p = argparse.ArgumentParser(prog="astrochron jd", description="Julian date and time scales of a calendar date.")
    p.add_argument("date", type=_parse_date, help="YYYY-MM-DD[THH:MM] (UT)")
    args = p.parse_args(argv)

    d = args.date
    if not calendar.is_valid(d):
        print(f"invalid date: {d}")
        return 2

    dt = calendar.dynamical_time_difference(d)
    print(f"Date       = {_fmt_date(d)}")
    print(f"JD         = {calendar.julian_date(d):.6f}")
    print(f"JDE        = {calendar.julian_ephemeris_date(d):.6f}")
    print(f"ΔT         = {dt:.1f} s  (± {calendar.dynamical_time_uncertainty(d):.0f} s)")
    print(f"Weekday    = {calendar.day_of_week(d).name.title()}")
    print(f"Day of year= {calendar.day_of_year(d)}")
    print(f"GMST       = {_fmt_hours(calendar.greenwich_mean_sidereal_time(d))}")
    return 0


def cmd_easter(argv: list[str]) -> int:
    from astrochron.reference import calendar

    p = argparse.ArgumentParser(prog="astrochron easter", description="Date of Easter Sunday.")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    d = calendar.date_of_easter(args.year)
    print(f"{d.year} {d.month.name.title()} {int(d.day)}")
    return 0


def cmd_seasons(argv: list[str]) -> int:
    from astrochron.reference import solar

    p = argparse.ArgumentParser(prog="astrochron seasons", description="Equinoxes and solstices of a year (UT).")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    y = args.year
    print(f"March equinox      {_fmt_date(solar.equinox(y, Equinox.VERNAL))}")
    print(f"June solstice      {_fmt_date(solar.solstice(y, Solstice.SUMMER))}")
    print(f"September equinox  {_fmt_date(solar.equinox(y, Equinox.AUTUMNAL))}")
    print(f"December solstice  {_fmt_date(solar.solstice(y, Solstice.WINTER))}")
    return 0


def cmd_sun(argv: list[str]) -> int:
    from astrochron.reference import coordinates, earth, solar

    p = argparse.ArgumentParser(prog="astrochron sun", description="Position of the Sun.")
    p.add_argument("date", type=_parse_date, help="YYYY-MM-DD[THH:MM] (UT)")
    args = p.parse_args(argv)

    d = args.date
    true = solar.sun_true_position(d)
    app = solar.sun_apparent_position(d)
    eq = coordinates.ecliptic_to_equatorial(app, earth.true_obliquity_of_ecliptic(d))

    print(f"Date              = {_fmt_date(d)}")
    print(f"True longitude    = {_fmt_deg(true.longitude)}")
    print(f"True latitude     = {_fmt_deg(true.latitude)}")
    print(f"Apparent longitude= {_fmt_deg(app.longitude)}")
    print(f"Right ascension   = {_fmt_hours(math.degrees(eq.right_ascension) / 15.0)}")
    print(f"Declination       = {_fmt_deg(eq.declination)}")
    print(f"Distance          = {solar.sun_distance_to_earth(d):.8f} AU")
    print(f"Equation of time  = {solar.equation_of_time_minutes(d):+.2f} min")
    return 0


def cmd_moon(argv: list[str]) -> int:
    from astrochron.reference import lunar

    p = argparse.ArgumentParser(prog="astrochron moon", description="Position and phase of the Moon.")
    p.add_argument("date", type=_parse_date, help="YYYY-MM-DD[THH:MM] (UT)")
    p.add_argument("--lunar-theory", default=None, help="registered lunar theory")
    p.add_argument("--planetary-theory", default=None, help="registered planetary theory for the Sun")
    args = p.parse_args(argv)

    d, th, sth = args.date, args.lunar_theory, args.planetary_theory
    true = lunar.moon_true_position(d, theory=th)
    app = lunar.moon_apparent_position(d, theory=th)

    print(f"Date              = {_fmt_date(d)}")
    print(f"True longitude    = {_fmt_deg(true.longitude)}")
    print(f"True latitude     = {_fmt_deg(true.latitude)}")
    print(f"Apparent longitude= {_fmt_deg(app.longitude)}")
    print(f"Distance          = {lunar.moon_distance_to_earth(d, theory=th):.8f} AU")
    print(f"Phase angle       = {_fmt_deg(lunar.moon_phase_angle(d, theory=th, planetary_theory=sth))}")
    print(f"Illuminated       = {lunar.moon_disk_illuminated_fraction(d, theory=th, planetary_theory=sth):.4f}")
    print(f"Bright limb PA    = {_fmt_deg(lunar.moon_bright_limb_position_angle(d, theory=th, planetary_theory=sth))}")
    return 0


def cmd_planet(argv: list[str]) -> int:
    from astrochron.reference import planets

    p = argparse.ArgumentParser(prog="astrochron planet", description="Position, phase and magnitude of a planet.")
    p.add_argument("name", type=_parse_planet, help="mercury, venus, mars, jupiter, saturn, uranus, neptune")
    p.add_argument("date", type=_parse_date, help="YYYY-MM-DD[THH:MM] (UT)")
    args = p.parse_args(argv)

    d, pl = args.date, args.name
    true = planets.planet_true_position(d, pl)
    app = planets.planet_apparent_position(d, pl)

    print(f"{pl.name.title()} at {_fmt_date(d)}")
    print(f"True longitude    = {_fmt_deg(true.longitude)}")
    print(f"True latitude     = {_fmt_deg(true.latitude)}")
    print(f"Apparent longitude= {_fmt_deg(app.longitude)}")
    print(f"Apparent latitude = {_fmt_deg(app.latitude)}")
    print(f"Distance to Sun   = {planets.planet_distance_to_sun(d, pl):.8f} AU")
    print(f"Distance to Earth = {planets.planet_distance_to_earth(d, pl):.8f} AU")
    print(f"Phase angle       = {_fmt_deg(planets.planet_phase_angle(d, pl))}")
    print(f"Illuminated       = {planets.planet_disk_illuminated_fraction(d, pl):.4f}")
    print(f"Magnitude         = {planets.planet_apparent_magnitude(d, pl):+.2f}")
    return 0


def cmd_rise(argv: list[str]) -> int:
    from astrochron.core.types import GeographicPoint
    from astrochron.reference import coordinates, earth, lunar, observer, planets, solar

    p = argparse.ArgumentParser(prog="astrochron rise", description="Rising, transit and setting times (UT).")
    p.add_argument("date", type=_parse_date, help="YYYY-MM-DD")
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")
    p.add_argument("--body", choices=_BODIES, default="sun")
    args = p.parse_args(argv)

    d = args.date.at_midnight()
    # GeographicPoint counts longitude westward
    loc = GeographicPoint(-math.radians(args.lon), math.radians(args.lat))
    eps = earth.true_obliquity_of_ecliptic(d)

    if args.body == "sun":
        ecl = solar.sun_apparent_position(d)
        h0 = observer.SUN_STANDARD_ALTITUDE
    elif args.body == "moon":
        ecl = lunar.moon_apparent_position(d)
        h0 = observer.moon_standard_altitude(lunar.moon_horizontal_parallax(d))
    else:
        ecl = planets.planet_apparent_position(d, Planet[args.body.upper()])
        h0 = observer.STARS_STANDARD_ALTITUDE
    eq = coordinates.ecliptic_to_equatorial(ecl, eps)

    print(f"{args.body.title()} on {d.year}-{int(d.month):02d}-{int(d.day):02d} at lat {args.lat:+.4f} lon {args.lon:+.4f}")
    print(f"Rising  = {_fmt_hours(observer.rising(d, loc, eq, h0))}")
    print(f"Transit = {_fmt_hours(observer.transit(d, loc, eq))}")
    print(f"Setting = {_fmt_hours(observer.setting(d, loc, eq, h0))}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="astrochron", description="Positional astronomy with classical reduction theory.")
    p.add_argument("-v", "--verbose", action="count", default=0, help="log solver details (-vv for debug)")
    p.add_argument("--theory", default=None, help="planetary theory to use (see --list-theories)")
    p.add_argument("--list-theories", action="store_true", help="list registered theories and exit")

    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("jd", help="Julian date, ΔT, weekday and sidereal time of a date.")
    sub.add_parser("easter", help="Date of Easter Sunday.")
    sub.add_parser("seasons", help="Equinoxes and solstices of a year.")
    sub.add_parser("sun", help="Position of the Sun.")
    sub.add_parser("moon", help="Position and phase of the Moon.")
    sub.add_parser("planet", help="Position, phase and magnitude of a planet.")
    sub.add_parser("rise", help="Rising, transit and setting times.")
    sub.add_parser("validate-theory", help="Residuals of the analytic theories against a JPL kernel.")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )

    import astrochron

    if args.list_theories:
        defaults = astrochron.default_theories()
        for kind, names in astrochron.list_theories().items():
            marked = [f"{n}*" if n == defaults.get(kind) else n for n in names]
            print(f"{kind:<10} {' '.join(marked)}")
        return 0

    if args.theory is not None:
        astrochron.use_theories(planetary=args.theory)

    commands = {
        "jd": cmd_jd,
        "easter": cmd_easter,
        "seasons": cmd_seasons,
        "sun": cmd_sun,
        "moon": cmd_moon,
        "planet": cmd_planet,
        "rise": cmd_rise,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "validate-theory":
        return _run_module_main("astrochron.diagnostics.validate_theory", rest)

    p.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
