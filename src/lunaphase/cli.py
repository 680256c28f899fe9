# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for Sun and Moon positions and lunar phase.

Usage:
    # Civil (UT) instant
    lunaphase 1992-04-12 --time 00:00

    # Instant already on Dynamical Time, JSON output
    lunaphase 1992-04-12 --dynamical --json

    # Years before 1 CE use astronomical numbering (0 = 1 BCE)
    lunaphase -500-03-01
"""
import argparse
import json
import logging
import re
import sys

from lunaphase.adapters import BundledTableSource
from lunaphase.domain.ephemeris import SunMoonEphemeris
from lunaphase.domain.time_scale import CalendarInstant

_DATE_RE = re.compile(r"^(-?\d{1,4})-(\d{2})-(\d{2})$")
_TIME_RE = re.compile(r"^(\d{2}):(\d{2})(?::(\d{2}(?:\.\d+)?))?$")


def parse_instant(date_text: str, time_text: str = "00:00") -> CalendarInstant:
    """Parse ``[-]YYYY-MM-DD`` and ``HH:MM[:SS[.f]]`` into a CalendarInstant."""
    date_match = _DATE_RE.match(date_text.strip())
    if date_match is None:
        raise ValueError(f"invalid date {date_text!r}; expected [-]YYYY-MM-DD")
    time_match = _TIME_RE.match(time_text.strip())
    if time_match is None:
        raise ValueError(f"invalid time {time_text!r}; expected HH:MM[:SS]")

    year, month, day = (int(part) for part in date_match.groups())
    hour, minute = int(time_match.group(1)), int(time_match.group(2))
    second = float(time_match.group(3) or 0.0)
    return CalendarInstant(year, month, day, hour, minute, second)


def format_summary(ephemeris: SunMoonEphemeris) -> str:
    scale = ephemeris.time_scale
    lines = [
        f"Instant (UT):          {scale.instant.isoformat()}",
        f"Dynamical Time:        {scale.dynamical_time.isoformat()}",
        f"Delta T:               {scale.delta_t:.1f} s",
        f"JDE:                   {scale.julian_ephemeris_day:.5f}",
        f"T:                     {scale.time:.12f}",
        f"Nutation (lon, obl):   {ephemeris.nutation_in_longitude.decimal_arcseconds:.3f}\" "
        f"{ephemeris.nutation_in_obliquity.decimal_arcseconds:.3f}\"",
        f"True obliquity:        {ephemeris.true_obliquity.decimal_degrees:.6f} deg",
        f"Sun RA / Dec:          {ephemeris.sun_right_ascension.decimal_degrees:.5f} / "
        f"{ephemeris.sun_declination.decimal_degrees:.5f} deg",
        f"Sun distance:          {ephemeris.sun_distance} km",
        f"Moon longitude:        {ephemeris.moon_apparent_longitude.decimal_degrees:.6f} deg",
        f"Moon latitude:         {ephemeris.moon_ecliptic_latitude.decimal_degrees:.6f} deg",
        f"Moon RA / Dec:         {ephemeris.moon_right_ascension.decimal_degrees:.6f} / "
        f"{ephemeris.moon_declination.decimal_degrees:.6f} deg",
        f"Moon distance:         {ephemeris.moon_distance:.1f} km",
        f"Moon elongation:       {ephemeris.moon_elongation.decimal_degrees:.4f} deg",
        f"Moon phase angle:      {ephemeris.moon_phase_angle.decimal_degrees:.4f} deg",
        f"Illuminated fraction:  {ephemeris.moon_illuminated_fraction:.4f}",
        f"Bright limb angle:     {ephemeris.moon_bright_limb_angle.decimal_degrees:.1f} deg",
    ]
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(
        description="Compute apparent Sun and Moon positions and the Moon's phase"
    )
    parser.add_argument(
        'date',
        help="Calendar date [-]YYYY-MM-DD (Julian calendar before 1582-10-15)"
    )
    parser.add_argument(
        '--time', '-t', default="00:00",
        help="Time of day HH:MM[:SS] (default: 00:00)"
    )
    parser.add_argument(
        '--dynamical', action='store_true', default=False,
        help="Interpret the instant as Dynamical Time instead of UT"
    )
    parser.add_argument(
        '--json', action='store_true', default=False,
        help="Print the values as a JSON object"
    )
    parser.add_argument(
        '--data-dir',
        help="Directory with replacement coefficient tables"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log table loading and numeric diagnostics to stderr"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        instant = parse_instant(args.date, args.time)
        tables = BundledTableSource(args.data_dir)
        if args.dynamical:
            ephemeris = SunMoonEphemeris.at_dynamical_time(instant, tables)
        else:
            ephemeris = SunMoonEphemeris.at(instant, tables)

        if args.json:
            print(json.dumps(ephemeris.summary(), indent=2))
        else:
            print(format_summary(ephemeris))

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
