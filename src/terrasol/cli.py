# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for geodesy and sunrise/sunset calculations.

Usage:
    # Distances (miles on Earth by default)
    terrasol distance 40.7128 -74.0060 51.5074 -0.1278
    terrasol --metric distance 40.7128 -74.0060 51.5074 -0.1278 --method rhumb
    terrasol --planet mars distance 0 0 10 10

    # Bearings and points
    terrasol bearing 40.7128 -74.0060 51.5074 -0.1278 --rhumb
    terrasol midpoint 40.7128 -74.0060 51.5074 -0.1278
    terrasol antipode 40.7128 -74.0060
    terrasol destination 40.7128 -74.0060 45 100
    terrasol --metric horizon 1.8

    # Sunrise and sunset (UTC)
    terrasol sun 40.7128 -74.0060 --date 2023-06-21 --zenith civil
    terrasol sun-table 40.7128 -74.0060 --start 2023-06-01 --days 30 -o june.csv

    # Degrees/minutes/seconds
    terrasol dms -74.0060
"""
import argparse
import logging
import sys
from datetime import date, datetime, timezone

from terrasol.domain.angles import to_dms
from terrasol.domain.coordinate import Coordinate
from terrasol.domain.geodesy import (
    antipode,
    destination_point,
    distance_to_horizon,
    distance_to_horizon_metric,
    equirectangular_distance,
    great_circle_bearing,
    haversine_distance,
    midpoint,
    rhumb_bearing,
    rhumb_distance,
    validate_coordinate,
)
from terrasol.domain.planet import PLANET_RADII
from terrasol.domain.sun_times import SunZenith, solar_day
from terrasol.adapters.csv_exporter import CsvSolarTableExporter, build_solar_table

_DISTANCE_METHODS = {
    'haversine': haversine_distance,
    'equirectangular': equirectangular_distance,
    'rhumb': rhumb_distance,
}


def _coordinate(lat: float, lon: float) -> Coordinate:
    return validate_coordinate(Coordinate(latitude=lat, longitude=lon))


def _parse_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise ValueError(f"invalid date {text!r}, expected YYYY-MM-DD") from None


def _format_coordinate(c: Coordinate) -> str:
    return f"{c.latitude:.6f}, {c.longitude:.6f}"


def _format_event(value: datetime | None, label: str) -> str:
    if value is None:
        return f"{label}: none"
    return f"{label}: {value.strftime('%Y-%m-%d %H:%M')} UTC"


def _add_pair_args(parser: argparse.ArgumentParser) -> None:
    for name in ('lat1', 'lon1', 'lat2', 'lon2'):
        parser.add_argument(name, type=float)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='terrasol',
        description="Great-circle geodesy and sunrise/sunset times",
    )
    parser.add_argument(
        '--planet', choices=sorted(PLANET_RADII), default='earth',
        help="Body whose mean radius scales distances (default: earth)",
    )
    parser.add_argument(
        '--metric', action='store_true', default=False,
        help="Kilometers and meters instead of miles and feet",
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log debug output to stderr",
    )
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('distance', help="Distance between two points")
    _add_pair_args(p)
    p.add_argument('--method', choices=sorted(_DISTANCE_METHODS), default='haversine')

    p = sub.add_parser('bearing', help="Initial bearing from the first point to the second")
    _add_pair_args(p)
    p.add_argument('--rhumb', action='store_true', default=False,
                   help="Constant (rhumb line) bearing instead of great-circle")

    p = sub.add_parser('midpoint', help="Great-circle midpoint")
    _add_pair_args(p)

    p = sub.add_parser('antipode', help="Opposite coordinate (-lat, -lon)")
    p.add_argument('lat', type=float)
    p.add_argument('lon', type=float)

    p = sub.add_parser('destination', help="Point at a bearing and distance")
    p.add_argument('lat', type=float)
    p.add_argument('lon', type=float)
    p.add_argument('bearing', type=float, help="Degrees clockwise from north")
    p.add_argument('distance', type=float, help="Miles, or km with --metric")

    p = sub.add_parser('horizon', help="Distance to the horizon from a height")
    p.add_argument('height', type=float, help="Feet, or meters with --metric")

    p = sub.add_parser('dms', help="Decimal degrees to degrees/minutes/seconds")
    p.add_argument('value', type=float)

    zenith_choices = [z.name.lower() for z in SunZenith]

    p = sub.add_parser('sun', help="Sunrise, sunset and day length (UTC)")
    p.add_argument('lat', type=float)
    p.add_argument('lon', type=float)
    p.add_argument('--date', help="UTC date YYYY-MM-DD (default: today)")
    p.add_argument('--zenith', choices=zenith_choices, default='official')

    p = sub.add_parser('sun-table', help="Export sunrise/sunset for a date range to CSV")
    p.add_argument('lat', type=float)
    p.add_argument('lon', type=float)
    p.add_argument('--start', required=True, help="First UTC date YYYY-MM-DD")
    p.add_argument('--days', type=int, default=30)
    p.add_argument('--zenith', choices=zenith_choices, default='official')
    p.add_argument('--output', '-o', required=True, help="CSV output path")

    return parser


def run(args: argparse.Namespace) -> str:
    """Execute a parsed command and return the text to print."""
    imperial, metric = PLANET_RADII[args.planet]
    radius = metric if args.metric else imperial
    unit = 'km' if args.metric else 'mi'

    if args.command == 'distance':
        f = _coordinate(args.lat1, args.lon1)
        s = _coordinate(args.lat2, args.lon2)
        distance = _DISTANCE_METHODS[args.method](f, s, radius=radius)
        return f"{distance:.3f} {unit}"

    if args.command == 'bearing':
        f = _coordinate(args.lat1, args.lon1)
        s = _coordinate(args.lat2, args.lon2)
        bearing = rhumb_bearing(f, s) if args.rhumb else great_circle_bearing(f, s)
        return f"{bearing:.4f}°"

    if args.command == 'midpoint':
        f = _coordinate(args.lat1, args.lon1)
        s = _coordinate(args.lat2, args.lon2)
        return _format_coordinate(midpoint(f, s))

    if args.command == 'antipode':
        return _format_coordinate(antipode(_coordinate(args.lat, args.lon)))

    if args.command == 'destination':
        start = _coordinate(args.lat, args.lon)
        return _format_coordinate(
            destination_point(start, args.bearing, args.distance, radius=radius)
        )

    if args.command == 'horizon':
        if args.metric:
            distance = distance_to_horizon_metric(args.height, radius=radius)
        else:
            distance = distance_to_horizon(args.height, radius=radius)
        return f"{distance:.3f} {unit}"

    if args.command == 'dms':
        dms = to_dms(args.value)
        sign = '-' if dms.is_negative else ''
        return f"{sign}{abs(dms.degrees):.0f}° {dms.minutes:.0f}' {dms.seconds:.4f}\""

    if args.command == 'sun':
        c = _coordinate(args.lat, args.lon)
        on = _parse_date(args.date) if args.date else datetime.now(tz=timezone.utc).date()
        result = solar_day(c, on, SunZenith[args.zenith.upper()])
        hours = result.duration_s / 3600.0
        return "\n".join([
            _format_event(result.sunrise, "Sunrise"),
            _format_event(result.sunset, "Sunset"),
            f"Day length: {hours:.2f} h",
        ])

    if args.command == 'sun-table':
        c = _coordinate(args.lat, args.lon)
        rows = build_solar_table(
            c, _parse_date(args.start), args.days, SunZenith[args.zenith.upper()],
        )
        n = CsvSolarTableExporter().export(rows, args.output)
        return f"Exported {n} days to {args.output}"

    raise ValueError(f"unknown command {args.command!r}")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        print(run(args))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: cannot write output: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
