"""
Command line entry point: ask routed for a route and a distance matrix.

    routed-query 35.0,139.0 35.1,139.1 --host localhost --port 5000

Each positional token is a "lat,lon" pair. Tokens that cannot be read are
skipped with a warning, or rejected when --strict is given.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from routing.config import load_settings, parse_timeout
from routing.errors import ConfigError, RoutedError
from routing.models import GeoPoint
from routing.routed_client import distance_matrix, route

logger = logging.getLogger(__name__)


def parse_point(token: str) -> GeoPoint:
    """'lat,lon' -> GeoPoint. Raises ValueError for anything else."""
    pair = token.split(",", 1)
    if len(pair) < 2:
        raise ValueError(f"expected lat,lon but got {token!r}")
    lat = float(pair[0])
    lon = float(pair[1])
    return GeoPoint(latitude=lat, longitude=lon)


def parse_points(tokens: Sequence[str], strict: bool = False) -> List[GeoPoint]:
    points = []
    for token in tokens:
        try:
            points.append(parse_point(token))
        except ValueError as e:
            if strict:
                raise
            logger.warning("Skipping malformed coordinate %r: %s", token, e)
    return points


def build_parser(defaults) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="routed-query",
        description="Query an OSRM-routed daemon for a route and a distance matrix.")
    parser.add_argument("points", nargs="*", metavar="LAT,LON",
                        help="Waypoints in order, e.g. 35.0,139.0")
    parser.add_argument("--host", default=defaults.endpoint.host,
                        help="routed host (default: %(default)s, env ROUTED_HOST)")
    parser.add_argument("--port", default=defaults.endpoint.port,
                        help="routed port (default: %(default)s, env ROUTED_PORT)")
    parser.add_argument("--timeout", type=parse_timeout, default=defaults.timeout,
                        help="Seconds to wait for routed (default: no override, env ROUTED_TIMEOUT)")
    parser.add_argument("--strict", action="store_true",
                        help="Fail on malformed coordinates instead of skipping them.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log the exact requests being made.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        defaults = load_settings()
    except ConfigError as e:
        print(f"routed-query: {e}", file=sys.stderr)
        return 2

    parser = build_parser(defaults)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(args.points) < 2:
        parser.error("at least two LAT,LON waypoints are required")

    try:
        points = parse_points(args.points, strict=args.strict)
    except ValueError as e:
        parser.error(str(e))
    if len(points) < 2:
        parser.error("at least two LAT,LON waypoints are required (after skipping malformed ones)")

    try:
        print(route(args.host, args.port, points, timeout=args.timeout))
        print(distance_matrix(args.host, args.port, points, timeout=args.timeout))
    except RoutedError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
