"""
Command line front end for BMN conversions.

Examples
--------
    python -m bmn to-wgs84 "M31 450000 350000"
    python -m bmn to-bmn 48.2082 16.3738
    python -m bmn to-bmn 47.0 11.8 --meridian M31
    python -m bmn zone 13.5
"""

import argparse
import sys
from typing import List, Optional

from bmn.conversion import bmn_to_wgs84, wgs84_to_bmn
from bmn.exceptions import BMNError
from bmn.grid import parse_bmn
from bmn.zones import BMNMeridian, resolve_zone
from common.config import DEFAULT_CONFIG_FILE, ConfigError, load_config
from common.logging_config import get_logger, set_level, set_stream
from geospatial.coordinate_models import WGS84Point

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bmn",
        description="Convert between WGS84 latitude/longitude and Austrian BMN grid coordinates."
    )
    p.add_argument("--config", type=str, default=DEFAULT_CONFIG_FILE, help="Location of JSON configuration file.")
    sub = p.add_subparsers(dest="command", required=True)

    to_wgs84 = sub.add_parser("to-wgs84", help='Convert a BMN coordinate such as "M31 450000 350000".')
    to_wgs84.add_argument("coordinate", type=str, nargs="+", help="Zone code, right value, height value.")

    to_bmn = sub.add_parser("to-bmn", help="Convert a WGS84 latitude and longitude in degrees.")
    to_bmn.add_argument("lat", type=float)
    to_bmn.add_argument("lon", type=float)
    to_bmn.add_argument("--height", type=float, default=0.0, help="Ellipsoidal height in meters.")
    to_bmn.add_argument("--meridian", type=str, default=None, choices=[m.code for m in BMNMeridian if m.is_resolved])

    zone = sub.add_parser("zone", help="Print the meridian stripe of an MGI longitude in degrees.")
    zone.add_argument("lon", type=float)

    return p


def _run(args: argparse.Namespace) -> str:
    if args.command == "to-wgs84":
        point = bmn_to_wgs84(parse_bmn(" ".join(args.coordinate)))
        lat, lon = point.to_degrees()
        return f"{lat:.8f} {lon:.8f}"
    if args.command == "to-bmn":
        point = WGS84Point.from_degrees(args.lat, args.lon, args.height)
        return str(wgs84_to_bmn(point, args.meridian))
    return str(resolve_zone(args.lon))


def main(argv: Optional[List[str]] = None) -> int:
    # stdout carries results only
    set_stream(sys.stderr)
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error(str(e))
        return EXIT_ERROR
    set_level(config.log_level)

    try:
        output = _run(args)
    except BMNError as e:
        logger.warning(f"{e.kind.value}: {e}")
        return EXIT_ERROR
    except ValueError as e:
        # coordinates outside the valid latitude range
        logger.warning(f"out_of_range: {e}")
        return EXIT_ERROR

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
