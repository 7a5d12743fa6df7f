"""Command line entry point.

Reads an out-and-back GPX track, shifts the outbound leg and writes the
result to a new file.

Run: outback-offset input.gpx output.gpx
     python -m outback_offset.cli input.gpx output.gpx --project-waypoints

Exit codes: 0 on success (also when the file has no track data and is
written through unchanged), 1 on read, parse or write failure, 2 on
invalid arguments.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

import gpxpy.gpx

from outback_offset.constants import CLIConfig
from outback_offset.core.geo_calculator import GeoCalculator
from outback_offset.core.route_mutator import MutationResult, RouteMutator, WaypointMode
from outback_offset.gpx_adapter import apply_route_to_gpx, load_gpx, route_from_gpx, save_gpx
from outback_offset.model.coordinate import Coordinate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog=CLIConfig.PROG_NAME,
        description="Offset the outbound leg of an out-and-back GPX track so both legs render as separate lines",
        epilog="Examples:\n"
        f"  {CLIConfig.PROG_NAME} run.gpx run_offset.gpx\n"
        f"  {CLIConfig.PROG_NAME} hike.gpx hike_offset.gpx --project-waypoints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="GPX file to read")
    parser.add_argument("output", help="GPX file to write")
    parser.add_argument(
        "--project-waypoints",
        action="store_true",
        help="Also create an outbound copy of every existing waypoint",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def log_summary(result: MutationResult, start: Coordinate) -> None:
    """Log where the turnaround is relative to the recorded start point."""
    if result.turnaround is None:
        return
    distance_m = GeoCalculator.haversine_distance_m(
        lat1=start.lat,
        lon1=start.lon,
        lat2=result.turnaround.coordinate.lat,
        lon2=result.turnaround.coordinate.lon,
    )
    logger.info(f"Turnaround is {distance_m:.0f} m from the start in a straight line")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool.

    Args:
        argv: Arguments without the program name, defaults to sys.argv[1:]

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=CLIConfig.LOG_FORMAT,
    )

    try:
        gpx = load_gpx(args.input)
    except OSError as e:
        logger.error(f"Error reading file: {e}")
        return 1
    except (gpxpy.gpx.GPXException, UnicodeDecodeError) as e:
        logger.error(f"Error parsing GPX: {e}")
        return 1

    mode = WaypointMode.PROJECT_ALL if args.project_waypoints else WaypointMode.TURNAROUND_ONLY
    route = route_from_gpx(gpx)
    start = route.first_segment.points[0].coordinate if route.has_track_data else None
    result = RouteMutator(waypoint_mode=mode).apply(route)

    if result.track_data_found:
        log_summary(result, start=start)
        apply_route_to_gpx(route, gpx)

    try:
        save_gpx(gpx, args.output)
    except OSError as e:
        logger.error(f"Error writing output file: {e}")
        return 1

    logger.info(f"Successfully wrote modified GPX to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
