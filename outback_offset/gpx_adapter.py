"""GPX file adapter built on gpxpy.

Converts between GPX documents and the in-memory Route model:
- load_gpx(): read and parse a GPX file
- route_from_gpx(): build a Route from a parsed document
- apply_route_to_gpx(): write the route's changes back into the document
- save_gpx(): serialize the document to a file

The parsed gpxpy document is kept for writing. Only the first segment's
point coordinates and the appended waypoints are written back, so all
other content round-trips as gpxpy parsed it.

Errors are not handled here: unreadable files raise OSError, malformed
documents raise gpxpy.gpx.GPXException.
"""

import logging
from pathlib import Path
from typing import Union

import gpxpy
import gpxpy.gpx

from outback_offset.model.route import Route, RouteMetadata, Track, TrackSegment
from outback_offset.model.track_point import TrackPoint
from outback_offset.model.waypoint import Waypoint

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_gpx(path: PathLike) -> gpxpy.gpx.GPX:
    """Read and parse a GPX file.

    Args:
        path: Path to the GPX file

    Returns:
        Parsed gpxpy document.

    Raises:
        OSError: If the file cannot be read.
        gpxpy.gpx.GPXException: If the content is not valid GPX.
        UnicodeDecodeError: If the file is not UTF-8 encoded.
    """
    with open(path, "r", encoding="utf-8") as gpx_file:
        gpx = gpxpy.parse(gpx_file)
    logger.info(f"Loaded {path}: {len(gpx.tracks)} track(s), {len(gpx.waypoints)} waypoint(s)")
    return gpx


def route_from_gpx(gpx: gpxpy.gpx.GPX) -> Route:
    """Build a Route from a parsed GPX document.

    Every track and segment is converted, but only the first segment of
    the first track is ever processed.
    """
    metadata = RouteMetadata(
        name=gpx.name,
        time=gpx.time,
        link=gpx.link,
        creator=gpx.creator,
    )

    tracks = [
        Track(
            name=gpx_track.name,
            segments=[
                TrackSegment(
                    points=[
                        TrackPoint(
                            lat=point.latitude,
                            lon=point.longitude,
                            elevation=point.elevation,
                            time=point.time,
                        )
                        for point in gpx_segment.points
                    ]
                )
                for gpx_segment in gpx_track.segments
            ],
        )
        for gpx_track in gpx.tracks
    ]

    waypoints = [
        Waypoint(
            lat=wp.latitude,
            lon=wp.longitude,
            elevation=wp.elevation,
            name=wp.name,
            type=wp.type,
        )
        for wp in gpx.waypoints
    ]

    return Route(metadata=metadata, tracks=tracks, waypoints=waypoints)


def apply_route_to_gpx(route: Route, gpx: gpxpy.gpx.GPX) -> None:
    """Write the route's changes back into the document it was built from.

    Copies lat/lon of the first segment's points and appends the waypoints
    added after the document's own. Nothing else is touched.

    Args:
        route: Route built by route_from_gpx(gpx), possibly mutated
        gpx: The document the route was built from

    Raises:
        ValueError: If the route does not match the document's shape.
    """
    if len(route.waypoints) < len(gpx.waypoints):
        raise ValueError(
            f"Route has {len(route.waypoints)} waypoints, document has {len(gpx.waypoints)}; "
            "waypoints can only be appended"
        )

    segment = route.first_segment
    if segment is not None:
        gpx_points = gpx.tracks[0].segments[0].points
        if len(gpx_points) != len(segment.points):
            raise ValueError(
                f"Route segment has {len(segment.points)} points, document segment has {len(gpx_points)}"
            )
        for gpx_point, point in zip(gpx_points, segment.points):
            gpx_point.latitude = point.lat
            gpx_point.longitude = point.lon

    for wp in route.waypoints[len(gpx.waypoints) :]:
        gpx_wp = gpxpy.gpx.GPXWaypoint(
            latitude=wp.lat,
            longitude=wp.lon,
            elevation=wp.elevation,
            name=wp.name,
            type=wp.type,
        )
        gpx.waypoints.append(gpx_wp)


def save_gpx(gpx: gpxpy.gpx.GPX, path: PathLike) -> None:
    """Serialize the document to a GPX file.

    Raises:
        OSError: If the file cannot be written.
    """
    xml = gpx.to_xml()
    with open(path, "w", encoding="utf-8") as f:
        f.write(xml)
    logger.info(f"Wrote {path}")
