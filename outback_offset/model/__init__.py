"""Data model classes for route representation.

- Coordinate: Geometry atom (lat, lon)
- TrackPoint: Recorded point (position, elevation, time)
- Waypoint: Named point of interest
- Route: Aggregate of metadata, tracks and waypoints
"""

from outback_offset.model.coordinate import Coordinate
from outback_offset.model.route import (
    Route,
    RouteMetadata,
    Track,
    TrackSegment,
)
from outback_offset.model.track_point import TrackPoint
from outback_offset.model.waypoint import Waypoint

__all__ = [
    "Coordinate",
    "TrackPoint",
    "Waypoint",
    "Route",
    "RouteMetadata",
    "Track",
    "TrackSegment",
]
