"""Route - The aggregate handed to the route mutator.

A Route holds metadata, the recorded tracks and the waypoint collection.
Only the first segment of the first track is processed; further tracks
and segments are carried along untouched.

Lifecycle:
    1. Built from a parsed file by the GPX adapter
    2. Mutated exactly once by RouteMutator.apply()
    3. Written back to the parsed document for serialization
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from outback_offset.model.track_point import TrackPoint
from outback_offset.model.waypoint import Waypoint


@dataclass
class RouteMetadata:
    """Descriptive fields of a route, never modified by processing.

    Attributes:
        name: Route name
        time: Creation time of the file
        link: Source link (href)
        creator: Application that wrote the file
    """

    name: Optional[str] = None
    time: Optional[datetime] = None
    link: Optional[str] = None
    creator: Optional[str] = None


@dataclass
class TrackSegment:
    """Ordered sequence of track points in recording order."""

    points: list[TrackPoint] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)


@dataclass
class Track:
    """A named track made of one or more segments."""

    name: Optional[str] = None
    segments: list[TrackSegment] = field(default_factory=list)


@dataclass
class Route:
    """Aggregate of metadata, tracks and waypoints.

    Attributes:
        metadata: Descriptive fields (name, creation time, source link)
        tracks: Recorded tracks; only tracks[0].segments[0] is processed
        waypoints: Points of interest in insertion order
    """

    metadata: RouteMetadata = field(default_factory=RouteMetadata)
    tracks: list[Track] = field(default_factory=list)
    waypoints: list[Waypoint] = field(default_factory=list)

    @property
    def first_segment(self) -> Optional[TrackSegment]:
        """First segment of the first track, or None if there is no track data.

        A segment without points counts as no track data.
        """
        if not self.tracks or not self.tracks[0].segments:
            return None
        segment = self.tracks[0].segments[0]
        if not segment.points:
            return None
        return segment

    @property
    def has_track_data(self) -> bool:
        """Whether there is a non-empty first segment to process."""
        return self.first_segment is not None
