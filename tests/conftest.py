"""Shared pytest fixtures for outback_offset tests.

Provides reusable out-and-back tracks and routes.
All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    Tracks run along the 10°E meridian starting at 46°N. A step of 0.001°
    latitude is ~111 m, so a 5-point track is a ~220 m out-and-back.
    Heading due North, the offset (bearing + 90°) points due East.
"""

from datetime import datetime, timedelta, timezone

import pytest

from outback_offset.model.route import Route, RouteMetadata, Track, TrackSegment
from outback_offset.model.track_point import TrackPoint
from outback_offset.model.waypoint import Waypoint

START_TIME = datetime(2024, 6, 1, 8, 0, 0, tzinfo=timezone.utc)


def make_points(lats: list[float], lon: float = 10.0) -> list[TrackPoint]:
    """Track points along one meridian, 10 s apart, elevation rising 1 m per point."""
    return [
        TrackPoint(lat=lat, lon=lon, elevation=500.0 + i, time=START_TIME + timedelta(seconds=10 * i))
        for i, lat in enumerate(lats)
    ]


def make_route(points: list[TrackPoint], waypoints: list[Waypoint] = None) -> Route:
    """Route with a single track holding a single segment."""
    return Route(
        metadata=RouteMetadata(name="Morning Run", time=START_TIME, link="https://example.com/activity/1"),
        tracks=[Track(name="Run", segments=[TrackSegment(points=points)])],
        waypoints=list(waypoints or []),
    )


@pytest.fixture
def north_south_points() -> list[TrackPoint]:
    """5 points: north for two steps, then back south.

    Turnaround is the northernmost point at index 2.
    """
    return make_points([46.000, 46.001, 46.002, 46.001, 46.000])


@pytest.fixture
def north_south_route(north_south_points: list[TrackPoint]) -> Route:
    """Route around north_south_points, no waypoints."""
    return make_route(north_south_points)


@pytest.fixture
def route_with_return_waypoint() -> Route:
    """Out-and-back route with one waypoint recorded on the return leg.

    The waypoint sits next to the point at 46.0015° on the way back, which is
    inside the second outbound segment (46.001 -> 46.002).
    """
    points = make_points([46.000, 46.001, 46.002, 46.003, 46.002, 46.001, 46.000])
    water = Waypoint(lat=46.0015, lon=10.00001, elevation=505.0, name="Water Rtn", type="WATER")
    return make_route(points, waypoints=[water])


@pytest.fixture
def empty_route() -> Route:
    """Route without any track."""
    return Route(metadata=RouteMetadata(name="Empty"), waypoints=[Waypoint(lat=46.0, lon=10.0, name="Car Park")])


@pytest.fixture
def point_factory():
    """Factory for custom tracks: point_factory([lat, ...], lon=10.0)."""
    return make_points


@pytest.fixture
def route_factory():
    """Factory for custom routes: route_factory(points, waypoints=None)."""
    return make_route
