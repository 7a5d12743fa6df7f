"""Tests for outback_offset data model classes.

Tests: Coordinate, TrackPoint, Waypoint, Route
Focus: Validation, position accessors, track data detection
"""

import math

import pytest

from outback_offset.model.coordinate import Coordinate
from outback_offset.model.route import Route, Track, TrackSegment
from outback_offset.model.track_point import TrackPoint
from outback_offset.model.waypoint import Waypoint


class TestCoordinate:
    """Coordinate - the geometry atom."""

    def test_lat_lon_orders(self) -> None:
        """lat_lon is geographic order, lon_lat is GeoJSON order."""
        c = Coordinate(lat=46.97, lon=10.27)
        assert c.lat_lon == (46.97, 10.27)
        assert c.lon_lat == (10.27, 46.97)

    def test_ranges_not_enforced(self) -> None:
        """Out-of-range values are accepted, only finiteness is checked."""
        c = Coordinate(lat=95.0, lon=200.0)
        assert c.lat == 95.0

    @pytest.mark.parametrize("lat, lon", [(math.nan, 10.0), (46.0, math.inf), (-math.inf, 0.0)])
    def test_non_finite_rejected(self, lat: float, lon: float) -> None:
        """NaN and infinity raise ValueError."""
        with pytest.raises(ValueError, match="finite"):
            Coordinate(lat=lat, lon=lon)

    def test_frozen(self) -> None:
        """Coordinates are immutable values."""
        c = Coordinate(lat=46.0, lon=10.0)
        with pytest.raises(AttributeError):
            c.lat = 47.0


class TestTrackPoint:
    """TrackPoint - recorded point, moved in place by the mutator."""

    def test_move_to_keeps_elevation_and_time(self, north_south_points) -> None:
        """move_to() only replaces lat/lon."""
        point = north_south_points[0]
        elevation, time = point.elevation, point.time

        point.move_to(Coordinate(lat=46.5, lon=10.5))

        assert point.coordinate == Coordinate(lat=46.5, lon=10.5)
        assert point.elevation == elevation
        assert point.time == time

    def test_optional_fields_default_to_none(self) -> None:
        """Elevation and time are optional."""
        point = TrackPoint(lat=46.0, lon=10.0)
        assert point.elevation is None and point.time is None


class TestWaypoint:
    """Waypoint - named point of interest."""

    def test_at_coordinate(self) -> None:
        """Waypoint.at() copies the coordinate into lat/lon."""
        wp = Waypoint.at(coordinate=Coordinate(lat=46.0, lon=10.0), elevation=0.0, name="TURN AROUND", type="X")
        assert wp.coordinate == Coordinate(lat=46.0, lon=10.0)
        assert (wp.elevation, wp.name, wp.type) == (0.0, "TURN AROUND", "X")


class TestRoute:
    """Route - aggregate and track data detection."""

    def test_first_segment(self, north_south_route: Route) -> None:
        """First segment of the first track is returned."""
        assert north_south_route.first_segment is north_south_route.tracks[0].segments[0]
        assert north_south_route.has_track_data
        assert len(north_south_route.first_segment) == 5

    @pytest.mark.parametrize(
        "tracks",
        [
            [],
            [Track(segments=[])],
            [Track(segments=[TrackSegment(points=[])])],
        ],
        ids=["no_tracks", "no_segments", "empty_segment"],
    )
    def test_no_track_data(self, tracks: list[Track]) -> None:
        """No tracks, no segments or no points all mean no track data."""
        route = Route(tracks=tracks)
        assert route.first_segment is None
        assert not route.has_track_data
