"""Shared pytest fixtures for end-to-end workflow tests.

Workflows run the command line tool on real GPX files in a temporary
directory. Sample files are written with gpxpy.

COORDINATE SYSTEM:
    Same as tests/: the track runs north along 10°E from 46°N and back.
    A step of 0.001° latitude is ~111 m.
"""

from datetime import datetime, timedelta, timezone

import gpxpy.gpx
import pytest

OUT_AND_BACK_LATS = [46.000, 46.001, 46.002, 46.003, 46.002, 46.001, 46.000]


def build_out_and_back_gpx(with_waypoint: bool = True) -> gpxpy.gpx.GPX:
    """Out-and-back run: 7 points, turnaround at index 3."""
    gpx = gpxpy.gpx.GPX()
    gpx.creator = "Test Watch"
    gpx.name = "Riverside Out and Back"
    gpx.time = datetime(2024, 6, 1, 8, 0, 0, tzinfo=timezone.utc)

    if with_waypoint:
        water = gpxpy.gpx.GPXWaypoint(latitude=46.0015, longitude=10.00001, elevation=505.0, name="Water Rtn", type="WATER")
        gpx.waypoints.append(water)

    track = gpxpy.gpx.GPXTrack(name="Run")
    segment = gpxpy.gpx.GPXTrackSegment()
    for i, lat in enumerate(OUT_AND_BACK_LATS):
        segment.points.append(
            gpxpy.gpx.GPXTrackPoint(
                lat,
                10.0,
                elevation=500.0 + i,
                time=gpx.time + timedelta(seconds=30 * i),
            )
        )
    track.segments.append(segment)
    gpx.tracks.append(track)
    return gpx


@pytest.fixture
def out_and_back_file(tmp_path):
    """Path to an out-and-back GPX file with one return-leg waypoint."""
    path = tmp_path / "run.gpx"
    path.write_text(build_out_and_back_gpx().to_xml(), encoding="utf-8")
    return path


@pytest.fixture
def no_track_file(tmp_path):
    """Path to a GPX file with a waypoint but no track."""
    gpx = gpxpy.gpx.GPX()
    gpx.name = "Just a Pin"
    gpx.waypoints.append(gpxpy.gpx.GPXWaypoint(latitude=46.0, longitude=10.0, name="Car Park"))
    path = tmp_path / "pin.gpx"
    path.write_text(gpx.to_xml(), encoding="utf-8")
    return path


@pytest.fixture
def output_path(tmp_path):
    """Path for the tool's output file."""
    return tmp_path / "out.gpx"
