"""Outback Offset - Separate the outbound and return legs of a GPX track.

An out-and-back recording retraces itself, so on a map both legs draw as
one line. This package finds the turnaround point and shifts the outbound
leg a few meters sideways, so the two legs render as distinct lines.

Modules:
    core: Turnaround detection, lateral offset, route mutation
    model: Data structures (Coordinate, TrackPoint, Waypoint, Route)
    gpx_adapter: GPX file reading and writing (gpxpy)
    cli: Command line entry point

Example:
    from outback_offset.core import RouteMutator
    from outback_offset.gpx_adapter import load_gpx, route_from_gpx
"""
