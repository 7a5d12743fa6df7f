"""Waypoint - A named point of interest attached to a route."""

from dataclasses import dataclass
from typing import Optional

from outback_offset.model.coordinate import Coordinate


@dataclass
class Waypoint:
    """A point of interest, independent of the track points.

    Attributes:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees
        elevation: Elevation in meters, None if unknown
        name: Display name
        type: Category label (e.g. "GENERAL DISTANCE")

    Example:
        wp = Waypoint(lat=46.985, lon=10.295, elevation=0.0, name="TURN AROUND", type="GENERAL DISTANCE")
    """

    lat: float
    lon: float
    elevation: Optional[float] = None
    name: Optional[str] = None
    type: Optional[str] = None

    @property
    def coordinate(self) -> Coordinate:
        """Position as an immutable Coordinate."""
        return Coordinate(lat=self.lat, lon=self.lon)

    @classmethod
    def at(
        cls,
        coordinate: Coordinate,
        elevation: Optional[float],
        name: Optional[str],
        type: Optional[str],
    ) -> "Waypoint":
        """Create a waypoint at the given coordinate."""
        return cls(lat=coordinate.lat, lon=coordinate.lon, elevation=elevation, name=name, type=type)
