"""Coordinate - The fundamental geometry atom for route processing.

A Coordinate is a (latitude, longitude) pair in decimal degrees.
Track points and waypoints expose their position as a Coordinate, and the
turnaround locator and lateral offset work on Coordinates.

Latitude is conventionally in [-90, 90] and longitude in [-180, 180];
neither range is enforced. Only finiteness is validated.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Coordinate:
    """A geographic position in decimal degrees (WGS84).

    Attributes:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees

    Example:
        coord = Coordinate(lat=46.985, lon=10.295)
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if not (np.isfinite(self.lat) and np.isfinite(self.lon)):
            raise ValueError(f"Coordinate must be finite, got ({self.lat}, {self.lon})")

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.lat, self.lon)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON order."""
        return (self.lon, self.lat)

    def __repr__(self) -> str:
        return f"Coordinate(lat={self.lat:.6f}, lon={self.lon:.6f})"
