"""TrackPoint - A single recorded position on a track segment."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from outback_offset.model.coordinate import Coordinate


@dataclass
class TrackPoint:
    """A recorded point with position, elevation and optional timestamp.

    Track points are owned by their segment and are the only objects the
    route mutator moves. Moving a point changes lat/lon only.

    Attributes:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees
        elevation: Elevation in meters, None if not recorded
        time: Recording timestamp, None if not recorded
    """

    lat: float
    lon: float
    elevation: Optional[float] = None
    time: Optional[datetime] = None

    @property
    def coordinate(self) -> Coordinate:
        """Position as an immutable Coordinate."""
        return Coordinate(lat=self.lat, lon=self.lon)

    def move_to(self, coordinate: Coordinate) -> None:
        """Replace the position, keeping elevation and time."""
        self.lat = coordinate.lat
        self.lon = coordinate.lon
