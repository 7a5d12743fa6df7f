"""Turnaround detection for out-and-back tracks.

The turnaround is the point farthest from the start, measured as squared
Euclidean distance in raw degree space (dLat² + dLon², not meters). At the
scale of a single outing this is a good proxy for true distance.

Everything after the turnaround index is treated as the return leg by
index order, not by geometric retracing.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from outback_offset.model.coordinate import Coordinate
from outback_offset.model.track_point import TrackPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Turnaround:
    """Located reversal point of an out-and-back track.

    Attributes:
        coordinate: Position of the turnaround point
        index: Index of the turnaround point in the track
    """

    coordinate: Coordinate
    index: int


class TurnaroundLocator:
    """Finds the reversal point of an out-and-back track."""

    @staticmethod
    def squared_displacements(points: Sequence[TrackPoint]) -> np.ndarray:
        """Squared degree-space distance of every point from the first point."""
        lat_lon = np.array([(p.lat, p.lon) for p in points], dtype=float)
        delta = lat_lon - lat_lon[0]
        return delta[:, 0] ** 2 + delta[:, 1] ** 2

    @staticmethod
    def locate(points: Sequence[TrackPoint]) -> Turnaround:
        """Locate the point with the largest displacement from the start.

        Ties keep the earliest maximum. If all points coincide the start
        point (index 0) is returned.

        Args:
            points: Track points in recording order, must not be empty

        Returns:
            Turnaround with the coordinate and index of the farthest point.

        Raises:
            ValueError: If points is empty.
        """
        if len(points) == 0:
            raise ValueError("Turnaround search requires at least one track point")

        # argmax returns the first occurrence of the maximum
        index = int(np.argmax(TurnaroundLocator.squared_displacements(points)))
        turnaround = Turnaround(coordinate=points[index].coordinate, index=index)
        logger.debug(f"Turnaround at index {index} of {len(points)} points")
        return turnaround
