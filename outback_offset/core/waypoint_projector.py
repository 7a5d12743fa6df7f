"""Outbound waypoint projection.

Optional mode of the route mutator. Waypoints recorded along the return
leg get an outbound twin: each waypoint is matched to its nearest
outbound track segment and a copy is placed at that segment's offset
start point, so it sits on the shifted outbound line.

Matching uses GeoCalculator.distance_to_segment_m(), a local meters-space
approximation rather than a geodesic distance.
"""

import logging
from typing import Optional, Sequence

from outback_offset.constants import OffsetConfig, ProjectionConfig
from outback_offset.core.geo_calculator import GeoCalculator
from outback_offset.model.coordinate import Coordinate
from outback_offset.model.track_point import TrackPoint
from outback_offset.model.waypoint import Waypoint

logger = logging.getLogger(__name__)


class WaypointProjector:
    """Creates outbound copies of waypoints next to the shifted outbound leg.

    Must run on the track before it is offset: segments are matched and
    offset from the recorded positions.

    Example:
        projector = WaypointProjector()
        outbound = projector.project(waypoints=route.waypoints, points=segment.points, turnaround_index=12)
    """

    def __init__(
        self,
        offset_distance_m: float = OffsetConfig.OFFSET_DISTANCE_M,
        earth_radius_m: float = OffsetConfig.EARTH_RADIUS_M,
    ) -> None:
        self.offset_distance_m = offset_distance_m
        self.earth_radius_m = earth_radius_m

    @staticmethod
    def outbound_name(name: Optional[str]) -> str:
        """Derive the outbound waypoint name.

        "Rtn" is replaced by "Out"; names without "Out" afterwards get
        " Out" appended. A missing name is treated as empty.
        """
        renamed = (name or "").replace(ProjectionConfig.RETURN_TAG, ProjectionConfig.OUTBOUND_TAG)
        if ProjectionConfig.OUTBOUND_TAG not in renamed:
            renamed = f"{renamed.strip()} {ProjectionConfig.OUTBOUND_TAG}"
        return renamed

    @staticmethod
    def closest_outbound_segment(
        target: Coordinate,
        points: Sequence[TrackPoint],
        turnaround_index: int,
    ) -> Optional[int]:
        """Index i of the outbound segment (i, i+1) closest to target.

        Only segments with i < turnaround_index are considered. The first
        of several equally close segments wins.

        Returns:
            Segment start index, or None if the outbound leg has no segment.
        """
        best_index = None
        best_dist = float("inf")

        for i in range(min(turnaround_index, len(points) - 1)):
            dist = GeoCalculator.distance_to_segment_m(
                point=target,
                start=points[i].coordinate,
                end=points[i + 1].coordinate,
            )
            if dist < best_dist:
                best_dist = dist
                best_index = i

        return best_index

    def project(
        self,
        waypoints: Sequence[Waypoint],
        points: Sequence[TrackPoint],
        turnaround_index: int,
    ) -> list[Waypoint]:
        """Create one outbound waypoint per input waypoint.

        Args:
            waypoints: Original waypoints (not modified)
            points: Track points of the segment, not yet offset
            turnaround_index: Index of the turnaround point

        Returns:
            New waypoints in input order. Empty if the outbound leg has no
            segment to project onto.
        """
        if turnaround_index < 1 or len(points) < 2:
            if waypoints:
                logger.warning(f"No outbound segment to project {len(waypoints)} waypoint(s) onto, skipping")
            return []

        outbound = []
        for wp in waypoints:
            i = self.closest_outbound_segment(target=wp.coordinate, points=points, turnaround_index=turnaround_index)
            position = GeoCalculator.offset_coordinate(
                p1=points[i].coordinate,
                p2=points[i + 1].coordinate,
                distance_m=self.offset_distance_m,
                earth_radius_m=self.earth_radius_m,
            )
            outbound.append(
                Waypoint.at(
                    coordinate=position,
                    elevation=wp.elevation,
                    name=self.outbound_name(wp.name),
                    type=wp.type,
                )
            )
            logger.debug(f"Projected waypoint '{wp.name}' onto outbound segment {i}")

        return outbound
