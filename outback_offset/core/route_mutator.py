"""Route mutation: shift the outbound leg of an out-and-back route.

Single pass over one route:
1. Locate the turnaround point on the first track segment
2. Optionally project outbound copies of the existing waypoints
3. Append a "TURN AROUND" waypoint at the turnaround point
4. Offset every outbound point (index < turnaround index) sideways,
   using its successor as the direction of travel

Points from the turnaround index onward are the return leg and are never
touched. Mutation happens in place; applying it twice compounds the offset.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from outback_offset.constants import OffsetConfig, TurnaroundConfig
from outback_offset.core.geo_calculator import GeoCalculator
from outback_offset.core.turnaround_locator import Turnaround, TurnaroundLocator
from outback_offset.core.waypoint_projector import WaypointProjector
from outback_offset.model.route import Route
from outback_offset.model.waypoint import Waypoint

logger = logging.getLogger(__name__)


class WaypointMode(Enum):
    """Which waypoints the mutator creates."""

    TURNAROUND_ONLY = "turnaround_only"
    PROJECT_ALL = "project_all"


@dataclass
class MutationResult:
    """Outcome of one RouteMutator.apply() call.

    Attributes:
        route: The (possibly) mutated route, same object as the input
        track_data_found: False if the route had no track data to process
        turnaround: Located turnaround, None without track data
        points_offset: Number of track points moved
        waypoints_created: Number of waypoints appended, turnaround marker included
    """

    route: Route
    track_data_found: bool
    turnaround: Optional[Turnaround] = None
    points_offset: int = 0
    waypoints_created: int = 0


class RouteMutator:
    """Applies the outbound lateral offset to a route.

    Example:
        mutator = RouteMutator()
        result = mutator.apply(route)
        if not result.track_data_found:
            ...
    """

    def __init__(
        self,
        waypoint_mode: WaypointMode = WaypointMode.TURNAROUND_ONLY,
        offset_distance_m: float = OffsetConfig.OFFSET_DISTANCE_M,
        earth_radius_m: float = OffsetConfig.EARTH_RADIUS_M,
    ) -> None:
        self.waypoint_mode = waypoint_mode
        self.offset_distance_m = offset_distance_m
        self.earth_radius_m = earth_radius_m

    @staticmethod
    def turnaround_waypoint(turnaround: Turnaround) -> Waypoint:
        """Synthetic waypoint marking the turnaround point."""
        return Waypoint.at(
            coordinate=turnaround.coordinate,
            elevation=TurnaroundConfig.WAYPOINT_ELEVATION,
            name=TurnaroundConfig.WAYPOINT_NAME,
            type=TurnaroundConfig.WAYPOINT_TYPE,
        )

    def apply(self, route: Route) -> MutationResult:
        """Offset the outbound leg of the route in place.

        Args:
            route: Route to mutate. Only tracks[0].segments[0] is processed.

        Returns:
            MutationResult. Without track data the route is returned
            unchanged and track_data_found is False.
        """
        segment = route.first_segment
        if segment is None:
            logger.warning("No track data found in route, nothing to offset")
            return MutationResult(route=route, track_data_found=False)

        points = segment.points
        turnaround = TurnaroundLocator.locate(points)
        logger.info(
            f"Found turnaround point at index {turnaround.index}: "
            f"{turnaround.coordinate.lat:.6f}, {turnaround.coordinate.lon:.6f}"
        )

        new_waypoints = []
        if self.waypoint_mode is WaypointMode.PROJECT_ALL:
            projector = WaypointProjector(offset_distance_m=self.offset_distance_m, earth_radius_m=self.earth_radius_m)
            new_waypoints.extend(
                projector.project(waypoints=route.waypoints, points=points, turnaround_index=turnaround.index)
            )
        new_waypoints.append(self.turnaround_waypoint(turnaround))
        route.waypoints.extend(new_waypoints)
        logger.info(f"Created {len(new_waypoints)} outbound waypoints")

        # Point i+1 is read before it is moved, so each point is offset
        # against its successor's recorded position.
        moved = 0
        for i in range(turnaround.index):
            if i + 1 >= len(points):
                break
            shifted = GeoCalculator.offset_coordinate(
                p1=points[i].coordinate,
                p2=points[i + 1].coordinate,
                distance_m=self.offset_distance_m,
                earth_radius_m=self.earth_radius_m,
            )
            points[i].move_to(shifted)
            moved += 1

        logger.info(f"Offset {moved} track points")

        return MutationResult(
            route=route,
            track_data_found=True,
            turnaround=turnaround,
            points_offset=moved,
            waypoints_created=len(new_waypoints),
        )
