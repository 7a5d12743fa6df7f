"""Core route processing: turnaround detection and lateral offset.

- GeoCalculator: Bearings, lateral offset, local projections
- TurnaroundLocator: Reversal point of an out-and-back track
- WaypointProjector: Outbound copies of existing waypoints
- RouteMutator: Single-pass mutation of a route
"""

from outback_offset.core.geo_calculator import GeoCalculator
from outback_offset.core.route_mutator import (
    MutationResult,
    RouteMutator,
    WaypointMode,
)
from outback_offset.core.turnaround_locator import Turnaround, TurnaroundLocator
from outback_offset.core.waypoint_projector import WaypointProjector

__all__ = [
    # Geo calculator
    "GeoCalculator",
    # Turnaround locator
    "Turnaround",
    "TurnaroundLocator",
    # Waypoint projector
    "WaypointProjector",
    # Route mutator
    "RouteMutator",
    "MutationResult",
    "WaypointMode",
]
