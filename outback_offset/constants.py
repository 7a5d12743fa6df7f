"""Configuration constants for Outback Offset.

All tunable parameters are centralized here. Defaults reproduce the
fixed behaviour of the tool: a 3 m shift of the outbound leg to the
left of the direction of travel.

Classes:
    OffsetConfig: Lateral offset distance and Earth model
    TurnaroundConfig: Synthetic turnaround waypoint fields
    ProjectionConfig: Outbound waypoint projection parameters
    GeoConfig: Constants for diagnostic distance calculations
    CLIConfig: Command line defaults
"""

from math import pi


class OffsetConfig:
    """Lateral offset applied to the outbound leg."""

    # Shift distance perpendicular to the direction of travel (meters)
    OFFSET_DISTANCE_M = 3.0

    # Spherical Earth radius for the offset formula (WGS84 equatorial radius)
    EARTH_RADIUS_M = 6_378_137.0

    # Perpendicular bearing is bearing + 90°, always the same side
    PERPENDICULAR_RAD = pi / 2


class TurnaroundConfig:
    """Fields of the synthetic waypoint marking the turnaround point."""

    WAYPOINT_NAME = "TURN AROUND"
    WAYPOINT_TYPE = "GENERAL DISTANCE"
    WAYPOINT_ELEVATION = 0.0


class ProjectionConfig:
    """Outbound waypoint projection onto the outbound track segments."""

    # Local linearized meters space: meters per degree of latitude.
    # Longitude is scaled by cos(latitude) on top of this.
    METERS_PER_DEGREE_LAT = 111_111.0

    # Waypoint naming: "Water Rtn" -> "Water Out", "Summit" -> "Summit Out"
    RETURN_TAG = "Rtn"
    OUTBOUND_TAG = "Out"


class GeoConfig:
    """Constants for great-circle diagnostics."""

    # Mean Earth radius (WGS84 spherical approximation)
    MEAN_EARTH_RADIUS_M = 6_371_000


class CLIConfig:
    """Command line defaults."""

    PROG_NAME = "outback-offset"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
