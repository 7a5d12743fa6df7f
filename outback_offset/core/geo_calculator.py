"""Geographic calculations for out-and-back route processing.

Provides the geometric helpers used by the route mutator:
- Bearing calculation (initial heading between points)
- Lateral offset (shift a point perpendicular to its heading)
- Point-to-segment distance in a local meters space
- Great-circle distance (Haversine formula) for diagnostics

The lateral offset is a local flat-Earth displacement on a spherical Earth
(R = 6,378,137 m). It is only valid for offsets of a few meters, which is
all it is used for.
"""

from math import atan2, cos, pi, radians, sin, sqrt
from typing import Optional

from outback_offset.constants import GeoConfig, OffsetConfig, ProjectionConfig
from outback_offset.model.coordinate import Coordinate

DEGREES_PER_RADIAN = 180 / pi


class GeoCalculator:
    """Static methods for geographic calculations.

    Coordinates are in decimal degrees (WGS84).
    Bearings are in radians clockwise from North.
    Distances are in meters.
    """

    @staticmethod
    def initial_bearing_rad(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate initial bearing from point 1 to point 2.

        Coincident points give atan2(0, 0) = 0, i.e. due North.

        Args:
            lat1: Latitude of start point (decimal degrees)
            lon1: Longitude of start point (decimal degrees)
            lat2: Latitude of end point (decimal degrees)
            lon2: Longitude of end point (decimal degrees)

        Returns:
            Bearing in radians in (-pi, pi], clockwise from North.
        """
        lat1_rad, lat2_rad = radians(lat1), radians(lat2)
        dlon = radians(lon2) - radians(lon1)
        y = sin(dlon) * cos(lat2_rad)
        x = cos(lat1_rad) * sin(lat2_rad) - sin(lat1_rad) * cos(lat2_rad) * cos(dlon)
        return atan2(y, x)

    @staticmethod
    def lateral_offset(
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        distance_m: float = OffsetConfig.OFFSET_DISTANCE_M,
        earth_radius_m: float = OffsetConfig.EARTH_RADIUS_M,
    ) -> tuple[float, float]:
        """Shift point 1 perpendicular to the heading from point 1 to point 2.

        The perpendicular bearing is heading + 90°, so every segment is
        shifted to the same side.

        Args:
            lat1: Latitude of the point to shift (decimal degrees)
            lon1: Longitude of the point to shift (decimal degrees)
            lat2: Latitude of the next point (decimal degrees)
            lon2: Longitude of the next point (decimal degrees)
            distance_m: Shift distance in meters
            earth_radius_m: Spherical Earth radius in meters

        Returns:
            Tuple (lat, lon) of the shifted point in decimal degrees.
        """
        bearing = GeoCalculator.initial_bearing_rad(lat1=lat1, lon1=lon1, lat2=lat2, lon2=lon2)
        perp_bearing = bearing + OffsetConfig.PERPENDICULAR_RAD

        new_lat = lat1 + (distance_m * cos(perp_bearing) / earth_radius_m) * DEGREES_PER_RADIAN
        new_lon = lon1 + (distance_m * sin(perp_bearing) / (earth_radius_m * cos(radians(lat1)))) * DEGREES_PER_RADIAN
        return new_lat, new_lon

    @staticmethod
    def offset_coordinate(
        p1: Coordinate,
        p2: Coordinate,
        distance_m: float = OffsetConfig.OFFSET_DISTANCE_M,
        earth_radius_m: float = OffsetConfig.EARTH_RADIUS_M,
    ) -> Coordinate:
        """Return a new Coordinate near p1, shifted perpendicular to p1 -> p2.

        Args:
            p1: Point to shift
            p2: Next point, defines the direction of travel
            distance_m: Shift distance in meters
            earth_radius_m: Spherical Earth radius in meters

        Returns:
            The shifted coordinate. p1 itself is not modified.
        """
        lat, lon = GeoCalculator.lateral_offset(
            lat1=p1.lat,
            lon1=p1.lon,
            lat2=p2.lat,
            lon2=p2.lon,
            distance_m=distance_m,
            earth_radius_m=earth_radius_m,
        )
        return Coordinate(lat=lat, lon=lon)

    @staticmethod
    def to_local_xy_m(
        coordinate: Coordinate,
        meters_per_degree: float = ProjectionConfig.METERS_PER_DEGREE_LAT,
    ) -> tuple[float, float]:
        """Project a coordinate into a locally linearized meters space.

        x = lon scaled by cos(lat), y = lat. Each point uses its own latitude
        for the scale, so this is only meaningful for nearby points.

        Returns:
            Tuple (x, y) in meters.
        """
        x = coordinate.lon * meters_per_degree * cos(radians(coordinate.lat))
        y = coordinate.lat * meters_per_degree
        return x, y

    @staticmethod
    def distance_to_segment_m(point: Coordinate, start: Coordinate, end: Coordinate) -> float:
        """Minimum distance from a point to the segment start -> end.

        Standard vector projection clamped to the segment ends, computed in
        the local meters space of to_local_xy_m(). Not a geodesic distance.

        Args:
            point: The point to measure from
            start: Segment start
            end: Segment end

        Returns:
            Distance in meters. A zero-length segment gives the distance to start.
        """
        px, py = GeoCalculator.to_local_xy_m(point)
        sx, sy = GeoCalculator.to_local_xy_m(start)
        ex, ey = GeoCalculator.to_local_xy_m(end)

        a, b = px - sx, py - sy
        c, d = ex - sx, ey - sy
        len_sq = c * c + d * d

        if len_sq == 0:
            return sqrt(a * a + b * b)

        param = min(1.0, max(0.0, (a * c + b * d) / len_sq))
        dx = px - (sx + param * c)
        dy = py - (sy + param * d)
        return sqrt(dx * dx + dy * dy)

    @staticmethod
    def haversine_distance_m(
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        radius_m: Optional[float] = None,
    ) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)
            radius_m: Earth radius, defaults to the mean radius

        Returns:
            Distance in meters.
        """
        radius = radius_m if radius_m is not None else GeoConfig.MEAN_EARTH_RADIUS_M
        dlat = radians(lat2 - lat1)
        dlon = radians(lon2 - lon1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
        return radius * 2 * atan2(sqrt(a), sqrt(1 - a))
