# coverageplanner/path_planner/utils/coordinates.py
"""
Geodesy helpers for small survey areas. Logging is omitted here as these are
high-frequency, low-level functions called for every sample point.
"""
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..constants import PlannerConstants
from ..data_models import GeoPoint

def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi

def meters_per_degree(lat_rad: float) -> float:
    """Equirectangular approximation; degrades towards the poles."""
    return PlannerConstants.METERS_PER_DEGREE_EQUATOR * math.cos(lat_rad)

def interpolate_point(start: GeoPoint, end: GeoPoint, t: float) -> GeoPoint:
    lon = start.longitude * (1 - t) + end.longitude * t
    lat = start.latitude * (1 - t) + end.latitude * t
    return GeoPoint(longitude=lon, latitude=lat)

def normalize(vector: Sequence[float]) -> Optional[np.ndarray]:
    """Returns the unit vector, or None for a zero-length input."""
    v = np.asarray(vector, dtype=float)
    magnitude = np.linalg.norm(v)
    if magnitude == 0:
        return None
    return v / magnitude

def bounding_box(polygon: Sequence[GeoPoint]) -> Tuple[float, float, float, float]:
    """Returns (min_lon, min_lat, max_lon, max_lat) in radians."""
    lons = [p.longitude for p in polygon]
    lats = [p.latitude for p in polygon]
    return min(lons), min(lats), max(lons), max(lats)

def is_point_in_polygon(point: GeoPoint, polygon: Sequence[GeoPoint]) -> bool:
    """Determines if a point is inside a simple polygon using ray casting."""
    n = len(polygon)
    if n == 0:
        return False
    lon, lat = point.longitude, point.latitude
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i].longitude, polygon[i].latitude
        xj, yj = polygon[j].longitude, polygon[j].latitude
        # Half-open interval on latitude so shared vertices count once
        if (yi > lat) != (yj > lat):
            x_intersection = (xj - xi) * (lat - yi) / (yj - yi) + xi
            if lon < x_intersection:
                inside = not inside
        j = i
    return inside

def geodetic_to_ecef(point: GeoPoint) -> np.ndarray:
    """Converts a cartographic point to WGS84 earth-centred cartesian meters."""
    a = PlannerConstants.WGS84_SEMI_MAJOR_AXIS_M
    f = PlannerConstants.WGS84_FLATTENING
    e2 = f * (2 - f)
    h = point.height or 0.0
    sin_lat, cos_lat = math.sin(point.latitude), math.cos(point.latitude)
    n = a / math.sqrt(1 - e2 * sin_lat ** 2)
    x = (n + h) * cos_lat * math.cos(point.longitude)
    y = (n + h) * cos_lat * math.sin(point.longitude)
    z = (n * (1 - e2) + h) * sin_lat
    return np.array([x, y, z])

def polygon_from_degrees(coords: Sequence[Tuple[float, float]]) -> List[GeoPoint]:
    """Builds a polygon from (lon, lat) degree pairs, dropping a closing duplicate."""
    points = [GeoPoint.from_degrees(lon, lat) for lon, lat in coords]
    if len(points) > 1 and points[0] == points[-1]:
        points = points[:-1]
    return points
