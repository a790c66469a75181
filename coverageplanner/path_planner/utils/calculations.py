# coverageplanner/path_planner/utils/calculations.py
from typing import Sequence

import numpy as np

from ..constants import PlannerConstants
from ..data_models import GeoPoint
from .coordinates import geodetic_to_ecef, to_degrees

def calculate_path_distance_m(waypoints: Sequence[GeoPoint]) -> float:
    """Total straight-line length of a path in meters, heights included."""
    if len(waypoints) < 2:
        return 0.0
    positions = np.array([geodetic_to_ecef(wp) for wp in waypoints])
    return float(np.sum(np.linalg.norm(np.diff(positions, axis=0), axis=1)))

def estimate_flight_time_min(distance_m: float, speed_mps: float = PlannerConstants.DEFAULT_CRUISE_SPEED_MPS) -> float:
    if speed_mps <= 0:
        return 0.0
    return distance_m / speed_mps / 60

def calculate_polygon_area_km2(polygon: Sequence[GeoPoint]) -> float:
    """Shoelace area on a flat degree grid. Only meaningful for small areas."""
    area = 0.0
    n = len(polygon)
    for i in range(n):
        p1 = polygon[i]
        p2 = polygon[(i + 1) % n]
        lon1, lat1 = to_degrees(p1.longitude), to_degrees(p1.latitude)
        lon2, lat2 = to_degrees(p2.longitude), to_degrees(p2.latitude)
        area += (lon2 - lon1) * (lat2 + lat1)
    return abs(area * PlannerConstants.KM_PER_DEGREE * PlannerConstants.KM_PER_DEGREE / 2)
