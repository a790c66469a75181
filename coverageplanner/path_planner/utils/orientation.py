# coverageplanner/path_planner/utils/orientation.py
import math
from typing import Sequence

from ..constants import PlannerConstants
from ..data_models import GeoPoint
from .coordinates import to_degrees

def calculate_path_orientation(polygon: Sequence[GeoPoint]) -> float:
    """
    Returns the sweep direction in radians, perpendicular to the longest edge.

    Edge lengths use a flat-earth approximation in degrees, which is fine for
    survey-sized polygons. The first of several equally long edges wins, and a
    polygon without any positive-length edge yields 0.
    """
    max_distance = 0.0
    orientation = 0.0
    n = len(polygon)
    for i in range(n):
        p1 = polygon[i]
        p2 = polygon[(i + 1) % n]
        dx = to_degrees(p2.longitude - p1.longitude)
        dy = to_degrees(p2.latitude - p1.latitude)
        distance = math.sqrt(dx * dx + dy * dy)
        if distance > max_distance:
            max_distance = distance
            orientation = math.atan2(dy, dx) + PlannerConstants.ORIENTATION_OFFSET_RAD
    return orientation
