# coverageplanner/path_planner/utils/smoothing.py
import math
from typing import List, Optional, Sequence

import numpy as np

from ..constants import PlannerConstants
from ..data_models import GeoPoint
from .coordinates import normalize

def _blend(v0: float, v1: float, v2: float, v3: float, t: float) -> float:
    mt = 1 - t
    return mt ** 3 * v0 + 3 * mt ** 2 * t * v1 + 3 * mt * t ** 2 * v2 + t ** 3 * v3

def cubic_bezier(p0: GeoPoint, p1: GeoPoint, p2: GeoPoint, p3: GeoPoint, t: float) -> GeoPoint:
    """Evaluates a cubic bezier curve, blending lon, lat and height independently."""
    heights = [p.height for p in (p0, p1, p2, p3)]
    height: Optional[float] = None
    if all(h is not None for h in heights):
        # Equal control heights are returned unchanged
        height = heights[0] if len(set(heights)) == 1 else _blend(*heights, t)
    return GeoPoint(
        longitude=_blend(p0.longitude, p1.longitude, p2.longitude, p3.longitude, t),
        latitude=_blend(p0.latitude, p1.latitude, p2.latitude, p3.latitude, t),
        height=height,
    )

def _corner_points(prev_point: GeoPoint, start_point: GeoPoint, end_point: GeoPoint,
                   interpolation_points: int) -> List[GeoPoint]:
    """Bezier points rounding the corner at start_point, or [] for gentle turns."""
    in_direction = normalize((start_point.longitude - prev_point.longitude,
                              start_point.latitude - prev_point.latitude))
    out_direction = normalize((end_point.longitude - start_point.longitude,
                               end_point.latitude - start_point.latitude))
    if in_direction is None or out_direction is None:
        return []

    dot_product = float(np.dot(in_direction, out_direction))
    if dot_product >= PlannerConstants.SHARP_TURN_DOT_THRESHOLD:
        return []

    # Sharper turns get proportionally more points
    num_points = max(PlannerConstants.MIN_CORNER_POINTS, math.floor((1 - dot_product) * interpolation_points))

    distance = math.hypot(end_point.longitude - start_point.longitude,
                          end_point.latitude - start_point.latitude) * PlannerConstants.CONTROL_POINT_DISTANCE_RATIO
    start = np.array([start_point.longitude, start_point.latitude])
    cp1_lon, cp1_lat = start + out_direction * distance
    cp2_lon, cp2_lat = start + in_direction * distance
    cp1 = GeoPoint(longitude=float(cp1_lon), latitude=float(cp1_lat), height=start_point.height)
    cp2 = GeoPoint(longitude=float(cp2_lon), latitude=float(cp2_lat), height=start_point.height)

    # The curve is anchored on the neighbours of the corner, not the corner itself
    return [cubic_bezier(prev_point, cp2, cp1, end_point, j / (num_points + 1))
            for j in range(1, num_points + 1)]

def smooth_path_waypoints(waypoints: Sequence[GeoPoint], smoothing_factor: int) -> List[GeoPoint]:
    """
    Inserts bezier-interpolated points at turns sharper than 30 degrees.

    A smoothing factor of 0, or fewer than three waypoints, returns the input
    unchanged. Original waypoints are always kept; larger factors add more
    interpolated points per corner.
    """
    if smoothing_factor == 0 or len(waypoints) < 3:
        return waypoints

    interpolation_points = max(PlannerConstants.MIN_INTERPOLATION_POINTS, smoothing_factor * 2)
    smoothed_path = []
    for i in range(len(waypoints) - 1):
        start_point = waypoints[i]
        end_point = waypoints[i + 1]
        smoothed_path.append(start_point)
        if i > 0:
            smoothed_path.extend(_corner_points(waypoints[i - 1], start_point, end_point, interpolation_points))
    smoothed_path.append(waypoints[-1])
    return smoothed_path
