# coverageplanner/path_planner/utils/lawnmower.py
"""
Builds a boustrophedon sweep over a polygon: parallel lines spanning the
bounding box are generated in the requested orientation, then clipped to the
polygon interior by sampling.
"""
import math
from typing import List, Sequence, Tuple

import numpy as np

from ..constants import PlannerConstants
from ..data_models import GeoPoint
from .coordinates import bounding_box, interpolate_point, is_point_in_polygon, meters_per_degree, to_radians

def clip_line_to_polygon(line: Tuple[GeoPoint, GeoPoint], polygon: Sequence[GeoPoint],
                         num_samples: int = PlannerConstants.CLIP_SAMPLES_PER_LINE) -> List[GeoPoint]:
    """Samples the line evenly and keeps the samples that fall inside the polygon."""
    if len(line) < 2:
        return []
    start, end = line[0], line[1]
    clipped = []
    for t in np.linspace(0.0, 1.0, num_samples + 1):
        point = interpolate_point(start, end, float(t))
        if is_point_in_polygon(point, polygon):
            clipped.append(point)
    return clipped

def sweep_line_indices(num_lines: int) -> range:
    """Integer line offsets in [-num_lines/2, num_lines/2)."""
    return range(-(num_lines // 2), num_lines - num_lines // 2)

def generate_sweep_line(center_lon: float, center_lat: float, offset: float, length: float,
                        orientation: float) -> Tuple[GeoPoint, GeoPoint]:
    cos_o = math.cos(orientation)
    sin_o = math.sin(orientation)
    start = GeoPoint(
        longitude=center_lon + offset * sin_o - length * cos_o / 2,
        latitude=center_lat + offset * cos_o + length * sin_o / 2,
    )
    end = GeoPoint(
        longitude=center_lon + offset * sin_o + length * cos_o / 2,
        latitude=center_lat + offset * cos_o - length * sin_o / 2,
    )
    return start, end

def generate_lawnmower_pattern(polygon: Sequence[GeoPoint], spacing_m: float, orientation: float) -> List[GeoPoint]:
    """
    Generates the raw coverage waypoints for a polygon.

    Args:
        polygon: Simple polygon vertices in radians, without a closing duplicate.
        spacing_m: Distance between adjacent sweep lines in meters.
        orientation: Sweep direction in radians.

    Returns:
        Waypoints in flight order with heights left unset. Lines at even
        offsets are reversed so consecutive rows alternate direction.
    """
    min_lon, min_lat, max_lon, max_lat = bounding_box(polygon)
    center_lon = (min_lon + max_lon) / 2
    center_lat = (min_lat + max_lat) / 2

    spacing_rad = to_radians(spacing_m / meters_per_degree(center_lat))
    diagonal = math.hypot(max_lon - min_lon, max_lat - min_lat)
    num_lines = math.ceil(diagonal / spacing_rad) + PlannerConstants.EXTRA_SWEEP_LINES
    line_length = diagonal * PlannerConstants.SWEEP_LINE_LENGTH_FACTOR

    waypoints = []
    for i in sweep_line_indices(num_lines):
        line = generate_sweep_line(center_lon, center_lat, i * spacing_rad, line_length, orientation)
        clipped = clip_line_to_polygon(line, polygon)
        if not clipped:
            continue
        if i % 2 == 0 and len(clipped) > 1:
            clipped.reverse()
        waypoints.extend(clipped)
    return waypoints
