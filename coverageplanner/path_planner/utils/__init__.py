# This file can be empty, or it can expose the algorithms for easier access.

from .coordinates import is_point_in_polygon, polygon_from_degrees
from .orientation import calculate_path_orientation
from .lawnmower import generate_lawnmower_pattern, clip_line_to_polygon
from .smoothing import smooth_path_waypoints, cubic_bezier
from .terrain_heights import add_terrain_heights, apply_flat_altitude
from .calculations import calculate_path_distance_m, estimate_flight_time_min, calculate_polygon_area_km2

__all__ = [
    "is_point_in_polygon",
    "polygon_from_degrees",
    "calculate_path_orientation",
    "generate_lawnmower_pattern",
    "clip_line_to_polygon",
    "smooth_path_waypoints",
    "cubic_bezier",
    "add_terrain_heights",
    "apply_flat_altitude",
    "calculate_path_distance_m",
    "estimate_flight_time_min",
    "calculate_polygon_area_km2",
]
