# coverageplanner/path_planner/__init__.py
"""
Initializes the path_planner module, defining its public API.

This file makes the core components of the planner directly accessible
to client modules, simplifying imports and hiding the internal structure.
"""
# Core pipeline
from .core import CoveragePathPlanner

# Public data models
from .data_models import GeoPoint, PlanningParameters, CoveragePath

# Expose the individual planning stages for callers that compose their own pipeline
from .utils.orientation import calculate_path_orientation
from .utils.lawnmower import generate_lawnmower_pattern
from .utils.smoothing import smooth_path_waypoints
from .utils.terrain_heights import add_terrain_heights
from .utils.coordinates import is_point_in_polygon, polygon_from_degrees

from .exceptions import CoveragePlannerError, InvalidPolygonError, InvalidParametersError
