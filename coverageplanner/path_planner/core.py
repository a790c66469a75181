# coverageplanner/path_planner/core.py
import logging
from typing import List, Optional, Sequence

from .constants import PlannerConstants
from .data_models import CoveragePath, GeoPoint, PlanningParameters
from .exceptions import InvalidParametersError
from .utils.calculations import calculate_path_distance_m, calculate_polygon_area_km2, estimate_flight_time_min
from .utils.lawnmower import generate_lawnmower_pattern
from .utils.orientation import calculate_path_orientation
from .utils.smoothing import smooth_path_waypoints
from .utils.terrain_heights import add_terrain_heights, apply_flat_altitude
from ..terrain.providers import TerrainProvider

class CoveragePathPlanner:
    """
    Plans a lawnmower coverage path over a polygon.

    The planner keeps no state between runs: every call to `generate_path`
    takes the polygon and parameters explicitly and returns a fresh result.
    """
    MIN_POLYGON_POINTS = 3

    def __init__(self, terrain_provider: Optional[TerrainProvider] = None,
                 cruise_speed_mps: float = PlannerConstants.DEFAULT_CRUISE_SPEED_MPS):
        self.terrain_provider = terrain_provider
        self.cruise_speed_mps = cruise_speed_mps

        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        provider_name = terrain_provider.name if terrain_provider else "none"
        logging.info(f"CoveragePathPlanner initialized. Terrain provider: {provider_name}")

    def generate_path(self, polygon: Sequence[GeoPoint],
                      parameters: Optional[PlanningParameters] = None) -> Optional[CoveragePath]:
        """
        Runs the full planning pipeline.

        Returns None without planning when the polygon has fewer than three
        vertices. Raises InvalidParametersError for unusable parameters.
        """
        parameters = parameters or PlanningParameters()
        if len(polygon) < self.MIN_POLYGON_POINTS:
            logging.warning(f"Path generation skipped: polygon has {len(polygon)} points, "
                            f"at least {self.MIN_POLYGON_POINTS} are required.")
            return None

        errors = parameters.validate()
        if errors:
            raise InvalidParametersError(errors)

        warnings: List[str] = []
        orientation = calculate_path_orientation(polygon)
        waypoints = generate_lawnmower_pattern(polygon, parameters.line_spacing_m, orientation)
        logging.info(f"Generated {len(waypoints)} raw waypoints at orientation {orientation:.3f} rad "
                     f"with {parameters.line_spacing_m} m spacing.")
        if not waypoints:
            warnings.append("No sweep line intersects the polygon.")
            logging.warning("Path generation produced no waypoints.")

        waypoints, terrain_fallback = self._resolve_heights(waypoints, parameters)
        if terrain_fallback:
            warnings.append("Terrain sampling unavailable; using fixed altitude.")

        if parameters.smooth_path and len(waypoints) > 2:
            raw_count = len(waypoints)
            waypoints = smooth_path_waypoints(waypoints, parameters.smoothing_factor)
            logging.info(f"Smoothing added {len(waypoints) - raw_count} interpolated waypoints.")

        total_distance = calculate_path_distance_m(waypoints)
        return CoveragePath(
            waypoints=waypoints,
            orientation_rad=orientation,
            parameters=parameters,
            total_distance_m=total_distance,
            estimated_time_min=estimate_flight_time_min(total_distance, self.cruise_speed_mps),
            area_km2=calculate_polygon_area_km2(polygon),
            terrain_fallback=terrain_fallback,
            warnings=warnings
        )

    def _resolve_heights(self, waypoints: List[GeoPoint], parameters: PlanningParameters):
        if not parameters.follow_terrain or not waypoints:
            return apply_flat_altitude(waypoints, parameters.altitude_m), False
        return add_terrain_heights(waypoints, parameters.altitude_m, self.terrain_provider)
