# coverageplanner/path_planner/utils/terrain_heights.py
import logging
import math
from typing import List, Optional, Sequence, Tuple

from ..data_models import GeoPoint
from ...terrain.data_models import TerrainResult
from ...terrain.providers import TerrainProvider

def apply_flat_altitude(waypoints: Sequence[GeoPoint], altitude_m: float) -> List[GeoPoint]:
    return [wp.with_height(altitude_m) for wp in waypoints]

def add_terrain_heights(waypoints: Sequence[GeoPoint], altitude_m: float,
                        terrain_provider: Optional[TerrainProvider]) -> Tuple[List[GeoPoint], bool]:
    """
    Sets each waypoint's height to ground elevation plus altitude_m.

    All waypoints are sampled in a single provider call. When no provider is
    given, or the call fails, every waypoint falls back to the flat altitude.

    Returns:
        (waypoints with heights, True if the flat-altitude fallback was used)
    """
    if terrain_provider is None:
        logging.warning("No terrain provider available. Using fixed altitude.")
        return apply_flat_altitude(waypoints, altitude_m), True

    try:
        result = terrain_provider.sample_heights(waypoints)
    except Exception as e:
        result = TerrainResult.failure(f"{type(e).__name__}: {e}")

    if not result.ok or len(result.heights) != len(waypoints):
        reason = result.error or f"expected {len(waypoints)} heights, received {len(result.heights)}"
        logging.warning(f"Error sampling terrain heights ({reason}). Falling back to fixed altitude.")
        return apply_flat_altitude(waypoints, altitude_m), True

    draped = []
    for wp, ground in zip(waypoints, result.heights):
        if ground is None or math.isnan(ground):
            ground = 0.0
        draped.append(wp.with_height(ground + altitude_m))
    return draped, False
