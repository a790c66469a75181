# coverageplanner/export/mission_json.py
"""
Structured mission record: one entry per waypoint with an index and a role
tag (`start`, `end` or `waypoint`), plus the parameters used to plan it.
"""
import json
import logging
import os
from typing import Optional

from ..path_planner.data_models import CoveragePath
from .utils import export_timestamp, safe_filename

def waypoint_role(index: int, count: int) -> str:
    if index == 0:
        return 'start'
    if index == count - 1:
        return 'end'
    return 'waypoint'

def path_to_mission_json(path: CoveragePath, name: str = "Coverage Mission") -> Optional[dict]:
    if not path.waypoints:
        logging.warning("No path data to export. Generate a path first.")
        return None

    count = path.waypoint_count
    waypoints = [
        {
            "index": i,
            "longitude": wp.longitude_deg,
            "latitude": wp.latitude_deg,
            "altitude": wp.height or 0,
            "type": waypoint_role(i, count)
        }
        for i, wp in enumerate(path.waypoints)
    ]
    params = path.parameters
    return {
        "mission": {
            "name": name,
            "metadata": {
                "waypointCount": count,
                "pathLength": path.total_distance_m / 1000,
                "estimatedTime": path.estimated_time_min,
                "areaCoverage": path.area_km2,
                "exportDate": export_timestamp()
            },
            "parameters": {
                "altitude": params.altitude_m,
                "lineSpacing": params.line_spacing_m,
                "followTerrain": params.follow_terrain,
                "smoothPath": params.smooth_path,
                "smoothingFactor": params.smoothing_factor
            },
            "waypoints": waypoints
        }
    }

def save_mission_json(path: CoveragePath, name: str = "Coverage Mission", output_dir: str = ".") -> Optional[str]:
    mission = path_to_mission_json(path, name)
    if mission is None:
        return None
    filename = os.path.join(output_dir, f"{safe_filename(name)}_path.json")
    with open(filename, 'w') as f:
        json.dump(mission, f, indent=2)
    logging.info(f"Mission JSON exported to '{filename}'.")
    return filename
