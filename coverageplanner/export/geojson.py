# coverageplanner/export/geojson.py
"""
Converts planned coverage paths to and from GeoJSON.

GeoJSON positions are [longitude, latitude, height] in degrees and meters.
"""
import json
import logging
import os
from typing import List, Optional

from ..path_planner.data_models import CoveragePath, GeoPoint
from ..path_planner.exceptions import InvalidPolygonError
from ..path_planner.utils.coordinates import polygon_from_degrees
from .utils import export_timestamp, safe_filename

def path_to_geojson(path: CoveragePath, name: str = "Coverage Mission") -> Optional[dict]:
    if not path.waypoints:
        logging.warning("No path data to export. Generate a path first.")
        return None

    coordinates = [[wp.longitude_deg, wp.latitude_deg, wp.height or 0] for wp in path.waypoints]
    params = path.parameters
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {
                    "name": name,
                    "waypointCount": path.waypoint_count,
                    "pathLength": path.total_distance_m / 1000,
                    "estimatedTime": path.estimated_time_min,
                    "areaCoverage": path.area_km2,
                    "altitude": params.altitude_m,
                    "lineSpacing": params.line_spacing_m,
                    "followTerrain": params.follow_terrain,
                    "smoothPath": params.smooth_path,
                    "smoothingFactor": params.smoothing_factor,
                    "exportDate": export_timestamp()
                },
                "geometry": {"type": "LineString", "coordinates": coordinates}
            }
        ]
    }

def save_geojson(path: CoveragePath, name: str = "Coverage Mission", output_dir: str = ".") -> Optional[str]:
    """Writes `<name>_path.geojson` and returns its location, or None for an empty path."""
    geojson = path_to_geojson(path, name)
    if geojson is None:
        return None
    filename = os.path.join(output_dir, f"{safe_filename(name)}_path.geojson")
    with open(filename, 'w') as f:
        json.dump(geojson, f, indent=2)
    logging.info(f"GeoJSON path exported to '{filename}'.")
    return filename

def load_polygon_geojson(filename: str) -> List[GeoPoint]:
    """
    Reads the survey polygon from a GeoJSON file.

    Accepts a bare Polygon geometry, a Feature, or a FeatureCollection whose
    first Polygon feature is used. Only the exterior ring is read.
    """
    with open(filename, 'r') as f:
        data = json.load(f)

    geometry = data
    if data.get('type') == 'FeatureCollection':
        polygons = [feat.get('geometry') for feat in data.get('features', [])
                    if (feat.get('geometry') or {}).get('type') == 'Polygon']
        if not polygons:
            raise InvalidPolygonError(f"No Polygon feature found in {filename}")
        geometry = polygons[0]
    elif data.get('type') == 'Feature':
        geometry = data.get('geometry') or {}

    if geometry.get('type') != 'Polygon' or not geometry.get('coordinates'):
        raise InvalidPolygonError(f"Expected a Polygon geometry in {filename}")

    exterior = [(coord[0], coord[1]) for coord in geometry['coordinates'][0]]
    polygon = polygon_from_degrees(exterior)
    if len(polygon) < 3:
        raise InvalidPolygonError(f"Polygon in {filename} has {len(polygon)} distinct vertices, need at least 3")
    return polygon
