"""
Serializers for planned coverage paths.
"""

from .geojson import path_to_geojson, save_geojson, load_polygon_geojson
from .mission_json import path_to_mission_json, save_mission_json

__all__ = [
    "path_to_geojson",
    "save_geojson",
    "load_polygon_geojson",
    "path_to_mission_json",
    "save_mission_json"
]
