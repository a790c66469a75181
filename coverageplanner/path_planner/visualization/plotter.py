# coverageplanner/path_planner/visualization/plotter.py
"""
Contains the PathVisualizer class for generating 2D preview maps of a plan.
"""
import logging
from typing import Sequence

import folium

from ..data_models import CoveragePath, GeoPoint

class PathVisualizer:
    """Generates interactive HTML maps from a coverage plan."""

    def create_coverage_map(self, polygon: Sequence[GeoPoint], path: CoveragePath) -> folium.Map:
        outline = [(p.latitude_deg, p.longitude_deg) for p in polygon]
        center = [sum(lat for lat, _ in outline) / len(outline), sum(lon for _, lon in outline) / len(outline)]
        m = folium.Map(location=center, zoom_start=15, tiles="CartoDB positron")

        folium.Polygon(
            locations=outline,
            color='red', fill=True, fill_color='red', fill_opacity=0.15,
            popup=f"<b>Survey Area</b><br>{path.area_km2:.3f} km²"
        ).add_to(m)

        if path.waypoints:
            path_points = [(wp.latitude_deg, wp.longitude_deg) for wp in path.waypoints]
            folium.PolyLine(
                locations=path_points, color='blue', weight=3, opacity=0.8,
                popup=f"Coverage Path<br>{path.waypoint_count} waypoints, {path.total_distance_m / 1000:.2f} km"
            ).add_to(m)

            start, end = path.waypoints[0], path.waypoints[-1]
            folium.Marker(
                location=path_points[0],
                popup=f"<b>Start</b><br>Alt: {start.height or 0:.0f} m",
                icon=folium.Icon(color='green', icon='play', prefix='fa')
            ).add_to(m)
            folium.Marker(
                location=path_points[-1],
                popup=f"<b>End</b><br>Alt: {end.height or 0:.0f} m",
                icon=folium.Icon(color='red', icon='stop', prefix='fa')
            ).add_to(m)

        m.fit_bounds(outline)
        return m

    def save_map(self, m: folium.Map, filename: str) -> None:
        m.save(filename)
        logging.info(f"Interactive 2D map generated: '{filename}'.")
