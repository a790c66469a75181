# run_coverage.py
import argparse
import os
import sys

# Add the project root to the Python path to ensure imports work correctly
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from coverageplanner.export import load_polygon_geojson, save_geojson, save_mission_json
from coverageplanner.path_planner import CoveragePathPlanner, InvalidParametersError, InvalidPolygonError, PlanningParameters, polygon_from_degrees
from coverageplanner.path_planner.constants import PlanningDefaults
from coverageplanner.path_planner.visualization import PathVisualizer
from coverageplanner.terrain import DemTerrainProvider, OpenMeteoTerrainProvider, TerrainConfig, TerrainSourceError

def parse_vertex(text: str):
    try:
        lon, lat = (float(v) for v in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'lon,lat' in degrees, got '{text}'")
    return lon, lat

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Plan a lawnmower coverage path over a polygon.")
    area = parser.add_mutually_exclusive_group(required=True)
    area.add_argument("--vertex", type=parse_vertex, action="append", metavar="LON,LAT",
                      help="Polygon vertex in degrees; repeat for each vertex")
    area.add_argument("--polygon-file", help="GeoJSON file holding the survey polygon")

    parser.add_argument("--spacing", type=float, default=PlanningDefaults.LINE_SPACING_M, help="Line spacing in meters")
    parser.add_argument("--altitude", type=float, default=PlanningDefaults.ALTITUDE_M, help="Altitude in meters")
    parser.add_argument("--no-smooth", action="store_true", help="Disable corner smoothing")
    parser.add_argument("--smoothing-factor", type=int, default=PlanningDefaults.SMOOTHING_FACTOR)
    parser.add_argument("--terrain", default="none",
                        help="Terrain source: 'none', 'open-meteo' or 'dem:<directory of GeoTIFFs>'")
    parser.add_argument("--no-cache", action="store_true", help="Disable the Open-Meteo response cache")

    parser.add_argument("--name", default="Coverage Mission", help="Mission name used for export filenames")
    parser.add_argument("--output-dir", default=".", help="Directory for exported files")
    parser.add_argument("--geojson", action="store_true", help="Export the path as GeoJSON")
    parser.add_argument("--json", action="store_true", help="Export the path as a mission JSON record")
    parser.add_argument("--map", action="store_true", help="Write an HTML preview map")
    return parser

def create_terrain_provider(source: str, use_cache: bool):
    if source == "none":
        return None
    if source == "open-meteo":
        return OpenMeteoTerrainProvider(TerrainConfig(cache_enabled=use_cache))
    if source.startswith("dem:"):
        return DemTerrainProvider(source[len("dem:"):])
    raise ValueError(f"Unknown terrain source '{source}'")

def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        polygon = load_polygon_geojson(args.polygon_file) if args.polygon_file else polygon_from_degrees(args.vertex)
    except (OSError, ValueError, InvalidPolygonError) as e:
        print(f"\n[!] Could not read the survey polygon. Error: {e}")
        return 1

    parameters = PlanningParameters(
        line_spacing_m=args.spacing,
        follow_terrain=args.terrain != "none",
        altitude_m=args.altitude,
        smooth_path=not args.no_smooth,
        smoothing_factor=args.smoothing_factor
    )

    try:
        terrain_provider = create_terrain_provider(args.terrain, not args.no_cache)
    except (ValueError, TerrainSourceError) as e:
        print(f"\n[!] Could not set up terrain source. Error: {e}")
        return 1

    print("--- Starting Coverage Path Planning ---")
    print(f"Polygon: {len(polygon)} vertices, Spacing: {parameters.line_spacing_m} m, Altitude: {parameters.altitude_m} m")
    print("-" * 40)

    try:
        planner = CoveragePathPlanner(terrain_provider=terrain_provider)
        path = planner.generate_path(polygon, parameters)
    except InvalidParametersError as e:
        print(f"\n[!] Invalid planning parameters: {e}")
        return 1
    finally:
        if terrain_provider is not None:
            terrain_provider.close()

    if path is None:
        print("\n[!] A polygon needs at least 3 vertices.")
        return 1

    print(f"  > Waypoints:      {path.waypoint_count}")
    print(f"  > Path length:    {path.total_distance_m / 1000:.2f} km")
    print(f"  > Estimated time: {path.estimated_time_min:.1f} min")
    print(f"  > Area:           {path.area_km2:.3f} km²")
    for warning in path.warnings:
        print(f"  ! {warning}")

    if args.geojson:
        print(f"\n-> GeoJSON: {save_geojson(path, args.name, args.output_dir)}")
    if args.json:
        print(f"-> Mission JSON: {save_mission_json(path, args.name, args.output_dir)}")
    if args.map:
        visualizer = PathVisualizer()
        filename = os.path.join(args.output_dir, "coverage_map.html")
        visualizer.save_map(visualizer.create_coverage_map(polygon, path), filename)
        print(f"-> Preview map: {filename}")

    print("\n--- Planning Complete ---")
    return 0

if __name__ == "__main__":
    sys.exit(main())
