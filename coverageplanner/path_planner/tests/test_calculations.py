# coverageplanner/path_planner/tests/test_calculations.py
import math

import pytest

from coverageplanner.path_planner.data_models import GeoPoint, PlanningParameters
from coverageplanner.path_planner.utils.calculations import (
    calculate_path_distance_m, calculate_polygon_area_km2, estimate_flight_time_min
)
from coverageplanner.path_planner.utils.coordinates import geodetic_to_ecef, polygon_from_degrees

def test_ecef_on_equator():
    x, y, z = geodetic_to_ecef(GeoPoint(0.0, 0.0, 100.0))
    assert x == pytest.approx(6378237.0)
    assert y == pytest.approx(0.0)
    assert z == pytest.approx(0.0)

def test_path_distance_along_equator():
    path = [GeoPoint(0.0, 0.0, 0.0), GeoPoint(0.001, 0.0, 0.0)]
    expected = 2 * 6378137.0 * math.sin(0.0005)
    assert calculate_path_distance_m(path) == pytest.approx(expected, abs=1e-3)

def test_path_distance_includes_climb():
    path = [GeoPoint(0.0, 0.0, 0.0), GeoPoint(0.0, 0.0, 120.0)]
    assert calculate_path_distance_m(path) == pytest.approx(120.0)

def test_path_distance_of_short_paths():
    assert calculate_path_distance_m([]) == 0.0
    assert calculate_path_distance_m([GeoPoint(0.1, 0.1)]) == 0.0

def test_flight_time():
    assert estimate_flight_time_min(6000.0) == pytest.approx(10.0)
    assert estimate_flight_time_min(6000.0, speed_mps=5.0) == pytest.approx(20.0)
    assert estimate_flight_time_min(6000.0, speed_mps=0) == 0.0

def test_area_independent_of_winding():
    square = polygon_from_degrees([(0, 0), (0, 0.01), (0.01, 0.01), (0.01, 0)])
    expected = 0.01 * 0.01 * 111.32 * 111.32
    assert calculate_polygon_area_km2(square) == pytest.approx(expected)
    assert calculate_polygon_area_km2(list(reversed(square))) == pytest.approx(expected)

@pytest.mark.parametrize("params, expected_errors", [
    (PlanningParameters(), 0),
    (PlanningParameters(line_spacing_m=-5), 1),
    (PlanningParameters(smoothing_factor=-1), 1),
    (PlanningParameters(smoothing_factor=2.5), 1),
    (PlanningParameters(line_spacing_m=0, smoothing_factor=-1), 2),
])
def test_parameter_validation(params, expected_errors):
    assert len(params.validate()) == expected_errors
