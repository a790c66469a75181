# coverageplanner/path_planner/tests/test_lawnmower.py
import math
from itertools import groupby

import pytest

from coverageplanner.path_planner.data_models import GeoPoint
from coverageplanner.path_planner.utils.coordinates import is_point_in_polygon, polygon_from_degrees
from coverageplanner.path_planner.utils.lawnmower import (
    clip_line_to_polygon, generate_lawnmower_pattern, sweep_line_indices
)
from coverageplanner.path_planner.utils.orientation import calculate_path_orientation

# ~1.1 km square at the equator
SQUARE = polygon_from_degrees([(0, 0), (0, 0.01), (0.01, 0.01), (0.01, 0)])

def split_into_rows(waypoints):
    """Groups consecutive waypoints sharing a latitude (rows of an east-west sweep)."""
    return [list(row) for _, row in groupby(waypoints, key=lambda wp: round(wp.latitude, 10))]

@pytest.fixture
def square_pattern():
    orientation = calculate_path_orientation(SQUARE)
    return generate_lawnmower_pattern(SQUARE, 100, orientation)

def test_sweep_line_indices_cover_count():
    assert list(sweep_line_indices(4)) == [-2, -1, 0, 1]
    assert list(sweep_line_indices(5)) == [-2, -1, 0, 1, 2]
    assert len(sweep_line_indices(18)) == 18

def test_all_waypoints_inside_polygon(square_pattern):
    assert square_pattern
    assert all(is_point_in_polygon(wp, SQUARE) for wp in square_pattern)

def test_heights_left_unset(square_pattern):
    assert all(wp.height is None for wp in square_pattern)

def test_square_has_eleven_rows(square_pattern):
    rows = split_into_rows(square_pattern)
    assert len(rows) == 11
    # Rows never repeat, so each sweep line is visited exactly once
    assert len({round(row[0].latitude, 10) for row in rows}) == 11

def test_rows_cover_spacing_across_polygon(square_pattern):
    width_m = 0.01 * 111320
    assert len(split_into_rows(square_pattern)) >= math.floor(width_m / 100)

def test_rows_alternate_direction(square_pattern):
    rows = split_into_rows(square_pattern)
    directions = [math.copysign(1, row[-1].longitude - row[0].longitude) for row in rows]
    for current, following in zip(directions, directions[1:]):
        assert current == -following

def test_center_row_is_reversed(square_pattern):
    center_lat = math.radians(0.005)
    center_row = next(row for row in split_into_rows(square_pattern)
                      if abs(row[0].latitude - center_lat) < 1e-9)
    # Raw sampling runs east to west for this orientation; even rows are flipped
    assert center_row[0].longitude < center_row[-1].longitude

def test_zero_area_polygon_yields_no_waypoints():
    flat = polygon_from_degrees([(0, 0), (0.01, 0), (0.02, 0)])
    orientation = calculate_path_orientation(flat)
    assert generate_lawnmower_pattern(flat, 50, orientation) == []

def test_tighter_spacing_adds_rows():
    orientation = calculate_path_orientation(SQUARE)
    wide = split_into_rows(generate_lawnmower_pattern(SQUARE, 200, orientation))
    narrow = split_into_rows(generate_lawnmower_pattern(SQUARE, 50, orientation))
    assert len(narrow) > len(wide)

def test_clip_keeps_only_inside_samples():
    line = (GeoPoint.from_degrees(-0.01, 0.005), GeoPoint.from_degrees(0.02, 0.005))
    clipped = clip_line_to_polygon(line, SQUARE)
    assert 0 < len(clipped) < 51
    assert all(0 < wp.longitude_deg < 0.01 for wp in clipped)

def test_clip_line_fully_inside_keeps_all_samples():
    line = (GeoPoint.from_degrees(0.001, 0.005), GeoPoint.from_degrees(0.009, 0.005))
    assert len(clip_line_to_polygon(line, SQUARE)) == 51

def test_clip_line_outside_is_empty():
    line = (GeoPoint.from_degrees(0.02, 0.02), GeoPoint.from_degrees(0.03, 0.03))
    assert clip_line_to_polygon(line, SQUARE) == []

def test_clip_requires_two_endpoints():
    assert clip_line_to_polygon((GeoPoint(0.0, 0.0),), SQUARE) == []

def test_odd_line_count_rows_alternate():
    orientation = calculate_path_orientation(SQUARE)
    # 110 m spacing gives 15 + 2 = 17 sweep lines over the square's diagonal
    spacing_deg = 110 / 111320
    assert math.ceil(math.hypot(0.01, 0.01) / spacing_deg) + 2 == 17

    rows = split_into_rows(generate_lawnmower_pattern(SQUARE, 110, orientation))
    assert len(rows) > 2
    directions = [math.copysign(1, row[-1].longitude - row[0].longitude) for row in rows]
    for current, following in zip(directions, directions[1:]):
        assert current == -following

    center_row = next(row for row in rows if abs(row[0].latitude - math.radians(0.005)) < 1e-9)
    assert center_row[0].longitude < center_row[-1].longitude
