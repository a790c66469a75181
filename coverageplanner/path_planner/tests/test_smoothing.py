# coverageplanner/path_planner/tests/test_smoothing.py
import math
import unittest

from coverageplanner.path_planner.data_models import GeoPoint
from coverageplanner.path_planner.utils.smoothing import cubic_bezier, smooth_path_waypoints

S = 1e-4  # ~640 m in radians

def u_turn_path(height=50.0):
    """Two rows joined by a short crossing leg: two 90 degree corners."""
    return [
        GeoPoint(0.0, 0.0, height),
        GeoPoint(S, 0.0, height),
        GeoPoint(S, S, height),
        GeoPoint(0.0, S, height),
    ]

class TestSmoothingPassThrough(unittest.TestCase):
    def test_zero_factor_is_identity(self):
        path = u_turn_path()
        self.assertIs(smooth_path_waypoints(path, 0), path)

    def test_short_paths_unchanged(self):
        path = u_turn_path()[:2]
        self.assertIs(smooth_path_waypoints(path, 5), path)
        self.assertEqual(smooth_path_waypoints([], 5), [])

    def test_straight_path_gets_no_points(self):
        path = [GeoPoint(i * S, 0.0, 10.0) for i in range(5)]
        self.assertEqual(smooth_path_waypoints(path, 5), path)

    def test_gentle_turn_below_threshold(self):
        angle = math.radians(20)
        path = [GeoPoint(0.0, 0.0), GeoPoint(S, 0.0), GeoPoint(S + S * math.cos(angle), S * math.sin(angle))]
        self.assertEqual(len(smooth_path_waypoints(path, 5)), 3)

    def test_duplicate_waypoint_skips_corner(self):
        a, b = GeoPoint(0.0, 0.0, 5.0), GeoPoint(S, S, 5.0)
        self.assertEqual(smooth_path_waypoints([a, a, b], 3), [a, a, b])

class TestSmoothingCorners(unittest.TestCase):
    def test_right_angle_corners(self):
        # factor 1 -> max(3, 2) = 3 interpolation points, dot 0 -> 3 points per corner
        smoothed = smooth_path_waypoints(u_turn_path(), 1)
        self.assertEqual(len(smoothed), 4 + 3 + 3)

    def test_original_waypoints_kept_in_order(self):
        path = u_turn_path()
        smoothed = smooth_path_waypoints(path, 2)
        self.assertEqual(smoothed[0], path[0])
        self.assertEqual(smoothed[1], path[1])
        self.assertEqual(smoothed[-1], path[-1])
        positions = [smoothed.index(wp) for wp in path]
        self.assertEqual(positions, sorted(positions))

    def test_reversal_gets_more_points_than_right_angle(self):
        reversal = [GeoPoint(0.0, 0.0, 1.0), GeoPoint(S, 0.0, 1.0), GeoPoint(0.0, 0.0, 1.0)]
        right_angle = [GeoPoint(0.0, 0.0, 1.0), GeoPoint(S, 0.0, 1.0), GeoPoint(S, S, 1.0)]
        # factor 5 -> 10 interpolation points; dot -1 -> 20, dot 0 -> 10
        self.assertEqual(len(smooth_path_waypoints(reversal, 5)), 3 + 20)
        self.assertEqual(len(smooth_path_waypoints(right_angle, 5)), 3 + 10)

    def test_output_longer_for_sharp_turn(self):
        path = u_turn_path()
        self.assertGreater(len(smooth_path_waypoints(path, 1)), len(path))

    def test_flat_heights_preserved(self):
        for wp in smooth_path_waypoints(u_turn_path(height=50.0), 4):
            self.assertEqual(wp.height, 50.0)

    def test_equal_control_heights_are_exact(self):
        points = [GeoPoint(0.0, 0.0, 50.0), GeoPoint(1.0, 2.0, 50.0), GeoPoint(3.0, 2.0, 50.0), GeoPoint(4.0, 0.0, 50.0)]
        for t in (0.1, 1 / 3, 0.5, 0.9):
            self.assertEqual(cubic_bezier(*points, t).height, 50.0)

    def test_curve_anchored_on_neighbours(self):
        prev_point, corner, end_point = GeoPoint(0.0, 0.0, 0.0), GeoPoint(S, 0.0, 0.0), GeoPoint(S, S, 0.0)
        smoothed = smooth_path_waypoints([prev_point, corner, end_point], 1)
        inserted = smoothed[2:-1]
        self.assertEqual(len(inserted), 3)

        d = S * 0.5
        cp1 = GeoPoint(S, d, 0.0)   # corner + outgoing * d
        cp2 = GeoPoint(S + d, 0.0, 0.0)  # corner + incoming * d
        expected = cubic_bezier(prev_point, cp2, cp1, end_point, 1 / 4)
        self.assertAlmostEqual(inserted[0].longitude, expected.longitude)
        self.assertAlmostEqual(inserted[0].latitude, expected.latitude)

class TestCubicBezier(unittest.TestCase):
    def setUp(self):
        self.p = [GeoPoint(0.0, 0.0, 0.0), GeoPoint(1.0, 2.0, 10.0), GeoPoint(3.0, 2.0, 10.0), GeoPoint(4.0, 0.0, 0.0)]

    def test_endpoints(self):
        start = cubic_bezier(*self.p, 0.0)
        end = cubic_bezier(*self.p, 1.0)
        self.assertEqual((start.longitude, start.latitude, start.height), (0.0, 0.0, 0.0))
        self.assertEqual((end.longitude, end.latitude, end.height), (4.0, 0.0, 0.0))

    def test_midpoint_blend(self):
        mid = cubic_bezier(*self.p, 0.5)
        self.assertAlmostEqual(mid.longitude, 2.0)
        self.assertAlmostEqual(mid.latitude, 1.5)
        self.assertAlmostEqual(mid.height, 7.5)

    def test_missing_height_propagates(self):
        points = list(self.p)
        points[1] = GeoPoint(1.0, 2.0)
        self.assertIsNone(cubic_bezier(*points, 0.5).height)

if __name__ == '__main__':
    unittest.main()
