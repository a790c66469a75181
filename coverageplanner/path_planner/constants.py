# coverageplanner/path_planner/constants.py
import math

class PlannerConstants:
    METERS_PER_DEGREE_EQUATOR: float = 111320.0
    KM_PER_DEGREE: float = 111.32

    # Sweep line generation
    EXTRA_SWEEP_LINES = 2
    SWEEP_LINE_LENGTH_FACTOR = 1.5
    CLIP_SAMPLES_PER_LINE = 50

    # Corner smoothing
    SHARP_TURN_DOT_THRESHOLD = 0.866  # cos(30 deg)
    MIN_INTERPOLATION_POINTS = 3
    MIN_CORNER_POINTS = 2
    CONTROL_POINT_DISTANCE_RATIO = 0.5

    # Orientation is perpendicular to the longest polygon edge
    ORIENTATION_OFFSET_RAD: float = math.pi / 2

    DEFAULT_CRUISE_SPEED_MPS = 10.0

    # WGS84 ellipsoid
    WGS84_SEMI_MAJOR_AXIS_M: float = 6378137.0
    WGS84_FLATTENING: float = 1 / 298.257223563

class PlanningDefaults:
    ALTITUDE_M = 100.0
    LINE_SPACING_M = 50.0
    FOLLOW_TERRAIN = True
    SMOOTH_PATH = True
    SMOOTHING_FACTOR = 5
