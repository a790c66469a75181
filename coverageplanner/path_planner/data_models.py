# coverageplanner/path_planner/data_models.py
"""
Defines the core data structures shared by every planning stage.

Angular coordinates are carried in radians throughout the planner; degree
conversions happen only at the edges (input helpers and exporters).
"""
import math
from dataclasses import dataclass, field, replace
from typing import List, Optional

from .constants import PlanningDefaults

@dataclass(frozen=True)
class GeoPoint:
    """A cartographic position. Height stays None until a stage resolves it."""
    longitude: float
    latitude: float
    height: Optional[float] = None

    @classmethod
    def from_degrees(cls, lon_deg: float, lat_deg: float, height: Optional[float] = None) -> "GeoPoint":
        return cls(longitude=math.radians(lon_deg), latitude=math.radians(lat_deg), height=height)

    @property
    def longitude_deg(self) -> float:
        return math.degrees(self.longitude)

    @property
    def latitude_deg(self) -> float:
        return math.degrees(self.latitude)

    def with_height(self, height: Optional[float]) -> "GeoPoint":
        return replace(self, height=height)

@dataclass
class PlanningParameters:
    """Per-run planning options supplied by the caller."""
    line_spacing_m: float = PlanningDefaults.LINE_SPACING_M
    follow_terrain: bool = PlanningDefaults.FOLLOW_TERRAIN
    altitude_m: float = PlanningDefaults.ALTITUDE_M
    smooth_path: bool = PlanningDefaults.SMOOTH_PATH
    smoothing_factor: int = PlanningDefaults.SMOOTHING_FACTOR

    def validate(self) -> List[str]:
        errors = []
        if self.line_spacing_m <= 0:
            errors.append("Line spacing must be greater than zero.")
        if self.smoothing_factor < 0:
            errors.append("Smoothing factor cannot be negative.")
        if int(self.smoothing_factor) != self.smoothing_factor:
            errors.append("Smoothing factor must be a whole number.")
        return errors

@dataclass
class CoveragePath:
    """The result of one planning run, ready for export or display."""
    waypoints: List[GeoPoint]
    orientation_rad: float
    parameters: PlanningParameters
    total_distance_m: float
    estimated_time_min: float
    area_km2: float
    terrain_fallback: bool = False
    warnings: List[str] = field(default_factory=list)

    @property
    def waypoint_count(self) -> int:
        return len(self.waypoints)
