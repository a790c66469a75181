# coverageplanner/terrain/providers.py
"""
Base contract for terrain sampling collaborators.

A provider turns a batch of points (any objects exposing `longitude` and
`latitude` in radians) into ground elevations in meters. Providers report
failure through `TerrainResult.error` instead of raising, so callers can fall
back with ordinary branching.
"""
import math
from typing import List, Sequence, Tuple

from .data_models import TerrainResult

class TerrainProvider:
    """Interface for anything that can sample ground elevation."""

    name = "terrain"

    def sample_heights(self, points: Sequence) -> TerrainResult:
        raise NotImplementedError

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    @staticmethod
    def to_lon_lat_degrees(points: Sequence) -> List[Tuple[float, float]]:
        return [(math.degrees(p.longitude), math.degrees(p.latitude)) for p in points]
