"""
Terrain sampling collaborators used to drape coverage paths over the ground.
"""

from .data_models import TerrainResult, TerrainConfig
from .providers import TerrainProvider
from .open_meteo import OpenMeteoTerrainProvider
from .dem_provider import DemTerrainProvider
from .exceptions import TerrainError, TerrainSamplingError, TerrainSourceError

__all__ = [
    "TerrainResult",
    "TerrainConfig",
    "TerrainProvider",
    "OpenMeteoTerrainProvider",
    "DemTerrainProvider",
    "TerrainError",
    "TerrainSamplingError",
    "TerrainSourceError"
]
