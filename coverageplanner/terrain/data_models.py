# coverageplanner/terrain/data_models.py
"""
Data structures exchanged with terrain sampling collaborators.
"""
import math
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import TerrainConstants

@dataclass
class TerrainResult:
    """
    Outcome of one batched terrain sampling call.

    `heights` holds one ground elevation per requested point, NaN where the
    provider could not resolve it. A populated `error` means the whole call
    failed and `heights` must not be used.
    """
    heights: List[float] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def resolved_count(self) -> int:
        return sum(1 for h in self.heights if not math.isnan(h))

    @classmethod
    def failure(cls, message: str) -> "TerrainResult":
        return cls(heights=[], error=message)

@dataclass
class TerrainConfig:
    """Configuration for web-backed terrain providers."""
    cache_enabled: bool = True
    cache_name: str = TerrainConstants.CACHE_NAME
    expire_after_s: int = TerrainConstants.CACHE_EXPIRE_AFTER_S
    retries: int = TerrainConstants.RETRIES
    backoff_factor: float = TerrainConstants.BACKOFF_FACTOR
    timeout_s: float = TerrainConstants.REQUEST_TIMEOUT_S
    batch_size: int = TerrainConstants.OPEN_METEO_MAX_COORDINATES
