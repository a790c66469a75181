# coverageplanner/terrain/open_meteo.py
"""
Samples ground elevation from the Open-Meteo elevation API.

Requests go through an on-disk cache and a retrying session, so re-planning
the same area does not hit the network again.
"""
import logging
from typing import List, Optional, Sequence, Tuple

import requests
import requests_cache
from retry_requests import retry

from .constants import TerrainConstants
from .data_models import TerrainConfig, TerrainResult
from .exceptions import TerrainSamplingError
from .providers import TerrainProvider

class OpenMeteoTerrainProvider(TerrainProvider):
    """
    Terrain provider backed by https://open-meteo.com/en/docs/elevation-api.
    """
    name = "open-meteo"

    def __init__(self, config: Optional[TerrainConfig] = None, session: Optional[requests.Session] = None):
        """
        Args:
            config: Cache, retry and batching settings.
            session: Pre-built HTTP session; mainly for tests.
        """
        self.config = config or TerrainConfig()
        if session is None:
            if self.config.cache_enabled:
                session = requests_cache.CachedSession(
                    self.config.cache_name,
                    backend='sqlite',
                    expire_after=self.config.expire_after_s
                )
            else:
                session = requests.Session()
            session = retry(session, retries=self.config.retries, backoff_factor=self.config.backoff_factor)
        self.session = session
        logging.info(f"OpenMeteoTerrainProvider initialized. Cache enabled: {self.config.cache_enabled}")

    def sample_heights(self, points: Sequence) -> TerrainResult:
        if not points:
            return TerrainResult(heights=[])

        coords = self.to_lon_lat_degrees(points)
        heights: List[float] = []
        try:
            for start in range(0, len(coords), self.config.batch_size):
                heights.extend(self._fetch_batch(coords[start:start + self.config.batch_size]))
        except (requests.exceptions.RequestException, TerrainSamplingError, KeyError, TypeError, ValueError) as e:
            logging.error(f"Failure while sampling Open-Meteo elevation for {len(coords)} points: {e}")
            return TerrainResult.failure(str(e))

        result = TerrainResult(heights=heights)
        logging.info(f"Sampled Open-Meteo elevation for {result.resolved_count}/{len(coords)} points.")
        return result

    def _fetch_batch(self, batch: List[Tuple[float, float]]) -> List[float]:
        params = {
            'latitude': ",".join(f"{lat:.6f}" for _, lat in batch),
            'longitude': ",".join(f"{lon:.6f}" for lon, _ in batch)
        }
        response = self.session.get(TerrainConstants.OPEN_METEO_ELEVATION_URL, params=params,
                                    timeout=self.config.timeout_s)
        response.raise_for_status()

        elevations = response.json().get('elevation')
        if elevations is None or len(elevations) != len(batch):
            received = 0 if elevations is None else len(elevations)
            raise TerrainSamplingError(f"Expected {len(batch)} elevations, received {received}")
        return [float('nan') if e is None else float(e) for e in elevations]

    def close(self) -> None:
        self.session.close()
