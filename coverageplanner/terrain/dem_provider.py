# coverageplanner/terrain/dem_provider.py
"""
Samples ground elevation from local DEM GeoTIFF rasters.

Every raster in a directory is opened once. Points are sampled against the
finest-resolution raster first and fall through to coarser ones only where
the finer raster has no data.
"""
import logging
import os
from typing import List, Sequence, Tuple

import numpy as np
import rasterio
from rasterio.errors import RasterioError
from rasterio.warp import transform

from .constants import TerrainConstants
from .data_models import TerrainResult
from .exceptions import TerrainSourceError
from .providers import TerrainProvider

class DemTerrainProvider(TerrainProvider):
    name = "dem"

    def __init__(self, dem_dir_path: str):
        if not os.path.isdir(dem_dir_path):
            raise TerrainSourceError(f"DEM directory not found: {dem_dir_path}")

        files = sorted(f for f in os.listdir(dem_dir_path) if f.lower().endswith(TerrainConstants.DEM_FILE_SUFFIXES))
        sources = []
        try:
            for f in files:
                sources.append(rasterio.open(os.path.join(dem_dir_path, f)))
        except RasterioError as e:
            for src in sources:
                src.close()
            raise TerrainSourceError(f"Could not open DEM rasters in {dem_dir_path}: {e}") from e

        # Finest pixel area first
        self.dem_sources = sorted(sources, key=lambda src: abs(src.res[0] * src.res[1]))
        logging.info(f"DemTerrainProvider initialized with {len(self.dem_sources)} DEM files.")

    def sample_heights(self, points: Sequence) -> TerrainResult:
        if not self.dem_sources:
            return TerrainResult.failure("No DEM rasters available.")

        coords = self.to_lon_lat_degrees(points)
        heights = np.full(len(coords), np.nan)
        try:
            for src in self.dem_sources:
                pending = np.flatnonzero(np.isnan(heights))
                if len(pending) == 0:
                    break
                src_coords = self._to_source_crs(src, [coords[k] for k in pending])
                for k, value in zip(pending, src.sample(src_coords, indexes=1, masked=True)):
                    if np.ma.is_masked(value):
                        continue
                    elevation = float(value[0])
                    if elevation > TerrainConstants.DEM_NODATA_FLOOR_M:
                        heights[k] = elevation
        except (RasterioError, ValueError) as e:
            logging.error(f"Failure while sampling DEM elevation for {len(coords)} points: {e}")
            return TerrainResult.failure(str(e))

        result = TerrainResult(heights=heights.tolist())
        logging.info(f"Sampled DEM elevation for {result.resolved_count}/{len(coords)} points.")
        return result

    @staticmethod
    def _to_source_crs(src, coords: List[Tuple[float, float]]) -> List[Tuple[float, float]]:
        if src.crs is None or src.crs.is_geographic:
            return coords
        xs, ys = transform('EPSG:4326', src.crs, [c[0] for c in coords], [c[1] for c in coords])
        return list(zip(xs, ys))

    def close(self) -> None:
        for src in self.dem_sources:
            src.close()
        logging.info("DEM sources closed.")
