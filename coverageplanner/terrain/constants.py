# coverageplanner/terrain/constants.py
"""
Static constants for the terrain sampling collaborators.
"""

class TerrainConstants:
    OPEN_METEO_ELEVATION_URL = "https://api.open-meteo.com/v1/elevation"
    # The elevation endpoint accepts at most 100 coordinates per request
    OPEN_METEO_MAX_COORDINATES = 100
    REQUEST_TIMEOUT_S = 10

    CACHE_NAME = "terrain_cache"
    CACHE_EXPIRE_AFTER_S = 3600 * 24 * 7
    RETRIES = 5
    BACKOFF_FACTOR = 0.2

    # DEM samples at or below this are treated as nodata
    DEM_NODATA_FLOOR_M = -1000.0
    DEM_FILE_SUFFIXES = ('.tif', '.tiff')
