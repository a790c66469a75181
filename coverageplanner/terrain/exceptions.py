"""coverageplanner/terrain/exceptions.py"""

class TerrainError(Exception):
    """Base exception for all terrain sampling errors."""
    pass

class TerrainSamplingError(TerrainError):
    """Raised for malformed or incomplete elevation responses."""
    pass

class TerrainSourceError(TerrainError):
    """Raised when a terrain data source cannot be opened."""
    pass
