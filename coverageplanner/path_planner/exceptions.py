# coverageplanner/path_planner/exceptions.py

class CoveragePlannerError(Exception):
    """Base exception for coverage path planning errors."""
    pass

class InvalidPolygonError(CoveragePlannerError):
    """Raised when a polygon cannot be used as a survey area."""
    pass

class InvalidParametersError(CoveragePlannerError):
    """Raised when planning parameters fail validation."""
    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))
