"""
coverageplanner - lawnmower coverage path planning for survey drones.
"""

__version__ = "0.1.0"
