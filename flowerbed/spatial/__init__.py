"""
Spatial indexing for spawn distance checks.
"""

from .proximity import ProximityIndex

__all__ = ["ProximityIndex"]
