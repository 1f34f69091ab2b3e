"""
KD-tree proximity index over spawned flower positions.
"""

from typing import Sequence
import numpy as np
from scipy.spatial import cKDTree


class ProximityIndex:
    """
    Nearest-neighbour queries against a fixed set of points.

    The index is a snapshot: it is built once per sampling call from the
    positions spawned so far and never updated in place.

    Parameters
    ----------
    points : sequence of array-like
        Existing positions, each of shape (3,).
    """

    def __init__(self, points: Sequence[Sequence[float]]):
        self.points = np.asarray(points, dtype=float).reshape(-1, 3)
        self._tree = cKDTree(self.points) if len(self.points) else None

    def __len__(self) -> int:
        return len(self.points)

    def nearest_distance(self, point: Sequence[float]) -> float:
        """Distance to the closest indexed point (inf when empty)."""
        if self._tree is None:
            return float("inf")
        distance, _ = self._tree.query(np.asarray(point, dtype=float), k=1)
        return float(distance)

    def is_far_enough(self, point: Sequence[float], min_distance: float) -> bool:
        """True unless some indexed point is strictly closer than ``min_distance``."""
        return self.nearest_distance(point) >= min_distance


__all__ = ["ProximityIndex"]
