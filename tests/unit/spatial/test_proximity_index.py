"""
Unit tests for ProximityIndex.
"""

import numpy as np
import pytest

from flowerbed.spatial.proximity import ProximityIndex


class TestProximityIndex:
    """Tests for nearest-distance queries."""

    def test_empty_index(self):
        index = ProximityIndex([])
        assert len(index) == 0
        assert index.nearest_distance([1.0, 2.0, 3.0]) == float("inf")
        assert index.is_far_enough([0.0, 0.0, 0.0], 100.0)

    def test_nearest_distance(self):
        index = ProximityIndex([[0.0, 0.0, 0.0], [4.0, 0.0, 0.0]])
        assert len(index) == 2
        assert index.nearest_distance([3.0, 0.0, 0.0]) == pytest.approx(1.0)

    def test_boundary_is_inclusive(self):
        index = ProximityIndex([np.array([0.0, 0.0, 0.0])])
        assert index.is_far_enough([0.0, 0.0, 2.0], 2.0)
        assert not index.is_far_enough([0.0, 0.0, 1.999], 2.0)

    def test_snapshot_is_independent_of_source_list(self):
        positions = [np.array([0.0, 0.0, 0.0])]
        index = ProximityIndex(positions)
        positions.append(np.array([5.0, 0.0, 0.0]))

        assert len(index) == 1
        assert index.nearest_distance([5.0, 0.0, 0.0]) == pytest.approx(5.0)
