"""
Unit tests for quaternion rotation helpers.

These tests pin down the look-rotation convention (local +Z toward the
target, local +Y toward world up) and the left-to-right composition order
that petal orientation depends on.
"""

import pytest
import numpy as np
from trimesh import transformations as tf

from flowerbed.geometry.rotations import (
    axis_angle_quaternion,
    compose,
    euler_quaternion,
    look_rotation,
    quaternion_to_matrix,
    rotate_vector,
    transform_matrix,
)


class TestLookRotation:
    """Tests for look_rotation."""

    @pytest.mark.parametrize("forward", [
        (1.0, 0.0, 0.0),
        (1.0, 2.0, 3.0),
        (-4.0, 0.5, 0.0),
        (0.0, -0.2, -1.0),
    ])
    def test_forward_axis_points_at_target(self, forward):
        """Local +Z is mapped onto the normalised forward direction."""
        q = look_rotation(forward)
        expected = np.array(forward) / np.linalg.norm(forward)
        np.testing.assert_allclose(rotate_vector(q, [0, 0, 1]), expected, atol=1e-9)

    def test_local_right_axis_stays_horizontal(self):
        """With world up as reference, local +X has no vertical component."""
        q = look_rotation([2.0, 1.0, 1.0])
        right = rotate_vector(q, [1, 0, 0])
        assert right[1] == pytest.approx(0.0, abs=1e-9)

        up = rotate_vector(q, [0, 1, 0])
        assert up[1] > 0

    def test_horizontal_forward_keeps_world_up(self):
        """Looking along a horizontal direction leaves local +Y on world +Y."""
        q = look_rotation([3.0, 0.0, -4.0])
        np.testing.assert_allclose(rotate_vector(q, [0, 1, 0]), [0, 1, 0], atol=1e-9)

    def test_zero_forward_is_identity(self):
        """A zero-length direction yields the identity rotation."""
        q = look_rotation([0.0, 0.0, 0.0])
        np.testing.assert_allclose(quaternion_to_matrix(q), np.eye(3), atol=1e-12)

    @pytest.mark.parametrize("forward", [(0.0, 5.0, 0.0), (0.0, -2.0, 0.0)])
    def test_forward_parallel_to_up_uses_shortest_arc(self, forward):
        """Forward parallel to up still points +Z at the target."""
        q = look_rotation(forward)
        expected = np.array(forward) / np.linalg.norm(forward)
        np.testing.assert_allclose(rotate_vector(q, [0, 0, 1]), expected, atol=1e-9)

    def test_result_is_unit_quaternion(self):
        q = look_rotation([0.3, -0.7, 2.0])
        assert np.linalg.norm(q) == pytest.approx(1.0)


class TestEulerAndCompose:
    """Tests for euler_quaternion and compose."""

    def test_x_rotation_takes_up_to_forward(self):
        """+90 degrees about X rotates local +Y onto +Z."""
        q = euler_quaternion(90.0)
        np.testing.assert_allclose(rotate_vector(q, [0, 1, 0]), [0, 0, 1], atol=1e-12)

    def test_compose_matches_matrix_product(self):
        """compose(a, b) equals the matrix product A @ B."""
        a = axis_angle_quaternion(90.0, [0, 1, 0])
        b = axis_angle_quaternion(90.0, [1, 0, 0])

        expected = quaternion_to_matrix(a) @ quaternion_to_matrix(b)
        np.testing.assert_allclose(quaternion_to_matrix(compose(a, b)), expected, atol=1e-12)

    def test_compose_order_matters(self):
        a = axis_angle_quaternion(90.0, [0, 1, 0])
        b = axis_angle_quaternion(90.0, [1, 0, 0])

        ab = quaternion_to_matrix(compose(a, b))
        ba = quaternion_to_matrix(compose(b, a))
        assert not np.allclose(ab, ba)

    def test_euler_applies_z_then_x_then_y(self):
        """Euler angles compose as Ry @ Rx @ Rz."""
        q = euler_quaternion(30.0, 45.0, 60.0)
        rx = tf.rotation_matrix(np.radians(30.0), [1, 0, 0])[:3, :3]
        ry = tf.rotation_matrix(np.radians(45.0), [0, 1, 0])[:3, :3]
        rz = tf.rotation_matrix(np.radians(60.0), [0, 0, 1])[:3, :3]
        np.testing.assert_allclose(quaternion_to_matrix(q), ry @ rx @ rz, atol=1e-12)

    def test_compose_of_nothing_is_identity(self):
        np.testing.assert_allclose(quaternion_to_matrix(compose()), np.eye(3), atol=1e-12)


class TestTransformMatrix:
    """Tests for transform_matrix."""

    def test_rotation_then_translation(self):
        q = axis_angle_quaternion(90.0, [0, 1, 0])
        matrix = transform_matrix([1.0, 2.0, 3.0], q)

        point = matrix @ np.array([1.0, 0.0, 0.0, 1.0])
        # +X rotated 90 degrees about +Y is -Z
        np.testing.assert_allclose(point[:3], [1.0, 2.0, 2.0], atol=1e-12)
