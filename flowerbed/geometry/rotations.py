"""
Rotation utilities for petal and flower orientation.

Quaternions are numpy arrays in the ``[w, x, y, z]`` convention used by
``trimesh.transformations``. Composition follows the scene-graph rule
``compose(a, b)`` == matrix product ``A @ B``: ``b`` is applied first in
the local frame, then ``a``.

ANGLE CONVENTIONS
-----------------
Public helpers take DEGREES; ``trimesh.transformations`` takes radians.
"""

from typing import Sequence
import numpy as np
from trimesh import transformations as tf

WORLD_UP = np.array([0.0, 1.0, 0.0])
FORWARD = np.array([0.0, 0.0, 1.0])
IDENTITY = np.array([1.0, 0.0, 0.0, 0.0])

_EPS = 1e-9


def axis_angle_quaternion(degrees: float, axis: Sequence[float]) -> np.ndarray:
    """
    Quaternion for a rotation of ``degrees`` about ``axis``.

    Parameters
    ----------
    degrees : float
        Rotation angle in degrees (right-hand rule).
    axis : sequence of float
        Rotation axis; need not be normalised.

    Returns
    -------
    np.ndarray
        Unit quaternion [w, x, y, z].
    """
    return tf.quaternion_about_axis(np.radians(degrees), np.asarray(axis, dtype=float))


def euler_quaternion(x_degrees: float, y_degrees: float = 0.0, z_degrees: float = 0.0) -> np.ndarray:
    """
    Quaternion from Euler angles in degrees.

    Rotations are applied about Z first, then X, then Y, which is the order
    scene editors use for their "rotation" fields.
    """
    qx = axis_angle_quaternion(x_degrees, [1.0, 0.0, 0.0])
    qy = axis_angle_quaternion(y_degrees, [0.0, 1.0, 0.0])
    qz = axis_angle_quaternion(z_degrees, [0.0, 0.0, 1.0])
    return compose(qy, qx, qz)


def compose(*quaternions: np.ndarray) -> np.ndarray:
    """
    Compose rotations left to right as a matrix product.

    ``compose(a, b, c)`` rotates by ``c`` first, then ``b``, then ``a``
    (equivalently: ``a`` then local ``b`` then local ``c``).
    """
    result = IDENTITY.copy()
    for q in quaternions:
        result = tf.quaternion_multiply(result, q)
    return result / np.linalg.norm(result)


def _from_to_quaternion(source: np.ndarray, target: np.ndarray) -> np.ndarray:
    """Shortest-arc rotation taking unit vector ``source`` onto unit vector ``target``."""
    axis = np.cross(source, target)
    axis_norm = np.linalg.norm(axis)
    cos_angle = float(np.clip(np.dot(source, target), -1.0, 1.0))

    if axis_norm < _EPS:
        if cos_angle > 0:
            return IDENTITY.copy()
        # Opposite vectors: any perpendicular axis works
        perpendicular = np.cross(source, [1.0, 0.0, 0.0])
        if np.linalg.norm(perpendicular) < _EPS:
            perpendicular = np.cross(source, [0.0, 1.0, 0.0])
        return tf.quaternion_about_axis(np.pi, perpendicular)

    return tf.quaternion_about_axis(np.arccos(cos_angle), axis / axis_norm)


def look_rotation(forward: Sequence[float], up: Sequence[float] = WORLD_UP) -> np.ndarray:
    """
    Rotation that points the local +Z axis along ``forward``.

    The local +Y axis is kept as close to ``up`` as possible.

    Parameters
    ----------
    forward : sequence of float
        Direction to look along; need not be normalised.
    up : sequence of float, optional
        Reference up direction. Default world +Y.

    Returns
    -------
    np.ndarray
        Unit quaternion [w, x, y, z].

    Notes
    -----
    A zero-length ``forward`` yields the identity rotation. When ``forward``
    is parallel to ``up`` the up constraint cannot be met and the
    shortest-arc rotation from +Z to ``forward`` is returned.
    """
    forward = np.asarray(forward, dtype=float)
    length = np.linalg.norm(forward)
    if length < _EPS:
        return IDENTITY.copy()
    z_axis = forward / length

    x_axis = np.cross(np.asarray(up, dtype=float), z_axis)
    x_norm = np.linalg.norm(x_axis)
    if x_norm < _EPS:
        return _from_to_quaternion(FORWARD, z_axis)
    x_axis = x_axis / x_norm
    y_axis = np.cross(z_axis, x_axis)

    matrix = np.eye(4)
    matrix[:3, 0] = x_axis
    matrix[:3, 1] = y_axis
    matrix[:3, 2] = z_axis
    return tf.quaternion_from_matrix(matrix)


def quaternion_to_matrix(q: np.ndarray) -> np.ndarray:
    """3x3 rotation matrix for quaternion ``q``."""
    return tf.quaternion_matrix(q)[:3, :3]


def rotate_vector(q: np.ndarray, vector: Sequence[float]) -> np.ndarray:
    """Rotate ``vector`` by quaternion ``q``."""
    return quaternion_to_matrix(q) @ np.asarray(vector, dtype=float)


def transform_matrix(position: Sequence[float], q: np.ndarray) -> np.ndarray:
    """4x4 homogeneous transform: rotate by ``q`` then translate to ``position``."""
    matrix = tf.quaternion_matrix(q)
    matrix[:3, 3] = np.asarray(position, dtype=float)
    return matrix


__all__ = [
    "WORLD_UP",
    "FORWARD",
    "IDENTITY",
    "axis_angle_quaternion",
    "euler_quaternion",
    "compose",
    "look_rotation",
    "quaternion_to_matrix",
    "rotate_vector",
    "transform_matrix",
]
