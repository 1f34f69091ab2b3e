"""
Geometry utilities: quaternion rotations and transforms.
"""

from .rotations import (
    WORLD_UP,
    FORWARD,
    IDENTITY,
    axis_angle_quaternion,
    euler_quaternion,
    compose,
    look_rotation,
    quaternion_to_matrix,
    rotate_vector,
    transform_matrix,
)

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
