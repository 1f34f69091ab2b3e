"""
Perspective camera used to bound the visible spawn area.

The camera only needs to answer one question for spawning: where does a
world point land in normalised view coordinates, and is it in front of the
camera?
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence
import numpy as np

from flowerbed_policies import CameraPolicy


@dataclass
class ViewportCamera:
    """
    Pinhole perspective camera.

    Parameters
    ----------
    position : np.ndarray
        Camera position in world coordinates.
    target : np.ndarray
        Point the camera looks at.
    up : np.ndarray, optional
        Approximate up direction. Default world +Y.
    fov_degrees : float, optional
        Vertical field of view in degrees. Default 60.
    aspect : float, optional
        Viewport width / height. Default 16/9.

    Viewport coordinates:
        x, y in [0, 1] from the bottom-left to the top-right of the view,
        z is the depth along the viewing direction in world units.
    """

    position: np.ndarray
    target: np.ndarray
    up: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    fov_degrees: float = 60.0
    aspect: float = 16.0 / 9.0

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=float)
        self.target = np.asarray(self.target, dtype=float)
        self.up = np.asarray(self.up, dtype=float)

        forward = self.target - self.position
        norm = np.linalg.norm(forward)
        if norm < 1e-12:
            raise ValueError("Camera position and target must differ")
        self._forward = forward / norm

        # Left-handed screen basis: looking along +Z, screen right is world +X
        right = np.cross(self.up, self._forward)
        right_norm = np.linalg.norm(right)
        if right_norm < 1e-12:
            raise ValueError("Camera up direction must not be parallel to the view direction")
        self._right = right / right_norm
        self._up = np.cross(self._forward, self._right)
        self._tan_half_fov = np.tan(np.radians(self.fov_degrees) / 2.0)

    @classmethod
    def from_policy(cls, policy: Optional[CameraPolicy]) -> Optional["ViewportCamera"]:
        """Build a camera from its policy; ``None`` stays ``None``."""
        if policy is None:
            return None
        return cls(
            position=np.array(policy.position),
            target=np.array(policy.target),
            up=np.array(policy.up),
            fov_degrees=policy.fov_degrees,
            aspect=policy.aspect,
        )

    @property
    def forward(self) -> np.ndarray:
        return self._forward.copy()

    def world_to_viewport(self, point: Sequence[float]) -> np.ndarray:
        """
        Project a world point to viewport coordinates.

        Returns
        -------
        np.ndarray
            (x, y, depth). Points on the camera plane get infinite x, y.
        """
        offset = np.asarray(point, dtype=float) - self.position
        depth = float(np.dot(offset, self._forward))
        if abs(depth) < 1e-12:
            return np.array([np.inf, np.inf, depth])

        cam_x = float(np.dot(offset, self._right))
        cam_y = float(np.dot(offset, self._up))
        ndc_x = cam_x / (depth * self._tan_half_fov * self.aspect)
        ndc_y = cam_y / (depth * self._tan_half_fov)
        return np.array([(ndc_x + 1.0) / 2.0, (ndc_y + 1.0) / 2.0, depth])


__all__ = ["ViewportCamera"]
