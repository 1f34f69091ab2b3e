"""
Core value types shared by the layout and spawning operations.

Frames
------
PetalPlacement positions are LOCAL offsets in the owning flower's frame.
Spawn positions are WORLD offsets relative to the spawn-area origin.
"""

from dataclasses import dataclass
from typing import Any, Dict
import numpy as np

from ..geometry.rotations import quaternion_to_matrix, transform_matrix


@dataclass(frozen=True)
class PetalPlacement:
    """
    Position and orientation of one petal relative to its flower.

    Attributes
    ----------
    index : int
        Zero-based global petal index, continuous across layers. This is
        also the angular step index used to place the petal.
    layer_index : int
        Index of the layer the petal belongs to.
    position : np.ndarray
        Local position (3,).
    orientation : np.ndarray
        Unit quaternion [w, x, y, z].
    """

    index: int
    layer_index: int
    position: np.ndarray
    orientation: np.ndarray

    def __post_init__(self):
        position = np.array(self.position, dtype=float)
        orientation = np.array(self.orientation, dtype=float)
        position.flags.writeable = False
        orientation.flags.writeable = False
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "orientation", orientation)

    def rotation_matrix(self) -> np.ndarray:
        return quaternion_to_matrix(self.orientation)

    def local_transform(self) -> np.ndarray:
        """4x4 transform placing the petal in its flower's frame."""
        return transform_matrix(self.position, self.orientation)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "layer_index": self.layer_index,
            "position": [float(v) for v in self.position],
            "orientation": [float(v) for v in self.orientation],
        }


__all__ = ["PetalPlacement"]
