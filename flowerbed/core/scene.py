"""
FlowerScene - instantiation collaborator backed by a trimesh scene graph.

Flowers are nodes parented to the scene's base frame at their world spawn
position. Petals are child nodes of their flower whose transforms are the
LOCAL petal placements, so moving or rotating a flower carries its petals.
"""

from typing import Dict, List, Optional, Sequence, Union
from pathlib import Path
import logging
import numpy as np
import trimesh

from .materials import PetalMaterial

logger = logging.getLogger(__name__)

BASE_FRAME = "garden"


class FlowerScene:
    """
    Scene that owns every instantiated flower and petal.

    Every instance is a copy of its prefab mesh, so materials can be
    assigned per instance without touching the template.
    """

    def __init__(self):
        self.scene = trimesh.Scene(base_frame=BASE_FRAME)
        self._petals: Dict[str, List[str]] = {}

    @property
    def flower_nodes(self) -> List[str]:
        return list(self._petals.keys())

    def petal_nodes(self, flower_node: str) -> List[str]:
        return list(self._petals.get(flower_node, []))

    @property
    def petal_count(self) -> int:
        return sum(len(p) for p in self._petals.values())

    def add_flower(
        self,
        position: Sequence[float],
        flower_mesh: trimesh.Trimesh,
        rotation_deg: float = 0.0,
    ) -> str:
        """
        Instantiate a flower head at a world position.

        Parameters
        ----------
        position : sequence of float
            World position of the flower origin.
        flower_mesh : trimesh.Trimesh
            Flower prefab; a copy is placed.
        rotation_deg : float, optional
            Rotation about the world up axis through ``position``.

        Returns
        -------
        str
            Node name of the new flower.
        """
        node_name = f"flower_{len(self._petals)}"
        transform = trimesh.transformations.translation_matrix(np.asarray(position, dtype=float))
        if rotation_deg:
            transform = transform @ trimesh.transformations.rotation_matrix(
                np.radians(rotation_deg), [0.0, 1.0, 0.0]
            )

        self.scene.add_geometry(
            flower_mesh.copy(),
            node_name=node_name,
            geom_name=node_name,
            transform=transform,
        )
        self._petals[node_name] = []
        return node_name

    def add_petal(
        self,
        flower_node: str,
        petal_mesh: trimesh.Trimesh,
        local_transform: np.ndarray,
    ) -> trimesh.Trimesh:
        """
        Instantiate a petal as a child of ``flower_node``.

        Returns
        -------
        trimesh.Trimesh
            The placed petal instance (used for material assignment).
        """
        if flower_node not in self._petals:
            raise KeyError(f"Unknown flower node '{flower_node}'")

        node_name = f"{flower_node}/petal_{len(self._petals[flower_node])}"
        instance = petal_mesh.copy()
        self.scene.add_geometry(
            instance,
            node_name=node_name,
            geom_name=node_name,
            parent_node_name=flower_node,
            transform=local_transform,
        )
        self._petals[flower_node].append(node_name)
        # add_geometry may store its own reference; return the stored instance
        return self.scene.geometry.get(node_name, instance)

    def apply_material(self, meshes: Sequence[trimesh.Trimesh], material: PetalMaterial) -> int:
        """
        Assign ``material`` to every mesh with faces.

        Returns
        -------
        int
            Number of meshes that received the material.
        """
        applied = 0
        for mesh in meshes:
            if len(mesh.faces) == 0:
                continue
            mesh.visual.face_colors = material.rgba()
            applied += 1
        return applied

    def world_transform(self, node_name: str) -> np.ndarray:
        """4x4 transform of a node relative to the scene's base frame."""
        matrix, _ = self.scene.graph[node_name]
        return np.array(matrix)

    def world_position(self, node_name: str) -> np.ndarray:
        return self.world_transform(node_name)[:3, 3]

    def clear(self) -> None:
        """Drop every flower and petal (scene reload)."""
        self.scene = trimesh.Scene(base_frame=BASE_FRAME)
        self._petals = {}

    def export(self, path: Union[str, Path], file_type: Optional[str] = None) -> Path:
        """Export the scene; the format follows the file extension unless given."""
        path = Path(path)
        if file_type is None:
            file_type = path.suffix.lstrip(".") or "glb"
        self.scene.export(file_obj=str(path), file_type=file_type)
        logger.info(f"Exported {len(self._petals)} flowers to {path}")
        return path


__all__ = ["BASE_FRAME", "FlowerScene"]
