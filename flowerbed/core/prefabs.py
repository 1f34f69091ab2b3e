"""
Prefab meshes for petals and flower heads.

A prefab reference in the configuration is either ``"default"`` (a
built-in mesh made with ``trimesh.creation``) or a path to any mesh file
trimesh can load. Instances are always copies; the template is never
placed in a scene directly.
"""

from pathlib import Path
from typing import Optional, Union
import logging
import numpy as np
import trimesh

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PREFAB = "default"


def default_petal_mesh(length: float = 0.3, width: float = 0.12, thickness: float = 0.01) -> trimesh.Trimesh:
    """
    Built-in petal: a flattened ellipsoid.

    The petal's long axis is its local +Y, its flat face looks along local
    +Z and its base sits at the local origin, so a rotation that points +Y
    outward lays the petal radially.
    """
    mesh = trimesh.creation.icosphere(subdivisions=2, radius=0.5)
    mesh.apply_scale([width, length, thickness])
    mesh.apply_translation([0.0, length / 2.0, 0.0])
    mesh.visual.face_colors = [230, 230, 230, 255]
    return mesh


def default_flower_mesh(radius: float = 0.12, height: float = 0.06) -> trimesh.Trimesh:
    """Built-in flower head: a short upright cylinder centred at the origin."""
    mesh = trimesh.creation.cylinder(radius=radius, height=height, sections=24)
    # trimesh cylinders run along Z; stand it up along +Y
    mesh.apply_transform(trimesh.transformations.rotation_matrix(-np.pi / 2, [1, 0, 0]))
    mesh.visual.face_colors = [120, 80, 30, 255]
    return mesh


def load_prefab(path: Union[str, Path]) -> trimesh.Trimesh:
    """
    Load a prefab mesh from disk.

    Scene files are flattened into a single mesh.

    Raises
    ------
    ConfigurationError
        If the file does not exist or holds no mesh geometry.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Prefab file not found: {path}")

    loaded = trimesh.load(str(path), force="mesh")
    if not isinstance(loaded, trimesh.Trimesh) or len(loaded.faces) == 0:
        raise ConfigurationError(f"Prefab file contains no triangle mesh: {path}")

    logger.debug(f"Loaded prefab {path} ({len(loaded.faces)} faces)")
    return loaded


def resolve_prefab(reference: Optional[str], kind: str) -> trimesh.Trimesh:
    """
    Resolve a prefab reference to a template mesh.

    Parameters
    ----------
    reference : str or None
        ``"default"`` or a mesh path.
    kind : str
        ``"petal"`` or ``"flower"``; selects the built-in mesh and names the
        prefab in error messages.

    Raises
    ------
    ConfigurationError
        If the reference is missing or cannot be loaded.
    """
    if not reference:
        raise ConfigurationError(f"{kind.capitalize()} prefab is not assigned")
    if reference == DEFAULT_PREFAB:
        if kind == "petal":
            return default_petal_mesh()
        return default_flower_mesh()
    return load_prefab(reference)


__all__ = [
    "DEFAULT_PREFAB",
    "default_petal_mesh",
    "default_flower_mesh",
    "load_prefab",
    "resolve_prefab",
]
