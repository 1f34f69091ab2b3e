"""
Core types, collaborators and errors for flowerbed.
"""

from .errors import (
    FlowerbedError,
    ConfigurationError,
    SamplingExhausted,
    MissingDependency,
)
from .types import PetalPlacement
from .camera import ViewportCamera
from .materials import PetalMaterial, palette_from_config, default_palette, choose_material
from .prefabs import default_petal_mesh, default_flower_mesh, load_prefab, resolve_prefab
from .scene import FlowerScene

__all__ = [
    "FlowerbedError",
    "ConfigurationError",
    "SamplingExhausted",
    "MissingDependency",
    "PetalPlacement",
    "ViewportCamera",
    "PetalMaterial",
    "palette_from_config",
    "default_palette",
    "choose_material",
    "default_petal_mesh",
    "default_flower_mesh",
    "load_prefab",
    "resolve_prefab",
    "FlowerScene",
]
