"""
Flowerbed - procedural flower placement.

This package places 3D flowers and their petals in a scene: a layered
phyllotaxis petal layout per flower, and a single-point Poisson-disk style
spawner that keeps flowers visible and apart.

Main Entry Points:
    - compute_layout(): Petal placements for one flower
    - try_sample(): One spawn position search
    - grow_flower(): Instantiate a flower and its petals in a scene
    - FlowerSpawner: Session controller (spawn / reset)

Example:
    >>> from flowerbed import FlowerSpawner
    >>> from flowerbed_policies import GardenConfig
    >>>
    >>> spawner = FlowerSpawner(GardenConfig(seed=7))
    >>> spawner.initialize()
    >>> report = spawner.request_spawn()
    >>> spawner.scene.export("garden.glb")
"""

__version__ = "0.1.0"

from .api import grow_flower, FlowerSpawner
from .ops import compute_layout, try_sample, SampleConstraints
from .core import (
    PetalPlacement,
    ViewportCamera,
    FlowerScene,
    PetalMaterial,
    ConfigurationError,
    SamplingExhausted,
    MissingDependency,
)

__all__ = [
    # High-level API
    "grow_flower",
    "FlowerSpawner",
    # Operations
    "compute_layout",
    "try_sample",
    "SampleConstraints",
    # Core types
    "PetalPlacement",
    "ViewportCamera",
    "FlowerScene",
    "PetalMaterial",
    # Errors
    "ConfigurationError",
    "SamplingExhausted",
    "MissingDependency",
]
