"""
Flowerbed Policies - Centralized configuration for procedural flower gardens.

This package provides all policy dataclasses used by the flowerbed library.
All policies are JSON-serializable and support the "requested vs effective"
pattern reported through OperationReport.

Usage:
    from flowerbed_policies import GardenConfig, SpawnPolicy, OperationReport
    from flowerbed_policies.flower import PetalLayoutPolicy
"""

from .base import (
    OperationReport,
    validate_policy,
    coerce_float,
    coerce_vec3,
    alias_fields,
)

from .flower import (
    GOLDEN_ANGLE_DEGREES,
    PetalLayoutPolicy,
    FlowerPolicy,
)

from .spawning import (
    SpawnPolicy,
    CameraPolicy,
)

from .garden import (
    DEFAULT_PALETTE,
    GardenConfig,
)

__all__ = [
    # Base
    "OperationReport",
    "validate_policy",
    "coerce_float",
    "coerce_vec3",
    "alias_fields",
    # Flower policies
    "GOLDEN_ANGLE_DEGREES",
    "PetalLayoutPolicy",
    "FlowerPolicy",
    # Spawning policies
    "SpawnPolicy",
    "CameraPolicy",
    # Garden
    "DEFAULT_PALETTE",
    "GardenConfig",
]
