"""
Flower spawning policies.

Controls the single-point Poisson-disk style rejection search used to pick
a new flower position, the retry bound around it, and the camera that
defines the visible spawn area.

UNIT CONVENTIONS
----------------
Distances are in scene units (the same units as the petal layout radii).
Angles are in DEGREES.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .base import alias_fields, coerce_float, coerce_vec3


_SPAWN_ALIASES = {
    "minDistance": "min_distance",
    "spawnRadius": "spawn_radius",
    "k": "samples_per_active_point",
    "maxSpawnRetries": "max_spawn_retries",
}


@dataclass
class SpawnPolicy:
    """
    Policy for picking flower positions.

    JSON Schema:
    {
        "min_distance": float (> 0),
        "spawn_radius": float (> 0),
        "samples_per_active_point": int (> 0),
        "max_spawn_retries": int (>= 1)
    }

    The spawn area is the horizontal disk of ``spawn_radius`` centred on the
    spawn origin. Candidate offsets around an active point are drawn at a
    radius in ``[min_distance, 2 * min_distance]``.
    """
    min_distance: float = 2.0
    spawn_radius: float = 10.0
    samples_per_active_point: int = 30
    max_spawn_retries: int = 10

    def validate(self) -> List[str]:
        errors = []
        if self.min_distance <= 0:
            errors.append(f"min_distance must be > 0, got {self.min_distance}")
        if self.spawn_radius <= 0:
            errors.append(f"spawn_radius must be > 0, got {self.spawn_radius}")
        if self.samples_per_active_point <= 0:
            errors.append(
                f"samples_per_active_point must be > 0, got {self.samples_per_active_point}"
            )
        if self.max_spawn_retries < 1:
            errors.append(f"max_spawn_retries must be >= 1, got {self.max_spawn_retries}")
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min_distance": self.min_distance,
            "spawn_radius": self.spawn_radius,
            "samples_per_active_point": self.samples_per_active_point,
            "max_spawn_retries": self.max_spawn_retries,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SpawnPolicy":
        d = alias_fields(d, _SPAWN_ALIASES)
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


@dataclass
class CameraPolicy:
    """
    Policy describing the perspective camera that bounds the spawn area.

    JSON Schema:
    {
        "position": [x, y, z],
        "target": [x, y, z],
        "up": [x, y, z],
        "fov_degrees": float (vertical field of view, (0, 180)),
        "aspect": float (width / height, > 0)
    }
    """
    position: Tuple[float, float, float] = (0.0, 12.0, -14.0)
    target: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    up: Tuple[float, float, float] = (0.0, 1.0, 0.0)
    fov_degrees: float = 60.0
    aspect: float = 16.0 / 9.0

    def __post_init__(self):
        self.position = coerce_vec3(self.position, (0.0, 12.0, -14.0))
        self.target = coerce_vec3(self.target)
        self.up = coerce_vec3(self.up, (0.0, 1.0, 0.0))
        self.fov_degrees = coerce_float(self.fov_degrees, 60.0)
        self.aspect = coerce_float(self.aspect, 16.0 / 9.0)

    def validate(self) -> List[str]:
        errors = []
        if not 0.0 < self.fov_degrees < 180.0:
            errors.append(f"fov_degrees must be in (0, 180), got {self.fov_degrees}")
        if self.aspect <= 0:
            errors.append(f"aspect must be > 0, got {self.aspect}")
        if self.position == self.target:
            errors.append("camera position and target must differ")
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": list(self.position),
            "target": list(self.target),
            "up": list(self.up),
            "fov_degrees": self.fov_degrees,
            "aspect": self.aspect,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "CameraPolicy":
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


__all__ = [
    "SpawnPolicy",
    "CameraPolicy",
]
