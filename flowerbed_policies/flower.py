"""
Flower growth policies.

This module contains the policies that describe a single flower: which
prefabs it is built from, how its petals are laid out in concentric layers
and whether the whole flower is spun about its vertical axis.

All policies are JSON-serializable and support the "requested vs effective"
pattern used by OperationReport.

ANGLE CONVENTIONS
-----------------
All angles in these policies are in DEGREES. Conversion to radians happens
inside the layout operation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import alias_fields


GOLDEN_ANGLE_DEGREES = 137.5

_LAYOUT_ALIASES = {
    "numberOfPetals": "number_of_petals",
    "numberOfLayers": "number_of_layers",
    "layerRadii": "layer_radii",
    "petalsPerLayerCount": "petals_per_layer",
    "angleDegrees": "angle_degrees",
    "angleScale": "angle_scale",
    "startAngleOffsetDegrees": "start_angle_offset_degrees",
    "layer1VerticalOffset": "layer0_vertical_offset",
    "layer1UpwardAngle": "layer0_upward_angle_degrees",
}

_FLOWER_ALIASES = {
    "petalPrefab": "petal_prefab",
    "flowerPrefab": "flower_prefab",
    "rotateFlower": "rotate_flower",
    "rotationSpeed": "rotation_speed",
}


@dataclass
class PetalLayoutPolicy:
    """
    Policy for layered phyllotaxis petal placement.

    Petals are placed on concentric horizontal circles ("layers"). A single
    running petal index drives the angular step across all layers, so the
    first petal of a layer continues the angular sequence of the previous
    layer's last petal.

    JSON Schema:
    {
        "number_of_petals": int,
        "number_of_layers": int,
        "layer_radii": [float, ...] (length == number_of_layers),
        "petals_per_layer": [int, ...] (length == number_of_layers),
        "angle_degrees": float in [0, 360],
        "angle_scale": float,
        "start_angle_offset_degrees": float,
        "layer0_vertical_offset": float,
        "layer0_upward_angle_degrees": float in [0, 90]
    }

    Only the first declared layer (index 0) receives the vertical offset
    and the upward tilt, whatever its radius.

    ``number_of_petals`` is the declared total. The layout itself always
    follows ``petals_per_layer``; a mismatch is only reported as a warning.
    """
    number_of_petals: int = 34
    number_of_layers: int = 2
    layer_radii: Optional[List[float]] = field(default_factory=lambda: [0.25, 0.45])
    petals_per_layer: Optional[List[int]] = field(default_factory=lambda: [13, 21])
    angle_degrees: float = GOLDEN_ANGLE_DEGREES
    angle_scale: float = 1.0
    start_angle_offset_degrees: float = 0.0
    layer0_vertical_offset: float = 0.1
    layer0_upward_angle_degrees: float = 15.0

    def validate(self) -> List[str]:
        """Return range violations for the scalar fields (empty if valid)."""
        errors = []
        if self.number_of_layers < 0:
            errors.append(f"number_of_layers must be >= 0, got {self.number_of_layers}")
        if not 0.0 <= self.angle_degrees <= 360.0:
            errors.append(f"angle_degrees must be in [0, 360], got {self.angle_degrees}")
        if not 0.0 <= self.layer0_upward_angle_degrees <= 90.0:
            errors.append(
                f"layer0_upward_angle_degrees must be in [0, 90], "
                f"got {self.layer0_upward_angle_degrees}"
            )
        if self.layer_radii is not None:
            for i, radius in enumerate(self.layer_radii):
                if radius <= 0:
                    errors.append(f"layer_radii[{i}] must be > 0, got {radius}")
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number_of_petals": self.number_of_petals,
            "number_of_layers": self.number_of_layers,
            "layer_radii": list(self.layer_radii) if self.layer_radii is not None else None,
            "petals_per_layer": list(self.petals_per_layer) if self.petals_per_layer is not None else None,
            "angle_degrees": self.angle_degrees,
            "angle_scale": self.angle_scale,
            "start_angle_offset_degrees": self.start_angle_offset_degrees,
            "layer0_vertical_offset": self.layer0_vertical_offset,
            "layer0_upward_angle_degrees": self.layer0_upward_angle_degrees,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PetalLayoutPolicy":
        d = alias_fields(d, _LAYOUT_ALIASES)
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


@dataclass
class FlowerPolicy:
    """
    Policy for building one flower entity.

    JSON Schema:
    {
        "petal_prefab": "default" | path to a mesh file | null,
        "flower_prefab": "default" | path to a mesh file | null,
        "rotate_flower": bool,
        "rotation_speed": float (degrees per second)
    }

    When ``rotate_flower`` is set, the flower is turned once, at growth time,
    about the world up axis by ``rotation_speed * elapsed_time`` degrees.
    """
    petal_prefab: Optional[str] = "default"
    flower_prefab: Optional[str] = "default"
    rotate_flower: bool = False
    rotation_speed: float = 10.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "petal_prefab": self.petal_prefab,
            "flower_prefab": self.flower_prefab,
            "rotate_flower": self.rotate_flower,
            "rotation_speed": self.rotation_speed,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FlowerPolicy":
        d = alias_fields(d, _FLOWER_ALIASES)
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


__all__ = [
    "GOLDEN_ANGLE_DEGREES",
    "PetalLayoutPolicy",
    "FlowerPolicy",
]
