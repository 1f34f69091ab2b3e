"""
Layered phyllotaxis petal layout.

Petals are placed on concentric horizontal circles. A single running petal
index advances the angle by a fixed step (by default the golden angle)
across ALL layers, so the angular sequence continues through layer
boundaries instead of restarting at each layer.

Orientation of every petal:
    look(position) ∘ Rx(90°)                  other layers
    look(position) ∘ Rx(90°) ∘ Rx(-tilt)      layer 0, after its vertical offset

where ``look`` points local +Z from the flower origin toward the petal and
``∘`` applies the right-hand rotation first in the local frame.
"""

from typing import List, Optional
import logging
import numpy as np

from flowerbed_policies import PetalLayoutPolicy
from ..core.errors import ConfigurationError
from ..core.types import PetalPlacement
from ..geometry.rotations import compose, euler_quaternion, look_rotation

logger = logging.getLogger(__name__)

BASE_CORRECTION_DEGREES = 90.0


def validate_layers(policy: PetalLayoutPolicy) -> None:
    """
    Check the per-layer arrays against the declared layer count.

    Raises
    ------
    ConfigurationError
        If either array is missing, has the wrong length, or a petal count
        is negative.
    """
    n_layers = policy.number_of_layers

    if policy.layer_radii is None or len(policy.layer_radii) != n_layers:
        raise ConfigurationError(
            f"Layer radii array is not properly configured. "
            f"Ensure it has {n_layers} elements."
        )

    if policy.petals_per_layer is None or len(policy.petals_per_layer) != n_layers:
        raise ConfigurationError(
            f"Petals per layer count array is not properly configured. "
            f"Ensure it has {n_layers} elements."
        )

    for layer_index, count in enumerate(policy.petals_per_layer):
        if count < 0:
            raise ConfigurationError(
                f"Petal count for layer {layer_index} must be >= 0, got {count}"
            )


def petal_angle_degrees(index: int, policy: PetalLayoutPolicy) -> float:
    """Angle of the petal with zero-based global ``index``."""
    return policy.start_angle_offset_degrees + index * policy.angle_degrees * policy.angle_scale


def compute_layout(policy: Optional[PetalLayoutPolicy] = None) -> List[PetalPlacement]:
    """
    Compute the petal placements for one flower.

    Parameters
    ----------
    policy : PetalLayoutPolicy, optional
        Layer configuration and angular parameters. Default policy if None.

    Returns
    -------
    List[PetalPlacement]
        One placement per petal, layer-major and sequential within a layer.
        The list has exactly ``sum(policy.petals_per_layer)`` entries.

    Raises
    ------
    ConfigurationError
        If the layer arrays do not match ``number_of_layers``.
    """
    if policy is None:
        policy = PetalLayoutPolicy()

    validate_layers(policy)

    total = sum(int(c) for c in policy.petals_per_layer)
    if total != policy.number_of_petals:
        logger.warning(
            f"Declared number_of_petals={policy.number_of_petals} differs from "
            f"the {total} petals configured per layer; using per-layer counts"
        )

    base_correction = euler_quaternion(BASE_CORRECTION_DEGREES, 0.0, 0.0)
    upward_tilt = euler_quaternion(-policy.layer0_upward_angle_degrees, 0.0, 0.0)

    placements = []
    petal_count = 0

    for layer_index in range(policy.number_of_layers):
        radius = float(policy.layer_radii[layer_index])

        for _ in range(int(policy.petals_per_layer[layer_index])):
            petal_count += 1
            index = petal_count - 1

            angle = np.radians(petal_angle_degrees(index, policy))
            position = np.array([radius * np.cos(angle), 0.0, radius * np.sin(angle)])

            if layer_index == 0:
                position[1] += policy.layer0_vertical_offset
                # Look rotation uses the offset position
                orientation = compose(look_rotation(position), base_correction, upward_tilt)
            else:
                orientation = compose(look_rotation(position), base_correction)

            placements.append(PetalPlacement(
                index=index,
                layer_index=layer_index,
                position=position,
                orientation=orientation,
            ))

    logger.debug(f"Computed {len(placements)} petal placements over {policy.number_of_layers} layers")
    return placements


__all__ = [
    "BASE_CORRECTION_DEGREES",
    "validate_layers",
    "petal_angle_degrees",
    "compute_layout",
]
