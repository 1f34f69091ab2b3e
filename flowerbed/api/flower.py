"""
Flower growth API.

Builds one flower in a FlowerScene: flower head at a world position, one
child node per petal placement, the chosen material on every petal, and
the optional whole-flower spin.
"""

from typing import Optional, Sequence, Tuple
import logging
import numpy as np

from flowerbed_policies import (
    FlowerPolicy,
    PetalLayoutPolicy,
    OperationReport,
    validate_policy,
)
from ..core.errors import ConfigurationError
from ..core.materials import PetalMaterial
from ..core.prefabs import resolve_prefab
from ..core.scene import FlowerScene
from ..ops.petal_layout import compute_layout

logger = logging.getLogger(__name__)


def grow_flower(
    scene: FlowerScene,
    position: Sequence[float],
    flower_policy: Optional[FlowerPolicy] = None,
    layout_policy: Optional[PetalLayoutPolicy] = None,
    material: Optional[PetalMaterial] = None,
    elapsed_time: float = 0.0,
) -> Tuple[Optional[str], OperationReport]:
    """
    Grow a complete flower at ``position``.

    Parameters
    ----------
    scene : FlowerScene
        Scene receiving the new flower and its petals.
    position : sequence of float
        World position of the flower.
    flower_policy : FlowerPolicy, optional
        Prefabs and rotation settings.
    layout_policy : PetalLayoutPolicy, optional
        Petal layer configuration.
    material : PetalMaterial, optional
        Material for every petal. None keeps the prefab's own colours.
    elapsed_time : float, optional
        Session time in seconds, used for the optional flower spin.

    Returns
    -------
    node_name : str or None
        Scene node of the new flower, None if nothing was created.
    report : OperationReport
        Report with petal count, material and rotation metadata. On a
        configuration error the report fails and the scene is untouched.
    """
    if flower_policy is None:
        flower_policy = FlowerPolicy()
    if layout_policy is None:
        layout_policy = PetalLayoutPolicy()

    report = OperationReport(
        operation="grow_flower",
        requested_policy={"flower": flower_policy.to_dict(), "layout": layout_policy.to_dict()},
    )

    try:
        missing = validate_policy(flower_policy, required_fields=["petal_prefab", "flower_prefab"])
        if missing:
            raise ConfigurationError(
                "Prefab is not assigned: " + "; ".join(missing)
            )
        petal_mesh = resolve_prefab(flower_policy.petal_prefab, "petal")
        flower_mesh = resolve_prefab(flower_policy.flower_prefab, "flower")
        placements = compute_layout(layout_policy)
    except ConfigurationError as e:
        logger.error(str(e))
        report.add_error(str(e))
        return None, report

    rotation_deg = 0.0
    if flower_policy.rotate_flower:
        rotation_deg = float(flower_policy.rotation_speed * elapsed_time)

    node_name = scene.add_flower(position, flower_mesh, rotation_deg=rotation_deg)
    petals = [
        scene.add_petal(node_name, petal_mesh, placement.local_transform())
        for placement in placements
    ]

    if material is not None and petals:
        applied = scene.apply_material(petals, material)
        if applied == 0:
            message = "Petal prefab does not have any renderable faces; material not applied"
            logger.warning(message)
            report.add_warning(message)

    report.effective_policy = report.requested_policy
    report.metadata = {
        "node": node_name,
        "position": [float(v) for v in np.asarray(position, dtype=float)],
        "n_petals": len(petals),
        "material": material.name if material is not None else None,
        "rotation_deg": rotation_deg,
    }
    logger.debug(f"Grew {node_name} with {len(petals)} petals")
    return node_name, report


__all__ = ["grow_flower"]
