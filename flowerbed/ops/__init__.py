"""
Operations: petal layout and spawn sampling.
"""

from .petal_layout import (
    compute_layout,
    validate_layers,
    petal_angle_degrees,
)
from .spawn_sampling import (
    SampleConstraints,
    is_point_in_viewport,
    is_far_enough,
    random_point_in_disk,
    sample_around,
    try_sample,
)

__all__ = [
    # Petal layout
    "compute_layout",
    "validate_layers",
    "petal_angle_degrees",
    # Spawn sampling
    "SampleConstraints",
    "is_point_in_viewport",
    "is_far_enough",
    "random_point_in_disk",
    "sample_around",
    "try_sample",
]
