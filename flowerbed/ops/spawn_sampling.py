"""
Single-point Poisson-disk style spawn sampling.

This is a bounded rejection search for exactly ONE new flower position, not
a full Poisson-disk tiling:

1. Draw a candidate uniformly in the spawn disk (height 0).
2. If it is visible and far enough from every existing flower it is the
   result, and also the only active point.
3. While an active point remains and nothing is accepted, try up to ``k``
   offsets at distance [min_distance, 2 * min_distance] around a random
   active point; the first valid one is the result. An active point that
   yields nothing is dropped.

Because the search stops at the first acceptance, the active set never
holds more than the initial point.

UNIT CONVENTIONS
----------------
Positions are WORLD offsets relative to the spawn-area origin.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union
import logging
import numpy as np

from flowerbed_policies import SpawnPolicy
from ..core.camera import ViewportCamera
from ..core.errors import MissingDependency
from ..spatial.proximity import ProximityIndex

logger = logging.getLogger(__name__)

Existing = Union[ProximityIndex, Sequence[np.ndarray]]


@dataclass(frozen=True)
class SampleConstraints:
    """
    Constraints a spawn candidate must satisfy.

    Attributes
    ----------
    min_distance : float
        Minimum distance to every existing flower.
    spawn_radius : float
        Radius of the spawn disk around the origin.
    samples_per_active_point : int
        Number of offsets tried around an active point (``k``).
    in_viewport : callable
        Predicate over a world point; True if the point is visible.
    """

    min_distance: float
    spawn_radius: float
    samples_per_active_point: int
    in_viewport: Callable[[np.ndarray], bool]

    @classmethod
    def from_policy(cls, policy: SpawnPolicy, camera: Optional[ViewportCamera]) -> "SampleConstraints":
        """
        Build constraints from a spawn policy and the scene camera.

        Raises
        ------
        MissingDependency
            If no camera is available.
        """
        if camera is None:
            raise MissingDependency(
                "Main camera not found. A camera is required to bound the spawn area."
            )
        return cls(
            min_distance=policy.min_distance,
            spawn_radius=policy.spawn_radius,
            samples_per_active_point=policy.samples_per_active_point,
            in_viewport=lambda point: is_point_in_viewport(camera, point),
        )


def is_point_in_viewport(camera: ViewportCamera, point: Sequence[float]) -> bool:
    """True if ``point`` projects into [0, 1]^2 and lies in front of the camera."""
    vx, vy, depth = camera.world_to_viewport(point)
    return 0.0 <= vx <= 1.0 and 0.0 <= vy <= 1.0 and depth > 0


def _as_index(existing: Existing) -> ProximityIndex:
    if isinstance(existing, ProximityIndex):
        return existing
    return ProximityIndex(existing)


def is_far_enough(
    candidate: np.ndarray,
    existing: Existing,
    min_distance: float,
) -> bool:
    """True unless some existing point is strictly closer than ``min_distance``."""
    return _as_index(existing).is_far_enough(candidate, min_distance)


def random_point_in_disk(rng: np.random.Generator, radius: float) -> np.ndarray:
    """Uniform point in the horizontal disk of ``radius`` (y = 0)."""
    r = radius * np.sqrt(rng.random())
    theta = 2.0 * np.pi * rng.random()
    return np.array([r * np.cos(theta), 0.0, r * np.sin(theta)])


def _is_valid(candidate: np.ndarray, index: ProximityIndex, constraints: SampleConstraints) -> bool:
    return bool(constraints.in_viewport(candidate)) and index.is_far_enough(
        candidate, constraints.min_distance
    )


def sample_around(
    point: np.ndarray,
    existing: Existing,
    constraints: SampleConstraints,
    rng: np.random.Generator,
) -> Optional[np.ndarray]:
    """
    Try up to ``k`` offsets around ``point``.

    Offsets are drawn at a uniform random angle and a radius uniform in
    [min_distance, 2 * min_distance]. The first candidate inside the spawn
    disk that is visible and far enough is returned; None otherwise.
    """
    min_distance = constraints.min_distance
    index = _as_index(existing)

    for _ in range(constraints.samples_per_active_point):
        angle = rng.random() * 2.0 * np.pi
        radius = min_distance + rng.random() * min_distance
        candidate = point + np.array([np.cos(angle) * radius, 0.0, np.sin(angle) * radius])

        if np.linalg.norm(candidate) <= constraints.spawn_radius and _is_valid(
            candidate, index, constraints
        ):
            return candidate

    return None


def try_sample(
    existing: Existing,
    constraints: SampleConstraints,
    rng: np.random.Generator,
) -> Optional[np.ndarray]:
    """
    Search for one new spawn position.

    Parameters
    ----------
    existing : sequence of np.ndarray or ProximityIndex
        Positions of flowers already spawned. Not modified.
    constraints : SampleConstraints
        Distance, radius, sample count and visibility constraints.
    rng : np.random.Generator
        Source of randomness (``random()`` and ``integers()`` are used).

    Returns
    -------
    np.ndarray or None
        The accepted position, or None if no position was found. Finding
        nothing is a normal outcome.
    """
    index = _as_index(existing)
    result: Optional[np.ndarray] = None
    active: List[np.ndarray] = []

    initial = random_point_in_disk(rng, constraints.spawn_radius)
    if _is_valid(initial, index, constraints):
        result = initial
        active.append(initial)

    # Only one point is ever wanted, so expansion stops at the first acceptance
    while active and result is None:
        active_index = int(rng.integers(0, len(active)))
        result = sample_around(active[active_index], index, constraints, rng)
        if result is None:
            active.pop(active_index)

    if result is not None:
        logger.debug(f"Spawn candidate accepted at {result.tolist()}")
    return result


__all__ = [
    "SampleConstraints",
    "is_point_in_viewport",
    "is_far_enough",
    "random_point_in_disk",
    "sample_around",
    "try_sample",
]
