"""
FlowerSpawner - scene-level spawn controller.

Owns the list of spawned flower positions for a session, retries the spawn
sampler up to the configured bound, and grows a flower with a random palette
material at the first accepted position.

Entry points for an external driver loop:
    initialize()            session start (resolves the camera)
    on_spawn_requested()    one spawn attempt, at most one new flower
    on_reset_requested()    scene reload: forget every flower

The spawner is the single writer of ``spawned_positions``; the sampler only
ever sees a ProximityIndex snapshot taken before the retry loop.
"""

from typing import Callable, List, Optional, Tuple
import logging
import time
import numpy as np

from flowerbed_policies import GardenConfig, OperationReport
from ..core.camera import ViewportCamera
from ..core.errors import ConfigurationError, MissingDependency, SamplingExhausted
from ..core.materials import PetalMaterial, choose_material, palette_from_config
from ..core.scene import FlowerScene
from ..ops.spawn_sampling import Existing, SampleConstraints, try_sample
from ..spatial.proximity import ProximityIndex
from .flower import grow_flower

logger = logging.getLogger(__name__)

Sampler = Callable[[Existing, SampleConstraints, np.random.Generator], Optional[np.ndarray]]


class FlowerSpawner:
    """
    Spawn controller for one garden session.

    Parameters
    ----------
    config : GardenConfig, optional
        Session configuration. Default config if None.
    scene : FlowerScene, optional
        Scene receiving flowers. A new empty scene if None.
    camera : ViewportCamera, optional
        Camera bounding the spawn area. Built from ``config.camera`` if None.
    sampler : callable, optional
        ``sampler(existing, constraints, rng) -> position or None``.
        Default ``try_sample``.
    rng : np.random.Generator, optional
        Randomness for sampling and material choice. Seeded from
        ``config.seed`` if None.
    clock : callable, optional
        Returns seconds; used for the elapsed time driving flower spin.
    """

    def __init__(
        self,
        config: Optional[GardenConfig] = None,
        scene: Optional[FlowerScene] = None,
        camera: Optional[ViewportCamera] = None,
        sampler: Optional[Sampler] = None,
        rng: Optional[np.random.Generator] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config if config is not None else GardenConfig()
        self.scene = scene if scene is not None else FlowerScene()
        self.camera = camera if camera is not None else ViewportCamera.from_policy(self.config.camera)
        self.sampler = sampler if sampler is not None else try_sample
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.palette: List[PetalMaterial] = []
        self.spawned_positions: List[np.ndarray] = []

        self._clock = clock
        self._start_time: Optional[float] = None
        self._constraints: Optional[SampleConstraints] = None
        self._unavailable_reason: Optional[str] = None

    @property
    def available(self) -> bool:
        """True once initialized with a valid config and a camera."""
        return self._constraints is not None

    def initialize(self) -> bool:
        """
        Start the session.

        Returns
        -------
        bool
            False if the config is invalid or the camera is missing;
            spawning is then unavailable until the problem is fixed and
            ``initialize`` is called again.
        """
        self._start_time = self._clock()
        try:
            errors = self.config.validate()
            if errors:
                raise ConfigurationError("Invalid garden config: " + "; ".join(errors))
            self._constraints = SampleConstraints.from_policy(self.config.spawn, self.camera)
            # Built only from a validated config
            self.palette = palette_from_config(self.config.palette)
        except (ConfigurationError, MissingDependency) as e:
            self._constraints = None
            self._unavailable_reason = str(e)
            logger.error(str(e))
            return False

        self._unavailable_reason = None
        logger.info(
            f"Spawner initialized (min_distance={self.config.spawn.min_distance}, "
            f"spawn_radius={self.config.spawn.spawn_radius}, "
            f"k={self.config.spawn.samples_per_active_point})"
        )
        return True

    def elapsed_time(self) -> float:
        if self._start_time is None:
            return 0.0
        return self._clock() - self._start_time

    def _sample_with_retries(self) -> Tuple[np.ndarray, int]:
        """
        Run independent sampling attempts up to the retry bound.

        Raises
        ------
        SamplingExhausted
            If every attempt comes back empty.
        """
        existing = ProximityIndex(self.spawned_positions)
        max_retries = self.config.spawn.max_spawn_retries

        for attempt in range(1, max_retries + 1):
            position = self.sampler(existing, self._constraints, self.rng)
            if position is not None:
                return np.asarray(position, dtype=float), attempt
            logger.info(f"Flower spawn failed, retrying... Attempt: {attempt}")

        raise SamplingExhausted(max_retries)

    def request_spawn(self) -> OperationReport:
        """
        Try to spawn one flower.

        Returns
        -------
        OperationReport
            ``success`` is True only if a flower was created. Metadata
            holds the position, the number of attempts and the flower node.
        """
        report = OperationReport(
            operation="request_spawn",
            requested_policy=self.config.spawn.to_dict(),
            effective_policy=self.config.spawn.to_dict(),
        )

        if self._start_time is None:
            self.initialize()
        if self._constraints is None:
            reason = self._unavailable_reason or "Spawner is not available"
            logger.error(f"Cannot spawn flower: {reason}")
            report.add_error(reason)
            return report

        try:
            position, attempts = self._sample_with_retries()
        except SamplingExhausted as e:
            logger.warning(str(e))
            report.add_error(str(e))
            report.metadata["attempts"] = e.attempts
            return report

        material = choose_material(self.palette, self.rng)
        node_name, grow_report = grow_flower(
            self.scene,
            position,
            flower_policy=self.config.flower,
            layout_policy=self.config.layout,
            material=material,
            elapsed_time=self.elapsed_time(),
        )
        report.merge(grow_report)
        report.metadata["attempts"] = attempts
        if node_name is None:
            return report

        self.spawned_positions.append(position)
        report.metadata["n_flowers"] = len(self.spawned_positions)
        logger.info(f"Spawned {node_name} at {position.round(3).tolist()} after {attempts} attempt(s)")
        return report

    def reset(self) -> None:
        """Forget every spawned flower and reload an empty scene."""
        n_flowers = len(self.spawned_positions)
        self.spawned_positions.clear()
        self.scene.clear()
        logger.info(f"Garden reset ({n_flowers} flowers removed)")

    def on_spawn_requested(self) -> OperationReport:
        return self.request_spawn()

    def on_reset_requested(self) -> None:
        self.reset()


__all__ = ["FlowerSpawner"]
