"""
Exceptions raised by flowerbed operations.

None of these are meant to end the session: they are caught at the
operation boundary (flower growth, spawn requests), logged and recorded on
the returned OperationReport.
"""


class FlowerbedError(Exception):
    """Base class for all flowerbed errors."""


class ConfigurationError(FlowerbedError):
    """
    A policy or prefab reference cannot be used as configured.

    Examples: a missing petal prefab, or layer arrays whose length differs
    from the declared number of layers. The operation aborts before creating
    any entity.
    """


class SamplingExhausted(FlowerbedError):
    """No valid spawn position was found within the retry bound."""

    def __init__(self, attempts: int):
        super().__init__(
            f"Max spawn retries reached ({attempts}). "
            "Could not find a valid position to spawn a flower."
        )
        self.attempts = attempts


class MissingDependency(FlowerbedError):
    """A collaborator required for spawning (the camera) is not available."""


__all__ = [
    "FlowerbedError",
    "ConfigurationError",
    "SamplingExhausted",
    "MissingDependency",
]
