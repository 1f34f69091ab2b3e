"""
Base utilities for flowerbed policies.

This module provides shared helpers and the OperationReport dataclass
returned by every policy-driven operation (flower growth, spawning).
"""

from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List, Tuple
import json


def validate_policy(policy: Any, required_fields: Optional[List[str]] = None) -> List[str]:
    """
    Check that ``required_fields`` exist on ``policy`` and are assigned.

    Used for the prefab references of a FlowerPolicy, which may be null in a
    config file.
    """
    errors = []
    for field_name in required_fields or []:
        if not hasattr(policy, field_name):
            errors.append(f"Missing required field: {field_name}")
        elif getattr(policy, field_name) is None:
            errors.append(f"Required field is None: {field_name}")
    return errors


def coerce_float(value: Any, default: float = 0.0) -> float:
    """
    Coerce a value to float, with fallback to default.

    Parameters
    ----------
    value : Any
        Value to coerce
    default : float
        Default value if coercion fails

    Returns
    -------
    float
        Coerced float value
    """
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def coerce_vec3(
    value: Any,
    default: Tuple[float, float, float] = (0.0, 0.0, 0.0)
) -> Tuple[float, float, float]:
    """
    Coerce a camera vector to a 3-tuple of floats.

    Accepts a JSON list of 3 numbers or a scene-editor style
    ``{"x": .., "y": .., "z": ..}`` object; anything else gives ``default``.
    """
    if isinstance(value, dict):
        value = [value.get(axis) for axis in ("x", "y", "z")]
    if not isinstance(value, (tuple, list)) or len(value) != 3:
        return default
    try:
        return (float(value[0]), float(value[1]), float(value[2]))
    except (TypeError, ValueError):
        return default


def alias_fields(d: Dict[str, Any], aliases: Dict[str, str]) -> Dict[str, Any]:
    """
    Apply field aliases to a dictionary.

    Lets configs written with the scene-editor field names (``minDistance``,
    ``k``, ...) load into the canonical snake_case policy fields.

    Parameters
    ----------
    d : dict
        Input dictionary
    aliases : dict
        Mapping of legacy_name -> canonical_name

    Returns
    -------
    dict
        Dictionary with aliases applied
    """
    result = d.copy()
    for legacy_name, canonical_name in aliases.items():
        if legacy_name in result and canonical_name not in result:
            result[canonical_name] = result.pop(legacy_name)
    return result


@dataclass
class OperationReport:
    """
    Standard report structure for all operations.

    Every operation returns a report with requested vs effective policy,
    warnings, errors and operation-specific metadata. A failed report is
    the normal way a spawn or growth attempt signals that it did nothing.
    """
    operation: str = "unknown"
    success: bool = True
    requested_policy: Dict[str, Any] = field(default_factory=dict)
    effective_policy: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        """Add an error message and mark as failed."""
        self.errors.append(message)
        self.success = False

    def merge(self, other: "OperationReport") -> None:
        """Merge another report into this one."""
        self.warnings.extend(other.warnings)
        self.errors.extend(other.errors)
        if not other.success:
            self.success = False
        self.metadata.update(other.metadata)


__all__ = [
    "OperationReport",
    "validate_policy",
    "coerce_float",
    "coerce_vec3",
    "alias_fields",
]
