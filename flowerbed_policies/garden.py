"""
Garden configuration.

GardenConfig bundles every tunable of a garden session into one value that
is built once (from defaults, a dict or a JSON file), validated, and then
passed by reference into the layout and spawning operations.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import json

from .flower import FlowerPolicy, PetalLayoutPolicy
from .spawning import CameraPolicy, SpawnPolicy


DEFAULT_PALETTE: List[Dict[str, Any]] = [
    {"name": "rose", "color": [224, 62, 98, 255]},
    {"name": "sunflower", "color": [250, 200, 40, 255]},
    {"name": "lavender", "color": [170, 140, 220, 255]},
    {"name": "snowdrop", "color": [245, 245, 240, 255]},
    {"name": "poppy", "color": [235, 80, 30, 255]},
]


def _section_errors(name: str, policy: Any) -> List[str]:
    # Values of the wrong type (e.g. "2" for a distance) fail the comparisons
    try:
        return [f"{name}: {e}" for e in policy.validate()]
    except (TypeError, ValueError) as e:
        return [f"{name}: invalid value type ({e})"]


@dataclass
class GardenConfig:
    """
    Complete configuration for a garden session.

    JSON Schema:
    {
        "seed": int | null,
        "flower": FlowerPolicy,
        "layout": PetalLayoutPolicy,
        "spawn": SpawnPolicy,
        "camera": CameraPolicy | null,
        "palette": [{"name": str, "color": [r, g, b, a]}, ...]
    }

    A null camera is allowed at load time; spawning then reports a missing
    dependency instead of sampling.
    """
    seed: Optional[int] = None
    flower: FlowerPolicy = field(default_factory=FlowerPolicy)
    layout: PetalLayoutPolicy = field(default_factory=PetalLayoutPolicy)
    spawn: SpawnPolicy = field(default_factory=SpawnPolicy)
    camera: Optional[CameraPolicy] = field(default_factory=CameraPolicy)
    palette: List[Dict[str, Any]] = field(default_factory=lambda: [dict(m) for m in DEFAULT_PALETTE])

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns
        -------
        List[str]
            Validation error messages, prefixed by section (empty if valid)
        """
        errors = []
        errors.extend(_section_errors("layout", self.layout))
        errors.extend(_section_errors("spawn", self.spawn))
        if self.camera is not None:
            errors.extend(_section_errors("camera", self.camera))

        for i, entry in enumerate(self.palette):
            color = entry.get("color") if isinstance(entry, dict) else None
            if not isinstance(color, (list, tuple)) or len(color) not in (3, 4):
                errors.append(f"palette[{i}]: color must have 3 or 4 components")
            elif any(not isinstance(c, (int, float)) or not 0 <= c <= 255 for c in color):
                errors.append(f"palette[{i}]: color components must be numbers in [0, 255]")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "flower": self.flower.to_dict(),
            "layout": self.layout.to_dict(),
            "spawn": self.spawn.to_dict(),
            "camera": self.camera.to_dict() if self.camera is not None else None,
            "palette": [dict(m) for m in self.palette],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.write_text(self.to_json(), encoding="utf-8")
        return path

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GardenConfig":
        """
        Build a config from a dict, keeping defaults for absent sections.

        Raises
        ------
        TypeError
            If the config or one of its sections is not a JSON object
            (``camera`` may also be null, ``palette`` must be a list).
        """
        if not isinstance(d, dict):
            raise TypeError(f"Garden config must be an object, got {type(d).__name__}")
        for section in ("flower", "layout", "spawn"):
            if section in d and not isinstance(d[section], dict):
                raise TypeError(
                    f"Config section '{section}' must be an object, got {type(d[section]).__name__}"
                )
        if d.get("camera") is not None and not isinstance(d["camera"], dict):
            raise TypeError("Config section 'camera' must be an object or null")
        if "palette" in d and not isinstance(d["palette"], list):
            raise TypeError("Config section 'palette' must be a list")

        config = cls()
        if "seed" in d:
            config.seed = d["seed"]
        if "flower" in d:
            config.flower = FlowerPolicy.from_dict(d["flower"])
        if "layout" in d:
            config.layout = PetalLayoutPolicy.from_dict(d["layout"])
        if "spawn" in d:
            config.spawn = SpawnPolicy.from_dict(d["spawn"])
        if "camera" in d:
            config.camera = CameraPolicy.from_dict(d["camera"]) if d["camera"] is not None else None
        if "palette" in d:
            config.palette = [dict(m) for m in d["palette"]]
        return config

    @classmethod
    def from_json(cls, text: str) -> "GardenConfig":
        return cls.from_dict(json.loads(text))

    @classmethod
    def load(cls, path: Union[str, Path]) -> "GardenConfig":
        return cls.from_json(Path(path).read_text(encoding="utf-8"))


__all__ = [
    "DEFAULT_PALETTE",
    "GardenConfig",
]
