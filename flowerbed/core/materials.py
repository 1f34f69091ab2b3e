"""
Petal materials and palette selection.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence
import logging
import numpy as np

from flowerbed_policies import DEFAULT_PALETTE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PetalMaterial:
    """A named flat RGBA colour applied to every face of a petal."""

    name: str
    color: tuple

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PetalMaterial":
        color = list(d["color"])
        if len(color) == 3:
            color.append(255)
        return cls(name=str(d.get("name", "unnamed")), color=tuple(int(c) for c in color))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "color": list(self.color)}

    def rgba(self) -> np.ndarray:
        return np.array(self.color, dtype=np.uint8)


def palette_from_config(entries: Sequence[Dict[str, Any]]) -> List[PetalMaterial]:
    return [PetalMaterial.from_dict(entry) for entry in entries]


def default_palette() -> List[PetalMaterial]:
    return palette_from_config(DEFAULT_PALETTE)


def choose_material(
    palette: Sequence[PetalMaterial],
    rng: np.random.Generator,
) -> Optional[PetalMaterial]:
    """
    Pick a material uniformly at random.

    Returns None (and logs a warning) for an empty palette; the flower then
    keeps its prefab's own colours.
    """
    if len(palette) == 0:
        logger.warning("No petal materials assigned; flower keeps its prefab colours")
        return None
    return palette[int(rng.integers(0, len(palette)))]


__all__ = [
    "PetalMaterial",
    "palette_from_config",
    "default_palette",
    "choose_material",
]
