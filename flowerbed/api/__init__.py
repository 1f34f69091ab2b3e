"""
Public API: flower growth and the spawn controller.
"""

from .flower import grow_flower
from .spawner import FlowerSpawner

__all__ = [
    "grow_flower",
    "FlowerSpawner",
]
