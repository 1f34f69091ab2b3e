"""
Unit tests for petal materials and prefab resolution.
"""

import logging

import pytest
import numpy as np

from flowerbed.core.errors import ConfigurationError
from flowerbed.core.materials import (
    PetalMaterial,
    choose_material,
    default_palette,
    palette_from_config,
)
from flowerbed.core.prefabs import (
    default_flower_mesh,
    default_petal_mesh,
    load_prefab,
    resolve_prefab,
)


class TestPetalMaterial:
    """Tests for PetalMaterial and palettes."""

    def test_rgb_gets_opaque_alpha(self):
        material = PetalMaterial.from_dict({"name": "leaf", "color": [10, 200, 30]})
        assert material.color == (10, 200, 30, 255)
        assert material.rgba().dtype == np.uint8

    def test_to_dict(self):
        material = PetalMaterial(name="rose", color=(1, 2, 3, 4))
        assert material.to_dict() == {"name": "rose", "color": [1, 2, 3, 4]}

    def test_default_palette(self):
        palette = default_palette()
        assert len(palette) == 5
        assert palette[0].name == "rose"

    def test_palette_from_config(self):
        palette = palette_from_config([{"name": "a", "color": [0, 0, 0, 255]}])
        assert [m.name for m in palette] == ["a"]


class TestChooseMaterial:
    """Tests for random material choice."""

    def test_choice_comes_from_palette(self):
        palette = default_palette()
        rng = np.random.default_rng(0)
        for _ in range(20):
            assert choose_material(palette, rng) in palette

    def test_seeded_choice_is_reproducible(self):
        palette = default_palette()
        first = [choose_material(palette, np.random.default_rng(5)).name for _ in range(3)]
        second = [choose_material(palette, np.random.default_rng(5)).name for _ in range(3)]
        assert first == second

    def test_empty_palette_returns_none(self, caplog):
        with caplog.at_level(logging.WARNING, logger="flowerbed.core.materials"):
            assert choose_material([], np.random.default_rng(0)) is None
        assert "No petal materials assigned" in caplog.text


class TestPrefabs:
    """Tests for built-in meshes and prefab loading."""

    def test_default_petal_extends_along_local_y(self):
        mesh = default_petal_mesh(length=0.3)
        bounds = mesh.bounds

        assert bounds[0][1] >= -1e-9
        assert bounds[1][1] <= 0.3 + 1e-9
        assert bounds[1][1] > 0.25
        assert (bounds[1] - bounds[0])[2] < (bounds[1] - bounds[0])[1]

    def test_default_flower_is_upright(self):
        mesh = default_flower_mesh(radius=0.1, height=0.06)
        extents = mesh.extents
        assert extents[1] == pytest.approx(0.06)
        assert extents[0] == pytest.approx(0.2, rel=1e-2)

    def test_resolve_default(self):
        assert len(resolve_prefab("default", "petal").faces) > 0
        assert len(resolve_prefab("default", "flower").faces) > 0

    @pytest.mark.parametrize("reference", [None, ""])
    def test_unassigned_prefab_raises(self, reference):
        with pytest.raises(ConfigurationError, match="Petal prefab is not assigned"):
            resolve_prefab(reference, "petal")

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_prefab(tmp_path / "missing.stl")

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "petal.stl"
        default_petal_mesh().export(str(path))

        mesh = resolve_prefab(str(path), "petal")
        assert len(mesh.faces) == len(default_petal_mesh().faces)
