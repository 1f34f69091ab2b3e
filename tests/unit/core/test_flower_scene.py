"""
Unit tests for FlowerScene.
"""

import pytest
import numpy as np
import trimesh

from flowerbed.core.materials import PetalMaterial
from flowerbed.core.prefabs import default_flower_mesh, default_petal_mesh
from flowerbed.core.scene import BASE_FRAME, FlowerScene


@pytest.fixture
def scene():
    return FlowerScene()


class TestFlowerNodes:
    """Tests for flower and petal node creation."""

    def test_add_flower_places_node_at_position(self, scene):
        node = scene.add_flower([1.0, 0.0, 2.0], default_flower_mesh())

        assert node == "flower_0"
        assert scene.flower_nodes == ["flower_0"]
        np.testing.assert_allclose(scene.world_position(node), [1.0, 0.0, 2.0], atol=1e-12)

    def test_flower_names_are_sequential(self, scene):
        names = [scene.add_flower([float(i), 0.0, 0.0], default_flower_mesh()) for i in range(3)]
        assert names == ["flower_0", "flower_1", "flower_2"]

    def test_petal_transform_is_relative_to_flower(self, scene):
        flower = scene.add_flower([1.0, 0.0, 2.0], default_flower_mesh())
        local = trimesh.transformations.translation_matrix([0.5, 0.1, 0.0])
        scene.add_petal(flower, default_petal_mesh(), local)

        petal = scene.petal_nodes(flower)[0]
        assert petal == "flower_0/petal_0"
        np.testing.assert_allclose(scene.world_position(petal), [1.5, 0.1, 2.0], atol=1e-12)

    def test_flower_rotation_carries_petals(self, scene):
        flower = scene.add_flower([0.0, 0.0, 0.0], default_flower_mesh(), rotation_deg=90.0)
        local = trimesh.transformations.translation_matrix([1.0, 0.0, 0.0])
        scene.add_petal(flower, default_petal_mesh(), local)

        # +X rotated 90 degrees about +Y is -Z
        petal = scene.petal_nodes(flower)[0]
        np.testing.assert_allclose(scene.world_position(petal), [0.0, 0.0, -1.0], atol=1e-12)

    def test_unknown_flower_raises(self, scene):
        with pytest.raises(KeyError):
            scene.add_petal("flower_9", default_petal_mesh(), np.eye(4))

    def test_petal_count(self, scene):
        a = scene.add_flower([0.0, 0.0, 0.0], default_flower_mesh())
        b = scene.add_flower([3.0, 0.0, 0.0], default_flower_mesh())
        for _ in range(2):
            scene.add_petal(a, default_petal_mesh(), np.eye(4))
        scene.add_petal(b, default_petal_mesh(), np.eye(4))

        assert scene.petal_count == 3
        assert len(scene.petal_nodes(a)) == 2

    def test_instances_are_copies(self, scene):
        template = default_petal_mesh()
        flower = scene.add_flower([0.0, 0.0, 0.0], default_flower_mesh())
        instance = scene.add_petal(flower, template, np.eye(4))

        assert instance is not template


class TestMaterialsAndReset:
    """Tests for apply_material, clear and export."""

    def test_apply_material_colours_every_face(self, scene):
        flower = scene.add_flower([0.0, 0.0, 0.0], default_flower_mesh())
        petals = [scene.add_petal(flower, default_petal_mesh(), np.eye(4)) for _ in range(2)]
        material = PetalMaterial(name="rose", color=(224, 62, 98, 255))

        assert scene.apply_material(petals, material) == 2
        for petal in petals:
            assert (petal.visual.face_colors == [224, 62, 98, 255]).all()

    def test_apply_material_skips_meshes_without_faces(self, scene):
        empty = trimesh.Trimesh()
        material = PetalMaterial(name="rose", color=(224, 62, 98, 255))
        assert scene.apply_material([empty], material) == 0

    def test_clear_removes_everything(self, scene):
        flower = scene.add_flower([0.0, 0.0, 0.0], default_flower_mesh())
        scene.add_petal(flower, default_petal_mesh(), np.eye(4))

        scene.clear()

        assert scene.flower_nodes == []
        assert scene.petal_count == 0
        assert len(scene.scene.geometry) == 0
        assert scene.scene.graph.base_frame == BASE_FRAME

    def test_export_glb(self, scene, tmp_path):
        flower = scene.add_flower([0.0, 0.0, 0.0], default_flower_mesh())
        scene.add_petal(flower, default_petal_mesh(), np.eye(4))

        path = scene.export(tmp_path / "garden.glb")

        assert path.exists()
        assert path.stat().st_size > 0
