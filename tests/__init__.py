"""
Tests for Flowerbed

This package contains tests for:
- Rotation math and petal layout
- Spawn sampling, camera and proximity index
- Flower growth and the spawn controller
- Configuration, CLI and key-event driver
"""
