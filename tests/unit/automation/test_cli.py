"""
Tests for the flowerbed command-line interface.
"""

import io
import json
import logging

import pytest

from flowerbed.core.errors import ConfigurationError
from flowerbed_automation.cli import build_parser, load_config, main
from flowerbed_automation.logging_config import NAMESPACES
from flowerbed_policies import GardenConfig


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the handlers main() installs so later tests see plain propagation."""
    yield
    for namespace in NAMESPACES:
        logger = logging.getLogger(namespace)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


def write_config(path, **overrides):
    data = GardenConfig().to_dict()
    data.update(overrides)
    path.write_text(json.dumps(data))
    return str(path)


class TestParser:
    """Tests for argument parsing."""

    def test_spawn_defaults(self):
        args = build_parser().parse_args(["spawn"])
        assert args.count == 5
        assert args.export is None
        assert args.config is None

    def test_common_options(self):
        args = build_parser().parse_args(["layout", "--seed", "9", "-v", "-c", "g.json"])
        assert args.seed == 9
        assert args.verbose
        assert args.config == "g.json"

    def test_no_command_returns_1(self):
        assert main([]) == 1


class TestLoadConfig:
    """Tests for load_config."""

    def test_default_config(self):
        assert load_config(None).seed is None

    def test_seed_override(self, tmp_path):
        path = write_config(tmp_path / "g.json", seed=1)
        assert load_config(path, seed=5).seed == 5

    def test_invalid_values_raise(self, tmp_path):
        path = write_config(tmp_path / "g.json", spawn={"min_distance": -1.0})
        with pytest.raises(ConfigurationError, match="spawn: min_distance"):
            load_config(path)

    def test_unreadable_file_raises(self, tmp_path):
        path = tmp_path / "g.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Could not load config"):
            load_config(str(path))

    def test_wrong_value_type_raises(self, tmp_path):
        path = write_config(tmp_path / "g.json", spawn={"minDistance": "2"})
        with pytest.raises(ConfigurationError, match="spawn: invalid value type"):
            load_config(path)

    @pytest.mark.parametrize("section", ["flower", "layout", "spawn"])
    def test_null_section_raises(self, tmp_path, section):
        path = write_config(tmp_path / "g.json", **{section: None})
        with pytest.raises(ConfigurationError, match=f"'{section}' must be an object"):
            load_config(path)

    def test_top_level_list_raises(self, tmp_path):
        path = tmp_path / "g.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError, match="must be an object"):
            load_config(str(path))


class TestCommands:
    """Tests for each subcommand."""

    def test_layout_prints_placements(self, capsys):
        assert main(["layout"]) == 0

        placements = json.loads(capsys.readouterr().out)
        assert len(placements) == 34
        assert placements[0]["layer_index"] == 0

    def test_layout_with_bad_layers_returns_2(self, tmp_path):
        path = write_config(tmp_path / "g.json", layout={"number_of_layers": 3})
        assert main(["layout", "-c", path]) == 2

    def test_bad_config_returns_2(self, tmp_path):
        assert main(["spawn", "-c", str(tmp_path / "missing.json")]) == 2

    def test_string_distance_returns_2(self, tmp_path):
        path = write_config(tmp_path / "g.json", spawn={"minDistance": "2"})
        assert main(["layout", "--config", path]) == 2

    def test_null_layout_returns_2(self, tmp_path):
        path = write_config(tmp_path / "g.json", layout=None)
        assert main(["layout", "--config", path]) == 2

    def test_spawn_summary(self, capsys):
        assert main(["spawn", "-n", "3", "--seed", "42"]) == 0

        summary = json.loads(capsys.readouterr().out)
        assert summary["requested"] == 3
        assert summary["spawned"] == len(summary["positions"])
        assert summary["petals"] == 34 * summary["spawned"]

    def test_spawn_is_reproducible_with_seed(self, capsys):
        main(["spawn", "-n", "4", "--seed", "7"])
        first = json.loads(capsys.readouterr().out)
        main(["spawn", "-n", "4", "--seed", "7"])
        second = json.loads(capsys.readouterr().out)

        assert first == second

    def test_spawn_without_camera_returns_3(self, tmp_path):
        path = write_config(tmp_path / "g.json", camera=None)
        assert main(["spawn", "-c", path]) == 3

    def test_spawn_export(self, tmp_path, capsys):
        out = tmp_path / "garden.glb"
        assert main(["spawn", "-n", "2", "--seed", "1", "-O", str(out)]) == 0

        summary = json.loads(capsys.readouterr().out)
        assert out.exists() == (summary["spawned"] > 0)

    def test_interactive_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("f\nf\nq\n"))
        assert main(["interactive", "--seed", "2"]) == 0
        assert "Handled 3 key presses" in capsys.readouterr().out

    def test_init_config(self, tmp_path):
        out = tmp_path / "garden.json"
        assert main(["init-config", str(out), "--seed", "11"]) == 0

        config = GardenConfig.load(out)
        assert config.seed == 11
        assert config.validate() == []

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "flowerbed.log"
        main(["spawn", "-n", "1", "--seed", "3", "--log-file", str(log_file)])
        assert "Spawner initialized" in log_file.read_text()
