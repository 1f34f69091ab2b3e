"""
Command-Line Interface

CLI for laying out petals, spawning flowers and running an interactive
key-driven garden session from the command line.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from flowerbed import FlowerSpawner, compute_layout
from flowerbed.core.errors import ConfigurationError
from flowerbed_policies import GardenConfig

from .driver import KeyEventDriver
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def load_config(path: Optional[str], seed: Optional[int] = None) -> GardenConfig:
    """
    Load and validate a garden config.

    Raises
    ------
    ConfigurationError
        If the file cannot be parsed or the config fails validation.
    """
    if path is None:
        config = GardenConfig()
    else:
        try:
            config = GardenConfig.load(path)
        except (OSError, KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Could not load config {path}: {e}") from e

    if seed is not None:
        config.seed = seed

    try:
        errors = config.validate()
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid config: {e}") from e
    if errors:
        raise ConfigurationError("Invalid config:\n  " + "\n  ".join(errors))
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flowerbed",
        description="Flowerbed - procedural flower and petal placement",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Layout command
    layout_parser = subparsers.add_parser("layout", help="Print the petal layout of one flower as JSON")

    # Spawn command
    spawn_parser = subparsers.add_parser("spawn", help="Spawn flowers and optionally export the scene")
    spawn_parser.add_argument(
        "--count", "-n",
        type=int,
        default=5,
        help="Number of spawn requests (default: 5)",
    )
    spawn_parser.add_argument(
        "--export", "-O",
        type=str,
        default=None,
        help="Export the scene to this file (.glb, .gltf, .obj, ...)",
    )

    # Interactive command
    int_parser = subparsers.add_parser(
        "interactive",
        help="Read key presses from stdin: f = spawn, r = reset, q = quit",
    )
    int_parser.add_argument(
        "--export", "-O",
        type=str,
        default=None,
        help="Export the final scene to this file",
    )

    # Init-config command
    init_parser = subparsers.add_parser("init-config", help="Write the default config as JSON")
    init_parser.add_argument(
        "output",
        type=str,
        help="Path of the config file to write",
    )

    # Common arguments for all commands
    for p in [layout_parser, spawn_parser, int_parser, init_parser]:
        p.add_argument(
            "--config", "-c",
            type=str,
            default=None,
            help="Path to a garden config JSON (default: built-in config)",
        )
        p.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Random seed for reproducibility",
        )
        p.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable debug logging",
        )
        p.add_argument(
            "--log-file",
            type=str,
            default=None,
            help="Also write logs to this file",
        )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_file=args.log_file,
    )

    try:
        config = load_config(args.config, seed=args.seed)
    except ConfigurationError as e:
        logger.error(str(e))
        return 2

    if args.command == "layout":
        return run_layout(config, args)
    elif args.command == "spawn":
        return run_spawn(config, args)
    elif args.command == "interactive":
        return run_interactive(config, args)
    elif args.command == "init-config":
        return run_init_config(config, args)
    return 1


def run_layout(config: GardenConfig, args) -> int:
    """Run the layout command."""
    try:
        placements = compute_layout(config.layout)
    except ConfigurationError as e:
        logger.error(str(e))
        return 2

    print(json.dumps([p.to_dict() for p in placements], indent=2))
    return 0


def _export(spawner: FlowerSpawner, path: Optional[str]) -> None:
    if path is None:
        return
    if not spawner.scene.flower_nodes:
        logger.warning("No flowers spawned; nothing to export")
        return
    spawner.scene.export(path)


def run_spawn(config: GardenConfig, args) -> int:
    """Run the spawn command."""
    spawner = FlowerSpawner(config)
    if not spawner.initialize():
        return 3

    reports = [spawner.request_spawn() for _ in range(args.count)]
    spawned = sum(1 for r in reports if r.success)

    summary = {
        "requested": args.count,
        "spawned": spawned,
        "positions": [[round(float(v), 4) for v in p] for p in spawner.spawned_positions],
        "petals": spawner.scene.petal_count,
    }
    print(json.dumps(summary, indent=2))

    _export(spawner, args.export)
    return 0


def run_interactive(config: GardenConfig, args) -> int:
    """Run the interactive command."""
    spawner = FlowerSpawner(config)
    driver = KeyEventDriver(spawner)
    if not driver.start():
        return 3

    print("Press f + Enter to spawn a flower, r to reset, q to quit.")
    handled = driver.run(sys.stdin)
    print(f"Handled {handled} key presses; {len(spawner.spawned_positions)} flowers in the garden.")

    _export(spawner, args.export)
    return 0


def run_init_config(config: GardenConfig, args) -> int:
    """Run the init-config command."""
    path = config.save(Path(args.output))
    print(f"Wrote config to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
