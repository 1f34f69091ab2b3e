#!/usr/bin/env python3
"""
Flowerbed - Main Entry Point

Run this file directly or use the installed ``flowerbed`` command.

Usage:
    python main.py spawn -n 10 -O garden.glb
    python main.py layout
    python main.py --version
"""

import sys


def main():
    """Main entry point for Flowerbed."""
    if "--version" in sys.argv[1:]:
        from flowerbed import __version__
        print(f"Flowerbed v{__version__}")
        return 0

    from flowerbed_automation.cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
