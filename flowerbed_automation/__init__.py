"""
Flowerbed Automation

Command-line and event-loop drivers for garden sessions.
"""

from .driver import KeyEventDriver, DEFAULT_KEYMAP
from .logging_config import setup_logging

__all__ = [
    "KeyEventDriver",
    "DEFAULT_KEYMAP",
    "setup_logging",
]
