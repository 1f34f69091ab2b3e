"""
Key Event Driver

Maps discrete key presses to spawner entry points. Each key event is
handled exactly once (edge-triggered); holding a key is not modelled.

Default bindings:
    f   spawn one flower
    r   reset (reload the scene)
    q   quit
"""

import logging
from typing import Dict, Iterable, List, Optional

from flowerbed import FlowerSpawner
from flowerbed_policies import OperationReport

logger = logging.getLogger(__name__)

SPAWN = "spawn"
RESET = "reset"
QUIT = "quit"

DEFAULT_KEYMAP: Dict[str, str] = {
    "f": SPAWN,
    "r": RESET,
    "q": QUIT,
}


class KeyEventDriver:
    """
    Drives a FlowerSpawner from a stream of key events.

    Attributes
    ----------
    spawner : FlowerSpawner
        Controller receiving the events.
    keymap : dict
        Key -> action ("spawn", "reset" or "quit").
    reports : list of OperationReport
        Reports of every spawn request handled so far.
    """

    def __init__(self, spawner: FlowerSpawner, keymap: Optional[Dict[str, str]] = None):
        self.spawner = spawner
        self.keymap = dict(keymap) if keymap is not None else dict(DEFAULT_KEYMAP)
        self.reports: List[OperationReport] = []
        self.running = False

    def start(self) -> bool:
        self.running = True
        return self.spawner.initialize()

    def handle(self, key: str) -> Optional[str]:
        """
        Handle one key press.

        Returns
        -------
        str or None
            The action performed, None for unbound keys.
        """
        action = self.keymap.get(key.lower())
        if action is None:
            logger.debug(f"Ignoring unbound key {key!r}")
            return None

        if action == SPAWN:
            self.reports.append(self.spawner.on_spawn_requested())
        elif action == RESET:
            self.spawner.on_reset_requested()
        elif action == QUIT:
            self.running = False
        return action

    def run(self, events: Iterable[str]) -> int:
        """
        Feed key events until they run out or a quit key is pressed.

        Each element of ``events`` may hold several key presses (for
        example one line of terminal input); whitespace is ignored.

        Returns
        -------
        int
            Number of bound key presses handled.
        """
        if not self.running:
            self.start()

        handled = 0
        for chunk in events:
            for key in chunk:
                if key.isspace():
                    continue
                if self.handle(key) is not None:
                    handled += 1
                if not self.running:
                    return handled
        self.running = False
        return handled


__all__ = [
    "SPAWN",
    "RESET",
    "QUIT",
    "DEFAULT_KEYMAP",
    "KeyEventDriver",
]
