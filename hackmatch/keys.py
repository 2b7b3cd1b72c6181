"""Key playback: turns an action path into timed key presses."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable

from hackmatch.action import Action
from hackmatch.constants import KEY_DELAY

log = logging.getLogger("hackmatch")


class KeyPlayer:
    """Presses the game key for each action, in order.

    *keyboard* is any object with ``keyDown(key)`` / ``keyUp(key)``;
    pyautogui is used when none is given.
    """

    def __init__(
        self,
        keyboard=None,
        key_delay: float = KEY_DELAY,
        sleep: Callable[[float], None] = time.sleep,
        keymap: dict[str, str] | None = None,
    ):
        if keyboard is None:
            keyboard = self._load_pyautogui()
        self.keyboard = keyboard
        self.key_delay = key_delay
        self.sleep = sleep
        self.keymap = keymap

    @staticmethod
    def _load_pyautogui():
        try:
            import pyautogui
        except ImportError:
            log.error("'pyautogui' not installed.  Run: pip install pyautogui")
            return None
        except Exception as e:  # no display to attach to
            log.error("pyautogui failed to load: %s", e)
            return None
        pyautogui.PAUSE = 0  # delays are explicit
        return pyautogui

    @property
    def is_available(self) -> bool:
        return self.keyboard is not None

    def send_key(self, key: str) -> None:
        if self.keyboard is None:
            raise RuntimeError("pyautogui not available -- install with: pip install pyautogui")
        self.keyboard.keyDown(key)
        self.sleep(self.key_delay)
        self.keyboard.keyUp(key)
        self.sleep(self.key_delay)

    def key_for(self, action: Action) -> str:
        if self.keymap is None:
            return action.key
        return self.keymap[action.value]

    def execute(self, path: Iterable[Action]) -> None:
        for action in path:
            self.send_key(self.key_for(action))
