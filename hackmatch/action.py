"""Cursor actions."""

from __future__ import annotations

from enum import Enum

from hackmatch.constants import KEYMAP


class Action(Enum):
    """The four things the phage can do."""

    LEFT = "left"
    RIGHT = "right"
    EXCHANGE = "exchange"
    SWAP = "swap"

    @property
    def key(self) -> str:
        return KEYMAP[self.value]

    def __str__(self) -> str:
        return self.value


# Expansion order used by the search
ALL_ACTIONS: tuple[Action, ...] = (Action.LEFT, Action.RIGHT, Action.SWAP, Action.EXCHANGE)


def format_path(path) -> str:
    """Human-readable path, e.g. ``right right exchange``."""
    if not path:
        return "(hold)"
    return " ".join(str(a) for a in path)
