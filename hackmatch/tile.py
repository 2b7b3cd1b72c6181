"""Tiles that can occupy a board cell."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional

FILE = "file"
BOMB = "bomb"
EMPTY_KIND = "empty"
UNKNOWN_KIND = "unknown"


class Color(Enum):
    """File / bomb colours. Values are the one-letter text codes."""

    RED = "r"
    YELLOW = "y"
    BLUE = "b"
    CYAN = "c"
    PINK = "p"

    def __str__(self) -> str:
        return self.value


class Tile(NamedTuple):
    """One cell's contents.

    ``matched`` marks a tile that is part of a group the game is currently
    clearing. It is orthogonal to kind and colour; use :meth:`base_kind`
    when grouping.
    """

    kind: str
    color: Optional[Color] = None
    matched: bool = False

    @classmethod
    def file(cls, color: Color) -> "Tile":
        return cls(FILE, color)

    @classmethod
    def bomb(cls, color: Color) -> "Tile":
        return cls(BOMB, color)

    @property
    def is_empty(self) -> bool:
        return self.kind == EMPTY_KIND

    @property
    def is_unknown(self) -> bool:
        return self.kind == UNKNOWN_KIND

    @property
    def is_occupied(self) -> bool:
        return self.kind != EMPTY_KIND

    @property
    def is_matchable(self) -> bool:
        """Files and bombs; the sentinels never group."""
        return self.kind == FILE or self.kind == BOMB

    def base_kind(self) -> tuple[str, Optional[Color]]:
        return self.kind, self.color

    def to_matched(self) -> "Tile":
        if not self.is_matchable:
            return self
        return self._replace(matched=True)

    def code(self) -> str:
        """Single-character text form."""
        if self.kind == EMPTY_KIND:
            return "."
        if self.kind == UNKNOWN_KIND:
            return "?"
        if self.matched:
            return "m" if self.kind == FILE else "M"
        letter = self.color.value
        return letter if self.kind == FILE else letter.upper()


EMPTY = Tile(EMPTY_KIND)
UNKNOWN = Tile(UNKNOWN_KIND)

_COLORS_BY_CODE = {c.value: c for c in Color}


def tile_from_code(ch: str) -> Tile:
    """Parse one text code; see :meth:`Tile.code`. Matched codes are rejected
    because they carry no colour."""
    if ch in (".", " "):
        return EMPTY
    if ch == "?":
        return UNKNOWN
    color = _COLORS_BY_CODE.get(ch.lower())
    if color is None:
        raise ValueError(f"unknown tile code {ch!r}")
    return Tile.file(color) if ch.islower() else Tile.bomb(color)
