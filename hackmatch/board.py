"""7×9 HACK*MATCH board and the four cursor transitions."""

from __future__ import annotations

from typing import Iterable, Sequence

from hackmatch.action import Action
from hackmatch.constants import LAST_COL, MAX_COLS, MAX_ROWS
from hackmatch.tile import EMPTY, Tile, tile_from_code

CELL_COUNT = MAX_ROWS * MAX_COLS


def _index(row: int, col: int) -> int:
    return row * MAX_COLS + col


class Board:
    """Immutable game state: a row-major tuple of 63 tiles (row 0 is the
    bottom, where tiles come to rest), the cursor column and the held tile.

    Boards compare and hash by value; the search keeps them in a seen-set.
    """

    __slots__ = ("cells", "cursor", "held", "_hash")

    def __init__(self, cells: Sequence[Tile], cursor: int = 0, held: Tile = EMPTY):
        if len(cells) != CELL_COUNT:
            raise ValueError(f"expected {CELL_COUNT} cells, got {len(cells)}")
        if not 0 <= cursor < MAX_COLS:
            raise ValueError(f"cursor {cursor} is outside columns 0-{LAST_COL}")
        if held.is_unknown:
            raise ValueError("the phage cannot hold an unknown tile")
        self.cells: tuple[Tile, ...] = tuple(cells)
        self.cursor = cursor
        self.held = held
        self._hash: int | None = None

    # construction

    @classmethod
    def empty(cls, cursor: int = 0, held: Tile = EMPTY) -> Board:
        return cls((EMPTY,) * CELL_COUNT, cursor, held)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[str],
        cursor: int = 0,
        held: Tile = EMPTY,
        settle: bool = True,
    ) -> Board:
        """Build a board from text lines, top row first.

        Each line holds seven tile codes (``.`` empty, ``?`` unknown, lower
        case file, upper case bomb). Fewer than nine lines fill the bottom
        rows; the rest stay empty.
        """
        lines = [line.rstrip("\n") for line in rows]
        if len(lines) > MAX_ROWS:
            raise ValueError(f"at most {MAX_ROWS} rows, got {len(lines)}")
        cells = [EMPTY] * CELL_COUNT
        for depth, line in enumerate(reversed(lines)):
            line = line.ljust(MAX_COLS, ".")
            if len(line) != MAX_COLS:
                raise ValueError(f"row {line!r} is wider than {MAX_COLS} cells")
            for col, ch in enumerate(line):
                cells[_index(depth, col)] = tile_from_code(ch)
        board = cls(cells, cursor, held)
        return board.settle() if settle else board

    # queries

    def get(self, row: int, col: int) -> Tile:
        """Tile at (row, col); EMPTY outside the grid."""
        if 0 <= row < MAX_ROWS and 0 <= col < MAX_COLS:
            return self.cells[_index(row, col)]
        return EMPTY

    def column(self, col: int) -> list[Tile]:
        """Tiles of one column, bottom to top."""
        return [self.cells[_index(row, col)] for row in range(MAX_ROWS)]

    def top_row(self, col: int) -> int:
        """Row of the topmost occupied cell in *col*, or -1 if the column is empty."""
        for row in range(MAX_ROWS - 1, -1, -1):
            if self.cells[_index(row, col)].is_occupied:
                return row
        return -1

    def has_matched(self) -> bool:
        return any(t.matched for t in self.cells)

    def with_tile(self, row: int, col: int, tile: Tile) -> Board:
        """Copy with one cell replaced (no settling)."""
        if not (0 <= row < MAX_ROWS and 0 <= col < MAX_COLS):
            raise IndexError(f"({row},{col}) is outside the board")
        cells = list(self.cells)
        cells[_index(row, col)] = tile
        return Board(cells, self.cursor, self.held)

    # transitions

    def apply(self, action: Action) -> Board:
        """Board after *action*. Never fails; impossible actions are no-ops."""
        cells = list(self.cells)
        cursor = self.cursor
        held = self.held
        if action is Action.LEFT:
            cursor = max(cursor - 1, 0)
        elif action is Action.RIGHT:
            cursor = min(cursor + 1, LAST_COL)
        elif action is Action.EXCHANGE:
            held = _exchange(cells, cursor, held)
        else:
            _swap(cells, cursor)
        if not any(t.matched for t in cells):
            _settle(cells)
        return Board(cells, cursor, held)

    def settle(self) -> Board:
        """Copy with every column pulled down, unless a match is resolving."""
        if self.has_matched():
            return self
        cells = list(self.cells)
        _settle(cells)
        return Board(cells, self.cursor, self.held)

    # value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.cursor == other.cursor
            and self.held == other.held
            and self.cells == other.cells
        )

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.cells, self.cursor, self.held))
        return self._hash

    def __repr__(self) -> str:
        return f"Board(cursor={self.cursor}, held={self.held.code()!r}, rows={self.rows()!r})"

    def rows(self) -> list[str]:
        """Text rows, top row first (inverse of :meth:`from_rows`)."""
        return [
            "".join(self.cells[_index(row, col)].code() for col in range(MAX_COLS))
            for row in range(MAX_ROWS - 1, -1, -1)
        ]

    def __str__(self) -> str:
        held = self.held.code() if self.held.is_occupied else " "
        lines = [
            "|" + " " * self.cursor + "v" + " " * (LAST_COL - self.cursor) + "|",
            "|" + " " * self.cursor + held + " " * (LAST_COL - self.cursor) + "|",
        ]
        lines.extend("|" + row.replace(".", " ") + "|" for row in self.rows())
        return "\n".join(lines)


def _exchange(cells: list[Tile], col: int, held: Tile) -> Tile:
    """Pick up the topmost tile of *col* or drop *held* onto it; returns the
    new held tile."""
    if not held.is_occupied:
        for row in range(MAX_ROWS - 1, -1, -1):
            tile = cells[_index(row, col)]
            if tile.is_empty or tile.is_unknown:
                continue
            if not tile.matched:
                cells[_index(row, col)] = EMPTY
                return tile
            return held
        return held

    if cells[_index(MAX_ROWS - 1, col)].is_occupied:
        return held  # column full
    for row in range(MAX_ROWS - 2, -1, -1):
        if cells[_index(row, col)].is_occupied:
            cells[_index(row + 1, col)] = held
            return EMPTY
    cells[_index(0, col)] = held
    return EMPTY


def _swap(cells: list[Tile], col: int) -> None:
    """Swap the topmost tile of *col* with the one beneath it."""
    for row in range(MAX_ROWS - 1, 0, -1):
        upper = cells[_index(row, col)]
        if not upper.is_occupied:
            continue
        lower = cells[_index(row - 1, col)]
        if (
            upper.is_matchable and not upper.matched
            and lower.is_matchable and not lower.matched
        ):
            cells[_index(row, col)] = lower
            cells[_index(row - 1, col)] = upper
        return


def _settle(cells: list[Tile]) -> None:
    """Stable gravity pass, in place."""
    for col in range(MAX_COLS):
        stack = [cells[_index(row, col)] for row in range(MAX_ROWS)]
        packed = [t for t in stack if t.is_occupied]
        if len(packed) == MAX_ROWS or stack[: len(packed)] == packed:
            continue
        packed.extend([EMPTY] * (MAX_ROWS - len(packed)))
        for row, tile in enumerate(packed):
            cells[_index(row, col)] = tile


def make_board(cursor: int, held: Tile, cells: Sequence[Tile]) -> Board:
    """Board from raw observed cells, settled."""
    return Board(cells, cursor, held).settle()


def replay(board: Board, path: Iterable[Action]) -> Board:
    """Apply every action of *path* in order."""
    for action in path:
        board = board.apply(action)
    return board
