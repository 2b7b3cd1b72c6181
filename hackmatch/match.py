"""Group detection: connected same-kind tiles and match thresholds."""

from __future__ import annotations

from collections import Counter
from typing import Iterator

from hackmatch.board import Board
from hackmatch.constants import BOMB_MATCH_SIZE, FILE_MATCH_SIZE, MAX_COLS, MAX_ROWS
from hackmatch.tile import BOMB, FILE, Tile

MATCH_SIZE: dict[str, int] = {FILE: FILE_MATCH_SIZE, BOMB: BOMB_MATCH_SIZE}


def group_size(board: Board, row: int, col: int, visited: bytearray) -> int:
    """Size of the 4-connected group containing (row, col).

    Cells are grouped by ``base_kind()``, so matched tiles still join a group.
    Every cell reached is marked in *visited* (indexed row-major); a start
    cell that is already visited counts 0.
    """
    cells = board.cells
    start = row * MAX_COLS + col
    kind = cells[start].base_kind()
    if not cells[start].is_matchable:
        raise ValueError(f"cannot group {cells[start].kind} cell at ({row},{col})")
    if visited[start]:
        return 0

    visited[start] = 1
    stack = [start]
    size = 0
    while stack:
        i = stack.pop()
        size += 1
        r, c = divmod(i, MAX_COLS)
        for nr, nc in ((r - 1, c), (r, c - 1), (r + 1, c), (r, c + 1)):
            if 0 <= nr < MAX_ROWS and 0 <= nc < MAX_COLS:
                j = nr * MAX_COLS + nc
                if not visited[j] and cells[j].base_kind() == kind:
                    visited[j] = 1
                    stack.append(j)
    return size


def iter_groups(board: Board) -> Iterator[tuple[Tile, int]]:
    """Yield ``(first tile, size)`` for every maximal group, bottom-left first."""
    visited = bytearray(MAX_ROWS * MAX_COLS)
    for i, tile in enumerate(board.cells):
        if visited[i] or not tile.is_matchable:
            continue
        row, col = divmod(i, MAX_COLS)
        yield tile, group_size(board, row, col, visited)


def has_match(board: Board) -> bool:
    """True if some group reaches its kind's threshold (4 files, 2 bombs).

    Groups are seeded only from unmatched tiles: a group the game is
    already clearing does not count again, but a new tile touching it does.
    """
    visited = bytearray(MAX_ROWS * MAX_COLS)
    for i, tile in enumerate(board.cells):
        if visited[i] or tile.matched or not tile.is_matchable:
            continue
        row, col = divmod(i, MAX_COLS)
        if group_size(board, row, col, visited) >= MATCH_SIZE[tile.kind]:
            return True
    return False


def can_make_match(board: Board) -> bool:
    """Cheap necessary condition for a match: enough tiles of one colour
    exist anywhere (board plus held). Ignores geometry."""
    counts: Counter = Counter()
    for tile in (board.held, *board.cells):
        if tile.is_matchable:
            counts[tile.base_kind()] += 1
    return any(n >= MATCH_SIZE[kind] for (kind, _color), n in counts.items())
