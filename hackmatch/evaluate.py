"""Board evaluation for the search fallback.

When no match is reachable inside the time budget the search plays toward
the most promising board it saw. "Promising" balances two things:

  1. Clustering   every group contributes size², so growing one group is
                  worth more than two separate pairs.
  2. Flatness     tall lopsided stacks overflow; the squared imbalance of
                  column heights is subtracted.

Holding a tile adds one point so the search does not drop the held tile
just because placing it is cheap.
"""

from __future__ import annotations

from hackmatch.board import Board
from hackmatch.constants import MAX_COLS, MAX_ROWS
from hackmatch.match import iter_groups

HELD_BONUS = 1.0


def column_heights(board: Board) -> list[int]:
    """Occupied cells per column (unknown and matched tiles count)."""
    heights = [0] * MAX_COLS
    for i, tile in enumerate(board.cells):
        if tile.is_occupied:
            heights[i % MAX_COLS] += 1
    return heights


def imbalance(board: Board) -> float:
    """Sum of squared deviations of column heights from their mean."""
    heights = column_heights(board)
    mean = sum(heights) / len(heights)
    return sum((h - mean) ** 2 for h in heights)


def score(board: Board) -> float:
    """Heuristic quality of *board*; higher is better."""
    total = 0.0
    for _tile, size in iter_groups(board):
        total += size * size

    if board.held.is_occupied:
        total += HELD_BONUS

    total -= imbalance(board) ** 2
    return total


def max_height(board: Board) -> int:
    heights = column_heights(board)
    return max(heights) if heights else 0


def free_rows(board: Board) -> int:
    """Rows left above the tallest column before the board overflows."""
    return MAX_ROWS - max_height(board)
