"""Direct rebalancing: move one tile from the tallest to the shortest column."""

from __future__ import annotations

from hackmatch.action import Action
from hackmatch.board import Board
from hackmatch.evaluate import column_heights, imbalance


def tallest_column(board: Board) -> int:
    heights = column_heights(board)
    return heights.index(max(heights))


def shortest_column(board: Board) -> int:
    heights = column_heights(board)
    return heights.index(min(heights))


def walk(start: int, target: int) -> list[Action]:
    """Cursor moves from column *start* to column *target*."""
    if target < start:
        return [Action.LEFT] * (start - target)
    return [Action.RIGHT] * (target - start)


def needs_rebalance(board: Board, threshold: float) -> bool:
    return imbalance(board) >= threshold


def solve_imbalance(board: Board) -> list[Action]:
    """Fixed path that evens out the stacks without searching.

    Empty-handed: go to the tallest column, pick up its top tile, go to the
    shortest column and drop it. Already holding: just drop it on the
    shortest column. Returns ``[]`` if the columns are level or the top
    tile of the tallest column cannot be picked up.
    """
    heights = column_heights(board)
    low = shortest_column(board)

    if board.held.is_occupied:
        return walk(board.cursor, low) + [Action.EXCHANGE]

    high = tallest_column(board)
    if heights[high] - heights[low] < 2:
        return []
    top = board.get(board.top_row(high), high)
    if not top.is_matchable or top.matched:
        return []
    return (
        walk(board.cursor, high)
        + [Action.EXCHANGE]
        + walk(high, low)
        + [Action.EXCHANGE]
    )
