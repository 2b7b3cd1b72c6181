import pytest

from hackmatch.board import Board


@pytest.fixture
def one_swap_board():
    """Three reds on the bottom row; a fourth sits on a blue in column 0."""
    return Board.from_rows([
        "r......",
        "brrr...",
    ])


@pytest.fixture
def lopsided_board():
    """Column 0 stacked eight high, everything else empty."""
    return Board.from_rows(["y", "r", "y", "r", "y", "r", "y", "r"], cursor=3)
