import pytest

from hackmatch.board import Board
from hackmatch.match import can_make_match, group_size, has_match, iter_groups
from hackmatch.tile import Color, Tile

RED = Tile.file(Color.RED)


def test_four_connected_files_match():
    assert has_match(Board.from_rows(["rrrr"]))
    assert has_match(Board.from_rows(["r", "r", "r", "r"]))
    assert has_match(Board.from_rows(["r", "rrr"]))


def test_three_connected_files_do_not_match():
    assert not has_match(Board.from_rows(["rrr"]))
    assert not has_match(Board.from_rows(["r", "rr"]))


def test_diagonal_tiles_are_not_connected():
    board = Board.from_rows([
        ".r",
        ".r",
        "rb",
        "rb",
    ])
    assert not has_match(board)


def test_two_connected_bombs_match():
    assert has_match(Board.from_rows(["RR"]))
    assert has_match(Board.from_rows(["Y", "Y"]))


def test_single_bomb_does_not_match():
    assert not has_match(Board.from_rows(["R"]))
    assert not has_match(Board.from_rows(["R.R"]))


def test_bomb_and_file_of_same_colour_do_not_group():
    assert not has_match(Board.from_rows(["Rr"]))
    assert not has_match(Board.from_rows(["rrRr"]))


def test_different_colours_do_not_group():
    assert not has_match(Board.from_rows(["rryy", "yyrr"]))


def test_resolving_group_is_not_reported_again():
    board = Board.from_rows(["rrrr"])
    for col in range(4):
        board = board.with_tile(0, col, RED.to_matched())
    assert not has_match(board)
    assert has_match(board.with_tile(0, 4, RED))


def test_group_size_counts_connected_cells():
    board = Board.from_rows(["r", "rrb"])
    visited = bytearray(63)
    assert group_size(board, 0, 0, visited) == 3
    # already visited
    assert group_size(board, 0, 1, visited) == 0
    assert group_size(board, 0, 2, visited) == 1


def test_group_size_on_empty_cell_is_a_contract_violation():
    with pytest.raises(ValueError):
        group_size(Board.empty(), 0, 0, bytearray(63))
    with pytest.raises(ValueError):
        group_size(Board.from_rows(["?"]), 0, 0, bytearray(63))


def test_iter_groups_skips_sentinels():
    board = Board.from_rows([".r", "?rb"], settle=False)
    sizes = sorted(size for _tile, size in iter_groups(board))
    assert sizes == [1, 2]


def test_can_make_match_counts_held_tile():
    board = Board.from_rows(["r.r.r"])
    assert not can_make_match(board)
    held = Board.from_rows(["r.r.r"], held=RED)
    assert can_make_match(held)


def test_can_make_match_with_two_scattered_bombs():
    assert can_make_match(Board.from_rows(["B.....B"]))
    assert not can_make_match(Board.from_rows(["B.....Y"]))


def test_can_make_match_ignores_kind_mixing():
    assert not can_make_match(Board.from_rows(["rrrR"]))
