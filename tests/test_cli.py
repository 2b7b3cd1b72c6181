import argparse

from hackmatch.board import Board
from hackmatch.cli import load_board_file, main, run_live
from hackmatch.tile import Color, Tile


def _write_board(tmp_path, text):
    path = tmp_path / "board.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_board_file_skips_comments_and_blank_lines(tmp_path):
    path = _write_board(tmp_path, "# a test board\n\nr......\nbrrr...\n")
    board = load_board_file(path, cursor=2, held="y")
    assert board == Board.from_rows(["r", "brrr"], cursor=2, held=Tile.file(Color.YELLOW))


def test_main_solves_a_board_file(tmp_path, capsys):
    path = _write_board(tmp_path, "r......\nbrrr...\n")
    assert main(["--board", path, "--budget-ms", "1000"]) == 0
    out = capsys.readouterr().out
    assert "Path (1 actions" in out
    assert "swap" in out
    assert "match=yes" in out


def test_main_rejects_cursor_outside_the_board(tmp_path, capsys):
    path = _write_board(tmp_path, "r......\nbrrr...\n")
    assert main(["--board", path, "--cursor", "7"]) == 1
    assert "Path" not in capsys.readouterr().out


def test_main_rejects_bad_held_code(tmp_path):
    path = _write_board(tmp_path, "r......\nbrrr...\n")
    assert main(["--board", path, "--held", "rr"]) == 1
    assert main(["--board", path, "--held", "?"]) == 1


def test_live_mode_stops_when_game_window_is_missing():
    class _NoWindows:
        def getWindowsWithTitle(self, title):
            return []

    args = argparse.Namespace(window_title="EXAPUNKS", window_left=None, window_top=None)
    assert run_live(args, gw=_NoWindows()) == 1
