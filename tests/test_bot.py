import pytest

from hackmatch.action import Action
from hackmatch.board import Board
from hackmatch.bot import Bot, ScreenReadError


class _FakeReader:
    def __init__(self, boards):
        self.boards = list(boards)
        self.calls = 0

    def capture(self):
        self.calls += 1
        if self.boards:
            return self.boards.pop(0)
        return None


class _FakePlayer:
    def __init__(self):
        self.paths = []

    def execute(self, path):
        self.paths.append(list(path))


def _bot(reader, player=None, **kwargs):
    kwargs.setdefault("time_budget", None)
    return Bot(reader, player or _FakePlayer(), sleep=lambda _s: None, **kwargs)


def test_next_board_skips_failed_reads_and_unchanged_boards(one_swap_board):
    previous = Board.from_rows(["r"])
    reader = _FakeReader([None, previous, None, one_swap_board])
    assert _bot(reader).next_board(previous) == one_swap_board
    assert reader.calls == 4


def test_next_board_gives_up_after_fail_limit():
    reader = _FakeReader([])
    with pytest.raises(ScreenReadError):
        _bot(reader, fail_limit=3).next_board(None)
    assert reader.calls == 4


def test_plan_holds_when_board_already_matches():
    assert _bot(_FakeReader([])).plan(Board.from_rows(["rrrr"])) == []


def test_plan_rebalances_lopsided_board(lopsided_board):
    path = _bot(_FakeReader([])).plan(lopsided_board)
    assert path == [Action.LEFT] * 3 + [Action.EXCHANGE, Action.RIGHT, Action.EXCHANGE]


def test_plan_searches_below_threshold(lopsided_board, one_swap_board):
    bot = _bot(_FakeReader([]), imbalance_threshold=100.0)
    assert bot.plan(one_swap_board) == [Action.SWAP]

    hurried = _bot(_FakeReader([]), imbalance_threshold=100.0, time_budget=0.0)
    assert hurried.plan(lopsided_board) == []


def test_plan_holds_when_no_colour_can_match():
    assert _bot(_FakeReader([])).plan(Board.from_rows(["rybcpry"])) == []


def test_step_plays_planned_path(one_swap_board):
    player = _FakePlayer()
    bot = _bot(_FakeReader([one_swap_board]), player)
    assert bot.step(None) == one_swap_board
    assert player.paths == [[Action.SWAP]]
    assert bot.generation == 1


def test_run_stops_after_requested_generations(one_swap_board):
    second = Board.from_rows(["rrrr"])
    player = _FakePlayer()
    bot = _bot(_FakeReader([one_swap_board, second]), player)
    bot.run(generations=2)
    assert bot.generation == 2
    assert len(player.paths) == 2
