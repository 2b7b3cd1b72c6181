import pytest

from hackmatch.window import WindowError, find_game_window, prepare_window, validate_window


class _FakeWindow:
    def __init__(self, title, left=10, top=20, width=1600, height=900):
        self.title = title
        self.left = left
        self.top = top
        self.width = width
        self.height = height
        self.activated = 0

    def activate(self):
        self.activated += 1


class _FakeWindows:
    def __init__(self, *windows):
        self.windows = list(windows)
        self.queries = []

    def getWindowsWithTitle(self, title):
        self.queries.append(title)
        return [w for w in self.windows if title in w.title]


def _no_sleep(_s):
    pass


def test_prepare_window_finds_checks_and_focuses_game():
    game = _FakeWindow("EXAPUNKS", left=160, top=90)
    gw = _FakeWindows(game)

    assert prepare_window(gw, sleep=_no_sleep) == (160, 90)
    assert gw.queries == ["EXAPUNKS"]
    assert game.activated == 1


def test_exact_title_wins_over_partial_match():
    notes = _FakeWindow("EXAPUNKS notes.txt", left=0, top=0)
    game = _FakeWindow("EXAPUNKS", left=300, top=40)
    assert find_game_window(_FakeWindows(notes, game)) is game


def test_missing_window_is_an_error():
    with pytest.raises(WindowError):
        prepare_window(_FakeWindows(_FakeWindow("Terminal")), sleep=_no_sleep)


def test_wrong_window_size_is_refused_before_focusing():
    small = _FakeWindow("EXAPUNKS", width=1280, height=720)
    with pytest.raises(WindowError, match="1600x900"):
        prepare_window(_FakeWindows(small), sleep=_no_sleep)
    assert small.activated == 0

    validate_window(_FakeWindow("EXAPUNKS"))


def test_explicit_position_skips_lookup():
    gw = _FakeWindows()
    assert prepare_window(gw, left=5, top=7, sleep=_no_sleep) == (5, 7)
    assert gw.queries == []


def test_one_explicit_coordinate_overrides_the_window():
    game = _FakeWindow("EXAPUNKS", left=160, top=90)
    assert prepare_window(_FakeWindows(game), top=0, sleep=_no_sleep) == (160, 0)
    assert game.activated == 1
