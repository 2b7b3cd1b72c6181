"""Game window lookup: find EXAPUNKS by title, check its size, focus it."""

from __future__ import annotations

import logging
import time
from typing import Callable

from hackmatch.constants import (
    WINDOW_ACTIVATE_WAIT,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)

log = logging.getLogger("hackmatch")


class WindowError(RuntimeError):
    """The game window is missing or not usable."""


def load_pygetwindow():
    try:
        import pygetwindow
    except ImportError:
        log.error("'pygetwindow' not installed.  Run: pip install pygetwindow")
        return None
    except Exception as e:  # unsupported platform
        log.error("pygetwindow failed to load: %s", e)
        return None
    return pygetwindow


def find_game_window(gw, title: str = WINDOW_TITLE):
    """Window titled exactly *title*, else the first whose title contains it."""
    windows = gw.getWindowsWithTitle(title)
    if not windows:
        raise WindowError(f"no window titled {title!r}; is the game running?")
    for window in windows:
        if window.title == title:
            return window
    return windows[0]


def validate_window(window) -> None:
    if (window.width, window.height) != (WINDOW_WIDTH, WINDOW_HEIGHT):
        raise WindowError(
            f"expected a {WINDOW_WIDTH}x{WINDOW_HEIGHT} window, "
            f"found {window.width}x{window.height}"
        )


def prepare_window(
    gw=None,
    title: str = WINDOW_TITLE,
    left: int | None = None,
    top: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> tuple[int, int]:
    """Screen position of the game window's top-left corner.

    With both *left* and *top* given the window is not looked up at all.
    Otherwise it is found by title, checked to be 1600x900 and focused;
    a given coordinate still overrides the window's own.
    """
    if left is not None and top is not None:
        return left, top

    if gw is None:
        gw = load_pygetwindow()
        if gw is None:
            raise WindowError("cannot look up windows; pass --window-left and --window-top")

    window = find_game_window(gw, title)
    validate_window(window)
    window.activate()
    sleep(WINDOW_ACTIVATE_WAIT)
    log.info("Found %r at (%d, %d)", window.title, window.left, window.top)
    return (
        window.left if left is None else left,
        window.top if top is None else top,
    )
