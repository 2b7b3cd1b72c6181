"""HACK*MATCH bot, modular package."""

from hackmatch.constants import MAX_COLS, MAX_ROWS, FILE_MATCH_SIZE, BOMB_MATCH_SIZE
from hackmatch.tile import Color, Tile, EMPTY, UNKNOWN
from hackmatch.action import Action
from hackmatch.board import Board, make_board, replay
from hackmatch.match import can_make_match, has_match
from hackmatch.evaluate import imbalance, score
from hackmatch.balance import solve_imbalance
from hackmatch.engine import SearchEngine, SearchResult, find_path
from hackmatch.screen import ScreenReader
from hackmatch.keys import KeyPlayer
from hackmatch.bot import Bot, ScreenReadError
from hackmatch.window import WindowError, prepare_window

__all__ = [
    "MAX_COLS",
    "MAX_ROWS",
    "FILE_MATCH_SIZE",
    "BOMB_MATCH_SIZE",
    "EMPTY",
    "UNKNOWN",
    "Action",
    "Board",
    "Bot",
    "Color",
    "KeyPlayer",
    "ScreenReadError",
    "ScreenReader",
    "SearchEngine",
    "SearchResult",
    "Tile",
    "WindowError",
    "can_make_match",
    "find_path",
    "has_match",
    "imbalance",
    "make_board",
    "prepare_window",
    "replay",
    "score",
    "solve_imbalance",
]
