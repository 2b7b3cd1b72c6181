"""Play loop: read the board, plan a path, press the keys, repeat."""

from __future__ import annotations

import logging
import time
from typing import Callable

from hackmatch.action import Action, format_path
from hackmatch.balance import needs_rebalance, solve_imbalance
from hackmatch.board import Board
from hackmatch.constants import (
    BOARD_SOLVE_WAIT,
    IMBALANCE_THRESHOLD,
    MAX_SEARCH_TIME,
    SCREEN_READ_FAIL_LIMIT,
)
from hackmatch.engine import SearchEngine
from hackmatch.evaluate import free_rows
from hackmatch.match import can_make_match, has_match

logger = logging.getLogger("hackmatch.bot")


class ScreenReadError(RuntimeError):
    """The screen could not be read SCREEN_READ_FAIL_LIMIT times in a row."""


class Bot:
    """Drives one game.

    *reader* needs ``capture() -> Board | None``; *player* needs
    ``execute(path)``.
    """

    def __init__(
        self,
        reader,
        player,
        engine: SearchEngine | None = None,
        *,
        time_budget: float | None = MAX_SEARCH_TIME,
        imbalance_threshold: float = IMBALANCE_THRESHOLD,
        fail_limit: int = SCREEN_READ_FAIL_LIMIT,
        wait: float = BOARD_SOLVE_WAIT,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.reader = reader
        self.player = player
        self.engine = engine or SearchEngine()
        self.time_budget = time_budget
        self.imbalance_threshold = imbalance_threshold
        self.fail_limit = fail_limit
        self.wait = wait
        self.sleep = sleep
        self.generation = 0

    def next_board(self, previous: Board | None) -> Board:
        """Block until the screen shows a board different from *previous*."""
        failed = 0
        while True:
            board = self.reader.capture()
            if board is None:
                if failed >= self.fail_limit:
                    raise ScreenReadError(f"failed to read screen {failed} times in a row")
                failed += 1
                self.sleep(self.wait)
                continue
            if board != previous:
                return board

    def plan(self, board: Board) -> list[Action]:
        if has_match(board):
            logger.info("Board already has a match")
            return []
        if needs_rebalance(board, self.imbalance_threshold):
            path = solve_imbalance(board)
            if path:
                logger.info("Board is lopsided, rebalancing")
                return path
        if not can_make_match(board):
            logger.info("Not enough tiles of any colour for a match, holding")
            return []
        return self.engine.find_path(board, self.time_budget)

    def step(self, previous: Board | None) -> Board:
        """One read → plan → play cycle; returns the board that was played."""
        self.sleep(self.wait)
        board = self.next_board(previous)

        logger.info("Generation: %d", self.generation)
        logger.info("\n%s", board)
        logger.debug("%d free rows", free_rows(board))

        path = self.plan(board)
        logger.info("Playing path: %s", format_path(path))
        self.player.execute(path)
        self.generation += 1
        return board

    def run(self, generations: int | None = None) -> None:
        board: Board | None = None
        while generations is None or self.generation < generations:
            board = self.step(board)
