"""Move search: time-bounded breadth-first search over cursor actions."""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Callable

from hackmatch.action import ALL_ACTIONS, Action
from hackmatch.board import Board
from hackmatch.evaluate import score
from hackmatch.match import has_match

logger = logging.getLogger("hackmatch.search")


class SearchResult:
    """Outcome of one search."""

    __slots__ = ("path", "reason", "explored", "depth", "score", "elapsed")

    def __init__(
        self,
        path: list[Action],
        reason: str,
        explored: int = 0,
        depth: int = 0,
        score: float | None = None,
        elapsed: float = 0.0,
    ):
        self.path = path
        self.reason = reason        # 'already', 'match', 'timeout' or 'exhausted'
        self.explored = explored    # boards generated, start included
        self.depth = depth          # deepest path length dequeued
        self.score = score          # heuristic of the board the path leads to
        self.elapsed = elapsed

    @property
    def found_match(self) -> bool:
        return self.reason in ("already", "match")

    def __repr__(self) -> str:
        return (
            f"SearchResult({self.reason}, {len(self.path)} actions, "
            f"explored={self.explored}, depth={self.depth})"
        )


class SearchEngine:
    """Finds the shortest action path to a board with a match.

    The frontier is FIFO, so the first matching board found is one of the
    fewest actions away. If no match turns up before the budget runs out
    (or the reachable boards are exhausted) the path to the best-scoring
    board seen is returned instead; ties keep the shorter path.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock

    # public API

    def find_path(self, start: Board, time_budget: float | None) -> list[Action]:
        return self.search(start, time_budget).path

    def search(self, start: Board, time_budget: float | None) -> SearchResult:
        """Search from *start* for at most *time_budget* seconds (None = no limit)."""
        t0 = self.clock()
        if has_match(start):
            logger.info("Board already has a match")
            return SearchResult([], "already", explored=1, score=score(start))

        frontier: deque[tuple[Board, tuple[Action, ...]]] = deque()
        seen: set[Board] = {start}
        frontier.append((start, ()))

        best_score = score(start)
        best_path: tuple[Action, ...] = ()
        explored = 1
        depth = 0

        while frontier:
            elapsed = self.clock() - t0
            if time_budget is not None and elapsed >= time_budget:
                return self._fallback("timeout", best_path, best_score, explored, depth, elapsed)

            board, path = frontier.popleft()
            depth = max(depth, len(path))

            for action in ALL_ACTIONS:
                child = board.apply(action)
                if child in seen:
                    continue
                explored += 1
                child_path = path + (action,)

                if has_match(child):
                    elapsed = self.clock() - t0
                    logger.info(
                        "Found match: explored %d boards, %d moves deep, path %d long (%.0f ms)",
                        explored, len(child_path), len(child_path), elapsed * 1000,
                    )
                    return SearchResult(
                        list(child_path), "match", explored, len(child_path),
                        score(child), elapsed,
                    )

                seen.add(child)
                child_score = score(child)
                if child_score > best_score:
                    best_score = child_score
                    best_path = child_path
                    logger.debug("New best %.2f via %d actions", child_score, len(child_path))

                frontier.append((child, child_path))

        return self._fallback(
            "exhausted", best_path, best_score, explored, depth, self.clock() - t0,
        )

    # helpers

    @staticmethod
    def _fallback(
        reason: str,
        best_path: tuple[Action, ...],
        best_score: float,
        explored: int,
        depth: int,
        elapsed: float,
    ) -> SearchResult:
        verb = "Search timed out" if reason == "timeout" else "Exhausted search"
        if best_path:
            logger.info("%s, defaulting to highest score", verb)
        else:
            logger.info("%s, could not find a match or better board", verb)
        logger.info(
            "Explored %d boards, %d moves deep, returning path %d long",
            explored, depth, len(best_path),
        )
        return SearchResult(list(best_path), reason, explored, depth, best_score, elapsed)


def find_path(start: Board, time_budget: float | None) -> list[Action]:
    """Shortest path to a match from *start*, or the best-scoring fallback."""
    return SearchEngine().find_path(start, time_budget)
