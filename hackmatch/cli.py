"""Command-line front end: live play, or solve a saved board / screenshot."""

from __future__ import annotations

import argparse
import logging
import time

from hackmatch.action import format_path
from hackmatch.board import Board, replay
from hackmatch.bot import Bot, ScreenReadError
from hackmatch.constants import IMBALANCE_THRESHOLD, MAX_SEARCH_TIME, WINDOW_TITLE
from hackmatch.engine import SearchEngine
from hackmatch.evaluate import imbalance, score
from hackmatch.keys import KeyPlayer
from hackmatch.match import has_match
from hackmatch.screen import ScreenReader
from hackmatch.tile import tile_from_code
from hackmatch.window import WindowError, prepare_window

log = logging.getLogger("hackmatch")


def load_board_file(path: str, cursor: int = 0, held: str = ".") -> Board:
    """Read a text board: up to nine lines of seven tile codes, top row first.
    Blank lines and lines starting with ``#`` are ignored."""
    with open(path, "r", encoding="utf-8") as f:
        rows = [
            line.rstrip("\n")
            for line in f
            if line.strip() and not line.lstrip().startswith("#")
        ]
    return Board.from_rows(rows, cursor=cursor, held=tile_from_code(held))


def solve_and_print(board: Board, budget: float | None, threshold: float) -> None:
    """Plan for one board and print the result."""
    print(board)
    print(f"\nimbalance={imbalance(board):.2f}  score={score(board):.2f}")
    print("Searching...\n")

    # Offline there is nothing to press keys with; the bot only plans.
    bot = Bot(reader=None, player=None, engine=SearchEngine(),
              time_budget=budget, imbalance_threshold=threshold)
    t0 = time.time()
    path = bot.plan(board)
    elapsed = time.time() - t0

    print(f"Path ({len(path)} actions, {elapsed:.2f}s): {format_path(path)}")
    result = replay(board, path)
    print()
    print(result)
    print(f"\nmatch={'yes' if has_match(result) else 'no'}  score={score(result):.2f}")


def run_live(args: argparse.Namespace, gw=None) -> int:
    try:
        left, top = prepare_window(gw, args.window_title, args.window_left, args.window_top)
    except WindowError as exc:
        log.error("%s", exc)
        return 1

    reader = ScreenReader(left, top)
    if not reader.is_available:
        log.error("Screen capture dependencies not available (mss, numpy, Pillow)")
        return 1
    player = KeyPlayer()
    if not player.is_available:
        return 1

    bot = Bot(
        reader,
        player,
        time_budget=args.budget_ms / 1000,
        imbalance_threshold=args.imbalance_threshold,
    )
    log.info("Playing -- Ctrl+C to stop")
    try:
        bot.run(args.generations)
    except ScreenReadError as exc:
        log.error("%s, exiting", exc)
        return 1
    except KeyboardInterrupt:
        log.info("Stopped after %d generations", bot.generation)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="HACK*MATCH bot -- reads the board and plays the shortest match",
    )
    parser.add_argument("--board", type=str, default=None,
                        help="Solve a text board file instead of playing")
    parser.add_argument("--image", type=str, default=None,
                        help="Solve a saved screenshot of the board area instead of playing")
    parser.add_argument("--cursor", type=int, default=0,
                        help="Cursor column for --board (0-6)")
    parser.add_argument("--held", type=str, default=".",
                        help="Held tile code for --board (e.g. r, R, .)")
    parser.add_argument("--budget-ms", type=float, default=MAX_SEARCH_TIME * 1000,
                        help="Search time budget in milliseconds")
    parser.add_argument("--imbalance-threshold", type=float, default=IMBALANCE_THRESHOLD,
                        help="Rebalance directly when column imbalance reaches this")
    parser.add_argument("--window-title", type=str, default=WINDOW_TITLE,
                        help="Title of the game window to find and focus")
    parser.add_argument("--window-left", type=int, default=None,
                        help="Screen x of the game window's left edge (skips the lookup with --window-top)")
    parser.add_argument("--window-top", type=int, default=None,
                        help="Screen y of the game window's top edge (skips the lookup with --window-left)")
    parser.add_argument("--generations", type=int, default=None,
                        help="Stop after this many boards (live mode)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    budget = args.budget_ms / 1000

    if args.board:
        try:
            board = load_board_file(args.board, args.cursor, args.held)
        except ValueError as exc:
            log.error("Invalid board %s: %s", args.board, exc)
            return 1
        solve_and_print(board, budget, args.imbalance_threshold)
        return 0

    if args.image:
        reader = ScreenReader()
        if reader.pil is None:
            return 1
        board = reader.read_board_from_image(reader.pil.open(args.image))
        if board is None:
            log.error("Could not read a board from %s", args.image)
            return 1
        solve_and_print(board, budget, args.imbalance_threshold)
        return 0

    return run_live(args)
