#!/usr/bin/env python3
"""
HACK*MATCH Bot

Reads the EXAPUNKS HACK*MATCH board from your screen (or a saved board)
and plays the shortest action sequence that makes a match. Uses mss and
numpy for screen reading and pyautogui for key presses.

Requires: pip install mss Pillow numpy pyautogui
The game window must run at 1600x900.
"""

import sys

from hackmatch.cli import main

if __name__ == "__main__":
    sys.exit(main())
