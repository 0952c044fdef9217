"""Draw Hello on the screen: a diagonal of banners or one bouncing word."""

from __future__ import annotations

import curses
import sys
import time
from typing import Iterator, NamedTuple

LEFTEDGE = 10
RIGHTEDGE = 30
ROW = 10
GREETING = "Hello world"
MESSAGE = "Hello"
BLANK = "       "


class Placement(NamedTuple):
    """Where one banner goes and whether it is drawn in reverse video."""

    row: int
    col: int
    standout: bool


def bounce_positions(left: int = LEFTEDGE, right: int = RIGHTEDGE) -> Iterator[int]:
    """Yield columns moving from left to right and back, forever."""
    if left >= right:
        raise ValueError(f"left edge {left} must be less than right edge {right}")
    pos, direction = left, 1
    while True:
        yield pos
        pos += direction
        if pos >= right:
            direction = -1
        if pos <= left:
            direction = 1


def diagonal_layout(lines: int) -> list[Placement]:
    """One placement per screen line, stepping two columns right each line."""
    if lines < 0:
        raise ValueError(f"line count must not be negative, got {lines}")
    return [Placement(row, row * 2, row % 2 == 1) for row in range(lines)]


def _put(stdscr, row: int, col: int, text: str, attr: int = curses.A_NORMAL) -> None:
    try:
        stdscr.addstr(row, col, text, attr)
    except curses.error:
        pass  # off the edge of the screen


def _diagonal(stdscr) -> None:
    stdscr.clear()
    for place in diagonal_layout(curses.LINES):
        attr = curses.A_STANDOUT if place.standout else curses.A_NORMAL
        _put(stdscr, place.row, place.col, GREETING, attr)
    stdscr.refresh()
    stdscr.getch()


def _bounce(stdscr) -> None:
    stdscr.clear()
    for pos in bounce_positions(LEFTEDGE, RIGHTEDGE):
        _put(stdscr, ROW, pos, MESSAGE)
        try:
            stdscr.move(curses.LINES - 1, curses.COLS - 1)
        except curses.error:
            pass
        stdscr.refresh()
        time.sleep(1)
        _put(stdscr, ROW, pos, BLANK)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    demo = _bounce if args and args[0] == "bounce" else _diagonal
    try:
        curses.wrapper(demo)
    except KeyboardInterrupt:
        pass
    return 0