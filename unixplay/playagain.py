"""Ask a yes/no question on the terminal, optionally with a time limit."""

from __future__ import annotations

import fcntl
import os
import sys
import termios
import time
from contextlib import contextmanager
from typing import Callable, Iterator, TextIO

QUESTION = "Do you want another transaction"
ASK = "Do you want another transaction?"
TRIES = 3
SLEEPTIME = 5
BEEP = "\a"


@contextmanager
def tty_mode(fd: int = 0) -> Iterator[None]:
    """Save the terminal mode and file flags of fd, restoring them on exit."""
    try:
        saved = termios.tcgetattr(fd)
    except termios.error:
        saved = None
    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    try:
        yield
    finally:
        if saved is not None:
            termios.tcsetattr(fd, termios.TCSANOW, saved)
        fcntl.fcntl(fd, fcntl.F_SETFL, flags)


def _set_cr_noecho(fd: int) -> None:
    try:
        attrs = termios.tcgetattr(fd)
    except termios.error:
        return  # not a terminal: read it as it is
    attrs[3] &= ~(termios.ICANON | termios.ECHO)
    attrs[6][termios.VMIN] = 1
    termios.tcsetattr(fd, termios.TCSANOW, attrs)


def _set_nodelay(fd: int) -> None:
    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)


class _FdReader:
    """Unbuffered character reader; no data available reads as end of input."""

    def __init__(self, fd: int) -> None:
        self._fd = fd

    def read(self, size: int = 1) -> str:
        try:
            data = os.read(self._fd, size)
        except BlockingIOError:
            return ""
        return data.decode("latin-1")


def get_response(question: str, stream: TextIO | None = None, out: TextIO | None = None) -> int:
    """Return 0 for y/Y, 1 for n/N or end of input; other characters are ignored."""
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    out.write(f"{question} (y/n)?")
    out.flush()
    while True:
        c = stream.read(1)
        if c in ("y", "Y"):
            return 0
        if c in ("n", "N", ""):
            return 1


def _get_ok_char(stream) -> str:
    while True:
        c = stream.read(1)
        if not c or c in "yYnN":
            return c or ""


def get_response_timed(
    question: str,
    maxtries: int = TRIES,
    stream=None,
    out: TextIO | None = None,
    sleep: Callable[[float], object] = time.sleep,
) -> int:
    """Return 0 for yes, 1 for no, 2 once maxtries further waits go unanswered."""
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    out.write(f"{question} (y/n)?")
    out.flush()
    while True:
        sleep(SLEEPTIME)
        answer = _get_ok_char(stream).lower()
        if answer == "y":
            return 0
        if answer == "n":
            return 1
        if maxtries == 0:
            return 2
        maxtries -= 1
        out.write(BEEP)
        out.flush()


def main(argv: list[str] | None = None) -> int:
    with tty_mode(0):
        _set_cr_noecho(0)
        return get_response(QUESTION, _FdReader(0), sys.stdout)


def main_timed(argv: list[str] | None = None) -> int:
    with tty_mode(0):
        _set_cr_noecho(0)
        _set_nodelay(0)
        return get_response_timed(ASK, TRIES, _FdReader(0), sys.stdout)