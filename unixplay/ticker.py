"""Count down on a repeating interval timer."""

from __future__ import annotations

import signal
import sys
import time
from typing import Iterator

COUNT = 10
TICK_MSECS = 500


class _Done(Exception):
    """Raised from the alarm handler once the countdown reaches zero."""


def ticker_interval(n_msecs: int) -> float:
    """Seconds for an interval of n_msecs milliseconds, as setitimer takes it."""
    if n_msecs < 0:
        raise ValueError(f"interval must not be negative, got {n_msecs}")
    seconds, msecs = divmod(n_msecs, 1000)
    return seconds + msecs * 1000 / 1_000_000


def countdown(start: int = COUNT) -> Iterator[int]:
    """Yield start, start - 1, ... down to 0."""
    yield from range(start, -1, -1)


def _sleep_test() -> int:
    print("hello world", flush=True)
    time.sleep(2)
    print("The second hello world", flush=True)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if args and args[0] == "--sleep":
        return _sleep_test()
    try:
        msecs = int(args[0]) if args else TICK_MSECS
    except ValueError:
        print("usage: ticker [msecs | --sleep]", file=sys.stderr)
        return 1
    if msecs <= 0:
        print("set_ticker: interval must be positive", file=sys.stderr)
        return 1
    interval = ticker_interval(msecs)
    ticks = countdown(COUNT)

    def on_alarm(signum, frame) -> None:
        n = next(ticks, None)
        if n is None:
            return
        print(f"{n}..", end="", flush=True)
        if n == 0:
            print("DONE!", flush=True)
            raise _Done

    previous = signal.signal(signal.SIGALRM, on_alarm)
    try:
        signal.setitimer(signal.ITIMER_REAL, interval, interval)
        while True:
            signal.pause()
    except _Done:
        return 0
    finally:
        signal.setitimer(signal.ITIMER_REAL, 0)
        signal.signal(signal.SIGALRM, previous)