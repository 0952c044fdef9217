"""Signal handling demonstrations."""

from __future__ import annotations

import signal
import sys
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Mapping, TextIO

INPUTLEN = 100


@contextmanager
def _handlers(table: Mapping[int, Callable]) -> Iterator[None]:
    """Install signal handlers, restoring the previous ones on exit."""
    previous = {signum: signal.signal(signum, handler) for signum, handler in table.items()}
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def echo_messages(stream: TextIO | None = None, out: TextIO | None = None) -> int:
    """Prompt for messages and echo them until one starts with 'quit' or input ends.

    Returns the number of messages echoed.
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    count = 0
    while True:
        out.write("\nType a message:\n")
        out.flush()
        text = stream.readline(INPUTLEN - 1)
        if not text:
            return count
        out.write(f"You typed: {text}\n")
        out.flush()
        count += 1
        if text.startswith("quit"):
            return count


def _hello(count: int = 5) -> int:
    """Print greetings once a second, answering interrupts; return how many arrived."""
    interrupts: list[int] = []

    def on_int(signum, frame) -> None:
        interrupts.append(signum)
        sys.stdout.write("oohps\n")
        sys.stdout.flush()

    with _handlers({signal.SIGINT: on_int}):
        for _ in range(count):
            print("hello world", flush=True)
            time.sleep(1)
    return len(interrupts)


def _sigaction(stream: TextIO) -> None:
    def on_int(signum, frame) -> None:
        signal.signal(signal.SIGINT, signal.SIG_DFL)
        signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGQUIT})
        try:
            print(f"Calling with signal {signum}", flush=True)
            time.sleep(2)
            print(f"Done handling signal {signum}", flush=True)
        finally:
            signal.pthread_sigmask(signal.SIG_UNBLOCK, {signal.SIGQUIT})

    with _handlers({signal.SIGINT: on_int}):
        for line in iter(lambda: stream.readline(INPUTLEN - 1), ""):
            print(f"input {line}", flush=True)


def _prompt(stream: TextIO) -> None:
    def on_int(signum, frame) -> None:
        print(f"Received signal {signum} ....waiting", flush=True)
        time.sleep(2)
        print("Leaving inthander", end="", flush=True)

    def on_quit(signum, frame) -> None:
        print(f"Received signal {signum} ...Waiting", flush=True)
        time.sleep(2)
        print("Leaving quithander", end="", flush=True)

    with _handlers({signal.SIGINT: on_int, signal.SIGQUIT: on_quit}):
        echo_messages(stream, sys.stdout)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    demo = args[0] if args else "prompt"
    if demo == "hello":
        _hello()
    elif demo == "sigaction":
        _sigaction(sys.stdin)
    elif demo == "prompt":
        _prompt(sys.stdin)
    else:
        print("usage: sigdemo [hello | sigaction | prompt]", file=sys.stderr)
        return 1
    return 0