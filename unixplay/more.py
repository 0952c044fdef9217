"""Page through text one screenful at a time."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

LINELEN = 512
PAGELEN = 24
PROMPT = "more?"


def _chunks(stream: TextIO) -> Iterator[str]:
    """Yield pieces of at most LINELEN - 1 characters, line by line."""
    limit = LINELEN - 1
    for line in stream:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        if line:
            yield line


def see_more(cmd: TextIO, out: TextIO) -> int:
    """Prompt and return how many more lines to show (0 means stop)."""
    out.write(PROMPT)
    out.flush()
    while True:
        c = cmd.read(1)
        if not c or c == "q":
            return 0
        if c == " ":
            return PAGELEN
        if c == "\n":
            return 1


def do_more(stream: TextIO, out: TextIO, tty: TextIO) -> None:
    """Copy stream to out, pausing for a reply from tty after every page."""
    shown = 0
    for chunk in _chunks(stream):
        if shown == PAGELEN:
            reply = see_more(tty, out)
            if reply == 0:
                break
            shown -= reply
        out.write(chunk)
        shown += 1


def _page(stream: TextIO) -> None:
    with open("/dev/tty") as tty:
        do_more(stream, sys.stdout, tty)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if not args:
            _page(sys.stdin)
        for path in args:
            with open(path, errors="replace") as fp:
                _page(fp)
    except OSError as exc:
        print(f"more: {exc}", file=sys.stderr)
        return 1
    return 0