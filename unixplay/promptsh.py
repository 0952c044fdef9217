"""A prompting shell: one argument per line, a blank line runs the command."""

from __future__ import annotations

import subprocess
import sys
from typing import Iterator, Sequence, TextIO

MAXARGS = 20
ARGLEN = 100


def collect_args(
    stream: TextIO | None = None,
    out: TextIO | None = None,
    maxargs: int = MAXARGS,
) -> Iterator[list[str]]:
    """Yield argument lists, each ended by a blank line or end of input.

    Collection stops without yielding once maxargs arguments are gathered.
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    arglist: list[str] = []
    while len(arglist) < maxargs:
        out.write(f"arg[{len(arglist)}]?")
        out.flush()
        line = stream.readline(ARGLEN - 1)
        if line and line != "\n":
            arglist.append(line[:-1] if line.endswith("\n") else line)
            continue
        if arglist:
            yield arglist
            arglist = []
        if not line:
            return


def run_command(arglist: Sequence[str]) -> tuple[int, int]:
    """Run arglist and return (exit status, signal number)."""
    try:
        code = subprocess.run(list(arglist)).returncode
    except OSError as exc:
        print(f"execvp failed: {exc.strerror}", file=sys.stderr)
        return 1, 0
    return (0, -code) if code < 0 else (code, 0)


def main(argv: list[str] | None = None) -> int:
    for arglist in collect_args(sys.stdin, sys.stdout):
        status, sig = run_command(arglist)
        print(f"child exited with status {status}, {sig}")
    return 0