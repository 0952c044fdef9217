"""A tiny calculator that hands its arithmetic to dc over a pair of pipes."""

from __future__ import annotations

import contextlib
import re
import subprocess
import sys
from typing import Sequence, TextIO

PROMPT = "tinybc:"
DC_COMMAND = ("dc", "-")

_EXPRESSION = re.compile(r"\s*([+-]?\d+)\s*([-+*/^ ]+)\s*([+-]?\d+)")


def parse_expression(line: str) -> tuple[int, str, int]:
    """Parse 'number operator number'; the operator is the first of its run of operator characters."""
    match = _EXPRESSION.match(line)
    if match is None:
        raise ValueError(f"syntax error: {line!r}")
    num1, operation, num2 = match.groups()
    return int(num1), operation[0], int(num2)


def to_dc(num1: int, op: str, num2: int) -> str:
    """The dc program that computes num1 op num2 and prints it."""
    return f"{num1}\n {num2}\n {op}\n p \n"


def run(
    stream: TextIO | None = None,
    out: TextIO | None = None,
    dc_command: Sequence[str] = DC_COMMAND,
) -> int:
    """Read expressions from stream and print their results as computed by dc."""
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    proc = subprocess.Popen(
        list(dc_command), stdin=subprocess.PIPE, stdout=subprocess.PIPE, text=True
    )
    try:
        while True:
            out.write(PROMPT)
            out.flush()
            line = stream.readline()
            if not line:
                break
            try:
                num1, op, num2 = parse_expression(line)
            except ValueError:
                out.write("syntax error\n")
                continue
            proc.stdin.write(to_dc(num1, op, num2))
            proc.stdin.flush()
            reply = proc.stdout.readline()
            if not reply:
                break
            out.write(f"{num1} {op} {num2} = {reply}")
    finally:
        with contextlib.suppress(BrokenPipeError):
            proc.stdin.close()
        proc.stdout.close()
        proc.wait()
    return 0


def main(argv: list[str] | None = None) -> int:
    try:
        return run(sys.stdin, sys.stdout)
    except FileNotFoundError as exc:
        print(f"Cannot run dc: {exc.strerror}", file=sys.stderr)
        return 5
    except OSError as exc:
        print(f"Error: Error writing: {exc}", file=sys.stderr)
        return 1