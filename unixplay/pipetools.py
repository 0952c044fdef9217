"""Pipe demonstrations: connect two commands, and echo text through a pipe."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import TextIO

LINEBUF = 256


def pipe_commands(cmd1: str, cmd2: str) -> int:
    """Run cmd1 | cmd2 with cmd2 writing to standard output; return cmd2's exit code."""
    first = subprocess.Popen([cmd1], stdout=subprocess.PIPE)
    try:
        second = subprocess.Popen([cmd2], stdin=first.stdout)
    except OSError:
        first.stdout.close()
        first.kill()
        first.wait()
        raise
    first.stdout.close()
    code = second.wait()
    first.wait()
    return code


def _read_exactly(fd: int, size: int) -> bytes:
    received = bytearray()
    while len(received) < size:
        data = os.read(fd, size - len(received))
        if not data:
            break
        received += data
    return bytes(received)


def echo_through_pipe(stream: TextIO | None = None, out: TextIO | None = None) -> int:
    """Send each line of stream through a pipe and write what comes back; return bytes echoed."""
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    read_fd, write_fd = os.pipe()
    echoed = 0
    try:
        out.write(f"Got a pipe! It is file descriptors: {{ {read_fd} {write_fd} }}\n")
        for line in iter(lambda: stream.readline(LINEBUF - 1), ""):
            data = line.encode()
            os.write(write_fd, data)
            back = _read_exactly(read_fd, len(data))
            out.write(back.decode())
            out.flush()
            echoed += len(back)
    finally:
        os.close(read_fd)
        os.close(write_fd)
    return echoed


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("usage: pip cmd1 cmd2", file=sys.stderr)
        return 1
    try:
        return pipe_commands(args[0], args[1])
    except OSError as exc:
        print(f"{exc.filename}: {exc.strerror}", file=sys.stderr)
        return 4


def main_echo(argv: list[str] | None = None) -> int:
    try:
        echo_through_pipe(sys.stdin, sys.stdout)
    except OSError as exc:
        print(f"pipe: {exc}", file=sys.stderr)
        return 1
    return 0