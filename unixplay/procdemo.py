"""Process demonstrations: fork, exec, wait and file descriptor redirection."""

from __future__ import annotations

import os
import sys
import time
from typing import NamedTuple, TextIO

MSG1 = b"Test 1 2 3\n"
MSG2 = b"Hello world\n"
LINELEN = 100


class WaitStatus(NamedTuple):
    """A wait status split into exit code, signal number and core bit."""

    exit: int
    signal: int
    core: int


def decode_status(status: int) -> WaitStatus:
    """Split a raw wait status: exit code in the high byte, signal in the low 7 bits."""
    return WaitStatus(status >> 8, status & 0x7F, status & 0x80)


def write_shared_file(path: str | os.PathLike) -> None:
    """Create path, write a line, then fork so parent and child each append a line."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    try:
        os.write(fd, MSG1)
        pid = os.fork()
        if pid == 0:
            code = 1
            try:
                os.write(fd, MSG2)
                code = 0
            finally:
                os._exit(code)
        os.write(fd, MSG2)
        os.waitpid(pid, 0)
    finally:
        os.close(fd)


def fork_and_wait(delay: float, exit_code: int) -> tuple[int, WaitStatus]:
    """Fork a child that sleeps then exits with exit_code; return its pid and status."""
    if not 0 <= exit_code <= 255:
        raise ValueError(f"exit code must be 0..255, got {exit_code}")
    sys.stdout.flush()
    pid = os.fork()
    if pid == 0:
        try:
            print(f"child {os.getpid()} here. will sleep for {delay} seconds", flush=True)
            time.sleep(delay)
            print("child done, about to exit", flush=True)
        finally:
            os._exit(exit_code)
    waited, status = os.waitpid(pid, 0)
    print(f"done waiting for {pid}. Wait returned: {waited}", flush=True)
    return waited, decode_status(status)


def read_lines(stream: TextIO, count: int) -> list[str]:
    """Read up to count lines of at most LINELEN - 1 characters each."""
    lines = []
    for _ in range(count):
        line = stream.readline(LINELEN - 1)
        if not line:
            break
        lines.append(line)
    return lines


def _fork() -> int:
    sys.stdout.flush()
    return os.fork()


def _show_pids() -> int:
    for n in range(10):
        print(f"my pid = {os.getpid()}, n= {n}", flush=True)
        time.sleep(1)
    return 0


def _shared() -> int:
    try:
        write_shared_file("testfile")
    except OSError:
        return 0
    return 0


def _exec_ls() -> int:
    print("*** About to exec ls -l", flush=True)
    try:
        os.execvp("ls", ["ls", "-l"])
    except OSError:
        pass
    print("*** ls is done, bye")
    return 0


def _fork1() -> int:
    print(f"Before: myPid is {os.getpid()}")
    rv = _fork()
    time.sleep(1)
    print(f"After: myPid is {os.getpid()}, fork() said {rv}", flush=True)
    return 0


def _fork2() -> int:
    print(f"my pid is {os.getpid()}")
    for _ in range(3):
        _fork()
    print(f"my pid is {os.getpid()}", flush=True)
    return 0


def _fork3() -> int:
    print(f"Before, my pid is {os.getpid()} ")
    try:
        rv = _fork()
    except OSError as exc:
        print(f"fork: {exc.strerror}", file=sys.stderr)
        return 0
    if rv == 0:
        print(f"I am the child, my pid is {os.getpid()}", flush=True)
    else:
        print(f"I am the parent, my child is {rv}", flush=True)
    return 0


def _wait(delay: float, show_status: bool) -> int:
    print(f"before, mypid is {os.getpid()}")
    try:
        _, status = fork_and_wait(delay, 17)
    except OSError as exc:
        print(f"fork: {exc.strerror}", file=sys.stderr)
        return 0
    if show_status:
        print(f"status:exit = {status.exit}, sig = {status.signal}, core = {status.core}")
    return 0


def _redirect() -> int:
    for line in read_lines(sys.stdin, 3):
        sys.stdout.write(line)
    sys.stdout.flush()
    os.close(0)
    fd = os.open("/etc/passwd", os.O_RDONLY)
    if fd != 0:
        print("Could not open data as fd 0", file=sys.stderr)
        return 1
    with open(0, closefd=False) as data:
        for line in read_lines(data, 3):
            sys.stdout.write(line)
    sys.stdout.flush()
    return 0


_DEMOS = {
    "pid": _show_pids,
    "shared": _shared,
    "exec": _exec_ls,
    "fork1": _fork1,
    "fork2": _fork2,
    "fork3": _fork3,
    "wait1": lambda: _wait(2, False),
    "wait2": lambda: _wait(10, True),
    "redir": _redirect,
}


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    demo = _DEMOS.get(args[0]) if args else None
    if demo is None:
        print(f"usage: procdemo [{' | '.join(_DEMOS)}]", file=sys.stderr)
        return 1
    return demo()