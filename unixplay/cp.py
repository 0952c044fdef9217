"""Copy one file to another."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import Iterator

BUFSIZE = 4096
COPYMODE = 0o644


@contextmanager
def _reporting(action: str, path: str) -> Iterator[None]:
    try:
        yield
    except OSError as exc:
        raise OSError(exc.errno, f"{action} {path}", path) from exc


def copy_file(source: str | os.PathLike, destination: str | os.PathLike) -> int:
    """Copy source to destination, creating it with mode 0644; return bytes copied."""
    source = os.fspath(source)
    destination = os.fspath(destination)
    with _reporting("Can't open", source):
        src = open(source, "rb")
    with src:
        with _reporting("Can't creat", destination):
            fd = os.open(destination, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, COPYMODE)
        with open(fd, "wb") as dst:
            copied = 0
            while True:
                with _reporting("Read error from", source):
                    chunk = src.read(BUFSIZE)
                if not chunk:
                    break
                with _reporting("Write error to", destination):
                    dst.write(chunk)
                copied += len(chunk)
    return copied


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("usage: cp source destination", file=sys.stderr)
        return 1
    try:
        copy_file(args[0], args[1])
    except OSError as exc:
        reason = os.strerror(exc.errno) if exc.errno else ""
        print(f"Error: {exc.strerror}: {reason}", file=sys.stderr)
        return 1
    return 0