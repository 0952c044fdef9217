"""Print the working directory by walking up the tree."""

from __future__ import annotations

import os
import sys


def get_inode(path: str | os.PathLike) -> int:
    """Inode number of path."""
    return os.stat(path).st_ino


def _name_in(parent: str, target: os.stat_result) -> str:
    with os.scandir(parent) as entries:
        for entry in entries:
            try:
                info = entry.stat(follow_symlinks=False)
            except OSError:
                continue
            if os.path.samestat(info, target) and entry.name not in (".", ".."):
                return entry.name
    raise FileNotFoundError(f"error looking for inum {target.st_ino}")


def path_to(directory: str | os.PathLike = ".") -> str:
    """Absolute path of directory, found by matching inodes upward; the root gives ''."""
    current = os.fspath(directory)
    here = os.stat(current)
    parts = []
    while True:
        parent = os.path.join(current, "..")
        above = os.stat(parent)
        if os.path.samestat(above, here):
            break
        parts.append(_name_in(parent, here))
        current, here = parent, above
    return "".join(f"/{name}" for name in reversed(parts))


def main(argv: list[str] | None = None) -> int:
    try:
        print(path_to("."))
    except OSError as exc:
        print(f"spwd: {exc}", file=sys.stderr)
        return 1
    return 0