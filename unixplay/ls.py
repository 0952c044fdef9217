"""List directory contents, briefly or in long form."""

from __future__ import annotations

import grp
import os
import pwd
import stat
import sys
import time
from typing import Iterator

_PERMISSIONS = (
    (stat.S_IRUSR, 1, "r"), (stat.S_IWUSR, 2, "w"), (stat.S_IXUSR, 3, "x"),
    (stat.S_IRGRP, 4, "r"), (stat.S_IWGRP, 5, "w"), (stat.S_IXGRP, 6, "x"),
    (stat.S_IROTH, 7, "r"), (stat.S_IWOTH, 8, "w"), (stat.S_IXOTH, 9, "x"),
)


def mode_to_letters(mode: int) -> str:
    """Render a mode as ten letters, e.g. drwxr-xr-x."""
    letters = ["-"] * 10
    if stat.S_ISDIR(mode):
        letters[0] = "d"
    elif stat.S_ISCHR(mode):
        letters[0] = "c"
    elif stat.S_ISBLK(mode):
        letters[0] = "b"
    for bit, pos, letter in _PERMISSIONS:
        if mode & bit:
            letters[pos] = letter
    return "".join(letters)


def uid_to_name(uid: int) -> str:
    """User name for uid, or the number itself when unknown."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def gid_to_name(gid: int) -> str:
    """Group name for gid, or the number itself when unknown."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def _entries(directory: str | os.PathLike) -> Iterator[str]:
    names = os.listdir(directory)
    yield "."
    yield ".."
    yield from names


def list_names(directory: str | os.PathLike, show_all: bool = False) -> list[str]:
    """Names in directory; dot files only when show_all."""
    return [name for name in _entries(directory) if show_all or not name.startswith(".")]


def format_long(name: str, info: os.stat_result) -> str:
    """One line of long listing for name with its stat info."""
    return (
        f"{mode_to_letters(info.st_mode)}"
        f"{info.st_nlink:4d}"
        f"{uid_to_name(info.st_uid):>8}"
        f"{gid_to_name(info.st_gid):>8}"
        f"{info.st_size:10d}"
        f"{time.ctime(info.st_mtime)[4:16]}"
        f"{name}"
    )


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    show_all = "-a" in args
    dirs = [arg for arg in args if arg != "-a"]
    for directory in dirs or ["."]:
        if dirs:
            print(f"{directory}:")
        try:
            names = list_names(directory, show_all)
        except OSError:
            print(f"ls1: can't open {directory}", file=sys.stderr)
            continue
        for name in names:
            print(name)
    return 0


def main_long(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    for directory in args or ["."]:
        if args:
            print(f"{directory}:")
        try:
            names = list(_entries(directory))
        except OSError:
            print(f"ls can't open {directory}", file=sys.stderr)
            continue
        for name in names:
            try:
                info = os.stat(os.path.join(directory, name))
            except OSError as exc:
                print(f"{name}: {exc.strerror}", file=sys.stderr)
                continue
            print(format_long(name, info))
    return 0