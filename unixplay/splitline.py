"""Read command lines and split them into words."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_DELIMS = re.compile(r"[ \t]+")


def next_cmd(prompt: str, stream: TextIO | None = None, out: TextIO | None = None) -> str | None:
    """Show prompt and read one line without its newline; None at end of input."""
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    out.write(prompt)
    out.flush()
    line = stream.readline()
    if not line:
        return None
    if line.endswith("\n"):
        line = line[:-1]
    return line


def splitline(line: str | None) -> list[str] | None:
    """Split line into words separated by spaces and tabs; None stays None."""
    if line is None:
        return None
    return [word for word in _DELIMS.split(line) if word]