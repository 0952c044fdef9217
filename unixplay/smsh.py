"""A small shell: read, split and run command lines."""

from __future__ import annotations

import signal
import sys
from typing import TextIO

from unixplay.process import CommandProcessor
from unixplay.splitline import next_cmd, splitline

DFL_PROMPT = ">"


def run_shell(
    stream: TextIO | None = None,
    out: TextIO | None = None,
    processor: CommandProcessor | None = None,
    prompt: str = DFL_PROMPT,
) -> int:
    """Process lines until end of input; return the status of the last command."""
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    processor = CommandProcessor() if processor is None else processor
    result = 0
    while (line := next_cmd(prompt, stream, out)) is not None:
        args = splitline(line)
        if args:
            result = processor.process(args)
    return result


def _setup() -> None:
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    signal.signal(signal.SIGQUIT, signal.SIG_IGN)


def main(argv: list[str] | None = None) -> int:
    _setup()
    run_shell(sys.stdin, sys.stdout)
    return 0