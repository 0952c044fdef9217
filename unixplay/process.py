"""Run commands, with if/then/fi control flow."""

from __future__ import annotations

import enum
import signal
import subprocess
import sys
from typing import Callable, Sequence, TextIO

CONTROL_WORDS = ("if", "then", "fi")


class _State(enum.Enum):
    NEUTRAL = enum.auto()
    WANT_THEN = enum.auto()
    THEN_BLOCK = enum.auto()


def _default_signals() -> None:
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    signal.signal(signal.SIGQUIT, signal.SIG_DFL)


def execute(args: Sequence[str]) -> int:
    """Run args and return its wait status (exit code in the high byte); 0 for no command."""
    if not args:
        return 0
    try:
        proc = subprocess.Popen(list(args), preexec_fn=_default_signals)
    except (FileNotFoundError, PermissionError, NotADirectoryError) as exc:
        print(f"cannot execute command: {exc.strerror}", file=sys.stderr)
        return 1 << 8
    except OSError as exc:
        print(f"fork: {exc.strerror}", file=sys.stderr)
        return -1
    code = proc.wait()
    return -code if code < 0 else code << 8


def is_control_command(word: str) -> bool:
    """True for the words if, then and fi."""
    return word in CONTROL_WORDS


class CommandProcessor:
    """Runs command words, keeping track of if/then/fi blocks."""

    def __init__(
        self,
        runner: Callable[[Sequence[str]], int] = execute,
        err: TextIO | None = None,
    ) -> None:
        self._runner = runner
        self._err = err
        self._state = _State.NEUTRAL
        self._succeeded = True
        self.last_stat = 0

    def _syn_err(self, message: str) -> int:
        err = sys.stderr if self._err is None else self._err
        err.write(f"syntax error: {message}\n")
        return -1

    def process(self, args: Sequence[str]) -> int:
        """Handle one command: control word, runnable command, or skipped."""
        if not args:
            return 0
        if is_control_command(args[0]):
            return self.do_control_command(args)
        if self.ok_to_execute():
            return self._runner(args)
        return 0

    def ok_to_execute(self) -> bool:
        """Whether a plain command may run in the current block."""
        if self._state is _State.WANT_THEN:
            self._syn_err("then expected")
            return False
        if self._state is _State.THEN_BLOCK:
            return self._succeeded
        return True

    def do_control_command(self, args: Sequence[str]) -> int:
        """Process an if, then or fi line; -1 on a syntax error."""
        cmd = args[0]
        if cmd == "if":
            if self._state is not _State.NEUTRAL:
                return self._syn_err("if unexpected")
            self.last_stat = self.process(args[1:])
            self._succeeded = self.last_stat == 0
            self._state = _State.WANT_THEN
            return 0
        if cmd == "then":
            if self._state is not _State.WANT_THEN:
                return self._syn_err("then unexpected")
            self._state = _State.THEN_BLOCK
            if self._succeeded:
                self.process(args[1:])
            return 0
        if cmd == "fi":
            if self._state is not _State.THEN_BLOCK:
                return self._syn_err("fi unexpected")
            self._state = _State.NEUTRAL
            return 0
        raise ValueError(f"internal error processing : {cmd}")