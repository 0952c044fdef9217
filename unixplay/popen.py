"""Open a pipe to or from a shell command."""

from __future__ import annotations

import subprocess
from typing import IO, Any, Iterator

SHELL = "/bin/sh"


class _PipeFile:
    """A stream connected to a running shell command; closing it waits for the command."""

    def __init__(self, proc: subprocess.Popen, stream: IO[Any]) -> None:
        self._proc = proc
        self._stream = stream

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def read(self, size: int = -1) -> Any:
        return self._stream.read(size)

    def readline(self, size: int = -1) -> Any:
        return self._stream.readline(size)

    def write(self, data: Any) -> int:
        return self._stream.write(data)

    def flush(self) -> None:
        self._stream.flush()

    def fileno(self) -> int:
        return self._stream.fileno()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._stream)

    def close(self) -> int:
        """Close the stream and return the command's exit status."""
        if not self._stream.closed:
            self._stream.close()
        return self._proc.wait()

    def __enter__(self) -> "_PipeFile":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def popen(command: str, mode: str = "r") -> _PipeFile:
    """Run command with /bin/sh and return a stream reading its output ('r') or feeding its input ('w').

    A 'b' anywhere in mode gives a binary stream.
    """
    if not mode or mode[0] not in ("r", "w"):
        raise ValueError(f"invalid mode {mode!r}: must start with 'r' or 'w'")
    text = "b" not in mode
    if mode[0] == "r":
        proc = subprocess.Popen([SHELL, "-c", command], stdout=subprocess.PIPE, text=text)
        return _PipeFile(proc, proc.stdout)
    proc = subprocess.Popen([SHELL, "-c", command], stdin=subprocess.PIPE, text=text)
    return _PipeFile(proc, proc.stdin)