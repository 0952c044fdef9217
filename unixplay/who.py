"""Show who is logged in, read from the utmp file."""

from __future__ import annotations

import struct
import sys
import time
from dataclasses import dataclass
from typing import BinaryIO, Iterator

UTMP_FILE = "/var/run/utmp"
USER_PROCESS = 7
NRECS = 16

_LAYOUT = struct.Struct("<hxxi32s4s32s256shhiii4i20s")
RECORD_SIZE = _LAYOUT.size


@dataclass(frozen=True)
class UtmpRecord:
    """One login record."""

    type: int
    pid: int
    line: str
    ident: str
    user: str
    host: str
    exit_termination: int
    exit_status: int
    session: int
    tv_sec: int
    tv_usec: int
    addr_v6: tuple[int, int, int, int]


def _text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def parse_record(data: bytes) -> UtmpRecord:
    """Decode one utmp record."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"utmp record must be {RECORD_SIZE} bytes, got {len(data)}")
    (ut_type, pid, line, ident, user, host, e_term, e_exit,
     session, tv_sec, tv_usec, a0, a1, a2, a3, _reserved) = _LAYOUT.unpack(data)
    return UtmpRecord(
        type=ut_type,
        pid=pid,
        line=_text(line),
        ident=_text(ident),
        user=_text(user),
        host=_text(host),
        exit_termination=e_term,
        exit_status=e_exit,
        session=session,
        tv_sec=tv_sec,
        tv_usec=tv_usec,
        addr_v6=(a0, a1, a2, a3),
    )


def iter_records(stream: BinaryIO) -> Iterator[UtmpRecord]:
    """Yield records, reading NRECS at a time; a trailing partial record is dropped."""
    while True:
        block = stream.read(NRECS * RECORD_SIZE)
        count = len(block) // RECORD_SIZE
        if count == 0:
            return
        for offset in range(0, count * RECORD_SIZE, RECORD_SIZE):
            yield parse_record(block[offset:offset + RECORD_SIZE])


def format_record(record: UtmpRecord) -> str | None:
    """Return the display line for a user process, or None for other records."""
    if record.type != USER_PROCESS:
        return None
    text = f"{record.user:<8.8} {record.line:<8.8} {time.ctime(record.tv_sec)}"
    if record.host:
        text += f"({record.host})"
    return text


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else UTMP_FILE
    try:
        with open(path, "rb") as fp:
            for record in iter_records(fp):
                text = format_record(record)
                if text is not None:
                    print(text)
    except OSError as exc:
        print(f"{path}: {exc.strerror}", file=sys.stderr)
    return 0