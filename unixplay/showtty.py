"""Describe the terminal settings of standard input."""

from __future__ import annotations

import sys
import termios

LOCAL_FLAGS = (
    (termios.ISIG, "Enable signal"),
    (termios.ICANON, "Canonical input (erase and kill)"),
    (termios.ECHO, "Enable echo"),
    (termios.ECHOE, "Echo ERASE as BS-SPACE-BS"),
    (termios.ECHOK, "Echo KILL by starting new line"),
)

INPUT_FLAGS = (
    (termios.IGNBRK, "Ignore break condition"),
    (termios.BRKINT, "Signal interrupt on break"),
    (termios.IGNPAR, "Ignore chars with parity errors"),
    (termios.PARMRK, "Mark parity errors"),
    (termios.INPCK, "Enable input parity check"),
    (termios.ISTRIP, "Strip character"),
    (termios.INLCR, "Map NL to CR on input"),
    (termios.IGNCR, "Ignore CR"),
    (termios.ICRNL, "Map CR to NL on input"),
    (termios.IXON, "Enable start/stop output control"),
    (termios.IXOFF, "Enable start/stop input control"),
)

_BAUDS = {
    termios.B300: "300",
    termios.B600: "600",
    termios.B1200: "1200",
    termios.B1800: "1800",
    termios.B2400: "2400",
    termios.B4800: "4800",
    termios.B9600: "9600",
}


def baud_description(speed: int) -> str:
    """Name a speed constant, or 'Fast' for anything above 9600."""
    return _BAUDS.get(speed, "Fast")


def flag_report(value: int, names) -> list[str]:
    """One 'name is ON/OFF' line per (bit, name) pair."""
    return [f"{name} is {'ON' if value & bit else 'OFF'}" for bit, name in names]


def _code(cc) -> int:
    return cc[0] if isinstance(cc, bytes) else int(cc)


def _control_line(label: str, cc) -> str:
    code = _code(cc)
    return f"The {label} character is ascii {code}, Ctrl-{chr(code - 1 + ord('A'))}"


def describe_tty(attrs) -> list[str]:
    """Report lines for attributes as returned by termios.tcgetattr."""
    iflag, _oflag, _cflag, lflag, _ispeed, ospeed, cc = attrs
    return [
        f"The baud rate is {baud_description(ospeed)}",
        _control_line("erase", cc[termios.VERASE]),
        _control_line("line kill", cc[termios.VKILL]),
        *flag_report(iflag, INPUT_FLAGS),
        *flag_report(lflag, LOCAL_FLAGS),
    ]


def main(argv: list[str] | None = None) -> int:
    try:
        attrs = termios.tcgetattr(0)
    except termios.error as exc:
        print(f"can't get params about stdin: {exc}", file=sys.stderr)
        return 1
    for line in describe_tty(attrs):
        print(line)
    return 0