import fcntl
import io
import os
import termios

import pytest

from unixplay.playagain import (
    BEEP,
    QUESTION,
    SLEEPTIME,
    get_response,
    get_response_timed,
    tty_mode,
)


@pytest.mark.parametrize("text, expected", [("xY", 0), ("abn", 1), ("N", 1), ("", 1), ("y", 0)])
def test_get_response(text, expected):
    assert get_response(QUESTION, io.StringIO(text), io.StringIO()) == expected


def test_get_response_prompt():
    out = io.StringIO()
    get_response(QUESTION, io.StringIO("y"), out)
    assert out.getvalue() == QUESTION + " (y/n)?"


def test_timed_answer():
    naps = []
    out = io.StringIO()
    assert get_response_timed("Q", 3, io.StringIO("zzN"), out, naps.append) == 1
    assert naps == [SLEEPTIME]
    assert BEEP not in out.getvalue()


def test_timed_gives_up():
    naps = []
    out = io.StringIO()
    assert get_response_timed("Q", 3, io.StringIO(""), out, naps.append) == 2
    assert len(naps) == 4
    assert out.getvalue().count(BEEP) == 3


def test_timed_zero_tries():
    naps = []
    assert get_response_timed("Q", 0, io.StringIO(""), io.StringIO(), naps.append) == 2
    assert len(naps) == 1


def test_tty_mode_restores():
    master, slave = os.openpty()
    try:
        before = termios.tcgetattr(slave)
        flags = fcntl.fcntl(slave, fcntl.F_GETFL)
        with tty_mode(slave):
            attrs = termios.tcgetattr(slave)
            attrs[3] &= ~(termios.ECHO | termios.ICANON)
            termios.tcsetattr(slave, termios.TCSANOW, attrs)
            fcntl.fcntl(slave, fcntl.F_SETFL, flags | os.O_NONBLOCK)
            assert not termios.tcgetattr(slave)[3] & termios.ECHO
        assert termios.tcgetattr(slave) == before
        assert fcntl.fcntl(slave, fcntl.F_GETFL) == flags
    finally:
        os.close(master)
        os.close(slave)