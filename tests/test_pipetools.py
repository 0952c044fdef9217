import io
import os

import pytest

from unixplay.pipetools import echo_through_pipe, main, pipe_commands


def test_echo_through_pipe_round_trip():
    out = io.StringIO()
    count = echo_through_pipe(io.StringIO("hello\nworld\n"), out)
    text = out.getvalue()
    assert text.startswith("Got a pipe! It is file descriptors: {")
    assert text.endswith("}\nhello\nworld\n")
    assert count == len("hello\nworld\n")


def test_echo_through_pipe_long_line():
    line = "x" * 1000 + "\n"
    out = io.StringIO()
    count = echo_through_pipe(io.StringIO(line), out)
    assert out.getvalue().split("\n", 1)[1] == line
    assert count == len(line)


def test_echo_through_pipe_unicode():
    out = io.StringIO()
    echo_through_pipe(io.StringIO("héllo\n"), out)
    assert out.getvalue().endswith("}\nhéllo\n")


def test_pipe_commands_connects_output(tmp_path, monkeypatch, capfd):
    monkeypatch.chdir(tmp_path)
    assert pipe_commands("pwd", "cat") == 0
    assert capfd.readouterr().out == os.getcwd() + "\n"


def test_pipe_commands_missing_command():
    with pytest.raises(FileNotFoundError):
        pipe_commands("no-such-command-here", "cat")


def test_main_usage():
    assert main(["only-one"]) == 1


def test_main_missing_command():
    assert main(["no-such-command-here", "cat"]) == 4