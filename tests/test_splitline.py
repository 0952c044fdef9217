import io

import pytest

from unixplay.splitline import next_cmd, splitline


def test_next_cmd_reads_line_without_newline():
    out = io.StringIO()
    stream = io.StringIO("ls -l\nsecond\n")
    assert next_cmd(">", stream, out) == "ls -l"
    assert out.getvalue() == ">"
    assert next_cmd(">", stream, out) == "second"
    assert out.getvalue() == ">>"


def test_next_cmd_end_of_input_gives_none():
    assert next_cmd(">", io.StringIO(""), io.StringIO()) is None


def test_next_cmd_partial_last_line():
    stream = io.StringIO("echo hi")
    assert next_cmd("", stream, io.StringIO()) == "echo hi"
    assert next_cmd("", stream, io.StringIO()) is None


def test_next_cmd_empty_line_is_empty_string():
    assert next_cmd("", io.StringIO("\n"), io.StringIO()) == ""


@pytest.mark.parametrize(
    "line, words",
    [
        ("ls -l /tmp", ["ls", "-l", "/tmp"]),
        ("  \tcat\t\tfile  ", ["cat", "file"]),
        ("single", ["single"]),
        ("", []),
        (" \t ", []),
    ],
)
def test_splitline(line, words):
    assert splitline(line) == words


def test_splitline_none():
    assert splitline(None) is None


def test_splitline_join_round_trip():
    words = ["a", "bb", "ccc"]
    assert splitline(" ".join(words)) == words