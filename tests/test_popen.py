import shlex

import pytest

from unixplay.popen import popen


def test_read_mode_returns_command_output():
    with popen("echo hello", "r") as pipe:
        assert pipe.read() == "hello\n"


def test_read_mode_iterates_lines():
    with popen("printf 'a\\nb\\n'", "r") as pipe:
        assert list(pipe) == ["a\n", "b\n"]


def test_write_mode_feeds_command(tmp_path):
    target = tmp_path / "out.txt"
    with popen(f"cat > {shlex.quote(str(target))}", "w") as pipe:
        pipe.write("abc\n")
    assert target.read_text() == "abc\n"


def test_binary_mode_returns_bytes():
    with popen("printf xyz", "rb") as pipe:
        assert pipe.read() == b"xyz"


def test_close_returns_exit_status():
    pipe = popen("exit 3", "r")
    assert pipe.close() == 3
    assert pipe.closed


@pytest.mark.parametrize("mode", ["", "a", "x"])
def test_bad_mode_raises(mode):
    with pytest.raises(ValueError):
        popen("true", mode)