import errno

import pytest

from unixplay.cp import BUFSIZE, copy_file, main


def test_copy_round_trip(tmp_path):
    data = bytes(range(256)) * 40
    src = tmp_path / "src.bin"
    dst = tmp_path / "dst.bin"
    src.write_bytes(data)
    assert copy_file(src, dst) == len(data)
    assert dst.read_bytes() == data
    assert len(data) > BUFSIZE


def test_copy_overwrites(tmp_path):
    src = tmp_path / "a"
    dst = tmp_path / "b"
    src.write_bytes(b"short")
    dst.write_bytes(b"much longer content")
    copy_file(src, dst)
    assert dst.read_bytes() == b"short"


def test_missing_source(tmp_path):
    src = tmp_path / "none"
    dst = tmp_path / "out"
    with pytest.raises(OSError) as info:
        copy_file(src, dst)
    assert info.value.errno == errno.ENOENT
    assert info.value.filename == str(src)
    assert not dst.exists()


def test_unwritable_destination(tmp_path):
    src = tmp_path / "a"
    src.write_bytes(b"x")
    dst = tmp_path / "no_dir" / "b"
    with pytest.raises(OSError) as info:
        copy_file(src, dst)
    assert info.value.filename == str(dst)


def test_main_usage(capsys):
    assert main(["only-one"]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_success(tmp_path):
    src = tmp_path / "a"
    dst = tmp_path / "b"
    src.write_text("hello")
    assert main([str(src), str(dst)]) == 0
    assert dst.read_text() == "hello"


def test_main_error(tmp_path, capsys):
    assert main([str(tmp_path / "none"), str(tmp_path / "b")]) == 1
    assert capsys.readouterr().err.startswith("Error:")