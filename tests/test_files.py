import pytest

from lancer.files import load_file_as_text


def test_reads_whole_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("first line\nsecond line\n", encoding="utf-8")
    assert load_file_as_text(path) == "first line\nsecond line\n"


def test_accepts_string_path(tmp_path):
    path = tmp_path / "version.txt"
    path.write_text("1.2.3", encoding="utf-8")
    assert load_file_as_text(str(path)) == "1.2.3"


def test_normalises_newlines(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"a\r\nb\r\n")
    assert load_file_as_text(path) == "a\nb\n"


def test_missing_file_raises(tmp_path):
    missing = tmp_path / "absent.txt"
    with pytest.raises(RuntimeError, match="Failed to open file: ") as info:
        load_file_as_text(missing)
    assert str(missing) in str(info.value)


def test_directory_raises(tmp_path):
    with pytest.raises(RuntimeError):
        load_file_as_text(tmp_path)