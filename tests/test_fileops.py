import pytest

from cipherbox.fileops import (
    CUSTOM_ERROR,
    WRITE_TEXT,
    main,
    open_file_name,
    path_exists,
    read_text,
    write_text,
)


def test_open_missing_file_raises_custom_error(tmp_path):
    missing = tmp_path / "invalid.txt"
    with pytest.raises(FileNotFoundError) as info:
        open_file_name(missing)
    assert str(info.value) == CUSTOM_ERROR
    assert isinstance(info.value.__cause__, FileNotFoundError)


def test_open_existing_file_returns_name(tmp_path):
    target = tmp_path / "present.txt"
    target.write_text("x")
    assert open_file_name(str(target)) == str(target)


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "file1.txt"
    written = write_text(target, WRITE_TEXT)
    assert written == len(WRITE_TEXT.encode("utf-8"))
    assert read_text(target) == WRITE_TEXT


def test_write_counts_bytes_not_characters(tmp_path):
    target = tmp_path / "accents.txt"
    text = "Chiffre de Vigenère"
    written = write_text(target, text)
    assert written == len(text.encode("utf-8"))
    assert written > len(text)
    assert read_text(target) == text


def test_write_truncates_previous_content(tmp_path):
    target = tmp_path / "file.txt"
    write_text(target, "a much longer first line")
    write_text(target, "short")
    assert read_text(target) == "short"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text(tmp_path / "data.txt")


def test_path_exists(tmp_path):
    target = tmp_path / "ostest"
    assert path_exists(target) is False
    target.touch()
    assert path_exists(target) is True


def test_main_write_and_read(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["write"]) == 0
    assert (tmp_path / "file1.txt").read_text() == WRITE_TEXT
    (tmp_path / "data.txt").write_text("hello")
    assert main(["read"]) == 0
    out = capsys.readouterr().out
    assert "bytes written" in out
    assert "Contents of file: hello" in out


def test_main_custom_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["custom"]) == 0
    assert capsys.readouterr().out.strip() == CUSTOM_ERROR


def test_main_read_missing_reports_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["read"]) == 0
    assert capsys.readouterr().out.startswith("File reading error")