from pathlib import Path

import pytest

from puzzlebox.inputs import read_comma_separated, read_lines


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "input.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_read_comma_separated_strips_fields(tmp_path):
    path = _write(tmp_path, " 3-5 ,10-12,\n55-55\n")
    assert read_comma_separated(path) == ["3-5", "10-12", "55-55"]


def test_read_comma_separated_single_field(tmp_path):
    path = _write(tmp_path, "11-22\n")
    assert read_comma_separated(str(path)) == ["11-22"]


def test_read_comma_separated_keeps_empty_fields(tmp_path):
    path = _write(tmp_path, "a,,b")
    assert read_comma_separated(path) == ["a", "", "b"]


def test_read_lines_drops_blank_lines_and_trims(tmp_path):
    path = _write(tmp_path, "  L68\n\nR48  \n   \nL5\n")
    assert read_lines(path) == ["L68", "R48", "L5"]


def test_read_lines_round_trip(tmp_path):
    lines = ["987654321111111", "811111111111119", "234234234234278"]
    path = _write(tmp_path, "\n".join(lines) + "\n")
    assert read_lines(path) == lines


def test_read_lines_empty_file(tmp_path):
    path = _write(tmp_path, "")
    assert read_lines(path) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.txt")
    with pytest.raises(FileNotFoundError):
        read_comma_separated(tmp_path / "absent.txt")