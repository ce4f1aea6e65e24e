import pytest

from refbreaker.utils import read_file, split_string, trim, write_file


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "out.txt"
    content = "first line\r\nsecond line\nthird"
    write_file(str(path), content)
    assert read_file(str(path)) == content


def test_write_overwrites_existing(tmp_path):
    path = tmp_path / "out.txt"
    write_file(str(path), "old content that is long")
    write_file(str(path), "new")
    assert read_file(str(path)) == "new"


def test_read_missing_file_raises(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(OSError, match="Could not open file: "):
        read_file(str(missing))


def test_write_into_missing_directory_raises(tmp_path):
    target = tmp_path / "no_such_dir" / "out.txt"
    with pytest.raises(OSError, match="Could not open file for writing: "):
        write_file(str(target), "x")


def test_split_string_drops_empty_tokens():
    assert split_string("a,,b,", ",") == ["a", "b"]


def test_split_string_only_delimiters():
    assert split_string(";;;", ";") == []


def test_split_string_round_trip_without_empties():
    parts = ["alpha", "beta", "gamma"]
    assert split_string(" ".join(parts), " ") == parts


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  a b \t\r\n", "a b"),
        ("plain", "plain"),
        (" \t\r\n ", ""),
        ("", ""),
    ],
)
def test_trim(raw, expected):
    assert trim(raw) == expected


def test_trim_keeps_other_whitespace():
    assert trim("\va\f") == "\va\f"