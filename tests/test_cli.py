import json

import pytest

from refbreaker.cli import main


@pytest.fixture
def inputs(tmp_path):
    titles = tmp_path / "titles.txt"
    titles.write_text("Python\nRust\n", encoding="utf-8")
    text = tmp_path / "in.txt"
    text.write_text("Python meets Rust. Rust meets Python.", encoding="utf-8")
    return str(titles), str(text), str(tmp_path / "out.json")


@pytest.mark.parametrize("argv", [[], ["a"], ["a", "b"], ["a", "b", "c", "d", "e"]])
def test_wrong_argument_count_prints_usage(argv, capsys):
    assert main(argv) == 1
    assert "Usage: " in capsys.readouterr().err


def test_run_writes_json(inputs, capsys):
    titles, text, out = inputs
    assert main([titles, text, out]) == 0
    with open(out, encoding="utf-8") as handle:
        result = json.load(handle)
    assert result["text"] == "Python meets Rust. Rust meets Python."
    assert len(result["references"]) == 4
    stdout = capsys.readouterr().out
    assert "Found 4 references in the text." in stdout
    assert "Processing complete." in stdout


def test_sequential_matches_parallel(inputs, tmp_path):
    titles, text, out = inputs
    seq_out = str(tmp_path / "seq.json")
    assert main([titles, text, out]) == 0
    assert main([titles, text, seq_out, "--sequential"]) == 0
    with open(out, encoding="utf-8") as a, open(seq_out, encoding="utf-8") as b:
        assert a.read() == b.read()


def test_output_is_pretty_printed_with_sorted_keys(inputs):
    titles, text, out = inputs
    assert main([titles, text, out]) == 0
    with open(out, encoding="utf-8") as handle:
        raw = handle.read()
    assert raw.startswith('{\n  "references": [')
    assert raw.index('"references"') < raw.index('"text"')


def test_missing_titles_file_reports_error(inputs, tmp_path, capsys):
    _, text, out = inputs
    assert main([str(tmp_path / "missing.txt"), text, out]) == 1
    assert "Error: Could not open wiki titles file: " in capsys.readouterr().err


def test_missing_input_file_reports_error(inputs, tmp_path, capsys):
    titles, _, out = inputs
    assert main([titles, str(tmp_path / "missing.txt"), out]) == 1
    assert "Error: Could not open file: " in capsys.readouterr().err