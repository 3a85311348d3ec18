"""
Tests for the struct2type command line.
"""

from pathlib import Path

from struct2type.__main__ import main

TESTS_DIR = Path(__file__).resolve().parent

SOURCE = """package m

type Item struct {
	Value int `json:"value"`
}

type Cart struct {
	Items []Item `json:"items"`
}
"""

EXPECTED = """interface Item {
  value: number;
}

interface Cart {
  items: Item[];
}
"""


def _write_source(tmp_path, text=SOURCE):
    path = tmp_path / "cart.go"
    path.write_text(text)
    return path


def test_stdout(tmp_path, capsys):
    assert main([str(_write_source(tmp_path))]) == 0
    captured = capsys.readouterr()
    assert captured.out == EXPECTED
    assert "[1/3] Parsing cart.go" in captured.err


def test_output_file(tmp_path, capsys):
    out = tmp_path / "gen" / "cart.ts"
    assert main([str(_write_source(tmp_path)), "-o", str(out)]) == 0
    assert out.read_text() == EXPECTED
    assert capsys.readouterr().out == ""


def test_quiet(tmp_path, capsys):
    assert main([str(_write_source(tmp_path)), "-q"]) == 0
    captured = capsys.readouterr()
    assert captured.out == EXPECTED
    assert captured.err == ""


def test_emit_ir(tmp_path, capsys):
    assert main([str(_write_source(tmp_path)), "-q", "--emit-ir"]) == 0
    captured = capsys.readouterr()
    assert 'Struct(name="Cart")' in captured.err
    assert captured.out == EXPECTED


def test_no_structs_writes_nothing(tmp_path, capsys):
    path = _write_source(tmp_path, "package m\n\nconst X = 1\n")
    assert main([str(path), "-q"]) == 0
    assert capsys.readouterr().out == ""


def test_parse_error(tmp_path, capsys):
    path = _write_source(tmp_path, "package m\ntype S struct {\n")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "error: parse error:" in captured.err
    assert captured.out == ""


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.go")]) == 1
    assert "error: Go source not found" in capsys.readouterr().err


def test_snapshot_source_through_cli(capsys):
    source = TESTS_DIR / "sources" / "nested.go"
    expected = (TESTS_DIR / "expected" / "nested.ts").read_text()
    assert main([str(source), "-q"]) == 0
    assert capsys.readouterr().out == expected
