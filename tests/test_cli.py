from __future__ import annotations

import json
from pathlib import Path

import pytest

from kanasplit.cli import main


def test_tokenize_text_to_stdout(capsys):
    assert main(["tokenize", "--text", "truly 私は悲しい"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == ["truly", " ", "私", "は", "悲", "しい"]


def test_tokenize_compact_detailed(capsys):
    assert main(["tokenize", "--text", "truly 私は悲しい", "--compact", "--detailed"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == [
        {"category": "en", "value": "truly "},
        {"category": "ja", "value": "私は悲しい"},
    ]


def test_tokenize_file_per_line(tmp_path: Path) -> None:
    src = tmp_path / "in.txt"
    src.write_text("ふふフフ\n感じ\n", encoding="utf-8")
    dst = tmp_path / "out" / "tokens.json"

    assert main(
        ["tokenize", "--input", str(src), "--output", str(dst), "--per-line"]
    ) == 0
    got = json.loads(dst.read_text(encoding="utf-8"))
    assert got == [["ふふ", "フフ"], ["感", "じ"]]


def test_tokenize_reads_stdin(monkeypatch, capsys):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO("感じ"))
    assert main(["tokenize"]) == 0
    assert json.loads(capsys.readouterr().out) == ["感", "じ"]


def test_classify_single_char(capsys):
    assert main(["classify", "--char", "５"]) == 0
    assert capsys.readouterr().out == "japaneseNumeral\n"


def test_classify_several_chars_compact(capsys):
    assert main(["classify", "--char", "a　", "--mode", "compact"]) == 0
    assert capsys.readouterr().out == "a\ten\n　\tja\n"


def test_classify_empty_char_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["classify", "--char", ""])
    assert exc.value.code == 2


def test_text_and_input_are_exclusive(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["tokenize", "--text", "a", "--input", str(tmp_path / "x.txt")])
