from pathlib import Path

import pytest
from wordle_assist.datasets import load_corpus, pretty_summary, validate_wordlist
from wordle_assist.engine.errors import CorpusEmptyError


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_corpus_normalizes_and_keeps_order(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["Crane", "raise", "", "cat", "ab1de", "stare ", "raise"])
    assert load_corpus(p) == ["crane", "raise", "stare", "raise"]


def test_load_corpus_empty_is_fatal(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["cat", "toolong"])
    with pytest.raises(CorpusEmptyError):
        load_corpus(p)


def test_load_corpus_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_corpus(tmp_path / "nope.txt")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "raise", "stare"])
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "raise", "crane", "CRANE", "???"])
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is False
    assert rep["count"] == 3 and rep["unique_count"] == 2
    assert rep["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)
