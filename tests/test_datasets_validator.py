import json
from pathlib import Path

import pytest
from bitwordle.datasets import DEFAULT_WORDLIST, load_wordlist, validate_wordlist, pretty_summary
from bitwordle.engine import Lexicon, encode


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["crane", "raise", "stare", "mambo"])

    rep = validate_wordlist(str(words), target="MAMBO")
    assert rep["passed"] is True
    assert rep["count"] == 4 and rep["unique_count"] == 4
    assert rep["target_in_dictionary"] is True
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "dictionary=4" in s and "target=mambo in=True" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    words = tmp_path / "words.txt"
    # 'cranes' (len 6) and 'ab1de' are invalid; CRANE duplicates crane case-insensitively
    words.write_text("crane\ncranes\nab1de\nCRANE\n", encoding="utf-8")

    rep = validate_wordlist(str(words))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert rep["target_in_dictionary"] is None


def test_validate_wordlist_target_missing(tmp_path: Path):
    words = tmp_path / "words.json"
    words.write_text(json.dumps(["crane", "raise"]), encoding="utf-8")

    rep = validate_wordlist(str(words), target="mambo")
    assert rep["passed"] is False
    assert rep["target_in_dictionary"] is False
    assert any("not in dictionary" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_or_broken_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    rep = validate_wordlist(str(broken))
    assert rep["exists"] is True and rep["passed"] is False
    assert any("unreadable" in msg for msg in rep["issues"])


def test_load_wordlist_formats(tmp_path: Path):
    txt = tmp_path / "w.txt"
    txt.write_text("crane\n\n  Mambo \r\nslate\n", encoding="utf-8")
    assert load_wordlist(txt) == ["crane", "Mambo", "slate"]

    js = tmp_path / "w.json"
    js.write_text(json.dumps(["crane", " mambo"]), encoding="utf-8")
    assert load_wordlist(js) == ["crane", "mambo"]

    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"words": ["crane"]}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_wordlist(bad)

    with pytest.raises(FileNotFoundError):
        load_wordlist(tmp_path / "missing.txt")


def test_default_wordlist_encodes():
    lex = Lexicon.from_strings(load_wordlist())
    assert len(lex) > 100
    assert encode("mambo") in lex
    assert validate_wordlist(str(DEFAULT_WORDLIST), target="mambo")["passed"] is True
