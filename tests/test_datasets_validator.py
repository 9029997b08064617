from pathlib import Path

import pytest

from packages.datasets import (
    validate_wordlists, pretty_summary, WordDictionary, DictionaryError, load_wordlist,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    gue = tmp_path / "guesses_5.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(gue, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(5, str(ans), str(gue))
    assert rep["passed"] is True
    assert rep["answers_subset_guesses"] is True
    s = pretty_summary(rep)
    assert "N=5" in s and "answers⊆guesses=True" in s and s.endswith("OK")


def test_validate_answers_only(tmp_path: Path):
    ans = tmp_path / "words.txt"
    _write(ans, ["crane", "slate"])
    rep = validate_wordlists(5, str(ans))
    assert rep["passed"] is True
    assert rep["guesses"] is None
    assert "guesses=-" in pretty_summary(rep)


def test_validate_wordlists_flags_errors(tmp_path: Path):
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'raiser' is fine
    ans = tmp_path / "answers_6.txt"
    gue = tmp_path / "guesses_6.txt"
    ans.write_text("raiser\ncrane\n???\n", encoding="utf-8")
    gue.write_text("raiser\nplanet\npalate\n", encoding="utf-8")

    rep = validate_wordlists(6, str(ans), str(gue))
    assert rep["passed"] is False
    assert rep["answers"]["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    gue = tmp_path / "guesses_5.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(gue, ["crane", "stare"])

    rep = validate_wordlists(5, str(ans), str(gue))
    assert rep["passed"] is False
    assert rep["answers_subset_guesses"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_missing_file(tmp_path: Path):
    rep = validate_wordlists(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_dictionary_loads_and_normalizes(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    gue = tmp_path / "guesses.txt"
    _write(ans, ["Crane", " slate ", "", "crane", "toolong", "tr4ce"])
    _write(gue, ["brave", "fuzzy"])

    d = WordDictionary(ans, gue, N=5)
    assert d.load() == {"crane", "slate"}
    assert d.load_guess_pool() == {"crane", "slate", "brave", "fuzzy"}
    assert WordDictionary(ans, N=5).load_guess_pool() == {"crane", "slate"}


def test_dictionary_fails_fast(tmp_path: Path):
    with pytest.raises(DictionaryError):
        WordDictionary(tmp_path / "missing.txt").load()

    empty = tmp_path / "empty.txt"
    _write(empty, ["abc", "123456"])
    with pytest.raises(DictionaryError):
        load_wordlist(empty, 5)
