"""
Word-list validator.

What this module does:
- Validate the answers list and (optionally) the guess list for length N.
- Count valid words, malformed lines and duplicates; hash the raw files.
- Check that answers ⊆ guesses when a guess list is given.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "words.txt", "guesses.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional
import hashlib

from .io import read_lines, clean_words


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int           # valid words (before dedupe)
    unique_count: int
    invalid_lines: int
    sha256: str          # of the raw bytes; "" if missing


@dataclass
class ValidationReport:
    N: int
    answers: FileReport
    guesses: Optional[FileReport]
    answers_subset_guesses: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _check_file(path: str, N: int, label: str, issues: List[str]) -> tuple[FileReport, set]:
    p = Path(path)
    if not p.exists():
        issues.append(f"{label} file not found: {path}")
        return FileReport(path, False, 0, 0, 0, ""), set()

    words, invalid = clean_words(read_lines(p), N)
    uniq = set(words)
    rep = FileReport(
        path=str(p), exists=True, count=len(words), unique_count=len(uniq),
        invalid_lines=invalid, sha256=_sha256_file(p),
    )
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if invalid:
        issues.append(f"{label} has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return rep, uniq


def validate_wordlists(N: int, answers_path: str, guesses_path: Optional[str] = None) -> Dict:
    """
    Validate the word lists for length N.

    Returns a JSON-serializable dict (ValidationReport schema). `passed` is
    strict: both files exist, are non-empty, have no malformed lines and
    answers ⊆ guesses. Duplicates are reported but do not fail validation;
    the loader dedupes them anyway.
    """
    issues: List[str] = []
    ans_rep, ans_set = _check_file(answers_path, N, "answers", issues)

    gue_rep: Optional[FileReport] = None
    subset_ok = True
    if guesses_path is not None:
        gue_rep, gue_set = _check_file(guesses_path, N, "guesses", issues)
        if ans_rep.exists and gue_rep.exists:
            subset_ok = ans_set.issubset(gue_set)
            if not subset_ok:
                missing = sorted(ans_set - gue_set)[:5]
                issues.append(f"answers not subset of guesses (e.g., {missing})")
        else:
            subset_ok = False

    reports = [ans_rep] + ([gue_rep] if gue_rep is not None else [])
    passed = subset_ok and all(r.exists and r.count > 0 and r.invalid_lines == 0 for r in reports)

    rep = ValidationReport(
        N=N, answers=ans_rep, guesses=gue_rep, answers_subset_guesses=subset_ok,
        passed=passed, issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.:
        N=5 | answers=2315 (uniq=2315, sha=abc123...) | guesses=- | OK
    """
    def _fmt(r: Optional[Dict]) -> str:
        if r is None:
            return "-"
        return f"{r['count']} (uniq={r['unique_count']}, sha={(r.get('sha256') or '')[:12]})"

    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | answers={_fmt(report['answers'])} "
        f"| guesses={_fmt(report['guesses'])} "
        f"| answers⊆guesses={report['answers_subset_guesses']} | {status}"
    )
