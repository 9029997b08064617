from __future__ import annotations
from pathlib import Path
from typing import List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def clean_words(lines: List[str], N: int) -> tuple[List[str], int]:
    """
    Strip + lowercase every line and keep only N-letter a–z tokens.
    Blank lines are ignored silently; anything else that fails is counted.

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0
    for raw in lines:
        w = raw.strip().lower()
        if not w:
            continue
        if len(w) == N and w.isascii() and w.isalpha():
            valid.append(w)
        else:
            invalid += 1
    return valid, invalid
