"""
Sum-of-ambiguity guess scorer.

Idea:
  For a guess g, every word a in the answer universe would produce some
  feedback pattern p = simulate(g, a). The bucket score of p is how many
  universe words the candidate filter would still accept after seeing p,
  i.e. the size of the candidate set that pattern would leave behind.
  The total for g sums that bucket score over every a:

      total(g) = sum_a  |prune(universe, g, simulate(g, a))|

  The guess with the MAXIMUM total is selected. Note that this is not an
  entropy or expected-size minimizer; the ranking is kept exactly as is so
  the solver's guesses stay reproducible.

Tie-break:
  equal totals prefer a guess that is itself in the universe (it could be
  the answer); remaining ties go to the alphabetically first word.

Cost:
  O(|pool| * |universe|^2) in the worst case. Each distinct pattern is
  scored once per guess, and `workers > 1` spreads the pool over
  processes without changing the result.
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from typing import AbstractSet, Dict, Iterable, List, Optional, Tuple

from packages.engine import FeedbackVector, simulate, is_consistent


def score_guess(guess: str, universe: Iterable[str]) -> int:
    """Total ambiguity of `guess` over `universe` (higher wins)."""
    words = list(universe)
    bucket_score: Dict[FeedbackVector, int] = {}
    total = 0
    # localize for speed
    _simulate, _consistent = simulate, is_consistent
    for ans in words:
        patt = _simulate(guess, ans)
        s = bucket_score.get(patt)
        if s is None:
            s = sum(1 for w in words if _consistent(w, guess, patt))
            bucket_score[patt] = s
        total += s
    return total


def _score_chunk(guesses: List[str], universe: List[str]) -> List[Tuple[str, int]]:
    # Module-level so ProcessPoolExecutor can pickle it.
    return [(g, score_guess(g, universe)) for g in guesses]


def _chunks(seq: List[str], k: int) -> List[List[str]]:
    size = max(1, -(-len(seq) // k))
    return [seq[i:i + size] for i in range(0, len(seq), size)]


def _scores(pool: List[str], universe: List[str], workers: int) -> List[Tuple[str, int]]:
    if workers <= 1 or len(pool) < 2 * workers:
        return _score_chunk(pool, universe)

    out: List[Tuple[str, int]] = []
    with ProcessPoolExecutor(workers) as executor:
        parts = _chunks(pool, workers)
        for res in executor.map(_score_chunk, parts, [universe] * len(parts)):
            out.extend(res)
    return out


def best_guess(guess_pool: AbstractSet[str], answer_universe: AbstractSet[str], *,
               workers: int = 1) -> Optional[str]:
    """
    Pick the next guess from `guess_pool` against `answer_universe`.

    Returns:
      - the only universe member when exactly one answer remains (no scoring);
      - None when the universe or the pool is empty;
      - otherwise the highest-scoring guess (see module docstring).
    """
    if len(answer_universe) == 1:
        return next(iter(answer_universe))
    if not answer_universe or not guess_pool:
        return None

    # Sorted walk keeps the result independent of set iteration order.
    pool = sorted(guess_pool)
    universe = sorted(answer_universe)

    best: Optional[str] = None
    best_key: Optional[Tuple[int, bool]] = None
    for g, total in _scores(pool, universe, workers):
        key = (total, g in answer_universe)
        if best_key is None or key > best_key:
            best, best_key = g, key
    return best
