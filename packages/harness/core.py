"""
Benchmark harness core primitives.

- run_case:  play one session against a SimulatedOracle that knows `answer`.
- run_batch: play many sessions in sequence (optionally a sample prefix).
- summarize: aggregate results (win rate, mean/median guesses, histogram).

These functions are UI-agnostic; the benchmark CLI and the tests both use
them. The guess budget comes from SessionConfig and is enforced by the
session loop itself.
"""

from __future__ import annotations

import time
from typing import AbstractSet, Dict, Iterable, List, Optional

import numpy as np

from packages.engine import to_pattern
from packages.session import Session, SessionConfig, SimulatedOracle


def run_case(
        answer: str,
        *,
        answers: AbstractSet[str],
        guess_pool: AbstractSet[str],
        config: SessionConfig,
        allowed: Optional[Iterable[str]] = None,
) -> Dict:
    """
    Execute one game until the session is solved or exhausted.

    Args:
        answer:     the hidden word for this case
        answers:    the answer pool (initial candidate set)
        guess_pool: permissive guess pool
        config:     session configuration
        allowed:    optional words the oracle accepts; None accepts everything

    Returns:
        dict with keys:
            answer, success, guesses, reason, time_ms,
            history (list[(guess, pattern-string)]),
            rejected (sorted words the oracle refused)
    """
    oracle = SimulatedOracle(answer, allowed=allowed)
    session = Session(config, answers, guess_pool, oracle)

    t0 = time.perf_counter()
    outcome = session.run()
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": answer,
        "success": outcome.solved,
        "guesses": outcome.guesses,
        "reason": outcome.reason.value if outcome.reason else "",
        "time_ms": dt,
        "history": [(g, to_pattern(fb)) for g, fb in outcome.history],
        "rejected": sorted(session.rejected),
    }


def run_batch(
        cases: Iterable[str],
        *,
        answers: AbstractSet[str],
        guess_pool: AbstractSet[str],
        config: SessionConfig,
        sample: int | None = None,
        allowed: Optional[Iterable[str]] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    cases (in sorted order) are played to speed up quick experiments.
    `allowed` is handed to every case's oracle (None accepts every guess).
    """
    pool = sorted(cases)
    if sample is not None:
        pool = pool[:sample]
    if allowed is not None:
        allowed = frozenset(allowed)
    return [
        run_case(ans, answers=answers, guess_pool=guess_pool, config=config, allowed=allowed)
        for ans in pool
    ]


def summarize(results: List[Dict], max_guesses: int) -> Dict:
    """
    Aggregate a batch. `histogram[k]` counts games solved in exactly k
    guesses (index 0 is unused); failures are reported separately.
    """
    if not results:
        return {"games": 0, "wins": 0, "win_rate": 0.0, "mean_guesses": 0.0,
                "median_guesses": 0.0, "histogram": [0] * (max_guesses + 1)}

    success = np.array([r["success"] for r in results], dtype=bool)
    guesses = np.array([r["guesses"] for r in results], dtype=int)
    won = guesses[success]

    hist = np.bincount(won, minlength=max_guesses + 1) if won.size else np.zeros(max_guesses + 1, dtype=int)
    return {
        "games": int(success.size),
        "wins": int(success.sum()),
        "win_rate": float(success.mean()),
        "mean_guesses": float(won.mean()) if won.size else 0.0,
        "median_guesses": float(np.median(won)) if won.size else 0.0,
        "histogram": hist.tolist(),
    }
