# apps/cli/run.py
"""
CLI entry point for benchmarking the solver against known secrets.

This script:
  1) Validates the word lists (prints counts + SHA, checks answers ⊆ guesses).
  2) Loads the lists and builds the session configuration.
  3) Plays one simulated game per answer with a live progress indicator and
     writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, word-list hashes, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

# Optional rich progress bar
try:
    from tqdm import tqdm
    _HAS_TQDM = True
except ImportError:
    _HAS_TQDM = False

from packages.datasets import (
    validate_wordlists, pretty_summary, WordDictionary, DictionaryError, load_wordlist,
)
from packages.harness import run_case, summarize
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.session import SessionConfig, DEFAULT_MAX_GUESSES, DEFAULT_WORD_LENGTH


def main(argv=None) -> int:
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="Benchmark the solver on simulated games")
    ap.add_argument("--answers", required=True,
                    help="path to answers list (candidate universe)")
    ap.add_argument("--guesses", help="optional larger guess list (easy mode pool)")
    ap.add_argument("--strict", action="store_true",
                    help="oracle accepts only words from --guesses (answers if not given)")
    ap.add_argument("--N", type=int, default=DEFAULT_WORD_LENGTH, help="word length")
    ap.add_argument("--max-guesses", type=int, default=DEFAULT_MAX_GUESSES)
    ap.add_argument("--hard", action="store_true", help="restrict guesses to candidates")
    ap.add_argument("--opening", help="fixed first guess")
    ap.add_argument("--workers", type=int, default=1, help="processes used to score guesses")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar if tqdm available, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="INFO logging")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.N, args.answers, args.guesses)
    print(pretty_summary(rep))

    # 2) Load (fails fast on missing/empty lists)
    dictionary = WordDictionary(args.answers, args.guesses, N=args.N)
    try:
        answers = dictionary.load()
        guess_pool = dictionary.load_guess_pool()
        allowed = None
        if args.strict:
            allowed = load_wordlist(args.guesses, args.N) if args.guesses else answers
        config = SessionConfig(hard_mode=args.hard, max_guesses=args.max_guesses,
                               word_length=args.N, opening_guess=args.opening,
                               workers=args.workers)
    except (DictionaryError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 3) Choose cases (deterministic sample by seed)
    cases = sorted(answers)
    if args.sample and args.sample < len(cases):
        rng = random.Random(args.seed)
        rng.shuffle(cases)
        cases = cases[: args.sample]
    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "plain"
    if mode == "bar" and not _HAS_TQDM:
        mode = "plain"

    results = []
    start = time.time()
    last_print = 0.0
    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    for idx, ans in enumerate(iterator, 1):
        results.append(run_case(ans, answers=answers, guess_pool=guess_pool, config=config,
                                allowed=allowed))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    summary = summarize(results, config.max_guesses)
    print(f"Solved {summary['wins']}/{summary['games']} "
          f"({100.0 * summary['win_rate']:.1f}%), mean guesses {summary['mean_guesses']:.3f}")

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_guesses=config.max_guesses,
              mode=config.pool_policy.value)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "summary": summary,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
