# apps/cli/solve.py
"""
Interactive solver.

This script:
  1) Loads the answer list (and optional larger guess list) once.
  2) Asks whether the puzzle is in hard mode unless --hard/--easy was given.
  3) Proposes guesses, asking you whether each word is acceptable and what
     feedback every letter got (0/1/2 or b/y/g), until the word is found
     or the guess budget runs out.

Usage:
    python -m apps.cli.solve --answers words.txt --opening rales
"""

from __future__ import annotations

import argparse
import logging
import sys

from packages.datasets import WordDictionary, DictionaryError
from packages.session import (
    ConsoleOracle, Session, SessionConfig, DEFAULT_MAX_GUESSES, DEFAULT_WORD_LENGTH,
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Interactive word-puzzle solver")
    ap.add_argument("--answers", required=True,
                    help="path to the list of possible answers (one word per line)")
    ap.add_argument("--guesses",
                    help="optional larger list of acceptable guesses (easy mode pool)")
    ap.add_argument("--N", type=int, default=DEFAULT_WORD_LENGTH, help="word length")
    ap.add_argument("--max-guesses", type=int, default=DEFAULT_MAX_GUESSES,
                    help="guess budget")
    ap.add_argument("--opening", help="fixed first guess (skips scoring on round 1)")
    ap.add_argument("--workers", type=int, default=1,
                    help="processes used to score guesses")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--hard", dest="hard_mode", action="store_true",
                      help="only guess words that could still be the answer")
    mode.add_argument("--easy", dest="hard_mode", action="store_false",
                      help="guess from the full dictionary")
    ap.set_defaults(hard_mode=None)
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="-v for INFO, -vv for DEBUG logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # Dictionary problems fail fast, before any question is asked.
    dictionary = WordDictionary(args.answers, args.guesses, N=args.N)
    try:
        answers = dictionary.load()
        guess_pool = dictionary.load_guess_pool()
    except DictionaryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    oracle = ConsoleOracle()
    hard_mode = args.hard_mode
    if hard_mode is None:
        try:
            hard_mode = oracle.ask_yes_no("Is this hard mode (must use result of previous guesses)?")
        except (EOFError, KeyboardInterrupt):
            return _aborted()

    try:
        config = SessionConfig(
            hard_mode=hard_mode,
            max_guesses=args.max_guesses,
            word_length=args.N,
            opening_guess=args.opening,
            workers=args.workers,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        outcome = Session(config, answers, guess_pool, oracle).run()
    except (EOFError, KeyboardInterrupt):
        return _aborted()
    if outcome.solved:
        print(f"Solved: {outcome.word} in {outcome.guesses} guesses.")
        return 0
    print("Couldn't find the word. Sorry!")
    return 1


def _aborted() -> int:
    # stdin closed or Ctrl-C while waiting for an answer
    print("\naborted: no answer given, session ended", file=sys.stderr)
    return 130


if __name__ == "__main__":
    sys.exit(main())
