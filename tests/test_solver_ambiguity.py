from itertools import product

from packages.engine import prune, simulate
from packages.solvers import best_guess, score_guess

DICT = frozenset(["crane", "slate", "trace", "grape", "brave"])


def _brute_force_total(guess, universe):
    return sum(len(prune(universe, guess, simulate(guess, a))) for a in universe)


def test_score_guess_matches_definition():
    for g in DICT:
        assert score_guess(g, DICT) == _brute_force_total(g, DICT)


def test_score_guess_known_values():
    assert score_guess("brave", DICT) == 11
    assert score_guess("grape", DICT) == 11
    assert score_guess("slate", DICT) == 11
    assert score_guess("crane", DICT) == 7
    assert score_guess("trace", DICT) == 7


def test_best_guess_picks_max_total_deterministically():
    # brave, grape and slate tie at 11; all are possible answers -> first in order
    assert best_guess(DICT, DICT) == "brave"
    assert best_guess(set(DICT), set(DICT)) == "brave"


def test_single_answer_returned_without_scoring():
    # the pool is irrelevant when only one answer is left
    assert best_guess(frozenset(["zzzzz"]), frozenset(["trace"])) == "trace"
    assert best_guess(frozenset(), frozenset(["trace"])) == "trace"


def test_empty_inputs_return_none():
    assert best_guess(DICT, frozenset()) is None
    assert best_guess(frozenset(), DICT) is None


def test_tie_prefers_possible_answer():
    universe = frozenset(["crane", "trace"])
    # blate sorts first and ties at 2, but it cannot be the answer
    pool = frozenset(["blate", "trace", "crane"])
    assert score_guess("blate", universe) == score_guess("crane", universe) == 2
    assert score_guess("trace", universe) == 2
    assert best_guess(pool, universe) == "crane"


def test_pool_only_word_wins_with_strictly_higher_total():
    universe = frozenset(["crane", "grape", "trace"])
    pool = frozenset(["crane", "grape", "trace", "slate", "brave"])
    # brave leaves all three answers in one bucket -> 3 * 3 = 9
    assert score_guess("brave", universe) == 9
    assert score_guess("aaaaa", universe) == 9
    assert best_guess(pool, universe) == "brave"


def test_single_answer_universe_skips_scoring(monkeypatch):
    calls = []

    def counting_score(guess, universe):
        calls.append(guess)
        return 0

    monkeypatch.setattr("packages.solvers.ambiguity.score_guess", counting_score)
    assert best_guess(DICT, frozenset(["trace"])) == "trace"
    assert calls == []

    best_guess(DICT, frozenset(["crane", "trace"]))
    assert sorted(calls) == sorted(DICT)


def test_parallel_scoring_matches_sequential():
    words = frozenset("".join(p) for p in product("crst", "ae", "ln", "eo", "st"))
    assert len(words) == 64
    assert best_guess(words, words, workers=2) == best_guess(words, words, workers=1)
