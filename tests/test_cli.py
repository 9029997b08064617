import re
from pathlib import Path

from packages.engine import simulate
from apps.cli import run as run_cli
from apps.cli import solve as solve_cli

WORDS = ["crane", "slate", "trace", "grape", "brave"]
_FEEDBACK_Q = re.compile(r"My guess is (\w+); is \w in position (\d+) correct\?")


def _human_who_knows(secret, log):
    def fake_input(prompt):
        log.append(prompt)
        m = _FEEDBACK_Q.search(prompt)
        if m:
            return str(int(simulate(m.group(1), secret)[int(m.group(2))]))
        return "y"
    return fake_input


def _dict(tmp_path: Path) -> Path:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return p


def test_solve_cli_interactive(tmp_path, monkeypatch, capsys):
    prompts = []
    monkeypatch.setattr("builtins.input", _human_who_knows("trace", prompts))
    rc = solve_cli.main(["--answers", str(_dict(tmp_path))])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Solved: trace in 4 guesses." in out
    # hard mode was not given on the command line, so it was asked first
    assert prompts[0].startswith("Is this hard mode")


def test_solve_cli_missing_dictionary(tmp_path, capsys):
    rc = solve_cli.main(["--answers", str(tmp_path / "missing.txt"), "--hard"])
    assert rc == 2
    assert "not found" in capsys.readouterr().err


def test_solve_cli_bad_opening(tmp_path, capsys):
    rc = solve_cli.main(["--answers", str(_dict(tmp_path)), "--easy", "--opening", "toolong"])
    assert rc == 2
    assert "opening_guess" in capsys.readouterr().err


def _closed_stdin(prompt):
    raise EOFError


def test_solve_cli_stdin_closed_at_hard_mode_question(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _closed_stdin)
    rc = solve_cli.main(["--answers", str(_dict(tmp_path))])
    assert rc == 130
    err = capsys.readouterr().err
    assert "aborted" in err
    assert "Traceback" not in err


def test_solve_cli_interrupted_during_feedback(tmp_path, monkeypatch, capsys):
    def interrupt(prompt):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)
    rc = solve_cli.main(["--answers", str(_dict(tmp_path)), "--hard"])
    assert rc == 130
    captured = capsys.readouterr()
    assert "aborted" in captured.err
    assert "Solved" not in captured.out


def test_run_cli_writes_reports(tmp_path, capsys):
    outdir = tmp_path / "reports"
    rc = run_cli.main(["--answers", str(_dict(tmp_path)), "--outdir", str(outdir),
                       "--progress", "off"])
    assert rc == 0
    assert "Solved 5/5" in capsys.readouterr().out
    assert len(list(outdir.glob("run_*.csv"))) == 1
    assert len(list(outdir.glob("run_*_manifest.json"))) == 1


def test_run_cli_strict_rejects_words_missing_from_guess_list(tmp_path, capsys):
    guesses = tmp_path / "guesses.txt"
    guesses.write_text("\n".join(w for w in WORDS if w != "brave") + "\n", encoding="utf-8")
    rc = run_cli.main(["--answers", str(_dict(tmp_path)), "--guesses", str(guesses),
                       "--strict", "--outdir", str(tmp_path / "reports"), "--progress", "off"])
    assert rc == 0
    assert "Solved 4/5" in capsys.readouterr().out
