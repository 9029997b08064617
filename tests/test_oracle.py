import pytest

from packages.engine import Feedback
from packages.session import ConsoleOracle, MalformedOracleInput, SimulatedOracle
from packages.session.oracle import parse_feedback_token, parse_yes_no


def _scripted(answers):
    it = iter(answers)
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return next(it)

    return fake_input, prompts


@pytest.mark.parametrize("token,expected", [
    ("2", Feedback.CORRECT), ("g", Feedback.CORRECT), (" G ", Feedback.CORRECT),
    ("1", Feedback.PRESENT), ("y", Feedback.PRESENT),
    ("0", Feedback.ABSENT), ("b", Feedback.ABSENT), ("-", Feedback.ABSENT),
])
def test_parse_feedback_token(token, expected):
    assert parse_feedback_token(token) is expected


@pytest.mark.parametrize("bad", ["", "3", "22", "green", "?"])
def test_parse_feedback_token_rejects(bad):
    with pytest.raises(MalformedOracleInput):
        parse_feedback_token(bad)


def test_parse_yes_no():
    assert parse_yes_no("Y") is True and parse_yes_no("yes") is True
    assert parse_yes_no("n") is False and parse_yes_no(" No ") is False
    with pytest.raises(MalformedOracleInput):
        parse_yes_no("maybe")


def test_console_feedback_reprompts_until_valid():
    fake_input, prompts = _scripted(["z", "", "7", "1"])
    oracle = ConsoleOracle(input_fn=fake_input, output_fn=lambda s: None)
    assert oracle.report_feedback("crane", 2) is Feedback.PRESENT
    assert len(prompts) == 4
    assert "is a in position 2 correct?" in prompts[0]
    assert prompts[1].startswith("Invalid response")


def test_console_confirm_guess():
    out = []
    fake_input, prompts = _scripted(["perhaps", "n"])
    oracle = ConsoleOracle(input_fn=fake_input, output_fn=out.append)
    assert oracle.confirm_guess_acceptable("rales") is False
    assert "rales" in prompts[0]
    assert out == ["Got it, I'll choose something else."]

    fake_input, _ = _scripted(["y"])
    assert ConsoleOracle(input_fn=fake_input).confirm_guess_acceptable("rales") is True


def test_simulated_oracle():
    oracle = SimulatedOracle("Trace", allowed=["trace", "crane"])
    assert oracle.confirm_guess_acceptable("crane") is True
    assert oracle.confirm_guess_acceptable("brave") is False
    assert oracle.report_feedback("crane", 0) is Feedback.PRESENT
    assert oracle.report_feedback("crane", 1) is Feedback.CORRECT
    assert oracle.report_feedback("crane", 3) is Feedback.ABSENT
    assert oracle.questions == 3
    assert SimulatedOracle("trace").confirm_guess_acceptable("zzzzz") is True
